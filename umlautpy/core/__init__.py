"""Core data model: tables, registry, profiles and configuration."""

from .config import Config, load_config
from .exceptions import ConfigError, InvalidTable, UmlautError, UnknownProfile
from .profiles import ALPHABET, BUILTIN_PROFILES, default_registry
from .registry import EncodingRegistry
from .tables import EncodingTable

__all__ = [
    "ALPHABET",
    "BUILTIN_PROFILES",
    "Config",
    "ConfigError",
    "EncodingRegistry",
    "EncodingTable",
    "InvalidTable",
    "UmlautError",
    "UnknownProfile",
    "default_registry",
    "load_config",
]
