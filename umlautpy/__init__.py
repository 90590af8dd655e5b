"""UmlautPy - German umlaut encoding converter.

Convert umlauts between raw glyphs, ASCII, TeX, German LaTeX, HTML entities
and quoted-printable, bind keys to a profile and re-encode abbreviations.
"""

from .commands import UmlautSession
from .core import Config, EncodingRegistry, EncodingTable, default_registry, load_config
from .transliteration import SubstitutionMode, Transliterator, substitute

__version__ = "0.1.0"
__all__ = [
    "Config",
    "EncodingRegistry",
    "EncodingTable",
    "SubstitutionMode",
    "Transliterator",
    "UmlautSession",
    "default_registry",
    "load_config",
    "substitute",
]
