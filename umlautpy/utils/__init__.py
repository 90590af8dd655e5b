"""Utility functions for UmlautPy."""

from umlautpy.utils.constants import Constants
from umlautpy.utils.helpers import expand_file_path, parse_key_list
from umlautpy.utils.logging import setup_logger

__all__ = [
    "Constants",
    "expand_file_path",
    "parse_key_list",
    "setup_logger",
]
