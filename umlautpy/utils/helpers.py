"""Shared utility functions."""

import os

from umlautpy.utils.constants import Constants


def expand_file_path(filepath: str | None) -> str | None:
    """Expand user home directory in file path.

    Args:
        filepath: File path (may contain ~)

    Returns:
        Expanded file path string, or None if filepath is None
    """
    if not filepath:
        return None
    return os.path.expanduser(filepath)


def parse_key_list(keys: str | list[str] | tuple[str, ...] | None) -> tuple[str, ...]:
    """Normalize a key list given as a comma separated string or a sequence.

    Blank entries are dropped; ``None`` yields the default keys.
    """
    if keys is None:
        return Constants.DEFAULT_KEYS
    if isinstance(keys, str):
        keys = keys.split(Constants.KEY_LIST_SEPARATOR)
    return tuple(key.strip() for key in keys if key and key.strip())
