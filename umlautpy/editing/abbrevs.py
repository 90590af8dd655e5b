"""Abbreviation tables and expansion."""

from collections.abc import Callable

import yaml
from loguru import logger

from umlautpy.core.exceptions import ConfigError
from umlautpy.editing.buffer import Span
from umlautpy.editing.context import EditingContext
from umlautpy.utils.helpers import expand_file_path

# Called after expansion with the context, the span the expansion occupies
# and the stored raw-form expansion text
ExpansionHook = Callable[[EditingContext, Span, str], object]


class AbbrevTable:
    """Abbreviations whose expansions are stored in the raw glyph profile."""

    def __init__(self, entries: dict[str, str] | None = None) -> None:
        self.entries: dict[str, str] = dict(entries or {})

    def define(self, abbrev: str, expansion: str) -> None:
        self.entries[abbrev] = expansion

    def get(self, abbrev: str) -> str | None:
        return self.entries.get(abbrev)

    def items(self):
        return self.entries.items()

    def __len__(self) -> int:
        return len(self.entries)


def load_abbrevs(filepath: str | None) -> AbbrevTable:
    """Load an abbreviation table from a YAML mapping of abbrev -> expansion.

    Raises:
        ConfigError: If the file cannot be read or is not a string mapping
    """
    if not filepath:
        return AbbrevTable()

    filepath = expand_file_path(filepath)
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read abbreviation file {filepath}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in abbreviation file {filepath}: {e}") from e

    if data is None:
        return AbbrevTable()
    if not isinstance(data, dict):
        raise ConfigError(f"Abbreviation file {filepath} must contain a mapping")

    entries = {}
    for abbrev, expansion in data.items():
        if not isinstance(abbrev, str) or not isinstance(expansion, str):
            raise ConfigError(f"Abbreviation {abbrev!r} in {filepath} must map a string to a string")
        entries[abbrev] = expansion

    logger.debug(f"Loaded {len(entries)} abbreviations from {filepath}")
    return AbbrevTable(entries)


def _word_start(text: str, point: int) -> int:
    start = point
    while start > 0 and (text[start - 1].isalnum() or text[start - 1] == "_"):
        start -= 1
    return start


def expand_abbrev(
    context: EditingContext,
    table: AbbrevTable,
    hook: ExpansionHook | None = None,
) -> Span | None:
    """Expand the abbreviation ending at point.

    The word before point is replaced with its stored expansion, then ``hook``
    runs over the span the expansion occupies.

    Returns:
        Span of the expansion after the hook ran, or None if nothing expanded
    """
    buffer = context.buffer
    start = _word_start(buffer.text, buffer.point)
    abbrev = buffer.text[start : buffer.point]
    expansion = table.get(abbrev) if abbrev else None
    if expansion is None:
        return None

    tail = len(buffer) - buffer.point
    buffer.replace(Span(start, buffer.point), expansion)
    span = Span(start, start + len(expansion))

    if hook is not None:
        hook(context, span, expansion)

    # The hook may have changed the expansion's length
    return Span(start, len(buffer) - tail)
