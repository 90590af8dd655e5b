"""In-memory text buffer and spans."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Span:
    """Half-open region ``[start, end)`` of a buffer."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid span [{self.start}, {self.end})")

    def __len__(self) -> int:
        return self.end - self.start

    def __bool__(self) -> bool:
        # An empty span is still a span
        return True

    def is_empty(self) -> bool:
        return self.start == self.end

    def clamp(self, length: int) -> "Span":
        """Restrict the span to a buffer of ``length`` characters."""
        start = min(self.start, length)
        return Span(start, max(start, min(self.end, length)))


class TextBuffer:
    """Mutable text with an insertion point and an optional mark.

    The region is the text between mark and point, as in most editors.

    Attributes:
        text: Current buffer contents
        point: Insertion point offset
        mark: Other end of the region, or None when no region is active
    """

    def __init__(self, text: str = "", point: int | None = None) -> None:
        self.text = text
        self.point = len(text) if point is None else point
        self.mark: int | None = None
        self._check_offset(self.point)

    def __len__(self) -> int:
        return len(self.text)

    def __str__(self) -> str:
        return self.text

    def _check_offset(self, offset: int) -> None:
        if not 0 <= offset <= len(self.text):
            raise ValueError(f"Offset {offset} outside buffer of length {len(self.text)}")

    def full_span(self) -> Span:
        return Span(0, len(self.text))

    def set_region(self, start: int, end: int) -> None:
        """Activate the region ``[start, end)`` with point at ``end``."""
        self._check_offset(start)
        self._check_offset(end)
        self.mark = start
        self.point = end

    def clear_region(self) -> None:
        self.mark = None

    def region(self) -> Span | None:
        """Return the active region, or None."""
        if self.mark is None:
            return None
        return Span(min(self.mark, self.point), max(self.mark, self.point))

    def substring(self, span: Span) -> str:
        return self.text[span.start : span.end]

    def find(self, needle: str, start: int, end: int) -> int:
        """Offset of the first ``needle`` lying wholly within ``[start, end)``, or -1."""
        return self.text.find(needle, start, end)

    def insert(self, text: str) -> None:
        """Insert literal text at point and move point after it."""
        self.text = self.text[: self.point] + text + self.text[self.point :]
        if self.mark is not None and self.mark > self.point:
            self.mark += len(text)
        self.point += len(text)

    def replace(self, span: Span, text: str) -> None:
        """Replace the text of ``span`` with ``text``.

        Offsets at or after the span end shift by the length difference;
        offsets inside the span are kept inside the replacement.
        """
        self._check_offset(span.end)
        self.text = self.text[: span.start] + text + self.text[span.end :]
        self.point = _adjust_offset(self.point, span, len(text))
        if self.mark is not None:
            self.mark = _adjust_offset(self.mark, span, len(text))


def _adjust_offset(offset: int, span: Span, new_length: int) -> int:
    if offset >= span.end:
        return offset + new_length - len(span)
    if offset > span.start:
        return min(offset, span.start + new_length)
    return offset
