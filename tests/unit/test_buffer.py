"""Unit tests for the in-memory text buffer."""

import pytest

from umlautpy.editing import Span, TextBuffer


class TestSpan:
    """Test Span behavior."""

    def test_rejects_reversed_span(self) -> None:
        """End before start is invalid."""
        with pytest.raises(ValueError):
            Span(3, 1)

    def test_rejects_negative_start(self) -> None:
        """Negative offsets are invalid."""
        with pytest.raises(ValueError):
            Span(-1, 2)

    def test_clamp_limits_to_length(self) -> None:
        """Clamping cuts the span at the buffer end."""
        assert Span(2, 10).clamp(5) == Span(2, 5)

    def test_empty_span_is_truthy(self) -> None:
        """An empty span still counts as a given span."""
        assert Span(2, 2)

    def test_clamp_past_end_gives_empty_span(self) -> None:
        """A span starting past the end clamps to an empty span at the end."""
        assert Span(8, 10).clamp(5) == Span(5, 5)


class TestTextBuffer:
    """Test TextBuffer behavior."""

    def test_point_defaults_to_end(self) -> None:
        """A new buffer has point at its end."""
        assert TextBuffer("abc").point == 3

    def test_insert_at_point(self) -> None:
        """Insertion happens at point and advances it."""
        buffer = TextBuffer("ac", point=1)
        buffer.insert("b")
        assert (buffer.text, buffer.point) == ("abc", 2)

    def test_no_region_without_mark(self) -> None:
        """Without a mark there is no region."""
        assert TextBuffer("abc").region() is None

    def test_region_spans_mark_and_point(self) -> None:
        """set_region makes the region available as a span."""
        buffer = TextBuffer("abcdef")
        buffer.set_region(1, 4)
        assert buffer.region() == Span(1, 4)

    def test_replace_shifts_later_point(self) -> None:
        """Point after the replaced text shifts by the length difference."""
        buffer = TextBuffer("xäy")
        buffer.replace(Span(1, 2), "ae")
        assert (buffer.text, buffer.point) == ("xaey", 4)

    def test_replace_keeps_earlier_point(self) -> None:
        """Point before the replaced text stays put."""
        buffer = TextBuffer("xäy", point=0)
        buffer.replace(Span(1, 2), "ae")
        assert buffer.point == 0

    def test_replace_moves_mark(self) -> None:
        """The region grows with replacements inside it."""
        buffer = TextBuffer("äbc")
        buffer.set_region(0, 3)
        buffer.replace(Span(0, 1), "ae")
        assert buffer.region() == Span(0, 4)

    def test_find_respects_bounds(self) -> None:
        """find only reports occurrences wholly inside the bounds."""
        assert TextBuffer("aeae").find("ae", 1, 3) == -1

    def test_rejects_point_outside_text(self) -> None:
        """Point must lie within the text."""
        with pytest.raises(ValueError):
            TextBuffer("ab", point=5)
