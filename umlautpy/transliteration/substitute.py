"""Positional substitution between two encoding tables."""

from enum import Enum

from loguru import logger

from umlautpy.core.exceptions import InvalidTable
from umlautpy.core.tables import EncodingTable
from umlautpy.editing.buffer import Span, TextBuffer
from umlautpy.editing.host import ConfirmCallback, ConfirmDecision, SubstitutionMatch


class SubstitutionMode(Enum):
    """How matches are replaced."""

    BULK = "bulk"  # Replace every match
    CONFIRM = "confirm"  # Ask before each match


class Transliterator:
    """Rewrites one profile's forms into another's inside a span.

    Positions are processed one at a time in alphabet order. Each position
    rescans the span from its start against the current buffer, so text
    inserted for an earlier position can be matched again by a later one.
    For example with source ``("a", "b")`` and target ``("b", "c")`` the text
    ``"ab"`` becomes ``"cc"``, not ``"bc"``.
    """

    def __init__(self, confirm: ConfirmCallback | None = None) -> None:
        self.confirm = confirm

    def substitute(
        self,
        source: EncodingTable,
        target: EncodingTable,
        buffer: TextBuffer,
        span: Span | None = None,
        mode: SubstitutionMode = SubstitutionMode.BULK,
        confirm: ConfirmCallback | None = None,
    ) -> int:
        """Replace occurrences of ``source`` forms with ``target`` forms.

        Matching is literal and case-sensitive. Text outside ``span`` is never
        read or written; the span end moves with the length of replacements.

        Args:
            source: Profile the text is currently in
            target: Profile to convert to
            buffer: Buffer to rewrite in place
            span: Region to process; the whole buffer when None
            mode: BULK to replace everything, CONFIRM to ask per match
            confirm: Callback for CONFIRM mode; falls back to the instance's

        Returns:
            Number of replacements made (BULK) or accepted (CONFIRM)

        Raises:
            InvalidTable: If the two tables differ in length
            ValueError: If CONFIRM mode has no callback
        """
        if len(source) != len(target):
            raise InvalidTable(
                f"Cannot substitute '{source.name}' ({len(source)} forms) "
                f"with '{target.name}' ({len(target)} forms)"
            )

        span = (span if span is not None else buffer.full_span()).clamp(len(buffer))
        if span.is_empty() or len(source) == 0 or source.same_forms(target):
            return 0

        if mode is SubstitutionMode.CONFIRM:
            confirm = confirm or self.confirm
            if confirm is None:
                raise ValueError("Confirm mode needs a confirmation callback")

        end = span.end
        count = 0

        for position, (found, replacement) in enumerate(zip(source.forms, target.forms)):
            if not found or found == replacement:
                continue

            cursor = span.start
            while True:
                index = buffer.find(found, cursor, end)
                if index < 0:
                    break

                match_span = Span(index, index + len(found))
                if mode is SubstitutionMode.CONFIRM:
                    decision = confirm(SubstitutionMatch(position, match_span, found, replacement))
                    if decision is ConfirmDecision.ABORT:
                        logger.debug(
                            f"Substitution {source.name} -> {target.name} aborted "
                            f"after {count} replacements"
                        )
                        return count
                    if decision is ConfirmDecision.REJECT:
                        cursor = match_span.end
                        continue

                buffer.replace(match_span, replacement)
                end += len(replacement) - len(found)
                cursor = index + len(replacement)
                count += 1

        logger.debug(
            f"Substituted {source.name} -> {target.name}: {count} replacements "
            f"in [{span.start}, {span.end})"
        )
        return count


def substitute(
    source: EncodingTable,
    target: EncodingTable,
    buffer: TextBuffer,
    span: Span | None = None,
    mode: SubstitutionMode = SubstitutionMode.BULK,
    confirm: ConfirmCallback | None = None,
) -> int:
    """Module-level shortcut for :meth:`Transliterator.substitute`."""
    return Transliterator().substitute(source, target, buffer, span, mode, confirm)


def transliterate_text(source: EncodingTable, target: EncodingTable, text: str) -> str:
    """Convert a whole string from one profile to another."""
    buffer = TextBuffer(text)
    substitute(source, target, buffer)
    return buffer.text
