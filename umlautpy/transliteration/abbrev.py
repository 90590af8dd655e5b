"""Re-encoding of freshly expanded abbreviations."""

from loguru import logger

from umlautpy.core.tables import EncodingTable
from umlautpy.editing.buffer import Span
from umlautpy.editing.context import EditingContext
from umlautpy.transliteration.substitute import SubstitutionMode, Transliterator


class AbbrevPostProcessor:
    """Converts an expansion from the raw profile into the context's profile."""

    def __init__(self, raw: EncodingTable, transliterator: Transliterator | None = None) -> None:
        self.raw = raw
        self.transliterator = transliterator or Transliterator()

    def on_abbrev_expanded(
        self,
        context: EditingContext,
        span: Span,
        expansion: str | None = None,
    ) -> int:
        """Re-encode the expansion occupying ``span``.

        Does nothing when the context has no active profile or when that
        profile is not aligned with the raw table.

        Returns:
            Number of replacements made
        """
        profile = context.effective_profile
        if profile is None:
            return 0
        if len(profile) != len(self.raw):
            logger.debug(
                f"Profile '{profile.name}' has {len(profile)} forms, raw has {len(self.raw)}; "
                "expansion left as is"
            )
            return 0

        count = self.transliterator.substitute(
            self.raw, profile, context.buffer, span, SubstitutionMode.BULK
        )
        if count:
            logger.debug(
                f"Re-encoded expansion {expansion!r} into '{profile.name}' ({count} replacements)"
            )
        return count

    __call__ = on_abbrev_expanded
