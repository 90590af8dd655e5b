"""Encoding table data model."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class EncodingTable:
    """One profile of the special alphabet.

    ``forms[i]`` is this profile's spelling of alphabet position ``i``. Tables
    are only meaningful relative to each other: position ``i`` must denote the
    same letter in every table of a registry.

    Attributes:
        name: Profile name used for lookup
        forms: Ordered representations, one per alphabet position
    """

    name: str
    forms: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any iterable but store an immutable tuple
        object.__setattr__(self, "forms", tuple(self.forms))

    def __len__(self) -> int:
        return len(self.forms)

    def form(self, position: int) -> str:
        """Return the representation at ``position``."""
        return self.forms[position]

    def same_forms(self, other: "EncodingTable") -> bool:
        """Check whether two tables spell every position identically."""
        return self.forms == other.forms
