"""Capabilities the core consumes from its editing host."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from umlautpy.editing.buffer import Span
    from umlautpy.editing.context import EditingContext


class BindingScope(Enum):
    """Where a key binding takes effect."""

    GLOBAL = "global"  # Whole environment
    LOCAL = "local"  # Current editing context only


class ConfirmDecision(Enum):
    """Answer to a per-match confirmation prompt."""

    ACCEPT = "accept"
    REJECT = "reject"
    ABORT = "abort"


@dataclass(frozen=True)
class SubstitutionMatch:
    """One occurrence offered for confirmation."""

    position: int  # Alphabet position being processed
    span: "Span"
    found: str
    replacement: str


# Key actions receive the context in which the key was pressed
KeyAction = Callable[["EditingContext"], None]


class TextInserter(Protocol):
    """Inserts literal text at the current insertion point."""

    def insert(self, text: str) -> None: ...


class KeyRegistry(Protocol):
    """Registers key actions at global or local scope."""

    def define_key(
        self,
        key: str,
        action: KeyAction,
        scope: BindingScope,
        context: "EditingContext | None" = None,
    ) -> None: ...


class ProfileChooser(Protocol):
    """Asks the user to pick one of the named profiles."""

    def choose(self, prompt: str, names: Sequence[str], default: str | None = None) -> str: ...


class ConfirmCallback(Protocol):
    """Decides whether a single match gets replaced."""

    def __call__(self, match: SubstitutionMatch) -> ConfirmDecision: ...
