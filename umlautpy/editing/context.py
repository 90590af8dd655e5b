"""Per-document editing state."""

from dataclasses import dataclass, field

from umlautpy.core.tables import EncodingTable
from umlautpy.editing.buffer import TextBuffer
from umlautpy.editing.keymap import Keymap


@dataclass
class EditingContext:
    """One document being edited.

    ``active_profile`` holds the table last bound in this context. A context
    created with a ``parent`` (normally the session's default context) falls
    back to the parent's profile while it has none of its own, the same way
    key lookup falls back from the local to the global keymap.
    """

    name: str
    buffer: TextBuffer = field(default_factory=TextBuffer)
    local_keymap: Keymap = field(default_factory=Keymap)
    active_profile: EncodingTable | None = None
    parent: "EditingContext | None" = None

    @property
    def effective_profile(self) -> EncodingTable | None:
        if self.active_profile is not None:
            return self.active_profile
        if self.parent is not None:
            return self.parent.effective_profile
        return None

    def clear_local_bindings(self) -> None:
        """Drop every local key binding, exposing the global ones again."""
        self.local_keymap.clear()
