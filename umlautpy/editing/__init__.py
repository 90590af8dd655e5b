"""Editing host abstractions and their in-memory implementations."""

from .abbrevs import AbbrevTable, expand_abbrev, load_abbrevs
from .buffer import Span, TextBuffer
from .context import EditingContext
from .host import (
    BindingScope,
    ConfirmCallback,
    ConfirmDecision,
    KeyRegistry,
    ProfileChooser,
    SubstitutionMatch,
    TextInserter,
)
from .keymap import Keymap, KeymapRegistry
from .prompts import PromptChooser, PromptConfirm, ScriptedChooser, ScriptedConfirm

__all__ = [
    "AbbrevTable",
    "BindingScope",
    "ConfirmCallback",
    "ConfirmDecision",
    "EditingContext",
    "KeyRegistry",
    "Keymap",
    "KeymapRegistry",
    "ProfileChooser",
    "PromptChooser",
    "PromptConfirm",
    "ScriptedChooser",
    "ScriptedConfirm",
    "Span",
    "SubstitutionMatch",
    "TextBuffer",
    "TextInserter",
    "expand_abbrev",
    "load_abbrevs",
]
