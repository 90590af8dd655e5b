"""Substitution, key binding and abbreviation post-processing."""

from .abbrev import AbbrevPostProcessor
from .keybinder import KeyBinder, make_insert_action
from .substitute import SubstitutionMode, Transliterator, substitute, transliterate_text

__all__ = [
    "AbbrevPostProcessor",
    "KeyBinder",
    "SubstitutionMode",
    "Transliterator",
    "make_insert_action",
    "substitute",
    "transliterate_text",
]
