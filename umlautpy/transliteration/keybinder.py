"""Binding logical keys to the forms of one profile."""

from collections.abc import Sequence

from loguru import logger

from umlautpy.core.tables import EncodingTable
from umlautpy.editing.context import EditingContext
from umlautpy.editing.host import BindingScope, KeyAction, KeyRegistry


def make_insert_action(form: str) -> KeyAction:
    """Build a key action inserting ``form`` at point of the invoking context."""

    def insert_form(context: EditingContext) -> None:
        context.buffer.insert(form)

    return insert_form


class KeyBinder:
    """Pairs a fixed key sequence with the forms of a chosen table.

    Attributes:
        keys: Logical keys, ``keys[i]`` emitting alphabet position ``i``
        key_registry: Host registry receiving the bindings
        default_context: Context whose profile a global binding records
    """

    def __init__(
        self,
        keys: Sequence[str],
        key_registry: KeyRegistry,
        default_context: EditingContext,
    ) -> None:
        self.keys = tuple(keys)
        self.key_registry = key_registry
        self.default_context = default_context

    def bind(
        self,
        table: EncodingTable | None,
        scope: BindingScope | str = BindingScope.GLOBAL,
        context: EditingContext | None = None,
    ) -> int:
        """Bind every key to the form at the same position of ``table``.

        Binding stops at the shorter of the key list and the table. The table
        becomes the active profile of ``context`` (local scope) or of the
        default context (global scope).

        Returns:
            Number of keys bound
        """
        scope = BindingScope(scope)
        if scope is BindingScope.GLOBAL or context is None:
            context = self.default_context

        if table is None:
            return 0

        bound = 0
        for key, form in zip(self.keys, table.forms):
            self.key_registry.define_key(key, make_insert_action(form), scope, context)
            bound += 1

        context.active_profile = table
        logger.debug(f"Bound {bound} keys to profile '{table.name}' ({scope.value}, {context.name})")
        return bound
