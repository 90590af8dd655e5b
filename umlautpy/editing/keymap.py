"""Global and per-context key maps."""

from typing import TYPE_CHECKING

from loguru import logger

from umlautpy.editing.host import BindingScope, KeyAction

if TYPE_CHECKING:
    from umlautpy.editing.context import EditingContext


class Keymap:
    """Mapping of key names to actions."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._bindings: dict[str, KeyAction] = {}

    def define(self, key: str, action: KeyAction) -> None:
        self._bindings[key] = action

    def lookup(self, key: str) -> KeyAction | None:
        return self._bindings.get(key)

    def clear(self) -> None:
        self._bindings.clear()

    def keys(self) -> list[str]:
        return list(self._bindings)

    def __contains__(self, key: object) -> bool:
        return key in self._bindings

    def __len__(self) -> int:
        return len(self._bindings)


class KeymapRegistry:
    """Key registry with one global keymap and a local keymap per context.

    Lookup consults the context's local keymap first, then the global one.
    """

    def __init__(self) -> None:
        self.global_keymap = Keymap("global")

    def define_key(
        self,
        key: str,
        action: KeyAction,
        scope: BindingScope,
        context: "EditingContext | None" = None,
    ) -> None:
        """Register ``action`` for ``key``.

        Raises:
            ValueError: If scope is LOCAL and no context is given
        """
        if scope is BindingScope.GLOBAL:
            self.global_keymap.define(key, action)
            return
        if context is None:
            raise ValueError(f"Local binding of '{key}' needs an editing context")
        context.local_keymap.define(key, action)

    def lookup(self, key: str, context: "EditingContext | None" = None) -> KeyAction | None:
        if context is not None:
            action = context.local_keymap.lookup(key)
            if action is not None:
                return action
        return self.global_keymap.lookup(key)

    def press(self, key: str, context: "EditingContext") -> bool:
        """Run the action bound to ``key`` in ``context``.

        Returns:
            True if an action ran, False if the key is unbound
        """
        action = self.lookup(key, context)
        if action is None:
            logger.debug(f"Key '{key}' is unbound in context '{context.name}'")
            return False
        action(context)
        return True
