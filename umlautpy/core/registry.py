"""Registry of named encoding profiles."""

from collections.abc import Iterable

from loguru import logger

from umlautpy.core.exceptions import InvalidTable, UnknownProfile
from umlautpy.core.tables import EncodingTable


class EncodingRegistry:
    """Named EncodingTables sharing one alphabet length.

    The alphabet length N is fixed either by the ``alphabet`` given at
    construction or, failing that, by the first table registered. Every later
    table must have exactly N forms.

    Attributes:
        alphabet: Symbolic names of the alphabet positions, if known
    """

    def __init__(self, alphabet: Iterable[str] | None = None) -> None:
        self.alphabet: tuple[str, ...] | None = tuple(alphabet) if alphabet is not None else None
        self._tables: dict[str, EncodingTable] = {}
        self._size: int | None = len(self.alphabet) if self.alphabet is not None else None

    @property
    def size(self) -> int | None:
        """Alphabet length N, or None while nothing fixes it."""
        return self._size

    def register(self, name: str, forms: Iterable[str]) -> EncodingTable:
        """Add a new named profile.

        Args:
            name: Profile name, unique within the registry
            forms: One representation per alphabet position

        Returns:
            The registered table

        Raises:
            InvalidTable: If the name exists or the length differs from N
        """
        table = EncodingTable(name=name, forms=tuple(forms))

        if name in self._tables:
            raise InvalidTable(f"Profile '{name}' is already registered")

        if self._size is not None and len(table) != self._size:
            raise InvalidTable(
                f"Profile '{name}' has {len(table)} forms, expected {self._size}"
            )

        if self._size is None:
            self._size = len(table)
        self._tables[name] = table

        logger.debug(f"Registered profile '{name}' ({len(table)} forms)")
        return table

    def lookup(self, name: str) -> EncodingTable:
        """Return the table registered under ``name``.

        Raises:
            UnknownProfile: If no such profile exists
        """
        try:
            return self._tables[name]
        except KeyError:
            raise UnknownProfile(name, self.names()) from None

    def names(self) -> list[str]:
        """Profile names in registration order."""
        return list(self._tables)

    def position(self, symbol: str) -> int:
        """Return the alphabet position carrying the symbolic name ``symbol``.

        Raises:
            KeyError: If the registry has no alphabet or the symbol is not in it
        """
        if self.alphabet is None or symbol not in self.alphabet:
            raise KeyError(symbol)
        return self.alphabet.index(symbol)

    def __contains__(self, name: object) -> bool:
        return name in self._tables

    def __len__(self) -> int:
        return len(self._tables)

    def __iter__(self):
        return iter(self._tables.values())
