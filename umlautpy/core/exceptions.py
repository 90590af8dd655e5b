"""Exception hierarchy for UmlautPy."""


class UmlautError(Exception):
    """Base class for all UmlautPy errors."""


class InvalidTable(UmlautError, ValueError):
    """An encoding table was rejected at registration or use.

    Raised when a table's length differs from the registry's alphabet length,
    when a profile name is registered twice, or when two tables of different
    length are paired for substitution.
    """


class UnknownProfile(UmlautError, KeyError):
    """A profile name was looked up that is not registered."""

    def __init__(self, name: str, known: list[str] | None = None) -> None:
        self.name = name
        self.known = list(known or [])
        super().__init__(name)

    def __str__(self) -> str:
        if self.known:
            return f"Unknown profile '{self.name}' (known: {', '.join(self.known)})"
        return f"Unknown profile '{self.name}'"


class ConfigError(UmlautError):
    """Configuration file or values could not be used."""
