"""Constants used throughout the UmlautPy codebase."""


class Constants:
    """Centralized constants to avoid magic numbers and strings."""

    # Profiles
    RAW_PROFILE = "raw"
    """Canonical 8-bit glyph profile; abbreviations are authored in it."""

    DEFAULT_PROFILE = "raw"
    """Profile bound when neither config nor CLI names one."""

    # Keys
    DEFAULT_KEYS = ("M-A", "M-O", "M-U", "M-a", "M-o", "M-u", "M-s")
    """Logical keys paired positionally with the alphabet."""

    KEY_LIST_SEPARATOR = ","
    """Separator for key lists given as a single string."""

    # Scopes
    GLOBAL_SCOPE = "global"
    LOCAL_SCOPE = "local"

    # Output
    ESPANSO_OUTPUT_FILE = "umlauts.yml"
    """File name used when the Espanso output path is a directory."""

    BANNER_WIDTH = 60
    """Width of the separator lines in verbose output."""
