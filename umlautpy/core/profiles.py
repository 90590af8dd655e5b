"""Built-in profiles for the German umlaut alphabet."""

from umlautpy.core.registry import EncodingRegistry

ALPHABET = (
    "CAPITAL_A_UMLAUT",
    "CAPITAL_O_UMLAUT",
    "CAPITAL_U_UMLAUT",
    "SMALL_A_UMLAUT",
    "SMALL_O_UMLAUT",
    "SMALL_U_UMLAUT",
    "SHARP_S",
)

# Every row follows ALPHABET order
BUILTIN_PROFILES: dict[str, tuple[str, ...]] = {
    "raw": ("Ä", "Ö", "Ü", "ä", "ö", "ü", "ß"),
    "ascii": ("Ae", "Oe", "Ue", "ae", "oe", "ue", "ss"),
    "tex": ('\\"A', '\\"O', '\\"U', '\\"a', '\\"o', '\\"u', "\\ss{}"),
    "tex-braced": ('{\\"A}', '{\\"O}', '{\\"U}', '{\\"a}', '{\\"o}', '{\\"u}', "{\\ss}"),
    "german-latex": ('"A', '"O', '"U', '"a', '"o', '"u', '"s'),
    "html": ("&Auml;", "&Ouml;", "&Uuml;", "&auml;", "&ouml;", "&uuml;", "&szlig;"),
    "quoted-printable": ("=C4", "=D6", "=DC", "=E4", "=F6", "=FC", "=DF"),
}


def default_registry(
    extra_profiles: dict[str, list[str] | tuple[str, ...]] | None = None,
) -> EncodingRegistry:
    """Build a registry holding every built-in profile.

    Args:
        extra_profiles: Additional profiles to register after the built-ins

    Returns:
        A populated EncodingRegistry

    Raises:
        InvalidTable: If an extra profile is misaligned or shadows a built-in
    """
    registry = EncodingRegistry(alphabet=ALPHABET)
    for name, forms in BUILTIN_PROFILES.items():
        registry.register(name, forms)
    for name, forms in (extra_profiles or {}).items():
        registry.register(name, forms)
    return registry
