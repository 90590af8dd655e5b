"""User-invocable commands tying the core to an editing host."""

from collections.abc import Sequence

from loguru import logger

from umlautpy.core import Config, EncodingRegistry, default_registry
from umlautpy.editing import (
    AbbrevTable,
    BindingScope,
    ConfirmCallback,
    EditingContext,
    KeymapRegistry,
    ProfileChooser,
    Span,
    TextBuffer,
    expand_abbrev,
)
from umlautpy.transliteration import (
    AbbrevPostProcessor,
    KeyBinder,
    SubstitutionMode,
    Transliterator,
)
from umlautpy.utils.constants import Constants


class UmlautSession:
    """One editing environment: registry, key maps, contexts and commands.

    The session owns a default context. Global bindings record their profile
    there, and every context created through :meth:`open_context` inherits it
    until it binds a profile locally.

    Attributes:
        registry: Profiles available to the commands
        key_registry: Global and local key maps
        default_context: Context receiving global bindings
        current_context: Context commands act on when none is given
    """

    def __init__(
        self,
        registry: EncodingRegistry | None = None,
        keys: Sequence[str] = Constants.DEFAULT_KEYS,
        chooser: ProfileChooser | None = None,
        confirm: ConfirmCallback | None = None,
        abbrevs: AbbrevTable | None = None,
    ) -> None:
        self.registry = registry or default_registry()
        self.key_registry = KeymapRegistry()
        self.default_context = EditingContext(name="default")
        self.current_context = self.default_context
        self.chooser = chooser
        self.abbrevs = abbrevs or AbbrevTable()

        self.transliterator = Transliterator(confirm=confirm)
        self.key_binder = KeyBinder(keys, self.key_registry, self.default_context)
        self.post_processor = AbbrevPostProcessor(
            self.registry.lookup(Constants.RAW_PROFILE), self.transliterator
        )

    @classmethod
    def from_config(
        cls,
        config: Config,
        chooser: ProfileChooser | None = None,
        confirm: ConfirmCallback | None = None,
        abbrevs: AbbrevTable | None = None,
    ) -> "UmlautSession":
        """Build a session from configuration and bind the configured profile."""
        session = cls(
            registry=default_registry(config.extra_profiles),
            keys=config.keys,
            chooser=chooser,
            confirm=confirm,
            abbrevs=abbrevs,
        )
        session.bind_profile(config.profile, config.scope)
        return session

    def open_context(self, name: str, text: str = "") -> EditingContext:
        """Create a context for a new document and make it current."""
        context = EditingContext(name=name, buffer=TextBuffer(text), parent=self.default_context)
        self.current_context = context
        return context

    def _context(self, context: EditingContext | None) -> EditingContext:
        return context if context is not None else self.current_context

    def bind_profile(
        self,
        profile_name: str,
        scope: BindingScope | str = BindingScope.GLOBAL,
        context: EditingContext | None = None,
    ) -> int:
        """Bind the logical keys to ``profile_name``.

        Raises:
            UnknownProfile: If the profile is not registered
        """
        table = self.registry.lookup(profile_name)
        return self.key_binder.bind(table, scope, self._context(context))

    def substitute_profiles(
        self,
        from_profile: str,
        to_profile: str,
        span: Span | None = None,
        confirm: bool = False,
        context: EditingContext | None = None,
    ) -> int:
        """Convert text from one profile to another.

        The span defaults to the active region, then to the whole buffer.

        Raises:
            UnknownProfile: If either profile is not registered
        """
        source = self.registry.lookup(from_profile)
        target = self.registry.lookup(to_profile)
        buffer = self._context(context).buffer
        if span is None:
            span = buffer.region()

        mode = SubstitutionMode.CONFIRM if confirm else SubstitutionMode.BULK
        count = self.transliterator.substitute(source, target, buffer, span, mode)
        logger.info(f"Replaced {count} occurrences ({from_profile} -> {to_profile})")
        return count

    def on_abbrev_expanded(
        self,
        span: Span,
        expansion: str | None = None,
        context: EditingContext | None = None,
    ) -> int:
        """Hook for the abbreviation system; see :class:`AbbrevPostProcessor`."""
        return self.post_processor.on_abbrev_expanded(self._context(context), span, expansion)

    def expand_abbrev(self, context: EditingContext | None = None) -> Span | None:
        """Expand the abbreviation before point and re-encode it."""
        return expand_abbrev(self._context(context), self.abbrevs, self.post_processor)

    def press(self, key: str, context: EditingContext | None = None) -> bool:
        """Invoke ``key`` in a context."""
        return self.key_registry.press(key, self._context(context))

    def _require_chooser(self) -> ProfileChooser:
        if self.chooser is None:
            raise ValueError("Interactive commands need a profile chooser")
        return self.chooser

    def choose_and_bind(
        self,
        scope: BindingScope | str = BindingScope.GLOBAL,
        context: EditingContext | None = None,
    ) -> int:
        """Ask for a profile, then bind the keys to it."""
        chooser = self._require_chooser()
        current = self._context(context).effective_profile
        name = chooser.choose(
            "Bind keys to profile", self.registry.names(), current.name if current else None
        )
        return self.bind_profile(name, scope, context)

    def choose_and_substitute(
        self,
        span: Span | None = None,
        confirm: bool = False,
        context: EditingContext | None = None,
    ) -> int:
        """Ask for source and target profiles, then convert."""
        chooser = self._require_chooser()
        names = self.registry.names()
        from_profile = chooser.choose("Convert from profile", names, Constants.RAW_PROFILE)
        to_profile = chooser.choose("Convert to profile", names)
        return self.substitute_profiles(from_profile, to_profile, span, confirm, context)
