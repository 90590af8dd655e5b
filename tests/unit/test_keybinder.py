"""Unit tests for key binding across scopes and contexts."""

from umlautpy.core import EncodingTable, default_registry
from umlautpy.editing import BindingScope, EditingContext, KeymapRegistry, Span, TextBuffer
from umlautpy.transliteration import AbbrevPostProcessor, KeyBinder
from umlautpy.utils.constants import Constants


def _setup(keys=Constants.DEFAULT_KEYS):
    """Build a key registry, a default context and a binder over them."""
    key_registry = KeymapRegistry()
    default_context = EditingContext(name="default")
    binder = KeyBinder(keys, key_registry, default_context)
    return key_registry, default_context, binder


def _context(name: str, default_context: EditingContext, text: str = "") -> EditingContext:
    return EditingContext(name=name, buffer=TextBuffer(text), parent=default_context)


class TestBind:
    """Test KeyBinder.bind behavior."""

    def test_key_inserts_form_of_bound_profile(self) -> None:
        """Pressing a bound key inserts that profile's form."""
        key_registry, default_context, binder = _setup()
        binder.bind(default_registry().lookup("html"))
        context = _context("doc", default_context)
        key_registry.press("M-a", context)
        assert context.buffer.text == "&auml;"

    def test_form_is_inserted_at_point(self) -> None:
        """The form goes to the insertion point and point moves past it."""
        key_registry, default_context, binder = _setup()
        binder.bind(default_registry().lookup("raw"))
        context = _context("doc", default_context)
        context.buffer = TextBuffer("Mller", point=1)
        key_registry.press("M-u", context)
        assert (context.buffer.text, context.buffer.point) == ("Müller", 2)

    def test_returns_number_of_bound_keys(self) -> None:
        """All seven keys are bound for a built-in profile."""
        _, _, binder = _setup()
        assert binder.bind(default_registry().lookup("tex")) == 7

    def test_short_key_list_stops_binding(self) -> None:
        """With fewer keys than forms, only the keys present are bound."""
        key_registry, _, binder = _setup(keys=("k1", "k2"))
        count = binder.bind(default_registry().lookup("raw"))
        assert count == 2 and key_registry.global_keymap.keys() == ["k1", "k2"]

    def test_short_table_stops_binding(self) -> None:
        """With fewer forms than keys, extra keys stay unbound."""
        key_registry, _, binder = _setup()
        binder.bind(EncodingTable("two", ("Ä", "Ö")))
        assert len(key_registry.global_keymap) == 2

    def test_missing_table_binds_nothing(self) -> None:
        """Binding None binds zero keys and records no profile."""
        _, default_context, binder = _setup()
        assert binder.bind(None) == 0 and default_context.active_profile is None

    def test_scope_may_be_given_as_string(self) -> None:
        """'local' selects local scope."""
        key_registry, default_context, binder = _setup()
        context = _context("doc", default_context)
        binder.bind(default_registry().lookup("raw"), "local", context)
        assert "M-a" in context.local_keymap and "M-a" not in key_registry.global_keymap


class TestScopes:
    """Test global and local binding interplay."""

    def test_later_global_binding_overwrites_earlier(self) -> None:
        """A second global bind replaces the first."""
        key_registry, default_context, binder = _setup()
        registry = default_registry()
        binder.bind(registry.lookup("raw"))
        binder.bind(registry.lookup("ascii"))
        context = _context("doc", default_context)
        key_registry.press("M-s", context)
        assert context.buffer.text == "ss"

    def test_local_binding_survives_later_global_binding(self) -> None:
        """Local then global: the local action stays active in its context."""
        key_registry, default_context, binder = _setup()
        registry = default_registry()
        tex_doc = _context("tex", default_context)
        binder.bind(registry.lookup("tex"), BindingScope.LOCAL, tex_doc)
        binder.bind(registry.lookup("ascii"), BindingScope.GLOBAL)
        key_registry.press("M-a", tex_doc)
        assert tex_doc.buffer.text == '\\"a'

    def test_global_binding_applies_in_other_contexts(self) -> None:
        """Local then global: other contexts get the global action."""
        key_registry, default_context, binder = _setup()
        registry = default_registry()
        binder.bind(registry.lookup("tex"), BindingScope.LOCAL, _context("tex", default_context))
        binder.bind(registry.lookup("ascii"), BindingScope.GLOBAL)
        other = _context("other", default_context)
        key_registry.press("M-a", other)
        assert other.buffer.text == "ae"

    def test_clearing_local_bindings_reverts_to_global(self) -> None:
        """After the local keymap is cleared the global binding shows through."""
        key_registry, default_context, binder = _setup()
        registry = default_registry()
        doc = _context("doc", default_context)
        binder.bind(registry.lookup("ascii"))
        binder.bind(registry.lookup("html"), BindingScope.LOCAL, doc)
        doc.clear_local_bindings()
        key_registry.press("M-o", doc)
        assert doc.buffer.text == "oe"

    def test_unbound_key_does_nothing(self) -> None:
        """Pressing a key nobody bound reports False and leaves the buffer."""
        key_registry, default_context, _ = _setup()
        doc = _context("doc", default_context, "x")
        assert key_registry.press("M-a", doc) is False and doc.buffer.text == "x"


class TestActiveProfile:
    """Test recording of the active profile."""

    def test_short_local_table_does_not_break_abbrevs(self) -> None:
        """Binding a short table locally still lets expansions pass untouched."""
        _, default_context, binder = _setup()
        doc = _context("doc", default_context, "Äpfel")
        binder.bind(EncodingTable("short", ("Ae",)), BindingScope.LOCAL, doc)
        processor = AbbrevPostProcessor(default_registry().lookup("raw"))
        assert processor.on_abbrev_expanded(doc, Span(0, 5)) == 0 and doc.buffer.text == "Äpfel"

    def test_local_binding_records_profile_in_context(self) -> None:
        """A local bind sets the context's active profile."""
        _, default_context, binder = _setup()
        doc = _context("doc", default_context)
        table = default_registry().lookup("german-latex")
        binder.bind(table, BindingScope.LOCAL, doc)
        assert doc.active_profile is table

    def test_local_binding_leaves_default_context_alone(self) -> None:
        """A local bind does not touch the default context."""
        _, default_context, binder = _setup()
        binder.bind(default_registry().lookup("tex"), BindingScope.LOCAL, _context("doc", default_context))
        assert default_context.active_profile is None

    def test_global_binding_records_profile_in_default_context(self) -> None:
        """A global bind sets the default context's profile, even if a context is passed."""
        _, default_context, binder = _setup()
        doc = _context("doc", default_context)
        table = default_registry().lookup("html")
        binder.bind(table, BindingScope.GLOBAL, doc)
        assert default_context.active_profile is table and doc.active_profile is None

    def test_context_inherits_default_profile(self) -> None:
        """A context without its own profile sees the default context's."""
        _, default_context, binder = _setup()
        table = default_registry().lookup("html")
        binder.bind(table)
        assert _context("doc", default_context).effective_profile is table
