"""Tests for glossa.i18n.nodes module."""

import pytest

from glossa.i18n.errors import (
    BranchError,
    BrokenBranchError,
    EmptyTableError,
    InvalidPlaceholderError,
    InvalidValueError,
    LanguageError,
    MixedNestingError,
    PathLeadsToNestingError,
    PathPastLeafError,
    SegmentNotFoundError,
    UnclosedBraceError,
)
from glossa.i18n.languages import Language
from glossa.i18n.nodes import (
    BrokenBranch,
    Leaf,
    Nesting,
    Translation,
    TranslationNode,
    normalize_path,
    parse_document,
)
from glossa.i18n.templating import TemplateString
from tests.factories.i18n import make_greetings_document, make_translation


@pytest.mark.unit
class TestNormalizePath:
    """Tests for normalize_path()."""

    def test_dotted_string(self):
        assert normalize_path("common.greeting") == ("common", "greeting")

    def test_sequence(self):
        assert normalize_path(["common", "greeting"]) == ("common", "greeting")

    def test_empty_string(self):
        assert normalize_path("") == ()


@pytest.mark.unit
class TestTranslation:
    """Tests for the Translation container."""

    def test_get_available_language(self):
        translation = make_translation()
        assert translation.get(Language.EN) == TemplateString.parse("Hello {name}")

    def test_get_missing_language_returns_none(self):
        translation = make_translation()
        assert translation.get(Language.FR) is None

    def test_language_available(self):
        translation = make_translation()
        assert translation.language_available(Language.ES)
        assert not translation.language_available(Language.DE)
        assert Language.EN in translation

    def test_available_languages_keep_document_order(self):
        translation = make_translation({Language.ES: "Hola", Language.EN: "Hello"})
        assert translation.available_languages() == [Language.ES, Language.EN]
        assert len(translation) == 2


@pytest.mark.unit
class TestFromDocument:
    """Tests for the strict TranslationNode.from_document()."""

    def test_nesting_and_leaf(self):
        """Tables of tables become nestings, tables of strings become leaves."""
        node = TranslationNode.from_document(make_greetings_document())

        assert isinstance(node, Nesting)
        greetings = node.children["greetings"]
        assert isinstance(greetings, Nesting)
        formal = greetings.children["formal"]
        assert isinstance(formal, Leaf)
        assert formal.translation.get(Language.ES).original == "Hola"

    def test_leaf_at_top_level(self):
        """A document of strings is a single translation."""
        node = TranslationNode.from_document({"en": "Hello", "es": "Hola"})
        assert isinstance(node, Leaf)
        assert node.languages() == {Language.EN, Language.ES}

    def test_language_keys_accept_names(self):
        """Translation keys may be any language identifier."""
        node = TranslationNode.from_document({"Spanish": "Hola", "Deutsch": "Hallo"})
        assert node.translation.available_languages() == [Language.ES, Language.DE]

    def test_mixed_nesting_string_first(self):
        with pytest.raises(MixedNestingError) as exc_info:
            TranslationNode.from_document({"en": "Hello", "nested": {"en": "x"}})
        assert exc_info.value.key == "nested"

    def test_mixed_nesting_table_first(self):
        with pytest.raises(MixedNestingError) as exc_info:
            TranslationNode.from_document({"nested": {"en": "x"}, "en": "Hello"})
        assert exc_info.value.key == "en"

    @pytest.mark.parametrize("value", [1, 2.5, True, None, ["a", "b"]])
    def test_invalid_value(self, value):
        """Only strings and tables are allowed as values."""
        with pytest.raises(InvalidValueError) as exc_info:
            TranslationNode.from_document({"greeting": {"en": value}})
        assert exc_info.value.key == "en"
        assert exc_info.value.kind == type(value).__name__

    def test_empty_table(self):
        with pytest.raises(EmptyTableError):
            TranslationNode.from_document({"greeting": {}})

    def test_empty_document(self):
        with pytest.raises(EmptyTableError):
            TranslationNode.from_document({})

    def test_invalid_language_key(self):
        with pytest.raises(LanguageError) as exc_info:
            TranslationNode.from_document({"greeting": {"klingon": "nuqneH"}})
        assert exc_info.value.attempt == "klingon"

    def test_invalid_template(self):
        with pytest.raises(UnclosedBraceError):
            TranslationNode.from_document({"greeting": {"en": "Hello {name"}})

    def test_invalid_placeholder(self):
        with pytest.raises(InvalidPlaceholderError):
            TranslationNode.from_document({"greeting": {"en": "Hello {first name}"}})

    def test_non_string_keys_are_stringified(self):
        """Keys such as integers are used by their text."""
        node = TranslationNode.from_document({404: {"en": "Not found"}})
        assert "404" in node.children


@pytest.mark.unit
class TestParseDocument:
    """Tests for the tolerant parse_document()."""

    def test_valid_document_matches_strict_parse(self):
        document = make_greetings_document()
        assert parse_document(document) == TranslationNode.from_document(document)

    def test_broken_sibling_is_isolated(self):
        """A failing table becomes a broken branch, siblings survive."""
        node = parse_document(
            {
                "good": {"en": "Fine"},
                "bad": {"en": "Hello {name"},
            },
            source="mixed.yml",
        )

        assert isinstance(node.children["good"], Leaf)
        broken = node.children["bad"]
        assert isinstance(broken, BrokenBranch)
        assert isinstance(broken.error, BranchError)
        assert isinstance(broken.error.cause, UnclosedBraceError)
        assert broken.error.source == "mixed.yml"
        assert broken.error.location == ("bad",)

    def test_broken_nested_branch(self):
        """Failures deep in the document are reported at their own location."""
        node = parse_document(
            {"admin": {"users": {"created": {"en": "ok"}, "deleted": {}}}},
            source="admin.yml",
        )

        users = node.children["admin"].children["users"]
        assert isinstance(users.children["created"], Leaf)
        assert isinstance(users.children["deleted"], BrokenBranch)
        assert users.children["deleted"].error.location == ("admin", "users", "deleted")

    def test_broken_document_root(self):
        """A document that fails at the top becomes a single broken branch."""
        node = parse_document({"en": "Hi", "nested": {"en": "x"}}, source="bad.yml")
        assert isinstance(node, BrokenBranch)
        assert isinstance(node.error.cause, MixedNestingError)
        assert node.error.location == ()

    def test_non_table_document(self):
        node = parse_document(["not", "a", "table"])
        assert isinstance(node, BrokenBranch)
        assert isinstance(node.error.cause, InvalidValueError)

    def test_broken_branches_are_listed(self):
        node = parse_document(
            {"a": {"en": "ok"}, "b": {"xx_not_a_language": "?"}, "c": {"d": {}}}
        )
        paths = [path for path, _ in node.broken_branches()]
        assert paths == [("b",), ("c", "d")]

    def test_branch_error_message_includes_location(self):
        node = parse_document({"bad": {"en": "{"}}, source="file.yml")
        message = str(node.children["bad"].error)
        assert "Found unclosed brace at index 0" in message
        assert "file.yml:bad" in message


@pytest.mark.unit
class TestFindPath:
    """Tests for TranslationNode.find_path()."""

    @pytest.fixture
    def root(self):
        return parse_document(
            {
                "greetings": {
                    "formal": {"es": "Hola", "en": "Hello"},
                    "informal": {"es": "Que haces?", "en": "Wyd?"},
                },
                "broken": {"en": "Hi {"},
            }
        )

    def test_resolves_translation(self, root):
        translation = root.find_path(["greetings", "formal"])
        assert isinstance(translation, Translation)
        assert translation.get(Language.EN).original == "Hello"

    def test_resolves_dotted_path(self, root):
        assert root.find_path("greetings.informal").get(Language.ES).original == "Que haces?"

    def test_missing_segment_suggests_sibling(self, root):
        with pytest.raises(SegmentNotFoundError) as exc_info:
            root.find_path("greetings.formla")

        error = exc_info.value
        assert error.segment == "formla"
        assert error.closest == "formal"
        assert error.consumed == ("greetings",)
        assert str(error) == '"formla" does not exist in "greetings", perhaps you meant "formal"?'

    def test_missing_segment_at_root(self, root):
        with pytest.raises(SegmentNotFoundError) as exc_info:
            root.find_path("greeting.formal")

        assert exc_info.value.closest == "greetings"
        assert exc_info.value.consumed == ()
        assert "the root namespace" in str(exc_info.value)

    def test_path_past_translation(self, root):
        with pytest.raises(PathPastLeafError) as exc_info:
            root.find_path("greetings.formal.extra")

        assert exc_info.value.segment == "extra"
        assert exc_info.value.consumed == ("greetings", "formal")

    def test_path_leads_to_nesting(self, root):
        with pytest.raises(PathLeadsToNestingError) as exc_info:
            root.find_path("greetings")
        assert exc_info.value.consumed == ("greetings",)

    def test_empty_path_leads_to_root_nesting(self, root):
        with pytest.raises(PathLeadsToNestingError) as exc_info:
            root.find_path([])
        assert exc_info.value.consumed == ()

    def test_path_ending_at_broken_branch(self, root):
        with pytest.raises(BrokenBranchError) as exc_info:
            root.find_path("broken")

        assert exc_info.value.consumed == ("broken",)
        assert isinstance(exc_info.value.error.cause, UnclosedBraceError)

    def test_path_through_broken_branch(self, root):
        with pytest.raises(BrokenBranchError) as exc_info:
            root.find_path("broken.deeper.still")
        assert exc_info.value.consumed == ("broken",)

    def test_find_path_on_leaf(self):
        leaf = Leaf(make_translation())
        assert leaf.find_path([]) is leaf.translation
        with pytest.raises(PathPastLeafError):
            leaf.find_path("anything")

    def test_languages_collects_every_leaf(self, root):
        assert root.languages() == {Language.ES, Language.EN}
