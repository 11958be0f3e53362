"""Tests for glossa.i18n.translator module."""

import pytest

from glossa.i18n.errors import (
    BrokenBranchError,
    LanguageError,
    LanguageUnavailableError,
    PathLeadsToNestingError,
    SegmentNotFoundError,
)
from glossa.i18n.languages import Language
from glossa.i18n.translator import Translator
from glossa.operations import OperationStatus
from tests.factories.i18n import make_common_document, make_tree


@pytest.fixture
def translator(tree):
    return Translator(tree)


@pytest.fixture
def broken_translator():
    return Translator(
        make_tree(
            [
                ("common.yml", make_common_document()),
                ("broken.yml", {"broken": {"en": "Hello {"}}),
            ]
        )
    )


@pytest.mark.unit
class TestTranslate:
    """Tests for Translator.translate()."""

    def test_translate_plain(self, translator):
        assert translator.translate("greetings.formal", Language.ES) == "Hola"

    def test_translate_with_variables(self, translator):
        assert (
            translator.translate("common.greeting", Language.EN, {"name": "Josh"})
            == "Hello Josh"
        )

    def test_translate_without_variables_keeps_placeholders(self, translator):
        assert translator.translate("common.greeting", Language.EN) == "Hello {name}"

    def test_translate_accepts_segments(self, translator):
        assert translator.translate(["greetings", "informal"], Language.EN) == "Wyd?"

    @pytest.mark.parametrize("identifier", ["es", "ES", "Spanish", "Español"])
    def test_translate_accepts_language_identifiers(self, translator, identifier):
        assert translator.translate("greetings.formal", identifier) == "Hola"

    def test_translate_invalid_language(self, translator):
        with pytest.raises(LanguageError) as exc_info:
            translator.translate("greetings.formal", "Spnish")
        assert exc_info.value.closest == "Spanish"

    def test_translate_missing_path(self, translator):
        with pytest.raises(SegmentNotFoundError):
            translator.translate("greetings.missing", Language.EN)

    def test_translate_missing_language(self, translator):
        with pytest.raises(LanguageUnavailableError) as exc_info:
            translator.translate("common.greeting", Language.ES)

        error = exc_info.value
        assert error.path == ("common", "greeting")
        assert error.language is Language.ES
        assert error.available == (Language.EN,)

    def test_translate_uses_fallback_language(self, tree):
        translator = Translator(tree, fallback_language=Language.EN)
        assert (
            translator.translate("common.greeting", Language.ES, {"name": "Ana"})
            == "Hello Ana"
        )

    def test_fallback_language_not_used_when_requested_exists(self, tree):
        translator = Translator(tree, fallback_language=Language.EN)
        assert translator.translate("greetings.formal", Language.ES) == "Hola"

    def test_fallback_language_also_missing(self, tree):
        translator = Translator(tree, fallback_language=Language.FR)
        with pytest.raises(LanguageUnavailableError):
            translator.translate("common.greeting", Language.ES)

    def test_translate_broken_branch(self, broken_translator):
        with pytest.raises(BrokenBranchError):
            broken_translator.translate("broken", Language.EN)


@pytest.mark.unit
class TestResolve:
    """Tests for Translator.resolve()."""

    def test_resolve_success(self, translator):
        result = translator.resolve("common.farewell", Language.ES, {"name": "Ana"})

        assert result.is_success
        assert result.data == "Adiós Ana"
        assert result.error_code is None

    def test_resolve_missing_path(self, translator):
        result = translator.resolve("common.greetin", Language.EN)

        assert result.status == OperationStatus.NOT_FOUND
        assert result.error_code == "segment_not_found"
        assert isinstance(result.data, SegmentNotFoundError)
        assert result.data.closest == "greeting"
        assert "perhaps you meant" in result.message

    def test_resolve_path_to_nesting(self, translator):
        result = translator.resolve("common", Language.EN)

        assert result.status == OperationStatus.NOT_FOUND
        assert isinstance(result.data, PathLeadsToNestingError)

    def test_resolve_missing_language(self, translator):
        result = translator.resolve("common.greeting", Language.DE)

        assert result.status == OperationStatus.NOT_FOUND
        assert result.error_code == "language_unavailable"

    def test_resolve_invalid_language(self, translator):
        result = translator.resolve("common.greeting", "notalanguage")

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "invalid_language"

    def test_resolve_broken_branch(self, broken_translator):
        result = broken_translator.resolve("broken", Language.EN)

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "broken_branch"
        assert "Found unclosed brace at index 6" in result.message

    def test_resolve_fallback_translation(self, tree):
        translator = Translator(tree, fallback_translation="Missing text")
        result = translator.resolve("nowhere", Language.EN)

        assert result.is_success
        assert result.data == "Missing text"
        assert result.message == "fallback_translation"


@pytest.mark.unit
class TestTranslatorQueries:
    """Tests for has_translation() and get_available_languages()."""

    def test_has_translation(self, translator):
        assert translator.has_translation("greetings.formal", Language.EN)
        assert not translator.has_translation("common.greeting", Language.ES)
        assert not translator.has_translation("nowhere", Language.EN)
        assert not translator.has_translation("greetings.formal", "bogus")

    def test_has_translation_ignores_fallback(self, tree):
        translator = Translator(tree, fallback_language=Language.EN)
        assert not translator.has_translation("common.greeting", Language.ES)

    def test_get_available_languages(self, translator):
        assert translator.get_available_languages("greetings.formal") == [
            Language.ES,
            Language.EN,
        ]

    def test_get_available_languages_missing_path(self, translator):
        with pytest.raises(SegmentNotFoundError):
            translator.get_available_languages("greetings.nope")
