"""Tests for glossa.i18n.languages module."""

import pytest

from glossa.i18n.errors import LanguageError
from glossa.i18n.languages import Language


class TestLanguage:
    """Tests for Language enum."""

    def test_language_enum_values(self):
        """Language values are lower-case ISO 639-1 codes."""
        assert Language.EN.value == "en"
        assert Language.ES.value == "es"
        assert Language.ZH.value == "zh"

    def test_catalog_size(self):
        """Catalog covers the ISO 639-1 codes."""
        assert len(Language) > 180
        assert all(len(language.value) == 2 for language in Language)

    def test_from_string_code(self):
        """from_string() accepts codes."""
        assert Language.from_string("es") is Language.ES
        assert Language.from_string("en") is Language.EN

    def test_from_string_is_case_insensitive(self):
        """from_string() ignores case for codes and names."""
        assert Language.from_string("ES") is Language.ES
        assert Language.from_string("spanish") is Language.ES
        assert Language.from_string("SPANISH") is Language.ES

    def test_from_string_canonical_name(self):
        """from_string() accepts canonical names."""
        assert Language.from_string("Spanish") is Language.ES
        assert Language.from_string("Church Slavonic") is Language.CU

    def test_from_string_alternative_spelling(self):
        """from_string() accepts native spellings."""
        assert Language.from_string("Español") is Language.ES
        assert Language.from_string("Deutsch") is Language.DE
        assert Language.from_string("日本語") is Language.JA

    def test_from_string_shared_spelling_resolves_to_first(self):
        """A spelling listed by two languages resolves to the first one."""
        assert Language.from_string("isiNdebele") is Language.ND

    def test_from_string_invalid_raises_language_error(self):
        """from_string() raises LanguageError for unknown identifiers."""
        with pytest.raises(LanguageError) as exc_info:
            Language.from_string("Klingon")
        assert exc_info.value.attempt == "Klingon"

    def test_language_error_is_value_error(self):
        """LanguageError can be caught as ValueError."""
        with pytest.raises(ValueError):
            Language.from_string("xx")

    def test_from_string_suggests_closest(self):
        """from_string() suggests the identifier with minimal edit distance."""
        with pytest.raises(LanguageError) as exc_info:
            Language.from_string("Spnish")

        assert exc_info.value.closest in ("Spanish", "es")
        assert "perhaps you meant" in str(exc_info.value)

    def test_from_string_suggestion_ignores_case(self):
        """Suggestions are computed ignoring case."""
        with pytest.raises(LanguageError) as exc_info:
            Language.from_string("FRENH")
        assert exc_info.value.closest == "French"

    def test_display_uses_canonical_name(self):
        """display() returns the canonical name."""
        assert Language.ES.display() == "Spanish"
        assert str(Language.FR) == "French"

    def test_alternatives(self):
        """alternatives lists the native spellings."""
        assert Language.ES.alternatives == ("Español",)
        assert Language.EN.alternatives == ()

    def test_identifiers(self):
        """identifiers contains code, name and alternatives."""
        assert Language.ES.identifiers == ("es", "Spanish", "Español")

    def test_equality_and_hash_by_code(self):
        """Languages compare and hash like their code."""
        assert Language.ES == "es"
        assert {Language.ES: 1}["es"] == 1
        assert Language.from_string("Spanish") == Language.from_string("es")

    def test_norwegian_code(self):
        """'no' parses as Norwegian, not as a boolean-looking word."""
        assert Language.from_string("no") is Language.NO
