"""Translation service for dependency injection.

Provides a class-based interface to the i18n system for easier DI and testing.
"""

from typing import Any, Dict, List, Optional

from glossa.i18n.factory import get_translator
from glossa.i18n.languages import Language
from glossa.i18n.nodes import PathLike, Translation
from glossa.i18n.translator import LanguageLike, Translator
from glossa.operations import OperationResult


class TranslationService:
    """Class-based translation service.

    Thin facade over a Translator, by default the process-wide one from
    the factory, so callers can be handed a mock in tests.

    Usage:
        service = TranslationService()
        result = service.resolve("greetings.formal", Language.ES)
        if result.is_success:
            print(result.data)
    """

    def __init__(self, translator: Optional[Translator] = None):
        """Initialize translation service.

        Args:
            translator: Optional pre-configured Translator instance.
                If not provided, uses the cached one from the factory.
        """
        self._translator = translator or get_translator()

    def resolve(
        self,
        path: PathLike,
        language: LanguageLike,
        variables: Optional[Dict[str, Any]] = None,
    ) -> OperationResult:
        """Resolve and render a translation, returning failures as values."""
        return self._translator.resolve(path, language, variables)

    def translate(
        self,
        path: PathLike,
        language: LanguageLike,
        variables: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Resolve and render a translation.

        Raises:
            LanguageError, TranslationNotFoundError, LanguageUnavailableError
        """
        return self._translator.translate(path, language, variables)

    def find_path(self, path: PathLike) -> Translation:
        return self._translator.find_path(path)

    def has_translation(self, path: PathLike, language: LanguageLike) -> bool:
        return self._translator.has_translation(path, language)

    def get_available_languages(self, path: PathLike) -> List[Language]:
        return self._translator.get_available_languages(path)

    @property
    def translator(self) -> Translator:
        """Access underlying Translator instance."""
        return self._translator
