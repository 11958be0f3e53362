"""Translation resolution and rendering.

Ties the tree lookup, the language selection and the template substitution
together behind a single call.
"""

from typing import Any, Dict, List, Optional, Union

from glossa.i18n.errors import (
    BrokenBranchError,
    GlossaError,
    LanguageError,
    LanguageUnavailableError,
)
from glossa.i18n.languages import Language
from glossa.i18n.nodes import PathLike, Translation, normalize_path
from glossa.i18n.templating import TemplateString
from glossa.i18n.tree import TranslationTree
from glossa.logging import get_module_logger
from glossa.operations import OperationResult

logger = get_module_logger()

LanguageLike = Union[Language, str]


def _as_language(language: LanguageLike) -> Language:
    if isinstance(language, Language):
        return language
    return Language.from_string(language)


class Translator:
    """Resolves paths to rendered text from a TranslationTree.

    Attributes:
        tree: The merged TranslationTree.
        fallback_language: Language used when a translation lacks the
            requested one.
        fallback_translation: Text returned by resolve() when nothing
            could be resolved.
    """

    def __init__(
        self,
        tree: TranslationTree,
        fallback_language: Optional[Language] = None,
        fallback_translation: Optional[str] = None,
    ):
        self.tree = tree
        self.fallback_language = fallback_language
        self.fallback_translation = fallback_translation
        logger.info(
            "initialized_translator",
            fallback_language=fallback_language.value if fallback_language else None,
            has_fallback_translation=fallback_translation is not None,
        )

    def find_path(self, path: PathLike) -> Translation:
        """Resolve a path to its Translation.

        Raises:
            TranslationNotFoundError: If the path does not lead to a translation.
        """
        return self.tree.find_path(path)

    def get_template(self, path: PathLike, language: LanguageLike) -> TemplateString:
        """Resolve a path and select the template for a language.

        Falls back to ``fallback_language`` when the translation does not
        provide the requested language.

        Args:
            path: Dotted string or sequence of segments.
            language: Language or language identifier.

        Returns:
            The TemplateString to render.

        Raises:
            LanguageError: If language is an unknown identifier.
            TranslationNotFoundError: If the path does not lead to a translation.
            LanguageUnavailableError: If neither the requested nor the
                fallback language is available.
        """
        language = _as_language(language)
        translation = self.find_path(path)

        template = translation.get(language)
        if template is not None:
            return template

        if self.fallback_language is not None and self.fallback_language != language:
            template = translation.get(self.fallback_language)
            if template is not None:
                logger.info(
                    "used_fallback_language",
                    path=".".join(normalize_path(path)),
                    requested_language=language.value,
                    fallback_language=self.fallback_language.value,
                )
                return template

        raise LanguageUnavailableError(
            normalize_path(path), language, translation.available_languages()
        )

    def translate(
        self,
        path: PathLike,
        language: LanguageLike,
        variables: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Resolve and render a translation, raising on failure.

        Args:
            path: Dotted string or sequence of segments.
            language: Language or language identifier.
            variables: Values for the template placeholders. Missing values
                leave the placeholder as written.

        Returns:
            Rendered text.

        Raises:
            LanguageError, TranslationNotFoundError, LanguageUnavailableError
        """
        return self.get_template(path, language).replace_with(variables)

    def resolve(
        self,
        path: PathLike,
        language: LanguageLike,
        variables: Optional[Dict[str, Any]] = None,
    ) -> OperationResult:
        """Resolve and render a translation, returning failures as values.

        Args:
            path: Dotted string or sequence of segments.
            language: Language or language identifier.
            variables: Values for the template placeholders.

        Returns:
            OperationResult with the rendered text in ``data`` on success.
            On failure ``data`` holds the error and ``error_code`` its code;
            broken sources and invalid languages are PERMANENT_ERROR, missing
            content is NOT_FOUND. With a fallback_translation configured,
            failures resolve to it instead.
        """
        try:
            return OperationResult.success(data=self.translate(path, language, variables))
        except GlossaError as error:
            logger.warning(
                "translation_not_resolved",
                path=".".join(normalize_path(path)),
                language=str(getattr(language, "value", language)),
                error_code=error.error_code,
                error=str(error),
            )

            if self.fallback_translation is not None:
                return OperationResult.success(
                    data=self.fallback_translation, message="fallback_translation"
                )

            if isinstance(error, (BrokenBranchError, LanguageError)):
                return OperationResult.permanent_error(
                    str(error), error_code=error.error_code, data=error
                )
            return OperationResult.not_found(
                str(error), error_code=error.error_code, data=error
            )

    def has_translation(self, path: PathLike, language: LanguageLike) -> bool:
        """Check if a path resolves and provides the given language.

        The fallback language is not considered.
        """
        try:
            return self.find_path(path).language_available(_as_language(language))
        except GlossaError:
            return False

    def get_available_languages(self, path: PathLike) -> List[Language]:
        """Languages a translation is written in.

        Raises:
            TranslationNotFoundError: If the path does not lead to a translation.
        """
        return self.find_path(path).available_languages()
