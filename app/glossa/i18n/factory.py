"""Factory functions for creating i18n components.

Builds the translation tree from settings and keeps a process-wide copy of
it. The tree is built at most once: concurrent first callers wait on a lock
and every caller gets the same instance until the cache is invalidated.
"""

import threading
from pathlib import Path
from typing import Optional

from glossa.configuration import TranslationSettings, settings
from glossa.i18n.builder import TranslationTreeBuilder
from glossa.i18n.languages import Language
from glossa.i18n.loader import TranslationLoader, YAMLTranslationLoader
from glossa.i18n.translator import Translator
from glossa.i18n.tree import TranslationTree
from glossa.logging import get_module_logger

logger = get_module_logger()

_translation_tree: Optional[TranslationTree] = None
_translator: Optional[Translator] = None
_cache_lock = threading.Lock()


def build_tree(
    translation_settings: Optional[TranslationSettings] = None,
    loader: Optional[TranslationLoader] = None,
) -> TranslationTree:
    """Load every translation source and build a TranslationTree.

    Args:
        translation_settings: Settings to use (default: settings.translations).
        loader: Loader to read sources with (default: a YAMLTranslationLoader
            over LOCALES_PATH).

    Returns:
        The merged TranslationTree.

    Raises:
        ValueError: If LOCALES_PATH does not exist.
    """
    translation_settings = translation_settings or settings.translations

    if loader is None:
        loader = YAMLTranslationLoader(Path(translation_settings.LOCALES_PATH))

    builder = TranslationTreeBuilder(
        seek_mode=translation_settings.SEEK_MODE,
        overlap=translation_settings.TRANSLATION_OVERLAP,
    )
    loader.load_into(builder)
    return builder.build()


def create_translator(
    translation_settings: Optional[TranslationSettings] = None,
    tree: Optional[TranslationTree] = None,
) -> Translator:
    """Create a Translator configured from settings.

    Args:
        translation_settings: Settings to use (default: settings.translations).
        tree: Tree to resolve against (default: built with build_tree()).

    Returns:
        Translator: Configured translator instance

    Raises:
        LanguageError: If FALLBACK_LANGUAGE is not a valid language.
        ValueError: If LOCALES_PATH does not exist.

    Usage:
        # Use defaults (settings.translations)
        translator = create_translator()

        # Custom settings
        translator = create_translator(
            TranslationSettings(LOCALES_PATH="/custom/translations")
        )
    """
    translation_settings = translation_settings or settings.translations

    fallback_language = None
    if translation_settings.FALLBACK_LANGUAGE:
        fallback_language = Language.from_string(translation_settings.FALLBACK_LANGUAGE)

    if tree is None:
        tree = build_tree(translation_settings)

    return Translator(
        tree,
        fallback_language=fallback_language,
        fallback_translation=translation_settings.FALLBACK_TRANSLATION,
    )


def _cached_tree_locked() -> TranslationTree:
    """Return the cached tree, building it first if needed.

    The caller must hold ``_cache_lock``.
    """
    global _translation_tree

    if _translation_tree is None:
        _translation_tree = build_tree()
        logger.debug("global_translation_tree_initialized")
    return _translation_tree


def get_translation_tree() -> TranslationTree:
    """Get the process-wide TranslationTree, building it on first use.

    Thread-safe: the tree is built once and shared by every caller.

    Returns:
        The cached TranslationTree.
    """
    tree = _translation_tree
    if tree is None:
        with _cache_lock:
            # Double-check locking pattern
            tree = _cached_tree_locked()

    return tree


def get_translator() -> Translator:
    """Get the process-wide Translator over the cached TranslationTree.

    The translator and the tree it reads are taken under one lock, so an
    invalidation can never leave a translator bound to a dropped tree.

    Returns:
        The cached Translator.
    """
    global _translator

    translator = _translator
    if translator is None:
        with _cache_lock:
            if _translator is None:
                _translator = create_translator(tree=_cached_tree_locked())
                logger.debug("global_translator_initialized")
            translator = _translator

    return translator


def invalidate_translation_cache() -> None:
    """Drop the cached tree and translator; the next call rebuilds them."""
    global _translation_tree, _translator

    with _cache_lock:
        _translation_tree = None
        _translator = None
    logger.info("translation_cache_invalidated")
