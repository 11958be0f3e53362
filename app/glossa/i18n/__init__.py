"""i18n system - translation trees, languages and templates.

Resolves a segmented key path and a language to a template string drawn
from translation sources merged into one tree, with placeholders
substituted by caller values.

Main components:
- languages: Language (ISO 639-1 catalog)
- templating: TemplateString placeholder parsing and substitution
- nodes: TranslationNode variants (Nesting, Leaf, BrokenBranch) and Translation
- builder: TranslationTreeBuilder merging sources into a TranslationTree
- loader: TranslationLoader and YAMLTranslationLoader
- translator: Translator resolving and rendering paths
- factory: cached tree/translator construction from settings
"""

from glossa.i18n.builder import TranslationTreeBuilder
from glossa.i18n.errors import (
    BranchError,
    BrokenBranchError,
    EmptyTableError,
    GlossaError,
    InvalidPlaceholderError,
    InvalidValueError,
    LanguageError,
    LanguageUnavailableError,
    MixedNestingError,
    NodeError,
    PathLeadsToNestingError,
    PathPastLeafError,
    SegmentNotFoundError,
    SourceReadError,
    TemplateError,
    TranslationNotFoundError,
    UnclosedBraceError,
)
from glossa.i18n.factory import (
    build_tree,
    create_translator,
    get_translation_tree,
    get_translator,
    invalidate_translation_cache,
)
from glossa.i18n.languages import Language
from glossa.i18n.loader import TranslationLoader, YAMLTranslationLoader
from glossa.i18n.nodes import (
    BrokenBranch,
    Leaf,
    Nesting,
    Translation,
    TranslationNode,
    parse_document,
)
from glossa.i18n.service import TranslationService
from glossa.i18n.templating import Placeholder, TemplateString
from glossa.i18n.translator import Translator
from glossa.i18n.tree import TranslationTree

__all__ = [
    # Languages and templates
    "Language",
    "Placeholder",
    "TemplateString",
    # Tree
    "Translation",
    "TranslationNode",
    "Nesting",
    "Leaf",
    "BrokenBranch",
    "parse_document",
    "TranslationTree",
    "TranslationTreeBuilder",
    # Loading and resolution
    "TranslationLoader",
    "YAMLTranslationLoader",
    "Translator",
    "TranslationService",
    "build_tree",
    "create_translator",
    "get_translation_tree",
    "get_translator",
    "invalidate_translation_cache",
    # Errors
    "GlossaError",
    "LanguageError",
    "TemplateError",
    "UnclosedBraceError",
    "InvalidPlaceholderError",
    "NodeError",
    "MixedNestingError",
    "InvalidValueError",
    "EmptyTableError",
    "SourceReadError",
    "BranchError",
    "TranslationNotFoundError",
    "SegmentNotFoundError",
    "PathPastLeafError",
    "PathLeadsToNestingError",
    "BrokenBranchError",
    "LanguageUnavailableError",
]
