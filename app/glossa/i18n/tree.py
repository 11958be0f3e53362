"""The merged translation tree.

Built once by TranslationTreeBuilder and read-only afterwards, so it can be
shared between threads without locking.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Set, Tuple

from glossa.i18n.errors import BranchError
from glossa.i18n.languages import Language
from glossa.i18n.nodes import Nesting, PathLike, Translation, TranslationNode
from glossa.i18n.templating import TemplateString


@dataclass
class TranslationTree:
    """Root of every translation from every configured source.

    Attributes:
        root: The root nesting.
        unmounted: (source, node) pairs registered at the root that are not
            nestings and therefore could not be merged into it.
    """

    root: Nesting = field(default_factory=Nesting)
    unmounted: List[Tuple[Optional[str], TranslationNode]] = field(
        default_factory=list
    )

    def find_path(self, path: PathLike) -> Translation:
        """Resolve a path to its Translation.

        Args:
            path: Dotted string or sequence of segments.

        Returns:
            The Translation at that path.

        Raises:
            TranslationNotFoundError: See TranslationNode.find_path().
        """
        return self.root.find_path(path)

    def get(self, path: PathLike, language: Language) -> Optional[TemplateString]:
        """Resolve a path and pick a language, None if the language is missing.

        Raises:
            TranslationNotFoundError: If the path does not resolve.
        """
        return self.find_path(path).get(language)

    def languages(self) -> Set[Language]:
        """Every language used by at least one translation."""
        return self.root.languages()

    def broken_branches(self) -> Iterator[Tuple[Tuple[str, ...], BranchError]]:
        """Yield (path, error) for every broken branch in the tree."""
        return self.root.broken_branches()
