"""Translation tree nodes.

A translation document is a tree of tables. Each table is either a nesting
(every value is another table) or a translation (every value is a string
keyed by a language). Both shapes, plus a sentinel for branches that failed
to parse, are modelled as the closed set of TranslationNode variants below.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, Mapping, Optional, Set, Tuple, Union

from glossa.i18n.distance import closest_match
from glossa.i18n.errors import (
    BranchError,
    BrokenBranchError,
    EmptyTableError,
    GlossaError,
    InvalidValueError,
    MixedNestingError,
    PathLeadsToNestingError,
    PathPastLeafError,
    SegmentNotFoundError,
)
from glossa.i18n.languages import Language
from glossa.i18n.templating import TemplateString

PathLike = Union[str, Iterable[str]]


def normalize_path(path: PathLike) -> Tuple[str, ...]:
    """Turn a dotted string or an iterable of segments into a segment tuple.

    Args:
        path: "common.greeting" or ["common", "greeting"].

    Returns:
        Tuple of path segments. An empty string yields an empty tuple.
    """
    if isinstance(path, str):
        return tuple(path.split(".")) if path else ()
    return tuple(str(segment) for segment in path)


@dataclass
class Translation:
    """One translatable string in every language it was written in.

    Missing languages are expected; use ``get()`` or
    ``language_available()`` before rendering.

    Attributes:
        templates: Mapping of Language to its TemplateString.
    """

    templates: Dict[Language, TemplateString] = field(default_factory=dict)

    def get(self, language: Language) -> Optional[TemplateString]:
        """Get the template for a language, or None if not provided."""
        return self.templates.get(language)

    def language_available(self, language: Language) -> bool:
        return language in self.templates

    def available_languages(self) -> list:
        """Languages this translation is written in, in document order."""
        return list(self.templates)

    def __len__(self) -> int:
        return len(self.templates)

    def __contains__(self, language: object) -> bool:
        return language in self.templates


class TranslationNode:
    """Base class for the translation tree variants.

    Subclasses: Nesting, Leaf and BrokenBranch. Nothing else derives from it.
    """

    @classmethod
    def from_document(cls, table: Mapping[str, Any]) -> "TranslationNode":
        """Parse a document table, raising on the first problem.

        Args:
            table: Generic document table (strings, tables, other values).

        Returns:
            A Nesting or a Leaf.

        Raises:
            MixedNestingError: If a table mixes strings and tables.
            InvalidValueError: If a value is neither a string nor a table.
            EmptyTableError: If a table has no entries.
            LanguageError: If a translation key is not a valid language.
            TemplateError: If a translation string is not a valid template.
        """
        return _parse_table(table, (), None, tolerant=False)

    def find_path(self, segments: PathLike) -> Translation:
        """Walk the tree following ``segments``.

        Args:
            segments: Path segments, or a dotted string.

        Returns:
            The Translation at the end of the path.

        Raises:
            SegmentNotFoundError: A segment is missing from a nesting. Carries
                the closest sibling key at that nesting.
            PathPastLeafError: The path continues after a translation.
            PathLeadsToNestingError: The path ends at a nesting.
            BrokenBranchError: The path runs into a branch that failed to parse.
        """
        consumed = []
        node = self

        for segment in normalize_path(segments):
            match node:
                case Nesting(children=children):
                    child = children.get(segment)
                    if child is None:
                        raise SegmentNotFoundError(
                            consumed, segment, closest_match(segment, children)
                        )
                    consumed.append(segment)
                    node = child
                case Leaf():
                    raise PathPastLeafError(consumed, segment)
                case BrokenBranch(error=error):
                    raise BrokenBranchError(consumed, error)

        match node:
            case Leaf(translation=translation):
                return translation
            case BrokenBranch(error=error):
                raise BrokenBranchError(consumed, error)
            case _:
                raise PathLeadsToNestingError(consumed)

    def languages(self) -> Set[Language]:
        """Every language available somewhere below this node."""
        return set()

    def broken_branches(self) -> Iterator[Tuple[Tuple[str, ...], BranchError]]:
        """Yield (path, error) for every broken branch below this node."""
        return iter(())


@dataclass
class Nesting(TranslationNode):
    """Namespace grouping named child nodes."""

    children: Dict[str, TranslationNode] = field(default_factory=dict)

    def languages(self) -> Set[Language]:
        result: Set[Language] = set()
        for child in self.children.values():
            result |= child.languages()
        return result

    def broken_branches(self) -> Iterator[Tuple[Tuple[str, ...], BranchError]]:
        for name, child in self.children.items():
            for path, error in child.broken_branches():
                yield (name, *path), error


@dataclass
class Leaf(TranslationNode):
    """A translation object."""

    translation: Translation

    def languages(self) -> Set[Language]:
        return set(self.translation.templates)


@dataclass
class BrokenBranch(TranslationNode):
    """A branch replaced by the error raised while parsing it."""

    error: BranchError

    def broken_branches(self) -> Iterator[Tuple[Tuple[str, ...], BranchError]]:
        yield (), self.error


def parse_document(
    table: Any,
    source: Optional[str] = None,
) -> TranslationNode:
    """Parse a document table, isolating failures in broken branches.

    Unlike ``TranslationNode.from_document()`` this never raises for a
    malformed document: the table that failed is replaced by a
    BrokenBranch and its siblings are kept.

    Args:
        table: Generic document table.
        source: Identifier of the document (usually its file path).

    Returns:
        A Nesting, a Leaf or a BrokenBranch.
    """
    return _parse_child(table, (), source, tolerant=True)


def _parse_child(
    value: Any,
    location: Tuple[str, ...],
    source: Optional[str],
    tolerant: bool,
) -> TranslationNode:
    if not tolerant:
        return _parse_table(value, location, source, tolerant)

    try:
        return _parse_table(value, location, source, tolerant)
    except GlossaError as error:
        return BrokenBranch(BranchError(error, source=source, location=location))


def _parse_table(
    table: Any,
    location: Tuple[str, ...],
    source: Optional[str],
    tolerant: bool,
) -> TranslationNode:
    if not isinstance(table, Mapping):
        raise InvalidValueError(
            ".".join(location) or "<document>", type(table).__name__
        )

    children: Dict[str, TranslationNode] = {}
    templates: Dict[Language, TemplateString] = {}
    shape = None

    for key, value in table.items():
        key = str(key)

        if isinstance(value, str):
            if shape is Nesting:
                raise MixedNestingError(key)
            shape = Leaf
            templates[Language.from_string(key)] = TemplateString.parse(value)

        elif isinstance(value, Mapping):
            if shape is Leaf:
                raise MixedNestingError(key)
            shape = Nesting
            children[key] = _parse_child(value, (*location, key), source, tolerant)

        else:
            raise InvalidValueError(key, type(value).__name__)

    if shape is None:
        raise EmptyTableError()

    if shape is Leaf:
        return Leaf(Translation(templates))
    return Nesting(children)
