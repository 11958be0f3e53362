"""Translation tree builder.

Collects translation sources, each mounted at a path, and merges them into
a single TranslationTree. Sources are processed in the configured SeekMode
order and collisions are settled by the configured OverlapPolicy:

- OVERWRITE: the source processed last wins.
- IGNORE: the source processed first wins.

So with the default alphabetical order and OVERWRITE, files later in
alphabetical order override earlier ones.

Sources that failed as a whole (unreadable files, documents whose top level
is not a nesting) are weak: they are placed after every other source and
only where no other source provides content, so a broken file never hides
translations that came from elsewhere.
"""

from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Tuple

from glossa.configuration import OverlapPolicy, SeekMode
from glossa.i18n.errors import BranchError, GlossaError
from glossa.i18n.nodes import (
    BrokenBranch,
    Nesting,
    TranslationNode,
    normalize_path,
    parse_document,
)
from glossa.i18n.tree import TranslationTree
from glossa.logging import get_module_logger

logger = get_module_logger()


@dataclass(frozen=True)
class SourceRegistration:
    """A source waiting to be merged.

    Exactly one of ``document`` and ``node`` is set.

    Attributes:
        segments: Path the source is mounted at (empty for the root).
        source: Source identifier used for ordering and diagnostics.
        document: Generic document to parse at build time.
        node: Already parsed node.
        fallback_segments: Where a root document that does not parse to a
            nesting is mounted instead, as a weak source.
        weak: Only fill a path no other source provides.
    """

    segments: Tuple[str, ...]
    source: Optional[str]
    document: Any = None
    node: Optional[TranslationNode] = None
    fallback_segments: Optional[Tuple[str, ...]] = None
    weak: bool = False

    @property
    def sort_key(self) -> str:
        return (self.source or "").lower()

    def to_node(self) -> TranslationNode:
        if self.node is not None:
            return self.node
        return parse_document(self.document, self.source)


class TranslationTreeBuilder:
    """Write-only accumulator of translation sources.

    ``build()`` consumes the builder; register every source first.

    Attributes:
        seek_mode: Processing order of the sources.
        overlap: Conflict policy between sources.
    """

    def __init__(
        self,
        seek_mode: SeekMode = SeekMode.ALPHABETICAL,
        overlap: OverlapPolicy = OverlapPolicy.OVERWRITE,
    ):
        self.seek_mode = seek_mode
        self.overlap = overlap
        self._registrations: List[SourceRegistration] = []
        self._consumed = False

    def add_document(
        self,
        segments: Iterable[str],
        document: Any,
        source: Optional[str] = None,
        fallback_segments: Optional[Iterable[str]] = None,
    ) -> "TranslationTreeBuilder":
        """Register a generic document (e.g. a parsed YAML file).

        Args:
            segments: Path to mount the document at, empty for the root.
            document: Table of strings and nested tables.
            source: Source identifier, usually the file path.
            fallback_segments: For root documents, where to mount the result
                when it is not a nesting (a bare translation or a document
                broken at its top level). Without it such results are kept
                in ``TranslationTree.unmounted``.

        Returns:
            The builder, for chaining.
        """
        if fallback_segments is not None:
            fallback_segments = normalize_path(fallback_segments)

        return self._register(
            SourceRegistration(
                normalize_path(segments),
                source,
                document=document,
                fallback_segments=fallback_segments,
            )
        )

    def add_node(
        self,
        segments: Iterable[str],
        node: TranslationNode,
        source: Optional[str] = None,
    ) -> "TranslationTreeBuilder":
        """Register an already parsed node."""
        return self._register(
            SourceRegistration(normalize_path(segments), source, node=node)
        )

    def add_error(
        self,
        segments: Iterable[str],
        error: GlossaError,
        source: Optional[str] = None,
    ) -> "TranslationTreeBuilder":
        """Register a source that is known to be broken.

        The error is stored as a broken branch at ``segments`` so that
        lookups through it report the failure. The branch is weak: if
        another source provides anything at ``segments`` the error is kept
        in ``TranslationTree.unmounted`` instead.
        """
        if not isinstance(error, BranchError):
            error = BranchError(error, source=source)
        return self._register(
            SourceRegistration(
                normalize_path(segments), source, node=BrokenBranch(error), weak=True
            )
        )

    def _register(self, registration: SourceRegistration) -> "TranslationTreeBuilder":
        if self._consumed:
            raise RuntimeError("TranslationTreeBuilder was already built")

        self._registrations.append(registration)
        logger.debug(
            "source_registered",
            source=registration.source,
            segments=list(registration.segments),
            weak=registration.weak,
        )
        return self

    def processing_order(self) -> List[SourceRegistration]:
        """Registrations in the order they will be merged.

        Sorted by source identifier ignoring case, reversed for
        SeekMode.UNALPHABETICAL. build() places weak sources after all
        the others, keeping this order.
        """
        ordered = sorted(self._registrations, key=lambda r: r.sort_key)
        if self.seek_mode is SeekMode.UNALPHABETICAL:
            ordered.reverse()
        return ordered

    def build(self) -> TranslationTree:
        """Merge every registered source into a TranslationTree.

        Malformed sources become broken branches, this never raises for
        bad content.

        Returns:
            The merged TranslationTree.

        Raises:
            RuntimeError: If the builder was already built.
        """
        if self._consumed:
            raise RuntimeError("TranslationTreeBuilder was already built")
        self._consumed = True

        tree = TranslationTree()
        weak: List[Tuple[Tuple[str, ...], SourceRegistration, TranslationNode]] = []

        for registration in self.processing_order():
            node = _detach(registration.to_node())

            for path, error in node.broken_branches():
                logger.warning(
                    "branch_broken",
                    source=registration.source,
                    path=".".join((*registration.segments, *path)),
                    error_code=error.cause.error_code,
                    error=str(error.cause),
                )

            if registration.weak:
                weak.append((registration.segments, registration, node))
            elif not registration.segments and not isinstance(node, Nesting):
                if registration.fallback_segments:
                    weak.append((registration.fallback_segments, registration, node))
                else:
                    self._unmount(
                        tree,
                        registration.source,
                        node,
                        "only nestings can be mounted at the root",
                    )
            else:
                self._insert(tree, registration.segments, node, registration.source)

        for segments, registration, node in weak:
            self._insert_weak(tree, segments, node, registration.source)

        self._registrations = []
        logger.info(
            "translation_tree_built",
            root_keys=len(tree.root.children),
            unmounted=len(tree.unmounted),
            seek_mode=self.seek_mode.value,
            overlap=self.overlap.value,
        )
        return tree

    def _insert(
        self,
        tree: TranslationTree,
        segments: Tuple[str, ...],
        node: TranslationNode,
        source: Optional[str],
    ) -> None:
        if not segments:
            for key, child in node.children.items():
                self._place(tree.root, key, child, (key,), source)
            return

        cursor = tree.root
        for index, segment in enumerate(segments[:-1]):
            existing = cursor.children.get(segment)
            if existing is None or (
                not isinstance(existing, Nesting)
                and self.overlap is OverlapPolicy.OVERWRITE
            ):
                if existing is not None:
                    self._log_conflict(segments[: index + 1], source, True)
                existing = cursor.children[segment] = Nesting()
            elif not isinstance(existing, Nesting):
                self._log_conflict(segments[: index + 1], source, False)
                return
            cursor = existing

        self._place(cursor, segments[-1], node, segments, source)

    def _insert_weak(
        self,
        tree: TranslationTree,
        segments: Tuple[str, ...],
        node: TranslationNode,
        source: Optional[str],
    ) -> None:
        if not segments:
            self._unmount(
                tree, source, node, "only nestings can be mounted at the root"
            )
            return

        cursor = tree.root
        for segment in segments[:-1]:
            existing = cursor.children.get(segment)
            if existing is None:
                existing = cursor.children[segment] = Nesting()
            elif not isinstance(existing, Nesting):
                self._unmount(tree, source, node, "path provided by another source")
                return
            cursor = existing

        if segments[-1] in cursor.children:
            self._unmount(tree, source, node, "path provided by another source")
            return
        cursor.children[segments[-1]] = node

    def _place(
        self,
        parent: Nesting,
        key: str,
        node: TranslationNode,
        path: Tuple[str, ...],
        source: Optional[str],
    ) -> None:
        existing = parent.children.get(key)

        if existing is None:
            parent.children[key] = node
        elif isinstance(existing, Nesting) and isinstance(node, Nesting):
            for child_key, child in node.children.items():
                self._place(existing, child_key, child, (*path, child_key), source)
        elif self.overlap is OverlapPolicy.OVERWRITE:
            self._log_conflict(path, source, True)
            parent.children[key] = node
        else:
            self._log_conflict(path, source, False)

    def _unmount(
        self,
        tree: TranslationTree,
        source: Optional[str],
        node: TranslationNode,
        reason: str,
    ) -> None:
        tree.unmounted.append((source, node))
        logger.warning("source_not_mounted", source=source, reason=reason)

    def _log_conflict(
        self, path: Tuple[str, ...], source: Optional[str], replaced: bool
    ) -> None:
        logger.debug(
            "translation_overlap",
            path=".".join(path),
            source=source,
            action="overwritten" if replaced else "ignored",
        )


def _detach(node: TranslationNode) -> TranslationNode:
    """Copy the nesting structure so merging never mutates registered nodes."""
    if isinstance(node, Nesting):
        return Nesting({key: _detach(child) for key, child in node.children.items()})
    return node
