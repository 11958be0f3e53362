"""Error types for the i18n system.

Construction errors (languages, templates, nodes) are raised while parsing
translation sources, resolution errors are raised while walking a tree.
Every error exposes a stable ``error_code`` for structured results.
"""

from typing import TYPE_CHECKING, Iterable, Optional, Sequence, Tuple

if TYPE_CHECKING:
    from glossa.i18n.languages import Language


def format_path(segments: Sequence[str]) -> str:
    """Join path segments for display (e.g., "common.greeting")."""
    return ".".join(segments)


class GlossaError(Exception):
    """Base class for every glossa error."""

    error_code = "glossa_error"


class LanguageError(GlossaError, ValueError):
    """A language identifier could not be parsed.

    Attributes:
        attempt: The text that failed to parse.
        closest: Closest known identifier, if any.
    """

    error_code = "invalid_language"

    def __init__(self, attempt: str, closest: Optional[str] = None):
        self.attempt = attempt
        self.closest = closest

        message = f'"{attempt}" is not a valid language'
        if closest is not None:
            message += f', perhaps you meant "{closest}"?'
        else:
            message += "."
        super().__init__(message)


class TemplateError(GlossaError, ValueError):
    """A template string could not be parsed."""

    error_code = "invalid_template"


class UnclosedBraceError(TemplateError):
    """An opening brace was never closed.

    Attributes:
        index: Byte offset of the dangling brace in the template.
    """

    error_code = "unclosed_brace"

    def __init__(self, index: int):
        self.index = index
        super().__init__(f"Found unclosed brace at index {index}")


class InvalidPlaceholderError(TemplateError):
    """A placeholder key is not a valid identifier.

    Attributes:
        key: The offending placeholder key.
    """

    error_code = "invalid_placeholder"

    def __init__(self, key: str):
        self.key = key
        super().__init__(
            f"Found template with key '{key}' which is an invalid identifier"
        )


class NodeError(GlossaError, ValueError):
    """A document table does not follow the translation file rules."""

    error_code = "invalid_node"


class MixedNestingError(NodeError):
    """A table mixes translation strings and nested tables."""

    error_code = "mixed_nesting"

    def __init__(self, key: Optional[str] = None):
        self.key = key
        message = "A nesting can contain either strings or other nestings, but not both"
        if key is not None:
            message += f" (found conflicting entry '{key}')"
        super().__init__(message + ".")


class InvalidValueError(NodeError):
    """A table contains something other than strings or tables."""

    error_code = "invalid_value"

    def __init__(self, key: Optional[str] = None, kind: Optional[str] = None):
        self.key = key
        self.kind = kind
        message = "Only strings and tables are allowed in translation files"
        if key is not None:
            message += f", found {kind or 'another value'} at '{key}'"
        super().__init__(message + ".")


class EmptyTableError(NodeError):
    """An empty table cannot be told apart as a nesting or a translation."""

    error_code = "empty_table"

    def __init__(self):
        super().__init__(
            "Found an empty table, can't infer whether it's a translation or a nesting."
        )


class SourceReadError(NodeError):
    """A translation source could not be read or parsed.

    Attributes:
        reason: Description of the underlying IO or parse failure.
    """

    error_code = "unreadable_source"

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Couldn't read translation source: {reason}")


class BranchError(GlossaError):
    """Stored construction error for a branch that failed to parse.

    Attributes:
        cause: The construction error (language, template or node error).
        source: Identifier of the source the branch came from, if known.
        location: Keys leading to the failing table inside the source.
    """

    error_code = "broken_branch"

    def __init__(
        self,
        cause: GlossaError,
        source: Optional[str] = None,
        location: Iterable[str] = (),
    ):
        self.cause = cause
        self.source = source
        self.location: Tuple[str, ...] = tuple(location)
        self.__cause__ = cause

        message = str(cause)
        if source is not None and self.location:
            message += f"\nAt {source}:{format_path(self.location)}."
        elif source is not None:
            message += f"\nAt {source}."
        elif self.location:
            message += f"\nAt {format_path(self.location)}."
        super().__init__(message)


class TranslationNotFoundError(GlossaError, LookupError):
    """A path could not be resolved to a translation.

    Attributes:
        consumed: Segments successfully walked before the failure.
    """

    error_code = "translation_not_found"

    def __init__(self, message: str, consumed: Iterable[str] = ()):
        self.consumed: Tuple[str, ...] = tuple(consumed)
        super().__init__(message)


class SegmentNotFoundError(TranslationNotFoundError):
    """A segment does not name a child of the namespace it was looked up in.

    Attributes:
        segment: The segment that was not found.
        closest: Closest sibling key at that namespace, if any.
    """

    error_code = "segment_not_found"

    def __init__(
        self,
        consumed: Iterable[str],
        segment: str,
        closest: Optional[str] = None,
    ):
        consumed = tuple(consumed)
        self.segment = segment
        self.closest = closest

        where = format_path(consumed) if consumed else "the root namespace"
        message = f'"{segment}" does not exist in "{where}"'
        if closest is not None:
            message += f', perhaps you meant "{closest}"?'
        else:
            message += "."
        super().__init__(message, consumed)


class PathPastLeafError(TranslationNotFoundError):
    """The path continues after reaching a translation.

    Attributes:
        segment: The first segment past the translation.
    """

    error_code = "path_past_translation"

    def __init__(self, consumed: Iterable[str], segment: str):
        consumed = tuple(consumed)
        self.segment = segment
        super().__init__(
            f'Attempted to access "{segment}" at "{format_path(consumed)}", '
            f'but "{format_path(consumed)}" leads to a translation and not a nesting.',
            consumed,
        )


class PathLeadsToNestingError(TranslationNotFoundError):
    """The path ends at a namespace instead of a translation."""

    error_code = "path_leads_to_nesting"

    def __init__(self, consumed: Iterable[str]):
        consumed = tuple(consumed)
        where = format_path(consumed) if consumed else "the root namespace"
        super().__init__(
            f'The path "{where}" is incomplete, it leads to a nesting, '
            "not a translation.",
            consumed,
        )


class BrokenBranchError(TranslationNotFoundError):
    """The path runs into a branch that failed to parse.

    Attributes:
        error: The stored BranchError of that branch.
    """

    error_code = "broken_branch"

    def __init__(self, consumed: Iterable[str], error: BranchError):
        self.error = error
        self.__cause__ = error
        super().__init__(
            "This node is not accessible because an error occurred while "
            f"parsing it.\n{error}",
            consumed,
        )


class LanguageUnavailableError(GlossaError, LookupError):
    """A translation exists but not in the requested language.

    Attributes:
        path: Segments of the resolved translation.
        language: The requested language.
        available: Languages the translation does provide.
    """

    error_code = "language_unavailable"

    def __init__(
        self,
        path: Iterable[str],
        language: "Language",
        available: Iterable["Language"] = (),
    ):
        self.path: Tuple[str, ...] = tuple(path)
        self.language = language
        self.available: Tuple["Language", ...] = tuple(available)
        super().__init__(
            f"The language '{language.value}' ('{language.display()}') is not "
            f"available for the path '{format_path(self.path)}'."
        )
