"""Template strings with named placeholders.

A template is parsed once into its original text plus the byte spans of
every ``{placeholder}``. Substitution splices values into those spans
without re-scanning the text, so escaped ``{{...}}`` sequences are never
touched.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple

from glossa.i18n.errors import InvalidPlaceholderError, UnclosedBraceError


@dataclass(frozen=True)
class Placeholder:
    """A placeholder occurrence in a template.

    Attributes:
        key: Placeholder name (a valid identifier).
        start: Byte offset of the opening brace in the UTF-8 original.
        end: Byte offset just past the closing brace.
    """

    key: str
    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class TemplateString:
    """Parsed template keeping the original text aligned with its spans.

    Frozen to keep ``original`` and ``spans`` aligned and the instance
    hashable. Build instances with ``parse()``.

    Attributes:
        original: The unmodified template text.
        spans: Placeholder spans in order of appearance, never overlapping.
    """

    original: str
    spans: Tuple[Placeholder, ...] = ()

    @classmethod
    def parse(cls, raw: str) -> "TemplateString":
        """Parse a raw string into a TemplateString.

        ``{name}`` is a placeholder. ``{{`` cancels a pending opening brace,
        so ``{{name}}`` is kept literally. A ``}`` with no pending brace is
        plain text.

        Args:
            raw: Template text.

        Returns:
            Parsed TemplateString.

        Raises:
            InvalidPlaceholderError: If a placeholder key is not a valid identifier.
            UnclosedBraceError: If an opening brace is never closed.
        """
        spans = []
        open_byte: Optional[int] = None
        open_char: Optional[int] = None
        key_chars = []
        byte_offset = 0

        for char_index, char in enumerate(raw):
            if char == "{":
                if open_char is not None and open_char == char_index - 1:
                    # "{{" escape
                    open_byte = None
                    open_char = None
                else:
                    open_byte = byte_offset
                    open_char = char_index
                    key_chars = []
            elif char == "}" and open_byte is not None:
                key = "".join(key_chars)
                if not key.isidentifier():
                    raise InvalidPlaceholderError(key)

                spans.append(Placeholder(key, open_byte, byte_offset + 1))
                open_byte = None
                open_char = None
            elif open_byte is not None:
                key_chars.append(char)

            byte_offset += len(char.encode("utf-8"))

        if open_byte is not None:
            raise UnclosedBraceError(open_byte)

        return cls(original=raw, spans=tuple(spans))

    @property
    def placeholders(self) -> Tuple[str, ...]:
        """Unique placeholder keys in order of first appearance."""
        return tuple(dict.fromkeys(span.key for span in self.spans))

    def replace_with(self, values: Optional[Mapping[str, Any]] = None) -> str:
        """Render the template with the given values.

        Placeholders whose key is missing from ``values`` are left as written,
        braces included.

        Args:
            values: Mapping of placeholder key to value. Values are passed
                through ``str()``.

        Returns:
            A new string with the known placeholders replaced.
        """
        values = values or {}
        if not self.spans or not values:
            return self.original

        buffer = bytearray(self.original.encode("utf-8"))
        offset = 0

        for span in sorted(self.spans, key=lambda span: span.start):
            if span.key not in values:
                continue

            replacement = str(values[span.key]).encode("utf-8")
            start = span.start + offset
            end = span.end + offset
            buffer[start:end] = replacement
            offset += len(replacement) - span.length

        return buffer.decode("utf-8")

    def __str__(self) -> str:
        return self.original
