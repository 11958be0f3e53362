"""Translation source settings."""

from enum import Enum
from typing import Any, Optional

from pydantic import Field, field_validator

from glossa.configuration.base import GlossaSettings


class SeekMode(str, Enum):
    """Order in which translation sources are merged.

    Sources are sorted by their identifier compared case-insensitively,
    UNALPHABETICAL reverses that order.
    """

    ALPHABETICAL = "alphabetical"
    UNALPHABETICAL = "unalphabetical"


class OverlapPolicy(str, Enum):
    """What happens when two sources define the same translation path.

    OVERWRITE keeps the source processed last, IGNORE keeps the source
    processed first. Combined with SeekMode this decides precedence.
    """

    OVERWRITE = "overwrite"
    IGNORE = "ignore"


class TranslationSettings(GlossaSettings):
    """Translation tree configuration.

    Environment Variables:
        LOCALES_PATH: Directory scanned for YAML translation files
            (default: ./translations)
        SEEK_MODE: Source processing order, 'alphabetical' or 'unalphabetical'
        TRANSLATION_OVERLAP: Conflict policy, 'overwrite' or 'ignore'
        FALLBACK_LANGUAGE: Language used when the requested one is missing
        FALLBACK_TRANSLATION: Text returned when nothing can be resolved

    Example:
        ```python
        from glossa.configuration import settings

        locales_path = settings.translations.LOCALES_PATH
        if settings.translations.SEEK_MODE is SeekMode.UNALPHABETICAL:
            ...
        ```
    """

    LOCALES_PATH: str = Field(default="./translations", alias="LOCALES_PATH")
    SEEK_MODE: SeekMode = Field(default=SeekMode.ALPHABETICAL, alias="SEEK_MODE")
    TRANSLATION_OVERLAP: OverlapPolicy = Field(
        default=OverlapPolicy.OVERWRITE, alias="TRANSLATION_OVERLAP"
    )
    FALLBACK_LANGUAGE: Optional[str] = Field(default=None, alias="FALLBACK_LANGUAGE")
    FALLBACK_TRANSLATION: Optional[str] = Field(
        default=None, alias="FALLBACK_TRANSLATION"
    )

    @field_validator("SEEK_MODE", "TRANSLATION_OVERLAP", mode="before")
    @classmethod
    def normalize_mode(cls, v: Any) -> Any:
        """Accept mode names in any letter case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("FALLBACK_LANGUAGE", mode="before")
    @classmethod
    def empty_fallback_language(cls, v: Any) -> Any:
        """Treat an empty FALLBACK_LANGUAGE as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v
