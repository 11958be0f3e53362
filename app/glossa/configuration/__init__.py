"""Configuration module - public API.

Centralized configuration for glossa using Pydantic BaseSettings.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    TranslationSettings: Translation source settings class
    SeekMode: Source processing order
    OverlapPolicy: Conflict policy between sources

Example:
    ```python
    from glossa.configuration import settings

    path = settings.translations.LOCALES_PATH
    overlap = settings.translations.TRANSLATION_OVERLAP
    ```
"""

from glossa.configuration.settings import Settings, settings
from glossa.configuration.translations import (
    OverlapPolicy,
    SeekMode,
    TranslationSettings,
)

__all__ = [
    "Settings",
    "settings",
    "TranslationSettings",
    "SeekMode",
    "OverlapPolicy",
]
