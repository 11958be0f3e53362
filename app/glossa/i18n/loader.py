"""Translation source loading.

Defines the contract for feeding translation sources into a builder and
provides the YAML-based loader.
"""

import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, List, Tuple

import yaml

from glossa.i18n.builder import TranslationTreeBuilder
from glossa.i18n.errors import InvalidValueError, SourceReadError
from glossa.logging import get_module_logger

logger = get_module_logger()


class TranslationYAMLLoader(yaml.SafeLoader):
    """SafeLoader that only reads true/false as booleans.

    YAML 1.1 turns keys such as ``no`` (Norwegian) or ``on`` into booleans,
    which would break language keys.
    """


TranslationYAMLLoader.yaml_implicit_resolvers = {
    first: [
        (tag, regexp)
        for tag, regexp in resolvers
        if tag != "tag:yaml.org,2002:bool"
    ]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
TranslationYAMLLoader.add_implicit_resolver(
    "tag:yaml.org,2002:bool",
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


class TranslationLoader(ABC):
    """Abstract base for translation loaders.

    Implementations decide where sources come from and register each of
    them on a TranslationTreeBuilder.
    """

    @abstractmethod
    def load_into(self, builder: TranslationTreeBuilder) -> int:
        """Register every available source on ``builder``.

        Args:
            builder: Builder to register sources on.

        Returns:
            Number of sources registered.
        """
        pass


class YAMLTranslationLoader(TranslationLoader):
    """Loader for YAML translation files.

    Walks ``translations_dir`` recursively for ``*.yml`` and ``*.yaml``
    files. Every file is mounted at the root of the tree and identified by
    its path relative to ``translations_dir``, which is also what the
    builder orders sources by.

    A file that cannot be read or parsed, or whose top level is not a
    nesting, is mounted at the segments of its relative path instead
    (``admin/users.yml`` -> ``admin.users``) so that the failure or the
    bare translation shows up on lookup. Such files never replace content
    provided by another file.

    Attributes:
        translations_dir: Path to directory containing YAML files.
        extensions: File suffixes considered translation files.
    """

    def __init__(
        self,
        translations_dir: Path,
        extensions: Iterable[str] = (".yml", ".yaml"),
    ):
        """Initialize YAML translation loader.

        Args:
            translations_dir: Path to directory with YAML translation files.
            extensions: File suffixes to load.

        Raises:
            ValueError: If translations_dir does not exist.
        """
        self.translations_dir = Path(translations_dir)
        self.extensions = tuple(ext.lower() for ext in extensions)

        if not self.translations_dir.is_dir():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_yaml_loader",
            translations_dir=str(self.translations_dir),
        )

    def find_files(self) -> List[Path]:
        """List translation files below translations_dir."""
        return sorted(
            path
            for path in self.translations_dir.rglob("*")
            if path.is_file() and path.suffix.lower() in self.extensions
        )

    def load_into(self, builder: TranslationTreeBuilder) -> int:
        """Parse every YAML file and register it on ``builder``.

        Args:
            builder: Builder to register sources on.

        Returns:
            Number of sources registered (empty files are skipped).
        """
        registered = 0

        for yaml_file in self.find_files():
            source, segments = self._identify(yaml_file)

            try:
                with open(yaml_file, "r", encoding="utf-8") as f:
                    data = yaml.load(f, Loader=TranslationYAMLLoader)
            except (OSError, UnicodeDecodeError) as e:
                logger.error("translation_file_unreadable", file=source, error=str(e))
                builder.add_error(segments, SourceReadError(str(e)), source)
                registered += 1
                continue
            except yaml.YAMLError as e:
                logger.error("yaml_parse_error", file=source, error=str(e))
                builder.add_error(segments, SourceReadError(str(e)), source)
                registered += 1
                continue

            if data is None:
                logger.warning("empty_translation_file", file=source)
                continue

            if not isinstance(data, dict):
                logger.warning(
                    "invalid_yaml_format", file=source, expected="dict"
                )
                builder.add_error(
                    segments,
                    InvalidValueError("<document>", type(data).__name__),
                    source,
                )
                registered += 1
                continue

            builder.add_document((), data, source, fallback_segments=segments)
            registered += 1

        logger.info(
            "loaded_translation_sources",
            translations_dir=str(self.translations_dir),
            source_count=registered,
        )
        return registered

    def _identify(self, yaml_file: Path) -> Tuple[str, Tuple[str, ...]]:
        relative = yaml_file.relative_to(self.translations_dir)
        segments = (*relative.parent.parts, relative.stem)
        return relative.as_posix(), segments
