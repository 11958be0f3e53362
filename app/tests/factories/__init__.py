"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_common_document,
    make_greetings_document,
    make_informal_document,
    make_translation,
    make_tree,
)

__all__ = [
    "make_common_document",
    "make_greetings_document",
    "make_informal_document",
    "make_translation",
    "make_tree",
]
