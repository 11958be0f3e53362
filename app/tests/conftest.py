"""Shared fixtures for the glossa test suite."""

import pytest

from glossa.i18n import factory


@pytest.fixture
def reset_translation_cache():
    """Clear the process-wide translation cache before and after a test."""
    factory.invalidate_translation_cache()
    yield
    factory.invalidate_translation_cache()
