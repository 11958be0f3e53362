"""Feature-level fixtures for i18n system tests.

Provides translation directories on disk and prebuilt trees.
"""

import pytest
import yaml

from tests.factories.i18n import make_tree


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample YAML translation files.

    Returns a directory structure like:
    - greetings.yml
    - informal.yaml
    - admin/users.yml
    """
    greetings = {
        "greetings": {
            "formal": {"es": "Hola", "en": "Hello {name}"},
        }
    }
    with open(tmp_path / "greetings.yml", "w", encoding="utf-8") as f:
        yaml.dump(greetings, f, allow_unicode=True)

    informal = {
        "greetings": {
            "informal": {"es": "Que haces?", "en": "Wyd?"},
        }
    }
    with open(tmp_path / "informal.yaml", "w", encoding="utf-8") as f:
        yaml.dump(informal, f, allow_unicode=True)

    (tmp_path / "admin").mkdir()
    users = {
        "admin": {
            "users": {
                "created": {"en": "User {user} created", "fr": "Utilisateur {user} créé"},
            }
        }
    }
    with open(tmp_path / "admin" / "users.yml", "w", encoding="utf-8") as f:
        yaml.dump(users, f, allow_unicode=True)

    return tmp_path


@pytest.fixture
def tree():
    """TranslationTree built from the default factory sources."""
    return make_tree()


@pytest.fixture
def sample_documents():
    """Two sources defining the same path with different content."""
    return [
        ("alpha.yml", {"common": {"greeting": {"en": "Hello from alpha"}}}),
        ("Beta.yml", {"common": {"greeting": {"en": "Hello from beta"}}}),
    ]
