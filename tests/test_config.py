"""Tests for environment-driven configuration."""
from pathlib import Path

import pytest

from styleguide_lint.config import Config
from styleguide_lint.core.linter.models import EnglishVariant, StyleGuide

ENV_VARS = [
    "STYLEGUIDE_LINT_DOCS_DIR",
    "STYLEGUIDE_LINT_STYLE_GUIDE",
    "STYLEGUIDE_LINT_ENGLISH_VARIANT",
    "STYLEGUIDE_LINT_RULES_FILE",
    "STYLEGUIDE_LINT_MAX_SENTENCE_WORDS",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)


def test_defaults():
    config = Config.load()

    assert config.default_style_guide == StyleGuide.GOOGLE
    assert config.default_english_variant == EnglishVariant.US
    assert config.rules_file is None
    assert config.max_sentence_words == 25


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("STYLEGUIDE_LINT_DOCS_DIR", str(tmp_path))
    monkeypatch.setenv("STYLEGUIDE_LINT_STYLE_GUIDE", "RedHat")
    monkeypatch.setenv("STYLEGUIDE_LINT_ENGLISH_VARIANT", "uk")
    monkeypatch.setenv("STYLEGUIDE_LINT_RULES_FILE", str(tmp_path / "rules.yml"))
    monkeypatch.setenv("STYLEGUIDE_LINT_MAX_SENTENCE_WORDS", "30")

    config = Config.load()

    assert config.docs_dir == tmp_path
    assert config.default_style_guide == StyleGuide.REDHAT
    assert config.default_english_variant == EnglishVariant.UK
    assert config.rules_file == tmp_path / "rules.yml"
    assert config.max_sentence_words == 30


def test_invalid_env_values_keep_defaults(monkeypatch):
    monkeypatch.setenv("STYLEGUIDE_LINT_STYLE_GUIDE", "chicago")
    monkeypatch.setenv("STYLEGUIDE_LINT_ENGLISH_VARIANT", "fr")
    monkeypatch.setenv("STYLEGUIDE_LINT_MAX_SENTENCE_WORDS", "many")

    config = Config.load()

    assert config.default_style_guide == StyleGuide.GOOGLE
    assert config.default_english_variant == EnglishVariant.US
    assert config.max_sentence_words == 25


def test_resolve_path(tmp_path):
    config = Config(docs_dir=tmp_path)

    assert config.resolve_path("docs/a.md") == tmp_path / "docs" / "a.md"
    assert config.resolve_path(Path("/abs/a.md")) == Path("/abs/a.md")
