"""Tests for custom rules files."""
import json

import pytest

from styleguide_lint.core.linter.models import Severity, StyleGuide
from styleguide_lint.core.linter.rules_config import (
    RulesConfigError,
    dump_rules,
    load_rules_file,
    load_rules_text,
    parse_rules,
    template_config,
)

MINIMAL = {"baseStyleGuide": "google", "rules": [{"name": "x", "message": "y"}]}


def test_minimal_config_is_accepted():
    config = parse_rules(MINIMAL)

    assert config.base_style_guide == StyleGuide.GOOGLE
    assert len(config.rules) == 1
    rule = config.rules[0]
    assert rule.name == "x"
    assert rule.message == "y"
    assert rule.pattern is None
    assert rule.severity == Severity.WARNING


@pytest.mark.parametrize("data,match", [
    ({"rules": []}, "baseStyleGuide is required"),
    ({"baseStyleGuide": "google"}, "rules is required"),
    ({"baseStyleGuide": "google", "rules": "nope"}, "rules must be a list"),
    ({"baseStyleGuide": "custom", "rules": []}, "baseStyleGuide must be one of"),
    ({"baseStyleGuide": "chicago", "rules": []}, "baseStyleGuide must be one of"),
    ({"baseStyleGuide": "google", "rules": [{"message": "y"}]}, "name is required"),
    ({"baseStyleGuide": "google", "rules": [{"name": "x"}]}, "message is required"),
    ({"baseStyleGuide": "google", "rules": ["x"]}, "must be a mapping"),
    (
        {"baseStyleGuide": "google", "rules": [{"name": "x", "message": "y"}, {"name": "x", "message": "z"}]},
        "duplicate name",
    ),
    (
        {"baseStyleGuide": "google", "rules": [{"name": "x", "message": "y", "level": "fatal"}]},
        "level must be",
    ),
    (
        {"baseStyleGuide": "google", "rules": [{"name": "x", "message": "y", "ignoreWords": "very"}]},
        "ignoreWords",
    ),
    (
        {"baseStyleGuide": "google", "rules": [{"name": "x", "message": "y", "ignoreWords": [""]}]},
        "ignoreWords entries must not be empty",
    ),
    (
        {"baseStyleGuide": "google", "rules": [{"name": "x", "message": "y", "ignoreWords": ["ok", "  "]}]},
        "ignoreWords entries must not be empty",
    ),
    (
        {"baseStyleGuide": "google", "rules": [{"name": "x", "message": "y", "maxReadabilityAge": 30}]},
        "between 12 and 18",
    ),
    (["not", "a", "mapping"], "must contain a mapping"),
])
def test_invalid_configs_are_rejected(data, match):
    with pytest.raises(RulesConfigError, match=match):
        parse_rules(data)


def test_full_rule_fields():
    config = parse_rules({
        "baseStyleGuide": "redhat",
        "rules": [{
            "name": "no-lorem",
            "pattern": "lorem ipsum",
            "message": "Replace placeholder text",
            "level": "error",
            "suggestion": "Use real content",
            "ignoreWords": ["Utilize"],
            "maxReadabilityAge": 14,
        }],
    })

    rule = config.rules[0]
    assert rule.severity == Severity.ERROR
    assert rule.suggestion == "Use real content"
    assert rule.ignore_words == ("Utilize",)
    assert rule.max_readability_age == 14
    assert config.ignore_words == frozenset({"utilize"})


def test_load_yaml_text():
    text = """
baseStyleGuide: microsoft
rules:
  - name: check-todo
    pattern: TODO|FIXME
    message: Resolve before publishing
    level: info
"""
    config = load_rules_text(text, "yaml")

    assert config.base_style_guide == StyleGuide.MICROSOFT
    assert config.rules[0].pattern == "TODO|FIXME"
    assert config.rules[0].severity == Severity.INFO


def test_load_json_text():
    config = load_rules_text(json.dumps(MINIMAL), "json")
    assert config.rules[0].name == "x"


def test_unparseable_text_is_rejected():
    with pytest.raises(RulesConfigError, match="Invalid YAML"):
        load_rules_text("rules: [unclosed", "yaml")
    with pytest.raises(RulesConfigError, match="Invalid JSON"):
        load_rules_text("{not json", "json")
    with pytest.raises(RulesConfigError, match="Unsupported"):
        load_rules_text("{}", "toml")


@pytest.mark.parametrize("fmt", ["yaml", "json"])
def test_dump_then_load_round_trip(fmt):
    config = template_config()
    assert load_rules_text(dump_rules(config, fmt), fmt) == config


def test_dump_omits_unset_fields():
    data = json.loads(dump_rules(parse_rules(MINIMAL), "json"))
    assert data == {
        "baseStyleGuide": "google",
        "rules": [{"name": "x", "message": "y", "level": "warning"}],
    }


def test_load_rules_file_by_suffix(tmp_path):
    yml = tmp_path / "rules.yml"
    yml.write_text("baseStyleGuide: google\nrules: []\n", encoding="utf-8")
    assert load_rules_file(yml).rules == ()

    js = tmp_path / "rules.json"
    js.write_text(json.dumps(MINIMAL), encoding="utf-8")
    assert load_rules_file(js).rules[0].name == "x"


def test_load_rules_file_rejects_other_suffixes(tmp_path):
    txt = tmp_path / "rules.txt"
    txt.write_text("baseStyleGuide: google\nrules: []\n", encoding="utf-8")

    with pytest.raises(RulesConfigError, match="YAML or JSON"):
        load_rules_file(txt)


def test_load_rules_file_missing(tmp_path):
    with pytest.raises(RulesConfigError, match="Cannot read"):
        load_rules_file(tmp_path / "missing.yaml")
