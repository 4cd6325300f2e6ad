"""Custom rules files: parsing, validation and serialization."""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import json
import logging

import yaml

from .models import BUILTIN_GUIDES, Severity, StyleGuide

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yml", ".yaml"}
JSON_SUFFIXES = {".json"}

# Reading ages accepted for maxReadabilityAge
MIN_READABILITY_AGE = 12
MAX_READABILITY_AGE = 18


class RulesConfigError(ValueError):
    """Raised when a custom rules document is malformed."""


@dataclass(frozen=True)
class CustomRule:
    """A user-authored pattern rule."""
    name: str
    message: str
    pattern: Optional[str] = None
    severity: Severity = Severity.WARNING
    suggestion: Optional[str] = None

    # Advisory: tune the built-in checks, never emit issues themselves
    ignore_words: tuple[str, ...] = ()
    max_readability_age: Optional[int] = None

    def to_dict(self) -> dict:
        data = {
            "name": self.name,
            "pattern": self.pattern,
            "message": self.message,
            "level": self.severity.value,
            "suggestion": self.suggestion,
            "ignoreWords": list(self.ignore_words) or None,
            "maxReadabilityAge": self.max_readability_age,
        }
        # Remove None values for cleaner YAML
        return {k: v for k, v in data.items() if v is not None}


@dataclass(frozen=True)
class CustomRulesConfig:
    """A built-in base guide plus an ordered set of custom rules."""
    base_style_guide: StyleGuide
    rules: tuple[CustomRule, ...] = field(default_factory=tuple)

    @property
    def ignore_words(self) -> frozenset[str]:
        """Lower-cased union of every rule's ignoreWords."""
        return frozenset(
            word.lower() for rule in self.rules for word in rule.ignore_words
        )

    def to_dict(self) -> dict:
        return {
            "baseStyleGuide": self.base_style_guide.value,
            "rules": [r.to_dict() for r in self.rules],
        }


def parse_rules(data: object) -> CustomRulesConfig:
    """
    Validate a decoded rules document and build a config.

    Args:
        data: Mapping decoded from YAML or JSON

    Returns:
        CustomRulesConfig

    Raises:
        RulesConfigError: naming the first violated constraint
    """
    if not isinstance(data, dict):
        raise RulesConfigError("Rules file must contain a mapping with baseStyleGuide and rules")

    base = data.get("baseStyleGuide")
    if not base:
        raise RulesConfigError("Invalid config structure: baseStyleGuide is required")

    allowed = [g.value for g in BUILTIN_GUIDES]
    if base not in allowed:
        raise RulesConfigError(
            f"baseStyleGuide must be one of {', '.join(repr(g) for g in allowed)}, got {base!r}"
        )

    raw_rules = data.get("rules")
    if raw_rules is None:
        raise RulesConfigError("Invalid config structure: rules is required")
    if not isinstance(raw_rules, list):
        raise RulesConfigError("Invalid config structure: rules must be a list")

    rules = []
    seen: set[str] = set()
    for index, raw in enumerate(raw_rules, 1):
        rule = _parse_rule(raw, index)
        if rule.name in seen:
            raise RulesConfigError(f"Rule {index}: duplicate name {rule.name!r}")
        seen.add(rule.name)
        rules.append(rule)

    return CustomRulesConfig(base_style_guide=StyleGuide(base), rules=tuple(rules))


def _parse_rule(raw: object, index: int) -> CustomRule:
    """Validate a single rule entry."""
    if not isinstance(raw, dict):
        raise RulesConfigError(f"Rule {index}: must be a mapping")

    name = raw.get("name")
    if not isinstance(name, str) or not name.strip():
        raise RulesConfigError(f"Rule {index}: name is required")

    message = raw.get("message")
    if not isinstance(message, str) or not message.strip():
        raise RulesConfigError(f"Rule {index} ({name}): message is required")

    pattern = raw.get("pattern")
    if pattern is not None and not isinstance(pattern, str):
        raise RulesConfigError(f"Rule {index} ({name}): pattern must be a string")

    level = raw.get("level") or Severity.WARNING.value
    try:
        severity = Severity(level)
    except ValueError:
        raise RulesConfigError(
            f"Rule {index} ({name}): level must be 'error', 'warning' or 'info', got {level!r}"
        ) from None

    suggestion = raw.get("suggestion")
    if suggestion is not None and not isinstance(suggestion, str):
        raise RulesConfigError(f"Rule {index} ({name}): suggestion must be a string")

    ignore_words = raw.get("ignoreWords") or []
    if not isinstance(ignore_words, list) or not all(isinstance(w, str) for w in ignore_words):
        raise RulesConfigError(f"Rule {index} ({name}): ignoreWords must be a list of strings")
    if not all(w.strip() for w in ignore_words):
        raise RulesConfigError(f"Rule {index} ({name}): ignoreWords entries must not be empty")

    age = raw.get("maxReadabilityAge")
    if age is not None:
        if isinstance(age, bool) or not isinstance(age, int):
            raise RulesConfigError(f"Rule {index} ({name}): maxReadabilityAge must be an integer")
        if not MIN_READABILITY_AGE <= age <= MAX_READABILITY_AGE:
            raise RulesConfigError(
                f"Rule {index} ({name}): maxReadabilityAge must be between "
                f"{MIN_READABILITY_AGE} and {MAX_READABILITY_AGE}"
            )

    return CustomRule(
        name=name.strip(),
        message=message,
        pattern=pattern or None,
        severity=severity,
        suggestion=suggestion or None,
        ignore_words=tuple(w.strip() for w in ignore_words),
        max_readability_age=age,
    )


def load_rules_text(text: str, fmt: str = "yaml") -> CustomRulesConfig:
    """
    Parse a rules document from text.

    Args:
        text: Document content
        fmt: "yaml" or "json"

    Raises:
        RulesConfigError: if the text does not parse or validate
    """
    if fmt == "json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise RulesConfigError(f"Invalid JSON: {e}") from e
    elif fmt == "yaml":
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise RulesConfigError(f"Invalid YAML: {e}") from e
    else:
        raise RulesConfigError(f"Unsupported rules format: {fmt!r}")

    return parse_rules(data)


def load_rules_file(path: Path) -> CustomRulesConfig:
    """
    Load a .yml, .yaml or .json rules file.

    Raises:
        RulesConfigError: for unsupported suffixes, unreadable or invalid files
    """
    suffix = path.suffix.lower()
    if suffix in YAML_SUFFIXES:
        fmt = "yaml"
    elif suffix in JSON_SUFFIXES:
        fmt = "json"
    else:
        raise RulesConfigError(
            f"Invalid file type {suffix or '(none)'}: upload a YAML or JSON file"
        )

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise RulesConfigError(f"Cannot read rules file {path}: {e}") from e

    config = load_rules_text(text, fmt)
    logger.info(
        f"Loaded {len(config.rules)} custom rules from {path} "
        f"(base: {config.base_style_guide.value})"
    )
    return config


def dump_rules(config: CustomRulesConfig, fmt: str = "yaml") -> str:
    """Serialize a config back to YAML or JSON."""
    data = config.to_dict()

    if fmt == "json":
        return json.dumps(data, indent=2) + "\n"
    if fmt == "yaml":
        return yaml.dump(
            data,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
            width=80
        )
    raise RulesConfigError(f"Unsupported rules format: {fmt!r}")


def template_config() -> CustomRulesConfig:
    """
    Sample configuration to start a rules file from.

    Its rules need a writer's judgement, so none carries a suggestion:
    a suggestion is written into the document as-is by `fix`.
    """
    return CustomRulesConfig(
        base_style_guide=StyleGuide.GOOGLE,
        rules=(
            CustomRule(
                name="no-lorem-ipsum",
                pattern="lorem ipsum",
                message="Replace placeholder 'Lorem Ipsum' text with real, meaningful content",
            ),
            CustomRule(
                name="avoid-very",
                pattern=r"\bvery\b",
                message="Avoid using 'very' - pick a stronger adjective ('very good' -> 'excellent')",
                severity=Severity.INFO,
            ),
            CustomRule(
                name="check-todo",
                pattern="TODO|FIXME|XXX",
                message="TODO/FIXME comment found - complete the task or remove it before publishing",
                severity=Severity.ERROR,
            ),
        ),
    )
