"""Tests for the command line interface."""
import json

import pytest

from styleguide_lint.cli import main
from styleguide_lint.core.linter.rules_config import load_rules_file


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for var in (
        "STYLEGUIDE_LINT_STYLE_GUIDE",
        "STYLEGUIDE_LINT_ENGLISH_VARIANT",
        "STYLEGUIDE_LINT_RULES_FILE",
        "STYLEGUIDE_LINT_MAX_SENTENCE_WORDS",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("STYLEGUIDE_LINT_DOCS_DIR", str(tmp_path))


@pytest.fixture
def doc(tmp_path):
    path = tmp_path / "doc.md"
    path.write_text("# Setup\n\nClick on Save in order to keep it.\n", encoding="utf-8")
    return path


def test_lint_json_output(doc, capsys):
    main(["lint", str(doc), "--json", "-g", "google"])

    data = json.loads(capsys.readouterr().out)
    assert data["style_guide"] == "google"
    assert [i["rule"] for i in data["issues"]] == ["google:click-on", "style:wordy"]


def test_lint_table_output(doc, capsys):
    main(["lint", str(doc)])

    out = capsys.readouterr().out
    assert "2 issues" in out
    assert "Readability:" in out


def test_lint_writes_markdown_report(doc, tmp_path):
    report = tmp_path / "report.md"

    main(["lint", str(doc), "--report", str(report)])

    assert "google:click-on" in report.read_text(encoding="utf-8")


def test_lint_exits_nonzero_on_error_level_issues(tmp_path):
    rules = tmp_path / "rules.json"
    rules.write_text(json.dumps({
        "baseStyleGuide": "google",
        "rules": [{"name": "todo", "pattern": "TODO", "message": "Resolve", "level": "error"}],
    }), encoding="utf-8")
    doc = tmp_path / "todo.md"
    doc.write_text("TODO: write this\n", encoding="utf-8")

    with pytest.raises(SystemExit) as exc:
        main(["lint", str(doc), "-r", str(rules), "--json"])

    assert exc.value.code == 1


def test_lint_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["lint", str(tmp_path / "missing.md")])

    assert exc.value.code == 1
    assert "File not found" in capsys.readouterr().err


def test_lint_custom_without_rules(doc, capsys):
    with pytest.raises(SystemExit):
        main(["lint", str(doc), "-g", "custom"])

    assert "custom rules config" in capsys.readouterr().err


def test_fix_command(doc, capsys):
    main(["fix", str(doc)])

    assert doc.read_text(encoding="utf-8") == "# Setup\n\nClick Save to keep it.\n"
    assert "2 fixed" in capsys.readouterr().out


def test_fix_with_sample_rules_keeps_judgement_calls(tmp_path, capsys):
    rules = tmp_path / "rules.yaml"
    main(["init-rules", str(rules)])
    doc = tmp_path / "draft.md"
    doc.write_text(
        "Intro.\nTODO: explain the install steps here.\nThis is very good.\nClick on Save.\n",
        encoding="utf-8",
    )

    main(["fix", str(doc), "-r", str(rules)])

    assert doc.read_text(encoding="utf-8") == (
        "Intro.\nTODO: explain the install steps here.\nThis is very good.\nClick Save.\n"
    )
    assert "3 issues found, 1 fixed" in capsys.readouterr().out


def test_max_sentence_words_option(tmp_path, capsys):
    doc = tmp_path / "short.md"
    doc.write_text("One two three four.\n", encoding="utf-8")

    main(["lint", str(doc), "--json", "--max-sentence-words", "3"])

    data = json.loads(capsys.readouterr().out)
    assert [i["rule"] for i in data["issues"]] == ["style:long-sentence"]


@pytest.mark.parametrize("value", ["0", "-5", "many"])
def test_max_sentence_words_must_be_positive(doc, capsys, value):
    with pytest.raises(SystemExit) as exc:
        main(["lint", str(doc), "--max-sentence-words", value])

    assert exc.value.code == 2
    assert "--max-sentence-words" in capsys.readouterr().err


def test_score_command(tmp_path, capsys):
    path = tmp_path / "fox.md"
    path.write_text("The quick brown fox jumps over the lazy dog.", encoding="utf-8")

    main(["score", str(path)])

    out = capsys.readouterr().out
    assert "94" in out
    assert "Very Easy" in out


def test_init_and_validate_rules(tmp_path, capsys):
    path = tmp_path / "rules.yaml"

    main(["init-rules", str(path)])
    assert len(load_rules_file(path).rules) == 3

    with pytest.raises(SystemExit):
        main(["init-rules", str(path)])

    main(["validate-rules", str(path)])
    assert "Valid: 3 rules on top of google" in capsys.readouterr().out


def test_validate_rules_invalid(tmp_path, capsys):
    path = tmp_path / "rules.json"
    path.write_text('{"baseStyleGuide": "google"}', encoding="utf-8")

    with pytest.raises(SystemExit) as exc:
        main(["validate-rules", str(path)])

    assert exc.value.code == 1
    assert "rules is required" in capsys.readouterr().err


def test_rules_command(capsys):
    main(["rules"])

    out = capsys.readouterr().out
    assert "style:passive" in out
    assert "microsoft:please" in out


def test_check_command(capsys):
    main(["check"])

    out = capsys.readouterr().out
    assert "Default style guide: google" in out
    assert "none configured" in out
