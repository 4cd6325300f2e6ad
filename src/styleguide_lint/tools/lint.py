"""Lint tools exposed over MCP."""
import logging
from pathlib import Path

from styleguide_lint.config import Config
from styleguide_lint.core.linter import engine
from styleguide_lint.core.linter.autofix import apply_fixes
from styleguide_lint.core.linter.catalogue import get_available_rules
from styleguide_lint.core.linter.models import (
    BUILTIN_GUIDES, EnglishVariant, LintConfigError, StyleGuide,
)
from styleguide_lint.core.linter.rules_config import (
    CustomRulesConfig, RulesConfigError, load_rules_file,
)
from styleguide_lint.core.readability import readability_band, readability_score
from styleguide_lint.core.report import render_markdown_report

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIXES = {".md", ".markdown"}


def load_custom_config(config: Config, rules_path: str | None) -> CustomRulesConfig | None:
    """
    Load the custom rules for one request.

    Falls back to config.rules_file when rules_path is not given.

    Raises:
        RulesConfigError: if the rules file is invalid
    """
    if rules_path:
        return load_rules_file(config.resolve_path(rules_path))
    if config.rules_file:
        return load_rules_file(config.rules_file)
    return None


def register(mcp, config: Config):
    """Register lint tools with MCP server."""

    def _options(style_guide, rules_path, english_variant) -> dict:
        return {
            "style_guide": style_guide or config.default_style_guide,
            "custom_config": load_custom_config(config, rules_path),
            "english_variant": english_variant or config.default_english_variant,
            "max_sentence_words": config.max_sentence_words,
        }

    def _resolve_document(document_path: str) -> Path | dict:
        path = config.resolve_path(document_path)
        if not path.exists():
            return {"error": f"File not found: {path}"}
        if path.suffix.lower() not in MARKDOWN_SUFFIXES:
            return {"error": f"Expected .md file, got: {path.suffix}"}
        return path

    @mcp.tool()
    async def lint_document(
        document_path: str,
        style_guide: str | None = None,
        rules_path: str | None = None,
        english_variant: str | None = None,
        fix: bool = False
    ) -> dict:
        """
        Lint a markdown document against a documentation style guide.

        Checks every guide for passive voice, wordy phrases and long
        sentences, plus the guide's own word choices:
        - google: "click on" -> "click"
        - microsoft: avoid "please" in instructions
        - redhat: "utilize" -> "use"

        Args:
            document_path: Path to the .md file (absolute or relative to docs dir)
            style_guide: google, microsoft, redhat or custom (default from config)
            rules_path: YAML/JSON custom rules file; its baseStyleGuide is used
            english_variant: us, uk, au or in (accepted, no effect yet)
            fix: Apply suggested fixes and write back (default: False)

        Returns:
            Dictionary with:
            - source_path (str): Path that was linted
            - style_guide (str): Guide used
            - summary (dict): issue counts and readability
            - issues (list): Issues ordered by line and column
            - fixed (int): Fixes applied (if fix=True)
        """
        path = _resolve_document(document_path)
        if isinstance(path, dict):
            return path

        logger.info(f"Linting {path} (style_guide={style_guide}, rules={rules_path}, fix={fix})")

        try:
            report = await engine.lint_file(
                path, fix=fix, **_options(style_guide, rules_path, english_variant)
            )
        except (LintConfigError, RulesConfigError) as e:
            return {"error": str(e)}
        except Exception as e:
            logger.error(f"Lint failed: {e}", exc_info=True)
            return {"error": str(e)}

        logger.info(
            f"Lint complete: {report.total_issues} issues "
            f"({report.errors} errors, {report.warnings} warnings, {report.infos} info)"
        )
        if fix and report.fixed:
            logger.info(f"Auto-fixed {report.fixed} issues")

        return report.to_dict()

    @mcp.tool()
    async def lint_text(
        text: str,
        style_guide: str | None = None,
        rules_path: str | None = None,
        english_variant: str | None = None
    ) -> dict:
        """
        Lint markdown text passed directly instead of a file.

        Args:
            text: Markdown content
            style_guide: google, microsoft, redhat or custom
            rules_path: Optional custom rules file
            english_variant: us, uk, au or in

        Returns:
            Same shape as lint_document
        """
        try:
            report = await engine.lint_content(
                text, **_options(style_guide, rules_path, english_variant)
            )
        except (LintConfigError, RulesConfigError) as e:
            return {"error": str(e)}

        return report.to_dict()

    @mcp.tool()
    async def fix_text(
        text: str,
        style_guide: str | None = None,
        rules_path: str | None = None,
        english_variant: str | None = None
    ) -> dict:
        """
        Apply every suggested fix to markdown text.

        Returns:
            Dictionary with:
            - text (str): Fixed content
            - fixed (int): Number of fixes applied
            - remaining (int): Issues still reported on the fixed text
        """
        try:
            options = _options(style_guide, rules_path, english_variant)
            issues = await engine.lint(text, **options)
            fixed_text, applied = apply_fixes(text, issues)
            remaining = await engine.lint(fixed_text, **options)
        except (LintConfigError, RulesConfigError) as e:
            return {"error": str(e)}

        return {"text": fixed_text, "fixed": applied, "remaining": len(remaining)}

    @mcp.tool()
    async def get_readability(text: str) -> dict:
        """
        Score text with the Flesch Reading Ease formula (0-100, higher is easier).

        Returns:
            Dictionary with score, label and description
        """
        score = readability_score(text)
        band = readability_band(score)
        return {"score": score, "label": band.label, "description": band.description}

    @mcp.tool()
    async def generate_lint_report(
        document_path: str,
        output_path: str | None = None,
        style_guide: str | None = None,
        rules_path: str | None = None
    ) -> dict:
        """
        Generate a markdown lint report for manual review.

        Creates a lint-report.md file next to the document (or at output_path)
        listing all issues grouped by rule with line numbers.

        Args:
            document_path: Path to the .md file to lint
            output_path: Optional custom output path
            style_guide: Guide to check against
            rules_path: Optional custom rules file

        Returns:
            Dictionary with:
            - report_path (str): Path to generated report
            - total_issues (int): Total issues found
            - warnings (int): Number of warnings
        """
        path = _resolve_document(document_path)
        if isinstance(path, dict):
            return path

        try:
            report = await engine.lint_file(path, **_options(style_guide, rules_path, None))
        except (LintConfigError, RulesConfigError) as e:
            return {"error": str(e)}

        if output_path:
            out_path = config.resolve_path(output_path)
        else:
            out_path = path.parent / "lint-report.md"

        out_path.write_text(render_markdown_report(report, title=path.stem), encoding="utf-8")

        logger.info(f"Lint report written to {out_path}")

        return {
            "report_path": str(out_path),
            "total_issues": report.total_issues,
            "warnings": report.warnings
        }

    @mcp.tool()
    async def validate_rules(rules_path: str) -> dict:
        """
        Check a custom rules file without linting anything.

        Returns:
            {"valid": true, "base_style_guide": ..., "rules": [...names]} or
            {"valid": false, "error": ...}
        """
        try:
            custom = load_rules_file(config.resolve_path(rules_path))
        except RulesConfigError as e:
            return {"valid": False, "error": str(e)}

        return {
            "valid": True,
            "base_style_guide": custom.base_style_guide.value,
            "rules": [r.name for r in custom.rules],
        }

    @mcp.tool()
    async def get_lint_rules() -> dict:
        """
        Get built-in lint rules with descriptions.

        Example response:
            {
                "rules": {
                    "style:passive": "Auxiliary verb followed by a past participle ...",
                    "google:click-on": "Google: \"click on\" instead of \"click\".",
                    ...
                }
            }
        """
        return {"rules": get_available_rules()}

    @mcp.tool()
    async def list_style_guides() -> dict:
        """List style guides and English variants with descriptions."""
        return {
            "style_guides": [
                {"value": g.value, "label": g.label, "description": g.description}
                for g in (*BUILTIN_GUIDES, StyleGuide.CUSTOM)
            ],
            "english_variants": [
                {"value": v.value, "label": v.label} for v in EnglishVariant
            ],
        }
