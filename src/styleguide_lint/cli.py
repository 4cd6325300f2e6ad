"""CLI for styleguide-lint.

Lints markdown files from the terminal without going through MCP.
"""
import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from styleguide_lint import __version__
from styleguide_lint.config import Config
from styleguide_lint.core.linter.models import (
    BUILTIN_GUIDES, EnglishVariant, LintConfigError, LintReport, Severity, StyleGuide,
)
from styleguide_lint.core.linter.rules_config import (
    RulesConfigError, dump_rules, load_rules_file, template_config,
)

_LEVEL_STYLES = {
    Severity.ERROR: "bold red",
    Severity.WARNING: "yellow",
    Severity.INFO: "cyan",
}


def main(argv: list[str] | None = None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        prog="styleguide-lint",
        description="Check markdown prose against documentation style guides"
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Show debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    guide_choices = [g.value for g in StyleGuide]
    variant_choices = [v.value for v in EnglishVariant]

    # lint / fix commands share their options
    for name, help_text in (
        ("lint", "Lint a markdown file"),
        ("fix", "Apply suggested fixes to a markdown file"),
    ):
        p = subparsers.add_parser(name, help=help_text)
        p.add_argument("path", type=Path, help="Path to markdown file")
        p.add_argument(
            "-g", "--style-guide", choices=guide_choices,
            help="Style guide (default: from config, usually google)"
        )
        p.add_argument(
            "-r", "--rules", type=Path,
            help="Custom rules file (.yml, .yaml, .json); its baseStyleGuide is used"
        )
        p.add_argument(
            "--variant", choices=variant_choices,
            help="English variant (accepted, no effect yet)"
        )
        p.add_argument(
            "--max-sentence-words", type=_positive_int,
            help="Word limit for the long sentence check (default: 25)"
        )
        if name == "lint":
            p.add_argument("--json", action="store_true", help="Print the JSON report")
            p.add_argument("--report", type=Path, help="Also write a markdown report here")

    # score command
    s = subparsers.add_parser("score", help="Readability score of a file")
    s.add_argument("path", type=Path, help="Path to markdown file")

    # rules command
    subparsers.add_parser("rules", help="List built-in rules and style guides")

    # init-rules command
    i = subparsers.add_parser("init-rules", help="Write a sample custom rules file")
    i.add_argument("path", type=Path, help="Output path (.yml, .yaml or .json)")
    i.add_argument("--force", action="store_true", help="Overwrite an existing file")

    # validate-rules command
    v = subparsers.add_parser("validate-rules", help="Check a custom rules file")
    v.add_argument("path", type=Path, help="Rules file to check")

    # check command
    subparsers.add_parser("check", help="Show effective configuration")

    args = parser.parse_args(argv)

    _configure_logging(args.verbose)

    if args.command == "lint":
        asyncio.run(lint_command(args))
    elif args.command == "fix":
        asyncio.run(fix_command(args))
    elif args.command == "score":
        score_command(args)
    elif args.command == "rules":
        rules_command()
    elif args.command == "init-rules":
        init_rules_command(args)
    elif args.command == "validate-rules":
        validate_rules_command(args)
    elif args.command == "check":
        check_command()


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def _configure_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)]
    )


def _lint_options(args, config: Config) -> dict:
    """Build engine keyword arguments from CLI args, exiting on bad rules."""
    rules_path = args.rules or config.rules_file
    custom_config = None
    if rules_path:
        try:
            custom_config = load_rules_file(rules_path.expanduser())
        except RulesConfigError as e:
            print(f"Error: Failed to load custom rules: {e}", file=sys.stderr)
            sys.exit(1)

    return {
        "style_guide": args.style_guide or config.default_style_guide,
        "custom_config": custom_config,
        "english_variant": args.variant or config.default_english_variant,
        "max_sentence_words": (
            args.max_sentence_words if args.max_sentence_words is not None
            else config.max_sentence_words
        ),
    }


def _require_file(path: Path) -> Path:
    path = path.expanduser()
    if not path.is_file():
        print(f"Error: File not found: {path}", file=sys.stderr)
        sys.exit(1)
    return path


async def lint_command(args):
    """Execute the lint command."""
    from styleguide_lint.core.linter import engine
    from styleguide_lint.core.report import render_markdown_report

    config = Config.load()
    path = _require_file(args.path)
    options = _lint_options(args, config)

    try:
        report = await engine.lint_file(path, **options)
    except LintConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.report:
        args.report.write_text(render_markdown_report(report, title=path.stem), encoding="utf-8")

    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
    else:
        print_report(report, Console())

    if report.errors:
        sys.exit(1)


async def fix_command(args):
    """Execute the fix command."""
    from styleguide_lint.core.linter import engine

    config = Config.load()
    path = _require_file(args.path)
    options = _lint_options(args, config)

    try:
        report = await engine.lint_file(path, fix=True, **options)
    except LintConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"{report.total_issues} issues found, {report.fixed} fixed")
    if report.fixed:
        print(f"Wrote: {path}")


def print_report(report: LintReport, console: Console):
    """Render a lint report as a rich table."""
    if not report.issues:
        console.print(f"[green]No issues found[/green] in {escape(report.source_path)}")
    else:
        table = Table(title=escape(f"{report.source_path} ({report.style_guide})"))
        table.add_column("Line", justify="right")
        table.add_column("Col", justify="right")
        table.add_column("Level")
        table.add_column("Rule", no_wrap=True)
        table.add_column("Message")
        table.add_column("Suggestion")

        for issue in report.issues:
            table.add_row(
                str(issue.line),
                str(issue.column),
                f"[{_LEVEL_STYLES[issue.severity]}]{issue.severity.value}[/]",
                escape(issue.rule),
                escape(issue.message),
                escape(issue.suggestion or ""),
            )
        console.print(table)

    console.print(
        f"{report.total_issues} issues: {report.errors} errors, "
        f"{report.warnings} warnings, {report.infos} info "
        f"({report.fixable} auto-fixable)"
    )
    console.print(f"Readability: {report.readability} ({report.readability_label})")


def score_command(args):
    """Execute the score command."""
    from styleguide_lint.core.readability import readability_band, readability_score

    path = _require_file(args.path)
    score = readability_score(path.read_text(encoding="utf-8"))
    band = readability_band(score)

    Console().print(
        f"[{band.style}]{score}[/] {band.label} - {band.description}"
    )


def rules_command():
    """Execute the rules command."""
    from styleguide_lint.core.linter.catalogue import explain, get_available_rules

    console = Console()

    table = Table(title="Built-in rules")
    table.add_column("Rule", no_wrap=True)
    table.add_column("Description")
    table.add_column("Why")
    for rule_id, description in get_available_rules().items():
        table.add_row(rule_id, description, explain(rule_id))
    console.print(table)

    guides = Table(title="Style guides")
    guides.add_column("Guide")
    guides.add_column("Name")
    guides.add_column("Description")
    for guide in (*BUILTIN_GUIDES, StyleGuide.CUSTOM):
        guides.add_row(guide.value, guide.label, guide.description)
    console.print(guides)


def init_rules_command(args):
    """Execute the init-rules command."""
    path = args.path.expanduser()
    suffix = path.suffix.lower()
    if suffix not in (".yml", ".yaml", ".json"):
        print("Error: Rules file must end in .yml, .yaml or .json", file=sys.stderr)
        sys.exit(1)

    if path.exists() and not args.force:
        print(f"Rules file already exists: {path}")
        print("Use --force to overwrite")
        sys.exit(1)

    fmt = "json" if suffix == ".json" else "yaml"
    path.write_text(dump_rules(template_config(), fmt), encoding="utf-8")
    print(f"Wrote sample rules: {path}")


def validate_rules_command(args):
    """Execute the validate-rules command."""
    try:
        custom = load_rules_file(args.path.expanduser())
    except RulesConfigError as e:
        print(f"Invalid: {e}", file=sys.stderr)
        sys.exit(1)

    print(
        f"Valid: {len(custom.rules)} rules on top of "
        f"{custom.base_style_guide.value}"
    )
    for rule in custom.rules:
        status = "pattern" if rule.pattern else "no pattern (advisory)"
        print(f"  - {rule.name} [{rule.severity.value}] {status}")


def check_command():
    """Execute the check command."""
    print(f"styleguide-lint v{__version__}")
    print("=" * 40)

    config = Config.load()
    print("\nConfiguration:")
    print(f"  Docs directory: {config.docs_dir}")
    print(f"  Default style guide: {config.default_style_guide.value}")
    print(f"  English variant: {config.default_english_variant.value}")
    print(f"  Long sentence limit: {config.max_sentence_words} words")

    print("\nCustom rules:")
    if config.rules_file is None:
        print("  Status: none configured")
    else:
        try:
            custom = load_rules_file(config.rules_file)
            print(f"  Status: {len(custom.rules)} rules (base: {custom.base_style_guide.value})")
        except RulesConfigError as e:
            print(f"  Status: INVALID ({e})")

    print("\nMCP tools:")
    for tool in (
        "lint_document", "lint_text", "fix_text", "get_readability",
        "generate_lint_report", "validate_rules", "get_lint_rules", "list_style_guides",
    ):
        print(f"  - {tool}")

    print("\n" + "=" * 40)


if __name__ == "__main__":
    main()
