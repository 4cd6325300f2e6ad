"""Markdown lint reports for manual review."""
from styleguide_lint.core.linter.models import LintIssue, LintReport, Severity

_LEVEL_MARKERS = {
    Severity.ERROR: "❌",
    Severity.WARNING: "⚠️",
    Severity.INFO: "ℹ️",
}


def render_markdown_report(report: LintReport, title: str | None = None) -> str:
    """
    Render a lint report as markdown, grouped by rule.

    Each issue lists its line, level, message and suggestion so the
    report can be worked through next to the document.
    """
    title = title or report.source_path
    lines = [
        f"# Lint Report: {title}",
        "",
        f"**Style guide:** {report.style_guide}",
        f"**Readability:** {report.readability} ({report.readability_label})",
        f"**Total issues:** {report.total_issues}",
        f"**Errors:** {report.errors} | **Warnings:** {report.warnings} | **Info:** {report.infos}",
        f"**Auto-fixable:** {report.fixable}",
        "",
        "---",
        "",
    ]

    # Group by rule
    by_rule: dict[str, list[LintIssue]] = {}
    for issue in report.issues:
        by_rule.setdefault(issue.rule, []).append(issue)

    for rule, issues in sorted(by_rule.items()):
        marker = _LEVEL_MARKERS[issues[0].severity]
        lines.append(f"## {marker} {rule} ({len(issues)} issues)")
        lines.append("")
        if issues[0].explanation:
            lines.append(f"_{issues[0].explanation}_")
            lines.append("")

        for issue in issues:
            msg = issue.message[:120] + "..." if len(issue.message) > 120 else issue.message
            entry = f"- **Line {issue.line}:{issue.column}** [{issue.severity.value}] {msg}"
            if issue.suggestion:
                entry += f" (suggestion: {issue.suggestion})"
            lines.append(entry)

        lines.append("")

    if not report.issues:
        lines.append("No issues found.")
        lines.append("")

    return "\n".join(lines)
