"""Markdown rendering of audit results and static recommendations."""

from __future__ import annotations

from typing import List

from .errors import InvalidInputError
from .models import AuditResult

RECOMMENDATIONS = (
    "Add alt attributes to all images",
    "Ensure proper heading hierarchy (h1 → h2 → h3)",
    "Use sufficient color contrast (4.5:1 minimum)",
    "Provide labels for all form inputs",
    "Include focus indicators for interactive elements",
    "Use semantic HTML elements (main, nav, header, footer)",
    "Ensure keyboard accessibility for all interactive elements",
    "Add ARIA labels where needed",
    "Test with screen readers",
    "Validate HTML markup",
)


def format_report(result: AuditResult) -> str:
    """Render a Markdown report for the provided audit result."""

    if not isinstance(result, AuditResult):
        raise InvalidInputError("Reports can only be generated from an AuditResult")

    lines: List[str] = [
        "# Accessibility Audit Report",
        "",
        f"**Overall Score:** {result.score}/100",
        f"**WCAG Compliance:** {result.compliance_level.value}",
        f"**Checks Passed:** {result.passed}",
        f"**Issues Found:** {result.failed + result.warnings}",
        "",
    ]

    if result.issues:
        lines.extend(["## Issues Found", ""])
        for position, issue in enumerate(result.issues, start=1):
            lines.append(f"### {position}. {issue.message}")
            lines.append(f"- **Severity:** {issue.severity.value}")
            lines.append(f"- **WCAG Rule:** {issue.rule}")
            lines.append(f"- **Suggestion:** {issue.suggestion}")
            if issue.code_example:
                lines.append(f"- **Example:** `{issue.code_example}`")
            lines.append("")

    lines.append("")
    return "\n".join(lines)


def recommendations() -> List[str]:
    """Return the general accessibility tips shown alongside audits."""

    return list(RECOMMENDATIONS)
