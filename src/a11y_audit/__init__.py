"""Heuristic accessibility audit engine for markup and stylesheet text."""

from .models import (
    AuditResult,
    ComplianceLevel,
    ContrastLevel,
    ContrastResult,
    Issue,
    IssueSeverity,
    IssueType,
)
from .service import (
    AccessibilityService,
    InvalidInputError,
    analyze_html,
    generate_report,
    get_accessibility_recommendations,
)

__all__ = [
    "AccessibilityService",
    "AuditResult",
    "ComplianceLevel",
    "ContrastLevel",
    "ContrastResult",
    "InvalidInputError",
    "Issue",
    "IssueSeverity",
    "IssueType",
    "analyze_html",
    "generate_report",
    "get_accessibility_recommendations",
]
