"""Data models for detected issues, contrast checks and audit results."""

from .audit import AuditResult, ComplianceLevel
from .contrast import ContrastLevel, ContrastResult
from .issue import Issue, IssueSeverity, IssueType

__all__ = [
    "AuditResult",
    "ComplianceLevel",
    "ContrastLevel",
    "ContrastResult",
    "Issue",
    "IssueSeverity",
    "IssueType",
]
