"""Score and compliance tier computation over a list of issues."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Mapping, Sequence

from .models import ComplianceLevel, Issue, IssueSeverity, IssueType

SEVERITY_PENALTY: Mapping[IssueSeverity, int] = {
    IssueSeverity.CRITICAL: 25,
    IssueSeverity.HIGH: 15,
    IssueSeverity.MEDIUM: 10,
    IssueSeverity.LOW: 5,
}

MAX_SCORE = 100

# Fixed number of checks reported as "performed". It does not track the
# number of registered detectors and stays the same when no stylesheet is given.
TOTAL_CHECK_COUNT = 15


def calculate_score(issues: Iterable[Issue]) -> int:
    """Deduct a severity-keyed penalty per issue from 100, floored at zero."""

    deductions = sum(SEVERITY_PENALTY[issue.severity] for issue in issues)
    return min(MAX_SCORE, max(0, MAX_SCORE - deductions))


def determine_compliance_level(issues: Iterable[Issue]) -> ComplianceLevel:
    counts = Counter(issue.severity for issue in issues)
    critical = counts[IssueSeverity.CRITICAL]
    high = counts[IssueSeverity.HIGH]
    medium = counts[IssueSeverity.MEDIUM]

    if critical > 0:
        return ComplianceLevel.NON_COMPLIANT
    if high > 2:
        return ComplianceLevel.NON_COMPLIANT
    if high > 0 or medium > 3:
        return ComplianceLevel.A
    if medium > 0:
        return ComplianceLevel.AA
    return ComplianceLevel.AAA


def count_passed_checks(issues: Sequence[Issue]) -> int:
    return max(0, TOTAL_CHECK_COUNT - len(issues))


def count_by_type(issues: Iterable[Issue], issue_type: IssueType) -> int:
    return sum(1 for issue in issues if issue.type is issue_type)
