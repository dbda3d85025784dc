from __future__ import annotations

import pytest

from a11y_audit.models import ComplianceLevel, Issue, IssueSeverity, IssueType
from a11y_audit.scoring import (
    TOTAL_CHECK_COUNT,
    calculate_score,
    count_by_type,
    count_passed_checks,
    determine_compliance_level,
)


def make_issue(severity: IssueSeverity, issue_type: IssueType = IssueType.ERROR) -> Issue:
    return Issue(
        id=f"{severity.value}-issue",
        type=issue_type,
        severity=severity,
        rule="WCAG 0.0.0",
        element="document",
        message="Example",
        suggestion="Fix it",
    )


def issues_of(**counts: int) -> list[Issue]:
    issues: list[Issue] = []
    for name, count in counts.items():
        issues.extend(make_issue(IssueSeverity(name)) for _ in range(count))
    return issues


def test_no_issues_scores_perfectly() -> None:
    assert calculate_score([]) == 100


@pytest.mark.parametrize(
    ("severity", "expected"),
    [
        (IssueSeverity.CRITICAL, 75),
        (IssueSeverity.HIGH, 85),
        (IssueSeverity.MEDIUM, 90),
        (IssueSeverity.LOW, 95),
    ],
)
def test_severity_penalties(severity: IssueSeverity, expected: int) -> None:
    assert calculate_score([make_issue(severity)]) == expected


def test_score_is_floored_at_zero() -> None:
    assert calculate_score(issues_of(critical=5)) == 0


def test_additional_critical_issue_never_raises_score() -> None:
    base = issues_of(high=1, medium=2)
    previous = calculate_score(base)
    for _ in range(6):
        base.append(make_issue(IssueSeverity.CRITICAL))
        current = calculate_score(base)
        assert 0 <= current <= previous
        previous = current


@pytest.mark.parametrize(
    ("counts", "expected"),
    [
        ({}, ComplianceLevel.AAA),
        ({"low": 4}, ComplianceLevel.AAA),
        ({"medium": 1}, ComplianceLevel.AA),
        ({"medium": 3}, ComplianceLevel.AA),
        ({"medium": 4}, ComplianceLevel.A),
        ({"high": 1}, ComplianceLevel.A),
        ({"high": 2, "medium": 5}, ComplianceLevel.A),
        ({"high": 3}, ComplianceLevel.NON_COMPLIANT),
        ({"critical": 1}, ComplianceLevel.NON_COMPLIANT),
        ({"critical": 1, "low": 2, "medium": 1}, ComplianceLevel.NON_COMPLIANT),
    ],
)
def test_compliance_table(counts: dict[str, int], expected: ComplianceLevel) -> None:
    assert determine_compliance_level(issues_of(**counts)) is expected


def test_passed_checks_use_fixed_total() -> None:
    assert TOTAL_CHECK_COUNT == 15
    assert count_passed_checks([]) == 15
    assert count_passed_checks(issues_of(low=4)) == 11
    assert count_passed_checks(issues_of(low=20)) == 0


def test_count_by_type() -> None:
    issues = [
        make_issue(IssueSeverity.HIGH),
        make_issue(IssueSeverity.MEDIUM, IssueType.WARNING),
        make_issue(IssueSeverity.LOW, IssueType.NOTICE),
    ]

    assert count_by_type(issues, IssueType.ERROR) == 1
    assert count_by_type(issues, IssueType.WARNING) == 1
    assert count_by_type(issues, IssueType.NOTICE) == 1
