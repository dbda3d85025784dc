"""Audit result returned by the accessibility service."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Tuple

from ..errors import InvalidInputError
from .issue import Issue


class ComplianceLevel(str, Enum):
    """Coarse WCAG conformance tier derived from issue severities."""

    NON_COMPLIANT = "Non-compliant"
    A = "A"
    AA = "AA"
    AAA = "AAA"


@dataclass(frozen=True, slots=True)
class AuditResult:
    """Outcome of a single :meth:`AccessibilityService.analyze_html` call."""

    score: int
    issues: Tuple[Issue, ...]
    passed: int
    failed: int
    warnings: int
    compliance_level: ComplianceLevel

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "issues": [issue.to_dict() for issue in self.issues],
            "passed": self.passed,
            "failed": self.failed,
            "warnings": self.warnings,
            "complianceLevel": self.compliance_level.value,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AuditResult":
        """Rebuild a result from the payload emitted by :meth:`to_dict`."""

        if not isinstance(data, Mapping):
            raise InvalidInputError("Audit result payload must be a mapping")

        raw_issues = data.get("issues") or []
        if not isinstance(raw_issues, (list, tuple)):
            raise InvalidInputError("Audit result issues must be a list")

        try:
            compliance_level = ComplianceLevel(str(data["complianceLevel"]).strip())
            score = int(data["score"])
            passed = int(data.get("passed", 0))
            failed = int(data.get("failed", 0))
            warnings = int(data.get("warnings", 0))
        except KeyError as exc:
            raise InvalidInputError(f"Audit result payload missing field: {exc.args[0]}") from exc
        except (TypeError, ValueError) as exc:
            raise InvalidInputError(f"Invalid audit result payload: {exc}") from exc

        return cls(
            score=score,
            issues=tuple(Issue.from_dict(entry) for entry in raw_issues),
            passed=passed,
            failed=failed,
            warnings=warnings,
            compliance_level=compliance_level,
        )
