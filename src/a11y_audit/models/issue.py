"""Issue models produced by detectors and consumed by scoring and reporting."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from ..errors import InvalidInputError


class IssueType(str, Enum):
    """Kind of issue, used for the failed/warning counters."""

    ERROR = "error"
    WARNING = "warning"
    NOTICE = "notice"


class IssueSeverity(str, Enum):
    """Severity levels driving score deductions and compliance tiers."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True, slots=True)
class Issue:
    """A single accessibility defect found in the audited document."""

    id: str
    type: IssueType
    severity: IssueSeverity
    rule: str
    element: str
    message: str
    suggestion: str
    code_example: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "id": self.id,
            "type": self.type.value,
            "severity": self.severity.value,
            "wcagRule": self.rule,
            "element": self.element,
            "message": self.message,
            "suggestion": self.suggestion,
        }
        if self.code_example is not None:
            payload["codeExample"] = self.code_example
        return payload

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Issue":
        """Rebuild an issue from the camelCase payload emitted by :meth:`to_dict`."""

        if not isinstance(data, Mapping):
            raise InvalidInputError("Issue payload must be a mapping")

        try:
            issue_type = IssueType(str(data["type"]).strip().lower())
            severity = IssueSeverity(str(data["severity"]).strip().lower())
        except KeyError as exc:
            raise InvalidInputError(f"Issue payload missing field: {exc.args[0]}") from exc
        except ValueError as exc:
            raise InvalidInputError(f"Invalid issue classification: {exc}") from exc

        code_example = data.get("codeExample")
        return cls(
            id=str(data.get("id", "")),
            type=issue_type,
            severity=severity,
            rule=str(data.get("wcagRule") or data.get("rule") or ""),
            element=str(data.get("element", "")),
            message=str(data.get("message", "")),
            suggestion=str(data.get("suggestion", "")),
            code_example=str(code_example) if code_example is not None else None,
        )
