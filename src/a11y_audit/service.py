"""Orchestration layer running detectors, scoring and compliance classification."""

from __future__ import annotations

import dataclasses
import logging
import re
from typing import List, Mapping, Sequence

from .detectors import MARKUP_DETECTORS, STYLESHEET_DETECTORS, Detector
from .errors import InvalidInputError
from .models import AuditResult, Issue, IssueType
from .reporting import format_report, recommendations
from .rules import RuleSettings
from .scoring import (
    calculate_score,
    count_by_type,
    count_passed_checks,
    determine_compliance_level,
)

logger = logging.getLogger(__name__)


class AccessibilityService:
    """Stateless audit engine over markup and optional stylesheet text.

    The service only holds immutable configuration, so a single instance can
    be shared across threads.
    """

    def __init__(
        self,
        *,
        markup_detectors: Sequence[Detector] | None = None,
        stylesheet_detectors: Sequence[Detector] | None = None,
        rule_settings: Mapping[str, RuleSettings] | None = None,
    ) -> None:
        self._markup_detectors = tuple(
            MARKUP_DETECTORS if markup_detectors is None else markup_detectors
        )
        self._stylesheet_detectors = tuple(
            STYLESHEET_DETECTORS if stylesheet_detectors is None else stylesheet_detectors
        )
        self._rule_settings = {
            name: dataclasses.replace(settings)
            for name, settings in (rule_settings or {}).items()
        }

    # ------------------------------------------------------------------
    def analyze_html(self, markup: str, stylesheet: str | None = None) -> AuditResult:
        """Audit ``markup`` and, when given, ``stylesheet`` text."""

        if not isinstance(markup, str):
            raise InvalidInputError(f"Markup must be a string, got {type(markup).__name__}")
        if stylesheet is not None and not isinstance(stylesheet, str):
            raise InvalidInputError(
                f"Stylesheet must be a string or None, got {type(stylesheet).__name__}"
            )

        issues = self._run_detectors(self._markup_detectors, markup)
        if stylesheet:
            issues.extend(self._run_detectors(self._stylesheet_detectors, stylesheet))

        result = AuditResult(
            score=calculate_score(issues),
            issues=tuple(issues),
            passed=count_passed_checks(issues),
            failed=count_by_type(issues, IssueType.ERROR),
            warnings=count_by_type(issues, IssueType.WARNING),
            compliance_level=determine_compliance_level(issues),
        )
        logger.debug(
            "Audit finished with score %s and %d issue(s)", result.score, len(result.issues)
        )
        return result

    # ------------------------------------------------------------------
    def generate_report(self, result: AuditResult) -> str:
        return format_report(result)

    # ------------------------------------------------------------------
    def get_accessibility_recommendations(self) -> List[str]:
        return recommendations()

    # ------------------------------------------------------------------
    def _run_detectors(self, detectors: Sequence[Detector], text: str) -> List[Issue]:
        issues: List[Issue] = []
        for detector in detectors:
            settings = self._rule_settings.get(detector.name)
            if settings is not None and not settings.enabled:
                logger.debug("Detector %s disabled by rule settings", detector.name)
                continue

            try:
                found = detector.detect(text)
            except (re.error, RecursionError) as exc:
                raise InvalidInputError(
                    f"Detector {detector.name} could not scan the supplied text"
                ) from exc

            logger.debug("Detector %s produced %d issue(s)", detector.name, len(found))
            issues.extend(self._apply_overrides(found, settings))
        return issues

    # ------------------------------------------------------------------
    def _apply_overrides(
        self, issues: Sequence[Issue], settings: RuleSettings | None
    ) -> List[Issue]:
        if settings is None or (settings.severity is None and settings.type is None):
            return list(issues)

        overrides = {}
        if settings.severity is not None:
            overrides["severity"] = settings.severity
        if settings.type is not None:
            overrides["type"] = settings.type
        return [dataclasses.replace(issue, **overrides) for issue in issues]


_default_service = AccessibilityService()


def analyze_html(markup: str, stylesheet: str | None = None) -> AuditResult:
    """Audit markup with the built-in detector catalogue."""

    return _default_service.analyze_html(markup, stylesheet)


def generate_report(result: AuditResult) -> str:
    return _default_service.generate_report(result)


def get_accessibility_recommendations() -> List[str]:
    return _default_service.get_accessibility_recommendations()


__all__ = [
    "AccessibilityService",
    "InvalidInputError",
    "analyze_html",
    "generate_report",
    "get_accessibility_recommendations",
]
