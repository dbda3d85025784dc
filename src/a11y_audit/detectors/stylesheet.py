"""Stylesheet detectors."""

from __future__ import annotations

import logging
import re
from typing import List

from ..contrast import ColorParseError, evaluate_contrast
from ..models import Issue, IssueSeverity, IssueType

logger = logging.getLogger(__name__)

# Declarations start the stylesheet or follow "{", ";" or whitespace, which
# keeps selectors such as ".color:hover" out.
_COLOR_DECLARATION_RE = re.compile(r"(?:^|[{;\s])color\s*:\s*([^;{}]+)", re.IGNORECASE)
_BACKGROUND_DECLARATION_RE = re.compile(
    r"(?:^|[{;\s])background-color\s*:\s*([^;{}]+)", re.IGNORECASE
)


def detect_low_contrast(stylesheet: str) -> List[Issue]:
    """Check the first ``color``/``background-color`` pair of the stylesheet.

    Only the first declaration of each property in the whole stylesheet is
    inspected; selectors and the cascade are not resolved. A missing pair or
    an unparseable colour passes silently.
    """

    color_match = _COLOR_DECLARATION_RE.search(stylesheet)
    background_match = _BACKGROUND_DECLARATION_RE.search(stylesheet)
    if color_match is None or background_match is None:
        logger.debug("No color/background-color pair found; skipping contrast check")
        return []

    try:
        contrast = evaluate_contrast(color_match.group(1), background_match.group(1))
    except ColorParseError as exc:
        logger.debug("Skipping contrast check: %s", exc)
        return []

    if contrast.wcag_aa:
        return []

    return [
        Issue(
            id="low-contrast",
            type=IssueType.ERROR,
            severity=IssueSeverity.HIGH,
            rule="WCAG 1.4.3",
            element="color declarations",
            message=f"Low color contrast ratio: {contrast.ratio:.2f}:1",
            suggestion=(
                "Increase contrast between text and background colors "
                "(minimum 4.5:1 for normal text)"
            ),
            code_example=(
                "Use darker text on light backgrounds or lighter text on dark backgrounds"
            ),
        )
    ]
