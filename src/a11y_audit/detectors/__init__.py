"""Detector registry.

Markup detectors run in the order of :data:`MARKUP_DETECTORS`; stylesheet
detectors run afterwards, only when stylesheet text is supplied. New checks
are added by appending a :class:`Detector` to the relevant tuple.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List

from ..models import Issue
from .markup import (
    detect_heading_hierarchy,
    detect_missing_alt_text,
    detect_missing_button_text,
    detect_missing_form_labels,
    detect_missing_main_landmark,
    detect_missing_title,
)
from .stylesheet import detect_low_contrast

DetectorCheck = Callable[[str], List[Issue]]


@dataclass(frozen=True, slots=True)
class Detector:
    """Named check over markup or stylesheet text."""

    name: str
    check: DetectorCheck

    def detect(self, text: str) -> List[Issue]:
        return self.check(text)


MARKUP_DETECTORS = (
    Detector("image-alt", detect_missing_alt_text),
    Detector("heading-hierarchy", detect_heading_hierarchy),
    Detector("form-label", detect_missing_form_labels),
    Detector("button-text", detect_missing_button_text),
    Detector("main-landmark", detect_missing_main_landmark),
    Detector("page-title", detect_missing_title),
)

STYLESHEET_DETECTORS = (Detector("color-contrast", detect_low_contrast),)

__all__ = [
    "Detector",
    "DetectorCheck",
    "MARKUP_DETECTORS",
    "STYLESHEET_DETECTORS",
    "detect_heading_hierarchy",
    "detect_low_contrast",
    "detect_missing_alt_text",
    "detect_missing_button_text",
    "detect_missing_form_labels",
    "detect_missing_main_landmark",
    "detect_missing_title",
]
