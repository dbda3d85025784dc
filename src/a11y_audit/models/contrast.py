"""Contrast check result model."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

AA_THRESHOLD = 4.5
AAA_THRESHOLD = 7.0


class ContrastLevel(str, Enum):
    """Highest WCAG contrast threshold a colour pair meets."""

    FAIL = "fail"
    AA = "aa"
    AAA = "aaa"


@dataclass(frozen=True, slots=True)
class ContrastResult:
    """Contrast ratio of a foreground/background pair and its WCAG verdict."""

    foreground: str
    background: str
    ratio: float
    wcag_aa: bool
    wcag_aaa: bool
    level: ContrastLevel

    @classmethod
    def from_ratio(cls, foreground: str, background: str, ratio: float) -> "ContrastResult":
        """Classify ``ratio`` against the normal-text AA and AAA thresholds."""

        wcag_aa = ratio >= AA_THRESHOLD
        wcag_aaa = ratio >= AAA_THRESHOLD
        if wcag_aaa:
            level = ContrastLevel.AAA
        elif wcag_aa:
            level = ContrastLevel.AA
        else:
            level = ContrastLevel.FAIL

        return cls(
            foreground=foreground,
            background=background,
            ratio=ratio,
            wcag_aa=wcag_aa,
            wcag_aaa=wcag_aaa,
            level=level,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "foreground": self.foreground,
            "background": self.background,
            "ratio": self.ratio,
            "wcagAA": self.wcag_aa,
            "wcagAAA": self.wcag_aaa,
            "level": self.level.value,
        }
