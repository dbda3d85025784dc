from __future__ import annotations

import pytest

from a11y_audit.contrast import (
    ColorParseError,
    classify_ratio,
    contrast_ratio,
    evaluate_contrast,
    parse_color,
    relative_luminance,
)
from a11y_audit.models import ContrastLevel


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("#000", (0, 0, 0)),
        ("#FFFFFF", (255, 255, 255)),
        ("#ff000080", (255, 0, 0)),
        ("rgb(18, 52, 86)", (18, 52, 86)),
        ("rgba(255, 255, 255, 0.5)", (255, 255, 255)),
        ("rgb(0 128 0 / 50%)", (0, 128, 0)),
        ("hsl(0, 100%, 50%)", (255, 0, 0)),
        ("White", (255, 255, 255)),
        ("navy !important", (0, 0, 128)),
    ],
)
def test_parse_color(token: str, expected: tuple[int, int, int]) -> None:
    assert parse_color(token) == expected


@pytest.mark.parametrize("token", ["", "var(--text)", "inherit", "#12", "rgb(1, 2)"])
def test_parse_color_rejects_unsupported_tokens(token: str) -> None:
    with pytest.raises(ColorParseError):
        parse_color(token)


def test_luminance_extremes() -> None:
    assert relative_luminance((0, 0, 0)) == 0
    assert relative_luminance((255, 255, 255)) == pytest.approx(1.0)


def test_black_on_white_is_maximum_contrast() -> None:
    assert contrast_ratio((0, 0, 0), (255, 255, 255)) == pytest.approx(21.0)
    assert contrast_ratio((255, 255, 255), (0, 0, 0)) == pytest.approx(21.0)


def test_evaluate_contrast_classifies_levels() -> None:
    strong = evaluate_contrast("#000000", "#ffffff")
    assert strong.level is ContrastLevel.AAA
    assert strong.wcag_aa and strong.wcag_aaa

    borderline = evaluate_contrast("#767676", "#ffffff")
    assert borderline.ratio == pytest.approx(4.54, abs=0.01)
    assert borderline.level is ContrastLevel.AA
    assert borderline.wcag_aa and not borderline.wcag_aaa

    weak = evaluate_contrast("#777777", "#ffffff")
    assert weak.ratio == pytest.approx(4.48, abs=0.01)
    assert weak.level is ContrastLevel.FAIL
    assert not weak.wcag_aa


@pytest.mark.parametrize(
    ("ratio", "aa", "aaa", "level"),
    [
        (4.5, True, False, ContrastLevel.AA),
        (4.49, False, False, ContrastLevel.FAIL),
        (7.0, True, True, ContrastLevel.AAA),
        (6.99, True, False, ContrastLevel.AA),
        (1.0, False, False, ContrastLevel.FAIL),
    ],
)
def test_classify_ratio_thresholds(ratio: float, aa: bool, aaa: bool, level: ContrastLevel) -> None:
    result = classify_ratio(ratio, "#111", "#eee")

    assert result.wcag_aa is aa
    assert result.wcag_aaa is aaa
    assert result.level is level
    assert result.to_dict() == {
        "foreground": "#111",
        "background": "#eee",
        "ratio": ratio,
        "wcagAA": aa,
        "wcagAAA": aaa,
        "level": level.value,
    }
