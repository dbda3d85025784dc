from __future__ import annotations

from a11y_audit.detectors import detect_low_contrast
from a11y_audit.models import IssueSeverity, IssueType


def test_low_contrast_pair_is_flagged_with_ratio() -> None:
    issues = detect_low_contrast("body { background-color: #ffffff; color: #777777; }")

    assert len(issues) == 1
    issue = issues[0]
    assert issue.id == "low-contrast"
    assert issue.type is IssueType.ERROR
    assert issue.severity is IssueSeverity.HIGH
    assert issue.rule == "WCAG 1.4.3"
    assert issue.element == "color declarations"
    assert issue.message == "Low color contrast ratio: 4.48:1"


def test_sufficient_contrast_passes() -> None:
    assert detect_low_contrast("p { color: #000; background-color: #fff; }") == []


def test_only_first_declarations_are_inspected() -> None:
    stylesheet = """
    body { color: black; background-color: white; }
    .muted { color: #eeeeee; background-color: #ffffff; }
    """

    assert detect_low_contrast(stylesheet) == []


def test_background_color_is_not_mistaken_for_text_color() -> None:
    stylesheet = "div { background-color: #ffffff; } p { color: #fafafa; }"

    assert len(detect_low_contrast(stylesheet)) == 1


def test_missing_pair_passes_silently() -> None:
    assert detect_low_contrast("p { color: #eee; }") == []
    assert detect_low_contrast("p { background-color: #eee; }") == []


def test_unparseable_colours_pass_silently() -> None:
    assert detect_low_contrast("p { color: var(--text); background-color: #fff; }") == []


def test_selectors_named_color_are_not_declarations() -> None:
    stylesheet = (
        ".color:hover { text-decoration: underline; } "
        "p { color: #eeeeee; background-color: #ffffff; }"
    )

    issues = detect_low_contrast(stylesheet)

    assert [issue.id for issue in issues] == ["low-contrast"]


def test_declaration_at_start_of_stylesheet_is_found() -> None:
    assert len(detect_low_contrast("color: #fafafa; background-color: #fff;")) == 1
