"""Markup detectors scanning document text with regular expressions.

Each detector is a pure function taking the markup text and returning the
issues it found in match order. Detectors do not build a DOM and never depend
on each other's output.

Tag patterns stop at the next ``<`` or ``>`` and paired elements are matched
by walking opening and closing tags in one pass, so every scan stays linear
in the length of the markup.
"""

from __future__ import annotations

import re
from typing import Iterator, List, Optional, Tuple

from ..models import Issue, IssueSeverity, IssueType

_IMG_RE = re.compile(r"<img\b[^<>]*>", re.IGNORECASE)
_HEADING_TAG_RE = re.compile(r"<(?P<closing>/)?h(?P<level>[1-6])\b[^<>]*>", re.IGNORECASE)
_INPUT_RE = re.compile(r"<input\b[^<>]*>", re.IGNORECASE)
_LABEL_RE = re.compile(r"<label\b[^<>]*>", re.IGNORECASE)
_BUTTON_TAG_RE = re.compile(r"<(?P<closing>/)?button\b[^<>]*>", re.IGNORECASE)
_TAG_RE = re.compile(r"<[^<>]*>")
_MAIN_TAG_RE = re.compile(r"<main\b", re.IGNORECASE)
_MAIN_ROLE_RE = re.compile(r"""(?<![\w-])role\s*=\s*["']?main(?=["'\s/>]|$)""", re.IGNORECASE)
_TITLE_TAG_RE = re.compile(r"<(?P<closing>/)?title\b[^<>]*>", re.IGNORECASE)

_ATTRIBUTE_TEMPLATE = r"""(?<![\w-]){name}\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s"'=<>`]+))"""

TagPair = Tuple[re.Match, re.Match]


def _paired_tags(markup: str, tag_re: re.Pattern[str]) -> Iterator[TagPair]:
    """Yield ``(opening, closing)`` matches, pairing each opening tag with the next closing tag.

    Opening tags seen while a pair is open belong to its content. An opening
    tag that is never closed is dropped.
    """

    opening = None
    for match in tag_re.finditer(markup):
        if match.group("closing"):
            if opening is not None:
                yield opening, match
                opening = None
        elif opening is None:
            opening = match


def _has_attribute(tag: str, name: str) -> bool:
    return re.search(rf"(?<![\w-]){re.escape(name)}\s*=", tag, re.IGNORECASE) is not None


def _attribute_value(tag: str, name: str) -> Optional[str]:
    pattern = _ATTRIBUTE_TEMPLATE.format(name=re.escape(name))
    match = re.search(pattern, tag, re.IGNORECASE)
    if match is None:
        return None
    return next(group for group in match.groups() if group is not None)


def detect_missing_alt_text(markup: str) -> List[Issue]:
    """Flag ``img`` tags without an ``alt`` attribute."""

    issues: List[Issue] = []
    for index, match in enumerate(_IMG_RE.finditer(markup)):
        tag = match.group(0)
        if _has_attribute(tag, "alt"):
            continue
        issues.append(
            Issue(
                id=f"img-alt-{index}",
                type=IssueType.ERROR,
                severity=IssueSeverity.HIGH,
                rule="WCAG 1.1.1",
                element=tag,
                message="Image missing alt attribute",
                suggestion="Add descriptive alt text to convey the image content to screen readers",
                code_example='<img src="image.jpg" alt="Descriptive text about the image">',
            )
        )
    return issues


def detect_heading_hierarchy(markup: str) -> List[Issue]:
    """Flag headings that skip more than one level below the previous heading."""

    issues: List[Issue] = []
    previous_level = 0
    for index, (opening, closing) in enumerate(_paired_tags(markup, _HEADING_TAG_RE)):
        level = int(opening.group("level"))
        if previous_level > 0 and level > previous_level + 1:
            issues.append(
                Issue(
                    id=f"heading-hierarchy-{index}",
                    type=IssueType.WARNING,
                    severity=IssueSeverity.MEDIUM,
                    rule="WCAG 1.3.1",
                    element=markup[opening.start() : closing.end()],
                    message="Heading levels should not skip (e.g., h1 to h3)",
                    suggestion="Use heading levels in sequential order (h1, h2, h3, etc.)",
                    code_example="<h1>Main Title</h1><h2>Section</h2><h3>Subsection</h3>",
                )
            )
        previous_level = level
    return issues


def detect_missing_form_labels(markup: str) -> List[Issue]:
    """Flag inputs with an ``id`` that no ``label`` references and no ``aria-label`` names.

    Inputs without an ``id`` are left alone.
    """

    label_targets = set()
    for match in _LABEL_RE.finditer(markup):
        target = _attribute_value(match.group(0), "for")
        if target:
            label_targets.add(target)

    issues: List[Issue] = []
    for index, match in enumerate(_INPUT_RE.finditer(markup)):
        tag = match.group(0)
        if _has_attribute(tag, "aria-label"):
            continue
        input_id = _attribute_value(tag, "id")
        if not input_id or input_id in label_targets:
            continue
        issues.append(
            Issue(
                id=f"input-label-{index}",
                type=IssueType.ERROR,
                severity=IssueSeverity.HIGH,
                rule="WCAG 1.3.1",
                element=tag,
                message="Form input missing associated label",
                suggestion="Add a label element or aria-label attribute",
                code_example='<label for="email">Email:</label><input type="email" id="email">',
            )
        )
    return issues


def _button_text(content: str) -> str:
    # Alt text of nested images counts towards the accessible name.
    alt_texts = [
        _attribute_value(tag.group(0), "alt") or ""
        for tag in _IMG_RE.finditer(content)
    ]
    return " ".join([_TAG_RE.sub(" ", content), *alt_texts])


def detect_missing_button_text(markup: str) -> List[Issue]:
    """Flag buttons with no ``aria-label`` and no letters in their content."""

    issues: List[Issue] = []
    for index, (opening, closing) in enumerate(_paired_tags(markup, _BUTTON_TAG_RE)):
        opening_tag = opening.group(0)
        content = markup[opening.end() : closing.start()]
        if _has_attribute(opening_tag, "aria-label") or _has_attribute(
            opening_tag, "aria-labelledby"
        ):
            continue
        if any(character.isalpha() for character in _button_text(content)):
            continue
        issues.append(
            Issue(
                id=f"button-text-{index}",
                type=IssueType.ERROR,
                severity=IssueSeverity.HIGH,
                rule="WCAG 2.4.4",
                element=markup[opening.start() : closing.end()],
                message="Button missing accessible text",
                suggestion="Add descriptive text inside button or use aria-label",
                code_example='<button aria-label="Close dialog">×</button> or <button>Close</button>',
            )
        )
    return issues


def detect_missing_main_landmark(markup: str) -> List[Issue]:
    if _MAIN_TAG_RE.search(markup) or _MAIN_ROLE_RE.search(markup):
        return []
    return [
        Issue(
            id="missing-main",
            type=IssueType.WARNING,
            severity=IssueSeverity.MEDIUM,
            rule="WCAG 1.3.1",
            element="document",
            message="Page missing main landmark",
            suggestion="Add a main element to identify the primary content",
            code_example="<main><!-- Primary page content --></main>",
        )
    ]


def detect_missing_title(markup: str) -> List[Issue]:
    if any(
        markup[opening.end() : closing.start()].strip()
        for opening, closing in _paired_tags(markup, _TITLE_TAG_RE)
    ):
        return []
    return [
        Issue(
            id="missing-title",
            type=IssueType.ERROR,
            severity=IssueSeverity.CRITICAL,
            rule="WCAG 2.4.2",
            element="document",
            message="Page missing or empty title",
            suggestion="Add a descriptive page title",
            code_example="<title>Page Name - Site Name</title>",
        )
    ]
