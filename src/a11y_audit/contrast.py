"""Colour parsing and WCAG contrast ratio evaluation."""

from __future__ import annotations

import colorsys
import logging
import re
from typing import Tuple

from .models import ContrastResult

logger = logging.getLogger(__name__)

RGB = Tuple[int, int, int]


class ColorParseError(ValueError):
    """Raised when a colour token cannot be converted to RGB."""


_HEX_RE = re.compile(r"#([0-9a-f]{3,8})", re.IGNORECASE)
_FUNCTION_RE = re.compile(r"(rgba?|hsla?)\(\s*([^)]*)\)", re.IGNORECASE)
_IMPORTANT_RE = re.compile(r"\s*!\s*important\s*$", re.IGNORECASE)

NAMED_COLORS = {
    "black": "#000000",
    "white": "#ffffff",
    "red": "#ff0000",
    "lime": "#00ff00",
    "green": "#008000",
    "blue": "#0000ff",
    "yellow": "#ffff00",
    "cyan": "#00ffff",
    "aqua": "#00ffff",
    "magenta": "#ff00ff",
    "fuchsia": "#ff00ff",
    "silver": "#c0c0c0",
    "gray": "#808080",
    "grey": "#808080",
    "maroon": "#800000",
    "olive": "#808000",
    "purple": "#800080",
    "teal": "#008080",
    "navy": "#000080",
    "orange": "#ffa500",
    "darkgray": "#a9a9a9",
    "darkgrey": "#a9a9a9",
    "dimgray": "#696969",
    "dimgrey": "#696969",
    "lightgray": "#d3d3d3",
    "lightgrey": "#d3d3d3",
    "gainsboro": "#dcdcdc",
    "whitesmoke": "#f5f5f5",
    "ghostwhite": "#f8f8ff",
    "ivory": "#fffff0",
    "beige": "#f5f5dc",
    "linen": "#faf0e6",
    "snow": "#fffafa",
    "slategray": "#708090",
    "slategrey": "#708090",
    "lightslategray": "#778899",
    "darkslategray": "#2f4f4f",
    "darkblue": "#00008b",
    "midnightblue": "#191970",
    "royalblue": "#4169e1",
    "steelblue": "#4682b4",
    "skyblue": "#87ceeb",
    "lightblue": "#add8e6",
    "darkgreen": "#006400",
    "lightgreen": "#90ee90",
    "darkred": "#8b0000",
    "crimson": "#dc143c",
    "firebrick": "#b22222",
    "tomato": "#ff6347",
    "coral": "#ff7f50",
    "gold": "#ffd700",
    "khaki": "#f0e68c",
    "brown": "#a52a2a",
    "chocolate": "#d2691e",
    "tan": "#d2b48c",
    "pink": "#ffc0cb",
    "hotpink": "#ff69b4",
    "violet": "#ee82ee",
    "indigo": "#4b0082",
    "rebeccapurple": "#663399",
}


def parse_color(token: str) -> RGB:
    """Return the ``(r, g, b)`` channels of a CSS colour token.

    Hex (3, 4, 6 or 8 digits), ``rgb()``/``rgba()``, ``hsl()``/``hsla()`` and a
    table of named colours are understood. Alpha is ignored.
    """

    if not isinstance(token, str):
        raise ColorParseError(f"Colour token must be a string: {token!r}")

    value = _IMPORTANT_RE.sub("", token.strip().rstrip(";")).strip()
    if not value:
        raise ColorParseError("Empty colour token")

    named = NAMED_COLORS.get(value.lower())
    if named is not None:
        value = named

    match = _HEX_RE.fullmatch(value)
    if match:
        return _parse_hex(match.group(1), token)

    match = _FUNCTION_RE.fullmatch(value)
    if match:
        name = match.group(1).lower()
        arguments = [part for part in re.split(r"[\s,/]+", match.group(2).strip()) if part]
        if len(arguments) < 3:
            raise ColorParseError(f"Colour function needs three channels: {token!r}")
        if name.startswith("rgb"):
            return _parse_rgb_channels(arguments[:3], token)
        return _parse_hsl_channels(arguments[:3], token)

    raise ColorParseError(f"Unsupported colour token: {token!r}")


def _parse_hex(digits: str, token: str) -> RGB:
    if len(digits) in (3, 4):
        return (int(digits[0] * 2, 16), int(digits[1] * 2, 16), int(digits[2] * 2, 16))
    if len(digits) in (6, 8):
        return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))
    raise ColorParseError(f"Invalid hex colour length: {token!r}")


def _parse_rgb_channels(parts: list[str], token: str) -> RGB:
    channels = []
    for part in parts:
        try:
            if part.endswith("%"):
                channel = float(part[:-1]) * 255 / 100
            else:
                channel = float(part)
        except ValueError as exc:
            raise ColorParseError(f"Invalid rgb channel {part!r} in {token!r}") from exc
        channels.append(int(round(min(255.0, max(0.0, channel)))))
    return channels[0], channels[1], channels[2]


def _parse_hsl_channels(parts: list[str], token: str) -> RGB:
    try:
        hue = float(re.sub(r"deg$", "", parts[0], flags=re.IGNORECASE))
        saturation = float(parts[1].rstrip("%")) / 100
        lightness = float(parts[2].rstrip("%")) / 100
    except ValueError as exc:
        raise ColorParseError(f"Invalid hsl channels in {token!r}") from exc

    saturation = min(1.0, max(0.0, saturation))
    lightness = min(1.0, max(0.0, lightness))
    red, green, blue = colorsys.hls_to_rgb((hue % 360) / 360, lightness, saturation)
    return int(round(red * 255)), int(round(green * 255)), int(round(blue * 255))


def relative_luminance(rgb: RGB) -> float:
    """WCAG relative luminance of an sRGB colour."""

    def linearize(channel: int) -> float:
        scaled = channel / 255
        if scaled <= 0.04045:
            return scaled / 12.92
        return ((scaled + 0.055) / 1.055) ** 2.4

    red, green, blue = (linearize(channel) for channel in rgb)
    return 0.2126 * red + 0.7152 * green + 0.0722 * blue


def contrast_ratio(first: RGB, second: RGB) -> float:
    """Return ``(L1 + 0.05) / (L2 + 0.05)`` where ``L1`` is the lighter colour."""

    lighter, darker = sorted((relative_luminance(first), relative_luminance(second)), reverse=True)
    return (lighter + 0.05) / (darker + 0.05)


def classify_ratio(ratio: float, foreground: str = "", background: str = "") -> ContrastResult:
    """Classify an already computed ratio against the AA and AAA thresholds."""

    return ContrastResult.from_ratio(foreground, background, ratio)


def evaluate_contrast(foreground: str, background: str) -> ContrastResult:
    """Compute and classify the contrast between two colour tokens."""

    ratio = contrast_ratio(parse_color(foreground), parse_color(background))
    logger.debug("Contrast %s on %s = %.2f", foreground, background, ratio)
    return classify_ratio(ratio, foreground.strip(), background.strip())
