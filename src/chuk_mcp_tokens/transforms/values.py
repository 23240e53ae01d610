"""
Value transforms - CSS-ready token values.

size/px
    Unitless numbers in size categories get a ``px`` unit:
    ("spacing", "md") = 16 -> "16px"

color/css
    Colors in hex, rgb() or hsl() notation are normalized to lowercase
    ``#rrggbb``, or to ``rgba(r, g, b, a)`` when they are translucent.
    Anything else (named colors, var() references) passes through.

Both match on the token's category, the first path segment after an
optional brand prefix.
"""

from __future__ import annotations

import colorsys
import re
from collections.abc import Sequence

from chuk_mcp_tokens.constants import DEFAULT_BRAND_PREFIX
from chuk_mcp_tokens.models.token import Token, TokenValue
from chuk_mcp_tokens.transforms.names import strip_brand_prefix

COLOR_CATEGORY = "color"

SIZE_CATEGORIES = frozenset(
    {
        "size",
        "spacing",
        "fontSize",
        "letterSpacing",
        "borderRadius",
        "radius",
        "borderWidth",
        "width",
        "height",
        "maxWidth",
        "breakpoint",
        "blur",
        "gap",
    }
)

NUMBER_RE = re.compile(r"^\s*-?(?:\d+\.?\d*|\.\d+)\s*$")
HEX_RE = re.compile(r"^#(?P<digits>[0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$", re.I)
FUNCTION_RE = re.compile(r"^(?P<name>rgba?|hsla?)\(\s*(?P<args>[^)]*)\)$", re.I)
ARG_SPLIT_RE = re.compile(r"\s*[,/]\s*|\s+")


def value_category(path: Sequence[str], prefix: str = DEFAULT_BRAND_PREFIX) -> str | None:
    """First path segment after the brand prefix, if any."""
    segments = strip_brand_prefix(path, prefix)
    return segments[0] if segments else None


def js_number(number: float) -> int | float:
    """Integral floats print without a fraction, as in JavaScript."""
    if isinstance(number, float) and number.is_integer():
        return int(number)
    return number


def size_px(token: Token, prefix: str = DEFAULT_BRAND_PREFIX) -> TokenValue:
    """Append px to a unitless size value."""
    if value_category(token.path, prefix) not in SIZE_CATEGORIES:
        return token.value

    value = token.value
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        if not NUMBER_RE.match(value):
            return value
        value = float(value)
    return f"{js_number(value)}px"


def _channel(arg: str) -> float:
    """Parse an rgb channel, as 0-255 or a percentage."""
    if arg.endswith("%"):
        return float(arg[:-1]) * 255 / 100
    return float(arg)


def _alpha(arg: str) -> float:
    if arg.endswith("%"):
        return float(arg[:-1]) / 100
    return float(arg)


def parse_color(value: str) -> tuple[int, int, int, float] | None:
    """
    Parse a CSS color into (r, g, b, alpha).

    Args:
        value: Hex, rgb()/rgba() or hsl()/hsla() notation

    Returns:
        Channels 0-255 and alpha 0-1, or None if not recognized
    """
    text = value.strip()

    match = HEX_RE.match(text)
    if match:
        digits = match.group("digits")
        if len(digits) <= 4:
            digits = "".join(ch * 2 for ch in digits)
        r, g, b = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
        alpha = int(digits[6:8], 16) / 255 if len(digits) == 8 else 1.0
        return r, g, b, alpha

    match = FUNCTION_RE.match(text)
    if not match:
        return None

    args = [arg for arg in ARG_SPLIT_RE.split(match.group("args").strip()) if arg]
    if len(args) not in (3, 4):
        return None

    try:
        alpha = _alpha(args[3]) if len(args) == 4 else 1.0
        if match.group("name").lower().startswith("rgb"):
            channels = [_channel(arg) for arg in args[:3]]
        else:
            hue = float(args[0].removesuffix("deg")) % 360 / 360
            saturation = float(args[1].rstrip("%")) / 100
            lightness = float(args[2].rstrip("%")) / 100
            # colorsys uses HLS ordering
            channels = [c * 255 for c in colorsys.hls_to_rgb(hue, lightness, saturation)]
    except ValueError:
        return None

    r, g, b = (min(255, max(0, round(c))) for c in channels)
    return r, g, b, min(1.0, max(0.0, alpha))


def css_color(value: str) -> str:
    """Normalize a CSS color string, or return it unchanged."""
    parsed = parse_color(value)
    if parsed is None:
        return value

    r, g, b, alpha = parsed
    if alpha >= 1:
        return f"#{r:02x}{g:02x}{b:02x}"
    return f"rgba({r}, {g}, {b}, {js_number(round(alpha, 2))})"


def color_css(token: Token, prefix: str = DEFAULT_BRAND_PREFIX) -> TokenValue:
    """Normalize color token values."""
    if value_category(token.path, prefix) != COLOR_CATEGORY:
        return token.value
    if not isinstance(token.value, str):
        return token.value
    return css_color(token.value)
