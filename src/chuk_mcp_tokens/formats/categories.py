"""
Static category map for the nested Tailwind theme.

Keys are token path segments, values say which theme bucket the token
lands in. Order matters for substring matching of brand tokens: compound
names (``lineHeight``) come before the plain names they contain
(``height``).
"""

from __future__ import annotations

from chuk_mcp_tokens.constants import ThemeBucket
from chuk_mcp_tokens.models.category import CategorySpec, PlacementStrategy

CATEGORY_MAP: dict[str, CategorySpec] = {
    "fontSize": CategorySpec(target=ThemeBucket.FONT_SIZE.value),
    "fontFamily": CategorySpec(target=ThemeBucket.FONT_FAMILY.value),
    "fontWeight": CategorySpec(target=ThemeBucket.FONT_WEIGHT.value),
    "lineHeight": CategorySpec(target=ThemeBucket.LINE_HEIGHT.value),
    "letterSpacing": CategorySpec(target=ThemeBucket.LETTER_SPACING.value),
    "borderRadius": CategorySpec(target=ThemeBucket.BORDER_RADIUS.value),
    "borderWidth": CategorySpec(target=ThemeBucket.BORDER_WIDTH.value),
    "boxShadow": CategorySpec(target=ThemeBucket.BOX_SHADOW.value),
    "maxWidth": CategorySpec(target=ThemeBucket.MAX_WIDTH.value),
    "zIndex": CategorySpec(target=ThemeBucket.Z_INDEX.value, raw=True),
    "color": CategorySpec(
        target=ThemeBucket.COLORS.value,
        placement=PlacementStrategy.COLOR_SCALE,
    ),
    "spacing": CategorySpec(target=ThemeBucket.SPACING.value),
    "radius": CategorySpec(target=ThemeBucket.BORDER_RADIUS.value),
    "shadow": CategorySpec(target=ThemeBucket.BOX_SHADOW.value),
    "opacity": CategorySpec(target=ThemeBucket.OPACITY.value),
    "width": CategorySpec(target=ThemeBucket.WIDTH.value),
    "height": CategorySpec(target=ThemeBucket.HEIGHT.value),
    # Used inside media queries
    "breakpoint": CategorySpec(target=ThemeBucket.SCREENS.value, raw=True),
    "duration": CategorySpec(target=ThemeBucket.TRANSITION_DURATION.value),
    "easing": CategorySpec(target=ThemeBucket.TRANSITION_TIMING.value),
    "blur": CategorySpec(target=ThemeBucket.BLUR.value),
    "gap": CategorySpec(target=ThemeBucket.GAP.value),
}