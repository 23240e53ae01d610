"""
Nested Tailwind theme (javascript/tailwind-nested).

The theme is built in three steps:

1. Placement - every token becomes a ThemeEntry (bucket, key path, value).
   Base tokens come first, then brand tokens, so brand entries are
   later in the list.
2. Fold - entries are written into the theme in order; later writes win.
3. Post-processing - DEFAULT keys in the color scale are collapsed,
   empty buckets are removed and primary.DEFAULT mirrors primary.600.

Base tokens are emitted as var(--name) references (or literal values for
raw categories). Brand tokens are inlined as literal values.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from chuk_mcp_tokens.constants import (
    DARK_MODE_SEGMENT,
    DEFAULT_BRAND_PREFIX,
    DEFAULT_KEY,
    ThemeBucket,
)
from chuk_mcp_tokens.formats.categories import CATEGORY_MAP
from chuk_mcp_tokens.formats.tree import (
    ThemeTree,
    mirror_primary_default,
    render_module,
    set_nested,
)
from chuk_mcp_tokens.models.category import CategorySpec, PlacementStrategy
from chuk_mcp_tokens.models.config import FormatOptions
from chuk_mcp_tokens.models.token import Token, TokenDictionary, TokenValue
from chuk_mcp_tokens.transforms.names import partition_tokens, strip_brand_prefix, strip_default

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ThemeEntry:
    """One write into the theme: ``theme[bucket][keys...] = value``."""

    bucket: str
    keys: tuple[str, ...]
    value: TokenValue


def find_category(path: Sequence[str]) -> tuple[int, CategorySpec] | None:
    """Find the first path segment that is a known category key."""
    for index, segment in enumerate(path):
        category_spec = CATEGORY_MAP.get(segment)
        if category_spec is not None:
            return index, category_spec
    return None


def leaf_key(path: Sequence[str]) -> str | None:
    """Last segment, or the one before it when the last is DEFAULT."""
    segments = strip_default(path)
    return segments[-1] if segments else None


def place_leaf(
    category_spec: CategorySpec, index: int, path: Sequence[str], value: TokenValue
) -> list[ThemeEntry]:
    key = leaf_key(path)
    if key is None:
        return []
    return [ThemeEntry(category_spec.target, (key,), value)]


def place_color_scale(
    category_spec: CategorySpec, index: int, path: Sequence[str], value: TokenValue
) -> list[ThemeEntry]:
    keys = tuple(path[index + 1 :])
    if not keys:
        return []
    return [ThemeEntry(category_spec.target, keys, value)]


Placer = Callable[[CategorySpec, int, Sequence[str], TokenValue], list[ThemeEntry]]

PLACERS: dict[PlacementStrategy, Placer] = {
    PlacementStrategy.LEAF: place_leaf,
    PlacementStrategy.COLOR_SCALE: place_color_scale,
}


def base_entries(tokens: Sequence[Token]) -> list[ThemeEntry]:
    """Place plain tokens; tokens without a known category are dropped."""
    entries: list[ThemeEntry] = []
    for token in tokens:
        match = find_category(token.path)
        if match is None:
            logger.debug("Dropping token with unknown category: %s", ".".join(token.path))
            continue

        index, category_spec = match
        value = token.value if category_spec.raw else token.var_reference()
        place = PLACERS[category_spec.placement]
        entries.extend(place(category_spec, index, list(token.path), value))
    return entries


def heuristic_entry(path: Sequence[str], value: TokenValue) -> ThemeEntry | None:
    """
    Place a brand token whose category has no custom placement.

    Radius tokens become the default border radius; otherwise the first
    category key found inside a path segment picks the bucket, falling
    back to spacing.
    """
    key = leaf_key(path)
    if key is None:
        return None

    if key.lower().endswith("radius"):
        return ThemeEntry(ThemeBucket.BORDER_RADIUS.value, (DEFAULT_KEY,), value)

    lowered = [segment.lower() for segment in path]
    for category, category_spec in CATEGORY_MAP.items():
        if any(category.lower() in segment for segment in lowered):
            return ThemeEntry(category_spec.target, (key,), value)

    return ThemeEntry(ThemeBucket.SPACING.value, (key,), value)


def override_entries(tokens: Sequence[Token], prefix: str) -> list[ThemeEntry]:
    """Place brand tokens with their literal values."""
    entries: list[ThemeEntry] = []
    for token in tokens:
        path = strip_brand_prefix(token.path, prefix)
        match = find_category(path)
        if match is not None and match[1].is_custom:
            index, category_spec = match
            place = PLACERS[category_spec.placement]
            entries.extend(place(category_spec, index, path, token.value))
            continue

        entry = heuristic_entry(path, token.value)
        if entry is None:
            logger.debug("Dropping brand token with empty path: %s", ".".join(token.path))
            continue
        entries.append(entry)
    return entries


def fold_entries(entries: Sequence[ThemeEntry]) -> ThemeTree:
    """Write entries into a fresh theme in order; later writes win."""
    theme: ThemeTree = {bucket.value: {} for bucket in ThemeBucket}
    for entry in entries:
        bucket = theme.setdefault(entry.bucket, {})
        set_nested(bucket, entry.keys, entry.value)
    return theme


def collapse_group(group: dict[str, Any]) -> Any:
    """
    Collapse DEFAULT keys in a color group, innermost first.

    ``{"DEFAULT": v}`` becomes ``v``; ``{"DEFAULT": v, "100": w}`` loses
    its DEFAULT entry.
    """
    for key, value in list(group.items()):
        if isinstance(value, dict):
            group[key] = collapse_group(value)

    if set(group) == {DEFAULT_KEY}:
        return group[DEFAULT_KEY]
    if DEFAULT_KEY in group and len(group) > 1:
        del group[DEFAULT_KEY]
    return group


def post_process(theme: ThemeTree) -> ThemeTree:
    """Collapse color DEFAULTs, drop empty buckets and alias primary."""
    colors = theme.get(ThemeBucket.COLORS.value, {})
    for key, value in list(colors.items()):
        if isinstance(value, dict):
            colors[key] = collapse_group(value)

    for bucket in [name for name, value in theme.items() if not value]:
        del theme[bucket]

    if ThemeBucket.COLORS.value in theme:
        mirror_primary_default(theme[ThemeBucket.COLORS.value])
    return theme


def visible_tokens(tokens: Sequence[Token], dark_marker: str = DARK_MODE_SEGMENT) -> list[Token]:
    """Drop tokens that have the dark-mode marker as a path segment."""
    visible: list[Token] = []
    for token in tokens:
        if token.has_segment(dark_marker):
            logger.debug("Excluding dark-mode token: %s", ".".join(token.path))
            continue
        visible.append(token)
    return visible


def build_nested_theme(
    dictionary: TokenDictionary,
    prefix: str = DEFAULT_BRAND_PREFIX,
    dark_marker: str = DARK_MODE_SEGMENT,
) -> ThemeTree:
    """
    Build the nested Tailwind theme object.

    Args:
        dictionary: Transformed tokens
        prefix: Brand prefix marking override tokens
        dark_marker: Path segment marking dark-mode tokens to exclude

    Returns:
        Theme mapping bucket name to nested values
    """
    visible = visible_tokens(dictionary.all_tokens, dark_marker)
    base, overrides = partition_tokens(visible, prefix)
    entries = base_entries(base) + override_entries(overrides, prefix)
    return post_process(fold_entries(entries))


def format_tailwind_nested(dictionary: TokenDictionary, options: FormatOptions) -> str:
    """Format tokens as a nested ``designTokens`` theme export."""
    theme = build_nested_theme(dictionary, options.brand_prefix, options.dark_mode_segment)
    return render_module([("designTokens", theme)])
