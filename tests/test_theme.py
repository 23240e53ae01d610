"""
Tests for the nested Tailwind theme (javascript/tailwind-nested).

Tests cover:
- Category lookup and placement strategies
- Base pass (references, raw values, unknown categories)
- Override pass (inlined brand values, heuristics)
- DEFAULT collapsing, empty buckets, primary mirroring
- Dark-mode exclusion
"""

import json
import logging

from chuk_mcp_tokens.formats import build_nested_theme, format_tailwind_nested
from chuk_mcp_tokens.formats.categories import CATEGORY_MAP
from chuk_mcp_tokens.formats.theme import (
    ThemeEntry,
    base_entries,
    collapse_group,
    find_category,
    fold_entries,
    heuristic_entry,
    leaf_key,
    override_entries,
    visible_tokens,
)
from chuk_mcp_tokens.models import FormatOptions, PlacementStrategy, Token, TokenDictionary
from chuk_mcp_tokens.transforms import brand_name


def tok(*path: str, value="#000") -> Token:
    return Token(path=path, value=value, name=brand_name(path))


def theme_of(*tokens: Token, prefix: str = "brand") -> dict:
    return build_nested_theme(TokenDictionary(all_tokens=list(tokens)), prefix)


class TestCategoryMap:
    """Tests for the static category map."""

    def test_color_uses_scale_placement(self):
        assert CATEGORY_MAP["color"].placement == PlacementStrategy.COLOR_SCALE
        assert CATEGORY_MAP["color"].target == "colors"

    def test_compound_keys_before_plain(self):
        """lineHeight must be matched before height."""
        keys = list(CATEGORY_MAP)
        assert keys.index("lineHeight") < keys.index("height")
        assert keys.index("borderRadius") < keys.index("radius")

    def test_find_category_first_match(self):
        assert find_category(["semantic", "color", "primary"]) == (1, CATEGORY_MAP["color"])
        assert find_category(["unknown", "thing"]) is None

    def test_leaf_key(self):
        assert leaf_key(["spacing", "md"]) == "md"
        assert leaf_key(["spacing", "md", "DEFAULT"]) == "md"
        assert leaf_key(["DEFAULT"]) is None
        assert leaf_key([]) is None


class TestBasePass:
    """Tests for placing plain tokens."""

    def test_color_reference(self):
        entries = base_entries([tok("color", "primary", "600")])
        assert entries == [ThemeEntry("colors", ("primary", "600"), "var(--color-primary-600)")]

    def test_leaf_category(self):
        theme = theme_of(tok("spacing", "md", value="16px"))
        assert theme["spacing"] == {"md": "var(--spacing-md)"}

    def test_leaf_default_uses_parent(self):
        """A DEFAULT leaf takes the second-to-last segment as key."""
        theme = theme_of(tok("borderRadius", "card", "DEFAULT", value="8px"))
        assert theme["borderRadius"] == {"card": "var(--borderRadius-card)"}

    def test_raw_category(self):
        """Raw categories emit literal values."""
        theme = theme_of(tok("breakpoint", "md", value="768px"), tok("zIndex", "modal", value=50))
        assert theme["screens"] == {"md": "768px"}
        assert theme["zIndex"] == {"modal": 50}

    def test_category_mapped_to_bucket(self):
        theme = theme_of(tok("shadow", "lg", value="0 10px 15px"))
        assert theme["boxShadow"] == {"lg": "var(--shadow-lg)"}

    def test_unknown_category_dropped(self):
        theme = theme_of(tok("animation", "spin", value="spin 1s"))
        assert theme == {}

    def test_deep_color_scale(self):
        theme = theme_of(tok("color", "surface", "card", "hover", value="#fafafa"))
        hover = "var(--color-surface-card-hover)"
        assert theme["colors"] == {"surface": {"card": {"hover": hover}}}


class TestOverridePass:
    """Tests for placing brand tokens."""

    def test_brand_color_inlined(self):
        """Brand colors are written as literal values, not references."""
        token = tok("brand", "color", "primary", "600", value="#7c3aed")
        entries = override_entries([token], "brand")
        assert entries == [ThemeEntry("colors", ("primary", "600"), "#7c3aed")]

    def test_brand_overrides_base(self):
        """A brand token colliding with a base token wins."""
        theme = theme_of(
            tok("brand", "color", "accent", "500", value="#7c3aed"),
            tok("color", "accent", "500", value="#f59e0b"),
        )
        assert theme["colors"]["accent"] == {"500": "#7c3aed"}

    def test_radius_heuristic(self):
        """A brand path ending in radius sets the default border radius."""
        theme = theme_of(
            tok("borderRadius", "lg", value="12px"),
            tok("brand", "button", "radius", value="4px"),
        )
        assert theme["borderRadius"] == {"lg": "var(--borderRadius-lg)", "DEFAULT": "4px"}

    def test_radius_heuristic_case_insensitive(self):
        entry = heuristic_entry(["component", "cardRadius"], "6px")
        assert entry == ThemeEntry("borderRadius", ("DEFAULT",), "6px")

    def test_substring_heuristic(self):
        """Category keys found inside a segment pick the bucket."""
        entry = heuristic_entry(["headingFontSize", "xl"], "2rem")
        assert entry == ThemeEntry("fontSize", ("xl",), "2rem")

    def test_leaf_category_goes_through_heuristic(self):
        theme = theme_of(tok("brand", "spacing", "md", value="20px"), tok("spacing", "md"))
        assert theme["spacing"] == {"md": "20px"}

    def test_spacing_fallback(self):
        entry = heuristic_entry(["gutter"], "24px")
        assert entry == ThemeEntry("spacing", ("gutter",), "24px")

    def test_empty_brand_path_dropped(self):
        assert override_entries([tok("brand", value="x")], "brand") == []

    def test_custom_prefix(self):
        base = Token(path=("color", "primary", "600"), value="#111", name="color-primary-600")
        override = Token(
            path=("acme", "color", "primary", "600"), value="#222", name="color-primary-600"
        )
        theme = theme_of(override, base, prefix="acme")
        assert theme["colors"]["primary"]["600"] == "#222"


class TestPostProcessing:
    """Tests for DEFAULT collapsing and cleanup."""

    def test_primary_default_mirrors_600(self):
        theme = theme_of(tok("color", "primary", "600"))
        assert theme["colors"]["primary"]["600"] == "var(--color-primary-600)"
        assert theme["colors"]["primary"]["DEFAULT"] == "var(--color-primary-600)"

    def test_default_only_group_collapses(self):
        """A group with only DEFAULT becomes a scalar."""
        theme = theme_of(tok("color", "accent", "DEFAULT"))
        assert theme["colors"]["accent"] == "var(--color-accent)"

    def test_default_with_siblings_removed(self):
        """A group with DEFAULT and other keys drops DEFAULT."""
        theme = theme_of(tok("color", "slate", "DEFAULT"), tok("color", "slate", "100"))
        assert theme["colors"]["slate"] == {"100": "var(--color-slate-100)"}

    def test_collapse_is_recursive(self):
        group = {"card": {"DEFAULT": "a"}, "hover": {"DEFAULT": "b", "x": "c"}}
        assert collapse_group(group) == {"card": "a", "hover": {"x": "c"}}

    def test_nested_collapse_bubbles_up(self):
        """Collapsing inner groups can make the outer group collapsible."""
        assert collapse_group({"DEFAULT": {"DEFAULT": "a"}}) == "a"

    def test_empty_buckets_removed(self):
        theme = theme_of(tok("spacing", "md"))
        assert list(theme) == ["spacing"]

    def test_all_buckets_pre_created_before_cleanup(self):
        assert "colors" in fold_entries([])
        assert "gap" in fold_entries([])

    def test_dark_mode_tokens_excluded(self):
        theme = theme_of(
            tok("color", "dark-mode", "surface", value="#0f1115"),
            tok("dark-mode", "spacing", "md", value="8px"),
            tok("color", "surface", value="#ffffff"),
        )
        assert theme == {"colors": {"surface": "var(--color-surface)"}}

    def test_dark_shade_name_kept(self):
        """A plain "dark" segment is a shade name, not the dark-mode marker."""
        theme = theme_of(tok("color", "gray", "dark", value="#111"))
        assert theme == {"colors": {"gray": {"dark": "var(--color-gray-dark)"}}}

    def test_excluded_tokens_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="chuk_mcp_tokens.formats.theme"):
            visible = visible_tokens([tok("color", "dark-mode", "bg"), tok("color", "bg")])
        assert [t.path for t in visible] == [("color", "bg")]
        assert "color.dark-mode.bg" in caplog.text

    def test_custom_dark_marker(self):
        tokens = TokenDictionary(
            all_tokens=[tok("color", "night", "bg"), tok("color", "dark", "bg")]
        )
        source = format_tailwind_nested(tokens, FormatOptions(dark_mode_segment="night"))
        assert "night" not in source
        assert '"dark"' in source


class TestFormatTailwindNested:
    """Tests for the formatted module."""

    def test_module(self):
        source = format_tailwind_nested(
            TokenDictionary(
                all_tokens=[tok("color", "primary", "600"), tok("spacing", "md", value="16px")]
            ),
            FormatOptions(),
        )
        header, _, rest = source.partition("\n")
        assert header == "// Auto-generated from design tokens"
        assert rest.startswith("export const designTokens = ")

        literal = rest.removeprefix("export const designTokens = ").rstrip(";")
        assert json.loads(literal) == {
            "colors": {
                "primary": {
                    "600": "var(--color-primary-600)",
                    "DEFAULT": "var(--color-primary-600)",
                }
            },
            "spacing": {"md": "var(--spacing-md)"},
        }

    def test_uses_brand_prefix_option(self):
        source = format_tailwind_nested(
            TokenDictionary(
                all_tokens=[
                    Token(path=("acme", "color", "info"), value="#0ea5e9", name="color-info"),
                ]
            ),
            FormatOptions(brand_prefix="acme"),
        )
        assert '"info": "#0ea5e9"' in source

    def test_deterministic(self):
        tokens = [tok("color", "primary", "600"), tok("brand", "color", "primary", "600")]
        first = format_tailwind_nested(TokenDictionary(all_tokens=tokens), FormatOptions())
        second = format_tailwind_nested(TokenDictionary(all_tokens=tokens), FormatOptions())
        assert first == second
