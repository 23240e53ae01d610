"""
CSS formats - custom property sheets.

css/variables
    Every token as ``--name: value;`` inside a selector block. Brand
    tokens replace same-named base tokens; output is sorted by name so
    it is stable whatever order tokens arrive in.

css/tailwind-theme
    Tailwind v4 ``@theme`` block holding only the semantic color groups.
"""

from __future__ import annotations

from collections.abc import Iterable

from chuk_mcp_tokens.constants import SEMANTIC_COLOR_NAMES, TAILWIND_THEME_SELECTOR
from chuk_mcp_tokens.formats.tree import js_value
from chuk_mcp_tokens.models.config import FormatOptions
from chuk_mcp_tokens.models.token import Token, TokenDictionary
from chuk_mcp_tokens.transforms.names import merge_by_name


def declaration(token: Token) -> str:
    """Render one custom property declaration."""
    return f"  --{token.name}: {js_value(token.value)};"


def render_block(selector: str, tokens: Iterable[Token]) -> str:
    """Render declarations inside ``selector { ... }``."""
    lines = "\n".join(declaration(token) for token in tokens)
    return f"{selector} {{\n{lines}\n}}"


def format_css_variables(dictionary: TokenDictionary, options: FormatOptions) -> str:
    """Format all tokens as CSS custom properties."""
    merged = merge_by_name(dictionary.all_tokens, options.brand_prefix)
    ordered = [merged[name] for name in sorted(merged)]
    return render_block(options.selector, ordered)


def is_semantic_color(token: Token) -> bool:
    """Check whether a token belongs to a semantic color group."""
    return (
        len(token.path) > 1 and token.path[0] == "color" and token.path[1] in SEMANTIC_COLOR_NAMES
    )


def format_tailwind_theme(dictionary: TokenDictionary, options: FormatOptions) -> str:
    """Format semantic color tokens as a Tailwind v4 @theme block."""
    semantic = [token for token in dictionary.all_tokens if is_semantic_color(token)]
    return render_block(TAILWIND_THEME_SELECTOR, semantic)
