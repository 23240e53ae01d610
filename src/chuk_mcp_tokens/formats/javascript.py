"""
Flat JavaScript format for Tailwind (javascript/tailwind-simple).

Buckets tokens by their first path segment and nests the rest:

    color.primary.600      -> designTokens.color.primary["600"]
    spacing.DEFAULT        -> designTokens.spacing.spacing
    borderRadius.lg        -> designTokens.borderRadius.lg

Every leaf is a ``var(--name)`` reference. No brand overriding here.
"""

from __future__ import annotations

import logging
from typing import Any

from chuk_mcp_tokens.formats.tree import (
    ThemeTree,
    mirror_primary_default,
    render_module,
    set_nested,
)
from chuk_mcp_tokens.models.config import FormatOptions
from chuk_mcp_tokens.models.token import TokenDictionary
from chuk_mcp_tokens.transforms.names import strip_default

logger = logging.getLogger(__name__)

SIMPLE_CATEGORIES: tuple[str, ...] = ("color", "spacing", "fontSize", "borderRadius")

# designTokens category -> theme key
SIMPLE_THEME_KEYS: dict[str, str] = {
    "color": "colors",
    "spacing": "spacing",
    "fontSize": "fontSize",
    "borderRadius": "borderRadius",
}


def build_simple_tokens(dictionary: TokenDictionary) -> ThemeTree:
    """Build the all-categories object of var() references."""
    result: ThemeTree = {category: {} for category in SIMPLE_CATEGORIES}
    skipped = 0

    for token in dictionary.all_tokens:
        if not token.path or token.path[0] not in SIMPLE_CATEGORIES:
            skipped += 1
            continue

        category, *rest = token.path
        keys = strip_default(rest) or [category]
        set_nested(result[category], keys, token.var_reference())

    if skipped:
        logger.debug("tailwind-simple skipped %d tokens outside %s", skipped, SIMPLE_CATEGORIES)

    mirror_primary_default(result["color"])
    return result


def build_simple_theme(tokens: ThemeTree) -> dict[str, Any]:
    """Narrow the token object to the Tailwind theme keys."""
    return {
        theme_key: tokens.get(category, {}) for category, theme_key in SIMPLE_THEME_KEYS.items()
    }


def format_tailwind_simple(dictionary: TokenDictionary, options: FormatOptions) -> str:
    """Format tokens as ``designTokens`` and ``theme`` exports."""
    tokens = build_simple_tokens(dictionary)
    return render_module([("designTokens", tokens), ("theme", build_simple_theme(tokens))])
