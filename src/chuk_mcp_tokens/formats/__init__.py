"""
Formats - pure functions from a token dictionary to output text.

Every format has the signature ``(TokenDictionary, FormatOptions) -> str``
and is registered under a name in the TokenRegistry:

- css/variables             - custom properties, brand tokens override
- css/tailwind-theme        - Tailwind v4 @theme block of semantic colors
- javascript/tailwind-simple - flat var() theme object
- javascript/tailwind-nested - nested theme with brand overrides
"""

from chuk_mcp_tokens.formats.categories import CATEGORY_MAP
from chuk_mcp_tokens.formats.css import format_css_variables, format_tailwind_theme
from chuk_mcp_tokens.formats.javascript import (
    build_simple_theme,
    build_simple_tokens,
    format_tailwind_simple,
)
from chuk_mcp_tokens.formats.theme import (
    ThemeEntry,
    build_nested_theme,
    format_tailwind_nested,
)

__all__ = [
    "CATEGORY_MAP",
    "ThemeEntry",
    "build_nested_theme",
    "build_simple_theme",
    "build_simple_tokens",
    "format_css_variables",
    "format_tailwind_nested",
    "format_tailwind_simple",
    "format_tailwind_theme",
]
