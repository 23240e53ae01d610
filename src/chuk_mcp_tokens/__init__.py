"""
CHUK design tokens - CSS variables and Tailwind themes from design tokens.

Resolved tokens flow through a transform group (naming, attributes) and
into registered formats that render CSS custom-property sheets and
JavaScript theme objects.
"""

from chuk_mcp_tokens.builder import BuildResult, TokenBuilder
from chuk_mcp_tokens.models import Token, TokenDictionary
from chuk_mcp_tokens.registry import TokenRegistry, create_default_registry

__version__ = "0.1.0"

__all__ = [
    "BuildResult",
    "Token",
    "TokenBuilder",
    "TokenDictionary",
    "TokenRegistry",
    "create_default_registry",
]
