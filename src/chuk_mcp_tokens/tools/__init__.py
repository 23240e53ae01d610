"""
MCP tool implementations.

Tools are organized by domain:
- formatting - Registry listing, token naming, single-format output
- build - Config discovery and platform builds
"""

from chuk_mcp_tokens.tools.build import register_build_tools
from chuk_mcp_tokens.tools.formatting import register_format_tools

__all__ = [
    "register_build_tools",
    "register_format_tools",
]
