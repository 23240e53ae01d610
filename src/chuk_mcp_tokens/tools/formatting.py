"""
Formatting tools - MCP tools for ad-hoc token formatting.

Tools for listing formats, naming tokens and formatting a token list
with a single format.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_tokens.builder import TokenBuilder
from chuk_mcp_tokens.constants import DEFAULT_BRAND_PREFIX, ROOT_SELECTOR
from chuk_mcp_tokens.models import BuildConfig, FileConfig, PlatformConfig, TokenDictionary
from chuk_mcp_tokens.registry import TokenRegistry
from chuk_mcp_tokens.transforms import brand_name, simple_name

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)

ADHOC_PLATFORM = "adhoc"
ADHOC_DESTINATION = "output"


def register_format_tools(
    mcp: ChukMCPServer,
    registry: TokenRegistry,
) -> dict[str, Any]:
    """
    Register formatting tools with the MCP server.

    Args:
        mcp: The MCP server instance
        registry: The token registry

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_list_formats() -> str:
        """
        List registered formats, transforms and transform groups.

        Returns:
            JSON string with registry contents

        Example:
            tokens_list_formats()
        """
        try:
            return json.dumps(
                {
                    "status": "success",
                    "formats": registry.list_formats(),
                    "transforms": registry.list_transforms(),
                    "transform_groups": registry.list_transform_groups(),
                }
            )
        except Exception as e:
            logger.exception("Failed to list formats")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_list_formats"] = tokens_list_formats

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_name(
        path: list[str],
        brand_prefix: str | None = None,
    ) -> str:
        """
        Compute the CSS variable name for a token path.

        Args:
            path: Token path segments (e.g., ["color", "primary", "DEFAULT"])
            brand_prefix: If set, also strip this leading segment

        Returns:
            JSON string with the name and its var() reference

        Example:
            tokens_name(path=["brand", "color", "primary", "600"], brand_prefix="brand")
        """
        try:
            name = brand_name(path, brand_prefix) if brand_prefix else simple_name(path)
            return json.dumps(
                {
                    "status": "success",
                    "name": name,
                    "reference": f"var(--{name})",
                }
            )
        except Exception as e:
            logger.exception("Failed to name token")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_name"] = tokens_name

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_format(
        format_name: str,
        tokens: list[dict[str, Any]],
        transform_group: str = "css/simple",
        selector: str = ROOT_SELECTOR,
        brand_prefix: str = DEFAULT_BRAND_PREFIX,
    ) -> str:
        """
        Format resolved tokens with one registered format.

        Args:
            format_name: Format name (e.g., "css/variables", "javascript/tailwind-nested")
            tokens: Resolved tokens, each {"path": [...], "value": ...}
            transform_group: Transform group applied before formatting
            selector: CSS selector for variable blocks
            brand_prefix: Leading path segment of override tokens

        Returns:
            JSON string with the generated output

        Example:
            tokens_format(
                format_name="css/variables",
                tokens=[{"path": ["color", "primary", "600"], "value": "#2563eb"}]
            )
        """
        try:
            config = BuildConfig(
                name=ADHOC_PLATFORM,
                platforms={
                    ADHOC_PLATFORM: PlatformConfig(
                        transform_group=transform_group,
                        brand_prefix=brand_prefix,
                        files=[
                            FileConfig(
                                destination=ADHOC_DESTINATION,
                                format=format_name,
                                options={"selector": selector},
                            )
                        ],
                    )
                },
            )
            builder = TokenBuilder(config, registry)
            result = builder.build_platform(ADHOC_PLATFORM, TokenDictionary.from_records(tokens))

            return json.dumps(
                {
                    "status": "success",
                    "format": format_name,
                    "token_count": result.token_count,
                    "output": result.files[ADHOC_DESTINATION],
                }
            )
        except Exception as e:
            logger.exception("Failed to format tokens")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_format"] = tokens_format

    return tools
