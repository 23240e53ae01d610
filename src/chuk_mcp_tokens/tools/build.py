"""
Build tools - MCP tools for config discovery and platform builds.

Tools for listing configs, inspecting a config, building its platforms
and copying library configs into the project.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from chuk_mcp_tokens.builder import TokenBuilder
from chuk_mcp_tokens.config import ConfigLoader
from chuk_mcp_tokens.constants import ErrorMessages, SuccessMessages
from chuk_mcp_tokens.models import TokenDictionary
from chuk_mcp_tokens.registry import TokenRegistry

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_build_tools(
    mcp: ChukMCPServer,
    config_loader: ConfigLoader,
    registry: TokenRegistry,
    output_dir: Path,
) -> dict[str, Any]:
    """
    Register build tools with the MCP server.

    Args:
        mcp: The MCP server instance
        config_loader: The config loader
        registry: The token registry
        output_dir: Base directory for written files

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_list_configs() -> str:
        """
        List available build configs.

        Returns:
            JSON string with list of config summaries

        Example:
            tokens_list_configs()
        """
        try:
            configs = config_loader.list_configs()
            return json.dumps(
                {
                    "status": "success",
                    "configs": [
                        {
                            "name": c.name,
                            "description": c.description,
                            "platforms": c.platforms,
                        }
                        for c in configs
                    ],
                    "count": len(configs),
                }
            )
        except Exception as e:
            logger.exception("Failed to list configs")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_list_configs"] = tokens_list_configs

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_describe_config(name: str) -> str:
        """
        Get the full definition of a build config.

        Args:
            name: Config name

        Returns:
            JSON string with sources, platforms and files

        Example:
            tokens_describe_config(name="tailwind")
        """
        try:
            config = config_loader.get_config(name)
            if config is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.CONFIG_NOT_FOUND.format(name=name)}
                )

            return json.dumps({"status": "success", "config": config.to_yaml_dict()})
        except Exception as e:
            logger.exception("Failed to describe config")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_describe_config"] = tokens_describe_config

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_build(
        config: str,
        tokens: list[dict[str, Any]],
        platform: str | None = None,
        write: bool = False,
    ) -> str:
        """
        Build the platforms of a config from resolved tokens.

        Args:
            config: Config name
            tokens: Resolved tokens, each {"path": [...], "value": ...}
            platform: Only build this platform (default: all)
            write: Write files under the output directory

        Returns:
            JSON string with generated files per platform

        Example:
            tokens_build(config="tailwind", tokens=[...], write=True)
        """
        try:
            build_config = config_loader.get_config(config)
            if build_config is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.CONFIG_NOT_FOUND.format(name=config),
                    }
                )

            builder = TokenBuilder(build_config, registry)
            dictionary = TokenDictionary.from_records(tokens)
            if platform:
                results = [builder.build_platform(platform, dictionary)]
            else:
                results = builder.build_all(dictionary)

            platforms = []
            for result in results:
                entry: dict[str, Any] = {
                    "platform": result.platform,
                    "files": result.files,
                    "message": SuccessMessages.PLATFORM_BUILT.format(
                        platform=result.platform,
                        files=len(result.files),
                        tokens=result.token_count,
                    ),
                }
                if write:
                    entry["written"] = [str(p) for p in builder.write(result, output_dir)]
                platforms.append(entry)

            return json.dumps({"status": "success", "config": config, "platforms": platforms})
        except Exception as e:
            logger.exception("Failed to build tokens")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_build"] = tokens_build

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_copy_config_to_project(name: str) -> str:
        """
        Copy a library config into the project for customization.

        Args:
            name: Config name

        Returns:
            JSON string with the copied file path

        Example:
            tokens_copy_config_to_project(name="tailwind-brand")
        """
        try:
            path = config_loader.copy_to_project(name)
            if path is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.CONFIG_NOT_FOUND.format(name=name)}
                )

            return json.dumps(
                {
                    "status": "success",
                    "path": str(path),
                    "message": SuccessMessages.CONFIG_COPIED.format(name=name, path=path),
                }
            )
        except Exception as e:
            logger.exception("Failed to copy config")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_copy_config_to_project"] = tokens_copy_config_to_project

    return tools
