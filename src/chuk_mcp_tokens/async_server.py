#!/usr/bin/env python3
"""
Async Design Token MCP Server using chuk-mcp-server

This server provides MCP tools for turning resolved design tokens into
CSS custom-property sheets and Tailwind theme objects.

The server provides tools for:
- Listing registered formats, transforms and transform groups
- Naming tokens and formatting token lists with a single format
- Discovering build configs (library and project)
- Building and writing every platform of a config
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_tokens.config import ConfigLoader
from chuk_mcp_tokens.constants import CONFIGS_DIR_ENV, OUTPUT_DIR_ENV
from chuk_mcp_tokens.registry import create_default_registry
from chuk_mcp_tokens.tools import register_build_tools, register_format_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-tokens")

# Paths - standard project structure, overridable from the environment
BASE_PATH = Path.cwd()
CONFIGS_DIR = Path(os.environ.get(CONFIGS_DIR_ENV) or BASE_PATH / "tokens-config")
OUTPUT_DIR = Path(os.environ.get(OUTPUT_DIR_ENV) or BASE_PATH)
CONFIG_LIBRARY_PATH = Path(__file__).parent / "config" / "library"

# Create shared services
registry = create_default_registry()
config_loader = ConfigLoader(
    library_path=CONFIG_LIBRARY_PATH,
    project_path=CONFIGS_DIR,
)

# Register all tools
format_tools = register_format_tools(mcp, registry)
build_tools = register_build_tools(mcp, config_loader, registry, OUTPUT_DIR)

# Export tool functions for direct access
tokens_list_formats = format_tools["tokens_list_formats"]
tokens_name = format_tools["tokens_name"]
tokens_format = format_tools["tokens_format"]

tokens_list_configs = build_tools["tokens_list_configs"]
tokens_describe_config = build_tools["tokens_describe_config"]
tokens_build = build_tools["tokens_build"]
tokens_copy_config_to_project = build_tools["tokens_copy_config_to_project"]

logger.info("CHUK Design Token MCP Server initialized")
logger.info(f"  Config library: {CONFIG_LIBRARY_PATH}")
logger.info(f"  Project configs: {CONFIGS_DIR}")
logger.info(f"  Output dir: {OUTPUT_DIR}")
