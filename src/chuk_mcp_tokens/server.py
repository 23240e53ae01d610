#!/usr/bin/env python3
"""
Entry point for the CHUK Design Token MCP Server.

Starts the server over stdio or http. Project config and output
directories can be pointed elsewhere than the working directory, and
``--list-configs`` prints the available build configs without starting
the server.
"""

import argparse
import asyncio
import logging
import os
from collections.abc import Sequence
from pathlib import Path

from chuk_mcp_tokens.constants import CONFIGS_DIR_ENV, OUTPUT_DIR_ENV

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="CHUK Design Token MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--configs-dir",
        type=Path,
        help="Project build configs directory (default: ./tokens-config)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        help="Base directory for written build outputs (default: .)",
    )
    parser.add_argument(
        "--list-configs",
        action="store_true",
        help="Print available build configs and exit",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def apply_paths(args: argparse.Namespace) -> None:
    """Expose directory options to the server module through the environment."""
    if args.configs_dir is not None:
        os.environ[CONFIGS_DIR_ENV] = str(args.configs_dir.resolve())
    if args.output_dir is not None:
        os.environ[OUTPUT_DIR_ENV] = str(args.output_dir.resolve())


def print_configs(configs_dir: Path | None) -> None:
    from chuk_mcp_tokens.config import ConfigLoader

    loader = ConfigLoader(project_path=configs_dir or Path.cwd() / "tokens-config")
    for meta in loader.list_configs():
        print(f"{meta.name}: {', '.join(meta.platforms)}")
        if meta.description:
            print(f"    {meta.description}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main entry point with transport detection."""
    args = build_parser().parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.list_configs:
        print_configs(args.configs_dir)
        return

    apply_paths(args)

    # The server module resolves its directories on import
    from chuk_mcp_tokens.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting CHUK Design Token MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Design Token MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
