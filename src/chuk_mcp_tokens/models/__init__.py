"""
Pydantic models for the token toolkit.

This module provides:
- Token / TokenDictionary: resolved tokens handed to formats
- CategorySpec: category-to-bucket mapping entries
- BuildConfig / PlatformConfig / FileConfig: declarative build targets
"""

from chuk_mcp_tokens.models.category import CategorySpec, PlacementStrategy
from chuk_mcp_tokens.models.config import (
    BuildConfig,
    ConfigMetadata,
    FileConfig,
    FormatOptions,
    PlatformConfig,
)
from chuk_mcp_tokens.models.token import Token, TokenDictionary, TokenValue

__all__ = [
    "BuildConfig",
    "CategorySpec",
    "ConfigMetadata",
    "FileConfig",
    "FormatOptions",
    "PlacementStrategy",
    "PlatformConfig",
    "Token",
    "TokenDictionary",
    "TokenValue",
]
