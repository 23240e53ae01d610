"""
Name transforms - flat CSS variable names from token paths.

    ("color", "primary", "DEFAULT")        -> "color-primary"
    ("brand", "color", "primary", "600")   -> "color-primary-600"   (name/brand)

Also holds the base/override partition shared by every format that
lets brand tokens win over plain tokens.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from chuk_mcp_tokens.constants import DEFAULT_BRAND_PREFIX, DEFAULT_KEY
from chuk_mcp_tokens.models.token import Token


def strip_default(path: Sequence[str]) -> list[str]:
    """Drop a trailing DEFAULT segment."""
    segments = list(path)
    if segments and segments[-1] == DEFAULT_KEY:
        segments.pop()
    return segments


def strip_brand_prefix(path: Sequence[str], prefix: str = DEFAULT_BRAND_PREFIX) -> list[str]:
    """Drop a leading brand-prefix segment."""
    segments = list(path)
    if segments and segments[0] == prefix:
        segments.pop(0)
    return segments


def has_brand_prefix(token: Token, prefix: str = DEFAULT_BRAND_PREFIX) -> bool:
    """Check whether a token is an override token."""
    return bool(token.path) and token.path[0] == prefix


def simple_name(path: Sequence[str]) -> str:
    """Join path segments with '-', without a trailing DEFAULT."""
    return "-".join(strip_default(path))


def brand_name(path: Sequence[str], prefix: str = DEFAULT_BRAND_PREFIX) -> str:
    """Like simple_name, also dropping the leading brand prefix."""
    return "-".join(strip_brand_prefix(strip_default(path), prefix))


def partition_tokens(
    tokens: Iterable[Token],
    prefix: str = DEFAULT_BRAND_PREFIX,
) -> tuple[list[Token], list[Token]]:
    """
    Split tokens into base and override groups, preserving order.

    Args:
        tokens: Tokens to split
        prefix: Brand prefix marking override tokens

    Returns:
        (base_tokens, override_tokens)
    """
    base: list[Token] = []
    overrides: list[Token] = []
    for token in tokens:
        (overrides if has_brand_prefix(token, prefix) else base).append(token)
    return base, overrides


def merge_by_name(
    tokens: Iterable[Token],
    prefix: str = DEFAULT_BRAND_PREFIX,
) -> dict[str, Token]:
    """
    Merge tokens into a name -> token map where overrides win.

    Base tokens are inserted first and override tokens second, so an
    override with the same final name replaces the base entry.
    """
    base, overrides = partition_tokens(tokens, prefix)
    merged: dict[str, Token] = {}
    for token in [*base, *overrides]:
        merged[token.name] = token
    return merged
