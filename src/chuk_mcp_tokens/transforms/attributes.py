"""
Attribute transforms.

CTI = Category / Type / Item: the first path segments of a token,
e.g. ("color", "background", "button", "primary", "hover").
"""

from __future__ import annotations

from chuk_mcp_tokens.models.token import Token

CTI_KEYS: tuple[str, ...] = ("category", "type", "item", "subitem", "state")


def cti_attributes(token: Token) -> dict[str, str]:
    """Derive CTI attributes from the token path, keeping existing ones."""
    attributes = dict(zip(CTI_KEYS, token.path, strict=False))
    attributes.update(token.attributes)
    return attributes
