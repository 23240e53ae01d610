"""
Nested-object helpers shared by the JavaScript formats.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from chuk_mcp_tokens.constants import DEFAULT_KEY, GENERATED_HEADER, JSON_INDENT
from chuk_mcp_tokens.transforms.values import js_number

ThemeTree = dict[str, Any]


def set_nested(tree: ThemeTree, keys: Sequence[str], value: Any) -> None:
    """
    Assign ``value`` at ``keys`` inside ``tree``, creating groups as needed.

    A scalar sitting where a group is needed is kept as that group's
    DEFAULT entry, and a scalar written onto an existing group becomes
    its DEFAULT entry.
    """
    if not keys:
        return

    node = tree
    for key in keys[:-1]:
        child = node.get(key)
        if not isinstance(child, dict):
            child = {} if child is None else {DEFAULT_KEY: child}
            node[key] = child
        node = child

    last = keys[-1]
    existing = node.get(last)
    if isinstance(existing, dict) and not isinstance(value, dict):
        existing[DEFAULT_KEY] = value
    else:
        node[last] = value


def get_nested(tree: ThemeTree, keys: Sequence[str]) -> Any:
    """Look up ``keys`` inside ``tree``, returning None when absent."""
    node: Any = tree
    for key in keys:
        if not isinstance(node, dict) or key not in node:
            return None
        node = node[key]
    return node


def js_value(value: Any) -> Any:
    """Recursively print integral floats as integers (1.0 -> 1)."""
    if isinstance(value, dict):
        return {key: js_value(item) for key, item in value.items()}
    if isinstance(value, list):
        return [js_value(item) for item in value]
    if isinstance(value, float):
        return js_number(value)
    return value


def to_js_literal(value: Any) -> str:
    """Serialize like JSON.stringify(value, null, 4)."""
    return json.dumps(js_value(value), indent=JSON_INDENT, ensure_ascii=False)


def render_module(exports: Sequence[tuple[str, Any]]) -> str:
    """
    Render an ES module exporting each (name, object) pair as a const.

    Args:
        exports: Ordered (export name, value) pairs

    Returns:
        Module source preceded by the auto-generation comment
    """
    body = "\n\n".join(f"export const {name} = {to_js_literal(value)};" for name, value in exports)
    return f"{GENERATED_HEADER}\n{body}"


def mirror_primary_default(colors: ThemeTree) -> None:
    """Alias primary.DEFAULT to primary.600 when no DEFAULT is set."""
    primary = colors.get("primary")
    shade = get_nested(colors, ["primary", "600"])
    if isinstance(primary, dict) and shade is not None and DEFAULT_KEY not in primary:
        primary[DEFAULT_KEY] = shade
