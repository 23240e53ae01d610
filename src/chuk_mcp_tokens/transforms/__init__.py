"""
Token transforms - per-token rewrites applied before formatting.

Name transforms produce the flat CSS variable name, attribute
transforms attach CTI metadata and value transforms make values
CSS-ready.
"""

from chuk_mcp_tokens.transforms.attributes import CTI_KEYS, cti_attributes
from chuk_mcp_tokens.transforms.names import (
    brand_name,
    has_brand_prefix,
    merge_by_name,
    partition_tokens,
    simple_name,
    strip_brand_prefix,
    strip_default,
)
from chuk_mcp_tokens.transforms.values import (
    SIZE_CATEGORIES,
    color_css,
    css_color,
    js_number,
    parse_color,
    size_px,
    value_category,
)

__all__ = [
    "CTI_KEYS",
    "SIZE_CATEGORIES",
    "brand_name",
    "color_css",
    "css_color",
    "cti_attributes",
    "has_brand_prefix",
    "js_number",
    "merge_by_name",
    "parse_color",
    "partition_tokens",
    "simple_name",
    "size_px",
    "strip_brand_prefix",
    "strip_default",
    "value_category",
]
