"""
Constants and enums for the token toolkit.

No magic strings - use enums and module constants for sentinel segments,
selectors and message templates.
"""

from enum import Enum

# Path segment marking the base value of its parent group
DEFAULT_KEY = "DEFAULT"

# Leading path segment of override tokens
DEFAULT_BRAND_PREFIX = "brand"

# Path segment marking dark-mode tokens (excluded from nested themes).
# Plain "dark" is left alone since it is a common shade name.
DARK_MODE_SEGMENT = "dark-mode"

ROOT_SELECTOR = ":root"
TAILWIND_THEME_SELECTOR = "@theme"

# Color groups rendered into the Tailwind v4 @theme block
SEMANTIC_COLOR_NAMES: tuple[str, ...] = (
    "primary",
    "success",
    "danger",
    "warning",
    "info",
    "error",
)

GENERATED_HEADER = "// Auto-generated from design tokens"

# Environment variables read by the MCP server at startup
CONFIGS_DIR_ENV = "CHUK_TOKENS_CONFIGS_DIR"
OUTPUT_DIR_ENV = "CHUK_TOKENS_OUTPUT_DIR"

# JSON.stringify(value, null, 4)
JSON_INDENT = 4


class TransformType(str, Enum):
    """What part of a token a transform rewrites."""

    NAME = "name"
    VALUE = "value"
    ATTRIBUTE = "attribute"


class ThemeBucket(str, Enum):
    """Top-level keys of a generated Tailwind theme."""

    COLORS = "colors"
    SPACING = "spacing"
    FONT_SIZE = "fontSize"
    FONT_FAMILY = "fontFamily"
    FONT_WEIGHT = "fontWeight"
    LINE_HEIGHT = "lineHeight"
    LETTER_SPACING = "letterSpacing"
    BORDER_RADIUS = "borderRadius"
    BORDER_WIDTH = "borderWidth"
    BOX_SHADOW = "boxShadow"
    OPACITY = "opacity"
    Z_INDEX = "zIndex"
    WIDTH = "width"
    HEIGHT = "height"
    MAX_WIDTH = "maxWidth"
    SCREENS = "screens"
    TRANSITION_DURATION = "transitionDuration"
    TRANSITION_TIMING = "transitionTimingFunction"
    BLUR = "blur"
    GAP = "gap"


class ErrorMessages:
    """Standardized error messages."""

    UNKNOWN_FORMAT = "Unknown format: '{name}'."
    UNKNOWN_TRANSFORM = "Unknown transform: '{name}'."
    UNKNOWN_TRANSFORM_GROUP = "Unknown transform group: '{name}'."
    UNKNOWN_PLATFORM = "Platform '{platform}' not found in config."
    CONFIG_NOT_FOUND = "Config '{name}' not found."
    CONFIG_EXISTS = "Config already exists in project: '{name}'."
    NO_PROJECT_PATH = "No project path configured."


class SuccessMessages:
    """Standardized success messages."""

    PLATFORM_BUILT = "Built platform '{platform}' ({files} files, {tokens} tokens)."
    CONFIG_COPIED = "Copied config '{name}' to {path}."
