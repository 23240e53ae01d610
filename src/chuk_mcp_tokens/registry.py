"""
Token Registry - named transforms, transform groups and formats.

Formats and transforms never call each other directly; a build looks
them up here by the names its config uses.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from chuk_mcp_tokens.constants import ErrorMessages, TransformType
from chuk_mcp_tokens.formats import (
    format_css_variables,
    format_tailwind_nested,
    format_tailwind_simple,
    format_tailwind_theme,
)
from chuk_mcp_tokens.models.config import FormatOptions, PlatformConfig
from chuk_mcp_tokens.models.token import Token, TokenDictionary
from chuk_mcp_tokens.transforms import (
    brand_name,
    color_css,
    cti_attributes,
    simple_name,
    size_px,
)

TransformFn = Callable[[Token, PlatformConfig], object]
FormatFn = Callable[[TokenDictionary, FormatOptions], str]


@dataclass(frozen=True)
class Transform:
    """A registered per-token transform."""

    name: str
    type: TransformType
    fn: TransformFn

    def apply(self, token: Token, platform: PlatformConfig) -> Token:
        """Return a copy of ``token`` with the transformed field replaced."""
        result = self.fn(token, platform)
        if self.type == TransformType.NAME:
            return token.model_copy(update={"name": result})
        if self.type == TransformType.VALUE:
            return token.model_copy(update={"value": result})
        return token.model_copy(update={"attributes": result})


class TokenRegistry:
    """
    Holds named transforms, transform groups and formats.

    Registering under an existing name replaces the previous entry.
    """

    def __init__(self) -> None:
        self._transforms: dict[str, Transform] = {}
        self._groups: dict[str, list[str]] = {}
        self._formats: dict[str, FormatFn] = {}

    def register_transform(self, name: str, type: TransformType, fn: TransformFn) -> None:
        """Register a transform."""
        self._transforms[name] = Transform(name=name, type=TransformType(type), fn=fn)

    def register_transform_group(self, name: str, transforms: list[str]) -> None:
        """
        Register an ordered list of transforms under a group name.

        Raises:
            ValueError: If a transform in the group is not registered
        """
        for transform in transforms:
            self.get_transform(transform)
        self._groups[name] = list(transforms)

    def register_format(self, name: str, fn: FormatFn) -> None:
        """Register a format."""
        self._formats[name] = fn

    def get_transform(self, name: str) -> Transform:
        """Look up a transform, raising ValueError if unknown."""
        transform = self._transforms.get(name)
        if transform is None:
            raise ValueError(ErrorMessages.UNKNOWN_TRANSFORM.format(name=name))
        return transform

    def get_transform_group(self, name: str) -> list[Transform]:
        """Look up a transform group, raising ValueError if unknown."""
        group = self._groups.get(name)
        if group is None:
            raise ValueError(ErrorMessages.UNKNOWN_TRANSFORM_GROUP.format(name=name))
        return [self.get_transform(transform) for transform in group]

    def get_format(self, name: str) -> FormatFn:
        """Look up a format, raising ValueError if unknown."""
        fmt = self._formats.get(name)
        if fmt is None:
            raise ValueError(ErrorMessages.UNKNOWN_FORMAT.format(name=name))
        return fmt

    def list_transforms(self) -> list[str]:
        return sorted(self._transforms)

    def list_transform_groups(self) -> dict[str, list[str]]:
        return {name: list(group) for name, group in sorted(self._groups.items())}

    def list_formats(self) -> list[str]:
        return sorted(self._formats)


def create_default_registry() -> TokenRegistry:
    """Create a registry with the built-in transforms and formats."""
    registry = TokenRegistry()

    registry.register_transform(
        "attribute/cti",
        TransformType.ATTRIBUTE,
        lambda token, platform: cti_attributes(token),
    )
    registry.register_transform(
        "name/simple",
        TransformType.NAME,
        lambda token, platform: simple_name(token.path),
    )
    registry.register_transform(
        "name/brand",
        TransformType.NAME,
        lambda token, platform: brand_name(token.path, platform.brand_prefix),
    )
    registry.register_transform(
        "size/px",
        TransformType.VALUE,
        lambda token, platform: size_px(token, platform.brand_prefix),
    )
    registry.register_transform(
        "color/css",
        TransformType.VALUE,
        lambda token, platform: color_css(token, platform.brand_prefix),
    )

    registry.register_transform_group(
        "css/simple", ["attribute/cti", "name/simple", "size/px", "color/css"]
    )
    registry.register_transform_group(
        "css/brand", ["attribute/cti", "name/brand", "size/px", "color/css"]
    )

    registry.register_format("css/variables", format_css_variables)
    registry.register_format("css/tailwind-theme", format_tailwind_theme)
    registry.register_format("javascript/tailwind-simple", format_tailwind_simple)
    registry.register_format("javascript/tailwind-nested", format_tailwind_nested)

    return registry
