"""
Build configuration models - source globs and output targets.

A build config describes, per platform, which transform group to apply
and which files to emit with which format.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from chuk_mcp_tokens.constants import (
    DARK_MODE_SEGMENT,
    DEFAULT_BRAND_PREFIX,
    ROOT_SELECTOR,
    ErrorMessages,
)


class FormatOptions(BaseModel):
    """Options passed to a format callback."""

    selector: str = Field(default=ROOT_SELECTOR, description="CSS selector for variable blocks")
    brand_prefix: str = Field(
        default=DEFAULT_BRAND_PREFIX,
        description="Leading path segment of override tokens",
    )
    dark_mode_segment: str = Field(
        default=DARK_MODE_SEGMENT,
        description="Path segment marking tokens left out of nested themes",
    )

    model_config = {"frozen": True}


class FileConfig(BaseModel):
    """One output file of a platform."""

    destination: str = Field(..., description="File name relative to the build path")
    format: str = Field(..., description="Registered format name")
    options: dict[str, Any] = Field(default_factory=dict)

    model_config = {"frozen": True}


class PlatformConfig(BaseModel):
    """A group of output files sharing one transform group."""

    transform_group: str = Field(default="css/simple", alias="transformGroup")
    build_path: str = Field(default="", alias="buildPath")
    brand_prefix: str = Field(default=DEFAULT_BRAND_PREFIX, alias="brandPrefix")
    files: list[FileConfig] = Field(default_factory=list)

    model_config = {"frozen": True, "populate_by_name": True}

    def options_for(self, file: FileConfig) -> FormatOptions:
        """Resolve format options for a file, inheriting the platform prefix."""
        merged: dict[str, Any] = {"brand_prefix": self.brand_prefix}
        merged.update(file.options)
        return FormatOptions.model_validate(merged)


class BuildConfig(BaseModel):
    """Complete build configuration."""

    schema_version: str = Field("tokens-config/v1", alias="schema")
    name: str = Field(default="default", description="Config name")
    description: str = Field(default="", description="Config description")
    source: list[str] = Field(default_factory=lambda: ["tokens/**/*.json"])
    platforms: dict[str, PlatformConfig] = Field(default_factory=dict)

    model_config = {"frozen": True, "populate_by_name": True}

    def get_platform(self, name: str) -> PlatformConfig:
        """
        Get a platform by name.

        Raises:
            ValueError: If the platform is not configured
        """
        platform = self.platforms.get(name)
        if platform is None:
            raise ValueError(ErrorMessages.UNKNOWN_PLATFORM.format(platform=name))
        return platform

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to YAML-serializable dictionary."""
        return {
            "schema": self.schema_version,
            "name": self.name,
            "description": self.description,
            "source": list(self.source),
            "platforms": {
                name: {
                    "transformGroup": platform.transform_group,
                    "buildPath": platform.build_path,
                    "brandPrefix": platform.brand_prefix,
                    "files": [
                        {
                            "destination": f.destination,
                            "format": f.format,
                            **({"options": dict(f.options)} if f.options else {}),
                        }
                        for f in platform.files
                    ],
                }
                for name, platform in self.platforms.items()
            },
        }


class ConfigMetadata(BaseModel):
    """Lightweight metadata for listing configs."""

    name: str
    description: str
    platforms: list[str]

    model_config = {"frozen": True}

    @classmethod
    def from_config(cls, config: BuildConfig) -> ConfigMetadata:
        """Create metadata from a config."""
        return cls(
            name=config.name,
            description=config.description,
            platforms=list(config.platforms),
        )
