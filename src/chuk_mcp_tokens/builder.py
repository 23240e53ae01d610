"""
Token Builder - runs a build config against a token dictionary.

The pipeline, per platform:
    TokenDictionary (resolved tokens)
    → transform group applied to every token
    → each file's format invoked with the transformed dictionary
    → BuildResult (destination → text), optionally written to disk
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from chuk_mcp_tokens.models.config import BuildConfig, PlatformConfig
from chuk_mcp_tokens.models.token import TokenDictionary
from chuk_mcp_tokens.registry import TokenRegistry, create_default_registry

logger = logging.getLogger(__name__)


@dataclass
class BuildResult:
    """Result of building one platform."""

    platform: str
    build_path: str
    files: dict[str, str] = field(default_factory=dict)
    token_count: int = 0

    def output_paths(self, base_dir: Path) -> dict[str, Path]:
        """Where each destination lands under ``base_dir``."""
        root = base_dir / self.build_path
        return {destination: root / destination for destination in self.files}


class TokenBuilder:
    """
    Builds platforms of a config.

    The builder owns no state between builds; every call transforms the
    dictionary it is given and formats the result.
    """

    def __init__(
        self,
        config: BuildConfig,
        registry: TokenRegistry | None = None,
    ):
        """
        Initialize the builder.

        Args:
            config: Build configuration
            registry: Registry for transforms and formats (defaults to built-ins)
        """
        self.config = config
        self.registry = registry or create_default_registry()

    def transform(self, dictionary: TokenDictionary, platform: PlatformConfig) -> TokenDictionary:
        """Apply the platform's transform group to every token."""
        transforms = self.registry.get_transform_group(platform.transform_group)
        tokens = []
        for token in dictionary.all_tokens:
            for transform in transforms:
                token = transform.apply(token, platform)
            tokens.append(token)
        return dictionary.with_tokens(tokens)

    def build_platform(self, name: str, dictionary: TokenDictionary) -> BuildResult:
        """
        Build every file of one platform.

        Args:
            name: Platform name in the config
            dictionary: Resolved tokens

        Returns:
            BuildResult mapping destination to generated text

        Raises:
            ValueError: If the platform, transform group or a format is unknown
        """
        platform = self.config.get_platform(name)
        transformed = self.transform(dictionary, platform)

        result = BuildResult(
            platform=name,
            build_path=platform.build_path,
            token_count=len(transformed),
        )
        for file in platform.files:
            fmt = self.registry.get_format(file.format)
            result.files[file.destination] = fmt(transformed, platform.options_for(file))
            logger.debug("Formatted %s with %s", file.destination, file.format)

        return result

    def build_all(self, dictionary: TokenDictionary) -> list[BuildResult]:
        """Build every platform in config order."""
        return [self.build_platform(name, dictionary) for name in self.config.platforms]

    def write(self, result: BuildResult, base_dir: Path) -> list[Path]:
        """
        Write a build result under ``base_dir / build_path``.

        Returns:
            Paths written
        """
        written: list[Path] = []
        for destination, path in result.output_paths(base_dir).items():
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(result.files[destination])
            written.append(path)
        logger.info("Wrote %d files for platform '%s'", len(written), result.platform)
        return written
