"""
Tests for the registry and the builder.

Tests cover:
- TokenRegistry registration and lookups
- TokenBuilder transforms, platform builds and file writing
"""

from pathlib import Path

import pytest

from chuk_mcp_tokens.builder import BuildResult, TokenBuilder
from chuk_mcp_tokens.config import ConfigLoader
from chuk_mcp_tokens.constants import TransformType
from chuk_mcp_tokens.models import (
    BuildConfig,
    FileConfig,
    FormatOptions,
    PlatformConfig,
    Token,
    TokenDictionary,
)
from chuk_mcp_tokens.registry import TokenRegistry, create_default_registry


def brand_config() -> BuildConfig:
    return BuildConfig(
        name="test",
        platforms={
            "css": PlatformConfig(
                transform_group="css/brand",
                build_path="out/css/",
                files=[FileConfig(destination="tokens.css", format="css/variables")],
            ),
            "js": PlatformConfig(
                transform_group="css/brand",
                build_path="out/js/",
                files=[FileConfig(destination="theme.js", format="javascript/tailwind-nested")],
            ),
        },
    )


class TestTokenRegistry:
    """Tests for TokenRegistry."""

    def test_default_formats(self):
        registry = create_default_registry()
        assert registry.list_formats() == [
            "css/tailwind-theme",
            "css/variables",
            "javascript/tailwind-nested",
            "javascript/tailwind-simple",
        ]

    def test_default_groups(self):
        groups = create_default_registry().list_transform_groups()
        assert groups["css/simple"] == ["attribute/cti", "name/simple", "size/px", "color/css"]
        assert groups["css/brand"] == ["attribute/cti", "name/brand", "size/px", "color/css"]

    def test_default_value_transforms(self):
        registry = create_default_registry()
        assert registry.get_transform("size/px").type == TransformType.VALUE
        assert registry.get_transform("color/css").type == TransformType.VALUE

    def test_unknown_format(self):
        with pytest.raises(ValueError, match="Unknown format"):
            create_default_registry().get_format("scss/map")

    def test_unknown_group(self):
        with pytest.raises(ValueError, match="Unknown transform group"):
            create_default_registry().get_transform_group("android/resources")

    def test_group_requires_registered_transforms(self):
        registry = TokenRegistry()
        with pytest.raises(ValueError, match="Unknown transform"):
            registry.register_transform_group("css/px", ["size/px"])

    def test_register_custom_format(self):
        registry = TokenRegistry()
        registry.register_format(
            "text/names",
            lambda dictionary, options: ",".join(t.name for t in dictionary.all_tokens),
        )
        fmt = registry.get_format("text/names")
        tokens = TokenDictionary(all_tokens=[Token(path=("a",), value=1, name="a")])
        assert fmt(tokens, FormatOptions()) == "a"

    def test_value_transform(self):
        registry = TokenRegistry()
        registry.register_transform(
            "value/upper", TransformType.VALUE, lambda token, platform: str(token.value).upper()
        )
        transform = registry.get_transform("value/upper")
        token = transform.apply(Token(path=("color", "a"), value="#abc"), PlatformConfig())
        assert token.value == "#ABC"


class TestTokenBuilder:
    """Tests for TokenBuilder."""

    def test_transform_sets_names_and_attributes(self):
        builder = TokenBuilder(brand_config())
        dictionary = TokenDictionary.from_records(
            [{"path": ["brand", "color", "primary", "DEFAULT"], "value": "#7c3aed"}]
        )
        transformed = builder.transform(dictionary, builder.config.get_platform("css"))
        token = transformed.all_tokens[0]
        assert token.name == "color-primary"
        assert token.attributes["category"] == "brand"
        # Input is untouched
        assert dictionary.all_tokens[0].name == ""

    def test_platform_brand_prefix_used_by_transform(self):
        config = BuildConfig(
            platforms={
                "css": PlatformConfig(
                    transform_group="css/brand",
                    brand_prefix="acme",
                    files=[FileConfig(destination="a.css", format="css/variables")],
                )
            }
        )
        result = TokenBuilder(config).build_platform(
            "css",
            TokenDictionary.from_records(
                [
                    {"path": ["acme", "spacing", "md"], "value": "20px"},
                    {"path": ["spacing", "md"], "value": "16px"},
                ]
            ),
        )
        assert result.files["a.css"] == ":root {\n  --spacing-md: 20px;\n}"

    def test_build_platform(self, token_records: list[dict]):
        builder = TokenBuilder(brand_config())
        result = builder.build_platform("css", TokenDictionary.from_records(token_records))

        assert result.platform == "css"
        assert result.token_count == len(token_records)
        css = result.files["tokens.css"]
        assert "--color-primary-600: #7c3aed;" in css
        assert "#2563eb" not in css

    def test_build_all(self, token_records: list[dict]):
        dictionary = TokenDictionary.from_records(token_records)
        results = TokenBuilder(brand_config()).build_all(dictionary)
        assert [r.platform for r in results] == ["css", "js"]
        theme_js = results[1].files["theme.js"]
        assert '"600": "#7c3aed"' in theme_js
        assert '"accent": "var(--color-accent)"' in theme_js

    def test_value_transforms_applied(self, library_path: Path):
        """Library configs emit CSS-ready lengths and colors."""
        config = ConfigLoader(library_path=library_path).get_config("tailwind")
        result = TokenBuilder(config).build_platform(
            "css",
            TokenDictionary.from_records(
                [
                    {"path": ["spacing", "md"], "value": 16},
                    {"path": ["color", "primary", "600"], "value": "rgb(37, 99, 235)"},
                    {"path": ["color", "overlay"], "value": "rgba(0, 0, 0, 0.5)"},
                    {"path": ["opacity", "full"], "value": 1.0},
                ]
            ),
        )
        assert result.files["design-tokens.css"] == (
            ":root {\n"
            "  --color-overlay: rgba(0, 0, 0, 0.5);\n"
            "  --color-primary-600: #2563eb;\n"
            "  --opacity-full: 1;\n"
            "  --spacing-md: 16px;\n"
            "}"
        )

    def test_value_transforms_on_brand_tokens(self):
        result = TokenBuilder(brand_config()).build_platform(
            "css",
            TokenDictionary.from_records(
                [
                    {"path": ["color", "primary", "600"], "value": "#2563EB"},
                    {"path": ["brand", "color", "primary", "600"], "value": "#7C3AED"},
                    {"path": ["brand", "spacing", "md"], "value": "20"},
                ]
            ),
        )
        css = result.files["tokens.css"]
        assert "--color-primary-600: #7c3aed;" in css
        assert "--spacing-md: 20px;" in css

    def test_file_selector_option(self):
        config = BuildConfig(
            platforms={
                "css": PlatformConfig(
                    files=[
                        FileConfig(
                            destination="dark.css",
                            format="css/variables",
                            options={"selector": ".dark"},
                        )
                    ]
                )
            }
        )
        result = TokenBuilder(config).build_platform(
            "css", TokenDictionary.from_records([{"path": ["spacing", "md"], "value": "1rem"}])
        )
        assert result.files["dark.css"].startswith(".dark {")

    def test_unknown_platform(self):
        with pytest.raises(ValueError, match="Platform 'android' not found"):
            TokenBuilder(brand_config()).build_platform("android", TokenDictionary())

    def test_unknown_format_in_config(self):
        config = BuildConfig(
            platforms={"css": PlatformConfig(files=[FileConfig(destination="a", format="nope")])}
        )
        with pytest.raises(ValueError, match="Unknown format"):
            TokenBuilder(config).build_platform("css", TokenDictionary())

    def test_write(self, temp_dir: Path, token_records: list[dict]):
        builder = TokenBuilder(brand_config())
        result = builder.build_platform("css", TokenDictionary.from_records(token_records))

        written = builder.write(result, temp_dir)

        assert written == [temp_dir / "out/css/tokens.css"]
        assert written[0].read_text() == result.files["tokens.css"]

    def test_output_paths(self, temp_dir: Path):
        result = BuildResult(platform="js", build_path="src/tokens/", files={"a.js": ""})
        assert result.output_paths(temp_dir) == {"a.js": temp_dir / "src/tokens/a.js"}
