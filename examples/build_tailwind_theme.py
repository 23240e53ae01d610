#!/usr/bin/env python3
"""
Example: Building Tailwind themes from design tokens.

This demonstrates how a build config turns resolved tokens into CSS
custom properties and Tailwind theme objects, and how brand tokens
override the base palette.

Usage:
    python examples/build_tailwind_theme.py
"""

import tempfile
from pathlib import Path

from chuk_mcp_tokens import TokenBuilder, TokenDictionary
from chuk_mcp_tokens.config import ConfigLoader

TOKENS = [
    {"path": ["color", "primary", "100"], "value": "#dbeafe"},
    {"path": ["color", "primary", "600"], "value": "#2563eb"},
    {"path": ["color", "accent", "DEFAULT"], "value": "#f59e0b"},
    {"path": ["color", "success", "DEFAULT"], "value": "#16a34a"},
    {"path": ["color", "dark-mode", "surface"], "value": "#0f1115"},
    {"path": ["spacing", "sm"], "value": "8px"},
    {"path": ["spacing", "md"], "value": "16px"},
    {"path": ["fontSize", "base"], "value": "1rem"},
    {"path": ["borderRadius", "lg"], "value": "12px"},
    {"path": ["breakpoint", "md"], "value": "768px"},
    {"path": ["brand", "color", "primary", "600"], "value": "#7c3aed"},
    {"path": ["brand", "button", "radius"], "value": "4px"},
]


def main() -> None:
    """Demonstrate the token build pipeline."""
    print("CHUK Design Token Demo")
    print("=" * 40)
    print()

    library_path = Path(__file__).parent.parent / "src/chuk_mcp_tokens/config/library"
    dictionary = TokenDictionary.from_records(TOKENS)

    with tempfile.TemporaryDirectory() as tmp:
        loader = ConfigLoader(library_path=library_path, project_path=Path(tmp) / "configs")

        print("Available configs:")
        for meta in loader.list_configs():
            print(f"  {meta.name}: {meta.description[:60]}...")
            print(f"    Platforms: {', '.join(meta.platforms)}")
        print()

        for name in ["tailwind", "tailwind-brand"]:
            config = loader.get_config(name)
            if not config:
                print(f"Failed to load config: {name}")
                return

            print(f"Building '{name}':")
            builder = TokenBuilder(config)
            for result in builder.build_all(dictionary):
                for path in builder.write(result, Path(tmp)):
                    print(f"  --- {path.relative_to(tmp)} ---")
                    print(path.read_text())
                    print()

        print("Copying config to project for customization:")
        copied_path = loader.copy_to_project("tailwind-brand")
        if copied_path:
            print(f"  Copied to: {copied_path}")
            print("  You can now edit this file to change outputs or the brand prefix!")
        print()

        print("Done!")


if __name__ == "__main__":
    main()
