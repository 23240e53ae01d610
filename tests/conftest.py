"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def token_records() -> list[dict]:
    """Resolved token records as handed over by a token compiler."""
    return [
        {"path": ["color", "primary", "600"], "value": "#2563eb"},
        {"path": ["color", "primary", "100"], "value": "#dbeafe"},
        {"path": ["color", "accent", "DEFAULT"], "value": "#f59e0b"},
        {"path": ["color", "success", "DEFAULT"], "value": "#16a34a"},
        {"path": ["spacing", "md"], "value": "16px"},
        {"path": ["fontSize", "base"], "value": "1rem"},
        {"path": ["borderRadius", "lg"], "value": "12px"},
        {"path": ["brand", "color", "primary", "600"], "value": "#7c3aed"},
    ]


@pytest.fixture
def library_path() -> Path:
    """Path to the config library."""
    return Path(__file__).parent.parent / "src" / "chuk_mcp_tokens" / "config" / "library"
