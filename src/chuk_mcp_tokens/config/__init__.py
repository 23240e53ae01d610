"""
Build config system - declarative source globs and output targets.

Library configs ship with the package; project configs with the same
name take precedence.
"""

from chuk_mcp_tokens.config.loader import ConfigLoader

__all__ = ["ConfigLoader"]
