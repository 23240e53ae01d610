"""
Token models - resolved design values handed to transforms and formats.

A token is a leaf of the design-token tree. Its path locates it
(e.g. ``("color", "primary", "600")``), its name is the flat identifier
produced by the name transform, and its value is already resolved.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, Field

TokenValue = str | int | float


class Token(BaseModel):
    """A single resolved design token."""

    path: tuple[str, ...] = Field(..., description="Segments from the tree root to this leaf")
    value: TokenValue = Field(..., description="Resolved value (color, length, ...)")
    name: str = Field(default="", description="Flat identifier set by the name transform")
    attributes: dict[str, str] = Field(
        default_factory=dict,
        description="Category/type/item metadata",
    )

    model_config = {"frozen": True}

    @property
    def category(self) -> str | None:
        """First path segment, if any."""
        return self.path[0] if self.path else None

    def has_segment(self, segment: str) -> bool:
        """Check whether any path segment equals ``segment``."""
        return segment in self.path

    def var_reference(self) -> str:
        """CSS custom property reference for this token."""
        return f"var(--{self.name})"


class TokenDictionary(BaseModel):
    """
    The ordered token list a format is invoked with.

    Order matters: when names collide, later tokens win.
    """

    all_tokens: list[Token] = Field(default_factory=list)

    model_config = {"frozen": True}

    def __len__(self) -> int:
        return len(self.all_tokens)

    @classmethod
    def from_records(cls, records: Iterable[dict[str, Any]]) -> TokenDictionary:
        """
        Build a dictionary from resolved token records.

        Args:
            records: Dicts with at least ``path`` and ``value`` keys

        Returns:
            TokenDictionary preserving record order
        """
        return cls(all_tokens=[Token.model_validate(record) for record in records])

    def with_tokens(self, tokens: Iterable[Token]) -> TokenDictionary:
        """Return a new dictionary holding ``tokens``."""
        return TokenDictionary(all_tokens=list(tokens))
