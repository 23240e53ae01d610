"""
Category models - how a token category maps onto a theme bucket.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class PlacementStrategy(str, Enum):
    """How a token is placed inside its bucket."""

    LEAF = "leaf"  # bucket[leaf_key] = value
    COLOR_SCALE = "color_scale"  # bucket[seg1][seg2]... = value


class CategorySpec(BaseModel):
    """Static metadata for one token category."""

    target: str = Field(..., description="Theme bucket the category fills")
    raw: bool = Field(
        default=False,
        description="Emit the literal value instead of a var(--name) reference",
    )
    placement: PlacementStrategy = Field(default=PlacementStrategy.LEAF)

    model_config = {"frozen": True}

    @property
    def is_custom(self) -> bool:
        """Whether the category needs its own nesting rule."""
        return self.placement != PlacementStrategy.LEAF
