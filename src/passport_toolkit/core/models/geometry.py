"""
Module: geometry

Purpose:
    Value types for grid placement: sizes, placement origins and the
    configuration consumed by the grid planner.

Key Classes:
    - Dimensions: Width/height pair in pixels
    - Placement: Top-left origin of one item on the page
    - PlacementConfig: Page size, item size, margin and spacing

Dependencies:
    - dataclasses (std)

Used By:
    - sheet.layout.planner
    - sheet.config
    - sheet.host
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Dimensions:
    """
    Width and height in pixel units.

    Attributes:
        width: Horizontal extent (> 0)
        height: Vertical extent (> 0)

    Example:
        >>> Dimensions(413, 531).as_tuple()
        (413, 531)
    """

    width: float
    height: float

    def __post_init__(self) -> None:
        """Validate dimensions on construction."""
        if not math.isfinite(self.width) or self.width <= 0:
            raise ValueError(f"width must be positive: {self.width}")
        if not math.isfinite(self.height) or self.height <= 0:
            raise ValueError(f"height must be positive: {self.height}")

    def as_tuple(self) -> tuple[float, float]:
        """Get as (width, height), suitable for PIL resize."""
        return (self.width, self.height)


@dataclass(frozen=True, slots=True)
class Placement:
    """
    Top-left origin of one item instance, measured from the page origin.

    Attributes:
        x: Horizontal offset from the page's left edge
        y: Vertical offset from the page's top edge
    """

    x: float
    y: float

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class PlacementConfig:
    """
    Input to the grid planner (immutable).

    An item that cannot fit inside the margins is not a configuration
    error: the planner simply returns no placements for it.

    Attributes:
        page_size: Page dimensions
        item_size: Dimensions of one item
        margin: Empty border between page edge and any item (>= 0)
        spacing: Empty gap between adjacent items (>= 0)

    Example:
        >>> config = PlacementConfig(Dimensions(100, 100), Dimensions(60, 60), 10, 5)
        >>> config.content_width
        80
    """

    page_size: Dimensions
    item_size: Dimensions
    margin: float = 0
    spacing: float = 0

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not math.isfinite(self.margin) or self.margin < 0:
            raise ValueError(f"margin must be non-negative: {self.margin}")
        if not math.isfinite(self.spacing) or self.spacing < 0:
            raise ValueError(f"spacing must be non-negative: {self.spacing}")

    @property
    def content_width(self) -> float:
        """Width inside the margins."""
        return self.page_size.width - 2 * self.margin

    @property
    def content_height(self) -> float:
        """Height inside the margins."""
        return self.page_size.height - 2 * self.margin
