"""
Module: sheet.layout.models

Purpose:
    Result model for grid planning.

Key Classes:
    - GridLayout: Placements plus grid diagnostics

Dependencies:
    - dataclasses (std)
    - core.models.geometry: Placement, PlacementConfig

Used By:
    - sheet.layout.planner: Creates GridLayouts
    - sheet.controller: Reports the placed count
"""

from __future__ import annotations

from dataclasses import dataclass

from passport_toolkit.core.models import Placement, PlacementConfig


@dataclass(frozen=True)
class GridLayout:
    """
    Planned grid for one sheet.

    Attributes:
        config: Configuration the grid was planned from
        placements: Item origins in row-major order
        columns: Items per row
        rows: Number of rows

    Example:
        >>> layout = plan_grid(config)
        >>> layout.count == layout.columns * layout.rows
        True
    """

    config: PlacementConfig
    placements: tuple[Placement, ...]
    columns: int
    rows: int

    @property
    def count(self) -> int:
        """Number of placed items."""
        return len(self.placements)

    @property
    def is_empty(self) -> bool:
        """True if not even one item fits."""
        return not self.placements
