"""
Module: sheet.layout.planner

Purpose:
    Tile a page with as many whole, equally sized items as fit inside the
    page margins.

Key Functions:
    - plan(): Ordered placement origins for a configuration
    - plan_grid(): Same, wrapped in a GridLayout with row/column counts

Algorithm:
    1. Start a row cursor at the top margin
    2. While an item starting at the cursor ends inside the bottom margin:
       - start a column cursor at the left margin
       - emit every column whose item ends inside the right margin
       - advance the row cursor by item height + spacing
    3. Columns and rows that would cross the margin are dropped, never
       clipped or shrunk

Dependencies:
    - core.models.geometry: Placement, PlacementConfig

Used By:
    - sheet.controller: Sheet creation
"""

from __future__ import annotations

import logging
from typing import List

from passport_toolkit.core.models import Placement, PlacementConfig

from .models import GridLayout

logger = logging.getLogger(__name__)


def plan(config: PlacementConfig) -> List[Placement]:
    """
    Compute item origins for a page, in row-major order.

    Every placement satisfies ``margin <= x`` and
    ``x + item_width <= page_width - margin`` (and likewise for y), and no
    two placements overlap when spacing is non-negative. The result is
    empty when ``item + 2 * margin`` exceeds the page on either axis.

    Args:
        config: Page size, item size, margin and spacing

    Returns:
        Placements, left to right within a row, rows top to bottom

    Example:
        >>> plan(PlacementConfig(Dimensions(100, 100), Dimensions(60, 60), 10, 5))
        [Placement(x=10, y=10)]
    """
    page = config.page_size
    item = config.item_size
    margin = config.margin
    step_x = item.width + config.spacing
    step_y = item.height + config.spacing

    placements: List[Placement] = []
    y = margin
    while y + item.height + margin <= page.height:
        x = margin
        while x + item.width + margin <= page.width:
            placements.append(Placement(x=x, y=y))
            x += step_x
        y += step_y

    return placements


def plan_grid(config: PlacementConfig) -> GridLayout:
    """
    Plan a grid and report its shape.

    Args:
        config: Page size, item size, margin and spacing

    Returns:
        GridLayout with placements, columns and rows
    """
    placements = plan(config)

    columns = sum(1 for p in placements if p.y == placements[0].y) if placements else 0
    rows = len(placements) // columns if columns else 0

    if not placements:
        logger.warning(
            f"Item {_item_label(config)} does not fit on page "
            f"{config.page_size.width}x{config.page_size.height} "
            f"with margin {config.margin}"
        )
    else:
        logger.debug(f"Planned {columns} columns x {rows} rows for item {_item_label(config)}")

    return GridLayout(
        config=config,
        placements=tuple(placements),
        columns=columns,
        rows=rows,
    )


def _item_label(config: PlacementConfig) -> str:
    return f"{config.item_size.width}x{config.item_size.height}"
