"""
Module: sheet.controller

Purpose:
    Orchestrate sheet creation against a document host.
    Validate → Plan → Create sheet → Clone photos → Report

Key Functions:
    - create_sheet(): Main entry point for building a sheet
    - validate_selection(): Return the single selected image element

Key Classes:
    - SheetResult: Created sheet and its layout
    - SheetError: Exception for sheet failures
    - SelectionError: Selection is unusable

Dependencies:
    - sheet.layout: Grid planning
    - sheet.host: DocumentHost

Used By:
    - sheet.plugin: Command dispatch
    - cli: Command line entry point
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

from passport_toolkit.core.models import Element, Paint, Stroke

from .config import SheetConfig
from .host import DocumentHost
from .layout import GridLayout, plan_grid

logger = logging.getLogger(__name__)

SELECT_SINGLE_MESSAGE = "Please select a single image layer."
SELECT_IMAGE_MESSAGE = "Please select a layer with an image fill."
PROCESSING_MESSAGE = "Processing... Please wait."


class SheetError(Exception):
    """Error during sheet creation."""
    pass


class SelectionError(SheetError):
    """The selection cannot be used as a sheet source."""
    pass


@dataclass(frozen=True)
class SheetResult:
    """
    Result of sheet creation.

    Attributes:
        sheet: The created sheet frame (on the host's current page)
        source: The selected element the copies were made from
        layout: Planned grid
        placed_count: Number of photo copies appended to the sheet
        message: Completion message shown to the user

    Example:
        >>> result = create_sheet(host, SheetConfig())
        >>> result.placed_count
        20
    """

    sheet: Element
    source: Element
    layout: GridLayout
    placed_count: int
    message: str


def validate_selection(host: DocumentHost) -> Element:
    """
    Return the single selected element if it carries an image fill.

    Raises:
        SelectionError: If the selection is not exactly one element, or
            the element has no image fill
    """
    selection = host.selection
    if len(selection) != 1:
        raise SelectionError(SELECT_SINGLE_MESSAGE)

    source = selection[0]
    if not source.has_image_fill:
        raise SelectionError(SELECT_IMAGE_MESSAGE)
    return source


def create_sheet(host: DocumentHost, config: SheetConfig) -> SheetResult:
    """
    Build a sheet tiled with copies of the selected image.

    Pipeline:
    1. Validate the selection
    2. Plan the grid from the pixel configuration
    3. Create the sheet frame beside the source
    4. Clone a master copy at photo size, with a cutting border
    5. Clone the master once per placement into the sheet
    6. Remove the master, show the sheet, report the count

    Args:
        host: Document host holding the selection
        config: Sheet configuration

    Returns:
        SheetResult with the sheet frame and layout

    Raises:
        SelectionError: If the selection is unusable
    """
    source = validate_selection(host)
    start_time = time.perf_counter()

    host.notify(PROCESSING_MESSAGE)

    placement_config = config.to_placement_config()
    layout = plan_grid(placement_config)
    logger.info(
        f"Planned {layout.count} photos ({layout.columns}x{layout.rows}) "
        f"on {config.paper_name} at {config.dpi} DPI"
    )

    sheet = host.create_container(placement_config.page_size, name=config.resolved_sheet_name)
    host.set_fills(sheet, [Paint.solid(config.background)])
    host.set_position(sheet, source.x + source.width + config.sheet_offset_px, source.y)

    # The master and any half-built sheet must not outlive a failed host call
    placed = 0
    master = host.clone_element(source)
    try:
        host.resize(master, placement_config.item_size)
        if config.border and config.border_weight > 0:
            host.set_strokes(master, [Stroke(config.border_color, config.border_weight)])

        for placement in layout.placements:
            photo = host.clone_element(master)
            try:
                host.set_position(photo, placement.x, placement.y)
                host.append_child(sheet, photo)
            except Exception:
                host.remove(photo)
                raise
            placed += 1
    except Exception:
        logger.error(f"Sheet creation failed after {placed} photos")
        host.remove(sheet)
        raise
    finally:
        host.remove(master)

    host.append_to_page(sheet)
    host.scroll_into_view([sheet])

    message = f"✅ Successfully created {config.paper_name} sheet with {placed} photos!"
    host.notify(message)

    elapsed = time.perf_counter() - start_time
    logger.info(f"Sheet '{sheet.name}' created with {placed} photos in {elapsed:.2f}s")

    return SheetResult(
        sheet=sheet,
        source=source,
        layout=layout,
        placed_count=placed,
        message=message,
    )
