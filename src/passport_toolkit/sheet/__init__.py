"""
Module: sheet

Purpose:
    Photo sheet pipeline: tile a page with copies of one selected image.
    Validates the selection, plans the grid, and builds the sheet through
    a DocumentHost.

Key Functions:
    - create_sheet(): Main entry point for sheet creation
    - plan(): Grid placement for a pixel configuration

Key Classes:
    - SheetConfig: Configuration in millimetres
    - SheetPlugin: create-sheet / cancel message dispatch
    - DocumentHost: Abstract host interface

Dependencies:
    - PIL: Raster host and image loading
    - reportlab: PDF output
"""

from .config import SheetConfig
from .controller import (
    SelectionError,
    SheetError,
    SheetResult,
    create_sheet,
    validate_selection,
)
from .host import DocumentHost, RasterDocumentHost, load_image_element
from .layout import GridLayout, plan, plan_grid
from .plugin import MessageType, SheetPlugin

__all__ = [
    # Config
    "SheetConfig",
    # Controller
    "create_sheet",
    "validate_selection",
    "SheetResult",
    "SheetError",
    "SelectionError",
    # Host
    "DocumentHost",
    "RasterDocumentHost",
    "load_image_element",
    # Layout
    "GridLayout",
    "plan",
    "plan_grid",
    # Plugin
    "MessageType",
    "SheetPlugin",
]
