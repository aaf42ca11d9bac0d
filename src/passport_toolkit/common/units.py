"""
Module: common.units

Purpose:
    Print unit conversion between millimetres, pixels and PDF points,
    plus the paper and photo presets offered by the CLI.

Key Functions:
    - mm_to_px(): Millimetres to whole pixels at a given DPI
    - px_to_pt(): Pixels to PDF points at a given DPI

Dependencies:
    - math (std)

Used By:
    - sheet.config: Derived pixel sizes
    - sheet.output.renderer: PDF page size
"""

from __future__ import annotations

import math
from typing import Dict, Tuple

# Standard DPI for printing
DEFAULT_DPI = 300
MM_PER_INCH = 25.4
POINTS_PER_INCH = 72.0

# (width_mm, height_mm), portrait orientation
PAPER_SIZES_MM: Dict[str, Tuple[float, float]] = {
    "A4": (210.0, 297.0),
    "A5": (148.0, 210.0),
    "LETTER": (215.9, 279.4),
}

PHOTO_SIZES_MM: Dict[str, Tuple[float, float]] = {
    "passport": (35.0, 45.0),
    "us": (51.0, 51.0),
    "visa": (50.0, 70.0),
}


def mm_to_px(mm: float, dpi: int = DEFAULT_DPI) -> int:
    """
    Convert millimetres to pixels, rounded to the nearest whole pixel.

    Halves round up (away from zero for positive values) so that the
    result does not depend on banker's rounding.

    Args:
        mm: Length in millimetres
        dpi: Dots per inch

    Returns:
        Length in pixels

    Example:
        >>> mm_to_px(210)
        2480
        >>> mm_to_px(45)
        531
    """
    return int(math.floor(mm / MM_PER_INCH * dpi + 0.5))


def px_to_pt(px: float, dpi: int = DEFAULT_DPI) -> float:
    """
    Convert pixels to PDF points (1/72 inch).

    Args:
        px: Pixel value
        dpi: Dots per inch

    Returns:
        Value in PDF points
    """
    return px * POINTS_PER_INCH / dpi
