"""
Module: common

Purpose:
    Shared helpers used across the toolkit (unit conversion, paper presets).
"""

from .units import (
    DEFAULT_DPI,
    MM_PER_INCH,
    PAPER_SIZES_MM,
    PHOTO_SIZES_MM,
    mm_to_px,
    px_to_pt,
)

__all__ = [
    "DEFAULT_DPI",
    "MM_PER_INCH",
    "PAPER_SIZES_MM",
    "PHOTO_SIZES_MM",
    "mm_to_px",
    "px_to_pt",
]
