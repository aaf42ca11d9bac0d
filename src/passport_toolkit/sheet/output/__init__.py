"""
Module: sheet.output

Purpose:
    Printable output for flattened sheets (PDF, PNG).
"""

from .renderer import render_to_pdf, save_png, write_sheet, SUPPORTED_SUFFIXES

__all__ = [
    "render_to_pdf",
    "save_png",
    "write_sheet",
    "SUPPORTED_SUFFIXES",
]
