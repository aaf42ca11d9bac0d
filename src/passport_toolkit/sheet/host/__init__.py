"""
Module: sheet.host

Purpose:
    Host bindings for the sheet pipeline. The pipeline reaches the design
    document only through the DocumentHost capability set.

Key Classes:
    - DocumentHost: Abstract host interface
    - RasterDocumentHost: In-memory Pillow host
    - ElementNotFoundError: Exception for foreign elements

Key Functions:
    - load_image_element(): Image file to image element
"""

from .base import DocumentHost, ElementNotFoundError
from .raster import RasterDocumentHost, Notification
from .loader import load_image_element

__all__ = [
    "DocumentHost",
    "ElementNotFoundError",
    "RasterDocumentHost",
    "Notification",
    "load_image_element",
]
