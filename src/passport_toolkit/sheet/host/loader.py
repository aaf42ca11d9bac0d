"""
Module: sheet.host.loader

Purpose:
    Build image elements from files on disk so a photo can be placed in a
    RasterDocumentHost and selected.

Key Functions:
    - load_image_element(): Open an image file as an Element with an image fill

Dependencies:
    - PIL: Image decoding
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from PIL import Image, ImageOps

from passport_toolkit.core.models import Element, ElementKind, Paint

logger = logging.getLogger(__name__)


def load_image_element(path: Path, name: Optional[str] = None) -> Element:
    """
    Load an image file as a rectangle element with an image fill.

    EXIF orientation is applied so camera photos are upright. The element
    is sized to the image in pixels and positioned at the origin.

    Args:
        path: Image file path
        name: Layer name (defaults to the file name)

    Returns:
        Detached Element; register it with a host before use

    Raises:
        OSError: If the file cannot be opened or decoded
    """
    with Image.open(path) as img:
        img.load()
        image = ImageOps.exif_transpose(img) or img.copy()

    logger.debug(f"Loaded {path.name}: {image.width}x{image.height} {image.mode}")

    return Element(
        name=name or path.name,
        kind=ElementKind.RECTANGLE,
        width=image.width,
        height=image.height,
        fills=[Paint.from_image(image)],
    )
