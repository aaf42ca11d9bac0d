"""
Module: sheet.output.renderer

Purpose:
    Write a flattened sheet bitmap to a printable file. PDF pages are
    sized so the bitmap prints at its native DPI.

Key Functions:
    - render_to_pdf(): One-page PDF via ReportLab
    - save_png(): PNG with DPI metadata via Pillow
    - write_sheet(): Choose the format from the file suffix

Dependencies:
    - reportlab: PDF generation
    - PIL: Image handling

Used By:
    - cli: Command line output
"""

from __future__ import annotations

import io
import logging
from pathlib import Path

from PIL import Image
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from passport_toolkit.common.units import DEFAULT_DPI, px_to_pt

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".pdf", ".png")


def render_to_pdf(image: Image.Image, output_path: Path, *, dpi: int = DEFAULT_DPI) -> None:
    """
    Render a sheet bitmap to a single-page PDF.

    The page size is the bitmap size converted at `dpi`, so a 2480x3508
    bitmap at 300 DPI produces an A4 page.

    Args:
        image: Flattened sheet
        output_path: Path to write PDF
        dpi: Resolution the bitmap was laid out at

    Raises:
        IOError: If PDF cannot be written

    Example:
        >>> render_to_pdf(host.flatten(result.sheet), Path("sheet.pdf"))
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)

    page_width_pt = px_to_pt(image.width, dpi)
    page_height_pt = px_to_pt(image.height, dpi)

    c = canvas.Canvas(str(output_path), pagesize=(page_width_pt, page_height_pt))
    c.drawImage(
        _pil_to_reader(image),
        0,
        0,
        width=page_width_pt,
        height=page_height_pt,
    )
    c.showPage()
    c.save()

    logger.info(f"Rendered {image.width}x{image.height}px sheet to {output_path}")


def save_png(image: Image.Image, output_path: Path, *, dpi: int = DEFAULT_DPI) -> None:
    """Save a sheet bitmap as PNG, tagged with its print resolution."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    image.save(output_path, format="PNG", dpi=(dpi, dpi))
    logger.info(f"Saved sheet image to {output_path}")


def write_sheet(image: Image.Image, output_path: Path, *, dpi: int = DEFAULT_DPI) -> None:
    """
    Write a sheet in the format implied by the output suffix.

    Raises:
        ValueError: If the suffix is not .pdf or .png
    """
    suffix = output_path.suffix.lower()
    if suffix == ".pdf":
        render_to_pdf(image, output_path, dpi=dpi)
    elif suffix == ".png":
        save_png(image, output_path, dpi=dpi)
    else:
        raise ValueError(
            f"Unsupported output format {output_path.suffix!r}; "
            f"use one of {', '.join(SUPPORTED_SUFFIXES)}"
        )


def _pil_to_reader(img: Image.Image) -> ImageReader:
    """Convert PIL image to ReportLab ImageReader (PNG-encoded, lossless)."""
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    buf.seek(0)
    return ImageReader(buf)
