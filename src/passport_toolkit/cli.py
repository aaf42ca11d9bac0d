"""
Command line entry point: build a photo sheet from an image file.

    passport-sheet photo.jpg -o sheet.pdf
    passport-sheet photo.jpg -o sheet.png --paper LETTER --photo us --no-border
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from passport_toolkit import __version__
from passport_toolkit.common.units import DEFAULT_DPI, PAPER_SIZES_MM, PHOTO_SIZES_MM
from passport_toolkit.sheet import (
    RasterDocumentHost,
    SheetConfig,
    SheetError,
    create_sheet,
    load_image_element,
)
from passport_toolkit.sheet.output import SUPPORTED_SUFFIXES, write_sheet


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="passport-sheet",
        description="Tile a printable sheet with passport-sized copies of a photo.",
    )
    parser.add_argument("image", type=Path, help="Source photo")
    parser.add_argument(
        "--output", "-o", type=Path, required=True,
        help=f"Output file ({', '.join(SUPPORTED_SUFFIXES)})",
    )
    parser.add_argument("--paper", choices=sorted(PAPER_SIZES_MM), default="A4", help="Paper size")
    parser.add_argument("--photo", choices=sorted(PHOTO_SIZES_MM), default="passport", help="Photo size preset")
    parser.add_argument("--margin", type=float, default=10.0, help="Margin from paper edge in mm")
    parser.add_argument("--spacing", type=float, default=5.0, help="Gap between photos in mm")
    parser.add_argument("--dpi", type=int, default=DEFAULT_DPI, help="Print resolution")
    parser.add_argument("--no-border", action="store_true", help="Omit the thin cutting border")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def config_from_args(args: argparse.Namespace) -> SheetConfig:
    """
    Translate parsed arguments into a SheetConfig.

    Raises:
        ValueError: If the resulting configuration is invalid
    """
    page_w, page_h = PAPER_SIZES_MM[args.paper]
    photo_w, photo_h = PHOTO_SIZES_MM[args.photo]
    return SheetConfig(
        page_width_mm=page_w,
        page_height_mm=page_h,
        photo_width_mm=photo_w,
        photo_height_mm=photo_h,
        margin_mm=args.margin,
        spacing_mm=args.spacing,
        dpi=args.dpi,
        paper_name=args.paper,
        border=not args.no_border,
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    try:
        config = config_from_args(args)
    except ValueError as e:
        parser.error(str(e))

    host = RasterDocumentHost()
    try:
        photo = host.add(load_image_element(args.image))
        host.select(photo)
        result = create_sheet(host, config)
        write_sheet(host.flatten(result.sheet), args.output, dpi=config.dpi)
    except (SheetError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Placed {result.placed_count} photos on {config.paper_name}: {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
