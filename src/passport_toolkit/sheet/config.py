"""
Module: sheet.config

Purpose:
    Configuration for sheet creation. Sizes are given in millimetres and
    converted to pixels at the configured print resolution.

Key Classes:
    - SheetConfig: Immutable sheet configuration

Dependencies:
    - dataclasses (std)
    - common.units: mm_to_px

Used By:
    - sheet.controller: Sheet creation
    - sheet.plugin: Command dispatch
    - cli: Command line options
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from passport_toolkit.common.units import DEFAULT_DPI, mm_to_px
from passport_toolkit.core.models import Dimensions, PlacementConfig
from passport_toolkit.core.models.elements import WHITE, Color

DEFAULT_BORDER_COLOR: Color = (0.8, 0.8, 0.8)


@dataclass(frozen=True)
class SheetConfig:
    """
    Configuration for a photo sheet (immutable).

    Defaults produce an A4 sheet at 300 DPI tiled with 35x45 mm passport
    photos, 10 mm from the paper edge and 5 mm apart.

    Attributes:
        page_width_mm: Paper width
        page_height_mm: Paper height
        photo_width_mm: Width of one photo copy
        photo_height_mm: Height of one photo copy
        margin_mm: Distance from paper edge to any photo
        spacing_mm: Distance between adjacent photos
        dpi: Print resolution used for mm -> px conversion
        paper_name: Paper label used in the sheet name and notifications
        sheet_name: Name of the created sheet frame ({paper} is substituted)
        background: Sheet fill colour
        border: Whether each copy gets a thin cutting border
        border_color: Border colour
        border_weight: Border width in pixels
        sheet_offset_px: Gap between the source element and the new sheet

    Example:
        >>> config = SheetConfig()
        >>> config.page_size
        Dimensions(width=2480, height=3508)
        >>> config.photo_size
        Dimensions(width=413, height=531)
    """

    # Paper
    page_width_mm: float = 210.0
    page_height_mm: float = 297.0

    # Photo
    photo_width_mm: float = 35.0
    photo_height_mm: float = 45.0

    # Layout
    margin_mm: float = 10.0
    spacing_mm: float = 5.0
    dpi: int = DEFAULT_DPI

    # Presentation
    paper_name: str = "A4"
    sheet_name: str = "Passport Photo Sheet ({paper})"
    background: Color = WHITE
    border: bool = True
    border_color: Color = DEFAULT_BORDER_COLOR
    border_weight: float = 1.0
    sheet_offset_px: int = 100

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        for name in ("page_width_mm", "page_height_mm", "photo_width_mm", "photo_height_mm"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise ValueError(f"{name} must be positive: {value}")
        for name in ("margin_mm", "spacing_mm"):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise ValueError(f"{name} must be non-negative: {value}")
        if self.dpi <= 0:
            raise ValueError(f"dpi must be positive: {self.dpi}")
        if self.border_weight < 0:
            raise ValueError(f"border_weight must be non-negative: {self.border_weight}")
        for name in ("background", "border_color"):
            color = getattr(self, name)
            if len(color) != 3 or any(not 0.0 <= c <= 1.0 for c in color):
                raise ValueError(f"{name} must be three channels in [0, 1]: {color}")
        if mm_to_px(self.page_width_mm, self.dpi) <= 0 or mm_to_px(self.page_height_mm, self.dpi) <= 0:
            raise ValueError("Page size rounds to zero pixels at this dpi")
        if mm_to_px(self.photo_width_mm, self.dpi) <= 0 or mm_to_px(self.photo_height_mm, self.dpi) <= 0:
            raise ValueError("Photo size rounds to zero pixels at this dpi")

    @property
    def page_size(self) -> Dimensions:
        """Paper size in pixels."""
        return Dimensions(
            mm_to_px(self.page_width_mm, self.dpi),
            mm_to_px(self.page_height_mm, self.dpi),
        )

    @property
    def photo_size(self) -> Dimensions:
        """Photo copy size in pixels."""
        return Dimensions(
            mm_to_px(self.photo_width_mm, self.dpi),
            mm_to_px(self.photo_height_mm, self.dpi),
        )

    @property
    def margin_px(self) -> int:
        return mm_to_px(self.margin_mm, self.dpi)

    @property
    def spacing_px(self) -> int:
        return mm_to_px(self.spacing_mm, self.dpi)

    @property
    def resolved_sheet_name(self) -> str:
        """Sheet frame name with "{paper}" replaced; other braces are kept as written."""
        return self.sheet_name.replace("{paper}", self.paper_name)

    def to_placement_config(self) -> PlacementConfig:
        """Pixel configuration for the grid planner."""
        return PlacementConfig(
            page_size=self.page_size,
            item_size=self.photo_size,
            margin=self.margin_px,
            spacing=self.spacing_px,
        )
