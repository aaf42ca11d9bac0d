"""
Module: elements

Purpose:
    Document node model shared by sheet hosts. An Element is a node in a
    design document (a frame or an image layer) with a position, a size,
    paints and child nodes.

    Unlike the geometry value types, elements are mutable: the host moves,
    resizes and re-parents them while a sheet is being built.

Key Classes:
    - PaintType: Kind of fill (solid colour or image)
    - Paint: One fill layer
    - Stroke: Outline drawn inside the element bounds
    - ElementKind: Frame (container) or rectangle (leaf)
    - Element: A document node

Dependencies:
    - PIL.Image (TYPE_CHECKING only)

Used By:
    - sheet.host: Host implementations create and mutate elements
    - sheet.controller: Selection validation
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, List, Optional, Tuple

if TYPE_CHECKING:
    from PIL import Image

Color = Tuple[float, float, float]

WHITE: Color = (1.0, 1.0, 1.0)

_ids = itertools.count(1)


def next_element_id() -> str:
    """Allocate a process-unique element id."""
    return f"el-{next(_ids)}"


class PaintType(str, Enum):
    SOLID = "SOLID"
    IMAGE = "IMAGE"


class ElementKind(str, Enum):
    FRAME = "FRAME"
    RECTANGLE = "RECTANGLE"


@dataclass(frozen=True)
class Paint:
    """
    A single fill layer.

    Attributes:
        type: SOLID or IMAGE
        color: RGB channels in [0, 1] (SOLID paints)
        image: Source bitmap (IMAGE paints), stretched to the element size
    """

    type: PaintType
    color: Optional[Color] = None
    image: Optional[Image.Image] = field(default=None, compare=False, repr=False)

    @classmethod
    def solid(cls, color: Color) -> Paint:
        return cls(PaintType.SOLID, color=color)

    @classmethod
    def from_image(cls, image: Image.Image) -> Paint:
        return cls(PaintType.IMAGE, image=image)


@dataclass(frozen=True)
class Stroke:
    """Solid outline of `weight` pixels drawn inside the element bounds."""

    color: Color
    weight: float = 1.0


@dataclass(eq=False)
class Element:
    """
    A node in the host document.

    Elements compare by identity: two clones with the same geometry are
    still distinct nodes.

    Attributes:
        name: Layer name shown in the host
        kind: FRAME (may hold children) or RECTANGLE
        x, y: Position relative to the parent (or the page)
        width, height: Size in pixels
        fills: Paint layers, bottom first
        strokes: Outlines
        children: Child nodes in paint order
        parent: Containing frame, None for top-level nodes
        id: Unique node id
    """

    name: str
    kind: ElementKind = ElementKind.RECTANGLE
    x: float = 0
    y: float = 0
    width: float = 0
    height: float = 0
    fills: List[Paint] = field(default_factory=list)
    strokes: List[Stroke] = field(default_factory=list)
    children: List[Element] = field(default_factory=list)
    parent: Optional[Element] = field(default=None, repr=False)
    id: str = field(default_factory=next_element_id)

    @property
    def has_image_fill(self) -> bool:
        """True if any fill layer is an image."""
        return any(paint.type == PaintType.IMAGE for paint in self.fills)

    @property
    def image_fill(self) -> Optional[Paint]:
        """Topmost image paint, or None."""
        for paint in reversed(self.fills):
            if paint.type == PaintType.IMAGE:
                return paint
        return None

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height
