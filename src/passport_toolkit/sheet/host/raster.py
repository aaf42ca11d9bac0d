"""
Module: sheet.host.raster

Purpose:
    In-memory DocumentHost backed by Pillow. Holds a single page of
    elements, records notifications, and can flatten any frame to a
    bitmap for printing.

Key Classes:
    - RasterDocumentHost: Standalone host used by the CLI and tests
    - Notification: A message passed to notify()

Dependencies:
    - PIL: Flattening frames to bitmaps
    - sheet.host.base: DocumentHost

Used By:
    - cli: Sheet generation from an image file
    - sheet.output.renderer: Consumes flattened bitmaps
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence, Tuple

from PIL import Image, ImageDraw

from passport_toolkit.core.models import (
    Dimensions,
    Element,
    ElementKind,
    Paint,
    PaintType,
    Stroke,
)
from passport_toolkit.core.models.elements import WHITE, Color, next_element_id

from .base import DocumentHost, ElementNotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Notification:
    message: str
    error: bool = False


class RasterDocumentHost(DocumentHost):
    """
    Host that keeps the document in memory.

    Elements handed in from outside (for example a loaded photo) must be
    registered with add() before the host will operate on them.

    Attributes:
        notifications: Every message passed to notify(), oldest first
        closed: Set once close() has been called
        viewport: Elements last scrolled into view

    Example:
        >>> host = RasterDocumentHost()
        >>> photo = host.add(load_image_element(Path("me.jpg")))
        >>> host.select(photo)
        >>> result = create_sheet(host, SheetConfig())
        >>> bitmap = host.flatten(result.sheet)
    """

    def __init__(self) -> None:
        self._page: List[Element] = []
        self._nodes: Dict[str, Element] = {}
        self._selection: List[Element] = []
        self.notifications: List[Notification] = []
        self.closed = False
        self.viewport: List[Element] = []

    # ─────────────────────────────────────────────────────────────────────────
    # Document state
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def page(self) -> Sequence[Element]:
        """Top-level elements of the current page, in paint order."""
        return tuple(self._page)

    @property
    def selection(self) -> Sequence[Element]:
        return tuple(self._selection)

    def add(self, element: Element) -> Element:
        """Register an external element (and its subtree) on the current page."""
        if self.contains(element):
            return element
        self._register(element)
        self._page.append(element)
        element.parent = None
        return element

    def select(self, *elements: Element) -> None:
        """Replace the selection."""
        for element in elements:
            self._require(element)
        self._selection = list(elements)

    def contains(self, element: Element) -> bool:
        return self._nodes.get(element.id) is element

    # ─────────────────────────────────────────────────────────────────────────
    # DocumentHost operations
    # ─────────────────────────────────────────────────────────────────────────

    def create_container(self, size: Dimensions, name: str = "Frame") -> Element:
        frame = Element(
            name=name,
            kind=ElementKind.FRAME,
            width=size.width,
            height=size.height,
        )
        self._nodes[frame.id] = frame
        return frame

    def clone_element(self, source: Element) -> Element:
        self._require(source)
        clone = self._copy_tree(source)
        self._register(clone)

        # Insert directly above the source, like a duplicate in a design tool
        siblings = source.parent.children if source.parent is not None else self._page
        if source in siblings:
            siblings.insert(siblings.index(source) + 1, clone)
            clone.parent = source.parent
        return clone

    def resize(self, element: Element, size: Dimensions) -> None:
        self._require(element)
        element.width = size.width
        element.height = size.height

    def set_position(self, element: Element, x: float, y: float) -> None:
        self._require(element)
        element.x = x
        element.y = y

    def set_fills(self, element: Element, fills: Sequence[Paint]) -> None:
        self._require(element)
        element.fills = list(fills)

    def set_strokes(self, element: Element, strokes: Sequence[Stroke]) -> None:
        self._require(element)
        element.strokes = list(strokes)

    def append_child(self, parent: Element, element: Element) -> None:
        self._require(parent)
        self._require(element)
        if parent.kind != ElementKind.FRAME:
            raise ValueError(f"Cannot append to non-frame element {parent.name!r}")
        if element is parent or _is_ancestor(element, parent):
            raise ValueError(f"Cannot append {element.name!r} inside itself")
        self._detach(element)
        parent.children.append(element)
        element.parent = parent

    def append_to_page(self, element: Element) -> None:
        self._require(element)
        self._detach(element)
        self._page.append(element)

    def remove(self, element: Element) -> None:
        self._require(element)
        self._detach(element)
        for node in _walk(element):
            self._nodes.pop(node.id, None)
            if node in self._selection:
                self._selection.remove(node)
            if node in self.viewport:
                self.viewport.remove(node)

    def notify(self, message: str, *, error: bool = False) -> None:
        self.notifications.append(Notification(message, error))
        if error:
            logger.warning(message)
        else:
            logger.info(message)

    def scroll_into_view(self, elements: Sequence[Element]) -> None:
        for element in elements:
            self._require(element)
        self.viewport = list(elements)

    def close(self) -> None:
        logger.debug("Host session closed")
        self.closed = True

    # ─────────────────────────────────────────────────────────────────────────
    # Rendering
    # ─────────────────────────────────────────────────────────────────────────

    def flatten(self, element: Element) -> Image.Image:
        """
        Render an element and its children to an RGB bitmap.

        The bitmap is the element's own size; children are clipped to it.
        Image fills are stretched to the element size with LANCZOS
        resampling. Strokes are drawn inside the element bounds.

        Args:
            element: Element to render (usually a sheet frame)

        Returns:
            PIL Image of size (round(width), round(height))
        """
        self._require(element)
        width, height = round(element.width), round(element.height)
        if width <= 0 or height <= 0:
            raise ValueError(f"Cannot flatten empty element {element.name!r}: {width}x{height}")

        canvas = Image.new("RGB", (width, height), _to_rgb(WHITE))
        resized: Dict[Tuple[int, int, int], Image.Image] = {}
        _draw_element(canvas, element, 0, 0, resized)
        return canvas

    # ─────────────────────────────────────────────────────────────────────────
    # Internals
    # ─────────────────────────────────────────────────────────────────────────

    def _require(self, element: Element) -> None:
        if not self.contains(element):
            raise ElementNotFoundError(f"Element {element.name!r} ({element.id}) is not in this document")

    def _register(self, element: Element) -> None:
        for node in _walk(element):
            self._nodes[node.id] = node

    def _detach(self, element: Element) -> None:
        if element.parent is not None:
            element.parent.children.remove(element)
            element.parent = None
        elif element in self._page:
            self._page.remove(element)

    def _copy_tree(self, source: Element) -> Element:
        clone = Element(
            name=source.name,
            kind=source.kind,
            x=source.x,
            y=source.y,
            width=source.width,
            height=source.height,
            fills=list(source.fills),
            strokes=list(source.strokes),
            id=next_element_id(),
        )
        for child in source.children:
            child_clone = self._copy_tree(child)
            child_clone.parent = clone
            clone.children.append(child_clone)
        return clone


def _walk(element: Element) -> Iterable[Element]:
    yield element
    for child in element.children:
        yield from _walk(child)


def _is_ancestor(candidate: Element, element: Element) -> bool:
    node = element.parent
    while node is not None:
        if node is candidate:
            return True
        node = node.parent
    return False


def _to_rgb(color: Color) -> Tuple[int, int, int]:
    r, g, b = color
    return (round(r * 255), round(g * 255), round(b * 255))


def _draw_element(
    canvas: Image.Image,
    element: Element,
    left: int,
    top: int,
    resized: Dict[Tuple[int, int, int], Image.Image],
) -> None:
    """Paint fills, strokes, then children, with the element's origin at (left, top)."""
    width, height = round(element.width), round(element.height)
    if width <= 0 or height <= 0:
        return

    draw = ImageDraw.Draw(canvas)
    for paint in element.fills:
        if paint.type == PaintType.SOLID and paint.color is not None:
            draw.rectangle([left, top, left + width - 1, top + height - 1], fill=_to_rgb(paint.color))
        elif paint.type == PaintType.IMAGE and paint.image is not None:
            key = (id(paint.image), width, height)
            if key not in resized:
                resized[key] = paint.image.convert("RGBA").resize((width, height), Image.Resampling.LANCZOS)
            bitmap = resized[key]
            canvas.paste(bitmap, (left, top), bitmap)

    for stroke in element.strokes:
        weight = round(stroke.weight)
        if weight <= 0:
            continue
        draw.rectangle(
            [left, top, left + width - 1, top + height - 1],
            outline=_to_rgb(stroke.color),
            width=weight,
        )

    for child in element.children:
        _draw_element(canvas, child, left + round(child.x), top + round(child.y), resized)
