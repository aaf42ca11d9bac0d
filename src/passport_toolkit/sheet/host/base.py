"""
Module: sheet.host.base

Purpose:
    Abstract capability set a design-tool host exposes to the sheet
    pipeline. The controller only talks to the document through this
    interface, so the same pipeline runs against any host that can
    create, clone, move and parent elements.

Key Classes:
    - DocumentHost: Abstract base class for document access
    - ElementNotFoundError: Exception for unknown elements

Dependencies:
    - core.models: Element, Dimensions

Used By:
    - sheet.controller: Sheet creation
    - sheet.plugin: Command dispatch
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from passport_toolkit.core.models import Dimensions, Element, Paint, Stroke


class ElementNotFoundError(Exception):
    """Element is not part of this host's document."""
    pass


class DocumentHost(ABC):
    """
    Abstract interface for a design-tool document.

    Implementations own the element tree. Operations that move or parent
    elements must raise ElementNotFoundError for elements they do not own.
    """

    @property
    @abstractmethod
    def selection(self) -> Sequence[Element]:
        """Currently selected elements on the current page."""

    @abstractmethod
    def create_container(self, size: Dimensions, name: str = "Frame") -> Element:
        """
        Create an empty frame of the given size.

        The frame is detached until appended somewhere.

        Args:
            size: Frame size in pixels
            name: Layer name

        Returns:
            New frame element
        """

    @abstractmethod
    def clone_element(self, source: Element) -> Element:
        """
        Duplicate an element, children included.

        The clone is placed alongside the source (same parent, same
        position) and gets a new id.

        Raises:
            ElementNotFoundError: If source is not in the document
        """

    @abstractmethod
    def resize(self, element: Element, size: Dimensions) -> None:
        """Set the element's width and height."""

    @abstractmethod
    def set_position(self, element: Element, x: float, y: float) -> None:
        """Move the element, relative to its parent."""

    @abstractmethod
    def set_fills(self, element: Element, fills: Sequence[Paint]) -> None:
        """Replace the element's fill layers."""

    @abstractmethod
    def set_strokes(self, element: Element, strokes: Sequence[Stroke]) -> None:
        """Replace the element's outlines."""

    @abstractmethod
    def append_child(self, parent: Element, element: Element) -> None:
        """
        Re-parent element as the last child of parent.

        Raises:
            ElementNotFoundError: If either element is not in the document
        """

    @abstractmethod
    def append_to_page(self, element: Element) -> None:
        """Re-parent element as a top-level node of the current page."""

    @abstractmethod
    def remove(self, element: Element) -> None:
        """Delete the element and its children from the document."""

    @abstractmethod
    def notify(self, message: str, *, error: bool = False) -> None:
        """Show a transient message to the user."""

    def scroll_into_view(self, elements: Sequence[Element]) -> None:
        """Bring elements into the viewport. Hosts without a viewport ignore this."""

    def close(self) -> None:
        """End the plugin session. Hosts without a session ignore this."""
