"""
Core Models Package

Geometry value types are frozen dataclasses: the planner produces them and
nothing mutates them afterwards. Document elements are the exception; they
model live host nodes and are mutated by the host while a sheet is built.
"""

from .geometry import Dimensions, Placement, PlacementConfig
from .elements import Element, ElementKind, Paint, PaintType, Stroke

__all__ = [
    "Dimensions",
    "Placement",
    "PlacementConfig",
    "Element",
    "ElementKind",
    "Paint",
    "PaintType",
    "Stroke",
]
