"""
Module: sheet.layout

Purpose:
    Grid planning for photo sheets. Host independent and free of side
    effects: configuration in, placements out.

Key Functions:
    - plan(): Ordered placement origins
    - plan_grid(): Placements with grid shape

Key Classes:
    - GridLayout: Planning result

Used By:
    - sheet.controller: Sheet creation
"""

from .models import GridLayout
from .planner import plan, plan_grid

__all__ = [
    "GridLayout",
    "plan",
    "plan_grid",
]
