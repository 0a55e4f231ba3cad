"""
View Layer
==========

Scatter chart, hover tracking and ranked table for a set of Standings.
"""

from .hover import HoverKind, HoverState, HoverTracker
from .chart import ScatterChart, tooltip_lines
from .table import standings_table, format_table

__all__ = [
    "HoverKind",
    "HoverState",
    "HoverTracker",
    "ScatterChart",
    "tooltip_lines",
    "standings_table",
    "format_table",
]
