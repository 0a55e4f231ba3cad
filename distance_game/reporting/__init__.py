"""
Report Generator
================

Writes game results to HTML, JSON, CSV and PNG.
"""

from .generator import ReportGenerator, GameReport

__all__ = [
    "ReportGenerator",
    "GameReport",
]
