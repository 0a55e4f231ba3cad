"""
Data Adapters
=============

Load raw player rows from inline text or CSV files.
"""

from .adapters import (
    SAMPLE_DATA_CSV,
    DataAdapter,
    DataLoadError,
    InlineAdapter,
    CSVAdapter,
    UniversalAdapter,
)

__all__ = [
    "SAMPLE_DATA_CSV",
    "DataAdapter",
    "DataLoadError",
    "InlineAdapter",
    "CSVAdapter",
    "UniversalAdapter",
]
