"""
Utility functions for the Distance Game.
"""

from .logging import get_logger, setup_logging
from .geometry import (
    euclidean_distance,
    pairwise_distances,
    nearest_distances,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "euclidean_distance",
    "pairwise_distances",
    "nearest_distances",
]
