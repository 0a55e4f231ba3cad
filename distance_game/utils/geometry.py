"""
Planar distance helpers used by the ranker and the chart.
"""

import math
from typing import Sequence, Tuple

import numpy as np


def euclidean_distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Straight-line distance between (x1, y1) and (x2, y2)."""
    return math.sqrt((x2 - x1) ** 2 + (y2 - y1) ** 2)


def pairwise_distances(coords: Sequence[Tuple[float, float]]) -> np.ndarray:
    """
    Full N x N Euclidean distance matrix.
    
    Args:
        coords: Sequence of (x, y) pairs
        
    Returns:
        Symmetric matrix with zeros on the diagonal
    """
    xy = np.asarray(coords, dtype=float).reshape(-1, 2)
    diff = xy[:, np.newaxis, :] - xy[np.newaxis, :, :]
    return np.sqrt((diff ** 2).sum(axis=-1))


def nearest_distances(coords: Sequence[Tuple[float, float]]) -> np.ndarray:
    """
    Distance from each point to its closest other point.
    
    A lone point has no neighbour and gets 0.
    """
    n = len(coords)
    if n < 2:
        return np.zeros(n)
    
    dist = pairwise_distances(coords)
    np.fill_diagonal(dist, np.inf)
    return dist.min(axis=1)
