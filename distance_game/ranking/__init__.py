"""
Player Ranking
==============

Ranks players by distance to their nearest neighbour.
"""

from .ranker import (
    NearestNeighborRanker,
    Point,
    Standings,
    nearest_neighbor,
    nearest_to,
)

__all__ = [
    "NearestNeighborRanker",
    "Point",
    "Standings",
    "nearest_neighbor",
    "nearest_to",
]
