"""
Distance Game
=============

Ranks named players on a 50 x 50 field by how far each one is from
their nearest neighbour. The most isolated player wins.

The package:
1. Loads player rows from the built-in sample or a CSV file
2. Computes nearest-neighbour distances and ranks players
3. Renders a scatter chart with distance circles and a ranked table
4. Writes HTML, JSON and CSV reports
"""

from .orchestrator import DistanceGame
from .config import DistanceGameConfig
from .ranking.ranker import NearestNeighborRanker, Point, Standings

__version__ = "1.0.0"
__all__ = [
    "DistanceGame",
    "DistanceGameConfig",
    "NearestNeighborRanker",
    "Point",
    "Standings",
]
