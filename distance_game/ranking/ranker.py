"""
Nearest-Neighbour Ranker

Ranks players by how isolated they are: the farther a player is
from their closest rival, the better their rank.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

import pandas as pd

from ..utils.geometry import euclidean_distance, nearest_distances
from ..utils.logging import get_logger

logger = get_logger(__name__)


# Playing field, inclusive on both ends
COORD_MIN = 0.0
COORD_MAX = 50.0

# Slack when matching a recomputed distance against a stored one
DISTANCE_TOLERANCE = 1e-4


@dataclass
class Point:
    """A named player on the field."""
    name: str
    x: float
    y: float
    nearest_distance: float = 0.0
    rank: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'rank': self.rank,
            'name': self.name,
            'x': self.x,
            'y': self.y,
            'nearest_distance': self.nearest_distance,
        }


@dataclass(frozen=True)
class Standings:
    """
    One ranked dataset.

    Built once per load and handed to the renderers as a value;
    loading new data produces a new Standings rather than mutating this one.
    """
    points: Tuple[Point, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.points)

    @property
    def winner(self) -> Optional[Point]:
        return self.points[0] if self.points else None

    @property
    def nearest_to_winner(self) -> Optional[Tuple[Point, float]]:
        if self.winner is None:
            return None
        return nearest_to(self.winner, self.points)

    def to_dataframe(self) -> pd.DataFrame:
        records = [p.to_dict() for p in self.points]
        return pd.DataFrame(records, columns=['rank', 'name', 'x', 'y', 'nearest_distance'])


def _field(row: Mapping[str, Any], name: str) -> Any:
    """
    Look up a column by name, tolerating header case.

    'Name' beats 'name', which beats any other spelling ('NAME', 'nAmE').
    Blank and missing values count as absent.
    """
    candidates = [name.capitalize(), name.lower()]
    candidates += [k for k in row.keys() if isinstance(k, str) and k.lower() == name.lower()]

    for key in candidates:
        value = row.get(key)
        if value is None:
            continue
        if isinstance(value, float) and math.isnan(value):
            continue
        if isinstance(value, str) and not value.strip():
            continue
        return value
    return None


def _parse_coord(value: Any) -> Optional[float]:
    """Parse a coordinate; None if missing, non-numeric or off the field."""
    if value is None or isinstance(value, bool):
        return None
    try:
        coord = float(value)
    except (TypeError, ValueError):
        return None

    # NaN fails both comparisons
    if not (COORD_MIN <= coord <= COORD_MAX):
        return None
    return coord


def parse_points(raw_rows: Sequence[Mapping[str, Any]]) -> List[Point]:
    """
    Turn raw rows into Points, dropping any row without two valid coordinates.

    Default names use the row's position in the input, so dropped rows
    still consume a number.
    """
    points = []

    for index, row in enumerate(raw_rows):
        if not isinstance(row, Mapping):
            logger.debug(f"Dropping row {index + 1}: not a record ({row!r})")
            continue

        name = _field(row, 'name')
        x = _parse_coord(_field(row, 'x'))
        y = _parse_coord(_field(row, 'y'))

        if x is None or y is None:
            logger.debug(f"Dropping row {index + 1}: {dict(row)}")
            continue

        points.append(Point(
            name=str(name) if name is not None else f"Player {index + 1}",
            x=x,
            y=y,
        ))

    return points


def nearest_to(winner: Point, points: Sequence[Point]) -> Optional[Tuple[Point, float]]:
    """
    Find the player that sits at the winner's nearest-neighbour distance.

    Scans in list order and returns the first match together with the
    winner's stored distance. None when there is nobody else.
    """
    if len(points) < 2:
        return None

    for other in points:
        if other is winner:
            continue
        distance = euclidean_distance(winner.x, winner.y, other.x, other.y)
        if abs(distance - winner.nearest_distance) < DISTANCE_TOLERANCE:
            return other, winner.nearest_distance

    return None


def nearest_neighbor(point: Point, points: Sequence[Point]) -> Optional[Tuple[Point, float]]:
    """Closest other player to `point`; the first one wins on ties."""
    best = None
    best_distance = math.inf

    for other in points:
        if other is point:
            continue
        distance = euclidean_distance(point.x, point.y, other.x, other.y)
        if distance < best_distance:
            best, best_distance = other, distance

    if best is None:
        return None
    return best, best_distance


class NearestNeighborRanker:
    """
    Ranks players by distance to their nearest neighbour, descending.

    Rank 1 (the winner) is the most isolated player. Equal distances
    keep their input order.
    """

    def rank(self, raw_rows: Sequence[Mapping[str, Any]]) -> List[Point]:
        """
        Parse, score and rank a dataset.

        Args:
            raw_rows: Rows with name/x/y columns (any header case)

        Returns:
            Ranked points, best first. Empty if nothing survives parsing.
        """
        points = parse_points(raw_rows)
        dropped = len(raw_rows) - len(points)
        if dropped:
            logger.info(f"Dropped {dropped} of {len(raw_rows)} rows without a valid position")

        distances = nearest_distances([(p.x, p.y) for p in points])
        for point, distance in zip(points, distances):
            point.nearest_distance = float(distance)

        # list.sort is stable, reverse included
        points.sort(key=lambda p: p.nearest_distance, reverse=True)

        for i, point in enumerate(points):
            point.rank = i + 1

        if points:
            logger.info(
                f"Ranked {len(points)} players; winner {points[0].name} "
                f"({points[0].nearest_distance:.2f})"
            )

        return points

    def standings(self, raw_rows: Sequence[Mapping[str, Any]]) -> Standings:
        """Rank a dataset and wrap it for the renderers."""
        return Standings(points=tuple(self.rank(raw_rows)))
