"""
Hover state for the scatter chart.

The chart draws players in two datasets: dataset 0 holds everyone but
the winner (in rank order), dataset 1 holds the winner alone. Hover hits
arrive as (dataset, element) pairs and are mapped back to positions in
the ranked list.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

PLAYERS_DATASET = 0
WINNER_DATASET = 1


class HoverKind(Enum):
    NONE = "none"
    POINT = "point"


@dataclass(frozen=True)
class HoverState:
    kind: HoverKind = HoverKind.NONE
    index: Optional[int] = None

    @classmethod
    def none(cls) -> "HoverState":
        return cls()

    @classmethod
    def point(cls, index: int) -> "HoverState":
        return cls(HoverKind.POINT, index)


class HoverTracker:
    """Tracks which ranked player is under the cursor."""

    def __init__(self):
        self.state = HoverState.none()

    def update(self, dataset_index: Optional[int] = None, element_index: Optional[int] = None) -> bool:
        """
        Record a hover hit, or its absence.

        Returns:
            True if the hovered player changed and the chart needs a redraw
        """
        if dataset_index == PLAYERS_DATASET and element_index is not None:
            new_state = HoverState.point(element_index + 1)
        elif dataset_index == WINNER_DATASET:
            new_state = HoverState.point(0)
        else:
            new_state = HoverState.none()

        changed = new_state != self.state
        self.state = new_state
        return changed

    def reset(self) -> None:
        self.state = HoverState.none()

    @property
    def circle_index(self) -> Optional[int]:
        """Ranked index needing a hover circle; the winner's is always drawn anyway."""
        if self.state.kind is HoverKind.POINT and self.state.index != 0:
            return self.state.index
        return None
