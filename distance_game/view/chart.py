"""
Scatter Chart

Plots the field with the winner highlighted, every player labelled by
name, and dashed circles showing nearest-neighbour distances: always
for the winner, and for whichever other player is under the cursor.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import matplotlib.pyplot as plt
from matplotlib.backend_tools import Cursors
from matplotlib.patches import Circle

from ..ranking.ranker import COORD_MAX, COORD_MIN, Point, Standings, nearest_neighbor
from ..utils.logging import get_logger
from .hover import PLAYERS_DATASET, WINNER_DATASET, HoverKind, HoverTracker

logger = get_logger(__name__)


def _fmt_coord(value: float) -> str:
    return f"{value:g}"


def tooltip_lines(point: Point) -> List[str]:
    """Text shown when hovering a player."""
    return [
        point.name,
        f"Position: ({_fmt_coord(point.x)}, {_fmt_coord(point.y)})",
        f"Distance to nearest: {point.nearest_distance:.2f}",
    ]


class ScatterChart:
    """
    Draws Standings onto a matplotlib Axes.

    Holds the hover tracker for interactive use; the standings themselves
    are always passed in.
    """

    def __init__(self, config: Dict[str, Any]):
        self.config = config
        chart_config = config.get('chart', {})

        self.figsize = tuple(chart_config.get('figsize', (8.0, 8.0)))
        self.dpi = chart_config.get('dpi', 150)
        self.tick_step = chart_config.get('tick_step', 5.0)
        self.player_color = chart_config.get('player_color', '#818cf8')
        self.player_size = chart_config.get('player_size', 100.0)
        self.winner_color = chart_config.get('winner_color', '#ffd700')
        self.winner_size = chart_config.get('winner_size', 225.0)
        self.label_color = chart_config.get('label_color', '#1f2937')
        self.grid_alpha = chart_config.get('grid_alpha', 0.2)

        self.tracker = HoverTracker()
        self._standings: Optional[Standings] = None
        self._ax = None
        self._datasets: List[Any] = []
        self._tooltip = None

    def draw(self, standings: Standings, ax=None):
        """
        Render standings, replacing whatever the axes held.

        Returns:
            The matplotlib Figure
        """
        if ax is None:
            fig, ax = plt.subplots(figsize=self.figsize)
        else:
            fig = ax.figure
            ax.clear()

        self._standings = standings
        self._ax = ax
        self._setup_axes(ax)

        points = standings.points
        others = points[1:]

        players = ax.scatter(
            [p.x for p in others], [p.y for p in others],
            s=self.player_size, c=self.player_color,
            edgecolors=self.player_color, linewidths=2, alpha=0.8, zorder=3,
        )
        winner = ax.scatter(
            [p.x for p in points[:1]], [p.y for p in points[:1]],
            s=self.winner_size, c=self.winner_color,
            edgecolors=self.winner_color, linewidths=3, alpha=0.9, zorder=4,
        )
        self._datasets = [players, winner]

        for point in points:
            ax.annotate(
                point.name, (point.x, point.y),
                xytext=(0, 12), textcoords='offset points',
                ha='center', va='bottom',
                fontsize=9, fontweight='bold', color=self.label_color,
            )

        if standings.winner is not None:
            ax.set_title(f"Winner: {standings.winner.name}")
            self._draw_circle(ax, 0, is_winner=True)

        index = self.tracker.circle_index
        if index is not None and index < len(points):
            self._draw_circle(ax, index, is_winner=False)

        self._tooltip = ax.annotate(
            "", xy=(0, 0), xytext=(15, 15), textcoords='offset points',
            bbox=dict(boxstyle='round', fc='white', alpha=0.9),
            fontsize=9, zorder=10, visible=False,
        )
        self._update_tooltip()

        return fig

    def _setup_axes(self, ax) -> None:
        ticks = [COORD_MIN + i * self.tick_step
                 for i in range(int((COORD_MAX - COORD_MIN) / self.tick_step) + 1)]
        ax.set_xlim(COORD_MIN, COORD_MAX)
        ax.set_ylim(COORD_MIN, COORD_MAX)
        ax.set_xticks(ticks)
        ax.set_yticks(ticks)
        ax.set_aspect('equal')
        ax.grid(True, alpha=self.grid_alpha)

    def _draw_circle(self, ax, index: int, is_winner: bool) -> None:
        """Dashed circle through a player's nearest neighbour."""
        points = self._standings.points
        player = points[index]
        found = nearest_neighbor(player, points)
        if found is None:
            return
        _, radius = found

        color = self.winner_color if is_winner else self.player_color
        ax.add_patch(Circle(
            (player.x, player.y), radius,
            fill=False, edgecolor=color,
            linewidth=3 if is_winner else 2,
            linestyle=(0, (5, 5)) if is_winner else (0, (3, 3)),
            alpha=0.8 if is_winner else 0.6,
            zorder=2,
        ))
        ax.annotate(
            f"Distance to nearest: {radius:.1f}",
            (player.x, player.y - radius),
            xytext=(0, -20 if is_winner else -15), textcoords='offset points',
            ha='center', va='top', color=color,
            fontsize=11 if is_winner else 9, fontweight='bold',
        )

    def _update_tooltip(self) -> None:
        state = self.tracker.state
        if self._tooltip is None:
            return
        if state.kind is HoverKind.POINT and state.index < len(self._standings.points):
            point = self._standings.points[state.index]
            self._tooltip.xy = (point.x, point.y)
            self._tooltip.set_text("\n".join(tooltip_lines(point)))
            self._tooltip.set_visible(True)
        else:
            self._tooltip.set_visible(False)

    def hit_test(self, event) -> Tuple[Optional[int], Optional[int]]:
        """Map a mouse event to (dataset, element), or (None, None)."""
        if self._ax is None or event.inaxes is not self._ax:
            return None, None

        for dataset_index in (PLAYERS_DATASET, WINNER_DATASET):
            contains, info = self._datasets[dataset_index].contains(event)
            if contains and len(info.get('ind', [])):
                return dataset_index, int(info['ind'][0])

        return None, None

    def on_motion(self, event) -> None:
        dataset_index, element_index = self.hit_test(event)
        changed = self.tracker.update(dataset_index, element_index)

        canvas = self._ax.figure.canvas
        canvas.set_cursor(Cursors.HAND if dataset_index is not None else Cursors.POINTER)

        if changed:
            self.draw(self._standings, self._ax)
            canvas.draw_idle()

    def connect(self, fig) -> int:
        """Wire hover handling into an interactive figure."""
        return fig.canvas.mpl_connect('motion_notify_event', self.on_motion)

    def save(self, standings: Standings, path: str) -> Path:
        """Render standings to an image file."""
        output_path = Path(path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        self.tracker.reset()
        fig = self.draw(standings)
        fig.savefig(output_path, dpi=self.dpi, bbox_inches='tight')
        plt.close(fig)

        logger.info(f"Saved chart: {output_path}")
        return output_path

    def show(self, standings: Standings) -> None:
        """Open an interactive window with hover overlays."""
        self.tracker.reset()
        fig = self.draw(standings)
        self.connect(fig)
        plt.show()
