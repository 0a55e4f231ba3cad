import matplotlib.pyplot as plt
import pytest
from matplotlib.backend_bases import MouseEvent
from matplotlib.patches import Circle

from distance_game.ranking.ranker import Point, Standings
from distance_game.view.chart import ScatterChart, tooltip_lines
from distance_game.view.hover import HoverKind, HoverState, HoverTracker
from distance_game.view.table import format_table, standings_table


def _circles(ax):
    return [p for p in ax.patches if isinstance(p, Circle)]


def test_hover_starts_empty():
    tracker = HoverTracker()
    assert tracker.state == HoverState.none()
    assert tracker.state.kind is HoverKind.NONE
    assert tracker.circle_index is None


def test_hover_regular_player_offsets_past_winner():
    tracker = HoverTracker()

    assert tracker.update(0, 2) is True
    assert tracker.state == HoverState.point(3)
    assert tracker.circle_index == 3


def test_hover_winner_has_no_extra_circle():
    tracker = HoverTracker()

    tracker.update(1, 0)
    assert tracker.state == HoverState.point(0)
    assert tracker.circle_index is None


def test_hover_change_detection():
    tracker = HoverTracker()

    assert tracker.update(0, 0) is True
    assert tracker.update(0, 0) is False
    assert tracker.update() is True
    assert tracker.state.kind is HoverKind.NONE
    assert tracker.update() is False


def test_tooltip_lines():
    point = Point('Amumu', 45.0, 47.0, nearest_distance=29.7321, rank=1)

    assert tooltip_lines(point) == [
        'Amumu',
        'Position: (45, 47)',
        'Distance to nearest: 29.73',
    ]


def test_table_columns(sample_standings):
    df = standings_table(sample_standings)

    assert list(df.columns) == ['Rank', 'Name', 'X', 'Y', 'Nearest Distance']
    assert df['Rank'].tolist() == list(range(1, 8))


def test_format_table(sample_standings):
    text = format_table(sample_standings)
    lines = text.splitlines()

    assert 'Nearest Distance' in lines[0]
    assert 'Amumu' in lines[1]
    assert '29.73' in lines[1]


def test_format_empty_table():
    assert format_table(Standings()) == "No players."


def test_draw_sample(sample_standings):
    chart = ScatterChart({})
    fig = chart.draw(sample_standings)
    ax = fig.axes[0]

    assert ax.get_title() == 'Winner: Amumu'
    assert ax.get_xlim() == (0.0, 50.0)
    assert ax.get_ylim() == (0.0, 50.0)
    assert len(_circles(ax)) == 1
    assert _circles(ax)[0].get_radius() == pytest.approx(sample_standings.winner.nearest_distance)
    plt.close(fig)


def test_draw_with_hover_adds_circle(sample_standings):
    chart = ScatterChart({})
    chart.tracker.update(0, 0)
    fig = chart.draw(sample_standings)

    circles = _circles(fig.axes[0])
    assert len(circles) == 2
    bard = sample_standings.points[1]
    assert circles[1].center == (bard.x, bard.y)
    plt.close(fig)


def test_draw_single_point_has_no_circle():
    standings = Standings(points=(Point('Solo', 10.0, 10.0, 0.0, 1),))
    fig = ScatterChart({}).draw(standings)

    assert _circles(fig.axes[0]) == []
    plt.close(fig)


def test_mouse_hover_redraws(sample_standings):
    chart = ScatterChart({})
    fig = chart.draw(sample_standings)
    ax = fig.axes[0]
    fig.canvas.draw()

    bard = sample_standings.points[1]
    x, y = ax.transData.transform((bard.x, bard.y))
    chart.on_motion(MouseEvent('motion_notify_event', fig.canvas, x, y))

    assert chart.tracker.state == HoverState.point(1)
    assert len(_circles(ax)) == 2

    x, y = ax.transData.transform((30.0, 3.0))
    chart.on_motion(MouseEvent('motion_notify_event', fig.canvas, x, y))

    assert chart.tracker.state.kind is HoverKind.NONE
    assert len(_circles(ax)) == 1
    plt.close(fig)


def test_save_chart(tmp_path, sample_standings):
    path = ScatterChart({'chart': {'dpi': 50}}).save(sample_standings, str(tmp_path / "out" / "chart.png"))

    assert path.exists()
    assert path.stat().st_size > 0


def test_save_empty_chart(tmp_path):
    path = ScatterChart({}).save(Standings(), str(tmp_path / "empty.png"))
    assert path.exists()
