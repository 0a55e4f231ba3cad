import matplotlib

matplotlib.use("Agg")

import pytest

from distance_game.ranking.ranker import NearestNeighborRanker
from distance_game.utils.logging import setup_logging


@pytest.fixture(autouse=True)
def fresh_logging():
    # Rebind the handler to this test's stdout
    setup_logging()


@pytest.fixture
def ranker():
    return NearestNeighborRanker()


@pytest.fixture
def abc_rows():
    return [
        {'Name': 'A', 'X': '0', 'Y': '0'},
        {'Name': 'B', 'X': '10', 'Y': '0'},
        {'Name': 'C', 'X': '10', 'Y': '1'},
    ]


@pytest.fixture
def sample_standings(ranker):
    from distance_game.data.adapters import InlineAdapter
    return ranker.standings(InlineAdapter({}).load())


@pytest.fixture
def players_csv(tmp_path):
    path = tmp_path / "players.csv"
    path.write_text("name,x,y\nNorth,25,50\nSouth,25,0\nMiddle,25,20\n")
    return path
