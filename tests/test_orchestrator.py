import pytest

from distance_game import DistanceGame, DistanceGameConfig
from distance_game.data.adapters import DataLoadError


def test_load_default_sample():
    game = DistanceGame()
    standings = game.load()

    assert len(standings) == 7
    assert game.standings is standings
    assert game.data_source == 'inline'


def test_load_csv(players_csv):
    game = DistanceGame()
    standings = game.load_csv(str(players_csv))

    assert [p.name for p in standings.points] == ['North', 'South', 'Middle']
    assert game.data_source == str(players_csv)


def test_reload_replaces_standings(players_csv):
    game = DistanceGame()
    first = game.load()
    second = game.load_csv(str(players_csv))

    assert game.standings is second
    assert len(first) == 7
    assert len(second) == 3


def test_failed_load_keeps_previous(tmp_path):
    game = DistanceGame()
    first = game.load()

    with pytest.raises(DataLoadError):
        game.load_csv(str(tmp_path / 'missing.csv'))
    assert game.standings is first


def test_load_inline_text():
    game = DistanceGame()
    standings = game.load_inline("Name,X,Y\nOne,1,1\nTwo,2,2\n")
    assert len(standings) == 2


def test_load_rows():
    standings = DistanceGame().load_rows([{'name': 'a', 'x': 1, 'y': 1}])
    assert standings.winner.name == 'a'


def test_render_before_load():
    with pytest.raises(RuntimeError):
        DistanceGame().render_table()


def test_render_table_for_empty_standings():
    game = DistanceGame()
    game.load_rows([])
    assert game.render_table() == "No players."


def test_config_dict_source(players_csv):
    game = DistanceGame(config_dict={'data': {'source': 'csv', 'path': str(players_csv)}})
    assert len(game.load()) == 3


def test_render_chart_and_report(tmp_path):
    config = DistanceGameConfig()
    config.report.output_dir = str(tmp_path / 'reports')
    config.chart.dpi = 50

    game = DistanceGame(config=config)
    game.load()

    path = game.render_chart(path=str(tmp_path / 'field.png'))
    assert path.exists()

    report = game.generate_report()
    assert report.output_dir.parent == tmp_path / 'reports'
    assert report.files['html'].exists()
