import json

import pandas as pd

from distance_game.ranking.ranker import Standings
from distance_game.reporting.generator import ReportGenerator


def _config(tmp_path, **report):
    report.setdefault('output_dir', str(tmp_path))
    return {'report': report, 'chart': {'dpi': 50}}


def test_full_report(tmp_path, sample_standings):
    generator = ReportGenerator(_config(tmp_path))
    report = generator.generate_report(sample_standings, data_source='inline', report_id='run1')

    report_dir = tmp_path / 'run1'
    assert report.output_dir == report_dir
    for name in ['chart.png', 'report.json', 'standings.csv', 'report.html']:
        assert (report_dir / name).exists()
    assert set(report.files) == {'png', 'json', 'csv', 'html'}


def test_json_contents(tmp_path, sample_standings):
    ReportGenerator(_config(tmp_path)).generate_report(sample_standings, report_id='run')
    data = json.loads((tmp_path / 'run' / 'report.json').read_text())

    assert data['n_players'] == 7
    assert data['winner']['name'] == 'Amumu'
    assert data['winner']['rank'] == 1
    assert data['nearest_rival']['name'] == 'Chogath'
    assert [p['rank'] for p in data['players']] == list(range(1, 8))


def test_csv_contents(tmp_path, sample_standings):
    ReportGenerator(_config(tmp_path)).generate_report(sample_standings, report_id='run')
    df = pd.read_csv(tmp_path / 'run' / 'standings.csv')

    assert list(df.columns) == ['Rank', 'Name', 'X', 'Y', 'Nearest Distance']
    assert df['Name'].tolist()[0] == 'Amumu'


def test_html_contents(tmp_path, sample_standings):
    ReportGenerator(_config(tmp_path)).generate_report(sample_standings, report_id='run')
    page = (tmp_path / 'run' / 'report.html').read_text()

    assert 'Amumu' in page
    assert 'Chogath' in page
    assert 'chart.png' in page
    assert '29.73' in page


def test_html_escapes_names(tmp_path, ranker):
    standings = ranker.standings([{'Name': '<b>Bold</b>', 'X': '1', 'Y': '1'}])
    ReportGenerator(_config(tmp_path, formats=['html'])).generate_report(standings, report_id='run')
    page = (tmp_path / 'run' / 'report.html').read_text()

    assert '&lt;b&gt;Bold&lt;/b&gt;' in page
    assert '<b>Bold</b>' not in page


def test_default_report_ids_do_not_collide(tmp_path, sample_standings):
    generator = ReportGenerator(_config(tmp_path, formats=['json'], include_chart=False))
    first = generator.generate_report(sample_standings)
    second = generator.generate_report(sample_standings)

    assert first.output_dir != second.output_dir
    assert first.files['json'].exists()
    assert second.files['json'].exists()


def test_taken_report_id_gets_counter(tmp_path):
    (tmp_path / '20260101_000000_000000').mkdir()
    (tmp_path / '20260101_000000_000000_1').mkdir()

    generator = ReportGenerator(_config(tmp_path))
    assert generator._unique_report_id('20260101_000000_000000') == '20260101_000000_000000_2'
    assert generator._unique_report_id('fresh') == 'fresh'


def test_html_escapes_report_id(tmp_path, sample_standings):
    generator = ReportGenerator(_config(tmp_path, formats=['html'], include_chart=False))
    report = generator.generate_report(sample_standings, report_id='a&b')
    page = report.files['html'].read_text()

    assert 'Distance Game - a&amp;b' in page
    assert 'a&b' not in page


def test_selected_formats_only(tmp_path, sample_standings):
    generator = ReportGenerator(_config(tmp_path, formats=['json'], include_chart=False))
    report = generator.generate_report(sample_standings, report_id='run')

    assert set(report.files) == {'json'}
    assert not (tmp_path / 'run' / 'chart.png').exists()
    assert not (tmp_path / 'run' / 'report.html').exists()


def test_empty_standings_report(tmp_path):
    report = ReportGenerator(_config(tmp_path)).generate_report(Standings(), report_id='empty')
    data = json.loads(report.files['json'].read_text())

    assert data['n_players'] == 0
    assert data['winner'] is None
    assert data['nearest_rival'] is None
    assert 'No players' in report.files['html'].read_text()
