"""
Report Generator

Writes a finished game to disk as HTML, JSON and CSV, with the
scatter chart alongside.
"""

import html
import json
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from ..ranking.ranker import Standings
from ..view.chart import ScatterChart
from ..view.table import standings_table
from ..utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class GameReport:
    """Complete game report."""

    # Metadata
    report_id: str
    generated_at: datetime
    data_source: str
    output_dir: Path

    standings: Standings

    # Files written, keyed by format
    files: Dict[str, Path] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        winner = self.standings.winner
        rival = self.standings.nearest_to_winner
        return {
            'report_id': self.report_id,
            'generated_at': self.generated_at.isoformat(),
            'data_source': self.data_source,
            'n_players': len(self.standings),
            'winner': winner.to_dict() if winner else None,
            'nearest_rival': {
                'name': rival[0].name,
                'distance': rival[1],
            } if rival else None,
            'players': [p.to_dict() for p in self.standings.points],
        }


class ReportGenerator:
    """
    Generates game reports.

    Reports include:
    1. Summary (player count, winner, nearest rival)
    2. Ranked table
    3. Scatter chart
    """

    def __init__(self, config: Dict[str, Any], chart: Optional[ScatterChart] = None):
        """
        Initialize the report generator.

        Args:
            config: Configuration dictionary
            chart: Chart renderer; built from config when omitted
        """
        self.config = config
        report_config = config.get('report', {})

        self.output_dir = Path(report_config.get('output_dir', 'game_reports'))
        self.include_chart = report_config.get('include_chart', True)
        self.formats = report_config.get('formats', ['html', 'json', 'csv'])
        self.chart = chart or ScatterChart(config)

    def generate_report(
        self,
        standings: Standings,
        data_source: str = 'inline',
        report_id: Optional[str] = None,
    ) -> GameReport:
        """
        Generate a complete game report.

        Args:
            standings: Ranked dataset
            data_source: Where the rows came from, for the record
            report_id: Directory name; microsecond timestamp by default

        Returns:
            GameReport listing the files written
        """
        logger.info("Generating game report...")

        if report_id is None:
            report_id = self._unique_report_id(datetime.now().strftime('%Y%m%d_%H%M%S_%f'))
        report_dir = self.output_dir / report_id
        report_dir.mkdir(parents=True, exist_ok=True)

        report = GameReport(
            report_id=report_id,
            generated_at=datetime.now(),
            data_source=data_source,
            output_dir=report_dir,
            standings=standings,
        )

        self._save_report(report, report_dir)

        logger.info(f"Report generated: {report_dir}")

        return report

    def _unique_report_id(self, base: str) -> str:
        """Suffix a counter until the id names a directory not yet written."""
        report_id = base
        counter = 1
        while (self.output_dir / report_id).exists():
            report_id = f"{base}_{counter}"
            counter += 1
        return report_id

    def _save_report(self, report: GameReport, output_dir: Path):
        """Save report in requested formats."""

        if self.include_chart:
            report.files['png'] = self.chart.save(report.standings, str(output_dir / 'chart.png'))

        if 'json' in self.formats:
            json_path = output_dir / 'report.json'
            with open(json_path, 'w') as f:
                json.dump(report.to_dict(), f, indent=2, default=str)
            report.files['json'] = json_path
            logger.info(f"Saved JSON report: {json_path}")

        if 'csv' in self.formats:
            csv_path = output_dir / 'standings.csv'
            standings_table(report.standings).to_csv(csv_path, index=False)
            report.files['csv'] = csv_path
            logger.info(f"Saved CSV report: {csv_path}")

        if 'html' in self.formats:
            html_path = output_dir / 'report.html'
            self._generate_html_report(report, html_path)
            report.files['html'] = html_path
            logger.info(f"Saved HTML report: {html_path}")

    def _generate_html_report(self, report: GameReport, output_path: Path):
        """Generate HTML report."""

        html_template = """
<!DOCTYPE html>
<html>
<head>
    <title>Distance Game - {report_id}</title>
    <style>
        body {{ font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; margin: 40px; background: #f5f5f5; }}
        .container {{ max-width: 1000px; margin: 0 auto; background: white; padding: 40px; border-radius: 8px; box-shadow: 0 2px 4px rgba(0,0,0,0.1); }}
        h1 {{ color: #1a1a1a; border-bottom: 3px solid #818cf8; padding-bottom: 10px; }}
        h2 {{ color: #374151; margin-top: 40px; }}
        .summary {{ display: grid; grid-template-columns: repeat(4, 1fr); gap: 20px; margin: 20px 0; }}
        .stat-card {{ background: #f8fafc; padding: 20px; border-radius: 8px; text-align: center; }}
        .stat-value {{ font-size: 28px; font-weight: bold; color: #4f46e5; }}
        .stat-label {{ color: #6b7280; margin-top: 5px; }}
        table {{ width: 100%; border-collapse: collapse; margin: 20px 0; }}
        th, td {{ padding: 12px; text-align: left; border-bottom: 1px solid #e5e7eb; }}
        th {{ background: #f8fafc; font-weight: 600; }}
        tr:hover {{ background: #f8fafc; }}
        tr.winner {{ background: #fef9c3; }}
        img {{ max-width: 100%; }}
    </style>
</head>
<body>
    <div class="container">
        <h1>Distance Game</h1>
        <p><strong>Report ID:</strong> {report_id} | <strong>Generated:</strong> {generated_at} | <strong>Data:</strong> {data_source}</p>

        <h2>Summary</h2>
        <div class="summary">
            <div class="stat-card">
                <div class="stat-value">{n_players}</div>
                <div class="stat-label">Players</div>
            </div>
            <div class="stat-card">
                <div class="stat-value">{winner}</div>
                <div class="stat-label">Winner</div>
            </div>
            <div class="stat-card">
                <div class="stat-value">{winner_distance}</div>
                <div class="stat-label">Distance to Nearest</div>
            </div>
            <div class="stat-card">
                <div class="stat-value">{rival}</div>
                <div class="stat-label">Nearest Rival</div>
            </div>
        </div>

        {chart}

        <h2>Rankings</h2>
        <table>
            <thead>
                <tr>
                    <th>Rank</th>
                    <th>Name</th>
                    <th>X</th>
                    <th>Y</th>
                    <th>Distance to Nearest</th>
                </tr>
            </thead>
            <tbody>
                {rows}
            </tbody>
        </table>

        <footer style="margin-top: 40px; color: #6b7280; font-size: 14px;">
            Generated by Distance Game
        </footer>
    </div>
</body>
</html>
"""

        rows = ""
        for point in report.standings.points:
            row_class = ' class="winner"' if point.rank == 1 else ''
            rows += f"""
                <tr{row_class}>
                    <td>{point.rank}</td>
                    <td>{html.escape(point.name)}</td>
                    <td>{point.x:g}</td>
                    <td>{point.y:g}</td>
                    <td>{point.nearest_distance:.2f}</td>
                </tr>
            """

        winner = report.standings.winner
        rival = report.standings.nearest_to_winner

        chart = ""
        if 'png' in report.files:
            chart = f'<h2>Field</h2>\n        <img src="{report.files["png"].name}" alt="Scatter chart">'

        page = html_template.format(
            report_id=html.escape(report.report_id),
            generated_at=report.generated_at.strftime('%Y-%m-%d %H:%M:%S'),
            data_source=html.escape(report.data_source),
            n_players=len(report.standings),
            winner=html.escape(winner.name) if winner else 'N/A',
            winner_distance=f"{winner.nearest_distance:.2f}" if winner else 'N/A',
            rival=html.escape(rival[0].name) if rival else 'N/A',
            chart=chart,
            rows=rows or '<tr><td colspan="5">No players</td></tr>',
        )

        with open(output_path, 'w') as f:
            f.write(page)
