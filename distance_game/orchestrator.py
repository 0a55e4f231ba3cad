"""
Distance Game Orchestrator

Coordinates loading, ranking and rendering of one dataset at a time.
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence

from .config import DistanceGameConfig
from .data.adapters import UniversalAdapter
from .ranking.ranker import NearestNeighborRanker, Standings
from .reporting.generator import GameReport, ReportGenerator
from .view.chart import ScatterChart
from .view.table import format_table
from .utils.logging import get_logger

logger = get_logger(__name__)


class DistanceGame:
    """
    Main orchestrator for the Distance Game.

    Pipeline:
    1. Data loading
    2. Nearest-neighbour ranking
    3. Table, chart and report rendering

    Each load replaces the current standings wholesale.
    """

    def __init__(self, config: DistanceGameConfig = None, config_dict: Dict[str, Any] = None):
        """
        Initialize the orchestrator.

        Args:
            config: DistanceGameConfig object
            config_dict: Alternative config as dictionary
        """
        if config is not None:
            self.config = config
            self._config_dict = config.to_dict()
        elif config_dict is not None:
            self._config_dict = config_dict
            self.config = None
        else:
            self.config = DistanceGameConfig()
            self._config_dict = self.config.to_dict()

        self.data_adapter = UniversalAdapter(self._config_dict.get('data', {}))
        self.ranker = NearestNeighborRanker()
        self.chart = ScatterChart(self._config_dict)
        self.report_generator = ReportGenerator(self._config_dict, chart=self.chart)

        self.standings: Optional[Standings] = None
        self.data_source: Optional[str] = None

    def load_rows(self, rows: Sequence[Mapping[str, Any]], data_source: str = 'rows') -> Standings:
        """Rank raw rows and make them the current standings."""
        self.standings = self.ranker.standings(rows)
        self.data_source = data_source
        return self.standings

    def load(self, source: Optional[str] = None, path: Optional[str] = None) -> Standings:
        """
        Load and rank a dataset from the configured (or given) source.

        Raises:
            DataLoadError: If the source cannot be read; current standings are kept
        """
        rows: List[Dict[str, Any]] = self.data_adapter.load(source=source, path=path)
        label = path or source or self._config_dict.get('data', {}).get('source', 'inline')
        return self.load_rows(rows, data_source=str(label))

    def load_inline(self, text: Optional[str] = None) -> Standings:
        """Load the built-in sample, or the given CSV text."""
        rows = self.data_adapter.adapters['inline'].load(text)
        return self.load_rows(rows, data_source='inline')

    def load_csv(self, path: str) -> Standings:
        return self.load(source='csv', path=path)

    def _require(self, standings: Optional[Standings]) -> Standings:
        if standings is None:
            standings = self.standings
        if standings is None:
            raise RuntimeError("No data loaded. Call load() first.")
        return standings

    def render_table(self, standings: Optional[Standings] = None) -> str:
        return format_table(self._require(standings))

    def render_chart(
        self,
        path: Optional[str] = None,
        show: bool = False,
        standings: Optional[Standings] = None
    ):
        """Save the chart to `path`, open it interactively, or both."""
        standings = self._require(standings)
        saved = self.chart.save(standings, path) if path else None
        if show:
            self.chart.show(standings)
        return saved

    def generate_report(self, standings: Optional[Standings] = None) -> GameReport:
        standings = self._require(standings)
        return self.report_generator.generate_report(
            standings, data_source=self.data_source or 'rows'
        )
