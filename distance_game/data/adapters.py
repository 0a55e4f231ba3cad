"""
Data Adapters

Load player rows from the built-in sample or a CSV file.
Rows come back as plain dicts of strings; deciding which rows are
valid players is left to the ranker.
"""

import io
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd

from ..utils.logging import get_logger

logger = get_logger(__name__)


# Copy-paste friendly: the same layout a spreadsheet export produces
SAMPLE_DATA_CSV = """Name,X,Y
Amumu,45,47
Bard,5,8
Chogath,25,25
Diana,2,48
Ezreal,48,3
Fizz,15,35
Gangplank,38,12"""


class DataLoadError(ValueError):
    """Raised when a whole data source cannot be read."""


def read_rows(source: Any, label: str) -> List[Dict[str, Any]]:
    """
    Parse CSV with a header row into row dicts.
    
    Args:
        source: Path or file-like object accepted by pandas
        label: Human-readable source name for messages
        
    Returns:
        One dict per data row, values kept as strings
    """
    try:
        df = pd.read_csv(
            source,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            skipinitialspace=True,
        )
    except FileNotFoundError as e:
        raise DataLoadError(f"No CSV file found at {label}") from e
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as e:
        raise DataLoadError(f"Error parsing {label}: {e}") from e
    
    df.columns = df.columns.str.strip()
    rows = df.to_dict('records')
    
    logger.info(f"Loaded {len(rows)} rows from {label}")
    return rows


class DataAdapter(ABC):
    """Base class for player data sources."""
    
    def __init__(self, config: Dict[str, Any]):
        self.config = config
    
    @abstractmethod
    def load(self, *args, **kwargs) -> List[Dict[str, Any]]:
        """Return the raw rows of one dataset."""
        pass


class InlineAdapter(DataAdapter):
    """Adapter for CSV text held in memory (the sample dataset by default)."""
    
    def load(self, text: Optional[str] = None) -> List[Dict[str, Any]]:
        if text is None:
            text = self.config.get('inline_csv') or SAMPLE_DATA_CSV
        logger.debug("Parsing inline CSV data")
        return read_rows(io.StringIO(text), "inline CSV")


class CSVAdapter(DataAdapter):
    """Adapter for loading CSV files."""
    
    def load(self, path: Optional[str] = None) -> List[Dict[str, Any]]:
        path = path or self.config.get('path')
        if not path:
            raise DataLoadError("No CSV path given")
        
        csv_path = Path(path)
        if not csv_path.is_file():
            raise DataLoadError(f"No CSV file found at {csv_path}")
        
        return read_rows(csv_path, str(csv_path))


class UniversalAdapter(DataAdapter):
    """Picks the adapter named by the configured source."""
    
    def __init__(self, config: Dict[str, Any]):
        super().__init__(config)
        self.adapters = {
            'inline': InlineAdapter(config),
            'csv': CSVAdapter(config),
        }
    
    def load(self, source: Optional[str] = None, path: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        Load rows from the named source.
        
        A path implies the csv source when no source is given.
        """
        if source is None:
            source = 'csv' if path else self.config.get('source', 'inline')
        
        adapter = self.adapters.get(source)
        if adapter is None:
            raise ValueError(
                f"Unknown data source '{source}'. Choose from: {', '.join(self.adapters)}"
            )
        
        if source == 'csv':
            return adapter.load(path)
        return adapter.load()
