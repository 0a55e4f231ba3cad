"""
Ranked table of players.
"""

import pandas as pd

from ..ranking.ranker import Standings

TABLE_COLUMNS = ['Rank', 'Name', 'X', 'Y', 'Nearest Distance']


def standings_table(standings: Standings) -> pd.DataFrame:
    """One row per player in rank order."""
    df = standings.to_dataframe()
    df.columns = TABLE_COLUMNS
    return df


def format_table(standings: Standings) -> str:
    """Plain-text table with distances to two decimals."""
    if len(standings) == 0:
        return "No players."

    df = standings_table(standings)
    return df.to_string(
        index=False,
        formatters={
            'X': lambda v: f"{v:g}",
            'Y': lambda v: f"{v:g}",
            'Nearest Distance': lambda v: f"{v:.2f}",
        },
    )
