# serie_a_api/export.py
from __future__ import annotations

from typing import Dict, List

import pandas as pd

# table row key -> column header shown on the season page
COLUMNS: Dict[str, str] = {
    "pos": "Pos.",
    "team": "Squadra",
    "points": "Pt",
    "played": "G",
    "won": "V",
    "drawn": "N",
    "lost": "P",
    "goalsFor": "GF",
    "goalsAgainst": "GS",
    "goalDifference": "DR",
}


def standings_frame(rows: List[dict]) -> pd.DataFrame:
    """compute_sorted_table() rows -> DataFrame with the site's column headers"""
    df = pd.DataFrame(rows, columns=list(COLUMNS.keys()))
    return df.rename(columns=COLUMNS)


def standings_csv(rows: List[dict]) -> str:
    return standings_frame(rows).to_csv(index=False)
