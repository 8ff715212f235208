# serie_a_api/seasons.py
from __future__ import annotations

import re
from typing import Any, Dict, Iterable, List, Optional

from serie_a_api.models import SeasonSummary


def start_year(year: Any) -> Optional[int]:
    """'2024-2025' -> 2024, '2023' -> 2023, garbage -> None"""
    m = re.match(r"^\s*(\d{4})", str(year or ""))
    return int(m.group(1)) if m else None


def _champion(raw: Any) -> Optional[str]:
    if raw is None:
        return None
    s = str(raw).strip()
    return s or None


def order_seasons(seasons: Iterable[Dict[str, Any]]) -> List[SeasonSummary]:
    """
    Most recent season first (by starting year; unparseable years last).
    The most recent season is "current" while it has no champion yet.
    """
    items = list(seasons)
    # stable: same start year keeps file order
    items.sort(key=lambda s: (start_year(s.get("year")) is None, -(start_year(s.get("year")) or 0)))

    out: List[SeasonSummary] = []
    for idx, s in enumerate(items):
        champion = _champion(s.get("champion"))
        out.append(
            SeasonSummary(
                year=str(s.get("year") or ""),
                title=str(s.get("title") or ""),
                url=str(s.get("url") or ""),
                logo=str(s.get("logo") or ""),
                champion=champion,
                is_current=(idx == 0 and champion is None),
            )
        )
    return out
