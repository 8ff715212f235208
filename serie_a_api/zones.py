# serie_a_api/zones.py
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional


def zone_for_position(positions: Mapping[str, Mapping[str, Any]], pos: int) -> Optional[str]:
    """
    First configured zone (config.json `positions`, in file order) whose
    `positions` list contains `pos`. None if the position has no zone.
    """
    for key, zone in positions.items():
        if pos in (zone.get("positions") or []):
            return key
    return None


def legend(positions: Mapping[str, Mapping[str, Any]]) -> List[Dict[str, Any]]:
    out: List[Dict[str, Any]] = []
    for key, zone in positions.items():
        out.append({
            "key": key,
            "name": zone.get("name", key),
            "description": zone.get("description", ""),
            "positions": list(zone.get("positions") or []),
            "backgroundColor": zone.get("backgroundColor"),
            "borderColor": zone.get("borderColor"),
        })
    return out
