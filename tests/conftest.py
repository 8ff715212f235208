"""Common pytest fixtures.

Fixtures:
    - ``clear_cache``: autouse; empties the in-memory document cache.
    - ``season_docs``: minimal season data/config/index documents.
    - ``data_root``: writes ``season_docs`` under ``tmp_path`` in the site
      layout and points the loader at it.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

import pytest

from serie_a_api import cache
from serie_a_api import season_data

SEASON_ID = "2024-2025"


@pytest.fixture(autouse=True)
def clear_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def season_docs() -> Dict[str, Any]:
    data = {
        "teams": ["Bologna", "Inter", "Juventus", "Milan"],
        "teamLogos": {"Inter": "img/inter.png", "Milan": "img/milan.png"},
        "pointAdjustments": {"Bologna": -2},
        "calendar": [
            {
                "giornata": 1,
                "partite": [
                    {"home": "Inter", "away": "Milan", "homeScore": 2, "awayScore": 1},
                    {"home": "Bologna", "away": "Juventus", "homeScore": 1, "awayScore": 1},
                ],
            },
            {
                "giornata": 2,
                "partite": [
                    {"home": "Milan", "away": "Bologna", "homeScore": "0", "awayScore": 3},
                    {"home": "Juventus", "away": "Inter", "homeScore": None, "awayScore": None},
                ],
            },
        ],
    }
    config = {
        "positions": {
            "scudetto": {
                "name": "Scudetto",
                "description": "Campione d'Italia",
                "positions": [1],
                "backgroundColor": "#ffd700",
                "borderColor": "#b8860b",
            },
            "champions": {
                "name": "Champions League",
                "description": "Qualificazione UCL",
                "positions": [1, 2],
                "backgroundColor": "#1e90ff",
                "borderColor": "#104e8b",
            },
            "retrocessione": {
                "name": "Retrocessione",
                "description": "Serie B",
                "positions": [4],
                "backgroundColor": "#ff0000",
                "borderColor": "#8b0000",
            },
        }
    }
    index = {
        "seasons": [
            {"year": "2023-2024", "title": "Serie A 2023/24", "url": "2023-2024/index.html",
             "logo": "img/2023.png", "champion": "Inter"},
            {"year": "2024-2025", "title": "Serie A 2024/25", "url": "2024-2025/index.html",
             "logo": "img/2024.png", "champion": ""},
        ]
    }
    return {"data": data, "config": config, "index": index}


def _write(path: Path, doc: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(doc), encoding="utf-8")


@pytest.fixture
def data_root(tmp_path: Path, season_docs: Dict[str, Any], monkeypatch) -> Path:
    _write(tmp_path / SEASON_ID / "JSON" / "data.json", season_docs["data"])
    _write(tmp_path / SEASON_ID / "JSON" / "config.json", season_docs["config"])
    _write(tmp_path / "JS" / "seasons-data.json", season_docs["index"])
    monkeypatch.setattr(season_data, "DATA_ROOT", str(tmp_path))
    return tmp_path
