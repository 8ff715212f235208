"""Loading and parsing of the season JSON documents."""

from __future__ import annotations

import json

import pytest
import requests

from serie_a_api import season_data
from serie_a_api.season_data import (
    SeasonDataError,
    SeasonNotFoundError,
    load_json,
    load_season,
    load_seasons_index,
    parse_score,
    parse_season,
    validate_season_id,
)

SEASON_ID = "2024-2025"


@pytest.mark.parametrize(
    "raw, expected",
    [
        (2, 2),
        (0, 0),
        ("3", 3),
        (" 1 ", 1),
        (2.0, 2),
        (None, None),
        ("", None),
        ("-", None),
        ("nan", None),
        (-1, None),
        (1.5, None),
        (True, None),
    ],
)
def test_parse_score(raw, expected):
    assert parse_score(raw) == expected


def test_load_season_from_local_folder(data_root):
    season = load_season(SEASON_ID)

    assert season.season_id == SEASON_ID
    assert season.teams == ["Bologna", "Inter", "Juventus", "Milan"]
    assert [r.number for r in season.rounds] == [1, 2]
    assert len(season.matches) == 4
    assert season.point_adjustments == {"Bologna": -2}
    assert list(season.positions) == ["scudetto", "champions", "retrocessione"]

    milan_bologna = season.rounds[1].matches[0]
    assert (milan_bologna.home_score, milan_bologna.away_score) == (0, 3)
    assert milan_bologna.round == 2
    assert not season.rounds[1].matches[1].is_played


def test_missing_season_is_not_found(data_root):
    with pytest.raises(SeasonNotFoundError):
        load_season("1999-2000")


def test_missing_config_still_loads(data_root):
    (data_root / SEASON_ID / "JSON" / "config.json").unlink()
    season = load_season(SEASON_ID)
    assert season.positions == {}


def test_invalid_json_is_a_data_error_not_not_found(data_root):
    (data_root / SEASON_ID / "JSON" / "data.json").write_text("{ broken", encoding="utf-8")

    with pytest.raises(SeasonDataError) as exc:
        load_season(SEASON_ID, use_cache=False)
    assert not isinstance(exc.value, SeasonNotFoundError)


def test_loaded_documents_are_cached(data_root):
    load_season(SEASON_ID)
    (data_root / SEASON_ID / "JSON" / "data.json").write_text("{ broken", encoding="utf-8")

    assert load_season(SEASON_ID).teams == ["Bologna", "Inter", "Juventus", "Milan"]
    with pytest.raises(SeasonDataError):
        load_season(SEASON_ID, use_cache=False)


@pytest.mark.parametrize("season_id", ["../etc", "2024/2025", "", "a b"])
def test_season_id_is_validated(season_id):
    with pytest.raises(ValueError):
        validate_season_id(season_id)


@pytest.mark.parametrize(
    "data",
    [
        [],
        {"calendar": []},
        {"teams": ["Inter"], "calendar": {"giornata": 1}},
        {"teams": ["Inter"], "calendar": [{"giornata": "prima", "partite": []}]},
        {"teams": ["Inter"], "calendar": [{"giornata": 1, "partite": ["Inter-Milan"]}]},
        {"teams": ["Inter"], "pointAdjustments": {"Inter": "meno due"}},
        {"teams": ["Inter"], "teamLogos": ["inter.png"]},
    ],
)
def test_wrong_document_shape_is_a_data_error(data):
    with pytest.raises(SeasonDataError):
        parse_season(SEASON_ID, data)


def test_empty_season_parses_to_no_matches():
    season = parse_season(SEASON_ID, {"teams": ["Inter", "Milan"]})
    assert season.matches == []
    assert season.point_adjustments == {}


def test_seasons_index(data_root):
    seasons = load_seasons_index()
    assert [s["year"] for s in seasons] == ["2023-2024", "2024-2025"]


def test_seasons_index_wrong_shape(data_root):
    (data_root / "JS" / "seasons-data.json").write_text(json.dumps({"items": []}), encoding="utf-8")
    with pytest.raises(SeasonDataError):
        load_seasons_index(use_cache=False)


class _FakeResponse:
    def __init__(self, status_code: int, text: str = "") -> None:
        self.status_code = status_code
        self.text = text

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"HTTP {self.status_code}")


def test_remote_documents(monkeypatch):
    responses = {
        "https://example.org/ok.json": _FakeResponse(200, '{"teams": []}'),
        "https://example.org/missing.json": _FakeResponse(404),
        "https://example.org/down.json": _FakeResponse(503),
    }

    def fake_get(url, **kwargs):
        if url == "https://example.org/offline.json":
            raise requests.ConnectionError("no route to host")
        return responses[url]

    monkeypatch.setattr(season_data.requests, "get", fake_get)

    assert load_json("https://example.org/ok.json") == {"teams": []}
    with pytest.raises(SeasonNotFoundError):
        load_json("https://example.org/missing.json")
    with pytest.raises(SeasonDataError):
        load_json("https://example.org/down.json")
    with pytest.raises(SeasonDataError):
        load_json("https://example.org/offline.json")
