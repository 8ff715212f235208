# serie_a_api/season_data.py
"""
Loading of the site's JSON documents.

Documents (paths/URLs built from config templates):
  - seasons index : {"seasons": [{"year", "title", "url", "logo", "champion"}]}
  - season data   : {"teams": [...], "teamLogos": {...}, "calendar": [
                        {"giornata": 1, "partite": [
                            {"home", "away", "homeScore", "awayScore"}]}],
                     "pointAdjustments": {"Bologna": -2}}   (optional)
  - season config : {"positions": {"scudetto": {"name", "description",
                        "positions": [1], "backgroundColor", "borderColor"}}}

Failures are split on purpose for the API:
  - SeasonNotFoundError: document does not exist (local file missing / HTTP 404)
  - SeasonDataError    : fetch failed, bad JSON, or wrong document shape
"""
from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Optional

import requests

from serie_a_api import cache
from serie_a_api.config import (
    DATA_ROOT,
    HTTP_TIMEOUT_SECONDS,
    SEASON_CACHE_TTL_SECONDS,
    SEASON_CONFIG_TEMPLATE,
    SEASON_DATA_TEMPLATE,
    SEASONS_INDEX_TEMPLATE,
)
from serie_a_api.models import Match, Round, Season

logger = logging.getLogger(__name__)

_SEASON_ID_RE = re.compile(r"^[A-Za-z0-9_-]+$")


class SeasonDataError(Exception):
    """Raised when a season document cannot be fetched or parsed."""
    pass


class SeasonNotFoundError(SeasonDataError):
    """Raised when the requested document does not exist."""
    pass


def validate_season_id(season_id: str) -> str:
    s = (season_id or "").strip()
    if not _SEASON_ID_RE.fullmatch(s):
        raise ValueError(f"Invalid season id: {season_id!r}")
    return s


def _is_remote(location: str) -> bool:
    return location.lower().startswith(("http://", "https://"))


def load_json(location: str) -> Any:
    """Read a JSON document from a local path or an http(s) URL."""
    if _is_remote(location):
        try:
            r = requests.get(
                location,
                timeout=HTTP_TIMEOUT_SECONDS,
                headers={"Accept": "application/json"},
            )
        except requests.RequestException as e:
            raise SeasonDataError(f"Fetch failed for {location}: {e}") from e

        if r.status_code == 404:
            raise SeasonNotFoundError(f"Not found: {location}")
        try:
            r.raise_for_status()
        except requests.HTTPError as e:
            raise SeasonDataError(f"HTTP {r.status_code} for {location}") from e

        text = r.text
    else:
        path = Path(location)
        if not path.is_file():
            raise SeasonNotFoundError(f"Not found: {location}")
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise SeasonDataError(f"Cannot read {location}: {e}") from e

    try:
        return json.loads(text)
    except ValueError as e:
        raise SeasonDataError(f"Invalid JSON in {location}: {e}") from e


def _cached_json(namespace: str, location: str, use_cache: bool) -> Any:
    if use_cache:
        cached = cache.get_document(location)
        if cached is not None:
            return cached

    logger.info("Loading %s document from %s", namespace, location)
    try:
        doc = load_json(location)
    except SeasonDataError as e:
        logger.warning("Loading %s failed: %s", location, e)
        raise

    if use_cache:
        cache.put_document(location, doc, SEASON_CACHE_TTL_SECONDS)
    return doc


def parse_score(x: Any) -> Optional[int]:
    """
    Lenient score parsing. Anything that is not a non-negative integer
    (None, "", "-", "nan", negative, 1.5) means "not played".
    """
    if x is None or isinstance(x, bool):
        return None
    if isinstance(x, int):
        return x if x >= 0 else None
    if isinstance(x, float):
        return int(x) if x.is_integer() and x >= 0 else None

    sx = str(x).strip()
    if not re.fullmatch(r"[0-9]+", sx):
        return None
    return int(sx)


def _parse_round(raw: Any, index: int) -> Round:
    if not isinstance(raw, dict):
        raise SeasonDataError(f"calendar[{index}] must be an object")

    try:
        number = int(raw.get("giornata", index + 1))
    except (TypeError, ValueError) as e:
        raise SeasonDataError(f"calendar[{index}].giornata is not a number") from e

    partite = raw.get("partite")
    if partite is None:
        partite = []
    if not isinstance(partite, list):
        raise SeasonDataError(f"calendar[{index}].partite must be a list")

    matches: List[Match] = []
    for p in partite:
        if not isinstance(p, dict):
            raise SeasonDataError(f"calendar[{index}] contains a match that is not an object")
        matches.append(
            Match(
                home=str(p.get("home") or "").strip(),
                away=str(p.get("away") or "").strip(),
                home_score=parse_score(p.get("homeScore")),
                away_score=parse_score(p.get("awayScore")),
                round=number,
            )
        )
    return Round(number=number, matches=matches)


def _parse_adjustments(raw: Any) -> Dict[str, int]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise SeasonDataError("pointAdjustments must be an object of team -> points")
    out: Dict[str, int] = {}
    for team, delta in raw.items():
        try:
            out[str(team)] = int(delta)
        except (TypeError, ValueError) as e:
            raise SeasonDataError(f"pointAdjustments[{team!r}] is not an integer") from e
    return out


def parse_season(season_id: str, data: Any, config: Any = None) -> Season:
    """Season data.json (+ optional config.json) -> Season."""
    if not isinstance(data, dict):
        raise SeasonDataError("Season data must be a JSON object")

    teams = data.get("teams")
    if not isinstance(teams, list):
        raise SeasonDataError("Season data has no `teams` list")

    calendar = data.get("calendar")
    if calendar is None:
        calendar = []
    if not isinstance(calendar, list):
        raise SeasonDataError("Season `calendar` must be a list")

    logos = data.get("teamLogos")
    if logos is None:
        logos = {}
    if not isinstance(logos, dict):
        raise SeasonDataError("Season `teamLogos` must be an object")

    positions: Dict[str, Dict[str, Any]] = {}
    if config is not None:
        if not isinstance(config, dict):
            raise SeasonDataError("Season config must be a JSON object")
        positions = config.get("positions")
        if positions is None:
            positions = {}
        if not isinstance(positions, dict):
            raise SeasonDataError("Season config `positions` must be an object")

    return Season(
        season_id=season_id,
        teams=[str(t).strip() for t in teams if str(t).strip()],
        rounds=[_parse_round(r, i) for i, r in enumerate(calendar)],
        team_logos={str(k): str(v) for k, v in logos.items()},
        point_adjustments=_parse_adjustments(data.get("pointAdjustments")),
        positions=positions,
    )


def load_season(season_id: str, *, use_cache: bool = True) -> Season:
    season_id = validate_season_id(season_id)

    data_loc = SEASON_DATA_TEMPLATE.format(data_root=DATA_ROOT, season=season_id)
    config_loc = SEASON_CONFIG_TEMPLATE.format(data_root=DATA_ROOT, season=season_id)

    data = _cached_json("season-data", data_loc, use_cache)

    # config.json only drives table zones; a season without one still has a table
    try:
        config = _cached_json("season-config", config_loc, use_cache)
    except SeasonNotFoundError:
        config = None

    return parse_season(season_id, data, config)


def load_seasons_index(*, use_cache: bool = True) -> List[Dict[str, Any]]:
    location = SEASONS_INDEX_TEMPLATE.format(data_root=DATA_ROOT)
    doc = _cached_json("seasons-index", location, use_cache)

    if not isinstance(doc, dict) or not isinstance(doc.get("seasons"), list):
        raise SeasonDataError("Seasons index must be an object with a `seasons` list")
    return doc["seasons"]
