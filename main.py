# main.py (Serie A archive)
from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field

from serie_a_api.config import LOG_LEVEL, STANDINGS_POLICY, validate_config
from serie_a_api.export import standings_csv
from serie_a_api.models import Match, Season
from serie_a_api.points_table import compute_sorted_table
from serie_a_api.policy import TieBreakPolicy, get_policy
from serie_a_api.season_data import (
    SeasonDataError,
    SeasonNotFoundError,
    load_season,
    load_seasons_index,
    parse_score,
)
from serie_a_api.seasons import order_seasons
from serie_a_api.zones import legend

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

# -----------------------
# App
# -----------------------
app = FastAPI(
    title="Serie A Archive API",
    version="0.1.0",
    description="Seasons index, match calendars and standings with configurable tie-breaks",
)


@app.on_event("startup")
def on_startup():
    validate_config()
    logger.info("Serie A archive API started (default policy=%s)", STANDINGS_POLICY)


@app.get("/health")
def health_check():
    return {"status": "ok", "time": datetime.utcnow().isoformat() + "Z"}


# -----------------------
# Helpers
# -----------------------
def _resolve_policy(name: Optional[str]) -> TieBreakPolicy:
    try:
        return get_policy(name or STANDINGS_POLICY)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


def _load_season_or_http(season_id: str) -> Season:
    try:
        return load_season(season_id)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except SeasonNotFoundError as e:
        raise HTTPException(status_code=404, detail=f"Unknown season {season_id}: {e}")
    except SeasonDataError as e:
        raise HTTPException(status_code=502, detail=f"Unable to load season {season_id}: {e}")


def _season_table(season: Season, policy: TieBreakPolicy) -> List[dict]:
    return compute_sorted_table(
        season.teams,
        season.matches,
        season.point_adjustments,
        policy,
        positions=season.positions,
        team_logos=season.team_logos,
    )


def _match_out(m: Match) -> Dict[str, Any]:
    return {
        "home": m.home,
        "away": m.away,
        "homeScore": m.home_score,
        "awayScore": m.away_score,
        "played": m.is_played,
    }


# -----------------------
# Seasons index
# -----------------------
@app.get("/api/seasons")
def list_seasons():
    try:
        raw = load_seasons_index()
    except SeasonNotFoundError as e:
        raise HTTPException(status_code=404, detail=f"Seasons index not found: {e}")
    except SeasonDataError as e:
        raise HTTPException(status_code=502, detail=f"Unable to load seasons index: {e}")

    seasons = order_seasons(raw)
    return {
        "count": len(seasons),
        "seasons": [
            {
                "year": s.year,
                "title": s.title,
                "url": s.url,
                "logo": s.logo,
                "champion": s.champion,
                "current": s.is_current,
            }
            for s in seasons
        ],
    }


# -----------------------
# Season calendar
# -----------------------
@app.get("/api/seasons/{season_id}")
def get_season(season_id: str):
    season = _load_season_or_http(season_id)
    return {
        "season": season.season_id,
        "teams": season.teams,
        "teamLogos": season.team_logos,
        "rounds": [
            {"giornata": r.number, "matches": [_match_out(m) for m in r.matches]}
            for r in season.rounds
        ],
    }


# -----------------------
# Season standings
# -----------------------
@app.get("/api/seasons/{season_id}/standings")
def get_season_standings(season_id: str, policy: Optional[str] = None):
    pol = _resolve_policy(policy)
    season = _load_season_or_http(season_id)

    table = _season_table(season, pol)
    resp: Dict[str, Any] = {
        "season": season.season_id,
        "policy": policy or STANDINGS_POLICY,
        "table": table,
        "legend": legend(season.positions),
        "pointAdjustments": season.point_adjustments,
    }
    if not any(m.is_played for m in season.matches):
        resp["note"] = "No match played yet: table is pre-season."
    return resp


@app.get("/api/seasons/{season_id}/standings.csv", response_class=PlainTextResponse)
def get_season_standings_csv(season_id: str, policy: Optional[str] = None):
    pol = _resolve_policy(policy)
    season = _load_season_or_http(season_id)
    return PlainTextResponse(standings_csv(_season_table(season, pol)), media_type="text/csv")


# -----------------------
# Standings on caller data
# -----------------------
class MatchIn(BaseModel):
    home: str
    away: str
    homeScore: Optional[Any] = Field(None, description="null = not played yet")
    awayScore: Optional[Any] = Field(None, description="null = not played yet")
    giornata: Optional[int] = None


class StandingsRequest(BaseModel):
    teams: List[str] = Field(default_factory=list)
    matches: List[MatchIn] = Field(default_factory=list)
    pointAdjustments: Dict[str, int] = Field(default_factory=dict, description="e.g. {\"Bologna\": -2}")
    policy: Optional[str] = Field(None, description="classic / season-page / pairwise / strict")


@app.post("/api/standings")
def compute_standings(req: StandingsRequest):
    pol = _resolve_policy(req.policy)
    matches = [
        Match(
            home=m.home.strip(),
            away=m.away.strip(),
            home_score=parse_score(m.homeScore),
            away_score=parse_score(m.awayScore),
            round=m.giornata,
        )
        for m in req.matches
    ]
    teams = [t.strip() for t in req.teams if t.strip()]

    return {
        "policy": req.policy or STANDINGS_POLICY,
        "teams_count": len(teams),
        "matches_count": len(matches),
        "table": compute_sorted_table(teams, matches, req.pointAdjustments, pol),
    }
