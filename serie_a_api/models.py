from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


# -----------------------------
# Match (one fixture of a giornata)
# -----------------------------
@dataclass(frozen=True)
class Match:
    home: str
    away: str

    # None = not played yet
    home_score: Optional[int] = None
    away_score: Optional[int] = None

    round: Optional[int] = None

    @property
    def is_played(self) -> bool:
        return self.home_score is not None and self.away_score is not None


# -----------------------------
# Per-team table row
# -----------------------------
@dataclass
class TeamRow:
    team: str

    points: int = 0
    played: int = 0
    won: int = 0
    drawn: int = 0
    lost: int = 0

    goals_for: int = 0
    goals_against: int = 0
    goal_difference: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Renderer-facing field names."""
        return {
            "team": self.team,
            "points": self.points,
            "played": self.played,
            "won": self.won,
            "drawn": self.drawn,
            "lost": self.lost,
            "goalsFor": self.goals_for,
            "goalsAgainst": self.goals_against,
            "goalDifference": self.goal_difference,
        }


@dataclass(frozen=True)
class RankingEntry:
    stats: TeamRow
    position: int

    @property
    def team(self) -> str:
        return self.stats.team


# -----------------------------
# Season documents
# -----------------------------
@dataclass
class Round:
    number: int
    matches: List[Match] = field(default_factory=list)


@dataclass
class Season:
    season_id: str
    teams: List[str]
    rounds: List[Round] = field(default_factory=list)
    team_logos: Dict[str, str] = field(default_factory=dict)
    point_adjustments: Dict[str, int] = field(default_factory=dict)

    # table zones from config.json (key -> {name, description, positions, colors})
    positions: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    @property
    def matches(self) -> List[Match]:
        """All rounds flattened, calendar order."""
        return [m for r in self.rounds for m in r.matches]


@dataclass(frozen=True)
class SeasonSummary:
    year: str
    title: str
    url: str
    logo: str
    champion: Optional[str] = None
    is_current: bool = False
