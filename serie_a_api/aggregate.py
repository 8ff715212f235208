# serie_a_api/aggregate.py
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Mapping, Optional

from serie_a_api.models import Match, TeamRow

logger = logging.getLogger(__name__)

POINTS_WIN = 3
POINTS_DRAW = 1


def make_table(teams: Iterable[str]) -> Dict[str, TeamRow]:
    """Convenience helper: team -> zeroed TeamRow (roster order kept, duplicates dropped)"""
    table: Dict[str, TeamRow] = {}
    for team in teams:
        if team not in table:
            table[team] = TeamRow(team=team)
    return table


def counted_matches(teams: Iterable[str], matches: Iterable[Match]) -> List[Match]:
    """
    Matches that count for a table over `teams`:
    both sides in the roster, two different teams AND both scores present.
    """
    roster = set(teams)
    return [
        m for m in matches
        if m.home in roster and m.away in roster and m.home != m.away and m.is_played
    ]


def apply_result(home: TeamRow, away: TeamRow, home_score: int, away_score: int) -> None:
    """
    Updates played/won/drawn/lost/points and goals for ONE played match.
    goal_difference is NOT touched here (derived once, after accumulation).

    Rules:
    - home_score > away_score: home +3, home won, away lost
    - home_score < away_score: away +3, away won, home lost
    - equal                  : both +1, both drawn
    """
    home.played += 1
    away.played += 1

    home.goals_for += home_score
    home.goals_against += away_score
    away.goals_for += away_score
    away.goals_against += home_score

    if home_score > away_score:
        home.points += POINTS_WIN
        home.won += 1
        away.lost += 1
    elif home_score < away_score:
        away.points += POINTS_WIN
        away.won += 1
        home.lost += 1
    else:
        home.points += POINTS_DRAW
        away.points += POINTS_DRAW
        home.drawn += 1
        away.drawn += 1


def apply_point_adjustments(table: Dict[str, TeamRow], adjustments: Optional[Mapping[str, int]]) -> None:
    """Administrative penalties/bonuses. Names not in the table are ignored."""
    for team, delta in (adjustments or {}).items():
        row = table.get(team)
        if row is None:
            logger.debug("Point adjustment for unknown team %r ignored", team)
            continue
        row.points += int(delta)


def finalize(table: Dict[str, TeamRow]) -> None:
    for row in table.values():
        row.goal_difference = row.goals_for - row.goals_against


def compute_team_stats(
    teams: Iterable[str],
    matches: Iterable[Match],
    point_adjustments: Optional[Mapping[str, int]] = None,
) -> Dict[str, TeamRow]:
    """
    Fresh stats for every roster team (teams with no games get an all-zero row).

    Matches with a team outside the roster, or with a missing score on
    either side, are skipped.
    """
    table = make_table(teams)
    matches = list(matches)
    counted = counted_matches(table.keys(), matches)

    for m in counted:
        apply_result(table[m.home], table[m.away], int(m.home_score), int(m.away_score))

    apply_point_adjustments(table, point_adjustments)
    finalize(table)

    logger.debug(
        "Aggregated %d teams: %d matches counted, %d skipped",
        len(table), len(counted), len(matches) - len(counted),
    )
    return table
