# serie_a_api/head_to_head.py
from __future__ import annotations

from typing import Dict, Iterable, List, Sequence, Tuple

from serie_a_api.aggregate import apply_result, counted_matches, finalize, make_table
from serie_a_api.models import Match, TeamRow

H2HKey = Tuple[int, ...]


def head_to_head_table(tied_teams: Iterable[str], matches: Iterable[Match]) -> Dict[str, TeamRow]:
    """
    Mini-table built ONLY from played matches between members of `tied_teams`.
    Same outcome rules as the full table.
    """
    table = make_table(tied_teams)
    for m in counted_matches(table.keys(), matches):
        apply_result(table[m.home], table[m.away], int(m.home_score), int(m.away_score))
    finalize(table)
    return table


def _key(row: TeamRow, include_goals_against: bool) -> H2HKey:
    # smaller is better
    key: H2HKey = (-row.points, -row.goal_difference, -row.goals_for)
    if include_goals_against:
        key += (row.goals_against,)
    return key


def head_to_head_keys(
    tied_teams: Sequence[str],
    matches: Iterable[Match],
    *,
    include_goals_against: bool = False,
) -> Dict[str, H2HKey]:
    """
    Per-team sort key inside the tied group (smaller ranks higher).

    Returns {} when head-to-head cannot say anything:
    - fewer than 2 teams
    - no played match among the group
    Teams with equal keys are still tied; the caller falls back to names.
    """
    if len(set(tied_teams)) < 2:
        return {}

    matches = list(matches)
    if not counted_matches(tied_teams, matches):
        return {}

    table = head_to_head_table(tied_teams, matches)
    return {team: _key(row, include_goals_against) for team, row in table.items()}


def resolve_head_to_head(
    tied_teams: Sequence[str],
    matches: Iterable[Match],
    *,
    include_goals_against: bool = False,
) -> List[str]:
    """
    Order a group of teams equal on every earlier criterion by their
    results against each other:
    1) h2h points (desc)
    2) h2h goal difference (desc)
    3) h2h goals for (desc)
    4) h2h goals against (asc) - only if include_goals_against
    Teams still level keep the order they were given in.
    """
    group = list(tied_teams)
    keys = head_to_head_keys(group, matches, include_goals_against=include_goals_against)
    if not keys:
        return group
    return sorted(group, key=lambda team: keys[team])
