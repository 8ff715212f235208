# serie_a_api/points_table.py
from __future__ import annotations

import logging
import unicodedata
from functools import cmp_to_key
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple

from serie_a_api.aggregate import compute_team_stats, counted_matches
from serie_a_api.head_to_head import H2HKey, head_to_head_keys
from serie_a_api.models import Match, RankingEntry, TeamRow
from serie_a_api.policy import DEFAULT_POLICY, TieBreakPolicy
from serie_a_api.zones import zone_for_position

logger = logging.getLogger(__name__)

Comparator = Callable[[TeamRow, TeamRow], int]


def _cmp(x: Any, y: Any) -> int:
    return (x > y) - (x < y)


def _name_key(team: str) -> Tuple[str, str, str]:
    # accents folded first (Città sorts as Citta); raw name keeps distinct names distinct
    folded = unicodedata.normalize("NFKD", team).encode("ascii", "ignore").decode("ascii")
    return (folded.casefold(), team.casefold(), team)


def _numeric_key(row: TeamRow, policy: TieBreakPolicy) -> Tuple[int, ...]:
    """Numeric part of the chain; smaller ranks higher."""
    key: Tuple[int, ...] = (-row.points,)
    if policy.played_ascending:
        key += (row.played,)
    key += (-row.goal_difference, -row.goals_for)
    if policy.goals_against_ascending:
        key += (row.goals_against,)
    return key


def _tie_key(row: TeamRow, policy: TieBreakPolicy) -> Tuple[int, ...]:
    """Teams sharing this key form one head-to-head group (grouped mode)."""
    if policy.played_ascending:
        return (row.points, row.played)
    return (row.points,)


def _make_comparator(rows: List[TeamRow], matches: List[Match], policy: TieBreakPolicy) -> Comparator:
    """
    Builds the tie-break chain for ONE ranking run.

    Head-to-head mini-tables are only built when two rows collide on every
    numeric criterion, and are dropped together with the comparator.
    """
    groups: Dict[Tuple[int, ...], List[str]] = {}
    for r in rows:
        groups.setdefault(_tie_key(r, policy), []).append(r.team)

    group_keys: Dict[Tuple[int, ...], Dict[str, H2HKey]] = {}
    include_ga = policy.h2h_goals_against

    def grouped_h2h(a: TeamRow, b: TeamRow) -> int:
        tk = _tie_key(a, policy)
        if tk not in group_keys:
            group_keys[tk] = head_to_head_keys(groups[tk], matches, include_goals_against=include_ga)
            logger.debug("Head-to-head group %s resolved for %s", groups[tk], tk)
        keys = group_keys[tk]
        if a.team not in keys or b.team not in keys:
            return 0
        return _cmp(keys[a.team], keys[b.team])

    def pairwise_h2h(a: TeamRow, b: TeamRow) -> int:
        keys = head_to_head_keys([a.team, b.team], matches, include_goals_against=include_ga)
        if not keys:
            return 0
        return _cmp(keys[a.team], keys[b.team])

    def compare(a: TeamRow, b: TeamRow) -> int:
        c = _cmp(_numeric_key(a, policy), _numeric_key(b, policy))
        if c:
            return c

        if policy.head_to_head == "grouped":
            c = grouped_h2h(a, b)
        elif policy.head_to_head == "pairwise":
            c = pairwise_h2h(a, b)
        if c:
            return c

        return _cmp(_name_key(a.team), _name_key(b.team))

    return compare


def sort_rows(rows: Iterable[TeamRow], matches: Iterable[Match], policy: TieBreakPolicy = DEFAULT_POLICY) -> List[TeamRow]:
    """
    Strict total order over already-aggregated rows:
    1) Points (desc)
    2) Played (asc)            - policy.played_ascending
    3) Goal difference (desc)
    4) Goals for (desc)
    5) Goals against (asc)     - policy.goals_against_ascending
    6) Head-to-head            - policy.head_to_head
    7) Team name (asc)
    """
    # name order first: pairwise head-to-head can be intransitive, the
    # result must not depend on roster order
    rows = sorted(rows, key=lambda r: _name_key(r.team))
    matches = counted_matches([r.team for r in rows], matches)
    return sorted(rows, key=cmp_to_key(_make_comparator(rows, matches, policy)))


def rank_teams(
    teams: Iterable[str],
    matches: Iterable[Match],
    point_adjustments: Optional[Mapping[str, int]] = None,
    policy: TieBreakPolicy = DEFAULT_POLICY,
) -> List[RankingEntry]:
    """
    (teams, matches, point_adjustments, policy) -> ordered ranking.

    Pure: nothing is kept between calls.
    """
    matches = list(matches)
    table = compute_team_stats(teams, matches, point_adjustments)
    ranked = sort_rows(table.values(), matches, policy)
    return [RankingEntry(stats=row, position=pos) for pos, row in enumerate(ranked, start=1)]


def compute_sorted_table(
    teams: Iterable[str],
    matches: Iterable[Match],
    point_adjustments: Optional[Mapping[str, int]] = None,
    policy: TieBreakPolicy = DEFAULT_POLICY,
    *,
    positions: Optional[Mapping[str, Mapping[str, Any]]] = None,
    team_logos: Optional[Mapping[str, str]] = None,
) -> List[dict]:
    """
    Ranking as plain dict rows for the front end.
    Adds `zone` when table zones are given and `logo` when a logo map is given.
    """
    out: List[dict] = []
    for entry in rank_teams(teams, matches, point_adjustments, policy):
        row: Dict[str, Any] = {"pos": entry.position}
        row.update(entry.stats.to_dict())
        if positions is not None:
            row["zone"] = zone_for_position(positions, entry.position)
        if team_logos is not None:
            row["logo"] = team_logos.get(entry.team)
        out.append(row)
    return out
