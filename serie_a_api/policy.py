# serie_a_api/policy.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Literal

HeadToHeadMode = Literal["grouped", "pairwise", "off"]


@dataclass(frozen=True)
class TieBreakPolicy:
    """
    Which optional criteria of the tie-break chain are active.

    Chain (fixed order, optional steps in brackets):
      points desc -> [played asc] -> goal difference desc -> goals for desc
      -> [goals against asc] -> head-to-head -> team name

    head_to_head:
      - "grouped" : mini-table among every team sharing points (and played,
                    when played_ascending is on), computed once per group
      - "pairwise": mini-table between the two teams being compared
      - "off"     : skip straight to the name fallback
    """
    played_ascending: bool = False
    goals_against_ascending: bool = False
    head_to_head: HeadToHeadMode = "grouped"
    h2h_goals_against: bool = False

    def __post_init__(self) -> None:
        if self.head_to_head not in ("grouped", "pairwise", "off"):
            raise ValueError(f"Invalid head_to_head mode: {self.head_to_head}")


POLICY_PRESETS: Dict[str, TieBreakPolicy] = {
    "classic": TieBreakPolicy(),
    # season page revision: fewer games played ranks better on equal points
    "season-page": TieBreakPolicy(played_ascending=True),
    "pairwise": TieBreakPolicy(head_to_head="pairwise"),
    "strict": TieBreakPolicy(goals_against_ascending=True, h2h_goals_against=True),
}

DEFAULT_POLICY = POLICY_PRESETS["classic"]


def get_policy(name: str) -> TieBreakPolicy:
    key = (name or "").strip().lower()
    if key not in POLICY_PRESETS:
        raise ValueError(f"Unknown standings policy: {name!r} (expected one of {sorted(POLICY_PRESETS)})")
    return POLICY_PRESETS[key]
