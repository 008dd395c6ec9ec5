from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Sequence, TypeVar

from .config import ACTIVE_DEFENSE, ACTIVE_FORWARDS, EVENT_BASE_WEIGHTS, NEUTRAL_GOALTENDING
from .models import PlayerSnapshot, TeamSnapshot
from .skills import line_strength, skill_for

T = TypeVar("T")


@dataclass(slots=True)
class ActiveLines:
    forwards: list[PlayerSnapshot]
    defense: list[PlayerSnapshot]
    goalie: PlayerSnapshot | None

    @property
    def skaters(self) -> list[PlayerSnapshot]:
        return self.forwards + self.defense


def active_lines(team: TeamSnapshot) -> ActiveLines:
    # On-ice group is taken straight from roster order, no line matching.
    goalies = team.goalies()
    return ActiveLines(
        forwards=team.forwards()[:ACTIVE_FORWARDS],
        defense=team.defense()[:ACTIVE_DEFENSE],
        goalie=goalies[0] if goalies else None,
    )


def goaltending_for(goalie: PlayerSnapshot | None) -> float:
    if goalie is None:
        return NEUTRAL_GOALTENDING
    return skill_for(goalie, "goaltending")


def attacking_strength(lines: ActiveLines) -> float:
    return line_strength(lines.forwards, "offense")


def event_weights(attacking_skill: float, defending_skill: float) -> list[tuple[str, float]]:
    differential = attacking_skill - defending_skill
    return [
        (category, max(0.0, base + differential * share))
        for category, base, share in EVENT_BASE_WEIGHTS
    ]


def weighted_choice(choices: Sequence[tuple[T, float]], rng: random.Random) -> T:
    if not choices:
        raise ValueError("No choices available for weighted selection.")
    total = sum(max(0.0, weight) for _item, weight in choices)
    remainder = rng.random() * total
    for item, weight in choices:
        if weight <= 0:
            continue
        remainder -= weight
        if remainder <= 0:
            return item
    # Float drift can leave a sliver past the last candidate.
    return choices[-1][0]


def select_event_category(attacking_skill: float, defending_skill: float, rng: random.Random) -> str:
    return weighted_choice(event_weights(attacking_skill, defending_skill), rng)
