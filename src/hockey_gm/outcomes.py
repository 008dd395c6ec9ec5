from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Sequence, TypeVar

from .config import (
    GOAL_PROBABILITY_BASE,
    GOAL_PROBABILITY_CEILING,
    GOAL_PROBABILITY_FLOOR,
    GOAL_PROBABILITY_SCALE,
    PENALTY_MINUTES,
    PRIMARY_ASSIST_CHANCE,
    SECONDARY_ASSIST_CHANCE,
    ZONES,
)
from .models import PlayerSnapshot, TeamSnapshot
from .selection import goaltending_for
from .skills import skill_for

T = TypeVar("T")


@dataclass(slots=True, frozen=True)
class ShotOutcome:
    category: str
    probability: float

    @property
    def is_goal(self) -> bool:
        return self.category == "goal"


def goal_probability(shooter_skill: float, goalie_skill: float) -> float:
    raw = (shooter_skill - goalie_skill) / GOAL_PROBABILITY_SCALE + GOAL_PROBABILITY_BASE
    return max(GOAL_PROBABILITY_FLOOR, min(GOAL_PROBABILITY_CEILING, raw))


def resolve_shot(
    shooter: PlayerSnapshot,
    goaltender: PlayerSnapshot | None,
    rng: random.Random,
) -> ShotOutcome:
    probability = goal_probability(skill_for(shooter, "offense"), goaltending_for(goaltender))
    category = "goal" if rng.random() < probability else "save"
    return ShotOutcome(category=category, probability=probability)


def pick_uniform(items: Sequence[T], rng: random.Random) -> T:
    if not items:
        raise ValueError("No items available for uniform selection.")
    idx = min(len(items) - 1, int(rng.random() * len(items)))
    return items[idx]


def assign_assists(
    scorer: PlayerSnapshot,
    candidates: Sequence[PlayerSnapshot],
    rng: random.Random,
) -> tuple[PlayerSnapshot, ...]:
    pool: list[PlayerSnapshot] = []
    seen = {scorer.player_id}
    for player in candidates:
        if player.player_id in seen:
            continue
        seen.add(player.player_id)
        pool.append(player)

    # Roughly three goals in ten go in unassisted.
    if not pool or rng.random() >= PRIMARY_ASSIST_CHANCE:
        return ()
    primary = pick_uniform(pool, rng)
    remaining = [p for p in pool if p.player_id != primary.player_id]
    if not remaining or rng.random() >= SECONDARY_ASSIST_CHANCE:
        return (primary,)
    secondary = pick_uniform(remaining, rng)
    return (primary, secondary)


def pick_zone(rng: random.Random) -> str:
    return pick_uniform(ZONES, rng)


def describe_event(
    category: str,
    attacking: TeamSnapshot,
    defending: TeamSnapshot,
    player: PlayerSnapshot | None = None,
    assists: Sequence[PlayerSnapshot] = (),
    zone: str | None = None,
) -> str:
    player_name = player.name if player is not None else "Unknown"
    goalies = defending.goalies()
    goalie_name = goalies[0].name if goalies else "Goalie"

    if category == "goal":
        text = f"⚡ GOAL! {attacking.name} scores - {player_name}"
        if len(assists) >= 1:
            text += f" assisted by {assists[0].name}"
        if len(assists) >= 2:
            text += f" and {assists[1].name}"
        return text
    if category == "shot":
        return f"{attacking.name} shot on goal by {player_name} - Save by {goalie_name}"
    if category == "save":
        return f"Great save by {goalie_name} ({defending.name})"
    if category == "turnover":
        return f"{defending.name} forces turnover in {zone or ZONES[1]}"
    if category == "faceoff":
        return f"{attacking.name} wins faceoff in {zone or ZONES[1]}"
    if category == "penalty":
        return f"{attacking.name} penalty - {player_name} ({PENALTY_MINUTES} min)"
    if category == "hit":
        return f"{attacking.name} delivers hit - {player_name}"
    return f"{attacking.name} {category}"
