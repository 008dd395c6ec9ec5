from __future__ import annotations

from typing import Iterable

from .models import PlayerSnapshot

SKILL_CATEGORIES = ("offense", "defense", "goaltending")

_SKILL_RATINGS: dict[str, tuple[str, ...]] = {
    "offense": ("skating", "shooting", "passing", "hockey_sense"),
    "defense": ("skating", "defense", "physicality", "hockey_sense"),
    "goaltending": ("defense", "hockey_sense"),
}


def _rating(player: PlayerSnapshot, attr: str) -> float:
    value = getattr(player, attr, None)
    if value is None:
        return 0.0
    return float(value)


def skill_for(player: PlayerSnapshot, category: str) -> float:
    """Contextual skill score: the mean of the category's ratings scaled by energy.

    Missing ratings count as zero, so a player with no energy recorded is
    treated as spent rather than rejected.
    """
    if category not in SKILL_CATEGORIES:
        raise ValueError(f"Unknown skill category: {category!r}.")
    attrs = _SKILL_RATINGS[category]
    energy_mult = _rating(player, "energy") / 100.0
    return (sum(_rating(player, attr) for attr in attrs) / len(attrs)) * energy_mult


def line_strength(players: Iterable[PlayerSnapshot], category: str) -> float:
    scores = [skill_for(p, category) for p in players]
    if not scores:
        return 0.0
    return sum(scores) / len(scores)
