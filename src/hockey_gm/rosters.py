from __future__ import annotations

import random

from .models import PlayerSnapshot, TeamSnapshot

# Dressed lineup in depth-chart order: four forward lines, three pairs, two goalies.
FORWARD_LINES = 4
FORWARD_SLOTS = ("C", "LW", "RW") * FORWARD_LINES
DEFENSE_PAIRS = 3
GOALIE_SLOTS = 2

# (top, bottom) quality of each depth chart; ranks in between step down evenly.
SKATER_DEPTH = (0.92, 0.45)
DEFENSE_DEPTH = (0.88, 0.50)
GOALIE_DEPTH = (0.86, 0.60)
DEPTH_JITTER = 0.06

FIRST_NAMES = (
    "Adam", "Ben", "Brock", "Colby", "Dane", "Emil", "Erik", "Jack", "Jonas", "Kyle",
    "Matt", "Oskar", "Pavel", "Quinn", "Reid", "Seth", "Tomas", "Troy", "Wes", "Zach",
)
LAST_NAMES = (
    "Archer", "Bouchard", "Brandt", "Carlsson", "Doyle", "Fischer", "Grant", "Hedman", "Kane", "Lambert",
    "Marchand", "Mercer", "Pastor", "Reilly", "Sandin", "Stone", "Tkachuk", "Vesey", "Whitlock", "Young",
)


def _clamp_rating(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return round(max(low, min(high, value)), 1)


def _depth_quality(rng: random.Random, rank: int, depth: int, bounds: tuple[float, float]) -> float:
    """Quality for the ``rank``-th unit (0 is the top) of a ``depth``-deep chart."""
    top, bottom = bounds
    step = (top - bottom) / max(1, depth - 1)
    return max(0.0, min(1.0, top - step * rank + rng.uniform(-DEPTH_JITTER, DEPTH_JITTER)))


def _draw_name(rng: random.Random, taken: set[str]) -> str:
    if len(taken) >= len(FIRST_NAMES) * len(LAST_NAMES):
        raise ValueError("Demo name pool is exhausted.")
    while True:
        name = f"{rng.choice(FIRST_NAMES)} {rng.choice(LAST_NAMES)}"
        if name not in taken:
            taken.add(name)
            return name


def _skater(
    player_id: int,
    name: str,
    position: str,
    quality: float,
    offense_bias: float,
    defense_bias: float,
    rng: random.Random,
) -> PlayerSnapshot:
    is_defense = position == "D"
    attack = 30.0 + quality * 55.0 + offense_bias * (10.0 if is_defense else 15.0)
    guard = 30.0 + quality * 50.0 + defense_bias * (15.0 if is_defense else 8.0)
    return PlayerSnapshot(
        player_id=player_id,
        name=name,
        position=position,
        skating=_clamp_rating(35.0 + quality * 55.0 + rng.uniform(-5.0, 5.0)),
        shooting=_clamp_rating(attack - (8.0 if is_defense else 0.0) + rng.uniform(-6.0, 6.0)),
        passing=_clamp_rating(attack + rng.uniform(-6.0, 6.0)),
        defense=_clamp_rating(guard + (8.0 if is_defense else 0.0) + rng.uniform(-6.0, 6.0)),
        physicality=_clamp_rating(35.0 + quality * 45.0 + rng.uniform(-10.0, 10.0)),
        hockey_sense=_clamp_rating(32.0 + quality * 58.0 + rng.uniform(-5.0, 5.0)),
        energy=100.0,
    )


def _goalie(player_id: int, name: str, quality: float, defense_bias: float, rng: random.Random) -> PlayerSnapshot:
    return PlayerSnapshot(
        player_id=player_id,
        name=name,
        position="G",
        skating=_clamp_rating(30.0 + quality * 40.0 + rng.uniform(-5.0, 5.0)),
        shooting=_clamp_rating(10.0 + rng.uniform(0.0, 10.0)),
        passing=_clamp_rating(25.0 + quality * 30.0 + rng.uniform(-5.0, 5.0)),
        defense=_clamp_rating(35.0 + quality * 55.0 + defense_bias * 10.0 + rng.uniform(-4.0, 4.0)),
        physicality=_clamp_rating(30.0 + quality * 40.0 + rng.uniform(-5.0, 5.0)),
        hockey_sense=_clamp_rating(35.0 + quality * 55.0 + rng.uniform(-4.0, 4.0)),
        energy=100.0,
    )


def build_demo_team(
    team_id: int,
    name: str,
    seed: int | str | None = None,
    offense_bias: float = 0.0,
    defense_bias: float = 0.0,
    strategy: str | None = "balanced",
    taken_names: set[str] | None = None,
) -> TeamSnapshot:
    """Seeded 20-man dressed roster: 12 forwards, 6 defense, 2 goalies.

    Players are listed in depth-chart order, so the first forward line, the
    first pair and the starting goalie come first and are the strongest.
    Names are unique across every team built with the same ``taken_names``.
    """
    rng = random.Random(seed if seed is not None else f"{team_id}:{name}")
    taken = taken_names if taken_names is not None else set()
    next_id = team_id * 100
    players: list[PlayerSnapshot] = []

    for slot, position in enumerate(FORWARD_SLOTS):
        next_id += 1
        quality = _depth_quality(rng, slot // 3, FORWARD_LINES, SKATER_DEPTH)
        players.append(_skater(next_id, _draw_name(rng, taken), position, quality, offense_bias, defense_bias, rng))
    for slot in range(DEFENSE_PAIRS * 2):
        next_id += 1
        quality = _depth_quality(rng, slot // 2, DEFENSE_PAIRS, DEFENSE_DEPTH)
        players.append(_skater(next_id, _draw_name(rng, taken), "D", quality, offense_bias, defense_bias, rng))
    for rank in range(GOALIE_SLOTS):
        next_id += 1
        quality = _depth_quality(rng, rank, GOALIE_SLOTS, GOALIE_DEPTH)
        players.append(_goalie(next_id, _draw_name(rng, taken), quality, defense_bias, rng))

    return TeamSnapshot(team_id=team_id, name=name, players=tuple(players), strategy=strategy)


def build_demo_matchup(seed: int = 7) -> tuple[TeamSnapshot, TeamSnapshot]:
    taken: set[str] = set()
    home = build_demo_team(1, "Boston Bruins", seed=f"{seed}:home", offense_bias=0.2, defense_bias=0.3, taken_names=taken)
    away = build_demo_team(2, "Toronto Maple Leafs", seed=f"{seed}:away", offense_bias=0.35, defense_bias=0.1, taken_names=taken)
    return home, away
