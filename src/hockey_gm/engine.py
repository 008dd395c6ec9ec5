from __future__ import annotations

import logging
import random
from dataclasses import replace

from .clock import advance, is_complete, time_in_period, validate_state
from .config import DEFAULT_ELAPSED_RANGE
from .models import GameState, SimulationEvent, TeamSnapshot, TickResult
from .outcomes import assign_assists, describe_event, pick_uniform, pick_zone, resolve_shot
from .selection import active_lines, attacking_strength, goaltending_for, select_event_category

logger = logging.getLogger(__name__)


def _draw_elapsed(rng: random.Random, elapsed_range: tuple[int, int]) -> int:
    low, high = elapsed_range
    if low < 0 or high <= low:
        raise ValueError(f"Elapsed range must satisfy 0 <= low < high, got {elapsed_range}.")
    return low + min(high - low - 1, int(rng.random() * (high - low)))


def _finish_tick(
    before: GameState,
    after_play: GameState,
    event: SimulationEvent | None,
    rng: random.Random,
    elapsed_range: tuple[int, int],
) -> TickResult:
    elapsed = _draw_elapsed(rng, elapsed_range)
    after = advance(after_play, elapsed)
    if after.period != before.period:
        logger.info("Period %s begins (%s-%s)", after.period, after.home_score, after.away_score)
    if is_complete(after):
        after = replace(after, status="completed")
        logger.info("Game complete: %s-%s after period %s", after.home_score, after.away_score, after.period)
    return TickResult(event=event, delta=before.diff(after), elapsed=elapsed)


def simulate_tick(
    state: GameState,
    home: TeamSnapshot | None,
    away: TeamSnapshot | None,
    rng: random.Random | None = None,
    elapsed_range: tuple[int, int] = DEFAULT_ELAPSED_RANGE,
) -> TickResult:
    """Simulate one discrete slice of play.

    Possession is a fresh coin flip each tick with no memory of the previous
    one. The returned delta holds only the fields that changed, including a
    ``completed`` status once the game is over.
    """
    rng = rng or random.Random()
    validate_state(state)
    if is_complete(state):
        raise ValueError("Cannot simulate a tick for a completed game.")
    for team, expected in ((home, state.home_team_id), (away, state.away_team_id)):
        if team is not None and team.team_id != expected:
            raise ValueError(f"Team {team.team_id} does not match game team {expected}.")

    home_attacks = rng.random() > 0.5
    attacking, defending = (home, away) if home_attacks else (away, home)

    if attacking is None or defending is None or not attacking.players:
        logger.warning("Missing team or empty roster; advancing clock without an event")
        return _finish_tick(state, state, None, rng, elapsed_range)

    attack_lines = active_lines(attacking)
    defend_lines = active_lines(defending)
    if not attack_lines.forwards:
        logger.debug("%s has no forwards dressed; no event this tick", attacking.name)
        return _finish_tick(state, state, None, rng, elapsed_range)
    if defend_lines.goalie is None:
        logger.warning("%s has no goalie; using neutral goaltending", defending.name)

    category = select_event_category(
        attacking_strength(attack_lines),
        goaltending_for(defend_lines.goalie),
        rng,
    )
    actor = pick_uniform(attack_lines.forwards, rng)

    if category == "shot":
        category = resolve_shot(actor, defend_lines.goalie, rng).category

    assists = ()
    after_play = state
    if category == "goal":
        assists = assign_assists(actor, attack_lines.skaters, rng)
        if home_attacks:
            after_play = replace(state, home_score=state.home_score + 1)
        else:
            after_play = replace(state, away_score=state.away_score + 1)

    zone = pick_zone(rng) if category in {"turnover", "faceoff"} else None
    event = SimulationEvent(
        category=category,
        team_id=attacking.team_id,
        player_id=actor.player_id,
        period=state.period,
        time_in_period=time_in_period(state),
        description=describe_event(category, attacking, defending, actor, assists, zone),
        assist_ids=tuple(p.player_id for p in assists),
    )
    logger.debug("P%s %ss: %s", event.period, event.time_in_period, event.description)
    return _finish_tick(state, after_play, event, rng, elapsed_range)
