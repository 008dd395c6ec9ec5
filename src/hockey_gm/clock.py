"""Game clock and period state machine.

Regulation is three periods of ``PERIOD_LENGTH_SECONDS``; a game tied when
the third period expires goes to a single overtime period of
``OVERTIME_LENGTH_SECONDS`` that ends only when its clock runs out. The
functions here never touch scores; a goal can only change whether a finished
clock means the game is over.
"""

from __future__ import annotations

from dataclasses import replace
from enum import Enum

from .config import OVERTIME_LENGTH_SECONDS, OVERTIME_PERIOD, PERIOD_LENGTH_SECONDS, REGULATION_PERIODS
from .models import GAME_STATUSES, GameState, GameStateDelta


class GamePhase(Enum):
    PERIOD_1 = 1
    PERIOD_2 = 2
    PERIOD_3 = 3
    OVERTIME = 4
    COMPLETE = 5


def period_length(period: int) -> int:
    if period == OVERTIME_PERIOD:
        return OVERTIME_LENGTH_SECONDS
    if 1 <= period <= REGULATION_PERIODS:
        return PERIOD_LENGTH_SECONDS
    raise ValueError(f"Period must be between 1 and {OVERTIME_PERIOD}, got {period}.")


def validate_state(state: GameState) -> None:
    length = period_length(state.period)
    if not 0 <= state.time_remaining <= length:
        raise ValueError(
            f"Time remaining {state.time_remaining} is outside [0, {length}] for period {state.period}."
        )
    if state.home_score < 0 or state.away_score < 0:
        raise ValueError("Scores cannot be negative.")
    if state.status not in GAME_STATUSES:
        raise ValueError(f"Unknown game status: {state.status!r}.")


def is_complete(state: GameState) -> bool:
    if state.status == "completed":
        return True
    if state.time_remaining != 0:
        return False
    if state.period >= REGULATION_PERIODS and not state.scores_tied:
        return True
    return state.period == OVERTIME_PERIOD


def phase_of(state: GameState) -> GamePhase:
    validate_state(state)
    if is_complete(state):
        return GamePhase.COMPLETE
    return GamePhase(state.period)


def time_in_period(state: GameState) -> int:
    return period_length(state.period) - state.time_remaining


def advance(state: GameState, elapsed_seconds: int) -> GameState:
    if elapsed_seconds < 0:
        raise ValueError(f"Elapsed time cannot be negative, got {elapsed_seconds}.")
    validate_state(state)
    if is_complete(state):
        return state

    new_time = max(0, state.time_remaining - elapsed_seconds)
    if new_time > 0:
        return replace(state, time_remaining=new_time)
    if state.period < REGULATION_PERIODS:
        return replace(state, period=state.period + 1, time_remaining=PERIOD_LENGTH_SECONDS)
    if state.period == REGULATION_PERIODS and state.scores_tied:
        return replace(state, period=OVERTIME_PERIOD, time_remaining=OVERTIME_LENGTH_SECONDS)
    # Final horn; the caller owns the terminal status.
    return replace(state, time_remaining=0)


def advance_delta(state: GameState, elapsed_seconds: int) -> GameStateDelta:
    return state.diff(advance(state, elapsed_seconds))
