from __future__ import annotations

from dataclasses import dataclass

from .clock import is_complete
from .config import OVERTIME_PERIOD, PERIOD_LENGTH_SECONDS, REGULATION_PERIODS
from .models import GameState

SPEEDS = ("slow", "normal", "fast", "instant")
AUTO_PAUSE_POLICIES = ("never", "goals", "periods", "penalties")
DETAIL_LEVELS = ("minimal", "basic", "detailed")

# Wall-clock seconds between ticks, advisory for whatever schedules ticks.
TICK_INTERVALS: dict[str, float] = {
    "slow": 5.0,
    "normal": 3.0,
    "fast": 1.0,
    "instant": 0.1,
}

BASE_EVENTS_PER_MINUTE = 3.0
EVENT_FREQUENCY_MULT: dict[str, float] = {
    "slow": 0.5,
    "normal": 1.0,
    "fast": 2.0,
    "instant": 10.0,
}

AUTO_PAUSE_TRIGGERS: dict[str, frozenset[str]] = {
    "never": frozenset(),
    "goals": frozenset({"goal"}),
    "periods": frozenset({"goal", "period_end"}),
    "penalties": frozenset({"goal", "period_end", "penalty"}),
}

VISIBLE_EVENTS: dict[str, frozenset[str] | None] = {
    "minimal": frozenset({"goal"}),
    "basic": frozenset({"goal", "penalty", "period_end"}),
    "detailed": None,
}


@dataclass(slots=True)
class PlaybackSettings:
    speed: str = "normal"
    auto_pause: str = "goals"
    detail_level: str = "detailed"

    def __post_init__(self) -> None:
        if self.speed not in SPEEDS:
            raise ValueError(f"Unknown simulation speed: {self.speed!r}.")
        if self.auto_pause not in AUTO_PAUSE_POLICIES:
            raise ValueError(f"Unknown auto-pause policy: {self.auto_pause!r}.")
        if self.detail_level not in DETAIL_LEVELS:
            raise ValueError(f"Unknown detail level: {self.detail_level!r}.")

    @property
    def tick_interval(self) -> float:
        return tick_interval(self.speed)

    def should_auto_pause(self, event_type: str) -> bool:
        return should_auto_pause(self.auto_pause, event_type)

    def should_show_event(self, event_type: str) -> bool:
        return should_show_event(self.detail_level, event_type)


def tick_interval(speed: str) -> float:
    return TICK_INTERVALS.get(speed, TICK_INTERVALS["normal"])


def event_frequency(speed: str) -> float:
    return BASE_EVENTS_PER_MINUTE * EVENT_FREQUENCY_MULT.get(speed, 1.0)


def should_auto_pause(policy: str, event_type: str) -> bool:
    return event_type in AUTO_PAUSE_TRIGGERS.get(policy, frozenset())


def should_show_event(level: str, event_type: str) -> bool:
    visible = VISIBLE_EVENTS.get(level)
    return visible is None or event_type in visible


def format_clock(seconds: int) -> str:
    minutes, secs = divmod(max(0, int(seconds)), 60)
    return f"{minutes}:{secs:02d}"


def format_period_time(period: int, time_in_period: int) -> str:
    return f"{period}P {format_clock(time_in_period)}"


def game_progress(state: GameState | None) -> float:
    """Percent of regulation played; overtime reads as a full game."""
    if state is None:
        return 0.0
    periods_done = max(0, state.period - 1)
    current = (PERIOD_LENGTH_SECONDS - state.time_remaining) / PERIOD_LENGTH_SECONDS
    return min(100.0, (periods_done + current) / REGULATION_PERIODS * 100.0)


def status_label(state: GameState | None) -> str:
    """Scoreboard label; a live game shows the period being played."""
    if state is None:
        return "No Game"
    if is_complete(state):
        return "Final"
    if state.status == "scheduled":
        return "Pre-Game"
    if state.status == "paused":
        return "Paused"
    if state.period == OVERTIME_PERIOD:
        return "Overtime"
    suffix = {1: "st", 2: "nd"}.get(state.period, "rd")
    return f"{state.period}{suffix} Period"
