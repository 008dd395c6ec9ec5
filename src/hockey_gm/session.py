from __future__ import annotations

import logging
import random
from threading import Lock
from typing import Callable

from .clock import is_complete
from .config import DEFAULT_ELAPSED_RANGE
from .engine import simulate_tick
from .models import GameState, GameStateDelta, SimulationEvent, TeamSnapshot, TickResult
from .settings import PlaybackSettings

logger = logging.getLogger(__name__)

Listener = Callable[[SimulationEvent | None, GameState], None]


class LiveGame:
    """Owns the canonical state of one game and feeds it through the engine.

    Ticks are serialized per game; every tick reads the state committed by
    the previous one. Listeners are the event sink: they see each produced
    event (or ``None`` for a quiet tick) together with the merged state.
    """

    def __init__(
        self,
        state: GameState,
        home: TeamSnapshot,
        away: TeamSnapshot,
        rng: random.Random | None = None,
        settings: PlaybackSettings | None = None,
        elapsed_range: tuple[int, int] = DEFAULT_ELAPSED_RANGE,
    ) -> None:
        self.home = home
        self.away = away
        self.rng = rng or random.Random()
        self.settings = settings or PlaybackSettings()
        self.elapsed_range = elapsed_range
        self.play_by_play: list[SimulationEvent] = []
        self._state = state
        self._listeners: list[Listener] = []
        self._lock = Lock()

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def is_complete(self) -> bool:
        return is_complete(self._state)

    @property
    def is_live(self) -> bool:
        return self._state.status == "live"

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _set_status(self, status: str) -> None:
        with self._lock:
            if is_complete(self._state):
                raise ValueError("Game is already complete.")
            self._state = self._state.merged(GameStateDelta(status=status))
        logger.info("Game %s vs %s is now %s", self.home.name, self.away.name, status)

    def start(self) -> None:
        self._set_status("live")

    def pause(self) -> None:
        self._set_status("paused")

    def resume(self) -> None:
        self._set_status("live")

    def tick(self) -> TickResult:
        """Play one tick of a live game and deliver it to every listener.

        Listeners run before the lock is released, so they observe ticks in
        commit order. A listener must not call back into ``tick``.
        """
        with self._lock:
            if self._state.status != "live" and not is_complete(self._state):
                raise ValueError(f"Cannot tick a {self._state.status} game; start or resume it first.")
            result = simulate_tick(self._state, self.home, self.away, self.rng, self.elapsed_range)
            self._state = self._state.merged(result.delta)
            if result.event is not None:
                self.play_by_play.append(result.event)
            for listener in list(self._listeners):
                listener(result.event, self._state)
        return result

    def _pause_trigger(self, result: TickResult) -> str | None:
        if result.event is not None and self.settings.should_auto_pause(result.event.category):
            return result.event.category
        if result.delta.period is not None and self.settings.should_auto_pause("period_end"):
            return "period_end"
        return None

    def run(self, max_ticks: int = 1000) -> list[SimulationEvent]:
        """Tick until the game ends, the auto-pause policy fires, or ``max_ticks`` is hit."""
        if max_ticks < 0:
            raise ValueError(f"max_ticks cannot be negative, got {max_ticks}.")
        if self._state.status != "live":
            self.start()
        produced: list[SimulationEvent] = []
        for _ in range(max_ticks):
            result = self.tick()
            if result.event is not None:
                produced.append(result.event)
            if result.completed:
                break
            trigger = self._pause_trigger(result)
            if trigger is not None:
                logger.debug("Auto-pausing on %s", trigger)
                self.pause()
                break
        return produced

    def visible_events(self) -> list[SimulationEvent]:
        return [e for e in self.play_by_play if self.settings.should_show_event(e.category)]
