from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import ClassVar

FORWARD_POSITIONS = {"C", "LW", "RW"}
DEFENSE_POSITIONS = {"D"}
GOALIE_POSITIONS = {"G"}

EVENT_CATEGORIES = ("goal", "shot", "save", "turnover", "penalty", "faceoff", "hit")
GAME_STATUSES = ("scheduled", "live", "paused", "completed")


@dataclass(slots=True, frozen=True)
class PlayerSnapshot:
    player_id: int
    name: str
    position: str
    skating: float | None = 0.0
    shooting: float | None = 0.0
    passing: float | None = 0.0
    defense: float | None = 0.0
    physicality: float | None = 0.0
    hockey_sense: float | None = 0.0
    energy: float | None = 100.0

    @property
    def is_forward(self) -> bool:
        return self.position in FORWARD_POSITIONS

    @property
    def is_defense(self) -> bool:
        return self.position in DEFENSE_POSITIONS

    @property
    def is_goalie(self) -> bool:
        return self.position in GOALIE_POSITIONS


@dataclass(slots=True, frozen=True)
class TeamSnapshot:
    team_id: int
    name: str
    players: tuple[PlayerSnapshot, ...] = ()
    # Carried for callers; the tick model does not weight by it yet.
    strategy: str | None = None

    def forwards(self) -> list[PlayerSnapshot]:
        return [p for p in self.players if p.is_forward]

    def defense(self) -> list[PlayerSnapshot]:
        return [p for p in self.players if p.is_defense]

    def goalies(self) -> list[PlayerSnapshot]:
        return [p for p in self.players if p.is_goalie]

    def player_by_id(self, player_id: int | None) -> PlayerSnapshot | None:
        if player_id is None:
            return None
        for player in self.players:
            if player.player_id == player_id:
                return player
        return None


@dataclass(slots=True, frozen=True)
class GameStateDelta:
    period: int | None = None
    time_remaining: int | None = None
    home_score: int | None = None
    away_score: int | None = None
    status: str | None = None

    def as_dict(self) -> dict[str, object]:
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None}


@dataclass(slots=True, frozen=True)
class GameState:
    home_team_id: int
    away_team_id: int
    period: int = 1
    time_remaining: int = 1200
    home_score: int = 0
    away_score: int = 0
    status: str = "scheduled"

    @property
    def scores_tied(self) -> bool:
        return self.home_score == self.away_score

    def merged(self, delta: GameStateDelta) -> GameState:
        return replace(self, **delta.as_dict())

    def diff(self, other: GameState) -> GameStateDelta:
        """Delta that turns this state into ``other``."""
        changed = {
            name: getattr(other, name)
            for name in ("period", "time_remaining", "home_score", "away_score", "status")
            if getattr(other, name) != getattr(self, name)
        }
        return GameStateDelta(**changed)


@dataclass(slots=True, frozen=True)
class SimulationEvent:
    category: str
    team_id: int
    player_id: int | None
    period: int
    time_in_period: int
    description: str
    assist_ids: tuple[int, ...] = ()

    MAX_ASSISTS: ClassVar[int] = 2

    def __post_init__(self) -> None:
        if self.category not in EVENT_CATEGORIES:
            raise ValueError(f"Unknown event category: {self.category!r}.")
        if len(self.assist_ids) > self.MAX_ASSISTS:
            raise ValueError(f"A goal carries at most {self.MAX_ASSISTS} assists.")
        if self.assist_ids and self.category != "goal":
            raise ValueError("Only goal events carry assists.")

    @property
    def assist1_id(self) -> int | None:
        return self.assist_ids[0] if self.assist_ids else None

    @property
    def assist2_id(self) -> int | None:
        return self.assist_ids[1] if len(self.assist_ids) > 1 else None

    @property
    def is_goal(self) -> bool:
        return self.category == "goal"


@dataclass(slots=True)
class TickResult:
    event: SimulationEvent | None
    delta: GameStateDelta = field(default_factory=GameStateDelta)
    elapsed: int = 0

    @property
    def completed(self) -> bool:
        return self.delta.status == "completed"
