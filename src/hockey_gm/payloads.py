"""Adapters between provider/sink dictionaries and engine snapshots.

Providers hand over rows shaped like the league REST API (camelCase keys,
``hockey_iq`` for hockey sense). Ratings a provider leaves out are read as 0
so an incomplete row degrades a player instead of failing the tick.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .models import GameState, PlayerSnapshot, SimulationEvent, TeamSnapshot


class PlayerPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: int
    name: str
    position: str
    skating: float = 0.0
    shooting: float = 0.0
    passing: float = 0.0
    defense: float = 0.0
    physicality: float = 0.0
    hockey_sense: float = Field(default=0.0, alias="hockey_iq")
    energy: float = 100.0

    @field_validator("skating", "shooting", "passing", "defense", "physicality", "hockey_sense", mode="before")
    @classmethod
    def _missing_rating_is_zero(cls, value: object) -> object:
        return 0.0 if value is None else value

    @field_validator("energy", mode="before")
    @classmethod
    def _missing_energy_is_full(cls, value: object) -> object:
        return 100.0 if value is None else value

    @field_validator("position")
    @classmethod
    def _normalize_position(cls, value: str) -> str:
        return value.strip().upper()

    def to_snapshot(self) -> PlayerSnapshot:
        return PlayerSnapshot(
            player_id=self.id,
            name=self.name,
            position=self.position,
            skating=self.skating,
            shooting=self.shooting,
            passing=self.passing,
            defense=self.defense,
            physicality=self.physicality,
            hockey_sense=self.hockey_sense,
            energy=self.energy,
        )


class TeamPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: int
    name: str
    players: list[PlayerPayload] = []
    strategy: str | None = None

    def to_snapshot(self) -> TeamSnapshot:
        return TeamSnapshot(
            team_id=self.id,
            name=self.name,
            players=tuple(p.to_snapshot() for p in self.players),
            strategy=self.strategy,
        )


class GamePayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: int | None = None
    home_team_id: int = Field(alias="homeTeamId")
    away_team_id: int = Field(alias="awayTeamId")
    period: int = 1
    time_remaining: int = Field(default=1200, alias="timeRemaining")
    home_score: int = Field(default=0, alias="homeScore")
    away_score: int = Field(default=0, alias="awayScore")
    status: str = "scheduled"

    def to_state(self) -> GameState:
        return GameState(
            home_team_id=self.home_team_id,
            away_team_id=self.away_team_id,
            period=self.period,
            time_remaining=self.time_remaining,
            home_score=self.home_score,
            away_score=self.away_score,
            status=self.status,
        )


class EventRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    game_id: int = Field(alias="gameId")
    period: int
    time_in_period: int = Field(alias="timeInPeriod")
    event_type: str = Field(alias="eventType")
    team_id: int = Field(alias="teamId")
    player_id: int | None = Field(default=None, alias="playerId")
    assist_player_1_id: int | None = Field(default=None, alias="assistPlayer1Id")
    assist_player_2_id: int | None = Field(default=None, alias="assistPlayer2Id")
    description: str

    @classmethod
    def from_event(cls, game_id: int, event: SimulationEvent) -> EventRecord:
        return cls(
            game_id=game_id,
            period=event.period,
            time_in_period=event.time_in_period,
            event_type=event.category,
            team_id=event.team_id,
            player_id=event.player_id,
            assist_player_1_id=event.assist1_id,
            assist_player_2_id=event.assist2_id,
            description=event.description,
        )

    def to_payload(self) -> dict[str, object]:
        return self.model_dump(by_alias=True)


def game_update_payload(state_delta: dict[str, object]) -> dict[str, object]:
    """Rename delta fields to the camelCase keys the game store patches."""
    keys = {
        "period": "period",
        "time_remaining": "timeRemaining",
        "home_score": "homeScore",
        "away_score": "awayScore",
        "status": "status",
    }
    return {keys[name]: value for name, value in state_delta.items() if name in keys}
