from __future__ import annotations

import random

import pytest

from hockey_gm.models import GameState, PlayerSnapshot, TeamSnapshot


class ScriptedRandom(random.Random):
    """Replays a fixed list of uniform draws, failing loudly when it runs dry."""

    def __init__(self, draws: list[float]) -> None:
        super().__init__(0)
        self._draws = list(draws)
        self.calls = 0

    def random(self) -> float:
        if self.calls >= len(self._draws):
            raise AssertionError(f"Scripted rng exhausted after {self.calls} draws.")
        value = self._draws[self.calls]
        self.calls += 1
        return value

    @property
    def remaining(self) -> int:
        return len(self._draws) - self.calls


def make_player(player_id: int, name: str, position: str, rating: float = 70.0, energy: float = 100.0) -> PlayerSnapshot:
    return PlayerSnapshot(
        player_id=player_id,
        name=name,
        position=position,
        skating=rating,
        shooting=rating,
        passing=rating,
        defense=rating,
        physicality=rating,
        hockey_sense=rating,
        energy=energy,
    )


def make_team(team_id: int, name: str, goalie: bool = True, forwards: bool = True) -> TeamSnapshot:
    base = team_id * 100
    players: list[PlayerSnapshot] = []
    if forwards:
        players += [
            make_player(base + 1, f"{name} Center", "C"),
            make_player(base + 2, f"{name} Left", "LW"),
            make_player(base + 3, f"{name} Right", "RW"),
            make_player(base + 4, f"{name} Fourth", "C"),
        ]
    players += [
        make_player(base + 5, f"{name} Dman One", "D"),
        make_player(base + 6, f"{name} Dman Two", "D"),
        make_player(base + 7, f"{name} Dman Three", "D"),
    ]
    if goalie:
        players += [
            make_player(base + 8, f"{name} Starter", "G"),
            make_player(base + 9, f"{name} Backup", "G"),
        ]
    return TeamSnapshot(team_id=team_id, name=name, players=tuple(players))


@pytest.fixture
def home() -> TeamSnapshot:
    return make_team(1, "Home")


@pytest.fixture
def away() -> TeamSnapshot:
    return make_team(2, "Away")


@pytest.fixture
def opening_state() -> GameState:
    return GameState(home_team_id=1, away_team_id=2, status="live")
