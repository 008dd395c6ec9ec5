import pytest
from pydantic import ValidationError

from hockey_gm.models import SimulationEvent
from hockey_gm.payloads import EventRecord, GamePayload, PlayerPayload, TeamPayload, game_update_payload


def test_player_payload_reads_provider_keys_and_defaults_missing_ratings() -> None:
    payload = PlayerPayload.model_validate(
        {"id": 7, "name": "Jonah Keller", "position": "c", "shooting": 82, "hockey_iq": 77, "skating": None, "morale": 60}
    )
    snapshot = payload.to_snapshot()
    assert snapshot.player_id == 7
    assert snapshot.position == "C"
    assert snapshot.shooting == 82.0
    assert snapshot.hockey_sense == 77.0
    assert snapshot.skating == 0.0
    assert snapshot.passing == 0.0
    assert snapshot.energy == 100.0


def test_player_payload_requires_identity() -> None:
    with pytest.raises(ValidationError):
        PlayerPayload.model_validate({"id": 1, "position": "D"})


def test_team_payload_keeps_roster_order_and_strategy() -> None:
    team = TeamPayload.model_validate(
        {
            "id": 3,
            "name": "Harbor Kings",
            "strategy": "physical",
            "players": [
                {"id": 31, "name": "Goalie", "position": "G", "energy": 90},
                {"id": 32, "name": "Center", "position": "C"},
            ],
        }
    ).to_snapshot()
    assert [p.player_id for p in team.players] == [31, 32]
    assert team.strategy == "physical"
    assert team.players[0].energy == 90.0


def test_game_payload_accepts_camel_case() -> None:
    state = GamePayload.model_validate(
        {"id": 11, "homeTeamId": 1, "awayTeamId": 2, "period": 2, "timeRemaining": 640, "homeScore": 1, "awayScore": 3, "status": "live"}
    ).to_state()
    assert (state.home_team_id, state.away_team_id) == (1, 2)
    assert (state.period, state.time_remaining) == (2, 640)
    assert (state.home_score, state.away_score) == (1, 3)
    assert state.status == "live"


def test_event_record_matches_sink_keys() -> None:
    event = SimulationEvent(
        category="goal",
        team_id=1,
        player_id=101,
        period=2,
        time_in_period=312,
        description="⚡ GOAL! Home scores - Home Center assisted by Home Left and Home Right",
        assist_ids=(102, 103),
    )
    payload = EventRecord.from_event(11, event).to_payload()
    assert payload == {
        "gameId": 11,
        "period": 2,
        "timeInPeriod": 312,
        "eventType": "goal",
        "teamId": 1,
        "playerId": 101,
        "assistPlayer1Id": 102,
        "assistPlayer2Id": 103,
        "description": event.description,
    }


def test_game_update_payload_renames_delta_fields() -> None:
    assert game_update_payload({"home_score": 3, "time_remaining": 0, "status": "completed"}) == {
        "homeScore": 3,
        "timeRemaining": 0,
        "status": "completed",
    }
