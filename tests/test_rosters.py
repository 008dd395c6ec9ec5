import pytest

from hockey_gm.rosters import FIRST_NAMES, LAST_NAMES, build_demo_matchup, build_demo_team
from hockey_gm.selection import active_lines
from hockey_gm.skills import line_strength


def test_demo_team_composition_and_rating_bounds() -> None:
    team = build_demo_team(4, "Metro Sparks", seed=11)
    assert len(team.players) == 20
    assert len(team.forwards()) == 12
    assert len(team.defense()) == 6
    assert len(team.goalies()) == 2
    for player in team.players:
        for rating in (player.skating, player.shooting, player.passing, player.defense, player.physicality, player.hockey_sense):
            assert 0.0 <= rating <= 100.0
        assert player.energy == 100.0
    lines = active_lines(team)
    assert [p.position for p in lines.forwards] == ["C", "LW", "RW"]
    assert len(lines.defense) == 2
    assert lines.goalie is team.goalies()[0]


def test_demo_team_is_reproducible_for_a_seed() -> None:
    assert build_demo_team(4, "Metro Sparks", seed=11) == build_demo_team(4, "Metro Sparks", seed=11)


def test_top_line_outplays_the_fourth_line() -> None:
    forwards = build_demo_team(4, "Metro Sparks", seed=11).forwards()
    assert line_strength(forwards[:3], "offense") > line_strength(forwards[9:], "offense")


def test_demo_matchup_has_unique_ids_and_names() -> None:
    home, away = build_demo_matchup()
    players = list(home.players) + list(away.players)
    assert len({p.player_id for p in players}) == len(players)
    assert len({p.name for p in players}) == len(players)
    assert (home.team_id, away.team_id) == (1, 2)


def test_shared_name_set_keeps_names_unique_across_teams() -> None:
    taken = {f"{FIRST_NAMES[0]} {LAST_NAMES[0]}"}
    teams = [build_demo_team(team_id, f"Club {team_id}", seed=team_id, taken_names=taken) for team_id in range(1, 6)]
    names = [p.name for team in teams for p in team.players]
    assert len(set(names)) == len(names) == 100
    assert f"{FIRST_NAMES[0]} {LAST_NAMES[0]}" not in names
    assert len(taken) == 101


def test_exhausted_name_pool_raises() -> None:
    taken = {f"{first} {last}" for first in FIRST_NAMES for last in LAST_NAMES}
    with pytest.raises(ValueError):
        build_demo_team(4, "Metro Sparks", seed=11, taken_names=taken)
