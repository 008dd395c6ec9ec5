import pytest

from hockey_gm.models import PlayerSnapshot
from hockey_gm.skills import line_strength, skill_for


def _player(**ratings) -> PlayerSnapshot:
    return PlayerSnapshot(player_id=1, name="Test Skater", position="C", **ratings)


def test_offense_is_mean_of_attack_ratings_scaled_by_energy() -> None:
    player = _player(skating=80, shooting=60, passing=70, hockey_sense=90, defense=10, physicality=10, energy=50)
    assert skill_for(player, "offense") == pytest.approx(37.5)


def test_defense_and_goaltending_use_their_own_ratings() -> None:
    player = _player(skating=60, shooting=0, passing=0, defense=80, physicality=40, hockey_sense=100, energy=100)
    assert skill_for(player, "defense") == pytest.approx(70.0)
    assert skill_for(player, "goaltending") == pytest.approx(90.0)


def test_missing_ratings_count_as_zero() -> None:
    player = _player(skating=None, shooting=80, passing=None, hockey_sense=80, energy=100)
    assert skill_for(player, "offense") == pytest.approx(40.0)
    spent = _player(skating=90, shooting=90, passing=90, hockey_sense=90, energy=None)
    assert skill_for(spent, "offense") == 0.0


def test_unknown_skill_category_is_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown skill category"):
        skill_for(_player(), "special_teams")


def test_line_strength_averages_and_handles_empty_line() -> None:
    a = _player(skating=100, shooting=100, passing=100, hockey_sense=100)
    b = _player(skating=50, shooting=50, passing=50, hockey_sense=50)
    assert line_strength([a, b], "offense") == pytest.approx(75.0)
    assert line_strength([], "offense") == 0.0
