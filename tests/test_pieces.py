import pytest

from cocangua.board import Board, Point
from cocangua.config import ANIMAL_NORMAL_MOVE_TIME
from cocangua.pieces import Team, Unit, mile_stone
from cocangua.sound import BORN_SOUND, DIE_SOUNDS, FINISH_SOUND, MOVE_SOUNDS, Music, SilentBackend


def make_team(team_no=0):
    backend = SilentBackend()
    board = Board()
    team = Team(team_no, board, Music(backend))
    return team, board, backend


def played(backend):
    return [path for path, _ in backend.effects.values()]


def test_new_team_units_start_in_stable():
    team, board, _ = make_team(2)
    for index, unit in enumerate(team.units):
        assert unit.init_location == board.init_location(2, index)
        assert unit.is_on_init_location()
        assert not unit.on_way
        assert unit.path_went == -1
        assert unit.finished_step == 0
        assert unit.team is team
    assert team.point == 0


def test_unit_index_out_of_range_gives_first():
    team, _, _ = make_team()
    assert team.unit(3) is team.units[3]
    assert team.unit(9) is team.units[0]
    assert team.unit(-1) is team.units[0]


def test_born_moves_to_start():
    team, board, backend = make_team(1)
    unit = team.unit(0)
    time = unit.born()
    assert time == pytest.approx(ANIMAL_NORMAL_MOVE_TIME * 2)
    assert unit.location == board.start_location(1)
    assert unit.location == unit.born_location()
    assert unit.is_on_start_position(1)
    assert not unit.is_on_start_position(0)
    assert unit.on_way
    assert unit.path_went == 1
    assert team.point == 200
    assert BORN_SOUND in played(backend)


@pytest.mark.parametrize("step", [1, 2, 5, 12])
def test_go_follows_track(step):
    team, board, backend = make_team(0)
    unit = team.unit(0)
    unit.born()
    before = team.point
    time = unit.go(step)
    assert time / step == pytest.approx(ANIMAL_NORMAL_MOVE_TIME)
    assert unit.location == board.way[step]
    assert unit.path_went == 1 + step
    assert team.point > before
    assert MOVE_SOUNDS[0] in played(backend)


def test_go_wraps_round_track():
    team, board, _ = make_team(0)
    unit = team.unit(0)
    unit.location = board.way[-1]
    unit.go(1)
    assert unit.location == board.way[0]


def test_go_rejects_non_positive_step():
    team, _, _ = make_team()
    with pytest.raises(ValueError):
        team.unit(0).go(0)


def test_points():
    team, _, _ = make_team()
    team.add_points_for_go(1)
    assert team.point == 10
    team.point = 0
    team.add_points_for_kick()
    assert team.point == 250
    team.point = 0
    team.add_points_for_finish(1)
    assert team.point == 100


def test_kick_scores():
    team, _, _ = make_team()
    team.unit(1).kick(3)
    assert team.point == 250


def test_die_returns_to_stable():
    team, _, backend = make_team(3)
    unit = team.unit(2)
    unit.born()
    unit.go(3)
    unit.die(3)
    assert unit.location == unit.init_location
    assert unit.is_on_init_location()
    assert not unit.on_way
    assert unit.path_went == 0
    assert DIE_SOUNDS[3] in played(backend)


def test_finish_walks_home_stretch():
    team, board, backend = make_team(1)
    unit = team.unit(0)
    for step in range(6):
        unit.finish()
        assert unit.location == board.finish_location(1, step)
        assert unit.finished_step == step + 1
    assert team.unit_finished == 1
    assert FINISH_SOUND in played(backend)


def test_team_finishes_when_all_units_home():
    team, _, _ = make_team(0)
    for index, moves in enumerate((6, 5, 4, 3)):
        assert not team.is_finished()
        for _ in range(moves):
            team.unit(index).finish()
    assert team.unit_finished == 4
    assert team.is_finished()


def test_unknown_team_uses_first_sounds():
    team, _, _ = make_team(7)
    assert team.move_sound == MOVE_SOUNDS[0]
    assert team.die_sound == DIE_SOUNDS[0]


def test_silent_music_plays_nothing():
    backend = SilentBackend()
    music = Music(backend)
    music.sfx_enabled = False
    team = Team(0, Board(), music)
    team.unit(0).born()
    assert backend.effects == {}


def test_debug_info_reports_state():
    team, _, _ = make_team()
    info = team.unit(0).debug_info()
    assert "--path_went = -1" in info
    assert "--isOnWay = false" in info


def test_mile_stone_zero_delta_returns_target():
    assert mile_stone(Point(3, 4), Point(7, 8), 0, 0) == Point(7, 8)


def test_mile_stone_moves_towards_target():
    result = mile_stone(Point(10, 10), Point(0, 0), 10, 10)
    assert result == Point(5, 5)
    result = mile_stone(Point(0, 0), Point(10, 10), -10, -10)
    assert result == Point(5, 5)


def test_mile_stone_single_axis():
    result = mile_stone(Point(10, 4), Point(0, 4), 10, 0)
    assert result.y == 4
    assert 0 < result.x < 10


def test_unit_constructed_directly():
    team, board, _ = make_team()
    unit = Unit(team, Point(1, 2), board)
    assert unit.is_on_init_location()
    unit.location = board.start_location(0)
    assert unit.is_on_start_position(0)
    assert not unit.is_on_init_location()