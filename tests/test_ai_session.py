import pytest

from cocangua.ai_session import AISession
from cocangua.config import GameType, Settings
from cocangua.pieces import POINTS_FOR_BORN
from cocangua.sound import BT_WRONG, SilentBackend, Music


class ScriptedRandom:
    def __init__(self, values):
        self.values = list(values)

    def randint(self, low, high):
        value = self.values.pop(0)
        assert low <= value <= high
        return value


def make_session(tmp_path, values=()):
    backend = SilentBackend()
    session = AISession(
        Settings(), Music(backend), ScriptedRandom(values), save_dir=tmp_path
    )
    return session, backend


def played(backend):
    return [path for path, _ in backend.effects.values()]


def test_game_type_is_forced_to_ai(tmp_path):
    session = AISession(Settings(game_type=GameType.RACING, load_game=True), save_dir=tmp_path)
    assert session.settings.game_type == GameType.AI
    assert session.settings.load_game is False


def test_roll_dice_ignored_on_computer_turn(tmp_path):
    session, _ = make_session(tmp_path)
    session.game.current_turn = session.game.team(1)
    assert session.roll_dice() is None
    assert session.is_called_dice is False


def test_player_without_pieces_is_skipped(tmp_path):
    session, _ = make_session(tmp_path, [3, 2, 5])
    assert session.roll_dice() is None
    assert session.is_called_dice is True
    assert session.roll_dice() == (3, 5)
    assert session.game.current_turn.team_no == 0
    session.advance(2.0)
    assert session.game.current_turn.team_no == 1
    assert session.dice_enabled is False


def test_chance_three_forces_a_double(tmp_path):
    session, _ = make_session(tmp_path, [4, 3])
    session.dice_roll()
    assert session.dice_roll() == (4, 4)
    assert session.game.can_continue_roll()
    assert session.game.current_turn.team_no == 0


def test_choose_unit_prefers_piece_at_home_gate(tmp_path):
    session, _ = make_session(tmp_path)
    unit = session.game.team(0).unit(2)
    unit.path_went = 56
    unit.on_way = True
    assert session.choose_unit(3, 3) is unit


def test_choose_unit_double_leaves_stable(tmp_path):
    session, _ = make_session(tmp_path)
    assert session.choose_unit(2, 2) is session.game.team(0).unit(0)


def test_choose_unit_without_pieces_on_track(tmp_path):
    session, _ = make_session(tmp_path)
    assert session.choose_unit(2, 3) is None


def test_choose_unit_picks_piece_on_track(tmp_path):
    session, _ = make_session(tmp_path)
    unit = session.game.team(0).unit(1)
    unit.born()
    assert session.choose_unit(2, 3) is unit


def test_have_any_player_on_way(tmp_path):
    session, _ = make_session(tmp_path)
    assert session.have_any_player_on_way() is False
    session.game.team(0).unit(3).born()
    assert session.have_any_player_on_way() is True


def test_skip_by_computer_turn_is_ignored(tmp_path):
    session, _ = make_session(tmp_path)
    session.game.current_turn = session.game.team(1)
    session.skip()
    assert session.game.current_turn.team_no == 1


def test_skip_turn_refused_while_locked(tmp_path):
    session, backend = make_session(tmp_path)
    session.game.lock_user = True
    session.skip_turn()
    assert session.game.current_turn.team_no == 0
    assert BT_WRONG in played(backend)


def test_player_skip_hands_turn_to_computer(tmp_path):
    session, _ = make_session(tmp_path)
    session.skip()
    assert session.game.current_turn.team_no == 1
    assert session.dice_enabled is False


def test_computer_without_moves_skips(tmp_path):
    session, _ = make_session(tmp_path)
    session.game.current_turn = session.game.team(1)
    session.check_result_dice(2, 3)
    assert session.game.current_turn.team_no == 1
    session.advance(2.0)
    assert session.game.current_turn.team_no == 2


def test_computer_double_brings_piece_out(tmp_path):
    session, _ = make_session(tmp_path)
    game = session.game
    game.current_turn = game.team(1)
    game.dice_result1 = game.dice_result2 = 2
    session.check_result_dice(2, 2)
    unit = game.team(1).unit(0)
    assert unit.on_way
    assert unit.location == game.board.start_location(1)
    assert game.team(1).point == POINTS_FOR_BORN
    assert (game.dice_result1, game.dice_result2) == (0, 0)


def test_player_move_ends_turn_after_delay(tmp_path):
    session, _ = make_session(tmp_path)
    game = session.game
    game.dice_result1, game.dice_result2 = 1, 6
    unit = game.team(0).unit(0)
    session.select_unit(unit)
    time = session.press_go(0)
    assert time == pytest.approx(0.4)
    assert game.lock_user is True
    session.advance(2.0)
    assert game.lock_user is False
    assert unit.location == game.board.start_location(0)
    assert game.current_turn.team_no == 1