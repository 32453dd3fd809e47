import io

import pytest

from cocangua import cli, saveload
from cocangua.config import GameType


def run(monkeypatch, argv, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    return cli.main(argv)


def test_about_from_menu(monkeypatch, capsys):
    assert run(monkeypatch, ["--mute"], "about\nexit\ny\n") == 0
    out = capsys.readouterr().out
    assert out.count(cli.TITLE) >= 2


def test_end_of_input_stops(monkeypatch, capsys):
    assert run(monkeypatch, ["--mute"], "") == 0
    assert cli.MENU[0] in capsys.readouterr().out


def test_new_game_has_zero_points(monkeypatch, capsys):
    assert run(monkeypatch, ["--mode", "classic", "--mute"], "points\nquit\ny\n") == 0
    out = capsys.readouterr().out
    assert "Heo 0, Vit 0, Ngua 0, Cho 0" in out


def test_unknown_command(monkeypatch, capsys):
    run(monkeypatch, ["--mode", "racing", "--mute"], "dance\nquit\ny\n")
    assert cli.UNKNOWN in capsys.readouterr().out


def test_bad_select(monkeypatch, capsys):
    run(monkeypatch, ["--mode", "classic", "--mute"], "select 9 9\nquit\ny\n")
    assert cli.BAD_SELECT in capsys.readouterr().out


def test_bad_go(monkeypatch, capsys):
    run(monkeypatch, ["--mode", "classic", "--mute"], "go x\nquit\ny\n")
    assert cli.BAD_GO in capsys.readouterr().out


def test_invalid_mode_rejected():
    with pytest.raises(SystemExit):
        cli.main(["--mode", "bogus"])


def test_load_missing_save(monkeypatch, capsys, tmp_path):
    argv = ["--mode", "racing", "--load", "--save-dir", str(tmp_path), "--mute"]
    assert run(monkeypatch, argv, "") == 1
    assert cli.NO_SAVE in capsys.readouterr().out


def test_load_menu_missing_save(monkeypatch, capsys, tmp_path):
    argv = ["--save-dir", str(tmp_path), "--mute"]
    assert run(monkeypatch, argv, "load\nmodern\nexit\ny\n") == 0
    assert cli.NO_SAVE in capsys.readouterr().out


def test_save_and_load_round_trip(monkeypatch, capsys, tmp_path):
    argv = ["--mode", "classic", "--save-dir", str(tmp_path), "--seed", "5", "--mute"]
    run(monkeypatch, argv, "roll\nsave\nquit\ny\n")
    out = capsys.readouterr().out
    assert cli.SAVED in out
    assert (tmp_path / saveload.file_name(GameType.CLASSIC)).exists()

    data = saveload.load(GameType.CLASSIC, tmp_path)
    assert 1 <= data.dice_result1 <= 6
    assert 1 <= data.dice_result2 <= 6

    argv = ["--mode", "classic", "--load", "--save-dir", str(tmp_path), "--mute"]
    assert run(monkeypatch, argv, "state\nquit\ny\n") == 0
    out = capsys.readouterr().out
    assert f"Dice: {data.dice_result1} {data.dice_result2}" in out


def test_roll_twice_is_refused(monkeypatch, capsys):
    run(monkeypatch, ["--mode", "classic", "--seed", "1", "--mute"], "roll\nroll\nquit\ny\n")
    assert cli.CANNOT_ROLL in capsys.readouterr().out