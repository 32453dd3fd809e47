import pytest

from cocangua.config import GameType, Settings


def test_game_type_from_number():
    assert GameType(1) is GameType.CLASSIC
    assert GameType(3) is GameType.AI


def test_game_type_name_matches_number():
    assert GameType(2).name == "MODERN"
    assert GameType(4).name == "RACING"
    assert GameType(2) == 2


def test_game_type_rejects_unknown_number():
    with pytest.raises(ValueError):
        GameType(5)


def test_settings_defaults():
    settings = Settings()
    assert settings.game_type is GameType.CLASSIC
    assert settings.load_game is False


def test_settings_are_independent():
    first = Settings()
    second = Settings()
    first.game_type = GameType.RACING
    first.load_game = True
    assert second.game_type is GameType.CLASSIC
    assert second.load_game is False
    assert first == Settings(GameType.RACING, True)