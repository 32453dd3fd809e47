"""Saving and loading a game in play to a binary file per game mode."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from pathlib import Path

from .board import Point
from .config import GameType

_GRID = 4 * 4
# Laid out as the natural alignment of the record: ints, two flags, padding.
_LAYOUT = struct.Struct(f"<3i2?2xi4i4i4i{_GRID}?{_GRID}i{_GRID}i{2 * _GRID}f?3x")

_FILE_NAMES = {
    GameType.CLASSIC: "classic.bin",
    GameType.MODERN: "modern.bin",
    GameType.RACING: "racing.bin",
    GameType.AI: "ai.bin",
}


def _zeros() -> list[int]:
    return [0] * 4


def _grid(value) -> list[list]:
    return [[value] * 4 for _ in range(4)]


@dataclass
class SaveData:
    """Everything needed to resume a game."""

    game_type: GameType = GameType.CLASSIC
    dice_result1: int = 0
    dice_result2: int = 0
    lock_dice: bool = False
    lock_user: bool = False
    current_turn: int = 0
    point: list[int] = field(default_factory=_zeros)
    team_no: list[int] = field(default_factory=_zeros)
    unit_finished: list[int] = field(default_factory=_zeros)
    on_way: list[list[bool]] = field(default_factory=lambda: _grid(False))
    finished_step: list[list[int]] = field(default_factory=lambda: _grid(0))
    path_went: list[list[int]] = field(default_factory=lambda: _grid(0))
    location: list[list[Point]] = field(default_factory=lambda: _grid(Point(0, 0)))
    is_called_dice: bool = False


def _flat(grid: list[list]) -> list:
    return [value for row in grid for value in row]


def _rows(values) -> list[list]:
    values = list(values)
    return [values[start:start + 4] for start in range(0, _GRID, 4)]


def _pack(data: SaveData) -> bytes:
    coordinates = [c for p in _flat(data.location) for c in (p.x, p.y)]
    try:
        return _LAYOUT.pack(
            int(data.game_type),
            data.dice_result1,
            data.dice_result2,
            data.lock_dice,
            data.lock_user,
            data.current_turn,
            *data.point,
            *data.team_no,
            *data.unit_finished,
            *_flat(data.on_way),
            *_flat(data.finished_step),
            *_flat(data.path_went),
            *coordinates,
            data.is_called_dice,
        )
    except struct.error as exc:
        raise ValueError(f"save data does not fit the file layout: {exc}") from exc


def _unpack(raw: bytes) -> SaveData:
    if len(raw) < _LAYOUT.size:
        raise ValueError("save file is truncated")
    values = list(_LAYOUT.unpack(raw[: _LAYOUT.size]))
    head, values = values[:6], values[6:]
    point, team_no, unit_finished = values[0:4], values[4:8], values[8:12]
    values = values[12:]
    on_way, values = values[:_GRID], values[_GRID:]
    finished_step, values = values[:_GRID], values[_GRID:]
    path_went, values = values[:_GRID], values[_GRID:]
    coordinates, values = values[: 2 * _GRID], values[2 * _GRID:]
    points = [Point(x, y) for x, y in zip(coordinates[0::2], coordinates[1::2])]
    return SaveData(
        game_type=GameType(head[0]),
        dice_result1=head[1],
        dice_result2=head[2],
        lock_dice=head[3],
        lock_user=head[4],
        current_turn=head[5],
        point=point,
        team_no=team_no,
        unit_finished=unit_finished,
        on_way=_rows(on_way),
        finished_step=_rows(finished_step),
        path_went=_rows(path_went),
        location=_rows(points),
        is_called_dice=values[0],
    )


def file_name(mode) -> str:
    """The save file for a game mode; unknown modes share the classic file."""
    try:
        return _FILE_NAMES[GameType(mode)]
    except ValueError:
        return _FILE_NAMES[GameType.CLASSIC]


def exists(path) -> bool:
    """Whether a save file can be read at path."""
    try:
        with open(path, "rb"):
            return True
    except OSError:
        return False


def load(mode, directory=".") -> SaveData:
    """Read the saved game for a mode, or a fresh record when there is none."""
    path = Path(directory) / file_name(mode)
    if not exists(path):
        return SaveData()
    return _unpack(path.read_bytes())


def save(data: SaveData, mode, directory=".") -> Path:
    """Write a game record to the file for a mode and return its path."""
    path = Path(directory) / file_name(mode)
    path.write_bytes(_pack(data))
    return path