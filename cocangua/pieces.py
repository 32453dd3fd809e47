"""The animals on the board: single pieces and the teams that own them."""

from __future__ import annotations

from .board import Board, Point
from .config import ANIMAL_NORMAL_MOVE_TIME
from .sound import (
    BORN_SOUND,
    DIE_SOUNDS,
    FINISH_SOUND,
    KICK_SOUND,
    MOVE_SOUNDS,
    SELECT_SOUNDS,
    Music,
)

UNITS_PER_TEAM = 4
FINISH_STEPS = 6

POINTS_PER_STEP = 10
POINTS_FOR_KICK = 250
POINTS_FOR_BORN = 200
POINTS_PER_FINISH = 100


def mile_stone(point1: Point, point2: Point, delta_x: float, delta_y: float) -> Point:
    """Move from point1 towards point2 by half of the given deltas."""
    factor = 2
    step_x = abs(delta_x / factor)
    step_y = abs(delta_y / factor)
    if delta_x == 0 and delta_y == 0:
        return Point(point2.x, point2.y)
    x = point1.x
    y = point1.y
    if delta_x > 0:
        x -= step_x
    elif delta_x < 0:
        x += step_x
    if delta_y > 0:
        y -= step_y
    elif delta_y < 0:
        y += step_y
    return Point(x, y)


class Unit:
    """One piece: where it stands, how far it has come and how far it has got home."""

    def __init__(self, team: Team, init_location: Point, board: Board) -> None:
        self.team = team
        self.board = board
        self.init_location = init_location
        self.location = init_location
        self.path_went = -1
        self.finished_step = 0
        self.on_way = False

    def _play(self, path: str) -> None:
        self.team.music.play_effect(path, False)

    def born(self) -> float:
        """Leave the stable for the team's start square; return the move time."""
        time = ANIMAL_NORMAL_MOVE_TIME * 2
        self.location = self.born_location()
        self._play(self.team.born_sound)
        self.team.add_points_for_born()
        self.on_way = True
        self.path_went = 1
        return time

    def go(self, step: int) -> float:
        """Move step squares along the track; return the time the move takes."""
        if step <= 0:
            raise ValueError("a piece must move at least one square")
        self._play(self.team.move_sound)
        path = self.board.next_locations(self.location, step)
        self.location = path[step - 1]
        self.team.add_points_for_go(step)
        self.path_went += step
        return ANIMAL_NORMAL_MOVE_TIME * step

    def finish(self) -> float:
        """Move one square further up the home stretch; return the move time."""
        self.location = self.board.finish_location(self.team.team_no, self.finished_step)
        self._play(self.team.finish_sound)
        self.team.add_points_for_finish(1)
        self.finished_step += 1
        if self.finished_step == FINISH_STEPS - self.team.unit_finished:
            self.team.increase_finished()
        return ANIMAL_NORMAL_MOVE_TIME

    def die(self, step: int) -> None:
        """Be knocked back to the stable."""
        self._play(self.team.die_sound)
        self.location = self.init_location
        self.path_went = 0
        self.on_way = False

    def kick(self, step: int) -> None:
        """Score for knocking another piece off the track."""
        self.team.add_points_for_kick()

    def is_on_init_location(self) -> bool:
        return self.location == self.init_location

    def is_on_start_position(self, team_no: int) -> bool:
        return self.location == self.board.start_location(team_no)

    def born_location(self) -> Point:
        return self.board.start_location(self.team.team_no)

    def debug_info(self) -> str:
        """A short description of the piece's state."""
        return "\n".join(
            (
                "----unit debug info----",
                f"--location  = {self.location.x:f} {self.location.y:f}",
                f"--path_went = {self.path_went}",
                f"--isOnWay = {'true' if self.on_way else 'false'}",
                f"--finishedStep = {self.finished_step}",
                "----end----------------",
            )
        )


class Team:
    """One side of the game: four pieces, a score and the side's sounds."""

    def __init__(self, team_no: int, board: Board, music: Music | None = None) -> None:
        self.team_no = team_no
        self.board = board
        self.music = music if music is not None else Music()
        self.point = 0
        self.unit_finished = 0
        sound_index = team_no if 0 <= team_no < 4 else 0
        self.move_sound = MOVE_SOUNDS[sound_index]
        self.die_sound = DIE_SOUNDS[sound_index]
        self.select_sound = SELECT_SOUNDS[sound_index]
        self.finish_sound = FINISH_SOUND
        self.kick_sound = KICK_SOUND
        self.born_sound = BORN_SOUND
        self.units = [
            Unit(self, board.init_location(team_no, index), board)
            for index in range(UNITS_PER_TEAM)
        ]

    def add_points_for_go(self, step: int) -> None:
        self.point += step * POINTS_PER_STEP

    def add_points_for_kick(self) -> None:
        self.point += POINTS_FOR_KICK

    def add_points_for_born(self) -> None:
        self.point += POINTS_FOR_BORN

    def add_points_for_finish(self, count: int) -> None:
        self.point += count * POINTS_PER_FINISH

    def is_finished(self) -> bool:
        return self.unit_finished >= UNITS_PER_TEAM

    def increase_finished(self) -> None:
        self.unit_finished += 1

    def unit(self, index: int) -> Unit:
        """The piece at index; any other index gives the first piece."""
        if 0 <= index < UNITS_PER_TEAM:
            return self.units[index]
        return self.units[0]