"""The state of one game in play: teams, dice, turn and on-board markers."""

from __future__ import annotations

from dataclasses import dataclass

from .board import MAX_STEP, Board, Point
from .pieces import FINISH_STEPS, UNITS_PER_TEAM, Team, Unit
from .sound import Music

TEAM_COUNT = 4
BOARD_SIZE = 600


@dataclass(frozen=True)
class WayCheck:
    """What stands on the path ahead of a piece.

    ``blocked`` is true when a piece stands on one of the squares before the
    last one; otherwise ``end_unit`` and ``end_tag`` name the piece standing on
    the last square, if any.
    """

    blocked: bool = False
    end_unit: Unit | None = None
    end_tag: int | None = None

    @property
    def free(self) -> bool:
        """True when nothing stands anywhere on the path."""
        return not self.blocked and self.end_unit is None


@dataclass(frozen=True)
class GoButton:
    """A marker the player can press to move the selected piece."""

    location: Point
    tag: int


class Game:
    """Teams, dice results, whose turn it is and what is highlighted."""

    def __init__(self, music: Music | None = None) -> None:
        self.music = music if music is not None else Music()
        self.board = Board(BOARD_SIZE)
        self.teams = [Team(team_no, self.board, self.music) for team_no in range(TEAM_COUNT)]
        self.current_turn: Team = self.teams[0]
        self.current_select_unit: Unit | None = None
        self.go_buttons: list[GoButton] = []
        self.light_ups: list[Point] = []
        self.selected: Point | None = None
        self.dice_result1 = 0
        self.dice_result2 = 0
        self.lock_dice = False
        self.lock_user = False

    @property
    def units(self) -> list[Unit]:
        """All sixteen pieces in tag order."""
        return [unit for team in self.teams for unit in team.units]

    def change_turn(self) -> None:
        """Pass the turn to the next team."""
        self.reset_current_unit()
        team_no = self.current_turn.team_no
        if 0 <= team_no < TEAM_COUNT:
            self.current_turn = self.teams[(team_no + 1) % TEAM_COUNT]

    def reset_dice(self) -> None:
        self.dice_result1 = 0
        self.dice_result2 = 0

    def can_continue_roll(self) -> bool:
        """A double earns another roll."""
        return self.dice_result1 == self.dice_result2 and self.dice_result1 > 0

    def can_init_from_roll(self) -> bool:
        """A double, or a one and a six, lets a piece leave the stable."""
        d1, d2 = self.dice_result1, self.dice_result2
        if d1 == d2 and d1 != 0:
            return True
        return (d1, d2) in ((1, 6), (6, 1))

    def can_finish_from_roll(self) -> bool:
        return self.can_init_from_roll()

    def step_from_roll(self, tag: int) -> int:
        """Squares to move: tag 1 uses the first die, 2 the second, else both."""
        if tag == 1:
            return self.dice_result1
        if tag == 2:
            return self.dice_result2
        return self.dice_result1 + self.dice_result2

    def can_select_unit(self) -> bool:
        return self.dice_result1 > 0 and self.dice_result2 > 0

    def light_up_way(self, point: Point) -> None:
        """Highlight a square unless it is highlighted already."""
        if point not in self.light_ups:
            self.light_ups.append(point)

    def clear_light_ups(self) -> None:
        self.light_ups.clear()

    def select(self, point: Point) -> None:
        """Mark the square of the selected piece, replacing any earlier mark."""
        if self.selected is not None:
            self.unselect()
        self.selected = point

    def unselect(self) -> None:
        self.selected = None

    def unit_on_start_location(self, team_no: int) -> Unit | None:
        """The piece standing on a team's start square, if any."""
        start = self.board.start_location(team_no)
        for unit in self.units:
            if unit.location == start:
                return unit
        return None

    def check_way(self, step: int) -> WayCheck:
        """Inspect the path last filled by ``board.next_locations`` for step squares."""
        if not 1 <= step <= MAX_STEP:
            raise ValueError(f"step must be between 1 and {MAX_STEP}")
        way = self.board.next_way
        ahead = set(way[: step - 1])
        if any(unit.location in ahead for unit in self.units):
            return WayCheck(blocked=True)
        end = way[step - 1]
        for tag, unit in enumerate(self.units):
            if unit.location == end:
                return WayCheck(end_unit=unit, end_tag=tag)
        return WayCheck()

    def having_unit_on_finish(self, team_no: int, step: int) -> bool:
        """Whether one of the team's pieces stands on that home-stretch square."""
        if step >= FINISH_STEPS:
            return False
        target = self.board.finish_location(team_no, step)
        return any(unit.location == target for unit in self.team(team_no).units)

    def unit_by_tag(self, tag: int) -> Unit:
        """The piece with number tag, 0 to 15, counted team by team."""
        if not 0 <= tag < TEAM_COUNT * UNITS_PER_TEAM:
            raise IndexError(f"no unit with tag {tag}")
        return self.teams[tag // UNITS_PER_TEAM].units[tag % UNITS_PER_TEAM]

    def tag_of(self, unit: Unit) -> int:
        """The number of a piece, the inverse of ``unit_by_tag``."""
        team = unit.team
        for index, candidate in enumerate(team.units):
            if candidate is unit:
                return team.team_no * UNITS_PER_TEAM + index
        raise ValueError("unit does not belong to its team")

    def create_go_button(self, location: Point, tag: int) -> GoButton:
        button = GoButton(location, tag)
        self.go_buttons.append(button)
        return button

    def remove_go_buttons(self) -> None:
        self.go_buttons.clear()

    def reset_current_unit(self) -> None:
        self.current_select_unit = None

    def team(self, index: int) -> Team:
        """The team at index; any other index gives the first team."""
        if 0 <= index < TEAM_COUNT:
            return self.teams[index]
        return self.teams[0]