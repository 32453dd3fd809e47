"""Move rules used when the computer plays."""

from __future__ import annotations

from collections.abc import Callable

from .board import TRACK_LENGTH
from .game import Game
from .pieces import FINISH_STEPS, Team, Unit


def other_unit_at_end_way(game: Game, unit: Unit, step: int) -> Unit | None:
    """A piece on the track standing step squares ahead of unit, if any."""
    current = game.board.index_of(unit.location)
    for other in game.units:
        if other.on_way:
            index = game.board.index_of(other.location)
            if current + step == index or current + step - TRACK_LENGTH == index:
                return other
    return None


def have_unit_on_way(game: Game, unit: Unit, step: int) -> bool:
    """Whether a piece stands between unit and the square step squares ahead."""
    current = game.board.index_of(unit.location)
    end = current + step
    for other in game.units:
        if not other.on_way:
            continue
        index = game.board.index_of(other.location)
        if index == current:
            continue
        if end > index > current:
            return True
        if end > TRACK_LENGTH:
            if index > current and index - TRACK_LENGTH < end - TRACK_LENGTH:
                return True
            if index + TRACK_LENGTH > current and index < end - TRACK_LENGTH:
                return True
    return False


def any_unit_at_start_position(team: Team) -> bool:
    return any(unit.is_on_start_position(team.team_no) for unit in team.units)


def has_unit_on_init_location(team: Team) -> bool:
    return any(unit.is_on_init_location() for unit in team.units)


def is_continue_roll(game: Game) -> bool:
    """Equal dice let the same side roll again."""
    return game.dice_result1 == game.dice_result2


def go(
    game: Game,
    unit: Unit,
    tag: int,
    on_skip: Callable[[], None] | None = None,
) -> float | None:
    """Move unit for the computer player.

    Returns the time the move takes, or None when it cannot be made. When the
    move ends the turn, on_skip is called.
    """
    game.clear_light_ups()
    game.unselect()
    game.remove_go_buttons()

    def end_turn() -> None:
        if not is_continue_roll(game) and on_skip is not None:
            on_skip()

    if unit.is_on_init_location():
        if not game.can_init_from_roll():
            return None
        blocker = game.unit_on_start_location(game.current_turn.team_no)
        if blocker is not None:
            if blocker.team.team_no == unit.team.team_no:
                return None
            blocker.die(-1)
            time = unit.born()
            unit.kick(-1)
        else:
            time = unit.born()
        end_turn()
        return time

    if not unit.on_way:
        return None

    if unit.path_went != TRACK_LENGTH:
        step = game.step_from_roll(tag)
        if unit.path_went + step > TRACK_LENGTH:
            return None
        victim = other_unit_at_end_way(game, unit, step)
        if victim is not None:
            if victim.team.team_no == unit.team.team_no:
                return None
            victim.die(step)
        time = unit.go(step)
        end_turn()
        return time

    next_step = unit.finished_step
    if next_step >= FINISH_STEPS:
        return None
    if game.can_finish_from_roll() and not game.having_unit_on_finish(unit.team.team_no, next_step):
        time = unit.finish()
        end_turn()
        return time
    return None