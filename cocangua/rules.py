"""Move and selection rules for the classic and the racing game."""

from __future__ import annotations

from .board import TRACK_LENGTH, Point
from .game import Game
from .pieces import FINISH_STEPS, Unit
from .sound import BT_WRONG


def check_for_change_turn(game: Game) -> None:
    """After a move: pass the turn unless a double was rolled, then clear the roll."""
    if not game.can_continue_roll():
        game.change_turn()
    game.reset_dice()
    game.reset_current_unit()


def unit_at(game: Game, point: Point) -> Unit | None:
    """The first piece standing on point, if any."""
    return next((unit for unit in game.units if unit.location == point), None)


class ClassicRules:
    """Classic rules: a piece may not jump over others and leaves home on a double or 1-6."""

    def can_init(self, game: Game) -> bool:
        return game.can_init_from_roll()

    def can_finish(self, game: Game) -> bool:
        return game.can_finish_from_roll()

    def _landing(self, game: Game, path: list[Point]) -> tuple[bool, Unit | None]:
        """Whether the path can be walked and which piece stands on its last square."""
        check = game.check_way(len(path))
        return not check.blocked, check.end_unit

    def _target(self, game: Game, unit: Unit, step: int) -> tuple[list[Point], Unit | None] | None:
        """The path and the piece to knock off when unit may move step squares."""
        if step <= 0 or unit.path_went + step > TRACK_LENGTH:
            return None
        path = game.board.next_locations(unit.location, step)[:step]
        passable, victim = self._landing(game, path)
        if not passable:
            return None
        if victim is not None and victim.team.team_no == unit.team.team_no:
            return None
        return path, victim

    def _leave_stable(self, game: Game, unit: Unit) -> float | None:
        if not self.can_init(game):
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
        check_for_change_turn(game)
        return time

    def go(self, game: Game, tag: int) -> float | None:
        """Move the selected piece using the dice named by tag.

        Returns the time the move takes, or None when the move is not allowed.
        """
        unit = game.current_select_unit
        if unit is None:
            return None
        game.clear_light_ups()
        game.unselect()
        game.remove_go_buttons()

        if unit.is_on_init_location():
            return self._leave_stable(game, unit)
        if not unit.on_way:
            return None

        if unit.path_went != TRACK_LENGTH:
            target = self._target(game, unit, game.step_from_roll(tag))
            if target is None:
                return None
            path, victim = target
            step = len(path)
            if victim is not None:
                victim.die(step)
                time = unit.go(step)
                unit.kick(step)
            else:
                time = unit.go(step)
            check_for_change_turn(game)
            return time

        next_step = unit.finished_step
        if next_step >= FINISH_STEPS:
            return None
        if self.can_finish(game) and not game.having_unit_on_finish(unit.team.team_no, next_step):
            time = unit.finish()
            check_for_change_turn(game)
            return time
        return None

    def select(self, game: Game) -> None:
        """Highlight where the selected piece may go and offer go buttons."""
        if not game.can_select_unit():
            game.music.play_effect(BT_WRONG, False)
            return
        unit = game.current_select_unit
        if unit is None:
            raise ValueError("no unit is selected")
        game.clear_light_ups()
        game.remove_go_buttons()

        if unit.team is not game.current_turn:
            game.unselect()
            game.reset_current_unit()
            return

        game.music.play_effect(unit.team.select_sound, False)
        game.select(unit.location)

        if unit.is_on_init_location():
            if self.can_init(game):
                blocker = game.unit_on_start_location(unit.team.team_no)
                if blocker is None or blocker.team.team_no != unit.team.team_no:
                    game.create_go_button(unit.born_location(), 0)
        elif unit.on_way:
            if unit.path_went != TRACK_LENGTH:
                for tag in (1, 2, 3):
                    target = self._target(game, unit, game.step_from_roll(tag))
                    if target is None:
                        continue
                    path, _ = target
                    for point in path[:-1]:
                        game.light_up_way(point)
                    game.create_go_button(path[-1], tag)
            else:
                team_no = unit.team.team_no
                next_step = unit.finished_step
                if (
                    next_step < FINISH_STEPS
                    and self.can_finish(game)
                    and not game.having_unit_on_finish(team_no, next_step)
                ):
                    game.create_go_button(game.board.finish_location(team_no, next_step), 0)


class RacingRules(ClassicRules):
    """Racing rules: pieces jump over others and a single 1 or 6 is enough to leave home."""

    def can_init(self, game: Game) -> bool:
        d1, d2 = game.dice_result1, game.dice_result2
        return d1 in (1, 6) or d2 in (1, 6) or d1 == d2

    def can_finish(self, game: Game) -> bool:
        return self.can_init(game)

    def _landing(self, game: Game, path: list[Point]) -> tuple[bool, Unit | None]:
        return True, unit_at(game, path[-1])

    def go(self, game: Game, tag: int) -> float | None:
        """Move the selected piece, jumping over any pieces on the way.

        Returns the time the move takes, or None when the move is not allowed.
        """
        return super().go(game, tag)

    def select(self, game: Game) -> None:
        """Highlight where the selected piece may go under racing rules."""
        super().select(game)