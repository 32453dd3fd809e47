"""A game against the computer: the player is team 0, the other teams play themselves."""

from __future__ import annotations

import random
from dataclasses import replace
from pathlib import Path

from . import ai
from .config import GameType, Settings
from .pieces import FINISH_STEPS, Unit
from .session import AUTO_SKIP_DELAY, PLAYER, GameSession
from .sound import BT_SKIP, BT_WRONG, MORE_TURN, SFX_DICE, Music
from .board import TRACK_LENGTH

AUTO_PLAY_DELAY = 2.0


class AISession(GameSession):
    """Drives a game in which only team 0 is moved by the player."""

    def __init__(
        self,
        settings: Settings | None = None,
        music: Music | None = None,
        rng: random.Random | None = None,
        save_dir: str | Path = ".",
    ) -> None:
        base = settings if settings is not None else Settings()
        super().__init__(
            replace(base, game_type=GameType.AI, load_game=False), music, rng, save_dir
        )
        self.dice_enabled = True
        self.dice_result_a = 0
        self.dice_result_b = 0

    def _auto_skip(self) -> None:
        self.auto_skip()

    def auto_play(self) -> None:
        """Roll the dice for the computer: start after two seconds, stop two later."""
        self._schedule(AUTO_PLAY_DELAY, self.dice_roll)
        self._schedule(2 * AUTO_PLAY_DELAY, self.dice_roll)

    def auto_skip(self) -> None:
        """Skip the turn after a short pause."""
        self._schedule(AUTO_SKIP_DELAY, self.skip_turn)

    def skip(self) -> None:
        """The skip button: only the player may press it."""
        if self.game.current_turn.team_no == PLAYER:
            self.skip_turn()

    def skip_turn(self) -> None:
        """Give up the roll, pass the turn, and start the computer if it is next."""
        game = self.game
        if game.lock_user:
            self.music.play_effect(BT_WRONG, False)
            return
        game.unselect()
        game.clear_light_ups()
        game.remove_go_buttons()
        game.reset_current_unit()
        game.lock_dice = False
        self.music.play_effect(BT_SKIP, False)
        if not game.can_continue_roll():
            game.change_turn()
            if game.current_turn.team_no != PLAYER:
                self.dice_enabled = False
                self.auto_play()
            else:
                self.dice_enabled = True
        game.reset_dice()

    def roll_dice(self) -> tuple[int, int] | None:
        """The dice button: only the player may press it."""
        if self.game.current_turn.team_no == PLAYER:
            return self.dice_roll()
        return None

    def dice_roll(self) -> tuple[int, int] | None:
        """Start the dice on the first call, stop them and act on the second.

        Returns the two results when the dice stop, otherwise None.
        """
        game = self.game
        music = self.music
        if game.lock_user:
            music.play_effect(BT_WRONG, False)
            return None

        if not self.is_called_dice:
            if music.dice_effect_id == -1:
                music.dice_effect_id = music.play_effect(SFX_DICE, True)
            else:
                music.resume_effect(music.dice_effect_id)
            self.is_called_dice = True
            game.reset_dice()
            return None

        music.pause_effect(music.dice_effect_id)
        first = self.rng.randint(1, 6)
        game.dice_result1 = first
        chance = self.rng.randint(1, 4)
        team = game.current_turn
        helped = (
            ai.has_unit_on_init_location(team)
            and chance == 1
            and team.team_no != PLAYER
        )
        second = first if helped or chance == 3 else self.rng.randint(1, 6)
        game.dice_result2 = second

        self.is_called_dice = False
        game.lock_dice = True
        self.dice_result_a = first
        self.dice_result_b = second
        if game.can_continue_roll():
            music.play_effect(MORE_TURN, False)
        self.check_result_dice(first, second)
        return first, second

    def check_result_dice(self, dice_a: int, dice_b: int) -> None:
        """Let the computer move on its roll, or skip a player who cannot move."""
        game = self.game
        if game.current_turn.team_no == PLAYER:
            if dice_a != dice_b and not self.have_any_player_on_way():
                self.auto_skip()
            return

        unit = self.choose_unit(dice_a, dice_b)
        if unit is None:
            self.auto_skip()
            if dice_a == dice_b:
                self.skip_turn()
        else:
            game.current_select_unit = unit
            time = ai.go(game, unit, dice_a + dice_b, self.auto_skip)
            if time is None:
                if dice_a == dice_b:
                    self.auto_play()
                else:
                    self.auto_skip()
                return
            if dice_a == dice_b:
                self.auto_play()
        game.reset_dice()

    def choose_unit(self, dice_a: int, dice_b: int) -> Unit | None:
        """The piece the computer moves for this roll, if any can move."""
        game = self.game
        team = game.current_turn
        step = dice_a + dice_b
        if dice_a == dice_b:
            for unit in team.units:
                if unit.path_went == TRACK_LENGTH and unit.finished_step < FINISH_STEPS:
                    return unit
            for unit in team.units:
                if unit.is_on_init_location() and not ai.any_unit_at_start_position(team):
                    return unit
            for unit in team.units:
                if unit.on_way and not ai.have_unit_on_way(game, unit, step):
                    return unit
            return None

        for unit in team.units:
            blocked = ai.have_unit_on_way(game, unit, step)
            if unit.on_way and not blocked and unit.path_went + step <= TRACK_LENGTH:
                return unit
        return None

    def have_any_player_on_way(self) -> bool:
        """Whether any of the player's pieces is on the track."""
        return any(unit.on_way for unit in self.game.team(PLAYER).units)