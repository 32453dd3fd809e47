"""A game in play: dice, skipping, selecting, moving, saving and loading."""

from __future__ import annotations

import heapq
import itertools
import random
from collections.abc import Callable
from pathlib import Path

from . import ai, saveload
from .config import GameType, Settings
from .game import Game
from .pieces import Team, Unit
from .rules import ClassicRules, RacingRules
from .saveload import SaveData
from .sound import (
    BT_SKIP,
    BT_WRONG,
    GAMEPLAY_MUSIC,
    MORE_TURN,
    SFX_BUTTON,
    SFX_DICE,
    Music,
    MusicKind,
)

PLAYER = 0
AUTO_SKIP_DELAY = 2.0
_EPSILON = 1e-9


class GameSession:
    """Drives one game: the player's buttons and the clock that unlocks input."""

    def __init__(
        self,
        settings: Settings | None = None,
        music: Music | None = None,
        rng: random.Random | None = None,
        save_dir=".",
    ) -> None:
        self.settings = settings if settings is not None else Settings()
        self.music = music if music is not None else Music()
        self.rng = rng if rng is not None else random.Random()
        self.save_dir = Path(save_dir)
        self.game = Game(self.music)
        self.is_called_dice = False
        self.clock = 0.0
        self._pending: list[tuple[float, int, Callable[[], None]]] = []
        self._order = itertools.count()

        if self.settings.load_game:
            self.load()

        if not self.music.music_turned_off:
            self.music.stop_background_music()
            self.music.play_background_music(GAMEPLAY_MUSIC, MusicKind.GAMEPLAY)

    # --- scheduling -------------------------------------------------------

    def _schedule(self, delay: float, callback: Callable[[], None]) -> None:
        heapq.heappush(self._pending, (self.clock + delay, next(self._order), callback))

    def advance(self, seconds: float) -> None:
        """Let time pass and run everything that falls due, in order."""
        if seconds < 0:
            raise ValueError("time cannot run backwards")
        target = self.clock + seconds
        while self._pending and self._pending[0][0] <= target + _EPSILON:
            due, _, callback = heapq.heappop(self._pending)
            self.clock = max(self.clock, due)
            callback()
        self.clock = target

    def _release_lock_user(self) -> None:
        self.game.lock_user = False

    def _auto_skip(self) -> None:
        self._schedule(AUTO_SKIP_DELAY, self.skip)

    # --- buttons ----------------------------------------------------------

    def roll_dice(self) -> tuple[int, int] | None:
        """First press starts the dice rolling; the second stops them.

        Returns the two results when the dice stop, otherwise None.
        """
        game = self.game
        if game.lock_user or game.lock_dice:
            self.music.play_effect(BT_WRONG, False)
            return None
        if not self.is_called_dice:
            self.music.dice_effect_id = self.music.play_effect(SFX_DICE, True)
            self.is_called_dice = True
            game.reset_dice()
            return None

        self.music.stop_effect(self.music.dice_effect_id)
        game.dice_result1 = self.rng.randint(1, 6)
        game.dice_result2 = self.rng.randint(1, 6)
        self.is_called_dice = False
        game.lock_dice = True
        if game.can_continue_roll():
            self.music.play_effect(MORE_TURN, False)
        return game.dice_result1, game.dice_result2

    def skip(self) -> None:
        """Give up the current roll, and the turn unless a double was rolled."""
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
        game.reset_dice()

    def select_unit(self, unit: Unit) -> None:
        """Pick a piece and show where it may go under the current mode."""
        self.game.current_select_unit = unit
        game_type = self.settings.game_type
        if game_type == GameType.CLASSIC:
            ClassicRules().select(self.game)
        elif game_type == GameType.AI:
            if unit.team.team_no == PLAYER:
                ClassicRules().select(self.game)
        elif game_type == GameType.RACING:
            RacingRules().select(self.game)

    def press_go(self, tag: int) -> float | None:
        """Move the selected piece; input stays locked while it moves.

        Returns the time the move takes, or None when it cannot be made.
        """
        game_type = self.settings.game_type
        game = self.game
        if game_type == GameType.CLASSIC:
            time = ClassicRules().go(game, tag)
        elif game_type == GameType.RACING:
            time = RacingRules().go(game, tag)
        elif game_type == GameType.AI and game.current_select_unit is not None:
            time = ai.go(game, game.current_select_unit, tag, self._auto_skip)
        else:
            time = None
        if time is not None and time > 0:
            game.lock_user = True
            game.lock_dice = False
            self._schedule(time, self._release_lock_user)
        return time

    # --- scores -----------------------------------------------------------

    def points(self) -> list[int]:
        """Each team's score, in team order."""
        return [team.point for team in self.game.teams]

    def winner(self) -> Team | None:
        """The first team to bring all its pieces home, if any."""
        return next((team for team in self.game.teams if team.is_finished()), None)

    # --- persistence ------------------------------------------------------

    def save(self) -> Path:
        """Write the game to the save file for its mode and return the path."""
        self.music.play_effect(SFX_BUTTON, False)
        self.music.stop_all_effects()
        game = self.game
        data = SaveData(
            game_type=self.settings.game_type,
            dice_result1=game.dice_result1,
            dice_result2=game.dice_result2,
            lock_dice=game.lock_dice,
            lock_user=game.lock_user,
            is_called_dice=self.is_called_dice,
        )
        for i, team in enumerate(game.teams):
            if game.current_turn is team:
                data.current_turn = i
            data.point[i] = team.point
            data.team_no[i] = team.team_no
            data.unit_finished[i] = team.unit_finished
            for j, unit in enumerate(team.units):
                data.on_way[i][j] = unit.on_way
                data.finished_step[i][j] = unit.finished_step
                data.path_went[i][j] = unit.path_went
                data.location[i][j] = unit.location
        return saveload.save(data, self.settings.game_type, self.save_dir)

    def load(self) -> int:
        """Restore the game saved for the current mode; return whose turn it is."""
        data = saveload.load(self.settings.game_type, self.save_dir)
        game = self.game
        self.settings.game_type = GameType(data.game_type)
        game.dice_result1 = data.dice_result1
        game.dice_result2 = data.dice_result2
        game.lock_dice = data.lock_dice
        game.lock_user = data.lock_user
        game.current_turn = game.team(data.current_turn)
        self.is_called_dice = data.is_called_dice
        for i, team in enumerate(game.teams):
            team.point = data.point[i]
            team.team_no = data.team_no[i]
            team.unit_finished = data.unit_finished[i]
            for j, unit in enumerate(team.units):
                unit.on_way = data.on_way[i][j]
                unit.finished_step = data.finished_step[i][j]
                unit.path_went = data.path_went[i][j]
                unit.location = data.location[i][j]
        return data.current_turn