"""Music and sound effects with the on/off switches the game keeps."""

from __future__ import annotations

import itertools
from enum import IntEnum


class MusicKind(IntEnum):
    """Which of the two music tracks is being started."""

    BACKGROUND = 1
    GAMEPLAY = 2


BACKGROUND_MUSIC = "/music/background-music.mp3"
GAMEPLAY_MUSIC = "/music/gameplay-music.mp3"
SFX_BUTTON = "/sound/Button.wav"
SFX_DICE = "/sound/RollDice.wav"
SFX_GAME_OVER = "/sound/GameOver.wav"
SFX_GAME_WIN = "/sound/GameWin.wav"
SFX_FIREWORKS = "/sound/Fireworks.wav"

DIE_SOUNDS = (
    "/sound/animal_sound/lon_die.wav",
    "/sound/animal_sound/vit_die.wav",
    "/sound/animal_sound/ngua_die.wav",
    "/sound/animal_sound/cho_die.wav",
)
MOVE_SOUNDS = (
    "/sound/animal_sound/lon_move.wav",
    "/sound/animal_sound/vit_move.wav",
    "/sound/animal_sound/ngua_move.wav",
    "/sound/animal_sound/cho_move.wav",
)
SELECT_SOUNDS = (
    "/sound/animal_sound/lon_selected.wav",
    "/sound/animal_sound/vit_selected.wav",
    "/sound/animal_sound/ngua_selected.wav",
    "/sound/animal_sound/cho_selected.wav",
)
BORN_SOUND = "/sound/animal_sound/born.wav"
FINISH_SOUND = "/sound/animal_sound/finish.wav"
KICK_SOUND = "/sound/animal_sound/kick.wav"

BT_SKIP = "/sound/skipturn.wav"
BT_WRONG = "/sound/wrongButton.wav"
MORE_TURN = "/sound/moreturn.wav"


class SilentBackend:
    """An audio engine that plays nothing but keeps track of what would play."""

    def __init__(self) -> None:
        self._ids = itertools.count(1)
        self.background: str | None = None
        self.background_loop = False
        self.background_paused = False
        self.effects: dict[int, tuple[str, bool]] = {}
        self.paused_effects: set[int] = set()
        self.ended = False

    def play_background_music(self, path: str, loop: bool) -> None:
        self.background = path
        self.background_loop = loop
        self.background_paused = False

    def stop_background_music(self) -> None:
        self.background = None
        self.background_paused = False

    def pause_background_music(self) -> None:
        if self.background is not None:
            self.background_paused = True

    def resume_background_music(self) -> None:
        self.background_paused = False

    def play_effect(self, path: str, loop: bool) -> int:
        effect_id = next(self._ids)
        self.effects[effect_id] = (path, loop)
        return effect_id

    def stop_effect(self, effect_id: int) -> None:
        self.effects.pop(effect_id, None)
        self.paused_effects.discard(effect_id)

    def stop_all_effects(self) -> None:
        self.effects.clear()
        self.paused_effects.clear()

    def pause_effect(self, effect_id: int) -> None:
        if effect_id in self.effects:
            self.paused_effects.add(effect_id)

    def resume_effect(self, effect_id: int) -> None:
        self.paused_effects.discard(effect_id)

    def end(self) -> None:
        self.stop_background_music()
        self.stop_all_effects()
        self.ended = True


class Music:
    """Starts and stops music and effects, honouring the player's switches."""

    def __init__(self, backend=None) -> None:
        self.backend = backend if backend is not None else SilentBackend()
        self.volume = 100
        self.bg_music_playing = False
        self.gameplay_music_playing = False
        self.sfx_enabled = True
        self.music_turned_off = False
        self.dice_effect_id = -1
        self.button_effect_id = -1
        self.game_over_effect_id = -1
        self.game_win_effect_id = -1

    def play_background_music(self, path: str, kind: MusicKind) -> None:
        self.backend.play_background_music(path, True)
        if kind == MusicKind.BACKGROUND:
            self.bg_music_playing = True
        else:
            self.gameplay_music_playing = True

    def stop_background_music(self) -> None:
        self.backend.stop_background_music()
        self.bg_music_playing = False

    def pause_background_music(self) -> None:
        self.backend.pause_background_music()
        self.bg_music_playing = False

    def resume_background_music(self) -> None:
        self.backend.resume_background_music()
        self.bg_music_playing = True

    def play_effect(self, path: str, loop: bool) -> int:
        """Play an effect and return its id, or -1 when effects are switched off."""
        if not self.sfx_enabled:
            return -1
        return self.backend.play_effect(path, loop)

    def stop_effect(self, effect_id: int) -> None:
        self.backend.stop_effect(effect_id)

    def stop_all_effects(self) -> None:
        self.backend.stop_all_effects()

    def pause_effect(self, effect_id: int) -> None:
        self.backend.pause_effect(effect_id)

    def resume_effect(self, effect_id: int) -> None:
        self.backend.resume_effect(effect_id)

    def end(self) -> None:
        self.backend.end()