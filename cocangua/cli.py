"""Text front end: the main menu and a game played with typed commands."""

from __future__ import annotations

import argparse
import random
import sys
from dataclasses import replace
from pathlib import Path

from . import saveload
from .ai_session import AISession
from .config import GameType, Settings
from .session import GameSession
from .sound import BACKGROUND_MUSIC, SFX_BUTTON, Music, MusicKind

TITLE = "Co Ca Ngua - CrazyTeam"
TEAM_NAMES = ("Heo", "Vit", "Ngua", "Cho")
MENU = (
    "Classic Game",
    "AI Game",
    "Racing Game",
    "Load Game",
    "Option",
    "About",
    "Help",
    "Exit",
)
LOAD_MENU = ("Classic", "AI", "Modern", "Racing", "Back to Menu")
MODES = {"classic": GameType.CLASSIC, "ai": GameType.AI, "racing": GameType.RACING}
LOAD_MODES = {
    "classic": GameType.CLASSIC,
    "ai": GameType.AI,
    "modern": GameType.MODERN,
    "racing": GameType.RACING,
}

SAVED = "Game was saved successfully"
NO_SAVE = "There are no saved game for this mode"
QUIT_QUESTION = "Unsaved game will be lost. Are you sure ? [y/N]"
EXIT_QUESTION = "Are you sure ? [y/N]"
UNKNOWN = "Unknown command"
BAD_SELECT = "select needs a team and a unit from 0 to 3"
BAD_GO = "go needs a number"
NOT_ALLOWED = "That move is not allowed"
CANNOT_ROLL = "You cannot roll now"
WIN = "PLAYER WIN"

COMMAND_HELP = "\n".join(
    (
        "roll          roll the dice",
        "skip          give up the roll",
        "select T U    pick unit U of team T",
        "go TAG        move the selected unit using a go button",
        "points        show the scores",
        "state         show the board state",
        "save          save the game",
        "help          show this help",
        "quit          back to the menu",
    )
)

# Seconds of game time that pass after each command, enough for moves and the
# computer's turns to play out.
SETTLE_SECONDS = 60.0


class _Console:
    def read(self) -> str | None:
        line = sys.stdin.readline()
        if not line:
            return None
        return line.strip()

    def say(self, text: str) -> None:
        print(text)

    def ask(self, question: str) -> str | None:
        self.say(question)
        return self.read()


def _yes(answer: str | None) -> bool:
    return answer is not None and answer.lower().startswith("y")


def _points_line(session: GameSession) -> str:
    scores = ", ".join(
        f"{name} {point}" for name, point in zip(TEAM_NAMES, session.points())
    )
    return f"Points: {scores}"


def _describe(session: GameSession) -> str:
    game = session.game
    lines = [
        f"Turn: {TEAM_NAMES[game.current_turn.team_no]}",
        f"Dice: {game.dice_result1} {game.dice_result2}",
        _points_line(session),
    ]
    for button in game.go_buttons:
        lines.append(f"Go {button.tag} -> ({button.location.x:g}, {button.location.y:g})")
    return "\n".join(lines)


def _roll(session: GameSession) -> str:
    result = session.roll_dice()
    if result is None and session.is_called_dice:
        result = session.roll_dice()
    if result is None:
        return CANNOT_ROLL
    return f"Dice: {result[0]} {result[1]}"


def _select(session: GameSession, args: list[str]) -> str:
    try:
        team_no, unit_no = (int(value) for value in args)
    except ValueError:
        return BAD_SELECT
    if not (0 <= team_no < 4 and 0 <= unit_no < 4):
        return BAD_SELECT
    session.select_unit(session.game.team(team_no).unit(unit_no))
    return _describe(session)


def _go(session: GameSession, args: list[str]) -> str:
    try:
        (tag,) = (int(value) for value in args)
    except ValueError:
        return BAD_GO
    if session.press_go(tag) is None:
        return NOT_ALLOWED
    return "Moved"


def _command(session: GameSession, command: str, args: list[str]) -> str:
    if command == "roll":
        return _roll(session)
    if command == "skip":
        session.skip()
        return _describe(session)
    if command == "select":
        return _select(session, args)
    if command == "go":
        return _go(session, args)
    if command == "points":
        return _points_line(session)
    if command == "state":
        return _describe(session)
    if command == "save":
        session.save()
        return SAVED
    if command == "help":
        return COMMAND_HELP
    return f"{UNKNOWN}: {command}"


def _play(session: GameSession, console: _Console) -> bool:
    """Run commands until the player quits or a team wins; False at end of input."""
    console.say(_describe(session))
    while True:
        line = console.read()
        if line is None:
            return False
        words = line.split()
        if not words:
            continue
        command, args = words[0].lower(), words[1:]
        if command == "quit":
            answer = console.ask(QUIT_QUESTION)
            if answer is None:
                return False
            if _yes(answer):
                session.music.stop_all_effects()
                return True
            continue
        console.say(_command(session, command, args))
        session.advance(SETTLE_SECONDS)
        winner = session.winner()
        if winner is not None:
            session.music.stop_all_effects()
            console.say(f"{WIN}: {TEAM_NAMES[winner.team_no]}")
            return True


def _new_session(settings: Settings, music: Music, rng, save_dir) -> GameSession:
    if settings.game_type == GameType.AI and not settings.load_game:
        return AISession(settings, music, rng, save_dir)
    return GameSession(settings, music, rng, save_dir)


def _save_exists(mode: GameType, save_dir) -> bool:
    return saveload.exists(Path(save_dir) / saveload.file_name(mode))


def _load_menu(console, settings, music, rng, save_dir) -> bool | None:
    """Pick a saved game to resume; None at end of input."""
    console.say(" | ".join(LOAD_MENU))
    choice = console.read()
    if choice is None:
        return None
    choice = choice.lower()
    music.play_effect(SFX_BUTTON, False)
    mode = LOAD_MODES.get(choice)
    if mode is None:
        settings.load_game = False
        return True
    if not _save_exists(mode, save_dir):
        console.say(NO_SAVE)
        return True
    settings.game_type = mode
    settings.load_game = True
    finished = _play(_new_session(settings, music, rng, save_dir), console)
    settings.load_game = False
    return finished or None


def _option_menu(console: _Console, music: Music) -> bool:
    """Switch music and sound on and off; False at end of input."""
    while True:
        console.say(
            f"music: {'on' if music.bg_music_playing else 'off'} | "
            f"sound: {'on' if music.sfx_enabled else 'off'} | menu"
        )
        choice = console.read()
        if choice is None:
            return False
        choice = choice.lower()
        music.play_effect(SFX_BUTTON, False)
        if choice == "music":
            playing = music.bg_music_playing
            if playing:
                music.pause_background_music()
            else:
                music.resume_background_music()
            music.bg_music_playing = not playing
            music.music_turned_off = not music.music_turned_off
        elif choice == "sound":
            music.sfx_enabled = not music.sfx_enabled
        else:
            return True


def _menu(console, settings, music, rng, save_dir) -> int:
    while True:
        if not music.bg_music_playing and not music.music_turned_off:
            music.play_background_music(BACKGROUND_MUSIC, MusicKind.BACKGROUND)
        console.say(TITLE)
        console.say("\n".join(f"{n}. {item}" for n, item in enumerate(MENU, 1)))
        choice = console.read()
        if choice is None:
            return 0
        choice = choice.lower()
        if choice.isdigit() and 1 <= int(choice) <= len(MENU):
            choice = MENU[int(choice) - 1].lower()
        choice = choice.removesuffix(" game")
        music.play_effect(SFX_BUTTON, False)
        if choice in MODES:
            settings.game_type = MODES[choice]
            settings.load_game = False
            if not _play(_new_session(settings, music, rng, save_dir), console):
                return 0
        elif choice == "load":
            if _load_menu(console, settings, music, rng, save_dir) is None:
                return 0
        elif choice == "option":
            if not _option_menu(console, music):
                return 0
        elif choice == "about":
            console.say(TITLE)
        elif choice == "help":
            console.say(COMMAND_HELP)
        elif choice == "exit":
            answer = console.ask(EXIT_QUESTION)
            if answer is None or _yes(answer):
                music.end()
                return 0
        else:
            console.say(f"{UNKNOWN}: {choice}")


def _parse_args(argv):
    parser = argparse.ArgumentParser(prog="cocangua", description=TITLE)
    parser.add_argument("--mode", choices=sorted(MODES), help="start a game straight away")
    parser.add_argument("--load", action="store_true", help="resume the saved game of the mode")
    parser.add_argument("--save-dir", default=".", help="where save files live")
    parser.add_argument("--seed", type=int, help="seed for the dice")
    parser.add_argument("--mute", action="store_true", help="no music and no sound")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Run the game from the command line and return the exit status."""
    args = _parse_args(argv)
    music = Music()
    if args.mute:
        music.music_turned_off = True
        music.sfx_enabled = False
    rng = random.Random(args.seed)
    settings = Settings()
    console = _Console()

    if args.mode is None:
        return _menu(console, settings, music, rng, args.save_dir)

    mode = MODES[args.mode]
    if args.load and not _save_exists(mode, args.save_dir):
        console.say(NO_SAVE)
        return 1
    settings = replace(settings, game_type=mode, load_game=args.load)
    _play(_new_session(settings, music, rng, args.save_dir), console)
    return 0


if __name__ == "__main__":
    sys.exit(main())