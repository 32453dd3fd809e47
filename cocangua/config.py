"""Game modes, asset locations and the mutable game settings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class GameType(IntEnum):
    """The kinds of game that can be played."""

    CLASSIC = 1
    MODERN = 2
    AI = 3
    RACING = 4


OBJECT_FONT_SIZE = 40

# Seconds an animal takes to move one square.
ANIMAL_NORMAL_MOVE_TIME = 0.2

MENU_BACKGROUND = "/image/background_menu.jpg"
OPTION_BACKGROUND = "/image/background_option.jpg"
FLASH_BACKGROUND = "/image/flash.png"
ABOUT_BACKGROUND = "/image/about.jpg"
CLASSIC_GAME_BACKGROUND = "/image/Background_classic.png"
NEW_GAME_BACKGROUND = "/image/new-background-game.png"
GAME_OVER_BACKGROUND = "/image/gameover.png"
MINI_MENU = "/image/background_mini_menu.jpg"
MENU_BORDER = "/image/picture_border.png"
DRAW_WAY_IMAGE = "/image/draw_way.png"

ANIMAL_INIT_IMAGES = (
    "/image/animal/heo/heo2.png",
    "/image/animal/vit/vit.png",
    "/image/animal/ngua/horse.png",
    "/image/animal/cho/dog.png",
)
ANIMAL_INIT_PLISTS = (
    "/image/animal/heo/heo2.plist",
    "/image/animal/vit/vit.plist",
    "/image/animal/ngua/horse.plist",
    "/image/animal/cho/dog.plist",
)
TEAM_IMAGES = (
    "/image/animal/heo/pig1.png",
    "/image/animal/vit/Duck-1.png",
    "/image/animal/ngua/horse1.png",
    "/image/animal/cho/dog1.png",
)

DICE_PLIST = "/image/xucxac/xucxac.plist"
DICE_TEXTURE = "/image/xucxac/xucxac.png"

LOADER_PLIST = "/image/loader/AnimatedLoader.plist"
LOADER_TEXTURE = "/image/loader/AnimatedLoader.png"
LOADER_IMAGE = "IMG00000.png"

GAME_WIN_PLIST = "/image/gamewin/Gangnam.plist"
GAME_WIN_TEXTURE = "/image/gamewin/Gangnam.png"
GAME_WIN_IMAGE = "gw0.png"

FIREWORKS_PLIST = "/image/phao hoa/phaohoa.plist"
FIREWORKS_TEXTURE = "/image/phao hoa/phaohoa.png"
FIREWORKS_IMAGE = "1.png"

DISAPPEAR_EFFECT_PLIST = "/image/effect/effect.plist"
DISAPPEAR_EFFECT_TEXTURE = "/image/effect/effect.png"
DISAPPEAR_EFFECT_IMAGE = "move-effect-0.png"

LIGHTUP_GO_IMAGE = "/image/lighup/lightup.png"
LIGHTUP_GO_PLIST = "/image/lighup/lightup.plist"
LIGHTUP_GO_INIT_IMAGE = "/image/lighup/lightup1.png"

LIGHTUP_WAY_IMAGE = "/image/way/way.png"
LIGHTUP_WAY_PLIST = "/image/way/way.plist"
LIGHTUP_WAY_INIT_IMAGE = "/image/way/way1.png"

SELECT_IMAGE = "/image/select/select.png"
SELECT_PLIST = "/image/select/select.plist"
SELECT_INIT_IMAGE = "/image/select/select1.png"


@dataclass
class Settings:
    """The game mode in play and whether the next game is loaded from a save."""

    game_type: GameType = GameType.CLASSIC
    load_game: bool = False