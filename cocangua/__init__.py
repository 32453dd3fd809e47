"""Co Ca Ngua, a race board game for four teams, played in the terminal."""

__version__ = "1.0.0"

__all__ = [
    "ai",
    "ai_session",
    "board",
    "cli",
    "config",
    "game",
    "pieces",
    "rules",
    "saveload",
    "session",
    "sound",
]