# cocangua

Co Ca Ngua is the Vietnamese take on the classic race board game. Four
teams (Heo, Vit, Ngua and Cho: pig, duck, horse and dog) each bring four
pieces out of their stable, race them once around a 56-square track and move
them up a six-square home stretch. Rolling a double gives another roll;
landing on another team's piece sends it back to its stable.

## Playing

Start the game from a terminal:

    cocangua

The menu accepts a number or a name: Classic Game, AI Game, Racing Game,
Load Game, Option, About, Help and Exit.

- **Classic**: a piece leaves the stable on a double or on a 1 and a 6
  together. A move is not allowed if any piece stands on the squares it
  passes, or if a piece of the same team stands on the landing square.
- **Racing**: a piece leaves the stable whenever either die shows 1 or 6, or
  on a double. Pieces pass over others; only the landing square counts.
- **AI**: you play team 0 (Heo); the other three teams roll and move by
  themselves.

A piece that has gone round the track moves up its home stretch one square
at a time, on the same rolls that let a piece leave the stable.

During a game, type commands:

    roll          roll the dice
    skip          give up the roll
    select T U    pick unit U of team T
    go TAG        move the selected unit using a go button
    points        show the scores
    state         show the board state
    save          save the game
    help          show this help
    quit          back to the menu

After `select`, the state lists the go buttons on offer. Tag 0 leaves the
stable or moves up the home stretch; tag 1 moves by the first die, tag 2 by
the second and tag 3 by both.

Points are scored for bringing a piece out (200), for each square moved
(10), for knocking another piece back to its stable (250) and for each
square up the home stretch (100). A team wins when all four of its pieces
are home.

Command-line options:

- `--mode {ai,classic,racing}` starts a game straight away instead of the menu.
- `--load` resumes the saved game of that mode.
- `--save-dir DIR` sets where save files are kept (default: the current directory).
- `--seed N` seeds the dice.
- `--mute` switches music and sound off.

Each mode keeps its own save file: `classic.bin`, `racing.bin`, `ai.bin`
and `modern.bin`.

## Using the package

- `cocangua.board`: `Board` and `Point`, with the track, stables, start
  squares and home stretches.
- `cocangua.pieces`: `Unit` and `Team`, pieces, their moves and team scores.
- `cocangua.game`: `Game`, turn order, dice rules and what stands where.
- `cocangua.rules`: `ClassicRules` and `RacingRules`.
- `cocangua.ai`: the move rules of the computer player.
- `cocangua.session`: `GameSession`, a full game with dice, skipping,
  saving and loading, driven by a clock advanced with `advance(seconds)`.
- `cocangua.ai_session`: `AISession`, a game against the computer.
- `cocangua.saveload`: `SaveData`, `save`, `load`, `file_name` and `exists`.
- `cocangua.sound`: `Music`, with `SilentBackend` as the default engine.
- `cocangua.config`: `GameType` and `Settings`.
- `cocangua.cli`: `main`, the terminal front end.

For example, the start square of each team:

```python
from cocangua.board import Board

board = Board(600)
for team_no in range(4):
    print(team_no, board.start_location(team_no))
```

## What it does not do

- There is no graphical board; the game is played with typed commands.
- No sound is heard. `SilentBackend` only records which music and effects
  would be playing; another engine with the same methods can be passed to
  `Music`.
- Modern mode cannot be started from the menu, and a saved Modern game can
  be loaded but its pieces cannot be selected or moved.
- A resumed AI game is played as a plain game: every team is moved by hand.