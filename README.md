# tabuleiro

The rules of a small board game, a simple computer player, saved games,
running statistics and a text menu. The board is 5×5 by default and each
side has three pieces to place.

## The rules as coded

`tabuleiro.game.GameState` holds the board: a list of rows, where `0` is an
empty cell, `1` is player 1 and `2` is player 2 or the computer.

- `can_place(x, y)` / `place(x, y)`: a piece of `current_player` goes on an
  empty cell inside the board.
- `can_move(x_from, y_from, x_to, y_to)` / `move(...)`: the current player's
  piece steps one cell up, down, left or right, onto an empty cell.
- `place` and `move` raise `tabuleiro.game.IllegalMoveError` (a `ValueError`)
  when the rules forbid the placement or the move.
- `is_win(x, y)`: true when the owner of cell `(x, y)` fills row `x`,
  column `y` or either of the two diagonals. It raises `IndexError` for a
  cell off the board.
- `is_draw()`: true when `moves_made` has reached `config.max_moves`
  (100 by default).
- `switch_player()` passes the turn; `reset(mode, rng)` starts a fresh game
  in `GameMode.PVP` or `GameMode.PVC`, draws the first player at random and
  empties the board.
- `render()` returns the board as text.

Settings live in the frozen dataclass `GameConfig` (`board_size`,
`pieces_per_player`, `max_moves` and the default file names).

### The computer player

`tabuleiro.game.computer_move(state)` plays one turn as piece `2`. While the
computer still has pieces to place, it takes the first free cell, scanning
row by row. Afterwards it moves the first of its pieces that has a free
neighbour, trying up, down, left and right in that order. It returns the
cell it placed on, or `(x_from, y_from, x_to, y_to)` for a move, or `None`
when it played nothing (also when it is not the computer's turn to move).

### Saving a game

`GameState.save(path)` writes the whole state as JSON; `GameState.load(path)`
reads it back and raises `ValueError` for a malformed file.

## Statistics

`tabuleiro.history.History` counts, for each mode, the games played, the wins
of each side, the draws, and the longest and shortest durations in seconds.
`record(mode, winner, duration)` counts one game; a winner other than `1` or
`2` is a draw. `render()` returns the totals as text. `save(path)` writes a
fixed-size binary file (eight little-endian 32-bit integers followed by four
doubles); `load(path)` returns empty totals when the file does not exist and
raises `ValueError` when its size is wrong.

`tabuleiro.cli.finish_game(state, history, winner, now)` records a finished
game, measuring the duration from `state.started_at` to `now` (the current
time when `now` is omitted), and returns the closing message.

## The command

```
pip install .
tabuleiro
```

The menu reads one number per line:

```
1. Jogar PvP      - start a new player-against-player game
2. Jogar PvC      - start a new player-against-computer game
3. Tutorial       - show a short explanation of the rules
4. Histórico      - show the saved statistics
5. Sair           - quit
```

Any other input prints an error and shows the menu again. The screen is
cleared with the `clear` command before each menu.

Options:

- `--history FILE`: statistics file (default `historico.dat` in the current
  directory). It is loaded at start-up and saved when you quit or when input
  ends.
- `--no-clear`: do not clear the screen before the menu.
- `--seed N`: seed for the draw of the first player.

## What it does not do

The command does not play a game through. Choosing 1 or 2 sets up a new
game and announces it, then returns to the menu; there is no turn-by-turn
play at the terminal, no graphical board and no saving of games from the
menu. Turn order, phase changes, move counting and deciding the winner are
left to the code that uses `GameState`, `computer_move` and `finish_game`.

## Using it from Python

```python
import random
from tabuleiro.cli import finish_game
from tabuleiro.game import GameMode, GameState, computer_move
from tabuleiro.history import History

state = GameState()
state.reset(GameMode.PVC, random.Random(0))
state.current_player = 1

state.place(2, 2)
state.switch_player()
print(computer_move(state))   # (0, 0)
print(state.render())

state.save("save_pvc.dat")
restored = GameState.load("save_pvc.dat")

history = History()
print(finish_game(restored, history, 1))
print(history.render())
```

## Running the tests

```
pip install .[test]
pytest
```