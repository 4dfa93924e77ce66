"""Board state, rules and the computer player for the placement-and-move game."""

from __future__ import annotations

import json
import random
import time
from dataclasses import asdict, dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import Optional, Union

EMPTY = 0
PLAYER_ONE = 1
PLAYER_TWO = 2


class IllegalMoveError(ValueError):
    """Raised when a placement or a move breaks the rules."""


@dataclass(frozen=True)
class GameConfig:
    """Fixed settings of a game."""

    board_size: int = 5
    pieces_per_player: int = 3
    max_moves: int = 100
    history_file: str = "historico.dat"
    pvp_file: str = "save_pvp.dat"
    pvc_file: str = "save_pvc.dat"


class GameMode(IntEnum):
    PVP = 0
    PVC = 1


class Phase(IntEnum):
    PLACEMENT = 0
    MOVEMENT = 1


def _empty_board(size: int) -> list[list[int]]:
    return [[EMPTY] * size for _ in range(size)]


@dataclass
class GameState:
    """The board and everything that describes a game in progress."""

    config: GameConfig = field(default_factory=GameConfig)
    board: list[list[int]] = field(default_factory=list)
    pieces_left_p1: int = 0
    pieces_left_p2: int = 0
    pieces_left_computer: int = 0
    current_player: int = PLAYER_ONE
    phase: Phase = Phase.PLACEMENT
    moves_made: int = 0
    started_at: float = 0.0
    paused_time: float = 0.0
    paused: bool = False
    mode: GameMode = GameMode.PVP

    def __post_init__(self) -> None:
        size = self.config.board_size
        if not self.board:
            self.board = _empty_board(size)
        elif len(self.board) != size or any(len(row) != size for row in self.board):
            raise ValueError(f"board must be {size}x{size}")
        self.phase = Phase(self.phase)
        self.mode = GameMode(self.mode)

    def reset(self, mode, rng: Optional[random.Random] = None) -> None:
        """Start a fresh game in the given mode with a random first player."""
        self.mode = GameMode(mode)
        pieces = self.config.pieces_per_player
        self.pieces_left_p1 = pieces
        self.pieces_left_p2 = pieces if self.mode is GameMode.PVP else 0
        self.pieces_left_computer = pieces if self.mode is GameMode.PVC else 0
        self.current_player = (rng or random).randint(PLAYER_ONE, PLAYER_TWO)
        self.phase = Phase.PLACEMENT
        self.moves_made = 0
        self.started_at = time.time()
        self.paused_time = 0.0
        self.paused = False
        self.board = _empty_board(self.config.board_size)

    def _in_bounds(self, x: int, y: int) -> bool:
        size = self.config.board_size
        return 0 <= x < size and 0 <= y < size

    def can_place(self, x: int, y: int) -> bool:
        """True when (x, y) is on the board and empty."""
        return self._in_bounds(x, y) and self.board[x][y] == EMPTY

    def place(self, x: int, y: int) -> None:
        """Put a piece of the current player on (x, y)."""
        if not self.can_place(x, y):
            raise IllegalMoveError(f"cannot place a piece at ({x}, {y})")
        self.board[x][y] = self.current_player
        if self.current_player == PLAYER_ONE:
            self.pieces_left_p1 -= 1
        elif self.mode is GameMode.PVP:
            self.pieces_left_p2 -= 1
        else:
            self.pieces_left_computer -= 1

    def can_move(self, x_from: int, y_from: int, x_to: int, y_to: int) -> bool:
        """True when the current player may step from one cell to an orthogonal neighbour."""
        if not (self._in_bounds(x_from, y_from) and self._in_bounds(x_to, y_to)):
            return False
        if self.board[x_from][y_from] != self.current_player:
            return False
        if self.board[x_to][y_to] != EMPTY:
            return False
        dx, dy = abs(x_from - x_to), abs(y_from - y_to)
        return (dx, dy) in ((1, 0), (0, 1))

    def move(self, x_from: int, y_from: int, x_to: int, y_to: int) -> None:
        """Move the current player's piece one step."""
        if not self.can_move(x_from, y_from, x_to, y_to):
            raise IllegalMoveError(
                f"cannot move from ({x_from}, {y_from}) to ({x_to}, {y_to})"
            )
        self.board[x_to][y_to] = self.board[x_from][y_from]
        self.board[x_from][y_from] = EMPTY

    def is_win(self, x: int, y: int) -> bool:
        """True when the owner of (x, y) fills row x, column y or either diagonal."""
        if not self._in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is off the board")
        player = self.board[x][y]
        n = self.config.board_size
        board = self.board
        return (
            all(board[x][i] == player for i in range(n))
            or all(board[i][y] == player for i in range(n))
            or all(board[i][i] == player for i in range(n))
            or all(board[i][n - 1 - i] == player for i in range(n))
        )

    def is_draw(self) -> bool:
        return self.moves_made >= self.config.max_moves

    def switch_player(self) -> None:
        self.current_player = PLAYER_TWO if self.current_player == PLAYER_ONE else PLAYER_ONE

    def render(self) -> str:
        """The board as text, one row per line."""
        rows = ("".join(f"{cell} " for cell in row) for row in self.board)
        return "Tabuleiro:\n" + "".join(f"{row}\n" for row in rows)

    def save(self, path: Union[str, Path]) -> None:
        """Write the whole state to a file."""
        data = {
            "config": asdict(self.config),
            "board": self.board,
            "pieces_left_p1": self.pieces_left_p1,
            "pieces_left_p2": self.pieces_left_p2,
            "pieces_left_computer": self.pieces_left_computer,
            "current_player": self.current_player,
            "phase": int(self.phase),
            "moves_made": self.moves_made,
            "started_at": self.started_at,
            "paused_time": self.paused_time,
            "paused": self.paused,
            "mode": int(self.mode),
        }
        Path(path).write_text(json.dumps(data), encoding="utf-8")

    @classmethod
    def load(cls, path: Union[str, Path]) -> "GameState":
        """Read a state written by save."""
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        try:
            config = GameConfig(**data.pop("config"))
            return cls(config=config, **data)
        except (KeyError, TypeError) as exc:
            raise ValueError(f"malformed save file: {path}") from exc


def computer_move(state: GameState) -> Optional[tuple[int, ...]]:
    """Play one simple turn for the computer.

    While it has pieces to place, it takes the first free cell. Otherwise it
    steps the first of its pieces that has a free neighbour, trying up, down,
    left and right. Returns the cell placed on or the (from, to) coordinates
    moved, or None when nothing was played.
    """
    n = state.config.board_size
    if state.pieces_left_computer > 0:
        for i in range(n):
            for j in range(n):
                if state.can_place(i, j):
                    state.place(i, j)
                    return (i, j)
        return None

    for i, row in enumerate(state.board):
        for j, cell in enumerate(row):
            if cell != PLAYER_TWO:
                continue
            for di, dj in ((-1, 0), (1, 0), (0, -1), (0, 1)):
                ti, tj = i + di, j + dj
                if 0 <= ti < n and 0 <= tj < n and state.board[ti][tj] == EMPTY:
                    if not state.can_move(i, j, ti, tj):
                        return None
                    state.move(i, j, ti, tj)
                    return (i, j, ti, tj)
    return None