"""Running totals of finished games, kept in a small binary file."""

from __future__ import annotations

import struct
from dataclasses import astuple, dataclass
from pathlib import Path
from typing import Union

from tabuleiro.game import GameMode

_LAYOUT = struct.Struct("<8i4d")


@dataclass
class History:
    """Counts of games, wins and draws, and extreme durations per mode."""

    pvp_games: int = 0
    pvc_games: int = 0
    p1_wins_pvp: int = 0
    p2_wins_pvp: int = 0
    player_wins_pvc: int = 0
    computer_wins_pvc: int = 0
    draws_pvp: int = 0
    draws_pvc: int = 0
    longest_pvp: float = 0.0
    shortest_pvp: float = 0.0
    longest_pvc: float = 0.0
    shortest_pvc: float = 0.0

    def record(self, mode, winner: int, duration: float) -> None:
        """Count one finished game. A winner other than 1 or 2 is a draw."""
        if GameMode(mode) is GameMode.PVP:
            self.pvp_games += 1
            if winner == 1:
                self.p1_wins_pvp += 1
            elif winner == 2:
                self.p2_wins_pvp += 1
            else:
                self.draws_pvp += 1
            self.longest_pvp = max(self.longest_pvp, duration)
            if self.shortest_pvp == 0 or duration < self.shortest_pvp:
                self.shortest_pvp = duration
        else:
            self.pvc_games += 1
            if winner == 1:
                self.player_wins_pvc += 1
            elif winner == 2:
                self.computer_wins_pvc += 1
            else:
                self.draws_pvc += 1
            self.longest_pvc = max(self.longest_pvc, duration)
            if self.shortest_pvc == 0 or duration < self.shortest_pvc:
                self.shortest_pvc = duration

    def render(self) -> str:
        lines = [
            "=== Histórico ===",
            f"Partidas PvP: {self.pvp_games}",
            f"Vitórias Jogador 1 (PvP): {self.p1_wins_pvp}",
            f"Vitórias Jogador 2 (PvP): {self.p2_wins_pvp}",
            f"Empates PvP: {self.draws_pvp}",
            f"Partidas PvC: {self.pvc_games}",
            f"Vitórias Jogador (PvC): {self.player_wins_pvc}",
            f"Vitórias Computador (PvC): {self.computer_wins_pvc}",
            f"Empates PvC: {self.draws_pvc}",
        ]
        return "\n".join(lines) + "\n"

    def save(self, path: Union[str, Path]) -> None:
        Path(path).write_bytes(_LAYOUT.pack(*astuple(self)))

    @classmethod
    def load(cls, path: Union[str, Path]) -> "History":
        """Read saved totals; a missing file gives empty totals."""
        try:
            data = Path(path).read_bytes()
        except FileNotFoundError:
            return cls()
        if len(data) != _LAYOUT.size:
            raise ValueError(f"history file has {len(data)} bytes, expected {_LAYOUT.size}")
        return cls(*_LAYOUT.unpack(data))