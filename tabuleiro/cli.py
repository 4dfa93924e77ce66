"""Text menu that starts games and shows the tutorial and the saved totals."""

from __future__ import annotations

import argparse
import random
import subprocess
import sys
import time
from typing import Optional, Sequence

from tabuleiro.game import GameConfig, GameMode, GameState
from tabuleiro.history import History

_MENU = (
    "=== JOGO DE TABULEIRO ===\n"
    "1. Jogar PvP\n"
    "2. Jogar PvC\n"
    "3. Tutorial\n"
    "4. Histórico\n"
    "5. Sair\n"
    "Escolha uma opção: "
)

_TUTORIAL = (
    "=== Tutorial ===\n"
    "O objetivo do jogo é alinhar suas peças ou capturar as do adversário.\n"
    "Durante a fase de posicionamento, coloque suas peças no tabuleiro.\n"
    "Depois, movimente-as conforme as regras.\n"
    "Boa sorte!\n"
)


def menu_text() -> str:
    """The main menu, ending with the prompt for an option."""
    return _MENU


def tutorial_text() -> str:
    """A short explanation of the rules."""
    return _TUTORIAL


def finish_game(
    state: GameState, history: History, winner: int, now: Optional[float] = None
) -> str:
    """Record a finished game in the history and return the closing message."""
    if now is None:
        now = time.time()
    duration = now - state.started_at
    history.record(state.mode, winner, duration)
    if winner == 1:
        outcome = "Jogador 1 venceu!"
    elif winner == 2:
        outcome = "Jogador 2/Computador venceu!"
    else:
        outcome = "Empate!"
    return f"Jogo finalizado! {outcome}\n"


def _clear_screen() -> None:
    try:
        subprocess.run(["clear"], check=False)
    except OSError:
        pass


def _read_option() -> Optional[int]:
    """Read one option from standard input; None at end of input."""
    try:
        line = input()
    except EOFError:
        return None
    try:
        return int(line.strip())
    except ValueError:
        return -1


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    config = GameConfig()
    parser = argparse.ArgumentParser(description="Jogo de tabuleiro em modo texto.")
    parser.add_argument(
        "--history",
        default=config.history_file,
        help="file that keeps the totals of finished games",
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="do not clear the screen before the menu",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the first player draw")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the menu loop until the player chooses to leave or input ends."""
    args = _parse_args(argv)
    state = GameState(config=GameConfig(history_file=args.history))
    history = History.load(args.history)
    rng = random.Random(args.seed)

    running = True
    while running:
        if not args.no_clear:
            _clear_screen()
        print(menu_text(), end="", flush=True)
        option = _read_option()
        if option is None:
            print()
            break
        if option == 1:
            state.reset(GameMode.PVP, rng)
            print("Iniciando jogo PvP...")
        elif option == 2:
            state.reset(GameMode.PVC, rng)
            print("Iniciando jogo PvC...")
        elif option == 3:
            print(tutorial_text(), end="")
        elif option == 4:
            print(history.render(), end="")
        elif option == 5:
            running = False
            print("Saindo do jogo...")
        else:
            print("Opção inválida! Tente novamente.")

    history.save(args.history)
    return 0


if __name__ == "__main__":
    sys.exit(main())