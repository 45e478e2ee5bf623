import argparse
import logging
import threading
import time
from collections.abc import Iterable
from typing import TYPE_CHECKING

from tic_tac_toe.game_engine import GameEngine
from tic_tac_toe.ui_terminal import TerminalUi

if TYPE_CHECKING:
    from tic_tac_toe.ui import Ui


def _pygame_ui(game_engine: GameEngine) -> "Ui":
    from tic_tac_toe.ui_pygame import PygameUi  # noqa: PLC0415

    return PygameUi(game_engine)


def main() -> None:
    ui_choices = {"terminal": TerminalUi, "pygame": _pygame_ui}

    args = _parse_args(ui_choices.keys())

    _configure_logging(verbose=args.verbose)

    game_engine = GameEngine()
    uis: list[Ui] = [ui_choices[ui](game_engine) for ui in args.ui]
    for ui in uis:
        game_engine.add_board_updated_cb(ui.on_board_updated)

    ui_threads = [threading.Thread(target=ui.run, daemon=True) for ui in uis]

    for ui_thread in ui_threads:
        ui_thread.start()

    while not all(ui.running for ui in uis):
        if not all(ui_thread.is_alive() for ui_thread in ui_threads):
            return
        time.sleep(0.1)

    game_engine.start()

    # Closing any UI ends the program.
    while all(ui.running for ui in uis):
        time.sleep(0.1)


def _configure_logging(*, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _parse_args(ui_choices: Iterable[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="tic-tac-toe", description="Two-player tic tac toe")
    parser.add_argument("--ui", nargs="+", choices=list(ui_choices), default=["terminal"])
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()
    args.ui = list(dict.fromkeys(args.ui))
    return args


if __name__ == "__main__":
    main()
