from abc import ABC, abstractmethod

from tic_tac_toe.game import GameStatus, InProgress, Tied, Won
from tic_tac_toe.game_engine import GameEngine


def status_message(status: GameStatus) -> str:
    match status:
        case Won(mark, _):
            return f"Player {mark} wins!"
        case Tied():
            return "It's a tie!"
        case InProgress(next_mark):
            return f"Player {next_mark}'s turn"
        case _:
            msg = f"Unknown game status: {status!r}"
            raise TypeError(msg)


class Ui(ABC):
    def __init__(self, game_engine: GameEngine) -> None:
        self._game_engine = game_engine
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def run(self) -> None:
        self._running = True

    def _stop(self) -> None:
        self._running = False

    def _click_cell(self, index: int) -> None:
        # Filled cells and finished games are not clickable, nothing to forward.
        if not self._game_engine.game.is_cell_clickable(index):
            return
        self._game_engine.apply_move(index)

    def _reset_game(self) -> None:
        self._game_engine.reset()

    def on_board_updated(self) -> None:
        if not self._running:
            return
        self._render_board()
        self._show_status(status_message(self._game_engine.status))

    def _winning_line(self) -> tuple[int, ...]:
        status = self._game_engine.status
        return status.line if isinstance(status, Won) else ()

    @abstractmethod
    def _render_board(self) -> None:
        pass

    @abstractmethod
    def _show_status(self, message: str) -> None:
        pass
