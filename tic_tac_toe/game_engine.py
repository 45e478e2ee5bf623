import logging
import threading
from collections.abc import Callable

from tic_tac_toe import game as rules
from tic_tac_toe.game import Game, GameStatus

logger = logging.getLogger(__name__)


class GameEngine:
    """Holds the live game and notifies the UIs whenever it is replaced.

    Each UI runs in its own thread, so replacing the game is serialized by a lock.
    """

    def __init__(self) -> None:
        self._game = rules.new_game()
        self._lock = threading.Lock()
        self._board_updated_cbs: list[Callable[[], None]] = []

    @property
    def game(self) -> Game:
        return self._game

    @property
    def status(self) -> GameStatus:
        return self._game.status

    def add_board_updated_cb(self, callback: Callable[[], None]) -> None:
        self._board_updated_cbs.append(callback)

    def start(self) -> None:
        """Publish the initial board to every registered UI."""
        self._notify_board_updated()

    def apply_move(self, index: int) -> bool:
        """Apply a move for the current player.

        Returns False when the move was ignored (occupied cell or finished game).
        ContractViolation from an invalid index propagates to the caller.
        """
        with self._lock:
            updated = rules.apply_move(self._game, index)
            if updated is self._game:
                return False
            self._game = updated
        self._notify_board_updated()
        return True

    def reset(self) -> None:
        logger.info("Starting a new game")
        with self._lock:
            self._game = rules.reset()
        self._notify_board_updated()

    def _notify_board_updated(self) -> None:
        for callback in list(self._board_updated_cbs):
            callback()
