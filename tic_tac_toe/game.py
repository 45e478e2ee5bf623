"""Game state and rules.

A `Game` is an immutable value. Every rule operation returns a new `Game` (or the
same one when the move is ignored); callers replace the value they hold instead
of mutating it.
"""

import logging
from dataclasses import dataclass, field, replace
from typing import TypeAlias

from tic_tac_toe.board import (
    CELL_COUNT,
    MARKS,
    Board,
    Line,
    Mark,
    check_cell_index,
    empty_board,
    get_winning_line,
    is_full,
    other_mark,
)
from tic_tac_toe.exception import ContractViolation

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class InProgress:
    next_mark: Mark


@dataclass(frozen=True, slots=True)
class Won:
    mark: Mark
    line: Line


@dataclass(frozen=True, slots=True)
class Tied:
    pass


GameStatus: TypeAlias = InProgress | Won | Tied


@dataclass(frozen=True, slots=True)
class Game:
    board: Board = field(default_factory=empty_board)
    next_mark: Mark = "X"
    history: tuple[Board, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.board, tuple) or not isinstance(self.history, tuple):
            raise ContractViolation("Board and history must be tuples.")
        if len(self.board) != CELL_COUNT:
            msg = f"Board must have {CELL_COUNT} cells, got {len(self.board)}."
            raise ContractViolation(msg)
        if any(cell is not None and cell not in MARKS for cell in self.board):
            raise ContractViolation("Board cells must be None, 'X' or 'O'.")
        if self.next_mark not in MARKS:
            msg = f"Invalid next mark: {self.next_mark!r}."
            raise ContractViolation(msg)

    @property
    def status(self) -> GameStatus:
        return evaluate_status(self)

    @property
    def is_over(self) -> bool:
        return not isinstance(self.status, InProgress)

    def is_cell_clickable(self, index: int) -> bool:
        return is_cell_clickable(self, index)


def new_game() -> Game:
    return Game()


def reset() -> Game:
    return new_game()


def evaluate_status(game: Game) -> GameStatus:
    # Win is checked before fill: a move that fills the board and completes a line is a win.
    winner = get_winning_line(game.board)
    if winner is not None:
        mark, line = winner
        return Won(mark, line)
    if is_full(game.board):
        return Tied()
    return InProgress(game.next_mark)


def is_cell_clickable(game: Game, index: int) -> bool:
    check_cell_index(index)
    return game.board[index] is None and isinstance(evaluate_status(game), InProgress)


def apply_move(game: Game, index: int) -> Game:
    """Place the current mark on `index` and pass the turn.

    Moves on an occupied cell or after the game has ended are ignored and the
    same `game` is returned. An index outside 0-8 raises `ContractViolation`.
    """
    check_cell_index(index)

    if not isinstance(evaluate_status(game), InProgress):
        logger.debug("Ignoring move at cell %d: game is over", index)
        return game

    if game.board[index] is not None:
        logger.debug("Ignoring move at cell %d: cell occupied by %s", index, game.board[index])
        return game

    board = list(game.board)
    board[index] = game.next_mark
    updated = replace(
        game,
        board=tuple(board),
        next_mark=other_mark(game.next_mark),
        history=(*game.history, game.board),
    )
    logger.debug("Player %s played cell %d", game.next_mark, index)

    match updated.status:
        case Won(mark, line):
            logger.debug("Player %s won on line %s", mark, line)
        case Tied():
            logger.debug("Game tied")

    return updated
