from typing import Final, Literal, TypeAlias

from tic_tac_toe.exception import ContractViolation

BOARD_SIZE: Final = 3
CELL_COUNT: Final = BOARD_SIZE * BOARD_SIZE

Mark: TypeAlias = Literal["X", "O"]
Cell: TypeAlias = Mark | None
Board: TypeAlias = tuple[Cell, ...]
Line: TypeAlias = tuple[int, int, int]

MARKS: Final[tuple[Mark, Mark]] = ("X", "O")

# Order matters: the first complete line wins.
WINNING_LINES: Final[tuple[Line, ...]] = (
    (0, 1, 2),  # Rows
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),  # Columns
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),  # Diagonals
    (2, 4, 6),
)


def empty_board() -> Board:
    return (None,) * CELL_COUNT


def other_mark(mark: Mark) -> Mark:
    return "O" if mark == "X" else "X"


def check_cell_index(index: int) -> None:
    # bool is an int subclass, but True/False are never meant as cell indices.
    if isinstance(index, bool) or not isinstance(index, int):
        msg = f"Cell index must be an int, got {type(index).__name__}."
        raise ContractViolation(msg)
    if not (0 <= index < CELL_COUNT):
        msg = f"Cell index {index} out of range 0-{CELL_COUNT - 1}."
        raise ContractViolation(msg)


def get_winning_line(board: Board) -> tuple[Mark, Line] | None:
    """Return the winning mark and its line, or None if no line is complete."""
    for line in WINNING_LINES:
        a, b, c = line
        mark = board[a]
        if mark is not None and mark == board[b] == board[c]:
            return mark, line
    return None


def is_full(board: Board) -> bool:
    return all(cell is not None for cell in board)


def get_available_cells(board: Board) -> list[int]:
    return [i for i, cell in enumerate(board) if cell is None]


def cell_position(index: int) -> tuple[int, int]:
    check_cell_index(index)
    return divmod(index, BOARD_SIZE)


def cell_index(row: int, col: int) -> int:
    if not (0 <= row < BOARD_SIZE) or not (0 <= col < BOARD_SIZE):
        msg = f"Position ({row}, {col}) out of bounds."
        raise ContractViolation(msg)
    return row * BOARD_SIZE + col
