# ruff: noqa: T201

from tic_tac_toe.board import BOARD_SIZE, CELL_COUNT, get_available_cells
from tic_tac_toe.ui import Ui


class TerminalUi(Ui):
    def run(self) -> None:
        super().run()
        while self._running:
            self._get_input()
        print("Terminal UI stopped", flush=True)

    def _ask_for_move(self) -> None:
        if self._game_engine.game.is_over:
            print("Type 'reset' to play again or 'exit' to quit: ", end="", flush=True)
        else:
            print(f"Move (1-{CELL_COUNT}), 'reset' or 'exit': ", end="", flush=True)

    def _get_input(self) -> None:
        try:
            input_str = input().strip().lower()
        except (KeyboardInterrupt, EOFError):
            self._stop()
            return

        if not self._running:
            return

        match input_str:
            case "exit":
                self._stop()
                return
            case "reset":
                self._reset_game()
                return

        try:
            board_position = int(input_str)
        except ValueError:
            self._on_input_error("Not an integer")
            return

        if not (1 <= board_position <= CELL_COUNT):
            self._on_input_error(f"Not between 1 and {CELL_COUNT}")
            return

        index = board_position - 1
        game = self._game_engine.game
        if game.is_over:
            self._on_input_error("Game over")
            return
        if not game.is_cell_clickable(index):
            free = ", ".join(str(i + 1) for i in get_available_cells(game.board))
            self._on_input_error(f"Cell occupied, free cells: {free}")
            return

        self._click_cell(index)

    def _render_board(self) -> None:
        board = self._game_engine.game.board
        winning_line = self._winning_line()

        def _cell_value(index: int) -> str:
            value = board[index]
            text = value if value is not None else str(index + 1)
            return f"[{text}]" if index in winning_line else f" {text} "

        rows = []
        for r in range(BOARD_SIZE):
            start = r * BOARD_SIZE
            rows.append("|".join(_cell_value(start + i) for i in range(BOARD_SIZE)))

        separator = "\n---+---+---\n"
        output = separator.join(rows)
        print(f"\n{output}\n", flush=True)

    def _show_status(self, message: str) -> None:
        print(message, flush=True)
        self._ask_for_move()

    def _on_input_error(self, message: str) -> None:
        print(message, flush=True)
        self._ask_for_move()
