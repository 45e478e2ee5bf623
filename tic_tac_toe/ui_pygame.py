from typing import Final

import pygame

from tic_tac_toe.board import BOARD_SIZE, Board, cell_index, cell_position, empty_board
from tic_tac_toe.game_engine import GameEngine
from tic_tac_toe.ui import Ui


class PygameUi(Ui):
    TITLE: Final = "Tic Tac Toe"
    BOARD_PIXELS: Final = 480
    CELL_SIZE: Final = BOARD_PIXELS // BOARD_SIZE
    FOOTER_HEIGHT: Final = 100
    WINDOW_SIZE: Final = (BOARD_PIXELS, BOARD_PIXELS + FOOTER_HEIGHT)
    LINE_WIDTH: Final = 4
    FPS: Final = 30

    BUTTON_SIZE: Final = (160, 40)
    BUTTON_CENTER: Final = (BOARD_PIXELS // 2, BOARD_PIXELS + 68)
    STATUS_CENTER: Final = (BOARD_PIXELS // 2, BOARD_PIXELS + 24)

    PRIMARY_COLOR: Final = (74, 144, 226)  # X marks, buttons
    SECONDARY_COLOR: Final = (255, 255, 255)  # Background
    ACCENT_COLOR: Final = (245, 166, 35)  # O marks, highlights
    HIGHLIGHT_COLOR: Final = (254, 246, 233)
    LINE_COLOR: Final = (208, 215, 222)
    TEXT_COLOR: Final = (33, 37, 41)

    def __init__(self, game_engine: GameEngine) -> None:
        super().__init__(game_engine)
        self._board: Board = empty_board()
        self._winning_cells: tuple[int, ...] = ()
        self._status = ""
        self._button_rect = pygame.Rect((0, 0), self.BUTTON_SIZE)
        self._button_rect.center = self.BUTTON_CENTER

    def run(self) -> None:
        pygame.init()
        self._screen = pygame.display.set_mode(self.WINDOW_SIZE)
        pygame.display.set_caption(self.TITLE)

        self._font = pygame.font.SysFont(None, 96)
        self._status_font = pygame.font.SysFont(None, 36)
        self._button_font = pygame.font.SysFont(None, 28)

        super().run()
        self._main_loop()

    def _main_loop(self) -> None:
        clock = pygame.time.Clock()
        while self._running:
            clock.tick(self.FPS)
            self._handle_events()
            self._render()
        pygame.quit()

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            match event.type:
                case pygame.QUIT:
                    self._stop()
                case pygame.MOUSEBUTTONDOWN:
                    self._on_click(event.pos)

    def _on_click(self, pos: tuple[int, int]) -> None:
        if self._button_rect.collidepoint(pos):
            self._reset_game()
            return
        index = self._cell_at(pos)
        if index is not None:
            self._click_cell(index)

    def _cell_at(self, pos: tuple[int, int]) -> int | None:
        x, y = pos
        if not (0 <= x < self.BOARD_PIXELS) or not (0 <= y < self.BOARD_PIXELS):
            return None
        return cell_index(y // self.CELL_SIZE, x // self.CELL_SIZE)

    def _render_board(self) -> None:
        self._board = self._game_engine.game.board
        self._winning_cells = self._winning_line()

    def _show_status(self, message: str) -> None:
        self._status = message

    def _render(self) -> None:
        self._screen.fill(self.SECONDARY_COLOR)
        self._draw_highlights()
        self._draw_grid()
        self._draw_marks()
        self._draw_footer()
        pygame.display.flip()

    def _cell_rect(self, index: int) -> pygame.Rect:
        row, col = cell_position(index)
        return pygame.Rect(col * self.CELL_SIZE, row * self.CELL_SIZE, self.CELL_SIZE, self.CELL_SIZE)

    def _draw_highlights(self) -> None:
        for index in self._winning_cells:
            pygame.draw.rect(self._screen, self.HIGHLIGHT_COLOR, self._cell_rect(index))
            pygame.draw.rect(self._screen, self.ACCENT_COLOR, self._cell_rect(index), self.LINE_WIDTH)

    def _draw_grid(self) -> None:
        for i in range(1, BOARD_SIZE):
            pygame.draw.line(
                self._screen,
                self.LINE_COLOR,
                (0, i * self.CELL_SIZE),
                (self.BOARD_PIXELS, i * self.CELL_SIZE),
                self.LINE_WIDTH,
            )
            pygame.draw.line(
                self._screen,
                self.LINE_COLOR,
                (i * self.CELL_SIZE, 0),
                (i * self.CELL_SIZE, self.BOARD_PIXELS),
                self.LINE_WIDTH,
            )
        pygame.draw.line(
            self._screen,
            self.LINE_COLOR,
            (0, self.BOARD_PIXELS),
            (self.BOARD_PIXELS, self.BOARD_PIXELS),
            self.LINE_WIDTH,
        )

    def _draw_marks(self) -> None:
        for index, value in enumerate(self._board):
            if value is None:
                continue
            color = self.PRIMARY_COLOR if value == "X" else self.ACCENT_COLOR
            text = self._font.render(value, True, color)  # noqa: FBT003
            rect = text.get_rect(center=self._cell_rect(index).center)
            self._screen.blit(text, rect)

    def _draw_footer(self) -> None:
        status_text = self._status_font.render(self._status, True, self.TEXT_COLOR)  # noqa: FBT003
        self._screen.blit(status_text, status_text.get_rect(center=self.STATUS_CENTER))

        pygame.draw.rect(self._screen, self.PRIMARY_COLOR, self._button_rect, border_radius=8)
        button_text = self._button_font.render("Reset Game", True, self.SECONDARY_COLOR)  # noqa: FBT003
        self._screen.blit(button_text, button_text.get_rect(center=self._button_rect.center))
