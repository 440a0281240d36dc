import pygame
from pygame.event import Event
from typing import Optional

from othello import config
from othello.arguments import Arguments
from othello.mode.base import BoardObserver
from othello.mode.game import GameMode
from othello.rules.board import (
    BLACK,
    COLS,
    EMPTY,
    ROWS,
    WHITE,
    Coord,
    Grid,
    color_name,
    new_board,
)

COLOR_WHITE_DISC = (255, 255, 255)
COLOR_BLACK_DISC = (0, 0, 0)
COLOR_BACKGROUND = (0, 128, 0)
COLOR_GRID_LINE = (0, 96, 0)


class NonMoveEvent(Exception):
    pass


def get_move_from_event(event: Event, square_size: int) -> Coord:
    if event.type != pygame.MOUSEBUTTONDOWN:
        raise NonMoveEvent

    if event.button != pygame.BUTTON_LEFT:
        raise NonMoveEvent

    x, y = event.pos
    col: int = x // square_size
    row: int = y // square_size

    if not (row in range(ROWS) and col in range(COLS)):
        raise NonMoveEvent

    return row, col


class Window(BoardObserver):
    def __init__(self, args: Arguments, mode: GameMode) -> None:
        pygame.init()
        self.mode = mode

        self.square_size = args.window.square_size or config.SQUARE_SIZE
        self.frame_rate = args.window.frame_rate or config.FRAME_RATE
        self.disc_radius = self.square_size // 2 - 5
        self.move_indicator_radius = self.square_size // 8

        self.board: Grid = new_board()
        self.valid_moves: list[Coord] = []
        self.turn = BLACK
        self.counts = (0, 0)
        self.winner_text: Optional[str] = None

        width = self.square_size * COLS
        height = self.square_size * ROWS
        self.screen = pygame.display.set_mode((width, height))
        self.clock = pygame.time.Clock()

        self.mode.add_observer(self)
        self.mode.refresh()

    def render_board(self, board: Grid, valid_moves: list[Coord]) -> None:
        self.board = board
        self.valid_moves = valid_moves
        self.winner_text = None

    def render_current_player(self, color: int) -> None:
        self.turn = color

    def render_pieces_counts(self, black: int, white: int) -> None:
        self.counts = (black, white)

    def render_winner(self, winner: Optional[int]) -> None:
        if winner is None:
            self.winner_text = "tie"
        else:
            self.winner_text = f"{color_name(winner)} wins"

    def run(self) -> None:
        running = True

        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                    break

                try:
                    row, col = get_move_from_event(event, self.square_size)
                except NonMoveEvent:
                    continue

                self.mode.on_move(row, col)

            self.draw()
            self.clock.tick(self.frame_rate)

        pygame.quit()

    def get_square_center(self, row: int, col: int) -> tuple[int, int]:
        x = col * self.square_size + self.square_size // 2
        y = row * self.square_size + self.square_size // 2
        return (x, y)

    def draw_disc(self, row: int, col: int, color: tuple[int, int, int]) -> None:
        center = self.get_square_center(row, col)
        pygame.draw.circle(self.screen, color, center, self.disc_radius)

    def draw_move_indicator(
        self, row: int, col: int, color: tuple[int, int, int]
    ) -> None:
        center = self.get_square_center(row, col)
        pygame.draw.circle(self.screen, color, center, self.move_indicator_radius)

    def get_caption(self) -> str:
        black, white = self.counts
        caption = f"Othello - Black {black} White {white}"

        if self.winner_text is not None:
            return f"{caption} - Game over, {self.winner_text}"
        return f"{caption} - {color_name(self.turn)} to move"

    def draw(self) -> None:
        if self.turn == WHITE:
            turn_color = COLOR_WHITE_DISC
        else:
            turn_color = COLOR_BLACK_DISC

        self.screen.fill(COLOR_BACKGROUND)

        for row in range(ROWS):
            for col in range(COLS):
                rect = (
                    col * self.square_size,
                    row * self.square_size,
                    self.square_size,
                    self.square_size,
                )
                pygame.draw.rect(self.screen, COLOR_GRID_LINE, rect, 1)

                square = self.board[row][col]

                if square == WHITE:
                    self.draw_disc(row, col, COLOR_WHITE_DISC)
                elif square == BLACK:
                    self.draw_disc(row, col, COLOR_BLACK_DISC)
                elif square == EMPTY and (row, col) in self.valid_moves:
                    self.draw_move_indicator(row, col, turn_color)

        pygame.display.set_caption(self.get_caption())
        pygame.display.flip()
