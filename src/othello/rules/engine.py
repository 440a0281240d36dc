from __future__ import annotations

import logging
from typing import Optional

from othello.rules.board import (
    BLACK,
    COLS,
    EMPTY,
    NEIGHBOR_OFFSETS,
    ROWS,
    WHITE,
    Coord,
    Grid,
    color_name,
    coord_to_field,
    is_on_board,
    opponent,
    start_board,
)

logger = logging.getLogger(__name__)


class InvalidMove(Exception):
    pass


class InvalidSquare(ValueError):
    pass


class GameEngine:
    """
    GameEngine owns the board and the player to move, and applies the rules of Othello.

    Illegal moves are ignored: the board and the player to move stay unchanged.
    Coordinates outside the board are a programming error and raise InvalidSquare.
    """

    def __init__(self) -> None:
        self.board: Grid = []
        self.current_player = BLACK
        self.initialize()

    def __repr__(self) -> str:
        return f"GameEngine({self.board}, {self.current_player})"

    def initialize(self) -> None:
        self.board = start_board()
        self.current_player = BLACK

    def get_neighbor_offsets(self) -> list[Coord]:
        return list(NEIGHBOR_OFFSETS)

    def get_board(self) -> Grid:
        """
        Returns the live grid, not a copy.

        Writing to it bypasses all rule checks, which is only meant for setting up
        positions in tests. Everything else should treat it as read-only.
        """
        return self.board

    def get_current_player(self) -> int:
        return self.current_player

    def is_valid_move(self, row: int, col: int) -> bool:
        self._check_on_board(row, col)

        if self.board[row][col] != EMPTY:
            return False

        return bool(self._get_flips(row, col, self.current_player))

    def get_valid_moves(self) -> list[Coord]:
        return self._get_moves(self.current_player)

    def has_moves(self, color: int) -> bool:
        return any(
            self.board[row][col] == EMPTY and self._get_flips(row, col, color)
            for row in range(ROWS)
            for col in range(COLS)
        )

    def make_move(self, row: int, col: int) -> None:
        if not self.is_valid_move(row, col):
            logger.debug(
                "Ignoring invalid move %s for %s",
                coord_to_field((row, col)),
                color_name(self.current_player),
            )
            return

        mover = self.current_player
        self.flip(row, col)
        self.current_player = opponent(mover)

        if self.has_moves(self.current_player):
            return

        if self.has_moves(mover):
            logger.debug("%s has no moves and passes", color_name(self.current_player))
            self.current_player = mover
            return

        black, white = self.count_pieces()
        logger.info("No moves left for either player, black %d white %d", black, white)

    def flip(self, row: int, col: int) -> None:
        self._check_on_board(row, col)

        if self.board[row][col] != EMPTY:
            raise InvalidMove

        flipped = self._get_flips(row, col, self.current_player)

        if not flipped:
            raise InvalidMove

        self.board[row][col] = self.current_player
        for flip_row, flip_col in flipped:
            self.board[flip_row][flip_col] = self.current_player

    def is_game_over(self) -> bool:
        return all(square != EMPTY for board_row in self.board for square in board_row)

    def is_finished(self) -> bool:
        if self.is_game_over():
            return True
        return not (self.has_moves(BLACK) or self.has_moves(WHITE))

    def count_pieces(self) -> tuple[int, int]:
        black = sum(board_row.count(BLACK) for board_row in self.board)
        white = sum(board_row.count(WHITE) for board_row in self.board)
        return black, white

    def get_winner(self) -> Optional[int]:
        """
        Returns the color with the most discs, or None when counts are equal.

        This is only the final result once is_finished() is true, before that it is
        just whoever is ahead.
        """
        black, white = self.count_pieces()

        if black > white:
            return BLACK
        if white > black:
            return WHITE
        return None

    def _check_on_board(self, row: int, col: int) -> None:
        if not is_on_board(row, col):
            raise InvalidSquare(f"Square ({row}, {col}) is off the board")

    def _get_moves(self, color: int) -> list[Coord]:
        moves: list[Coord] = []
        for row in range(ROWS):
            for col in range(COLS):
                if self.board[row][col] == EMPTY and self._get_flips(row, col, color):
                    moves.append((row, col))
        return moves

    def _get_flips(self, row: int, col: int, color: int) -> list[Coord]:
        flipped: list[Coord] = []
        for d_row, d_col in NEIGHBOR_OFFSETS:
            flipped += self._get_line_flips(row, col, d_row, d_col, color)
        return flipped

    def _get_line_flips(
        self, row: int, col: int, d_row: int, d_col: int, color: int
    ) -> list[Coord]:
        # Discs captured when walking from (row, col) in one direction.
        flipped_line: list[Coord] = []

        line_row, line_col = row + d_row, col + d_col

        while True:
            if not is_on_board(line_row, line_col):
                return []

            square = self.board[line_row][line_col]

            if square == color:
                return flipped_line

            if square != opponent(color):
                return []

            flipped_line.append((line_row, line_col))
            line_row += d_row
            line_col += d_col
