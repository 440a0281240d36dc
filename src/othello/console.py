import sys
from typing import Optional, TextIO

from othello.mode.base import BoardObserver
from othello.mode.game import GameMode
from othello.rules.board import (
    BLACK,
    COLS,
    ROWS,
    WHITE,
    Coord,
    Grid,
    color_name,
    coords_to_fields,
    field_to_coord,
)

QUIT_COMMANDS = ["q", "quit", "exit"]


class ConsoleObserver(BoardObserver):
    def __init__(self, output: Optional[TextIO] = None) -> None:
        self.output = output or sys.stdout

    def render_board(self, board: Grid, valid_moves: list[Coord]) -> None:
        print("+-a-b-c-d-e-f-g-h-+", file=self.output)
        for row in range(ROWS):
            line = f"{row + 1} "

            for col in range(COLS):
                square = board[row][col]

                if square == BLACK:
                    line += "○ "
                elif square == WHITE:
                    line += "● "
                elif (row, col) in valid_moves:
                    line += "· "
                else:
                    line += "  "

            print(line + "|", file=self.output)
        print("+-----------------+", file=self.output)

    def render_current_player(self, color: int) -> None:
        print(f"Turn: {color_name(color)}", file=self.output)

    def render_pieces_counts(self, black: int, white: int) -> None:
        print(f"Black: {black}  White: {white}", file=self.output)

    def render_winner(self, winner: Optional[int]) -> None:
        if winner is None:
            print("Game over! It's a tie.", file=self.output)
        else:
            print(f"Game over! {color_name(winner)} wins!", file=self.output)


def play_console(
    mode: GameMode,
    input_stream: Optional[TextIO] = None,
    output: Optional[TextIO] = None,
) -> None:
    input_stream = input_stream or sys.stdin
    output = output or sys.stdout

    mode.add_observer(ConsoleObserver(output))
    mode.refresh()

    engine = mode.engine

    while not engine.is_finished():
        color = color_name(engine.get_current_player())
        print(f"{color} to move: ", end="", file=output)

        line = input_stream.readline()
        if not line:
            # Input ran out
            print(file=output)
            break

        text = line.strip()

        if text.lower() in QUIT_COMMANDS:
            break

        try:
            row, col = field_to_coord(text)
        except ValueError as e:
            print(e, file=output)
            continue

        if not engine.is_valid_move(row, col):
            valid = coords_to_fields(engine.get_valid_moves())
            print(f"Invalid move {text}, try one of: {valid}", file=output)
            continue

        mode.on_move(row, col)
