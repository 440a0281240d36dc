from typing import Optional

from othello.rules.board import Coord, Grid


class BoardObserver:
    """
    Presentation side of a game: anything that shows the state of a GameEngine.

    The engine never calls observers itself, GameMode pushes state to them after
    every event.
    """

    def render_board(self, board: Grid, valid_moves: list[Coord]) -> None:
        raise NotImplementedError

    def render_current_player(self, color: int) -> None:
        raise NotImplementedError

    def render_pieces_counts(self, black: int, white: int) -> None:
        raise NotImplementedError

    def render_winner(self, winner: Optional[int]) -> None:
        raise NotImplementedError
