import logging

from othello.arguments import Arguments
from othello.mode.base import BoardObserver
from othello.rules.board import field_to_coord
from othello.rules.engine import GameEngine

logger = logging.getLogger(__name__)


class GameMode:
    def __init__(self, args: Arguments) -> None:
        self.engine = GameEngine()
        self.observers: list[BoardObserver] = []

        for field in args.game.moves:
            row, col = field_to_coord(field)
            self.engine.make_move(row, col)

    def add_observer(self, observer: BoardObserver) -> None:
        self.observers.append(observer)

    def on_move(self, row: int, col: int) -> None:
        if self.engine.is_finished():
            logger.debug("Move after end of game, restarting")
            self.restart()
            return

        self.engine.make_move(row, col)
        self.refresh()

    def restart(self) -> None:
        self.engine.initialize()
        self.refresh()

    def refresh(self) -> None:
        board = self.engine.get_board()
        valid_moves = self.engine.get_valid_moves()
        color = self.engine.get_current_player()
        black, white = self.engine.count_pieces()
        finished = self.engine.is_finished()

        for observer in self.observers:
            observer.render_board(board, valid_moves)
            observer.render_current_player(color)
            observer.render_pieces_counts(black, white)

            if finished:
                observer.render_winner(self.engine.get_winner())
