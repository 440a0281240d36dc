import pytest
from typing import Any, Optional

from othello.arguments import Arguments, GameArguments, WindowArguments
from othello.mode.base import BoardObserver
from othello.mode.game import GameMode
from othello.rules.board import BLACK, WHITE, Coord, Grid, start_board


class RecordingObserver(BoardObserver):
    def __init__(self) -> None:
        self.calls: list[tuple[str, Any]] = []

    def render_board(self, board: Grid, valid_moves: list[Coord]) -> None:
        self.calls.append(("board", [list(row) for row in board]))
        self.calls.append(("valid_moves", valid_moves))

    def render_current_player(self, color: int) -> None:
        self.calls.append(("current_player", color))

    def render_pieces_counts(self, black: int, white: int) -> None:
        self.calls.append(("counts", (black, white)))

    def render_winner(self, winner: Optional[int]) -> None:
        self.calls.append(("winner", winner))

    def last(self, name: str) -> Any:
        return [value for key, value in self.calls if key == name][-1]

    def names(self) -> list[str]:
        return [key for key, _ in self.calls]


def args_with_moves(moves: list[str]) -> Arguments:
    return Arguments(GameArguments(moves), WindowArguments(None, None))


@pytest.fixture
def observer() -> RecordingObserver:
    return RecordingObserver()


@pytest.fixture
def mode(observer: RecordingObserver) -> GameMode:
    mode = GameMode(Arguments.empty())
    mode.add_observer(observer)
    return mode


def test_base_observer_is_abstract() -> None:
    observer = BoardObserver()

    with pytest.raises(NotImplementedError):
        observer.render_board(start_board(), [])

    with pytest.raises(NotImplementedError):
        observer.render_winner(None)


def test_refresh(mode: GameMode, observer: RecordingObserver) -> None:
    mode.refresh()

    assert observer.names() == ["board", "valid_moves", "current_player", "counts"]
    assert observer.last("board") == start_board()
    assert observer.last("valid_moves") == [(2, 3), (3, 2), (4, 5), (5, 4)]
    assert observer.last("current_player") == BLACK
    assert observer.last("counts") == (2, 2)


def test_on_move(mode: GameMode, observer: RecordingObserver) -> None:
    mode.on_move(2, 3)

    assert observer.last("current_player") == WHITE
    assert observer.last("counts") == (4, 1)
    assert observer.last("valid_moves") == [(2, 2), (2, 4), (4, 2)]
    assert "winner" not in observer.names()


def test_on_move_invalid_still_refreshes(
    mode: GameMode, observer: RecordingObserver
) -> None:
    mode.on_move(0, 0)

    assert observer.last("board") == start_board()
    assert observer.last("current_player") == BLACK


def test_finished_game_reports_winner(
    mode: GameMode, observer: RecordingObserver
) -> None:
    board = mode.engine.get_board()
    for row in board:
        row[:] = [WHITE] * 8

    mode.refresh()

    assert observer.last("winner") == WHITE
    assert observer.last("valid_moves") == []


def test_move_after_finished_game_restarts(
    mode: GameMode, observer: RecordingObserver
) -> None:
    board = mode.engine.get_board()
    for row in board:
        row[:] = [BLACK] * 8

    mode.on_move(0, 0)

    assert mode.engine.get_board() == start_board()
    assert mode.engine.get_current_player() == BLACK
    assert observer.last("counts") == (2, 2)


def test_opening_moves_from_arguments() -> None:
    mode = GameMode(args_with_moves(["d3", "C3"]))

    assert mode.engine.get_current_player() == BLACK
    assert mode.engine.count_pieces() == (3, 3)
    assert mode.engine.get_board()[2][2] == WHITE


def test_opening_moves_invalid_field() -> None:
    with pytest.raises(ValueError):
        GameMode(args_with_moves(["z9"]))


def test_restart(mode: GameMode, observer: RecordingObserver) -> None:
    mode.on_move(2, 3)
    mode.restart()

    assert mode.engine.get_board() == start_board()
    assert observer.last("current_player") == BLACK
