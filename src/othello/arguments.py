from __future__ import annotations

from typing import Optional


class GameArguments:
    def __init__(self, moves: list[str]) -> None:
        self.moves = moves


class WindowArguments:
    def __init__(self, square_size: Optional[int], frame_rate: Optional[int]) -> None:
        self.square_size = square_size
        self.frame_rate = frame_rate


class Arguments:
    def __init__(self, game: GameArguments, window: WindowArguments) -> None:
        self.game = game
        self.window = window

    @classmethod
    def empty(cls) -> Arguments:
        return Arguments(GameArguments([]), WindowArguments(None, None))
