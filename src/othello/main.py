import logging
import os
import typer
from typing import Annotated, Optional

from othello import config
from othello.arguments import Arguments, GameArguments, WindowArguments
from othello.console import play_console
from othello.mode.game import GameMode

os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "hide"

from othello.window import Window  # noqa:E402

app = typer.Typer()


@app.callback()
def setup_logging() -> None:
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def console(
    moves: Annotated[list[str], typer.Option("-m")] = [],
) -> None:
    args = Arguments(GameArguments(moves), WindowArguments(None, None))
    play_console(GameMode(args))


@app.command()
def gui(
    moves: Annotated[list[str], typer.Option("-m")] = [],
    square_size: Annotated[Optional[int], typer.Option("-s")] = None,
    frame_rate: Annotated[Optional[int], typer.Option("-r")] = None,
) -> None:
    args = Arguments(GameArguments(moves), WindowArguments(square_size, frame_rate))
    mode = GameMode(args)
    Window(args, mode).run()


if __name__ == "__main__":
    app()
