import os
from dotenv import load_dotenv

from othello import PROJECT_ROOT

load_dotenv(PROJECT_ROOT / ".env")


def get_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default

    try:
        return int(raw)
    except ValueError:
        raise ValueError(f'Environment variable {name} must be an integer, got "{raw}"')


LOG_LEVEL = os.environ.get("OTHELLO_LOG_LEVEL", "WARNING").upper()

SQUARE_SIZE = get_int("OTHELLO_SQUARE_SIZE", 75)
FRAME_RATE = get_int("OTHELLO_FRAME_RATE", 60)
