from __future__ import annotations

ROWS = 8
COLS = 8

BLACK = -1
WHITE = 1
EMPTY = 0

# Order matters only for the order in which directions are scanned.
NEIGHBOR_OFFSETS = [
    (-1, 0),
    (1, 0),
    (0, -1),
    (0, 1),
    (-1, -1),
    (-1, 1),
    (1, -1),
    (1, 1),
]

Coord = tuple[int, int]
Grid = list[list[int]]


def opponent(color: int) -> int:
    assert color in [BLACK, WHITE]
    return -color


def color_name(color: int) -> str:
    if color == BLACK:
        return "Black"
    if color == WHITE:
        return "White"
    raise ValueError(f"Not a player color: {color}")


def new_board() -> Grid:
    return [[EMPTY] * COLS for _ in range(ROWS)]


def start_board() -> Grid:
    board = new_board()
    board[3][3] = board[4][4] = WHITE
    board[3][4] = board[4][3] = BLACK
    return board


def is_on_board(row: int, col: int) -> bool:
    return row in range(ROWS) and col in range(COLS)


def coord_to_field(coord: Coord) -> str:
    row, col = coord
    if not is_on_board(row, col):
        raise ValueError(f"Square {coord} is off the board")
    return "abcdefgh"[col] + "12345678"[row]


def coords_to_fields(coords: list[Coord]) -> str:
    return " ".join(coord_to_field(coord) for coord in coords)


def field_to_coord(field: str) -> Coord:
    if len(field) != 2:
        raise ValueError(f'Invalid field length "{len(field)}"')

    field = field.lower()

    if not ("a" <= field[0] <= "h" and "1" <= field[1] <= "8"):
        raise ValueError(f'Invalid field "{field}"')

    col = ord(field[0]) - ord("a")
    row = ord(field[1]) - ord("1")
    return row, col
