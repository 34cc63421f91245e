"""
Board module for Othello.
Holds the immutable board value and the cell/player constants.
"""
from typing import Iterable, List, NamedTuple, Sequence, Tuple
import numpy as np


class StoneCount(NamedTuple):
    """Number of stones of each colour on a board."""
    black: int
    white: int


class Board:
    """
    Immutable 8x8 Othello board.

    The cells live in a read-only numpy array. Every transform returns a new
    Board; an existing instance is never modified, so it can be shared freely
    between readers.
    """

    # Board dimensions
    SIZE = 8
    BOARD_SIZE = SIZE * SIZE

    # Cell / player constants
    EMPTY = 0
    BLACK = 1  # Player 1, moves first
    WHITE = 2  # Player 2

    # Winner value for a tied game
    DRAW = 0

    SYMBOLS = {EMPTY: '.', BLACK: 'B', WHITE: 'W'}

    __slots__ = ('_cells',)

    def __init__(self, cells=None):
        """
        Create a board from an 8x8 array-like of cell values.

        Args:
            cells: 8x8 array-like of EMPTY/BLACK/WHITE. An empty board if None.
        """
        if cells is None:
            array = np.zeros((self.SIZE, self.SIZE), dtype=np.int8)
        else:
            source = np.asarray(cells)
            if not np.issubdtype(source.dtype, np.integer):
                raise ValueError(f"Board cells must be integers, got dtype {source.dtype}")
            array = np.array(source, dtype=np.int8)
        if array.shape != (self.SIZE, self.SIZE):
            raise ValueError(f"Board must be {self.SIZE}x{self.SIZE}, got shape {array.shape}")
        if not np.isin(array, (self.EMPTY, self.BLACK, self.WHITE)).all():
            raise ValueError("Board cells must be EMPTY, BLACK or WHITE")
        array.setflags(write=False)
        self._cells = array

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> 'Board':
        """
        Build a board from eight strings using '.', 'B' and 'W'.

        Whitespace inside a row is ignored, so rows may be written as
        "B W . ." for readability.
        """
        lookup = {symbol: value for value, symbol in cls.SYMBOLS.items()}
        cells = []
        for row in rows:
            symbols = row.replace(' ', '')
            try:
                cells.append([lookup[symbol] for symbol in symbols])
            except KeyError as exc:
                raise ValueError(f"Unknown board symbol {exc.args[0]!r} in row {row!r}") from None
        if len(cells) != cls.SIZE or any(len(row) != cls.SIZE for row in cells):
            raise ValueError(f"Expected {cls.SIZE} rows of {cls.SIZE} cells")
        return cls(cells)

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the cell array."""
        return self._cells

    def __getitem__(self, position: Tuple[int, int]) -> int:
        row, col = position
        return int(self._cells[row, col])

    @classmethod
    def in_bounds(cls, row: int, col: int) -> bool:
        """Check whether (row, col) lies on the board."""
        return 0 <= row < cls.SIZE and 0 <= col < cls.SIZE

    def is_empty(self, row: int, col: int) -> bool:
        return self._cells[row, col] == self.EMPTY

    def with_stones(self, positions: Iterable[Tuple[int, int]], player: int) -> 'Board':
        """Return a new board with every position in `positions` set to `player`."""
        cells = self._cells.copy()
        for row, col in positions:
            cells[row, col] = player
        return Board(cells)

    def count(self) -> StoneCount:
        """Tally stones by colour."""
        black = int(np.count_nonzero(self._cells == self.BLACK))
        white = int(np.count_nonzero(self._cells == self.WHITE))
        return StoneCount(black, white)

    def empty_count(self) -> int:
        return int(np.count_nonzero(self._cells == self.EMPTY))

    def to_rows(self) -> List[str]:
        """Inverse of from_rows."""
        return [''.join(self.SYMBOLS[int(value)] for value in row) for row in self._cells]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return np.array_equal(self._cells, other._cells)

    def __hash__(self) -> int:
        return hash(self._cells.tobytes())

    def __repr__(self) -> str:
        return f"Board.from_rows({self.to_rows()!r})"

    def __str__(self) -> str:
        """Return a string representation of the board with coordinates."""
        lines = ['  ' + ' '.join(str(col) for col in range(self.SIZE))]
        for i, row in enumerate(self.to_rows()):
            lines.append(f"{i} " + ' '.join(row))
        black, white = self.count()
        lines.append(f"Score - Black: {black}, White: {white}")
        return "\n".join(lines)


def player_name(player: int) -> str:
    """Human-readable name for a player or winner value."""
    if player == Board.BLACK:
        return 'Black'
    if player == Board.WHITE:
        return 'White'
    if player == Board.DRAW:
        return 'Draw'
    raise ValueError(f"Unknown player: {player!r}")


def parse_player(name: str) -> int:
    """Parse 'black'/'white' (or 'b'/'w') into a player constant."""
    value = name.strip().lower()
    if value in ('black', 'b'):
        return Board.BLACK
    if value in ('white', 'w'):
        return Board.WHITE
    raise ValueError(f"Unknown colour: {name!r} (expected 'black' or 'white')")
