"""
Rules engine for Othello.

Pure functions over immutable boards: legal moves, stone flipping, turn/pass
resolution and end-of-game scoring. The only impure operation is
get_random_move, which draws from a random source.
"""
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple
import operator
import random

from .board import Board, StoneCount

Move = Tuple[int, int]

# The 8 compass directions as (row step, col step)
DIRECTIONS: Tuple[Move, ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


@dataclass(frozen=True)
class GameResult:
    """
    Snapshot of a board's end-of-game status.

    winner is Board.BLACK, Board.WHITE, Board.DRAW, or None while the game
    is still running.
    """
    is_game_over: bool
    winner: Optional[int]
    scores: StoneCount


def opponent(player: int) -> int:
    """Return the other colour."""
    return 3 - player  # Toggle between BLACK (1) and WHITE (2)


def create_initial_board() -> Board:
    """Return a board in the standard starting position."""
    return Board().with_stones([(3, 3), (4, 4)], Board.WHITE).with_stones([(3, 4), (4, 3)], Board.BLACK)


def flippable_stones(board: Board, row: int, col: int, player: int, direction: Move) -> List[Move]:
    """
    Opponent stones that a stone at (row, col) would flip along one direction.

    Args:
        board: Board to scan
        row: Row of the origin cell (not inspected itself)
        col: Column of the origin cell
        player: The player placing the stone
        direction: (row step, col step), one of DIRECTIONS

    Returns:
        Coordinates of the opponent run ended by one of `player`'s stones,
        or an empty list if the scan hits an empty cell or the board edge first.
    """
    dr, dc = direction
    if dr == 0 and dc == 0:
        raise ValueError("Direction must not be the zero vector")

    run: List[Move] = []
    r, c = row + dr, col + dc
    while Board.in_bounds(r, c):
        cell = board[r, c]
        if cell == Board.EMPTY:
            return []
        if cell == player:
            return run
        run.append((r, c))
        r += dr
        c += dc
    return []


def _stones_to_flip(board: Board, row: int, col: int, player: int) -> List[Move]:
    stones: List[Move] = []
    for direction in DIRECTIONS:
        stones.extend(flippable_stones(board, row, col, player, direction))
    return stones


def _is_valid_move(board: Board, row: int, col: int, player: int) -> bool:
    if not board.is_empty(row, col):
        return False
    return any(flippable_stones(board, row, col, player, direction) for direction in DIRECTIONS)


def get_valid_moves(board: Board, player: int) -> List[Move]:
    """
    Get all valid moves for the given player.

    Returns:
        List of (row, col) tuples in row-major order
    """
    return [
        (row, col)
        for row in range(Board.SIZE)
        for col in range(Board.SIZE)
        if _is_valid_move(board, row, col, player)
    ]


def place_stone(board: Board, row: int, col: int, player: int) -> Optional[Board]:
    """
    Play a stone for `player` at (row, col).

    Returns:
        A new board with the stone placed and all captured stones flipped,
        or None if the move is illegal (off the board, occupied, or flips
        nothing, or the coordinates are not integers). The input board is
        never modified.
    """
    try:
        row, col = operator.index(row), operator.index(col)
    except TypeError:
        return None
    if not Board.in_bounds(row, col) or not board.is_empty(row, col):
        return None

    stones = _stones_to_flip(board, row, col, player)
    if not stones:
        return None

    stones.append((row, col))
    return board.with_stones(stones, player)


def count_stones(board: Board) -> StoneCount:
    """Count black and white stones."""
    return board.count()


def _winner(scores: StoneCount) -> int:
    if scores.black > scores.white:
        return Board.BLACK
    if scores.white > scores.black:
        return Board.WHITE
    return Board.DRAW


def check_game_end(board: Board, current_player: int) -> GameResult:
    """
    Determine whether the game is over.

    The game ends when neither player can move, or when the board is full.
    This is a query only; it does not decide whose turn it is.
    """
    scores = count_stones(board)
    no_moves_left = (not get_valid_moves(board, current_player)
                     and not get_valid_moves(board, opponent(current_player)))
    board_full = scores.black + scores.white == Board.BOARD_SIZE

    if no_moves_left or board_full:
        return GameResult(is_game_over=True, winner=_winner(scores), scores=scores)
    return GameResult(is_game_over=False, winner=None, scores=scores)


def next_player(board: Board, mover: int) -> Optional[int]:
    """
    Resolve who moves after `mover` has just played on `board`.

    Returns:
        The opponent if they can move, `mover` again if the opponent must
        pass, or None if the game is over.
    """
    if check_game_end(board, mover).is_game_over:
        return None
    other = opponent(mover)
    if get_valid_moves(board, other):
        return other
    if get_valid_moves(board, mover):
        return mover
    return None


def get_random_move(valid_moves: Sequence[Move], rng: Optional[random.Random] = None) -> Optional[Move]:
    """
    Pick a move uniformly at random.

    Args:
        valid_moves: Candidate moves
        rng: Random source; the module-level generator if None

    Returns:
        One of `valid_moves`, or None if there are none
    """
    if not valid_moves:
        return None
    rng = rng or random
    return valid_moves[rng.randrange(len(valid_moves))]
