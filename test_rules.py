"""
Tests for the Othello rules engine.
"""
from collections import Counter
import random

import pytest

from src.game.board import Board, StoneCount
from src.game.rules import (
    DIRECTIONS, check_game_end, count_stones, create_initial_board,
    flippable_stones, get_random_move, get_valid_moves, next_player, opponent,
    place_stone,
)

EMPTY_ROW = ". . . . . . . ."

# Black can capture along row 0; white has no legal reply anywhere
WHITE_MUST_PASS = Board.from_rows([
    "B W . . . . . .",
    EMPTY_ROW,
    EMPTY_ROW,
    EMPTY_ROW,
    EMPTY_ROW,
    EMPTY_ROW,
    EMPTY_ROW,
    ". . . . . W W B",
])


def test_initial_board():
    """Test the initial board setup."""
    board = create_initial_board()
    assert board[3, 3] == Board.WHITE
    assert board[3, 4] == Board.BLACK
    assert board[4, 3] == Board.BLACK
    assert board[4, 4] == Board.WHITE
    assert board.empty_count() == 60, "Should have 60 empty squares initially"
    assert count_stones(board) == StoneCount(black=2, white=2)
    print("Initial board test passed!")


def test_initial_boards_are_independent_values():
    assert create_initial_board() == create_initial_board()
    assert create_initial_board() is not create_initial_board()


def test_opponent():
    assert opponent(Board.BLACK) == Board.WHITE
    assert opponent(Board.WHITE) == Board.BLACK


def test_directions():
    assert len(DIRECTIONS) == 8
    assert (0, 0) not in DIRECTIONS
    assert len(set(DIRECTIONS)) == 8


def test_flippable_stones_single_run():
    board = create_initial_board()
    assert flippable_stones(board, 2, 3, Board.BLACK, (1, 0)) == [(3, 3)]
    assert flippable_stones(board, 2, 3, Board.BLACK, (0, 1)) == []


def test_flippable_stones_adjacent_own_stone():
    """A direction whose first cell is already the player's flips nothing."""
    board = create_initial_board()
    assert flippable_stones(board, 2, 4, Board.BLACK, (1, 0)) == []


def test_flippable_stones_long_run():
    board = Board.from_rows([
        ". W W W W W W B",
        EMPTY_ROW, EMPTY_ROW, EMPTY_ROW, EMPTY_ROW, EMPTY_ROW, EMPTY_ROW, EMPTY_ROW,
    ])
    assert flippable_stones(board, 0, 0, Board.BLACK, (0, 1)) == [(0, c) for c in range(1, 7)]


def test_flippable_stones_runs_off_edge():
    """A run of opponent stones that reaches the edge is not capturable."""
    board = Board.from_rows([
        ". W W W W W W W",
        EMPTY_ROW, EMPTY_ROW, EMPTY_ROW, EMPTY_ROW, EMPTY_ROW, EMPTY_ROW, EMPTY_ROW,
    ])
    assert flippable_stones(board, 0, 0, Board.BLACK, (0, 1)) == []
    assert flippable_stones(board, 0, 0, Board.BLACK, (-1, 0)) == []


def test_flippable_stones_gap_stops_run():
    board = Board.from_rows([
        ". W . B . . . .",
        EMPTY_ROW, EMPTY_ROW, EMPTY_ROW, EMPTY_ROW, EMPTY_ROW, EMPTY_ROW, EMPTY_ROW,
    ])
    assert flippable_stones(board, 0, 0, Board.BLACK, (0, 1)) == []


def test_flippable_stones_rejects_zero_direction():
    with pytest.raises(ValueError):
        flippable_stones(create_initial_board(), 2, 3, Board.BLACK, (0, 0))


def test_valid_moves_initial():
    """Black's valid moves in the initial position, in row-major order."""
    board = create_initial_board()
    assert get_valid_moves(board, Board.BLACK) == [(2, 3), (3, 2), (4, 5), (5, 4)]
    assert get_valid_moves(board, Board.WHITE) == [(2, 4), (3, 5), (4, 2), (5, 3)]
    print("Valid moves test passed!")


def test_valid_moves_empty_board():
    assert get_valid_moves(Board(), Board.BLACK) == []


def test_place_stone_flips():
    """Placing at (2, 3) flips (3, 3) and leaves the input board unchanged."""
    board = create_initial_board()
    new_board = place_stone(board, 2, 3, Board.BLACK)

    assert new_board is not None, "Should be a valid move"
    assert new_board[2, 3] == Board.BLACK
    assert new_board[3, 3] == Board.BLACK, "Should capture white piece"
    assert count_stones(new_board) == StoneCount(black=4, white=1)
    assert board == create_initial_board(), "Input board must not change"
    print("Place stone test passed!")


def test_place_stone_flips_several_directions():
    board = Board.from_rows([
        "B . B . . . . .",
        ". W W . . . . .",
        "B W . . . . . .",
        EMPTY_ROW, EMPTY_ROW, EMPTY_ROW, EMPTY_ROW, EMPTY_ROW,
    ])
    new_board = place_stone(board, 2, 2, Board.BLACK)
    assert new_board is not None
    # north (1,2), west (2,1) and north-west (1,1) are all captured
    assert new_board.to_rows()[:3] == ["B.B.....", ".BB.....", "BBB....."]
    assert count_stones(new_board) == StoneCount(black=7, white=0)


def test_place_stone_illegal_no_flips():
    """Placing at (0, 0) on the initial board flips nothing and fails."""
    board = create_initial_board()
    for _ in range(3):
        assert place_stone(board, 0, 0, Board.BLACK) is None
    assert board == create_initial_board()


def test_place_stone_occupied_or_off_board():
    board = create_initial_board()
    assert place_stone(board, 3, 3, Board.BLACK) is None
    assert place_stone(board, -1, 3, Board.BLACK) is None
    assert place_stone(board, 2, 8, Board.BLACK) is None
    assert place_stone(board, 8, 8, Board.WHITE) is None
    print("Occupied and off-board test passed!")


def test_place_stone_malformed_coordinates():
    """Non-integer coordinates are illegal moves, not crashes."""
    board = create_initial_board()
    for row, col in [(2.5, 3), (None, 3), ('2', 3), (2, 3.0), (2.0, 3)]:
        assert place_stone(board, row, col, Board.BLACK) is None, f"({row!r}, {col!r}) should be rejected"
    assert board == create_initial_board(), "Input board must not change"
    print("Malformed coordinates test passed!")


def test_game_not_over_at_start():
    result = check_game_end(create_initial_board(), Board.BLACK)
    assert not result.is_game_over
    assert result.winner is None
    assert result.scores == StoneCount(2, 2)


def test_forced_pass_is_not_game_over():
    """White cannot move but black can: the game continues."""
    assert get_valid_moves(WHITE_MUST_PASS, Board.WHITE) == []
    assert get_valid_moves(WHITE_MUST_PASS, Board.BLACK) != []

    result = check_game_end(WHITE_MUST_PASS, Board.WHITE)
    assert not result.is_game_over
    assert result.winner is None
    assert next_player(WHITE_MUST_PASS, Board.BLACK) == Board.BLACK
    print("Forced pass test passed!")


def test_next_player_alternates():
    board = place_stone(create_initial_board(), 2, 3, Board.BLACK)
    assert next_player(board, Board.BLACK) == Board.WHITE


def test_pass_pass_termination():
    """Neither side can move on a board with isolated stones."""
    board = Board.from_rows([
        "B . . . . . . .",
        EMPTY_ROW, EMPTY_ROW, EMPTY_ROW, EMPTY_ROW, EMPTY_ROW, EMPTY_ROW,
        ". . . . . . . W",
    ])
    result = check_game_end(board, Board.BLACK)
    assert result.is_game_over
    assert result.winner == Board.DRAW
    assert next_player(board, Board.BLACK) is None


def test_wipe_out_ends_game():
    board = Board().with_stones([(3, 3), (3, 4), (4, 4)], Board.WHITE)
    result = check_game_end(board, Board.BLACK)
    assert result.is_game_over
    assert result.winner == Board.WHITE
    assert result.scores == StoneCount(0, 3)


def test_full_board_black_wins():
    """A full board with 33 black and 31 white stones is a black win."""
    board = Board.from_rows(
        ["B B B B B B B B"] * 4
        + ["B W W W W W W W"]
        + ["W W W W W W W W"] * 3
    )
    result = check_game_end(board, Board.WHITE)
    assert result.is_game_over
    assert result.winner == Board.BLACK
    assert result.scores == StoneCount(black=33, white=31)
    print("Full board test passed!")


def test_full_board_draw():
    board = Board.from_rows(["B B B B B B B B"] * 4 + ["W W W W W W W W"] * 4)
    result = check_game_end(board, Board.BLACK)
    assert result.is_game_over
    assert result.winner == Board.DRAW


def test_random_move_empty():
    for _ in range(100):
        assert get_random_move([]) is None


def test_random_move_uses_module_random_by_default():
    moves = [(2, 3), (3, 2)]
    assert get_random_move(moves) in moves


def test_random_move_is_uniform():
    """Each candidate is picked with frequency close to 1/N."""
    rng = random.Random(1234)
    moves = [(2, 3), (3, 2), (4, 5), (5, 4)]
    trials = 12000
    counts = Counter(get_random_move(moves, rng) for _ in range(trials))

    assert set(counts) == set(moves)
    for move in moves:
        assert abs(counts[move] - trials / len(moves)) < 300, counts


def test_random_games_keep_invariants():
    """Play seeded random games and check the board invariants after every move."""
    rng = random.Random(7)
    for _ in range(20):
        board = create_initial_board()
        player = Board.BLACK
        while player is not None:
            moves = get_valid_moves(board, player)
            assert moves, "next_player must only hand the turn to a side that can move"
            assert all(board.is_empty(r, c) for r, c in moves)

            before = board
            move = get_random_move(moves, rng)
            board = place_stone(board, move[0], move[1], player)
            assert board is not None
            assert before != board
            assert before.count().black + before.count().white + 1 == board.count().black + board.count().white

            black, white = count_stones(board)
            assert black + white + board.empty_count() == 64
            player = next_player(board, player)

        result = check_game_end(board, Board.BLACK)
        assert result.is_game_over
        black, white = result.scores
        expected = Board.BLACK if black > white else Board.WHITE if white > black else Board.DRAW
        assert result.winner == expected


if __name__ == "__main__":
    print("Running Othello rules tests...\n")

    test_initial_board()
    test_valid_moves_initial()
    test_place_stone_flips()
    test_place_stone_occupied_or_off_board()
    test_place_stone_malformed_coordinates()
    test_forced_pass_is_not_game_over()
    test_full_board_black_wins()

    print("\nAll tests passed successfully!")
