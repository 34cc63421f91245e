"""
Othello game module.
This package contains the rules engine and the game session.
"""

from .board import Board, StoneCount, parse_player, player_name
from .rules import (
    DIRECTIONS, GameResult, check_game_end, count_stones, create_initial_board,
    flippable_stones, get_random_move, get_valid_moves, next_player, opponent,
    place_stone,
)
from .game import GameState, InvalidTransition, ReversiGame

__all__ = [
    'Board', 'StoneCount', 'parse_player', 'player_name',
    'DIRECTIONS', 'GameResult', 'check_game_end', 'count_stones', 'create_initial_board',
    'flippable_stones', 'get_random_move', 'get_valid_moves', 'next_player', 'opponent',
    'place_stone',
    'GameState', 'InvalidTransition', 'ReversiGame',
]
