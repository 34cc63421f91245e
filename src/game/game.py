"""
Othello game session.
Tracks whose turn it is and drives the rules engine as a single state machine.
"""
from enum import Enum
from typing import List, Optional, Tuple
import logging
import random

from .board import Board, player_name
from .rules import (
    Move, check_game_end, create_initial_board, get_random_move,
    get_valid_moves, next_player, opponent, place_stone,
)

logger = logging.getLogger(__name__)

MODES = ('pvp', 'pvc', 'cvc')


class GameState(Enum):
    HUMAN_TURN = 'human_turn'
    CPU_TURN = 'cpu_turn'
    GAME_OVER = 'game_over'


class InvalidTransition(RuntimeError):
    """Raised when a session method is called in a state that does not allow it."""


class ReversiGame:
    """
    A single Othello game between two sides, each either human or CPU.

    The board itself is immutable; the session replaces it after every
    accepted move. State only changes in response to the rules engine's
    return values:

        HUMAN_TURN --make_move--> HUMAN_TURN | CPU_TURN | GAME_OVER
        CPU_TURN --begin_cpu_turn--> CPU_TURN (thinking)
                 --complete_cpu_turn--> HUMAN_TURN | CPU_TURN | GAME_OVER
    """

    def __init__(self, mode: str = 'pvp', human_color: int = Board.BLACK,
                 rng: Optional[random.Random] = None):
        """
        Initialize a new game.

        Args:
            mode: 'pvp' (two humans), 'pvc' (human vs CPU) or 'cvc' (CPU vs CPU)
            human_color: Colour played by the human in 'pvc' mode
            rng: Random source for CPU moves
        """
        if mode not in MODES:
            raise ValueError(f"Unknown mode {mode!r}, expected one of {MODES}")
        if human_color not in (Board.BLACK, Board.WHITE):
            raise ValueError(f"Unknown colour: {human_color!r}")

        self.mode = mode
        self.human_color = human_color
        self.rng = rng
        self.reset()

    def reset(self) -> None:
        """Start a new game from the initial position."""
        self.board = create_initial_board()
        self.current_player = Board.BLACK  # Black moves first
        self.result = check_game_end(self.board, self.current_player)
        self.cpu_thinking = False
        self.move_count = 0
        self.passes = 0
        self.state = self._turn_state(self.current_player)

    @property
    def cpu_players(self) -> Tuple[int, ...]:
        """Colours controlled by the computer."""
        if self.mode == 'pvc':
            return (opponent(self.human_color),)
        if self.mode == 'cvc':
            return (Board.BLACK, Board.WHITE)
        return ()

    def is_cpu(self, player: int) -> bool:
        return player in self.cpu_players

    def is_game_over(self) -> bool:
        return self.state is GameState.GAME_OVER

    @property
    def winner(self) -> Optional[int]:
        return self.result.winner

    def _turn_state(self, player: int) -> GameState:
        return GameState.CPU_TURN if self.is_cpu(player) else GameState.HUMAN_TURN

    def valid_moves(self) -> List[Move]:
        """Legal moves for the player to move, empty while the CPU thinks or once the game is over."""
        if self.is_game_over() or self.cpu_thinking:
            return []
        return get_valid_moves(self.board, self.current_player)

    def _apply(self, row: int, col: int) -> bool:
        """Place a stone for the current player and advance the turn."""
        new_board = place_stone(self.board, row, col, self.current_player)
        if new_board is None:
            return False

        mover = self.current_player
        self.board = new_board
        self.move_count += 1

        following = next_player(self.board, mover)
        if following is None:
            self.result = check_game_end(self.board, mover)
            self.state = GameState.GAME_OVER
            black, white = self.result.scores
            logger.info("Game over after %d moves: %s (Black %d - White %d)",
                        self.move_count, player_name(self.result.winner), black, white)
            return True

        if following == mover:
            self.passes += 1
            logger.info("%s has no moves, %s plays again",
                        player_name(opponent(mover)), player_name(mover))

        self.current_player = following
        self.result = check_game_end(self.board, following)
        self.state = self._turn_state(following)
        return True

    def make_move(self, row: int, col: int) -> bool:
        """
        Make a human move.

        Returns:
            bool: True if the move was accepted, False if it was illegal or
            it is not a human's turn
        """
        if self.state is not GameState.HUMAN_TURN or self.cpu_thinking:
            return False
        return self._apply(row, col)

    def begin_cpu_turn(self) -> None:
        """Enter the CPU 'thinking' substate."""
        if self.state is not GameState.CPU_TURN:
            raise InvalidTransition(f"Cannot start a CPU turn in state {self.state.value}")
        self.cpu_thinking = True

    def complete_cpu_turn(self) -> Move:
        """
        Choose and play a random legal move for the CPU.

        Returns:
            The move played
        """
        if self.state is not GameState.CPU_TURN or not self.cpu_thinking:
            raise InvalidTransition("complete_cpu_turn called without begin_cpu_turn")
        self.cpu_thinking = False

        move = get_random_move(get_valid_moves(self.board, self.current_player), self.rng)
        if move is None:
            raise InvalidTransition(f"{player_name(self.current_player)} has no legal move")
        self._apply(*move)
        return move

    def play_cpu_turn(self) -> Move:
        """Begin and complete a CPU turn without delay."""
        self.begin_cpu_turn()
        return self.complete_cpu_turn()

    def __str__(self) -> str:
        """String representation of the game state."""
        lines = [str(self.board)]
        if self.is_game_over():
            if self.result.winner == Board.DRAW:
                lines.append("Game over! It's a draw!")
            else:
                lines.append(f"Game over! {player_name(self.result.winner)} wins!")
        else:
            side = " (CPU)" if self.is_cpu(self.current_player) else ""
            lines.append(f"Current player: {player_name(self.current_player)}{side}")
        return "\n".join(lines)
