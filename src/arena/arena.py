"""
Arena for running series of games between computer players.
"""
import json
import logging
import os
import random
import time
from datetime import datetime
from typing import Dict, Optional
from tqdm import tqdm

from ..game import Board, GameResult, ReversiGame, get_random_move

logger = logging.getLogger(__name__)


class RandomPlayer:
    """A computer player that picks uniformly among the legal moves."""

    def __init__(self, name: str = "random", rng: Optional[random.Random] = None):
        """
        Initialize a random player.

        Args:
            name: Unique identifier for the player
            rng: Random source (the module-level generator if None)
        """
        self.name = name
        self.rng = rng

    def get_move(self, game: ReversiGame):
        """Get the next move for the current game state."""
        return get_random_move(game.valid_moves(), self.rng)


class Arena:
    """Plays games between two players and tallies the outcomes."""

    def __init__(self, player_a: RandomPlayer, player_b: RandomPlayer):
        """
        Initialize the arena.

        Args:
            player_a: Plays black in the first game
            player_b: Plays white in the first game
        """
        if player_a.name == player_b.name:
            raise ValueError(f"Players need distinct names, got {player_a.name!r} twice")
        self.player_a = player_a
        self.player_b = player_b
        self.results: Optional[Dict] = None

    def play_game(self, black: RandomPlayer, white: RandomPlayer, verbose: bool = False) -> GameResult:
        """
        Play a single game.

        Args:
            black: Player taking black (moves first)
            white: Player taking white
            verbose: Whether to print the board after every move

        Returns:
            The final GameResult
        """
        # Both sides are driven from here, so the session treats them as humans
        game = ReversiGame(mode='pvp')
        players = {Board.BLACK: black, Board.WHITE: white}

        while not game.is_game_over():
            player = players[game.current_player]
            move = player.get_move(game)
            if move is None or not game.make_move(*move):
                raise RuntimeError(f"{player.name} produced an illegal move: {move}")
            if verbose:
                print(f"{player.name} plays at {move}")
                print(game)

        return game.result

    def run(self, num_games: int = 100, swap_colors: bool = True, verbose: bool = False) -> Dict:
        """
        Play a series of games.

        Args:
            num_games: Number of games to play
            swap_colors: Alternate which player takes black
            verbose: Whether to print every game

        Returns:
            Dictionary with the series summary
        """
        if num_games < 1:
            raise ValueError("num_games must be at least 1")

        names = [self.player_a.name, self.player_b.name]
        results = {
            'games_played': 0,
            'wins': {name: 0 for name in names},
            'wins_by_color': {'black': 0, 'white': 0},
            'draws': 0,
            'games': [],
            'start_time': time.time(),
        }
        black_total = 0
        white_total = 0

        for game_idx in tqdm(range(num_games), desc="Arena", disable=verbose):
            if swap_colors and game_idx % 2 == 1:
                black, white = self.player_b, self.player_a
            else:
                black, white = self.player_a, self.player_b

            result = self.play_game(black, white, verbose=verbose)
            black_total += result.scores.black
            white_total += result.scores.white
            results['games_played'] += 1

            if result.winner == Board.BLACK:
                winner_name = black.name
                results['wins_by_color']['black'] += 1
            elif result.winner == Board.WHITE:
                winner_name = white.name
                results['wins_by_color']['white'] += 1
            else:
                winner_name = None
                results['draws'] += 1
            if winner_name is not None:
                results['wins'][winner_name] += 1

            results['games'].append({
                'black': black.name,
                'white': white.name,
                'winner': winner_name,
                'black_stones': result.scores.black,
                'white_stones': result.scores.white,
            })
            logger.debug("Game %d: %s (black) %d - %d %s (white)", game_idx + 1,
                         black.name, result.scores.black, result.scores.white, white.name)

        results['end_time'] = time.time()
        results['duration'] = results['end_time'] - results['start_time']
        results['avg_black_stones'] = black_total / num_games
        results['avg_white_stones'] = white_total / num_games

        logger.info("Arena finished: %d games, wins %s, draws %d",
                    results['games_played'], results['wins'], results['draws'])
        self.results = results
        return results

    def print_summary(self):
        """Print the outcome of the last series."""
        if self.results is None:
            print("No games played yet")
            return
        played = self.results['games_played']
        print("\nArena Summary:")
        print("Player                  Wins   Win rate")
        print("----------------------  -----  --------")
        for name, wins in self.results['wins'].items():
            print(f"{name:22s}  {wins:5d}  {wins / played:8.1%}")
        print(f"{'draws':22s}  {self.results['draws']:5d}  {self.results['draws'] / played:8.1%}")
        print(f"Average stones - Black: {self.results['avg_black_stones']:.2f}, "
              f"White: {self.results['avg_white_stones']:.2f}")

    def save_results(self, filepath: str):
        """Save the last series summary to a JSON file."""
        if self.results is None:
            raise RuntimeError("No results to save, call run() first")
        os.makedirs(os.path.dirname(os.path.abspath(filepath)), exist_ok=True)
        data = dict(self.results, saved_at=datetime.now().isoformat())
        with open(filepath, 'w') as f:
            json.dump(data, f, indent=2)
