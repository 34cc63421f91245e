"""
Script for running a series of games between two random computer players.
"""
import os
import argparse
import random

from src.arena import Arena, RandomPlayer
from src.config import Config, get_default_config
from src.logger import setup_logger


def main():
    parser = argparse.ArgumentParser(description='Run a series of random-vs-random Othello games')

    parser.add_argument('--config', type=str, default='configs/default_config.json',
                        help='Path to config file')
    parser.add_argument('--games', type=int, default=None,
                        help='Number of games to play')
    parser.add_argument('--no-swap', action='store_true',
                        help='Keep the same player on black for every game')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for reproducible series')

    # Output
    parser.add_argument('--output-dir', type=str, default=None,
                        help='Directory to save arena results')
    parser.add_argument('--verbose', action='store_true',
                        help='Print every move of every game')

    args = parser.parse_args()

    if os.path.exists(args.config):
        print(f"Loading configuration from {args.config}")
        config = Config.load(args.config)
    else:
        config = get_default_config()

    if args.games is not None:
        config.arena.num_games = args.games
    if args.no_swap:
        config.arena.swap_colors = False
    if args.seed is not None:
        config.seed = args.seed
    if args.output_dir is not None:
        config.arena.output_dir = args.output_dir
    if args.verbose:
        config.logging.verbose = True

    logger = setup_logger(config)

    # Two independent generators so each player's choices are reproducible on their own
    seed = config.seed
    rng_a = random.Random(None if seed is None else seed)
    rng_b = random.Random(None if seed is None else seed + 1)
    arena = Arena(RandomPlayer("random_a", rng_a), RandomPlayer("random_b", rng_b))

    print(f"Starting arena with {config.arena.num_games} games...")
    try:
        results = arena.run(num_games=config.arena.num_games,
                            swap_colors=config.arena.swap_colors,
                            verbose=config.logging.verbose)
    except KeyboardInterrupt:
        print("\nArena interrupted.")
        logger.close()
        return

    logger.log_metrics({
        'games': results['games_played'],
        'draws': results['draws'],
        'black_wins': results['wins_by_color']['black'],
        'white_wins': results['wins_by_color']['white'],
        'avg_black_stones': results['avg_black_stones'],
        'avg_white_stones': results['avg_white_stones'],
    })

    results_file = os.path.join(config.arena.output_dir, config.arena.results_file)
    arena.save_results(results_file)
    print(f"\nArena completed! Results saved to {results_file}")
    arena.print_summary()
    logger.close()


if __name__ == '__main__':
    main()
