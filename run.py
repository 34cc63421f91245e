"""
Play Othello in the terminal.
"""
import os
import sys
import time
import random
from pathlib import Path

# Add src directory to path
sys.path.append(str(Path(__file__).parent.absolute()))

from src.config import Config, get_default_config
from src.game import ReversiGame, parse_player, player_name
from src.game.game import MODES
from src.logger import setup_logger


def read_move(game: ReversiGame):
    """Prompt until the user enters 'row col' or quits. Returns None on quit."""
    hints = game.valid_moves()
    while True:
        raw = input(f"{player_name(game.current_player)} to move {hints} (row col, 'q' to quit): ").strip()
        if raw.lower() in ('q', 'quit', 'exit'):
            return None
        parts = raw.replace(',', ' ').split()
        if len(parts) != 2 or not all(part.lstrip('-').isdigit() for part in parts):
            print("Enter a move as two numbers, e.g. '2 3'")
            continue
        return int(parts[0]), int(parts[1])


def play(game: ReversiGame, cpu_delay: float) -> bool:
    """
    Run one game to completion.

    Returns:
        bool: False if the user quit before the end
    """
    print(game)
    while not game.is_game_over():
        if game.is_cpu(game.current_player):
            game.begin_cpu_turn()
            print(f"CPU ({player_name(game.current_player)}) is thinking...")
            time.sleep(cpu_delay)
            mover = game.current_player
            row, col = game.complete_cpu_turn()
            print(f"CPU ({player_name(mover)}) plays {row} {col}")
        else:
            move = read_move(game)
            if move is None:
                return False
            if not game.make_move(*move):
                print(f"Illegal move: {move[0]} {move[1]}")
                continue
        print()
        print(game)

    black, white = game.result.scores
    print(f"Final Score: Black {black} - White {white}")
    return True


def main():
    """Parse arguments and play games until the user stops."""
    import argparse

    parser = argparse.ArgumentParser(description='Play Othello in the terminal')
    parser.add_argument('--config', type=str, default='configs/default_config.json',
                        help='Path to config file')
    parser.add_argument('--mode', choices=['pvp', 'pvc', 'cvc'], default=None,
                        help='pvp: two humans, pvc: human vs CPU, cvc: watch two CPUs')
    parser.add_argument('--color', type=str, default=None,
                        help="Colour played by the human in pvc mode ('black' or 'white')")
    parser.add_argument('--cpu-delay', type=float, default=None,
                        help='Seconds the CPU waits before moving')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for CPU moves')
    args = parser.parse_args()

    # Load configuration
    if os.path.exists(args.config):
        print(f"Loading configuration from {args.config}")
        config = Config.load(args.config)
    else:
        config = get_default_config()

    if args.mode is not None:
        config.game.mode = args.mode
    if args.color is not None:
        config.game.human_color = args.color
    if args.cpu_delay is not None:
        config.game.cpu_delay = args.cpu_delay
    if args.seed is not None:
        config.seed = args.seed

    try:
        human_color = parse_player(config.game.human_color)
    except ValueError as e:
        parser.error(str(e))

    if config.game.mode not in MODES:
        parser.error(f"Unknown mode {config.game.mode!r}, expected one of {MODES}")

    logger = setup_logger(config)
    rng = random.Random(config.seed)
    game = ReversiGame(mode=config.game.mode, human_color=human_color, rng=rng)

    try:
        while play(game, config.game.cpu_delay):
            if input("\nNew game? [y/N] ").strip().lower() != 'y':
                break
            game.reset()
    except (KeyboardInterrupt, EOFError):
        print("\nGame interrupted.")
    finally:
        logger.close()


if __name__ == "__main__":
    main()
