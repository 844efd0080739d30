"""
Play air combat with the mouse, or watch a random agent.

Usage:
    python -m game.air_combat
    python -m game.air_combat --random
"""

import argparse
import logging


def main():
    parser = argparse.ArgumentParser(description="Air combat")
    parser.add_argument("--width", type=int, default=400, help="Arena width (default: 400)")
    parser.add_argument("--height", type=int, default=800, help="Arena height (default: 800)")
    parser.add_argument("--seed", type=int, default=None, help="Spawn seed")
    parser.add_argument(
        "--random",
        action="store_true",
        help="Watch a random agent in the RL environment instead of playing",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.random:
        from .air_combat_env import run_random_episode
        run_random_episode(render=True, seed=args.seed)
    else:
        from .window import play
        play(width=args.width, height=args.height, seed=args.seed)


if __name__ == "__main__":
    main()
