#!/usr/bin/env python3
"""
N-dimensional Minesweeper - Main entry point.

Usage:
    python main.py play [--dims 4 4 4 4] [--mines 10] [--seed N]
    python main.py demo [--games N] [--delay SECONDS]
    python main.py evaluate [--games N]
"""
import argparse
import logging
import os
import time
from typing import List, Optional, Tuple

from src.hypermines.agents import RandomAgent
from src.hypermines.environment import MinesweeperEnv
from src.hypermines.errors import MinesError
from src.hypermines.evaluation import Evaluator
from src.hypermines.layout import render_ansi
from src.hypermines.session import BoardConfig, GameSession


PLAY_HELP = """Commands:
  u C0 C1 ...   uncover the cell at the given coordinate (axis 0 first)
  f C0 C1 ...   toggle a flag
  r             deal a new board
  q             quit"""


def clear_screen() -> None:
    os.system("cls" if os.name == "nt" else "clear")


def make_config(args: argparse.Namespace) -> BoardConfig:
    """Build the board configuration from command-line options."""
    return BoardConfig(dimensions=tuple(args.dims), num_mines=args.mines)


def parse_command(line: str) -> Tuple[str, Optional[List[int]]]:
    """Split an input line into a command letter and an optional coordinate."""
    parts = line.split()
    if not parts:
        return "", None
    command = parts[0].lower()
    if len(parts) == 1:
        return command, None
    return command, [int(part) for part in parts[1:]]


def play(args: argparse.Namespace) -> None:
    """Play interactively in the terminal."""
    session = GameSession(make_config(args), seed=args.seed)
    print(f"Board {'x'.join(map(str, session.config.dimensions))} "
          f"with {session.mines_placed} mines")
    print(PLAY_HELP)

    while True:
        print()
        print(render_ansi(session.board))
        print(f"State: {session.game_state.name}")

        try:
            line = input("> ")
        except EOFError:
            break

        try:
            command, coord = parse_command(line)
        except ValueError:
            print("Coordinates must be integers")
            continue

        if command == "q":
            break
        if command == "r":
            session.reset()
            print(f"New board with {session.mines_placed} mines")
            continue
        if command not in ("u", "f") or coord is None:
            print(PLAY_HELP)
            continue

        try:
            if command == "u":
                state = session.uncover(coord)
                if session.is_lost:
                    print("*** LOST (hit mine) ***")
                elif session.is_won:
                    print("*** WIN! ***")
                else:
                    print(f"State: {state.name}")
            else:
                session.flag(coord)
        except MinesError as error:
            print(f"Invalid move: {error}")


def demo(args: argparse.Namespace) -> None:
    """Watch the random agent play."""
    config = make_config(args)
    env = MinesweeperEnv(config=config, render_mode="ansi")
    agent = RandomAgent(config.dimensions, seed=args.seed)

    wins = 0
    for game in range(args.games):
        obs, _ = env.reset(seed=args.seed if game == 0 else None)
        agent.reset()
        done = False
        step = 0

        while not done:
            action = agent.select_action(obs, env.get_action_mask())
            coord = agent.action_to_coordinate(action)

            obs, reward, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            clear_screen()
            print(f"=== Game {game + 1}/{args.games} | Step {step} ===")
            print(f"Wins so far: {wins}")
            print(f"Last move: {coord}\n")
            print(env.render())

            if done:
                if info.get("game_state") == "WON":
                    wins += 1
                    print("\n*** WIN! ***")
                else:
                    print("\n*** LOST (hit mine) ***")

            time.sleep(args.delay)

    print(f"\n=== Final: {wins}/{args.games} wins ===")


def evaluate(args: argparse.Namespace) -> None:
    """Evaluate the random agent and print results."""
    config = make_config(args)
    evaluator = Evaluator(config, num_episodes=args.games, seed=args.seed)

    print(f"\nEvaluating Random over {args.games} games...")
    results = evaluator.evaluate(RandomAgent(config.dimensions, seed=args.seed))

    print("Results for Random:")
    print(f"  Win rate: {results['win_rate']:.1%}")
    print(f"  Avg reward: {results['avg_reward']:.2f}")
    print(f"  Avg steps: {results['avg_steps']:.1f}")
    print(f"  Avg revealed: {results['avg_revealed']:.1f} cells")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="N-dimensional Minesweeper"
    )
    parser.add_argument(
        "--dims", type=int, nargs="+", default=[4, 4, 4, 4],
        help="Size of each axis, axis 0 first",
    )
    parser.add_argument(
        "--mines", type=int, default=10, help="Number of mines"
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Show debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    subparsers.add_parser("play", help="Play in the terminal")

    demo_parser = subparsers.add_parser("demo", help="Watch the random agent")
    demo_parser.add_argument(
        "--games", type=int, default=5, help="Number of games"
    )
    demo_parser.add_argument(
        "--delay", type=float, default=0.3, help="Delay between moves"
    )

    eval_parser = subparsers.add_parser("evaluate", help="Evaluate the random agent")
    eval_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "play":
            play(args)
        elif args.command == "demo":
            demo(args)
        elif args.command == "evaluate":
            evaluate(args)
        else:
            parser.print_help()
    except MinesError as error:
        parser.error(str(error))


if __name__ == "__main__":
    main()
