#!/usr/bin/env python3
"""
Terminal-based draughts client.

Two players share the keyboard, or watch a random self-play demo.
"""

from __future__ import annotations
import argparse
import logging
import random
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from checkers.core import Game, History, Move, get_legal_moves
from checkers.core.notation import move_to_notation, parse_move

logger = logging.getLogger(__name__)

# ANSI color codes
GREEN = '\033[92m'
RED = '\033[91m'
RESET = '\033[0m'


@dataclass
class PlayConfig:
    """Options for a terminal session."""
    demo: bool = False
    seed: Optional[int] = None
    max_plies: int = 200
    color: bool = True
    log_level: str = 'WARNING'


def render_board(game: Game, highlight_moves: list[Move] | None = None,
                 color: bool = True) -> str:
    """Render the board with rank numbers down the side.

    Symbols:
        b/B = black pone/king
        r/R = red pone/king
        Green squares = destinations of highlighted moves
    """
    targets = {move.destination() for move in highlight_moves or []}
    grid = game.to_array()
    symbols = {0: '.', 1: 'b', 2: 'B', -1: 'r', -2: 'R'}

    lines = ["  +" + "-" * 17 + "+"]
    for gy in range(8):
        cells = []
        for gx in range(8):
            if (gx + gy) % 2 == 0:
                cells.append(' ')
                continue
            sym = symbols[int(grid[gy, gx])]
            if color and any(t.to_graphical() == (gx, gy) for t in targets):
                sym = f"{GREEN}{sym}{RESET}"
            elif color and sym in 'rR':
                sym = f"{RED}{sym}{RESET}"
            cells.append(sym)
        lines.append(f"{8 - gy} | " + " ".join(cells) + " |")
    lines.append("  +" + "-" * 17 + "+")

    status = f"{game.side.value.capitalize()} to move"
    if game.jumping is not None:
        status += f", must continue jumping from {game.jumping.index + 1}"
    lines.append(status)
    return "\n".join(lines)


def parse_user_input(game: Game, input_str: str) -> Move | str | None:
    """Parse user input into a move or a command name."""
    input_str = input_str.strip().lower()

    # Check for special commands
    if input_str in ['q', 'quit', 'exit']:
        return 'quit'
    if input_str in ['h', 'help', '?']:
        return 'help'
    if input_str in ['m', 'moves']:
        return 'show_moves'
    if input_str in ['u', 'undo']:
        return 'undo'

    try:
        return parse_move(game, input_str)
    except ValueError as e:
        print(f"{e}. Use notation like '9-13' or '9x18'")
        return None


def show_legal_moves(game: Game) -> None:
    """Display all legal moves."""
    moves = get_legal_moves(game)
    if not moves:
        print("No legal moves!")
        return
    print("Legal moves:", ", ".join(move_to_notation(m) for m in moves))


def step(game: Game, move: Move, history: History) -> Game:
    """Apply a move, recording the previous state."""
    history.push(game)
    result = game.apply(move)
    if history.contains(result):
        print("Position repeated.")
        logger.info("repeated position after %s", move_to_notation(move))
    return result


def print_result(game: Game) -> None:
    winner = game.winner()
    if winner is not None:
        print(f"{winner.value.capitalize()} wins!")
    elif not game.has_moves():
        print(f"{game.side.value.capitalize()} is blocked. Game over.")
    else:
        print("Game stopped.")


def play_hot_seat(config: PlayConfig) -> None:
    """Play a game: two humans at one terminal."""
    game = Game.new_game()
    history = History()

    print("\n=== Draughts ===")
    print("Black (b) moves up the board and starts.")
    print("Commands: move (e.g., '9-13' or '9x18'), 'm' for moves, 'u' undo, 'q' quit")

    while not game.is_terminal() and game.has_moves():
        print()
        print(render_board(game, color=config.color))

        try:
            user_input = input("> ").strip()
        except EOFError:
            return

        result = parse_user_input(game, user_input)

        if result == 'quit':
            print("Thanks for playing!")
            return
        elif result == 'help':
            print("Enter moves like '9-13' to move or '9x18' to jump")
            print("'m' to see legal moves, 'u' to undo, 'q' to quit")
        elif result == 'show_moves':
            show_legal_moves(game)
            print(render_board(game, get_legal_moves(game), color=config.color))
        elif result == 'undo':
            previous = history.pop()
            if previous is not None:
                game = previous
                print("Move undone.")
            else:
                print("Nothing to undo.")
        elif isinstance(result, Move):
            game = step(game, result, history)
            print(f"Played: {move_to_notation(result)}")

    print(render_board(game, color=config.color))
    print_result(game)


def watch_random(config: PlayConfig) -> Game:
    """Play uniformly random legal moves for both sides."""
    rng = random.Random(config.seed)
    game = Game.new_game()
    history = History()

    print("\n=== Random self-play ===")
    plies = 0
    while not game.is_terminal() and plies < config.max_plies:
        moves = get_legal_moves(game)
        if not moves:
            break
        move = rng.choice(moves)
        mover = game.side
        game = step(game, move, history)
        plies += 1
        print(f"{plies:3d}. {mover.value:5s} {move_to_notation(move)}")

    print(render_board(game, color=config.color))
    print(f"Game over after {plies} plies.")
    print_result(game)
    return game


def parse_args(argv: list[str] | None = None) -> PlayConfig:
    parser = argparse.ArgumentParser(description='Draughts Terminal Client')
    parser.add_argument('--demo', action='store_true', help='Watch random self-play')
    parser.add_argument('--seed', type=int, default=None, help='Random seed for --demo')
    parser.add_argument('--max-plies', type=int, default=200,
                        help='Stop the demo after this many plies')
    parser.add_argument('--no-color', action='store_true', help='Disable ANSI colors')
    parser.add_argument('--log-level', type=str, default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging verbosity')

    args = parser.parse_args(argv)
    return PlayConfig(
        demo=args.demo,
        seed=args.seed,
        max_plies=args.max_plies,
        color=not args.no_color,
        log_level=args.log_level,
    )


def main(argv: list[str] | None = None) -> None:
    config = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if config.demo:
        watch_random(config)
    else:
        play_hot_seat(config)


if __name__ == '__main__':
    main()
