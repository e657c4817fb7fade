"""Command line tools for the grid snake engine."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace

from grid_snake.config import GameConfig

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grid-snake",
        description="Headless tools for the grid snake engine.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Play random-policy games and report statistics.",
    )
    sim_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (flags override its values).",
    )
    sim_p.add_argument("--games", type=int, default=100)
    sim_p.add_argument("--rows", type=int, default=None)
    sim_p.add_argument("--cols", type=int, default=None)
    sim_p.add_argument("--max-ticks", type=int, default=500)
    sim_p.add_argument(
        "--seed", type=int, default=None,
        help="RNG seed (defaults to the config seed, then 42).",
    )

    # --- state ---
    state_p = sub.add_parser(
        "state", help="Print the game state as JSON after some moves.",
    )
    state_p.add_argument("--config", type=str, default=None)
    state_p.add_argument("--rows", type=int, default=None)
    state_p.add_argument("--cols", type=int, default=None)
    state_p.add_argument("--seed", type=int, default=None)
    state_p.add_argument(
        "--moves", type=int, default=0,
        help="Number of ticks to advance before printing.",
    )

    return parser


def _resolve_config(args: argparse.Namespace) -> GameConfig:
    config = GameConfig.load(args.config) if args.config else GameConfig()

    overrides = {
        name: getattr(args, name)
        for name in ("rows", "cols", "seed")
        if getattr(args, name, None) is not None
    }
    if overrides:
        config = replace(config, **overrides)
    return config


def _run_simulate(args: argparse.Namespace) -> int:
    from grid_snake.simulate import DEFAULT_SEED, simulate_games

    config = _resolve_config(args)
    result = simulate_games(
        num_games=args.games,
        rows=config.rows,
        cols=config.cols,
        max_ticks=args.max_ticks,
        direction_buffer_size=config.direction_buffer_size,
        seed=config.seed if config.seed is not None else DEFAULT_SEED,
    )
    print(result.summary())  # noqa: T201
    return 0


def _run_state(args: argparse.Namespace) -> int:
    from grid_snake.engine import GameState

    game = GameState.from_config(_resolve_config(args))
    for _ in range(args.moves):
        game.move()
        if game.game_over:
            break
    print(json.dumps(game.get_state()))  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``grid-snake`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "simulate": _run_simulate,
        "state": _run_state,
    }
    try:
        return handlers[args.command](args)
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2


if __name__ == "__main__":
    sys.exit(main())
