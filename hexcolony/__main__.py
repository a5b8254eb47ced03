"""Entry point for ``python -m hexcolony``.

Loads the YAML config and plays a match on stdin/stdout, or, with
``--view``, opens a Pygame window that replays a recorded feed through
the same planner.
"""

from __future__ import annotations

import argparse
import logging
import pathlib
import sys

from hexcolony.bot.config import BotConfig
from hexcolony.bot.engine import BotEngine
from hexcolony.feed.parser import FeedError

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = (
    pathlib.Path(__file__).resolve().parent.parent / "config" / "default.yaml"
)


def main(argv: list[str] | None = None) -> None:
    """Parse CLI args, build the engine, then play or replay."""
    parser = argparse.ArgumentParser(
        prog="hexcolony",
        description="hexcolony - beacon-planning bot for hex ant colonies",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=pathlib.Path,
        default=None,
        help="Path to YAML config file (default: config/default.yaml if present)",
    )
    parser.add_argument(
        "--view",
        type=pathlib.Path,
        default=None,
        metavar="TRANSCRIPT",
        help="Replay a recorded feed in a Pygame window instead of playing",
    )
    parser.add_argument(
        "--hex-size",
        type=int,
        default=18,
        help="Hexagon radius in pixels for --view (default: 18)",
    )
    parser.add_argument(
        "--speed",
        type=float,
        default=2.0,
        help="Replay turns per second for --view (default: 2)",
    )
    args = parser.parse_args(argv)

    config_path = args.config
    if config_path is None and _DEFAULT_CONFIG.exists():
        config_path = _DEFAULT_CONFIG
    config = BotConfig.from_yaml(config_path) if config_path else BotConfig()

    # stdout carries the commands, so diagnostics go to stderr
    logging.basicConfig(
        stream=sys.stderr,
        level=config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    engine = BotEngine(config=config)

    if args.view is not None:
        from hexcolony.ui.pygame_client import PygameRenderer, load_transcript

        board, turns = load_transcript(args.view, with_scores=config.with_scores)
        engine.board = board
        renderer = PygameRenderer(
            engine=engine,
            turns=turns,
            hex_size=args.hex_size,
            turns_per_second=args.speed,
        )
        renderer.run()
        return

    try:
        engine.play(sys.stdin, sys.stdout)
    except FeedError:
        logger.exception("malformed feed after %d turns", engine.turn)
        raise


if __name__ == "__main__":
    main()
