"""Entry point for dodge package."""

import argparse
import logging
from dataclasses import replace
from typing import Optional, Sequence

from dodge.config import ConfigError, GameConfig


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Dodge the Virus - avoid the growing swarm",
        prog="dodge",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for ball headings and speeds (default: $DODGE_SEED or random)",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=None,
        help="Target frame rate (default: $DODGE_FPS or 60)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level name, e.g. INFO or DEBUG (default: $DODGE_LOG_LEVEL or WARNING)",
    )
    return parser


def make_config(args: argparse.Namespace) -> GameConfig:
    """Environment config with command-line overrides applied."""
    config = GameConfig.from_env()
    overrides = {}
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.fps is not None:
        overrides["target_fps"] = args.fps
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    return replace(config, **overrides)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the Dodge application."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = make_config(args).require_valid()
    except ConfigError as e:
        parser.error(str(e))

    logging.basicConfig(level=config.log_level.upper(), format="%(message)s")

    from dodge.core.events import EventBus
    from dodge.game.session import GameSession
    from dodge.logging import SessionLog
    from dodge.ui import PygameWindow, SceneRenderer, run

    print("Dodge")

    # SessionLog keeps the record; the bus itself keeps no history
    event_bus = EventBus(max_history=0)
    session_log = SessionLog()
    session_log.attach(event_bus)

    session = GameSession(config, event_bus=event_bus)
    window = PygameWindow(config.width, config.height, config.title, fps=config.target_fps)
    run(window, session, SceneRenderer(config))

    print(session_log.summary())


if __name__ == "__main__":
    main()
