#!/usr/bin/env python3
"""Main entry point for the jukebox console."""

from __future__ import annotations

import argparse
import json
import logging
import logging.config
import sys
from pathlib import Path

from jukebox.domain.shared.messages import LogTemplates

_LOGGING_CONFIG_PATH = Path(__file__).resolve().parents[2] / "logging_config.json"


def setup_logging(log_level: str = "INFO") -> None:
    resolved_level = getattr(logging, log_level.upper(), logging.INFO)

    try:
        with open(_LOGGING_CONFIG_PATH) as f:
            config = json.load(f)
        logging.config.dictConfig(config)
    except (FileNotFoundError, json.JSONDecodeError, ValueError):
        logging.warning(LogTemplates.APP_LOGGING_FALLBACK, _LOGGING_CONFIG_PATH)
        logging.basicConfig(
            level=resolved_level,
            format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    logging.getLogger().setLevel(resolved_level)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jukebox",
        description="Drive an in-memory jukebox from the command line.",
        epilog="Without -c, commands are read interactively. Type 'help' for the command list.",
    )
    parser.add_argument(
        "-c",
        "--command",
        dest="commands",
        action="append",
        default=[],
        metavar="CMD",
        help='console command to run, e.g. -c power-on -c "add \'Abbey Road\' 2" (repeatable)',
    )
    parser.add_argument("--log-level", help="override JUKEBOX_LOG_LEVEL")
    parser.add_argument("--seed", type=int, help="shuffle seed for reproducible orderings")
    return parser


def main(argv: list[str] | None = None) -> int:
    from jukebox.config.settings import get_settings

    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(args.log_level or settings.log_level)

    logger = logging.getLogger(__name__)
    logger.debug(LogTemplates.APP_STARTING, settings.environment)

    from jukebox.application.catalog import build_demo_jukebox
    from jukebox.interface.console import JukeboxConsole

    player_settings = settings.player
    if args.seed is not None:
        player_settings = player_settings.model_copy(update={"shuffle_seed": args.seed})

    console = JukeboxConsole(build_demo_jukebox(player_settings))
    try:
        if args.commands:
            return console.run_script(args.commands)
        return console.run_interactive()
    except KeyboardInterrupt:
        return 0
    finally:
        logger.debug(LogTemplates.APP_STOPPED)


def cli() -> None:
    """Console script entry point (used by pyproject.toml [project.scripts])."""
    sys.exit(main())


if __name__ == "__main__":
    cli()  # pragma: no cover
