#!/usr/bin/env python3
"""
__main__.py: Command line entry point. Run with ``python -m touchline``.
"""

import argparse
import dataclasses
import logging
import sys

from .data_models import FieldConfig
from .scheduler import RenderTargetError

logger = logging.getLogger("touchline")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="touchline", description="Run a player around a rugby pitch.")
    parser.add_argument("--fps", type=int, help="simulation ticks per second")
    parser.add_argument("--speed", type=float, help="walking speed in pixels per tick")
    parser.add_argument("--sprint-speed", type=float, help="sprinting speed in pixels per tick")
    parser.add_argument("--dead-zone", type=float, help="analog stick dead zone, 0 to 1")
    parser.add_argument("--unthrottled", action="store_true",
                        help="tick on every window frame instead of at a fixed rate")
    parser.add_argument("--debug", action="store_true", help="show the debug overlay at start")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def config_from_args(args: argparse.Namespace, base: FieldConfig = None) -> FieldConfig:
    overrides = {
        "target_fps": args.fps,
        "movement_speed": args.speed,
        "sprint_speed": args.sprint_speed,
        "dead_zone": args.dead_zone,
    }
    return dataclasses.replace(base or FieldConfig(),
                               **{k: v for k, v in overrides.items() if v is not None})


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        config = config_from_args(args)
    except ValueError as e:
        logger.error("Invalid configuration: %s", e)
        return 1

    # Pulls in pygame
    from .field_client import FieldClient

    try:
        FieldClient(config, throttled=not args.unthrottled, show_debug=args.debug).run()
    except RenderTargetError as e:
        logger.error("Could not start: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
