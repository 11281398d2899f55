"""Command-line interface for nabaztag."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

from . import constants
from .config import NabaztagConfig, load_config
from .core import NabaztagError
from .device import Nabaztag
from .device_tables import VOICES
from .logging import configure_logging

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nabaztag", description="Send commands to a Nabaztag rabbit"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=constants.DEFAULT_CONFIG_PATH,
        help=f"Path to configuration file (default: {constants.DEFAULT_CONFIG_PATH})",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    say_parser = subparsers.add_parser("say", help="Make the rabbit speak")
    say_parser.add_argument("text", help="Text to speak")

    subparsers.add_parser("bark", help="Make the rabbit bark")

    ears_parser = subparsers.add_parser("ears", help="Move the ears (0-16)")
    ears_parser.add_argument("--left", type=int, default=None)
    ears_parser.add_argument("--right", type=int, default=None)

    subparsers.add_parser("ear-positions", help="Print the current ear positions")

    subparsers.add_parser("voices", help="List the known voices")

    subparsers.add_parser(
        "show-config", help="Print the resolved configuration and exit"
    )

    return parser


async def _run_device_command(args: argparse.Namespace, config: NabaztagConfig) -> int:
    async with Nabaztag.from_config(config) as rabbit:
        if args.command == "say":
            await rabbit.say_and_send(args.text)
        elif args.command == "bark":
            await rabbit.bark_and_send()
        elif args.command == "ears":
            if args.left is None and args.right is None:
                LOGGER.error("Nothing to do: pass --left and/or --right")
                return 1
            await rabbit.move_ears_and_send(args.left, args.right)
        elif args.command == "ear-positions":
            positions = await rabbit.ear_positions()
            if not positions.is_known:
                print("Ear positions unavailable")
                return 1
            print(f"left = {positions.left}\nright = {positions.right}")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = load_config(args.config)
    configure_logging(
        config.logging.level,
        log_path=config.logging.path,
        log_network=config.logging.log_network,
    )

    if args.command == "show-config":
        print(f"Configuration loaded from {config.path!s}\n")
        for section in config.raw.sections():
            print(f"[{section}]")
            for key, value in config.raw[section].items():
                if key == "token" and value:
                    value = "********"
                print(f"{key} = {value}")
            print()
        return 0

    if args.command == "voices":
        for language, voices in VOICES.items():
            print(f"{language}: {', '.join(voices)}")
        return 0

    try:
        return asyncio.run(_run_device_command(args, config))
    except NabaztagError as exc:
        LOGGER.error("Command failed: %s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
