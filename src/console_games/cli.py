"""Command-line entry point for console-games."""

import argparse
import logging
import os
import sys

import anyio

from ._internal.console.stdio import StdioConsole
from ._version import __version__
from .fizzbuzz import DEFAULT_LIMIT, print_fizzbuzz
from .session import GameSession
from .types import GameOptions

logger = logging.getLogger(__name__)

SEED_ENV_VAR = "CONSOLE_GAMES_SEED"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="console-games",
        description="Rock, Paper, Scissors and FizzBuzz in the terminal",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        type=str.upper,
        help="Log level for diagnostics written to stderr (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command")
    parser.set_defaults(command="rps", seed=None, no_banner=False)

    rps = subparsers.add_parser(
        "rps", help="Play Rock, Paper, Scissors against the computer (default)"
    )
    rps.add_argument(
        "--seed",
        type=int,
        default=None,
        help=f"Seed for the computer's moves (default: ${SEED_ENV_VAR} or random)",
    )
    rps.add_argument(
        "--no-banner",
        action="store_true",
        help="Skip the welcome banner",
    )

    fizz = subparsers.add_parser("fizzbuzz", help="Print the FizzBuzz sequence")
    fizz.add_argument(
        "limit",
        type=int,
        nargs="?",
        default=DEFAULT_LIMIT,
        help=f"Upper limit of the sequence, inclusive (default: {DEFAULT_LIMIT})",
    )
    return parser


def resolve_seed(
    parser: argparse.ArgumentParser, seed: int | None
) -> int | None:
    """Pick the CLI seed, falling back to the environment."""
    if seed is not None:
        return seed
    env_seed = os.environ.get(SEED_ENV_VAR)
    if not env_seed:
        return None
    try:
        return int(env_seed)
    except ValueError:
        parser.error(f"{SEED_ENV_VAR} must be an integer, got {env_seed!r}")


def run_rps(options: GameOptions) -> None:
    session = GameSession(options=options)

    async def _play() -> None:
        async with StdioConsole() as console:
            await session.run_loop(console)

    anyio.run(_play)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command == "fizzbuzz":
        if args.limit < 0:
            parser.error("limit must not be negative")
        print_fizzbuzz(args.limit)
        return 0

    options = GameOptions(
        seed=resolve_seed(parser, args.seed),
        show_banner=not args.no_banner,
    )
    try:
        run_rps(options)
    except KeyboardInterrupt:
        logger.info("Interrupted")
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
