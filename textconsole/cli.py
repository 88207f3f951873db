from __future__ import annotations

import argparse
import logging
from typing import Optional

from .config import LOG_LEVELS, ConsoleConfig
from .console import Console
from .io import IOInterface, StdIO
from .models import RetryPolicy
from .parsing import STRATEGIES

LOGGER = logging.getLogger(__name__)


def build_parser(config: ConsoleConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="textconsole",
        description="Ask one typed question on the terminal and print the answer.",
    )
    parser.add_argument(
        "--type",
        dest="value_type",
        choices=("line", *STRATEGIES),
        default="line",
        help="Kind of value to read. Typed reads re-prompt until the answer parses.",
    )
    parser.add_argument(
        "--mode",
        choices=("interactive", "legacy"),
        default=config.mode,
        help="`interactive` prompts through prompt_toolkit, `legacy` reads plain stdin.",
    )
    parser.add_argument(
        "--max-retries",
        type=int,
        default=config.max_retries,
        help="Invalid answers tolerated before falling back to the type's default.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=sorted(LOG_LEVELS),
        default=config.log_level,
    )
    parser.add_argument("prompt", help="Prompt text shown to the user.")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    config = ConsoleConfig.from_env()
    args = build_parser(config).parse_args(argv)
    logging.basicConfig(level=args.log_level)

    io = _create_io(args.mode)
    console = Console(io=io, policy=RetryPolicy(max_retries=max(0, args.max_retries)))
    LOGGER.debug("console_ready", extra={"mode": args.mode, "type": args.value_type})

    if args.value_type == "line":
        value = console.read_line(args.prompt)
    else:
        value = console.read_value(args.prompt, STRATEGIES[args.value_type])

    if value is None:
        console.println("No input provided.")
        return 1
    console.println(_format_value(value))
    return 0


def _create_io(mode: str) -> IOInterface:
    if mode == "legacy":
        return StdIO()
    # Deferred import keeps legacy mode usable without a terminal
    from .ui import PromptToolkitIO

    return PromptToolkitIO()


def _format_value(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


if __name__ == "__main__":
    raise SystemExit(main())
