"""
Command-Line Interface
======================

Read stdin and output it in a marquee style.

Once a line is read, the previous marquee stops and the new one starts
from the beginning (use --multi-line to keep every line). Blank lines
are ignored while waiting for more input.

Usage:
    echo "Hello, world!" | marquee --width 5 --delay 200 --same-line
    tail -f now_playing.jsonl | marquee --json --prefix "> "
    echo "one pass only" | marquee --no-loop --delay 0

Flags override marquee.yaml and MARQUEE_* environment variables.
"""

import argparse
import asyncio
import logging
import signal
import sys
from typing import Optional, Sequence

import yaml
from pydantic import ValidationError

from marquee_engine import __version__
from marquee_engine.config import Settings, load_config, setup_logging
from marquee_engine.driver import FrameWriter, MarqueeRunner, stdin_lines


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="marquee",
        description="Read stdin and output it in a marquee style",
    )
    parser.add_argument(
        "-d", "--delay",
        type=int,
        metavar="ms",
        help="Milliseconds to delay between every print (default: 1000)",
    )
    parser.add_argument(
        "-w", "--width",
        type=int,
        metavar="chars",
        help="Width of the moving content, prefix/suffix excluded (default: 20)",
    )
    parser.add_argument(
        "-l", "--no-loop",
        dest="loop",
        action="store_false",
        default=None,
        help="Scroll each line once instead of looping",
    )
    parser.add_argument(
        "-p", "--prefix",
        metavar="prefix",
        help="Prefix to print before every output line",
    )
    parser.add_argument(
        "-f", "--suffix",
        metavar="suffix",
        help="Suffix to print after every output line",
    )
    parser.add_argument(
        "-s", "--separator",
        metavar="sep",
        help="Separator between the end of a line and its restart when looping (default: 4 spaces)",
    )
    parser.add_argument(
        "-r", "--reverse",
        action="store_true",
        default=None,
        help="Scroll in the opposite direction",
    )
    parser.add_argument(
        "-L", "--same-line",
        action="store_true",
        default=None,
        help="Print the output on the same line, using \\r",
    )
    parser.add_argument(
        "-m", "--multi-line",
        action="store_true",
        default=None,
        help="Animate every input line instead of replacing the previous one",
    )
    parser.add_argument(
        "-j", "--json",
        action="store_true",
        default=None,
        help="Decode each input line as a JSON record",
    )
    parser.add_argument(
        "-c", "--config",
        metavar="path",
        help="Path to a marquee.yaml config file",
    )
    parser.add_argument(
        "--log-level",
        metavar="level",
        help="Log level for messages on stderr (default: WARNING)",
    )
    parser.add_argument(
        "-V", "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def build_settings(args: argparse.Namespace) -> Settings:
    """
    Load settings and apply command-line overrides.

    Raises:
        FileNotFoundError: If --config points to a missing file
        pydantic.ValidationError: If the combined values are invalid
    """
    settings = load_config(args.config)
    data = settings.model_dump(by_alias=True)

    overrides = {
        ("render", "width"): args.width,
        ("render", "delay_ms"): args.delay,
        ("render", "separator"): args.separator,
        ("render", "reverse"): args.reverse,
        ("render", "loop"): args.loop,
        ("render", "same_line"): args.same_line,
        ("render", "multi_line"): args.multi_line,
        ("decoration", "prefix"): args.prefix,
        ("decoration", "suffix"): args.suffix,
        ("input", "json"): args.json,
        ("logging", "level"): args.log_level,
    }
    for (section, key), value in overrides.items():
        if value is not None:
            data[section][key] = value

    return Settings.model_validate(data)


async def _run(runner: MarqueeRunner) -> None:
    loop = asyncio.get_running_loop()
    try:
        loop.add_signal_handler(signal.SIGTERM, runner.stop)
    except NotImplementedError:
        logger.debug("SIGTERM handler not supported on this platform")

    await runner.run(stdin_lines())


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = build_settings(args)
    except (FileNotFoundError, yaml.YAMLError, ValidationError, ValueError) as e:
        parser.error(f"invalid configuration: {e}")

    if settings.render.same_line and settings.render.multi_line:
        parser.error("--same-line cannot be combined with --multi-line")

    setup_logging(settings)

    writer = FrameWriter(same_line=settings.render.same_line)
    runner = MarqueeRunner.from_settings(settings, writer)

    try:
        asyncio.run(_run(runner))
    except KeyboardInterrupt:
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
