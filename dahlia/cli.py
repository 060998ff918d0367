"""Command line front end — convert or strip markup from arguments or stdin."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, TextIO

from dahlia.config import ConfigError, DahliaConfig, load_config
from dahlia.converter import Dahlia, clean, clean_ansi
from dahlia.resolver import InvalidCodeError

log = logging.getLogger(__name__)


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    """Return parsed command-line arguments for the converter CLI."""

    parser = argparse.ArgumentParser(prog="dahlia", description=__doc__)
    parser.add_argument(
        "text",
        nargs="*",
        help="Text to process; standard input is read when omitted",
    )
    parser.add_argument("-d", "--depth", help="Color depth: 3, 4, 8, 24 or tty/low/medium/high")
    parser.add_argument("-m", "--marker", help="Marker character (default: &)")
    parser.add_argument(
        "--no-reset", action="store_true", default=None,
        help="Don't append a reset code to converted text",
    )
    parser.add_argument(
        "--no-color", action="store_true", default=None,
        help="Strip markup instead of emitting escape sequences",
    )
    parser.add_argument("-c", "--config", help="YAML configuration file")

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--clean", action="store_true", help="Remove markup codes")
    mode.add_argument("--clean-ansi", action="store_true", help="Remove ANSI escape sequences")
    mode.add_argument("--test", action="store_true", help="Print every color and format code")

    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> DahliaConfig:
    """Merge the optional config file, the environment and CLI options."""
    base = load_config(args.config) if args.config else DahliaConfig.from_env()
    return base.with_overrides(
        depth=args.depth,
        marker=args.marker,
        no_reset=args.no_reset,
        no_color=args.no_color,
    )


def main(
    argv: List[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    args = parse_args(argv)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        config = build_config(args)
        dahlia = Dahlia.from_config(config)

        if args.test:
            stdout.write(dahlia.test() + "\n")
            return 0

        text = " ".join(args.text) if args.text else stdin.read()
        if args.clean:
            out = clean(text, config.marker)
        elif args.clean_ansi:
            out = clean_ansi(text)
        else:
            out = dahlia.convert(text)
    except (ConfigError, InvalidCodeError) as e:
        log.error("%s", e)
        return 1
    except OSError as e:
        log.error("Cannot read config: %s", e)
        return 1

    stdout.write(out)
    if args.text:
        stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
