"""Command-line front-end: print CUID2 identifiers.

Usage:
    cuid2                   # one identifier, configured default length (24)
    cuid2 -l 16             # 16-character identifier
    cuid2 --length 32 -n 5  # five 32-character identifiers
    python -m cuid2 --help

Exit codes:
    0  success
    1  invalid length or hashing failure (message on stderr)
    2  command-line usage error (argparse)
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from cuid2.config import load_config
from cuid2.constants import MAX_LENGTH, MIN_LENGTH
from cuid2.errors import Cuid2Error
from cuid2.generator import get_default_generator
from cuid2.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)


def _positive_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: '{raw}'")
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cuid2",
        description="Generate collision-resistant CUID2 identifiers.",
        epilog=(
            "Examples:\n"
            "  cuid2                 # default length\n"
            "  cuid2 -l 16           # 16-character identifier\n"
            "  cuid2 --length 32     # maximum length"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-l",
        "--length",
        type=int,
        default=None,
        metavar="NUM",
        help=(
            f"length of the generated id (default: from config or 24, "
            f"min: {MIN_LENGTH}, max: {MAX_LENGTH})"
        ),
    )
    parser.add_argument(
        "-n",
        "--count",
        type=_positive_int,
        default=1,
        metavar="NUM",
        help="number of identifiers to print, one per line (default: 1)",
    )
    parser.add_argument(
        "--config",
        default=None,
        metavar="PATH",
        help="path to a cuid2 config.yaml",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the CLI and return the process exit code.

    Raises:
        SystemExit: From argparse on usage errors or --help, and from
                    load_config() on an invalid config file.
    """
    args = build_parser().parse_args(argv)

    config = load_config(args.config)
    configure_logging(log_level=config.logging.level, json_output=config.logging.json)

    length = args.length if args.length is not None else config.generator.default_length
    generator = get_default_generator()

    try:
        identifiers = [generator.generate(length) for _ in range(args.count)]
    except Cuid2Error as exc:
        logger.debug("generation_failed", error=exc.message)
        print(f"Error: {exc.message}", file=sys.stderr)
        return 1

    sys.stdout.write("\n".join(identifiers) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
