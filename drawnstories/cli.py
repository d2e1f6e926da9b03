from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence

from .http_utils import DEFAULT_TIMEOUT

PROG = "drawnstories-cbz"
EXAMPLE_URL = "https://drawnstories.ru/comics/Oni-press/rick-and-morty"


def usage() -> str:
    return (
        f"Usage: {PROG} <URL> [book numbers]\n"
        f"Example: {PROG} {EXAMPLE_URL} 001\n"
    )


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Download comic books from drawnstories.ru and pack each one into a CBZ archive.",
        epilog=f"Example: {PROG} {EXAMPLE_URL} 001",
    )
    # Optional here so that a missing URL is reported by the URL validator.
    parser.add_argument(
        "url",
        nargs="?",
        help=f"drawnstories.ru comic listing URL (e.g. {EXAMPLE_URL}).",
    )
    parser.add_argument(
        "issues",
        nargs="*",
        metavar="book-number",
        help="Only download books whose name ends with -<book-number> (e.g. 001).",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=".",
        help="Destination directory for the .cbz files (default: current directory).",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help=f"HTTP timeout in seconds for every request (default: {DEFAULT_TIMEOUT:g}).",
    )
    parser.add_argument(
        "-w",
        "--workers",
        type=int,
        default=1,
        help="Number of pages of one book downloaded concurrently (default: 1).",
    )
    return parser.parse_args(argv)


def validate_args(args: argparse.Namespace) -> None:
    if args.timeout <= 0:
        raise SystemExit(f"Timeout must be a positive number.\n\n{usage()}")
    if args.workers <= 0:
        raise SystemExit(f"Workers must be at least 1.\n\n{usage()}")
    output_path = Path(args.output)
    if output_path.exists() and not output_path.is_dir():
        raise SystemExit(f"Output path exists and is not a directory: {output_path}\n\n{usage()}")
