"""Command-line interface for reading torrent files."""

from __future__ import annotations

import argparse
import logging
import sys

from torrentread.torrent import TorrentError, parse_torrent

_PROG = "bittorrentclient"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the command line."""
    parser = argparse.ArgumentParser(
        prog=_PROG,
        description="A CLI tool to read and manipulate torrent files.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )
    commands = parser.add_subparsers(dest="command")
    read = commands.add_parser(
        "read",
        help="Read a torrent file",
        description="Reads the content of a torrent file and displays it.",
    )
    read.add_argument("path", nargs="?", help="path to a .torrent file")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command line; return the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.command != "read":
        parser.print_help()
        return 0

    if args.path is None:
        print(
            f"Missing file path. Usage: {_PROG} read ./path/to/file.torrent",
            file=sys.stderr,
        )
        return 1

    try:
        with open(args.path, "rb") as handle:
            torrent = parse_torrent(handle)
    except OSError as exc:
        print(f"Failed to read file: {exc}", file=sys.stderr)
        return 1
    except TorrentError as exc:
        print(f"Error parsing torrent file: {exc}", file=sys.stderr)
        return 1

    print(torrent)
    return 0


if __name__ == "__main__":
    sys.exit(main())