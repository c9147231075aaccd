"""Interactive terminal browser for a list of character trees."""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
from typing import Iterable, Iterator, Optional, Sequence

from treelist.linkedlist import TreeList

DEFAULT_FILE = "agaclar.txt"


def clear_screen() -> None:
    """Clear the terminal using the platform's clear command."""
    try:
        if os.name == "nt":
            subprocess.run("cls", shell=True, check=False)
        else:
            subprocess.run(["clear"], check=False)
    except OSError:
        pass


def _keys(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        for ch in line:
            if not ch.isspace():
                yield ch


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load trees from a file and browse them with a/d/s/w, quit with q."""
    parser = argparse.ArgumentParser(prog="treelist", description=main.__doc__)
    parser.add_argument("file", nargs="?", default=DEFAULT_FILE,
                        help="text file with one tree per line")
    parser.add_argument("--no-clear", action="store_true",
                        help="do not clear the screen between frames")
    args = parser.parse_args(argv)

    trees = TreeList()
    try:
        trees.load(args.file)
    except OSError:
        print(f"Cannot open file: {args.file}", file=sys.stderr)

    keys = _keys(sys.stdin)
    while True:
        if not args.no_clear:
            clear_screen()
        sys.stdout.write(trees.render())
        sys.stdout.write("\n -> ")
        sys.stdout.flush()

        key = next(keys, None)
        if key is None or key in ("q", "Q"):
            break
        message = trees.handle_key(key)
        if message is not None:
            print(message)
    return 0


if __name__ == "__main__":
    sys.exit(main())