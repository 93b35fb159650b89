"""Reading a text file into a single line of text."""

from __future__ import annotations

import argparse
import sys
from itertools import takewhile
from pathlib import Path
from typing import Sequence

STOP_MARKER = "......."


def read_and_concatenate(path: str | Path) -> str:
    """Join the lines of a file with single spaces.

    Reading stops at the first line that starts with the stop marker
    (seven dots); that line and everything after it are ignored.
    Raises ``OSError`` if the file cannot be opened.
    """
    with open(path, encoding="utf-8") as handle:
        lines = (line.rstrip("\n") for line in handle)
        kept = takewhile(lambda line: not line.startswith(STOP_MARKER), lines)
        return " ".join(kept)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the concatenated contents of the file named on the command line."""
    parser = argparse.ArgumentParser(
        description="Join the lines of a text file with spaces, stopping at a line of dots."
    )
    parser.add_argument("path", help="file to read")
    args = parser.parse_args(argv)

    try:
        text = read_and_concatenate(args.path)
    except OSError:
        print("Error: Could not open file.", file=sys.stderr)
        return 1

    print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())