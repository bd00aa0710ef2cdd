"""Write, append to and read back a small text file."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

DEFAULT_FILENAME = "sample.txt"

_INITIAL_LINES = ("This is the first line.\n", "This is the second line.\n")
_APPENDED_LINE = "This is an appended line.\n"


def write_to_file(filename: str | Path) -> None:
    """Replace the file's contents with two fixed lines."""
    with open(filename, "w", encoding="utf-8") as out:
        out.writelines(_INITIAL_LINES)
    print("Data written to file successfully.")


def append_to_file(filename: str | Path) -> None:
    """Add one fixed line to the end of the file."""
    with open(filename, "a", encoding="utf-8") as out:
        out.write(_APPENDED_LINE)
    print("Data appended to file successfully.")


def read_from_file(filename: str | Path) -> list[str]:
    """Print the file line by line and return its lines without line endings."""
    with open(filename, encoding="utf-8") as src:
        lines = src.read().splitlines()
    print("\nContents of the file:")
    for line in lines:
        print(line)
    return lines


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Write, append to and read a text file.")
    parser.add_argument("filename", nargs="?", default=DEFAULT_FILENAME)
    args = parser.parse_args(argv)

    try:
        write_to_file(args.filename)
        append_to_file(args.filename)
        read_from_file(args.filename)
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())