"""Print a text file, optionally with line numbers."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import TextIO


def numbered_lines(stream: TextIO) -> Iterator[tuple[int | None, str]]:
    """Yield (number, line) for each complete line.

    A final line without a newline is yielded with the number None.
    """
    number = 1
    for line in stream:
        if line.endswith("\n"):
            yield number, line
            number += 1
        else:
            yield None, line


def format_numbered(stream: TextIO) -> str:
    """Return the stream's text with each complete line numbered."""
    return "".join(
        line if number is None else f"{number} {line}"
        for number, line in numbered_lines(stream)
    )


def _open_from_args(args: list[str]) -> TextIO | None:
    if len(args) != 1:
        print("Usage: readlines <filename>", file=sys.stderr)
        return None
    try:
        return open(args[0], newline="", errors="surrogateescape")
    except OSError as exc:
        print(f"Error opening file: {exc.strerror}", file=sys.stderr)
        return None


def main(argv: list[str] | None = None) -> int:
    """Copy the named file to standard output."""
    args = sys.argv[1:] if argv is None else list(argv)
    stream = _open_from_args(args)
    if stream is None:
        return 1
    with stream:
        try:
            for line in stream:
                sys.stdout.write(line)
        except OSError as exc:
            print(f"Error reading file: {exc.strerror}", file=sys.stderr)
            return 1
    return 0


def main_numbered(argv: list[str] | None = None) -> int:
    """Copy the named file to standard output with numbered lines."""
    args = sys.argv[1:] if argv is None else list(argv)
    stream = _open_from_args(args)
    if stream is None:
        return 1
    with stream:
        try:
            sys.stdout.write(format_numbered(stream))
        except OSError as exc:
            print(f"Error reading file: {exc.strerror}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())