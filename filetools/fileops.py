"""Open, read, write and measure a text file."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator

LINE_LIMIT = 255
GREETING = "GeeksforGeeks-A Computer Science Portal for Geeks"
READ_PATH = "test-file.txt"
WRITE_PATH = "GfgTest.txt"


def read_lines(path: str | os.PathLike) -> Iterator[str]:
    """Yield the file's lines, splitting any longer than 255 characters."""
    with open(path, newline="") as fh:
        for line in fh:
            while len(line) > LINE_LIMIT:
                yield line[:LINE_LIMIT]
                line = line[LINE_LIMIT:]
            yield line


def write_greeting(path: str | os.PathLike) -> None:
    """Create or overwrite *path* with the greeting line."""
    with open(path, "w") as fh:
        fh.write(GREETING + "\n")


def file_size(path: str | os.PathLike) -> int:
    """Return the byte offset of the end of the file."""
    with open(path, "rb") as fh:
        return fh.seek(0, os.SEEK_END)


def main(argv: list[str] | None = None) -> int:
    """Read test-file.txt, write GfgTest.txt, then report test-file.txt's size."""
    try:
        lines = list(read_lines(READ_PATH))
    except OSError:
        print("Error opening file")
    else:
        print("The file was opened.")
        for line in lines:
            print(line)
    print()

    try:
        write_greeting(WRITE_PATH)
    except OSError:
        print(f"{WRITE_PATH} file failed to open.", end="")
    else:
        print("The file is now opened.")
        print(f"Data successfully written in file {WRITE_PATH}")
        print("The file is now closed.")
    print()

    try:
        size = file_size(READ_PATH)
    except OSError as exc:
        print(f"Error opening file: {exc.strerror}", file=sys.stderr)
        return 1
    print(f"{size} ")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())