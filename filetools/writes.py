"""Write a repeated buffer with low-level descriptors or buffered files."""

from __future__ import annotations

import os
import re
import sys

DEFAULT_PATH = "data.raw"


def make_buffer(size: int) -> bytes:
    """Return *size* bytes cycling through the values 0..255."""
    return (bytes(range(256)) * (size // 256 + 1))[:size]


def write_syscall(path: str | os.PathLike, count: int, size: int) -> None:
    """Write the buffer *count* times through a raw descriptor.

    The file is created if missing but not truncated.
    """
    buffer = make_buffer(size)
    fd = os.open(path, os.O_CREAT | os.O_WRONLY, 0o666)
    try:
        for _ in range(count):
            view = memoryview(buffer)
            while view:
                written = os.write(fd, view)
                view = view[written:]
    finally:
        os.close(fd)


def write_stdlib(path: str | os.PathLike, count: int, size: int) -> None:
    """Write the buffer *count* times through a buffered file, truncating it."""
    buffer = make_buffer(size)
    with open(path, "wb") as fh:
        for _ in range(count):
            fh.write(buffer)


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def main(argv: list[str] | None = None) -> int:
    """Write data.raw using descriptors ('y') or buffered files."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 3:
        print("writes : count size y/n", file=sys.stderr)
        return 1
    count = _atoi(args[0])
    size = _atoi(args[1])
    if count < 0 or size < 0:
        print("writes : count and size must not be negative", file=sys.stderr)
        return 1
    if args[2].startswith("y"):
        write_syscall(DEFAULT_PATH, count, size)
    else:
        write_stdlib(DEFAULT_PATH, count, size)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())