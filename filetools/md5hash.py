"""Compute the MD5 digest of a file."""

from __future__ import annotations

import hashlib
import os
import sys

CHUNK_SIZE = 4096


def compute_file_hash(path: str | os.PathLike) -> str:
    """Return the hexadecimal MD5 digest of the file at *path*.

    Raises OSError when the file cannot be opened or read.
    """
    digest = hashlib.md5()
    with open(path, "rb") as fh:
        for chunk in iter(lambda: fh.read(CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.hexdigest()


def main(argv: list[str] | None = None) -> int:
    """Print the MD5 hash of the file named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: md5hash <filename>", file=sys.stderr)
        return 1
    filename = args[0]
    try:
        value = compute_file_hash(filename)
    except OSError as exc:
        print(f"Error opening file {filename}: {exc.strerror}", file=sys.stderr)
        print("Error computing MD5 hash", file=sys.stderr)
        return 1
    print(f"\tMD5 Hash: {value}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())