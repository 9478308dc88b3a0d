"""A one-shot echo server over a named pipe."""

from __future__ import annotations

import errno
import os
import sys
from typing import TextIO

BUFFER_SIZE = 20


def ensure_fifo(path: str | os.PathLike) -> bool:
    """Create a FIFO at *path*; return False if something already exists there."""
    try:
        os.mkfifo(path, 0o666)
    except OSError as exc:
        if exc.errno != errno.EEXIST:
            raise
        return False
    return True


def serve_once(path: str | os.PathLike, out: TextIO) -> bytes:
    """Read one message from the FIFO, echo it back, then remove the FIFO.

    Progress messages go to *out*. Returns the bytes received.
    """
    path = os.fspath(path)
    if ensure_fifo(path):
        print(f'Server: FIFO "{path}" created successfully.', file=out)
    else:
        print(f'Server: FIFO "{path}" already exists.', file=out)

    fd = os.open(path, os.O_RDWR)
    print(f'Server: Opened FIFO "{path}" for read/write.', file=out)

    try:
        data = os.read(fd, BUFFER_SIZE - 1)
    except OSError:
        os.close(fd)
        os.unlink(path)
        raise

    if data:
        text = data.decode(errors="replace")
        print(f'Server: Received message: "{text}" ({len(data)} bytes).', file=out)
        try:
            written = os.write(fd, data + b"\0")
        except OSError as exc:
            print(f"Server: Error writing back to FIFO: {exc.strerror}", file=sys.stderr)
        else:
            print(f'Server: Echoed message back: "{text}" ({written} bytes).', file=out)
    else:
        print("Server: Client closed the connection or sent no data.", file=out)

    os.close(fd)
    print(f'Server: Closed FIFO "{path}".', file=out)

    try:
        os.unlink(path)
    except OSError as exc:
        print(f"Server: Error unlinking FIFO: {exc.strerror}", file=sys.stderr)
    else:
        print(f'Server: FIFO "{path}" unlinked.', file=out)
    return data


def main(argv: list[str] | None = None) -> int:
    """Serve one echo over the FIFO named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: fifo <fifo_path>", file=sys.stderr)
        return 1
    try:
        serve_once(args[0], sys.stdout)
    except OSError as exc:
        print(f"Server: {exc.strerror}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())