"""Walk a directory tree and describe each entry."""

from __future__ import annotations

import enum
import os
import stat
import sys
import time
from collections.abc import Iterator
from dataclasses import dataclass


class EntryKind(enum.Enum):
    """What kind of object a walked path refers to."""

    FILE = "file"
    DIRECTORY = "directory"
    UNSTATABLE = "unstatable"
    UNREADABLE_DIR = "unreadable_dir"
    BROKEN_SYMLINK = "broken_symlink"


@dataclass(frozen=True)
class Entry:
    """One object met during a walk."""

    path: str
    kind: EntryKind
    stat: os.stat_result | None
    level: int
    base: int

    @property
    def name(self) -> str:
        """The final component of the path."""
        return self.path[self.base:]


def _classify(path: str) -> tuple[EntryKind, os.stat_result | None]:
    try:
        st = os.stat(path)
    except OSError:
        try:
            lst = os.lstat(path)
        except OSError:
            return EntryKind.UNSTATABLE, None
        if stat.S_ISLNK(lst.st_mode):
            return EntryKind.BROKEN_SYMLINK, lst
        return EntryKind.UNSTATABLE, None
    if stat.S_ISDIR(st.st_mode):
        return EntryKind.DIRECTORY, st
    return EntryKind.FILE, st


def _visit(path: str, level: int, visited: set[tuple[int, int]]) -> Iterator[Entry]:
    kind, st = _classify(path)
    base = len(path) - len(os.path.basename(path))
    if kind is not EntryKind.DIRECTORY:
        yield Entry(path, kind, st, level, base)
        return
    key = (st.st_dev, st.st_ino)
    if key in visited:
        return
    visited.add(key)
    try:
        names = sorted(os.listdir(path))
    except OSError:
        yield Entry(path, EntryKind.UNREADABLE_DIR, st, level, base)
        return
    yield Entry(path, kind, st, level, base)
    for name in names:
        yield from _visit(os.path.join(path, name), level + 1, visited)


def walk(root: str | os.PathLike) -> Iterator[Entry]:
    """Yield every entry below *root*, parents before their children.

    Symbolic links are followed; each directory is visited once.
    Raises OSError if *root* itself cannot be examined.
    """
    root = os.fspath(root)
    if len(root) > 1:
        root = root.rstrip(os.sep) or os.sep
    os.stat(root)
    yield from _visit(root, 0, set())


def describe_entry(entry: Entry) -> str:
    """Return a human-readable description of *entry*."""
    st = entry.stat
    inode = st.st_ino if st is not None else 0
    parts = [f"Inode: {inode}, Name: {entry.path}"]
    kind = entry.kind
    if kind is EntryKind.FILE:
        parts.append(f" Regular File, Last Access: {time.ctime(st.st_atime)}\n ")
        if stat.S_ISBLK(st.st_mode):
            parts.append(" (Block Device)")
        elif stat.S_ISCHR(st.st_mode):
            parts.append(" (Character Device)")
    elif kind is EntryKind.DIRECTORY:
        parts.append(" (Directory) \n")
        parts.append(
            f"level={entry.level:02d}, size={st.st_size:07d} "
            f"path={entry.path} filename={entry.name}"
        )
    elif kind is EntryKind.UNSTATABLE:
        parts.append(" (Unreadable) ")
    elif kind is EntryKind.UNREADABLE_DIR:
        parts.append(" (Directory cannot be read) ")
    elif kind is EntryKind.BROKEN_SYMLINK:
        parts.append(" (Symbolic link refers to non-existent file)")
    if kind in (EntryKind.FILE, EntryKind.DIRECTORY) and st.st_mode & stat.S_IROTH:
        parts.append(" [WARNING: World-Readable]")
    return "".join(parts)


def main(argv: list[str] | None = None) -> int:
    """Describe every entry in the directory tree named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: walk <directory_path>", file=sys.stderr)
        return 1
    try:
        for entry in walk(args[0]):
            print(describe_entry(entry))
    except OSError as exc:
        print(f"nftw: {exc.strerror}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())