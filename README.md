# filetools

Small command-line tools and functions for working with files and the
filesystem. The package uses only the standard library.

## Installation

    pip install .

To run the tests:

    pip install .[test]
    pytest

## Commands

| Command | What it does |
| --- | --- |
| `filetools-md5 FILE` | Prints `MD5 Hash:` and then the file's MD5 digest in hex. |
| `filetools-walk DIRECTORY` | Walks the tree in sorted order, parents first. It follows symbolic links and visits each directory once. For every entry it prints the inode, the path and the kind of entry. For a directory it also prints the level, the size and the file name. World-readable files and directories get a `[WARNING: World-Readable]` mark. |
| `filetools-writes COUNT SIZE y/n` | Writes `COUNT` blocks of `SIZE` bytes to `data.raw` in the current directory. The bytes cycle through 0..255. With `y` it writes through a raw file descriptor, which creates the file but does not truncate it. With anything else it writes through a buffered file object, which truncates the file first. |
| `filetools-fileops` | Prints the lines of `test-file.txt`. It then writes a greeting line to `GfgTest.txt` and prints the size of `test-file.txt` in bytes. |
| `filetools-pixels` | Writes nine 3-byte RGB pixel records to `image.dat`. |
| `filetools-readlines FILE` | Copies a file to standard output. |
| `filetools-readlines-numbered FILE` | Prints each complete line of a file with its line number in front. If the last line has no newline, it is printed without a number. |
| `filetools-fifo PATH` | Creates a named pipe at `PATH` unless something is already there, then opens it for reading and writing. It reads one message of up to 19 bytes and writes it back with a trailing NUL byte. It then closes the pipe and removes it, printing its progress as it goes. |

Every command returns exit status 1 and prints a message to standard error
if it is given the wrong arguments or a file cannot be opened.

## Library use

```python
from filetools.md5hash import compute_file_hash
from filetools.walk import walk, describe_entry, EntryKind
from filetools.pixels import Pixel, generate_pixels, write_pixels, read_pixels
from filetools.readlines import numbered_lines, format_numbered
from filetools.writes import make_buffer, write_stdlib, write_syscall
from filetools.fileops import read_lines, write_greeting, file_size
from filetools.fifo import ensure_fifo, serve_once

print(compute_file_hash("some-file.bin"))

for entry in walk("."):
    if entry.kind is EntryKind.DIRECTORY:
        print(entry.level, entry.name)
    print(describe_entry(entry))

write_pixels("image.dat", generate_pixels(10))
print(read_pixels("image.dat"))
print(Pixel(1, 5, 2).pack())

with open("notes.txt") as stream:
    for number, line in numbered_lines(stream):
        print(number, line, end="")
```

- `walk` yields `Entry` objects with `path`, `kind`, `stat`, `level`, `base`
  and `name`. `kind` is one of `EntryKind.FILE`, `DIRECTORY`, `UNSTATABLE`,
  `UNREADABLE_DIR` and `BROKEN_SYMLINK`.
- `read_lines` splits lines longer than 255 characters into pieces.
- `Pixel` accepts channel values from 0 to 255 only. `read_pixels` raises
  `ValueError` if the file length is not a multiple of three bytes.

## Limits

- `filetools-writes` only writes the data. It does not time the two ways of
  writing, so time it with an outside tool.
- `filetools-fifo` serves a single message and then removes the pipe. It has
  no client command and needs a POSIX system.