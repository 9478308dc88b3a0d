"""Small file and filesystem utilities: MD5 hashing, tree walking, line
numbering, buffered and raw writes, pixel records and a FIFO echo server."""

__version__ = "0.1.0"