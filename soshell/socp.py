"""Block-wise file copying."""

import os

DEFAULT_BLKSIZE = 1024


def io_copy(source, destination, blksize=DEFAULT_BLKSIZE):
    """Copy ``source`` to ``destination`` in blocks; return the bytes copied."""
    if blksize <= 0:
        raise ValueError(f"block size must be positive, got {blksize}")
    total = 0
    for block in iter(lambda: source.read(blksize), b""):
        destination.write(block)
        total += len(block)
    return total


def socp(source, destination, blksize=DEFAULT_BLKSIZE):
    """Copy the file ``source`` to ``destination``, truncating it; return bytes copied."""
    if blksize <= 0:
        raise ValueError(f"block size must be positive, got {blksize}")
    with open(source, "rb") as fin:
        fd = os.open(destination, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
        with open(fd, "wb") as fout:
            return io_copy(fin, fout, blksize)