"""Delayed warnings and background copies with a bounded log."""

import sys
import threading
import time

from soshell.socp import DEFAULT_BLKSIZE, socp

MAX_RECORDS = 100
_ENTRY_LIMIT = 129


def aviso(message, seconds, stream=None):
    """Wait ``seconds`` whole seconds, then write the warning to ``stream``."""
    for _ in range(max(int(seconds), 0)):
        time.sleep(1)
    out = sys.stderr if stream is None else stream
    out.write(f"Aviso : {message}\n")
    out.flush()


def start_aviso(message, seconds):
    """Run :func:`aviso` in a background thread and return the thread."""
    thread = threading.Thread(target=aviso, args=(message, seconds), daemon=True)
    thread.start()
    return thread


class CopyLog:
    """A fixed-size circular record of completed copies."""

    def __init__(self, capacity=MAX_RECORDS, clock=time.time):
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._clock = clock
        self._slots = []
        self._count = 0
        self._lock = threading.Lock()

    def record(self, source):
        """Log a copy of ``source`` with the current date and time."""
        entry = f"{time.ctime(self._clock())} {source}"[:_ENTRY_LIMIT]
        with self._lock:
            slot = self._count % self.capacity
            if slot < len(self._slots):
                self._slots[slot] = entry
            else:
                self._slots.append(entry)
            self._count += 1

    def report(self):
        """Return the stored records in slot order under a heading."""
        with self._lock:
            entries = list(self._slots)
        return "Registos de cópias efetuadas:\n" + "".join(f"{e}\n" for e in entries)

    def copy(self, source, destination, blksize=DEFAULT_BLKSIZE):
        """Copy ``source`` to ``destination`` and log it, even if the copy fails."""
        try:
            return socp(source, destination, blksize)
        finally:
            self.record(source)


def _copy_in_background(log, source, destination, blksize):
    try:
        log.copy(source, destination, blksize)
    except (OSError, ValueError) as exc:
        sys.stderr.write(f"Erro na cópia de {source}: {exc}\n")
        sys.stderr.flush()


def start_copy(log, source, destination, blksize=DEFAULT_BLKSIZE):
    """Run ``log.copy`` in a background thread and return the thread."""
    thread = threading.Thread(
        target=_copy_in_background,
        args=(log, source, destination, blksize),
        daemon=True,
    )
    thread.start()
    return thread