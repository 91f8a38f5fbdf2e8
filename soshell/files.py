"""Inspecting, opening, reading and closing raw file descriptors."""

import errno
import fcntl
import os
import resource
import sys

MAX_READ = 2048
_SCAN_LIMIT = 64
_JPEG_PREFIX = b"\xff\xd8\xff"
_JPEG_MARKERS = frozenset({0xE0, 0xE1, 0xE2, 0xE8})


def fd_is_valid(fd):
    """Return True unless ``fd`` is not an open descriptor."""
    try:
        fcntl.fcntl(fd, fcntl.F_GETFD)
    except OSError as exc:
        return exc.errno != errno.EBADF
    except (OverflowError, ValueError):
        return False
    return True


def open_file(name):
    """Open ``name`` read-only and return the new descriptor."""
    return os.open(name, os.O_RDONLY)


def close_fd(fd):
    """Close ``fd``; raises OSError when it is not open."""
    os.close(fd)


def format_bytes(data):
    """Render ``data`` as an ASCII line (non-printables as '.') and a hex line."""
    ascii_part = "".join(chr(b) if 32 <= b <= 126 else "." for b in data)
    hex_part = "".join(f"{b:02x} " for b in data)
    return f"ASCII: {ascii_part}\nHex:   {hex_part}"


def read_fd(fd, nbytes):
    """Read at most ``nbytes`` (capped at 2048) bytes from ``fd``."""
    if nbytes < 0:
        raise ValueError(f"byte count must not be negative, got {nbytes}")
    return os.read(fd, min(nbytes, MAX_READ))


def _stdout_descriptor():
    stream = sys.stdout
    if stream is None:
        return None
    try:
        return stream.fileno()
    except (AttributeError, OSError, ValueError):
        return None


def file_info():
    """Describe stdout, the descriptor limit and the descriptors below 64 that are open."""
    lines = []
    outfd = _stdout_descriptor()
    if outfd is None:
        lines.append("STDOUT está fechado.")
    else:
        lines.append(f"STDOUT está aberto: descritor {outfd}")

    try:
        soft, _hard = resource.getrlimit(resource.RLIMIT_NOFILE)
    except (OSError, ValueError):
        pass
    else:
        lines.append(f"Limite de descritores de ficheiro do processo: {soft}")

    open_fds = [fd for fd in range(_SCAN_LIMIT) if fd_is_valid(fd)]
    lines.append("Descritores abertos: " + "".join(f"{fd} " for fd in open_fds))
    lines.append(f"Total de ficheiros abertos: {len(open_fds)}")
    return "\n".join(lines) + "\n"


def is_jpeg(fd):
    """Tell whether the data at ``fd`` starts with a JPEG signature.

    The descriptor is rewound to the start after a full four-byte read.
    """
    head = os.read(fd, 4)
    if len(head) < 4:
        return False
    os.lseek(fd, 0, os.SEEK_SET)
    return head[:3] == _JPEG_PREFIX and head[3] in _JPEG_MARKERS