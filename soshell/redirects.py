"""Recognising a trailing I/O redirection in an argument list."""

import enum
import os
from dataclasses import dataclass

FILE_MODE = 0o600


class RedirectKind(enum.Enum):
    """Redirection operators, keyed by their symbol."""

    STDERR = "2>"
    STDOUT = ">"
    APPEND = ">>"
    STDIN = "<"

    @property
    def target_fd(self):
        """The standard descriptor the redirection replaces."""
        if self is RedirectKind.STDIN:
            return 0
        if self is RedirectKind.STDERR:
            return 2
        return 1


@dataclass(frozen=True)
class Redirect:
    """A redirection of one standard stream to or from ``path``."""

    kind: RedirectKind
    path: str

    @property
    def target_fd(self):
        return self.kind.target_fd

    def open(self):
        """Open ``path`` as this redirection needs and return the descriptor."""
        if self.kind is RedirectKind.STDIN:
            return os.open(self.path, os.O_RDONLY)
        if self.kind is RedirectKind.APPEND:
            flags = os.O_WRONLY | os.O_CREAT | os.O_APPEND
        else:
            flags = os.O_WRONLY | os.O_CREAT | os.O_TRUNC
        return os.open(self.path, flags, FILE_MODE)


def redirects(args):
    """Split a trailing ``<op> <file>`` pair off ``args``.

    Returns the remaining arguments and the redirection, or None when the
    last two arguments are not a redirection.
    """
    args = list(args)
    if len(args) >= 3:
        try:
            kind = RedirectKind(args[-2])
        except ValueError:
            return args, None
        return args[:-2], Redirect(kind, args[-1])
    return args, None