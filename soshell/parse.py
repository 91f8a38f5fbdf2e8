"""Splitting a command line into arguments."""

import re

_SEPARATORS = re.compile(r"[ \t]+")


def parse(line):
    """Split ``line`` on runs of spaces and tabs, dropping empty fields."""
    return [token for token in _SEPARATORS.split(line) if token]