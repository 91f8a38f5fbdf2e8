"""A small interactive POSIX shell with pipes, redirections, background jobs and built-in file, descriptor, bit and calculator commands."""

__version__ = "1.0.0"