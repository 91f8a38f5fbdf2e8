"""Running external commands: pipelines, redirections and background jobs."""

import subprocess
import sys
from dataclasses import dataclass, field

from soshell.redirects import redirects

PIPE_SYMBOL = "|"


def ultimo(args):
    """Strip a trailing background marker.

    Returns the remaining arguments and True when the last argument starts
    with ``&`` (run in background), False otherwise.
    """
    args = list(args)
    if args and args[-1].startswith("&"):
        return args[:-1], True
    return args, False


def split_pipeline(args):
    """Split ``args`` on ``|`` into the argument lists of each command."""
    commands = [[]]
    for arg in args:
        if arg == PIPE_SYMBOL:
            commands.append([])
        else:
            commands[-1].append(arg)
    return commands


@dataclass
class Job:
    """The processes started for one command line."""

    background: bool = False
    stages: list = field(default_factory=list)
    failures: list = field(default_factory=list)

    @property
    def processes(self):
        """The processes that were actually started, in pipeline order."""
        return [stage for stage in self.stages if stage is not None]

    @property
    def pid(self):
        """PID of the first started process, or None when none started."""
        processes = self.processes
        return processes[0].pid if processes else None

    @property
    def returncode(self):
        """Exit status of the last stage; 1 when that stage could not start."""
        if not self.stages or self.stages[-1] is None:
            return 1
        return self.stages[-1].returncode

    def wait(self):
        """Wait for every process of the job and return :attr:`returncode`."""
        for process in self.processes:
            process.wait()
        return self.returncode


def _close(stream):
    close = getattr(stream, "close", None)
    if close is not None:
        close()


def _report(label, exc):
    sys.stderr.write(f"{label}: {exc.strerror or exc}\n")
    sys.stderr.flush()


def _start_stage(job, command, previous, last):
    """Start one pipeline stage; return what the next stage should read."""
    argv, redirect = redirects(command)
    broken = None if last else subprocess.DEVNULL

    try:
        redirect_fd = redirect.open() if redirect is not None else None
    except OSError as exc:
        _report("Descritores inválidos", exc)
        job.stages.append(None)
        job.failures.append(argv[0])
        _close(previous)
        return broken

    stdin = previous
    stdout = None if last else subprocess.PIPE
    stderr = None
    if redirect is not None:
        if redirect.target_fd == 0:
            stdin = redirect_fd
        elif redirect.target_fd == 1:
            stdout = redirect_fd
        else:
            stderr = redirect_fd

    try:
        process = subprocess.Popen(argv, stdin=stdin, stdout=stdout, stderr=stderr)
    except OSError as exc:
        _report(argv[0], exc)
        job.stages.append(None)
        job.failures.append(argv[0])
        return broken
    finally:
        _close(previous)
        if redirect_fd is not None:
            subprocess.os.close(redirect_fd) if False else _close_fd(redirect_fd)

    job.stages.append(process)
    if last:
        return None
    return process.stdout if process.stdout is not None else subprocess.DEVNULL


def _close_fd(fd):
    import os

    os.close(fd)


def execute(args):
    """Run a command line made of external commands joined by pipes.

    A trailing ``&`` starts the job in the background; otherwise the job is
    waited for. Each command may end with one redirection.
    """
    args, background = ultimo(args)
    commands = split_pipeline(args)
    if any(not command for command in commands):
        raise ValueError("Erro de sintaxe: comando vazio")

    job = Job(background=background)
    previous = None
    for index, command in enumerate(commands):
        previous = _start_stage(job, command, previous, index == len(commands) - 1)
    _close(previous)

    if not background:
        job.wait()
    return job