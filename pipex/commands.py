"""Locating commands, reading pipeline input and reporting failures."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable, Mapping
from typing import TextIO

from pipex.splitting import QuoteError, split_command

__all__ = [
    "CommandNotFoundError",
    "search_path",
    "find_executable",
    "check_access",
    "read_file",
    "read_here_doc",
    "report_not_found",
]


class CommandNotFoundError(LookupError):
    """Raised when a command cannot be found or is not executable."""

    def __init__(self, command: str) -> None:
        super().__init__(f"command not found: {command}")
        self.command = command


def search_path(env: Mapping[str, str]) -> list[str]:
    """Return the non-empty directories listed in the PATH of *env*."""
    value = env.get("PATH")
    if value is None:
        return []
    return [directory for directory in value.split(":") if directory]


def find_executable(name: str, env: Mapping[str, str]) -> str | None:
    """Return the path that runs *name*, or None if none is executable.

    Absolute names, and any name when *env* is empty, are checked as given;
    otherwise each PATH directory is tried in order.
    """
    if not name:
        return None
    if not env or name.startswith("/"):
        return name if os.access(name, os.X_OK) else None
    for directory in search_path(env):
        candidate = f"{directory}/{name}"
        if os.access(candidate, os.X_OK):
            return candidate
    return None


def check_access(
    commands: Iterable[str], env: Mapping[str, str]
) -> list[tuple[str, list[str]]]:
    """Resolve every command string before anything is run.

    Returns a list of (executable path, argument vector) pairs. The first
    command that cannot be found is reported on standard error and raises
    CommandNotFoundError.
    """
    resolved = []
    for command in commands:
        try:
            argv = split_command(command)
        except QuoteError:
            argv = []
        name = argv[0] if argv else command
        path = find_executable(argv[0], env) if argv else None
        if path is None:
            report_not_found(name)
            raise CommandNotFoundError(name)
        resolved.append((path, argv))
    return resolved


def read_file(path: str | os.PathLike[str]) -> bytes:
    """Return the whole contents of the file at *path*."""
    with open(path, "rb") as handle:
        return handle.read()


def read_here_doc(limiter: str, stream: TextIO | None = None) -> str:
    """Read lines from *stream* until a line holding only *limiter*.

    The limiter line itself is not included. End of input also ends the
    document.
    """
    source = sys.stdin if stream is None else stream
    lines = []
    for line in source:
        if len(line) == len(limiter) + 1 and line.startswith(limiter):
            break
        lines.append(line)
    return "".join(lines)


def report_not_found(name: str, stream: TextIO | None = None) -> None:
    """Write a 'command not found' message for *name*."""
    target = sys.stderr if stream is None else stream
    target.write(f"command not found: {name}\n")