"""Command-line entry point: run a chain of commands between two files."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import BinaryIO, TextIO

from pipex.commands import CommandNotFoundError, check_access, read_file, read_here_doc

__all__ = ["Invocation", "parse_arguments", "run_pipeline", "main"]

HERE_DOC = "here_doc"


@dataclass(frozen=True)
class Invocation:
    """A parsed command line.

    *source* is the input file, or the limiter when *here_doc* is set.
    """

    source: str
    commands: tuple[str, ...]
    outfile: str
    here_doc: bool = False


def parse_arguments(argv: Sequence[str]) -> Invocation:
    """Parse ``infile cmd... outfile`` or ``here_doc LIMITER cmd... outfile``."""
    args = list(argv)
    here_doc = bool(args) and args[0] == HERE_DOC
    minimum = 5 if here_doc else 4
    if len(args) < minimum:
        raise ValueError("invalid number of arguments")
    if here_doc:
        return Invocation(args[1], tuple(args[2:-1]), args[-1], here_doc=True)
    return Invocation(args[0], tuple(args[1:-1]), args[-1])


def _open_output(invocation: Invocation) -> BinaryIO:
    flags = os.O_WRONLY | os.O_CREAT
    flags |= os.O_APPEND if invocation.here_doc else os.O_TRUNC
    descriptor = os.open(invocation.outfile, flags, 0o644)
    return os.fdopen(descriptor, "ab" if invocation.here_doc else "wb")


def _gather_input(invocation: Invocation, stdin: TextIO | None) -> bytes:
    if invocation.here_doc:
        return read_here_doc(invocation.source, stdin).encode()
    try:
        return read_file(invocation.source)
    except OSError as exc:
        print(f"{invocation.source}: {exc.strerror}", file=sys.stderr)
        return b""


def _spawn(
    resolved: list[tuple[str, list[str]]],
    data: bytes,
    output: BinaryIO,
    env: Mapping[str, str],
) -> None:
    processes: list[subprocess.Popen] = []
    upstream = subprocess.PIPE
    for position, (path, argv) in enumerate(resolved):
        last = position == len(resolved) - 1
        process = subprocess.Popen(
            argv,
            executable=path,
            stdin=upstream,
            stdout=output if last else subprocess.PIPE,
            env=dict(env),
        )
        if processes:
            # The child now holds the read end; drop ours so SIGPIPE works.
            processes[-1].stdout.close()
        processes.append(process)
        upstream = process.stdout

    feeder = processes[0].stdin
    try:
        feeder.write(data)
    except BrokenPipeError:
        pass
    finally:
        try:
            feeder.close()
        except BrokenPipeError:
            pass
    for process in processes:
        process.wait()


def run_pipeline(
    invocation: Invocation,
    env: Mapping[str, str],
    stdin: TextIO | None = None,
) -> int:
    """Run the commands of *invocation*, each feeding the next.

    Every command is resolved before the output file is opened or any
    input is read; a missing command raises CommandNotFoundError.
    """
    resolved = check_access(invocation.commands, env)
    with _open_output(invocation) as output:
        data = _gather_input(invocation, stdin)
        _spawn(resolved, data, output, env)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point of the ``pipex`` command."""
    args = sys.argv[1:] if argv is None else argv
    try:
        invocation = parse_arguments(args)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    try:
        return run_pipeline(invocation, os.environ, sys.stdin)
    except CommandNotFoundError:
        return 1
    except OSError as exc:
        print(f"pipex: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())