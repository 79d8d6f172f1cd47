"""Run two commands joined by a pipe, from an input file to an output file."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import Mapping, Sequence

from .pathfind import CommandNotFound, find_command
from .textutils import split_words

USAGE = "usage: pipex infile cmd cmd outfile"
_FAILED_STATUS = 1


class PipexError(Exception):
    """Raised when the pipeline cannot be set up."""


def _report(message: str) -> None:
    sys.stderr.write(message + "\n")
    sys.stderr.flush()


def _spawn(
    command: str, stdin: int, stdout: int, env: Mapping[str, str]
) -> subprocess.Popen | None:
    words = split_words(command, " ")
    try:
        path = find_command(words[0] if words else None, env)
    except CommandNotFound as exc:
        _report(str(exc))
        return None
    try:
        return subprocess.Popen(
            words, executable=path, stdin=stdin, stdout=stdout, env=dict(env)
        )
    except OSError:
        _report("command not found")
        return None


def run_pipeline(
    infile: str,
    first: str,
    second: str,
    outfile: str,
    env: Mapping[str, str] | None = None,
) -> tuple[int, int]:
    """Run ``first < infile | second > outfile``.

    Commands are split on spaces and looked up through the PATH of *env*
    (the process environment by default). A command that cannot be found or
    started is reported on stderr and counts as exit status 1; the other
    command still runs. Returns the exit statuses of both commands.
    """
    if env is None:
        env = os.environ
    try:
        in_fd = os.open(infile, os.O_RDONLY)
    except OSError:
        raise PipexError("failed to open infile") from None
    try:
        out_fd = os.open(outfile, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
    except OSError:
        os.close(in_fd)
        raise PipexError("failed to open outfile") from None

    fds = [in_fd, out_fd]
    try:
        try:
            read_end, write_end = os.pipe()
        except OSError:
            raise PipexError("pipe error") from None
        fds += [read_end, write_end]
        producer = _spawn(first, in_fd, write_end, env)
        consumer = _spawn(second, read_end, out_fd, env)
    finally:
        for fd in fds:
            os.close(fd)

    return tuple(
        _FAILED_STATUS if proc is None else proc.wait()
        for proc in (producer, consumer)
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: ``pipex infile cmd1 cmd2 outfile``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        _report(USAGE)
        return 1
    infile, first, second, outfile = args
    try:
        run_pipeline(infile, first, second, outfile, os.environ)
    except PipexError as exc:
        _report(str(exc))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())