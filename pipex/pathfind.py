"""Locate executables through the PATH of an environment."""

from __future__ import annotations

import os
from typing import Mapping

from .textutils import split_words

_NOT_FOUND = "command not found"


class CommandNotFound(LookupError):
    """Raised when a command cannot be resolved to an executable path."""

    def __init__(self, message: str = _NOT_FOUND) -> None:
        super().__init__(message)


def search_dirs(env: Mapping[str, str]) -> list[str]:
    """Return the directories listed in the PATH of *env*, empty entries dropped.

    Raises CommandNotFound when *env* has no PATH at all.
    """
    if "PATH" not in env:
        raise CommandNotFound()
    return split_words(env["PATH"], ":")


def find_command(cmd: str | None, env: Mapping[str, str]) -> str:
    """Resolve *cmd* to the path of an executable.

    A command starting with "/" or "./" is taken as a path and returned as it
    is. Otherwise each PATH directory of *env* is tried in order and the first
    executable match is returned.
    """
    if not cmd:
        raise CommandNotFound()
    if cmd.startswith("/") or cmd.startswith("./"):
        return cmd
    for directory in search_dirs(env):
        candidate = f"{directory}/{cmd}"
        if os.access(candidate, os.X_OK):
            return candidate
    raise CommandNotFound()