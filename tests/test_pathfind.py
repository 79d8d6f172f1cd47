import os

import pytest

from pipex.pathfind import CommandNotFound, find_command, search_dirs


def _make_exec(path, mode=0o755):
    path.write_text("#!/bin/sh\nexit 0\n")
    os.chmod(path, mode)
    return path


def test_search_dirs_splits_on_colon_and_drops_empty():
    assert search_dirs({"PATH": "/usr/bin::/bin:"}) == ["/usr/bin", "/bin"]


def test_search_dirs_without_path_raises():
    with pytest.raises(CommandNotFound):
        search_dirs({"HOME": "/tmp"})


def test_absolute_command_returned_unchanged():
    assert find_command("/no/such/tool", {}) == "/no/such/tool"


def test_relative_dot_slash_command_returned_unchanged():
    assert find_command("./tool", {}) == "./tool"


def test_empty_or_missing_command_raises():
    with pytest.raises(CommandNotFound):
        find_command("", {"PATH": "/bin"})
    with pytest.raises(CommandNotFound):
        find_command(None, {"PATH": "/bin"})


def test_finds_executable_in_path(tmp_path):
    _make_exec(tmp_path / "tool")
    found = find_command("tool", {"PATH": f"/nonexistent:{tmp_path}"})
    assert found == f"{tmp_path}/tool"


def test_first_directory_wins(tmp_path):
    first = tmp_path / "a"
    second = tmp_path / "b"
    first.mkdir()
    second.mkdir()
    _make_exec(first / "tool")
    _make_exec(second / "tool")
    found = find_command("tool", {"PATH": f"{first}:{second}"})
    assert found == f"{first}/tool"


def test_non_executable_file_is_skipped(tmp_path):
    first = tmp_path / "a"
    second = tmp_path / "b"
    first.mkdir()
    second.mkdir()
    _make_exec(first / "tool", mode=0o644)
    _make_exec(second / "tool")
    found = find_command("tool", {"PATH": f"{first}:{second}"})
    assert found == f"{second}/tool"


def test_unknown_command_raises_with_message(tmp_path):
    with pytest.raises(CommandNotFound, match="command not found"):
        find_command("tool", {"PATH": str(tmp_path)})


def test_missing_path_variable_raises_for_bare_command():
    with pytest.raises(CommandNotFound):
        find_command("ls", {})