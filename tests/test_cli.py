import os

import pytest

from pipex.cli import PipexError, main, run_pipeline

ENV = {"PATH": os.environ.get("PATH", "/usr/bin:/bin")}


@pytest.fixture
def infile(tmp_path):
    path = tmp_path / "in.txt"
    path.write_text("hello\nworld\nhello again\n")
    return path


def test_pipeline_filters_through_two_commands(infile, tmp_path):
    out = tmp_path / "out.txt"
    statuses = run_pipeline(str(infile), "cat", "grep world", str(out), ENV)
    assert out.read_text() == "world\n"
    assert statuses == (0, 0)


def test_pipeline_copies_input_with_cat_cat(infile, tmp_path):
    out = tmp_path / "out.txt"
    run_pipeline(str(infile), "cat", "cat", str(out), ENV)
    assert out.read_text() == infile.read_text()


def test_outfile_is_truncated(infile, tmp_path):
    out = tmp_path / "out.txt"
    out.write_text("old content that is long enough to notice\n" * 10)
    run_pipeline(str(infile), "cat", "grep again", str(out), ENV)
    assert out.read_text() == "hello again\n"


def test_missing_infile_raises_and_outfile_not_created(tmp_path):
    out = tmp_path / "out.txt"
    with pytest.raises(PipexError, match="failed to open infile"):
        run_pipeline(str(tmp_path / "missing"), "cat", "cat", str(out), ENV)
    assert not out.exists()


def test_unopenable_outfile_raises(infile, tmp_path):
    out = tmp_path / "no_dir" / "out.txt"
    with pytest.raises(PipexError, match="failed to open outfile"):
        run_pipeline(str(infile), "cat", "cat", str(out), ENV)


def test_unknown_first_command_reports_and_second_still_runs(infile, tmp_path, capsys):
    out = tmp_path / "out.txt"
    statuses = run_pipeline(str(infile), "nosuchcmd_qq", "cat", str(out), ENV)
    assert statuses == (1, 0)
    assert out.read_text() == ""
    assert "command not found" in capsys.readouterr().err


def test_empty_command_counts_as_not_found(infile, tmp_path, capsys):
    out = tmp_path / "out.txt"
    statuses = run_pipeline(str(infile), "cat", "   ", str(out), ENV)
    assert statuses[1] == 1
    assert "command not found" in capsys.readouterr().err


def test_main_wrong_argument_count(capsys):
    assert main(["a", "b", "c"]) == 1
    assert "usage" in capsys.readouterr().err


def test_main_success(infile, tmp_path):
    out = tmp_path / "out.txt"
    assert main([str(infile), "cat", "grep hello", str(out)]) == 0
    assert out.read_text().splitlines() == ["hello", "hello again"]


def test_main_reports_missing_infile(tmp_path, capsys):
    out = tmp_path / "out.txt"
    assert main([str(tmp_path / "missing"), "cat", "cat", str(out)]) == 1
    assert "failed to open infile" in capsys.readouterr().err