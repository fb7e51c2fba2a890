import logging

import pytest
from click.testing import CliRunner

from fman import cli as test_module
from fman.testing import patchenv, setup_temp_dir, setup_temp_file
from fman.version import VERSION


def _invoke(args):
    return CliRunner().invoke(test_module.main, args, catch_exceptions=False)


def test_version():
    result = _invoke(["--version"])

    assert result.exit_code == 0
    assert VERSION in result.output


def test_copy(tmp_path):
    src = setup_temp_file(tmp_path, "cli_copy_src.txt", "hello!")
    dst_dir = setup_temp_dir(tmp_path, "cli_copy_dst")

    result = _invoke(["copy", str(src), str(dst_dir)])

    assert result.exit_code == 0
    assert "Error" not in result.output
    assert (dst_dir / "cli_copy_src.txt").read_text() == "hello!"


@pytest.mark.parametrize("flag", ["--force", "-f"])
def test_copy__force(tmp_path, flag):
    src = setup_temp_file(tmp_path, "cli_copy_force.txt", "new!")
    dst_dir = setup_temp_dir(tmp_path, "cli_copy_force_dst")
    dst_file = setup_temp_file(dst_dir, "cli_copy_force.txt", "old")

    result = _invoke(["copy", str(src), str(dst_dir), flag])

    assert result.exit_code == 0
    assert dst_file.read_text() == "new!"


def test_copy__already_exists(tmp_path):
    src = setup_temp_file(tmp_path, "cli_copy_exists.txt", "new!")
    dst_dir = setup_temp_dir(tmp_path, "cli_copy_exists_dst")
    dst_file = setup_temp_file(dst_dir, "cli_copy_exists.txt", "old")

    result = _invoke(["copy", str(src), str(dst_dir)])

    assert result.exit_code == 1
    assert f"Error: Destination file already exists: {dst_file}" in result.output
    assert dst_file.read_text() == "old"


def test_copy__not_found(tmp_path):
    missing = tmp_path / "missing.txt"

    result = _invoke(["copy", str(missing), str(tmp_path)])

    assert result.exit_code == 1
    assert f"Error: Source file not found: {missing}" in result.output


def test_copy__source_is_directory(tmp_path):
    src_dir = setup_temp_dir(tmp_path, "src_dir")

    result = _invoke(["copy", str(src_dir), str(tmp_path / "dst")])

    assert result.exit_code == 1
    assert "Error: Invalid input: Not a regular file" in result.output


def test_copy__missing_directory_with_trailing_separator(tmp_path):
    src = setup_temp_file(tmp_path, "a.txt", "hello")

    result = _invoke(["copy", str(src), f"{tmp_path / 'out'}/"])

    assert result.exit_code == 1
    assert "Error: " in result.output
    assert not (tmp_path / "out").exists()


def test_copy__missing_arguments():
    result = _invoke(["copy", "only-source"])

    assert result.exit_code == 2


def test_move(caplog):
    with caplog.at_level(logging.WARNING, logger="fman.cli"):
        result = _invoke(["move", "a.txt", "b.txt"])

    assert result.exit_code == 0
    assert "Move not implemented." in result.output
    assert "Move of a.txt to b.txt requested but not implemented." in caplog.text


def test_delete(caplog):
    with caplog.at_level(logging.WARNING, logger="fman.cli"):
        result = _invoke(["delete", "a.txt", "--force"])

    assert result.exit_code == 0
    assert "Delete not implemented." in result.output
    assert "Delete of a.txt (force=True) requested but not implemented." in caplog.text


@pytest.mark.parametrize(
    "verbose, expected",
    [
        (0, logging.WARNING),
        (1, logging.INFO),
        (2, logging.DEBUG),
        (5, logging.DEBUG),
    ],
)
def test_logging_level(verbose, expected):
    with patchenv():
        assert test_module._logging_level(verbose) == expected


def test_logging_level__debug_env():
    with patchenv(DEBUG="True"):
        assert test_module._logging_level(0) == logging.DEBUG
