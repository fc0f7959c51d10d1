"""Tests for blocking child-process execution."""

import subprocess
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from tracksplit.platform.process import ProcessFailure, run_command


@pytest.fixture
def subprocess_run(mocker: MockerFixture) -> MagicMock:
    return mocker.patch("tracksplit.platform.process.runner.subprocess.run")


def test_success_discards_output(subprocess_run: MagicMock) -> None:
    subprocess_run.return_value = MagicMock(returncode=0, stderr="")

    run_command(["tool", "--flag", "value with spaces"])

    subprocess_run.assert_called_once_with(
        ("tool", "--flag", "value with spaces"),
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.PIPE,
        check=False,
        encoding="utf-8",
        errors="replace",
    )


def test_non_zero_exit_raises_with_stderr(subprocess_run: MagicMock) -> None:
    subprocess_run.return_value = MagicMock(returncode=1, stderr="  boom\n")

    with pytest.raises(ProcessFailure) as excinfo:
        run_command(["tool"])

    assert excinfo.value.returncode == 1
    assert excinfo.value.command == ("tool",)
    assert str(excinfo.value) == "boom"


def test_empty_stderr_falls_back_to_status() -> None:
    failure = ProcessFailure(("tool", "x"), 3, "")

    assert failure.message == "tool exited with status 3"


def test_missing_executable_propagates(subprocess_run: MagicMock) -> None:
    subprocess_run.side_effect = FileNotFoundError("tool")

    with pytest.raises(FileNotFoundError):
        run_command(["tool"])
