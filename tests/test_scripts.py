"""Tests for the dev task console scripts."""

from unittest.mock import MagicMock, patch

import pytest

from edgeassoc import _scripts


@patch("edgeassoc._scripts.subprocess.run")
def test_check_runs_all_steps(mock_run: MagicMock) -> None:
    mock_run.return_value.returncode = 0

    with pytest.raises(SystemExit) as exc_info:
        _scripts.check()

    assert exc_info.value.code == 0
    tools = [call.args[0][2:4] for call in mock_run.call_args_list]
    assert tools == [["ruff", "check"], ["ruff", "format"], ["pyright", "edgeassoc"]]


@patch("edgeassoc._scripts.subprocess.run")
def test_check_stops_at_first_failure(mock_run: MagicMock) -> None:
    mock_run.return_value.returncode = 2

    with pytest.raises(SystemExit) as exc_info:
        _scripts.check()

    assert exc_info.value.code == 2
    assert mock_run.call_count == 1


@patch("edgeassoc._scripts.subprocess.run")
def test_test_runs_pytest_with_coverage(mock_run: MagicMock) -> None:
    mock_run.return_value.returncode = 0

    with pytest.raises(SystemExit):
        _scripts.test()

    args = mock_run.call_args[0][0]
    assert args[1:3] == ["-m", "pytest"]
    assert "--cov=edgeassoc" in args
