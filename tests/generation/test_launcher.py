"""Tests for Launcher."""

import subprocess
from unittest.mock import patch

import pytest

from playground.errors import LaunchError
from playground.generation.launcher import Launcher


@pytest.mark.unit
class TestLauncher:

    def test_runs_open_command(self, capsys):
        with patch("playground.generation.launcher.subprocess") as mock_subprocess:
            mock_subprocess.run.return_value = subprocess.CompletedProcess(
                args=[], returncode=0, stdout="", stderr=""
            )
            Launcher().open("/work/Demo.playground")

        mock_subprocess.run.assert_called_once_with(
            ["open", "/work/Demo.playground"], capture_output=True, text=True
        )
        assert "Opening /work/Demo.playground..." in capsys.readouterr().out

    def test_custom_open_command(self):
        with patch("playground.generation.launcher.subprocess") as mock_subprocess:
            mock_subprocess.run.return_value = subprocess.CompletedProcess(
                args=[], returncode=0, stdout="", stderr=""
            )
            Launcher("xdg-open").open("/work/Demo.playground")

        assert mock_subprocess.run.call_args.args[0] == ["xdg-open", "/work/Demo.playground"]

    def test_failure_raises_launch_error(self):
        with patch("playground.generation.launcher.subprocess") as mock_subprocess:
            mock_subprocess.run.return_value = subprocess.CompletedProcess(
                args=[], returncode=1, stdout="", stderr="no application"
            )
            with pytest.raises(LaunchError, match="no application"):
                Launcher().open("/work/Demo.playground")

    def test_missing_executable_raises_launch_error(self):
        launcher = Launcher("definitely-not-an-open-command")

        with pytest.raises(LaunchError):
            launcher.open("/work/Demo.playground")
