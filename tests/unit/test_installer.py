"""Tests for the package manager invocation."""

import subprocess
from unittest.mock import patch

import pytest

from relink.errors import SubprocessFailure
from relink.installer import COMMAND_NOT_FOUND, build_install_command, install_dev_package


class TestInstaller:
    """Test npm install calls."""

    def test_build_install_command(self):
        """Should request a dev dependency install."""
        with patch("relink.installer.shutil.which", return_value=None):
            command = build_install_command("npm", "brighterscript")

        assert command == ["npm", "i", "brighterscript", "--save-dev"]

    def test_build_install_command_resolves_executable(self):
        """Should use the resolved executable path when available."""
        with patch("relink.installer.shutil.which", return_value="/usr/bin/npm"):
            command = build_install_command("npm", "brighterscript")

        assert command[0] == "/usr/bin/npm"

    def test_runs_in_project_root(self, tmp_path):
        """Should run npm from the project root with inherited output."""
        completed = subprocess.CompletedProcess(args=[], returncode=0)
        with patch("relink.installer.subprocess.run", return_value=completed) as mock_run:
            install_dev_package(tmp_path, "rooibos-roku")

        args, kwargs = mock_run.call_args
        assert args[0][1:] == ["i", "rooibos-roku", "--save-dev"]
        assert kwargs["cwd"] == tmp_path
        assert "stdout" not in kwargs
        assert "capture_output" not in kwargs

    def test_non_zero_exit_raises(self, tmp_path):
        """Should raise SubprocessFailure carrying the exit status."""
        completed = subprocess.CompletedProcess(args=[], returncode=1)
        with patch("relink.installer.subprocess.run", return_value=completed):
            with pytest.raises(SubprocessFailure) as exc_info:
                install_dev_package(tmp_path, "rooibos-roku")

        assert exc_info.value.returncode == 1

    def test_missing_executable(self, tmp_path):
        """Should report a missing package manager as a subprocess failure."""
        with patch("relink.installer.subprocess.run", side_effect=FileNotFoundError()):
            with pytest.raises(SubprocessFailure) as exc_info:
                install_dev_package(tmp_path, "rooibos-roku", npm_command="no-such-npm")

        assert exc_info.value.returncode == COMMAND_NOT_FOUND

    def test_rejects_option_like_names(self, tmp_path):
        """Should never pass a flag-shaped name to npm."""
        with patch("relink.installer.subprocess.run") as mock_run:
            with pytest.raises(ValueError):
                install_dev_package(tmp_path, "--global")

        mock_run.assert_not_called()
