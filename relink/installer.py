"""Package manager invocation."""

import shutil
import subprocess
from pathlib import Path

from .errors import SubprocessFailure
from .models import is_valid_package_name

# Conventional shell status for "command not found"
COMMAND_NOT_FOUND = 127


def build_install_command(npm_command: str, package_name: str) -> list[str]:
    """Build ``npm i <name> --save-dev``."""
    if not is_valid_package_name(package_name):
        raise ValueError(f"invalid package name: {package_name!r}")
    executable = shutil.which(npm_command) or npm_command
    return [executable, "i", package_name, "--save-dev"]


def install_dev_package(project_root: Path, package_name: str, npm_command: str = "npm") -> None:
    """Install a package as a dev dependency, streaming npm output to the terminal.

    Raises:
        SubprocessFailure: If npm cannot be started or exits non-zero
    """
    command = build_install_command(npm_command, package_name)
    try:
        completed = subprocess.run(command, cwd=project_root, check=False)
    except FileNotFoundError:
        raise SubprocessFailure(command, COMMAND_NOT_FOUND)

    if completed.returncode != 0:
        raise SubprocessFailure(command, completed.returncode)
