"""Project paths and best-effort filesystem cleanup."""

import os
import shutil
from pathlib import Path

from .errors import FileWriteError
from .models import (
    LOCK_FILENAME,
    MANIFEST_FILENAME,
    NODE_MODULES_DIR,
    RemovalResult,
    is_valid_package_name,
)


def manifest_path(project_root: Path) -> Path:
    return project_root / MANIFEST_FILENAME


def lock_path(project_root: Path) -> Path:
    return project_root / LOCK_FILENAME


def installed_path(project_root: Path, package_name: str) -> Path:
    """Location of a package under node_modules.

    Raises:
        ValueError: If the name is not a package name or would point outside
            node_modules
    """
    if not is_valid_package_name(package_name):
        raise ValueError(f"invalid package name: {package_name!r}")

    # Normalized without resolving, so an npm link symlink is not followed
    base = Path(os.path.normpath(project_root / NODE_MODULES_DIR))
    # Scoped names like "@scope/pkg" nest one level deeper
    target = Path(os.path.normpath(base.joinpath(*package_name.split("/"))))
    if base not in target.parents:
        raise ValueError(f"{package_name!r} resolves outside {base}")
    return target


def purge_installed(project_root: Path, package_name: str) -> RemovalResult:
    """Remove the installed copy of a package from node_modules.

    A missing directory is not a failure. Other OS errors are captured in the
    result instead of being raised.
    """
    target = installed_path(project_root, package_name)
    result = RemovalResult(path=target)

    try:
        if target.is_symlink() or target.is_file():
            # npm link leaves a symlink; remove the link, not what it points to
            target.unlink()
        elif target.is_dir():
            shutil.rmtree(target)
        else:
            return result
    except FileNotFoundError:
        return result
    except OSError as e:
        result.error = e
        return result

    result.removed = True
    return result


def remove_lock_file(project_root: Path) -> bool:
    """Delete package-lock.json if it exists.

    Returns:
        True if a lock file was deleted
    """
    path = lock_path(project_root)
    try:
        path.unlink()
    except FileNotFoundError:
        return False
    except OSError as e:
        raise FileWriteError(path, e)
    return True
