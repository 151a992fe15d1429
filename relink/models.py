"""Core data models for relink."""

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

MANIFEST_FILENAME = "package.json"
LOCK_FILENAME = "package-lock.json"
NODE_MODULES_DIR = "node_modules"

# Optional "@scope/" then a name; no leading "." "_" or "-", no path segments
_PACKAGE_NAME = re.compile(r"(?:@[A-Za-z0-9~][A-Za-z0-9._~-]*/)?[A-Za-z0-9~][A-Za-z0-9._~-]*")

# Packages linked locally during development, reinstalled from the registry
DEFAULT_DEV_PACKAGES = [
    "brighterscript",
    "roku-log-bsc-plugin",
    "maestro-roku-bsc-plugin",
    "rooibos-roku",
]

DEFAULT_PACKAGES: dict[str, str] = {}


@dataclass
class PackageManifest:
    """A parsed package.json document.

    ``document`` keeps the original key order so the file can be written back
    without reshuffling unrelated fields.
    """

    path: Path
    document: dict[str, Any]

    @property
    def dependencies(self) -> dict[str, str] | None:
        return self.document.get("dependencies")

    @property
    def dev_dependencies(self) -> dict[str, str] | None:
        return self.document.get("devDependencies")


class PatchPlan(BaseModel):
    """Which packages to add and which dev packages to relink."""

    dev_packages: list[str] = Field(default_factory=lambda: list(DEFAULT_DEV_PACKAGES))
    packages: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_PACKAGES))
    npm_command: str = "npm"

    @field_validator("dev_packages", "packages")
    @classmethod
    def _valid_names(cls, value):
        for name in value:
            if not is_valid_package_name(name):
                raise ValueError(f"invalid package name: {name!r}")
        return value


def is_valid_package_name(name: str) -> bool:
    """Check a name has npm's shape and cannot act as a path or a CLI flag."""
    return _PACKAGE_NAME.fullmatch(name) is not None


@dataclass
class RemovalResult:
    """Outcome of a best-effort deletion."""

    path: Path
    removed: bool = False
    error: OSError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class PatchReport:
    """What a patch run did to the manifest."""

    added: dict[str, str] = field(default_factory=dict)
    removed: list[str] = field(default_factory=list)
    installed: list[str] = field(default_factory=list)
    purge_failures: list[RemovalResult] = field(default_factory=list)
    diff: str = ""
