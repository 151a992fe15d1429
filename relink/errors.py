"""Error kinds raised while patching a manifest."""

from pathlib import Path


class RelinkError(Exception):
    """Base class for all relink failures."""


class ManifestNotFound(RelinkError):
    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Manifest {path} not found")


class ManifestParseError(RelinkError):
    def __init__(self, path: Path, detail: str):
        self.path = path
        self.detail = detail
        super().__init__(f"Could not parse {path}: {detail}")


class FileWriteError(RelinkError):
    def __init__(self, path: Path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"Could not write {path}: {cause}")


class SubprocessFailure(RelinkError):
    """A package-manager invocation exited non-zero."""

    def __init__(self, command: list[str], returncode: int):
        self.command = command
        self.returncode = returncode
        super().__init__(f"Command '{' '.join(command)}' exited with status {returncode}")


class ManifestReadError(RelinkError):
    def __init__(self, path: Path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"Could not read {path}: {cause}")
