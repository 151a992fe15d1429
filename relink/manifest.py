"""package.json loading, in-memory mutation and serialization."""

import difflib
import json
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from .errors import FileWriteError, ManifestNotFound, ManifestParseError, ManifestReadError
from .models import PackageManifest

_DEPENDENCY_MAP = TypeAdapter(dict[str, str])
_COLLECTIONS = ("dependencies", "devDependencies")

# Largest integer a JS number holds exactly
_MAX_SAFE_INTEGER = 2**53 - 1


def read_manifest_text(path: Path) -> str:
    """Read package.json as UTF-8 text.

    Raises:
        ManifestNotFound: If the file does not exist
        ManifestParseError: If the file is not valid UTF-8
        ManifestReadError: For any other OS error while reading
    """
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ManifestNotFound(path)
    except UnicodeDecodeError as e:
        raise ManifestParseError(path, f"not valid UTF-8: {e}")
    except OSError as e:
        raise ManifestReadError(path, e)


def load_manifest(path: Path) -> PackageManifest:
    """Read and validate a package.json file.

    Args:
        path: Location of the manifest

    Returns:
        Parsed PackageManifest

    Raises:
        ManifestNotFound: If the file does not exist
        ManifestParseError: If the file is not valid JSON or has malformed
            dependency collections
        ManifestReadError: If the file exists but cannot be read
    """
    return parse_manifest(read_manifest_text(path), path)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def parse_manifest(content: str, path: Path) -> PackageManifest:
    """Parse package.json content into a PackageManifest."""
    try:
        document = json.loads(content, parse_constant=_reject_constant)
    except ValueError as e:
        raise ManifestParseError(path, str(e))

    if not isinstance(document, dict):
        raise ManifestParseError(path, "top-level value must be an object")

    for key in _COLLECTIONS:
        if key not in document:
            continue
        try:
            _DEPENDENCY_MAP.validate_python(document[key], strict=True)
        except ValidationError:
            raise ManifestParseError(path, f"'{key}' must map package names to version strings")

    return PackageManifest(path=path, document=document)


def apply_additions(manifest: PackageManifest, packages: dict[str, str]) -> list[str]:
    """Set each package in ``dependencies``, overwriting any prior version."""
    if not packages:
        return []

    dependencies = manifest.document.setdefault("dependencies", {})
    for name, version in packages.items():
        dependencies[name] = version
    return list(packages)


def apply_removals(manifest: PackageManifest, names: list[str]) -> list[str]:
    """Drop names from ``devDependencies``.

    Names that are not present are ignored, so applying the same removals twice
    leaves the manifest unchanged.

    Returns:
        The names that were actually present and removed
    """
    dev_dependencies = manifest.dev_dependencies
    if dev_dependencies is None:
        return []

    removed = []
    for name in names:
        if dev_dependencies.pop(name, None) is not None:
            removed.append(name)
    return removed


def dump_manifest(document: dict[str, Any]) -> str:
    """Serialize the way ``JSON.stringify(doc, null, 4)`` does."""
    return json.dumps(_js_numbers(document), indent=4, ensure_ascii=False)


def _js_numbers(value: Any) -> Any:
    """Write integral floats as integers, since JS has a single number type."""
    if isinstance(value, float) and value.is_integer() and abs(value) <= _MAX_SAFE_INTEGER:
        return int(value)
    if isinstance(value, dict):
        return {key: _js_numbers(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_js_numbers(item) for item in value]
    return value


def save_manifest(manifest: PackageManifest) -> None:
    """Overwrite the manifest file with the in-memory document."""
    try:
        manifest.path.write_text(dump_manifest(manifest.document), encoding="utf-8")
    except OSError as e:
        raise FileWriteError(manifest.path, e)


def format_manifest_diff(original: str, manifest: PackageManifest) -> str:
    """Unified diff between the file content on disk and the patched document."""
    name = manifest.path.name
    updated = dump_manifest(manifest.document)
    lines = difflib.unified_diff(
        original.splitlines(),
        updated.splitlines(),
        fromfile=f"a/{name}",
        tofile=f"b/{name}",
        lineterm="",
    )
    return "\n".join(lines)
