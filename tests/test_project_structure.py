"""Test that project structure is correct and modules can be imported."""

from pathlib import Path

import relink.errors
import relink.filesystem
import relink.installer
import relink.manifest
import relink.models
import relink.patcher
from relink.models import DEFAULT_DEV_PACKAGES, PackageManifest, PatchPlan


def test_relink_modules_importable():
    """Ensure relink modules can be imported."""
    assert hasattr(relink.models, "PackageManifest")
    assert hasattr(relink.models, "PatchPlan")
    assert hasattr(relink.manifest, "load_manifest")
    assert hasattr(relink.patcher, "ManifestPatcher")
    assert issubclass(relink.errors.ManifestNotFound, relink.errors.RelinkError)
    assert issubclass(relink.errors.SubprocessFailure, relink.errors.RelinkError)


def test_model_creation():
    """Test that basic models can be instantiated."""
    manifest = PackageManifest(path=Path("package.json"), document={"devDependencies": {"a": "1.0.0"}})
    assert manifest.dev_dependencies == {"a": "1.0.0"}
    assert manifest.dependencies is None

    plan = PatchPlan()
    assert plan.dev_packages == DEFAULT_DEV_PACKAGES
    assert plan.packages == {}
    assert plan.npm_command == "npm"
