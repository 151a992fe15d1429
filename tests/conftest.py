"""Pytest configuration and fixtures."""

import json

import pytest


@pytest.fixture
def sample_package_json():
    """Sample package.json content for testing."""
    return {
        "name": "test-project",
        "version": "1.0.0",
        "dependencies": {
            "@rokucommunity/bslib": "^0.1.1",
        },
        "devDependencies": {
            "brighterscript": "^0.65.0",
            "rooibos-roku": "5.7.0",
            "typescript": "^4.9.5",
        },
    }


@pytest.fixture
def project_root(tmp_path, sample_package_json):
    """Create a temporary Node project with installed packages and a lock file."""
    (tmp_path / "package.json").write_text(json.dumps(sample_package_json, indent=2))
    (tmp_path / "package-lock.json").write_text("{}")
    for name in ("brighterscript", "rooibos-roku", "typescript"):
        package_dir = tmp_path / "node_modules" / name
        package_dir.mkdir(parents=True)
        (package_dir / "package.json").write_text(json.dumps({"name": name}))
    return tmp_path
