"""The manifest patching pipeline."""

from pathlib import Path

from rich.console import Console

from .filesystem import manifest_path, purge_installed, remove_lock_file
from .installer import install_dev_package
from .manifest import (
    apply_additions,
    apply_removals,
    format_manifest_diff,
    parse_manifest,
    read_manifest_text,
    save_manifest,
)
from .models import PatchPlan, PatchReport


class ManifestPatcher:
    """Strips linked dev packages from package.json and reinstalls them."""

    def __init__(
        self,
        project_root: Path,
        plan: PatchPlan | None = None,
        console: Console | None = None,
    ):
        """Initialize the patcher.

        Args:
            project_root: Directory holding package.json and node_modules
            plan: Packages to add and dev packages to relink
            console: Where progress lines are printed
        """
        self.project_root = project_root
        self.plan = plan or PatchPlan()
        self.console = console or Console()

    def run(self, dry_run: bool = False) -> PatchReport:
        """Run every step in order, stopping at the first hard failure.

        With ``dry_run`` only the in-memory edits happen and the report carries
        a diff of the manifest.
        """
        path = manifest_path(self.project_root)
        original = read_manifest_text(path)
        manifest = parse_manifest(original, path)
        report = PatchReport()

        for name, version in self.plan.packages.items():
            self.console.print(f"adding '{name}' to package.json")
            apply_additions(manifest, {name: version})
            report.added[name] = version
            if not dry_run:
                self._purge(name, report)

        for name in self.plan.dev_packages:
            self.console.print(f"removing package: '{name}' from package.json")
            report.removed.extend(apply_removals(manifest, [name]))
            if not dry_run:
                self._purge(name, report)

        if dry_run:
            report.diff = format_manifest_diff(original, manifest)
            return report

        self.console.print("saving package.json changes")
        save_manifest(manifest)
        remove_lock_file(self.project_root)

        self.console.print("install packages")
        for name in self.plan.dev_packages:
            self.console.print(f"adding dev package: '{name}' to package.json")
            install_dev_package(self.project_root, name, self.plan.npm_command)
            report.installed.append(name)

        return report

    def _purge(self, name: str, report: PatchReport) -> None:
        result = purge_installed(self.project_root, name)
        # Purging is best-effort; failures are recorded, never raised
        if not result.ok:
            report.purge_failures.append(result)
