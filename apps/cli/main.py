"""CLI application for relink."""

from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console

from relink.errors import SubprocessFailure
from relink.models import PatchPlan
from relink.patcher import ManifestPatcher

console = Console()


def default_project_root() -> Path:
    """Repository root, resolved from this file's location."""
    return Path(__file__).resolve().parents[2]


def load_plan(plan_file: Path | None, npm_command: str | None) -> PatchPlan:
    """Build the patch plan from an optional JSON file and CLI overrides."""
    if plan_file is None:
        plan = PatchPlan()
    else:
        plan = PatchPlan.model_validate_json(plan_file.read_text(encoding="utf-8"))

    if npm_command:
        plan = plan.model_copy(update={"npm_command": npm_command})
    return plan


app = typer.Typer(
    name="relink",
    help="relink - Remove locally linked dev packages from package.json and reinstall them",
    add_completion=False,
)


@app.command()
def run(
    root: Path | None = typer.Option(None, "--root", help="Project root holding package.json"),
    plan_file: Path | None = typer.Option(None, "--plan", help="JSON file overriding the package lists"),
    npm_command: str | None = typer.Option(None, "--npm", help="Package manager executable"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Show manifest changes without applying"),
) -> None:
    """Strip dev packages from package.json, clear node_modules and the lock file, then reinstall."""

    try:
        if plan_file is not None and not plan_file.exists():
            console.print(f"Error: Plan file {plan_file} not found", style="red", soft_wrap=True)
            raise typer.Exit(1)

        try:
            plan = load_plan(plan_file, npm_command)
        except (OSError, UnicodeDecodeError) as e:
            console.print(f"Error: Could not read plan file {plan_file}: {e}", style="red", markup=False, soft_wrap=True)
            raise typer.Exit(1)

        project_root = root or default_project_root()

        patcher = ManifestPatcher(project_root, plan=plan, console=console)
        report = patcher.run(dry_run=dry_run)

        if dry_run:
            console.print(report.diff or "No manifest changes", markup=False, highlight=False, soft_wrap=True)
            return

        # Purge failures are intentionally non-fatal
        for failure in report.purge_failures:
            console.print(f"could not remove {failure.path}: {failure.error}", style="dim", soft_wrap=True)

    except typer.Exit:
        raise
    except SubprocessFailure as e:
        console.print(f"Error: {e}", style="red", markup=False, soft_wrap=True)
        raise typer.Exit(e.returncode)
    except ValidationError as e:
        console.print(f"Error: Invalid plan file: {e}", style="red", markup=False, soft_wrap=True)
        raise typer.Exit(1)
    except Exception as e:
        console.print(f"Error: {e}", style="red", markup=False, soft_wrap=True)
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
