"""Typer CLI application for dangerously-skip-review."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from typer import Exit, Option, Typer

import skip_review
from skip_review.cli._console import (
    console,
    heading,
    log_error,
    log_step,
    log_success,
    log_warning,
)
from skip_review.cli._installer import (
    ensure_workflows_dir,
    install_templates,
    print_summary,
    select_templates,
)
from skip_review.cli._repo import find_git_root
from skip_review.cli._types import WORKFLOWS, InstallMode, InstallOptions, OverwritePolicy

app = Typer(add_completion=False, context_settings={"help_option_names": ["-h", "--help"]})

_DOCS_URL = "https://docs.anthropic.com/en/docs/claude-code/github-actions"

_NEXT_STEPS = f"""\
1. Install Claude Code GitHub Actions if you haven't already:
   → {_DOCS_URL}
   → The OAuth token will be configured automatically

2. (Optional) Customize the workflows in .github/workflows/

3. Commit and push the workflow files:
   [cyan]git add .github/workflows/
   git commit -m "Add Claude Code workflows"
   git push[/]

[yellow]⚠ Warning:[/] These workflows give Claude significant autonomy.
   Review the workflow files and adjust permissions as needed."""

_EPILOG = "\n\n".join(
    [
        "Workflows included:",
        *(f"{t.filename} - {t.summary}" for t in WORKFLOWS),
        f"Setup: install Claude Code GitHub Actions first. See: {_DOCS_URL}",
    ]
)


def _print_templates() -> None:
    console.print()
    console.print("[bold cyan]◆[/]  Available workflows")
    console.print("[dim]│[/]")
    for t in WORKFLOWS:
        marker = " [dim](recommended)[/]" if t.required else ""
        console.print(
            f"[dim]│[/]  [bold cyan]{t.filename:<28}[/] [bold]{t.display_name}[/]{marker}"
        )
        console.print(f"[dim]│[/]  {' ' * 28} [dim]{t.summary}[/]")
        console.print("[dim]│[/]")
    console.print()


def _list_templates_callback(value: bool) -> None:
    if value:
        _print_templates()
        raise Exit()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"dangerously-skip-review {skip_review.__version__}")
        raise Exit()


def _usage_error(message: str) -> Exit:
    log_error(message)
    return Exit(code=2)


def _resolve_mode(all_: bool, minimal: bool, interactive: bool) -> InstallMode:
    chosen = [
        mode
        for mode, flag in (
            (InstallMode.ALL, all_),
            (InstallMode.MINIMAL, minimal),
            (InstallMode.INTERACTIVE, interactive),
        )
        if flag
    ]
    if len(chosen) > 1:
        raise _usage_error("--all, --minimal and --interactive are mutually exclusive.")
    return chosen[0] if chosen else InstallMode.ALL


def _resolve_overwrite(force: bool, skip_existing: bool) -> OverwritePolicy:
    if force and skip_existing:
        raise _usage_error("--force and --skip-existing are mutually exclusive.")
    if force:
        return OverwritePolicy.FORCE
    if skip_existing:
        return OverwritePolicy.SKIP
    return OverwritePolicy.PROMPT


@app.command(epilog=_EPILOG)
def install(
    all_: Annotated[
        bool, Option("--all", "-a", help="Install every workflow (the default).")
    ] = False,
    minimal: Annotated[
        bool, Option("--minimal", "-m", help="Install only the base @claude mentions workflow.")
    ] = False,
    interactive: Annotated[
        bool,
        Option("--interactive", "-i", help="Interactively select which workflows to install."),
    ] = False,
    force: Annotated[
        bool, Option("--force", "-y", help="Overwrite existing workflows without prompting.")
    ] = False,
    skip_existing: Annotated[
        bool,
        Option("--skip-existing", "-n", help="Keep existing workflows without prompting."),
    ] = False,
    path: Annotated[
        Path | None,
        Option(
            "--path",
            "-C",
            help="Directory to search for the git repository from. Defaults to the current one.",
            exists=True,
            file_okay=False,
            show_default=False,
        ),
    ] = None,
    list_templates: Annotated[
        bool,
        Option(
            "--list-templates",
            "-l",
            help="List all available workflows and exit.",
            callback=_list_templates_callback,
            is_eager=True,
            expose_value=False,
        ),
    ] = False,
    version: Annotated[
        bool,
        Option(
            "--version",
            "-V",
            help="Show the version and exit.",
            callback=_version_callback,
            is_eager=True,
            expose_value=False,
        ),
    ] = False,
) -> None:
    """Install Claude Code GitHub Actions workflows into the current git repository."""
    options = InstallOptions(
        mode=_resolve_mode(all_, minimal, interactive),
        overwrite=_resolve_overwrite(force, skip_existing),
        start_dir=path if path is not None else Path.cwd(),
    )

    console.print()
    console.print(f"[bold]🤖 dangerously-skip-review v{skip_review.__version__}[/]")
    console.print("Install Claude Code GitHub Actions for autonomous code reviews")

    repo_root = find_git_root(options.start_dir)
    if repo_root is None:
        log_error("Not in a git repository. Please run this from within a git repo.")
        raise Exit(code=1)

    log_step(f"Found git repository at: {repo_root}")

    try:
        workflows_dir, created = ensure_workflows_dir(repo_root)
    except OSError as exc:
        log_error(f"Could not create .github/workflows: {exc}")
        raise Exit(code=1) from None
    if created:
        log_success("Created .github/workflows directory")

    if options.mode is InstallMode.ALL:
        log_step("Installing all workflows...")
    elif options.mode is InstallMode.MINIMAL:
        log_step("Installing minimal workflow set...")

    templates = select_templates(options.mode, options.registry)
    if not templates:
        log_warning("No workflows selected. Exiting.")
        return

    log_step("Installing workflows...")
    report = install_templates(workflows_dir, templates, options.overwrite)
    print_summary(report)

    if report.installed:
        heading("Next Steps")
        console.print(_NEXT_STEPS)

    if not report.ok:
        raise Exit(code=1)
