"""Orchestrates template selection and copying into `.github/workflows/`."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from skip_review.cli._console import console, heading, log_error, log_success, log_warning
from skip_review.cli._prompts import prompt_overwrite, prompt_selection
from skip_review.cli._store import copy_template
from skip_review.cli._types import (
    InstallMode,
    InstallOutcome,
    InstallReport,
    OutcomeStatus,
    OverwritePolicy,
    TemplateDescriptor,
)

WORKFLOWS_SUBDIR = Path(".github") / "workflows"


def ensure_workflows_dir(repo_root: Path) -> tuple[Path, bool]:
    """Create `<repo_root>/.github/workflows` if needed. Returns (path, created)."""
    workflows_dir = repo_root / WORKFLOWS_SUBDIR
    created = not workflows_dir.is_dir()
    workflows_dir.mkdir(parents=True, exist_ok=True)
    return workflows_dir, created


def select_templates(
    mode: InstallMode, registry: Sequence[TemplateDescriptor]
) -> list[TemplateDescriptor]:
    """Return the templates to install for *mode*, in registry order."""
    if mode is InstallMode.ALL:
        return list(registry)
    if mode is InstallMode.MINIMAL:
        return [t for t in registry if t.required]
    return prompt_selection(registry)


def _should_write(target: Path, overwrite: OverwritePolicy) -> bool:
    if not target.exists() or overwrite is OverwritePolicy.FORCE:
        return True
    if overwrite is OverwritePolicy.SKIP:
        return False
    return prompt_overwrite(target.name)


def install_templates(
    workflows_dir: Path,
    templates: Sequence[TemplateDescriptor],
    overwrite: OverwritePolicy,
) -> InstallReport:
    """
    Copy each template into *workflows_dir*, one at a time, in order.

    A failure to copy one template is recorded and the remaining templates
    are still processed.
    """
    report = InstallReport()

    for template in templates:
        target = workflows_dir / template.filename

        if not _should_write(target, overwrite):
            report.add(InstallOutcome(template.filename, OutcomeStatus.SKIPPED))
            continue

        try:
            copy_template(template.filename, workflows_dir)
        except OSError as exc:
            reason = str(exc)
            log_error(f"Failed to install {template.filename}: {reason}")
            report.add(InstallOutcome(template.filename, OutcomeStatus.FAILED, reason))
            continue

        log_success(f"Installed {template.filename}")
        report.add(InstallOutcome(template.filename, OutcomeStatus.INSTALLED))

    return report


def print_summary(report: InstallReport) -> None:
    heading("Summary")
    if report.installed:
        log_success(f"Installed {len(report.installed)} workflow(s)")
    if report.skipped:
        log_warning(f"Skipped {len(report.skipped)} workflow(s) (already exist)")
    if report.failed:
        log_error(f"Failed to install {len(report.failed)} workflow(s):")
        for outcome in report.failed:
            console.print(f"    {outcome.filename}: {outcome.reason}", markup=False)
