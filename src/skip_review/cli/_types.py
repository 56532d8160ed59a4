"""Template registry, run options and install outcomes."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


@dataclass(frozen=True)
class TemplateDescriptor:
    """
    A workflow template the installer knows about.

    Attributes:
        filename: Name of the YAML file, both in the template store and in
            `.github/workflows/`.
        display_name: Human-readable name shown in prompts.
        required: Whether the template is recommended for every repository.
        summary: One-line description shown when listing templates.
    """

    filename: str
    display_name: str
    required: bool = False
    summary: str = ""


Registry = tuple[TemplateDescriptor, ...]

WORKFLOWS: Registry = (
    TemplateDescriptor(
        filename="claude.yml",
        display_name="Claude Code (@claude mentions)",
        required=True,
        summary="Respond to @claude mentions in issues/PRs",
    ),
    TemplateDescriptor(
        filename="claude-code-review.yml",
        display_name="Claude Code Review (auto-review PRs)",
        summary="Auto-review PRs when opened",
    ),
    TemplateDescriptor(
        filename="prioritize-feedback.yml",
        display_name="Prioritize PR Feedback (auto-fix issues)",
        summary="Prioritize feedback and auto-implement fixes",
    ),
    TemplateDescriptor(
        filename="verify-fixes.yml",
        display_name="Verify PR Fixes",
        summary="Verify fixes were implemented correctly",
    ),
    TemplateDescriptor(
        filename="review-follow-up-issues.yml",
        display_name="Review Follow-up Issues (post-merge)",
        summary="Review follow-up issues after PR merge",
    ),
)


def validate_registry(registry: Sequence[TemplateDescriptor]) -> None:
    """Raise ValueError if the registry is empty or repeats a filename."""
    if not registry:
        raise ValueError("registry must contain at least one template.")
    seen: set[str] = set()
    for descriptor in registry:
        if descriptor.filename in seen:
            raise ValueError(f"duplicate template filename in registry: {descriptor.filename!r}.")
        seen.add(descriptor.filename)


class InstallMode(str, Enum):
    """How the set of templates to install is chosen."""

    ALL = "all"
    MINIMAL = "minimal"
    INTERACTIVE = "interactive"


class OverwritePolicy(str, Enum):
    """What to do when a destination file already exists."""

    PROMPT = "prompt"
    FORCE = "force"
    SKIP = "skip"


@dataclass(kw_only=True)
class InstallOptions:
    """
    Configuration for a single installer run.

    Attributes:
        mode: How templates are selected.
        overwrite: Policy for destination files that already exist.
        start_dir: Directory the repository search starts from.
        registry: Templates available for installation.
    """

    mode: InstallMode = InstallMode.ALL
    overwrite: OverwritePolicy = OverwritePolicy.PROMPT
    start_dir: Path = field(default_factory=Path.cwd)
    registry: Registry = WORKFLOWS

    def __post_init__(self) -> None:
        validate_registry(self.registry)


class OutcomeStatus(str, Enum):
    INSTALLED = "installed"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class InstallOutcome:
    filename: str
    status: OutcomeStatus
    reason: str | None = None


@dataclass
class InstallReport:
    """Ordered outcomes of one installer run."""

    outcomes: list[InstallOutcome] = field(default_factory=list)

    def add(self, outcome: InstallOutcome) -> None:
        self.outcomes.append(outcome)

    def _with_status(self, status: OutcomeStatus) -> list[InstallOutcome]:
        return [o for o in self.outcomes if o.status is status]

    @property
    def installed(self) -> list[InstallOutcome]:
        return self._with_status(OutcomeStatus.INSTALLED)

    @property
    def skipped(self) -> list[InstallOutcome]:
        return self._with_status(OutcomeStatus.SKIPPED)

    @property
    def failed(self) -> list[InstallOutcome]:
        return self._with_status(OutcomeStatus.FAILED)

    @property
    def ok(self) -> bool:
        return not self.failed
