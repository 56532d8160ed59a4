"""Shared fixtures for the installer test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from skip_review.cli._types import WORKFLOWS, TemplateDescriptor


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """A fresh repository root containing an empty `.git` directory."""
    repo = tmp_path / "repo"
    (repo / ".git").mkdir(parents=True)
    return repo


@pytest.fixture
def workflows_dir(git_repo: Path) -> Path:
    path = git_repo / ".github" / "workflows"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def populated_workflows_dir(workflows_dir: Path) -> Path:
    """Workflows directory where every registry file already exists with local edits."""
    for template in WORKFLOWS:
        (workflows_dir / template.filename).write_text("# local edits\n")
    return workflows_dir


@pytest.fixture
def missing_template() -> TemplateDescriptor:
    return TemplateDescriptor(filename="does-not-exist.yml", display_name="Missing workflow")
