"""Tests for the packaged workflow template store."""

from __future__ import annotations

from pathlib import Path

import pytest

from skip_review.cli._store import (
    TemplateNotFoundError,
    available_templates,
    copy_template,
    resolve,
)
from skip_review.cli._types import WORKFLOWS


class TestResolve:
    def test_returns_bytes(self) -> None:
        content = resolve("claude.yml")
        assert isinstance(content, bytes)
        assert b"name:" in content

    def test_missing_template_raises(self) -> None:
        with pytest.raises(TemplateNotFoundError, match="Source workflow not found"):
            resolve("non-existent.yml")

    @pytest.mark.parametrize("name", ["", "../claude.yml", "sub/claude.yml"])
    def test_rejects_paths(self, name: str) -> None:
        with pytest.raises(TemplateNotFoundError):
            resolve(name)

    def test_not_found_is_a_file_not_found_error(self) -> None:
        assert issubclass(TemplateNotFoundError, FileNotFoundError)


class TestCopyTemplate:
    def test_copies_byte_for_byte(self, tmp_path: Path) -> None:
        target = copy_template("claude.yml", tmp_path)

        assert target == tmp_path / "claude.yml"
        assert target.read_bytes() == resolve("claude.yml")

    def test_overwrites_existing_file(self, tmp_path: Path) -> None:
        (tmp_path / "verify-fixes.yml").write_text("old")

        target = copy_template("verify-fixes.yml", tmp_path)
        assert target.read_bytes() == resolve("verify-fixes.yml")

    def test_copy_twice_is_idempotent(self, tmp_path: Path) -> None:
        copy_template("claude-code-review.yml", tmp_path)
        target = copy_template("claude-code-review.yml", tmp_path)
        assert target.read_bytes() == resolve("claude-code-review.yml")

    def test_missing_template_writes_nothing(self, tmp_path: Path) -> None:
        with pytest.raises(TemplateNotFoundError):
            copy_template("non-existent.yml", tmp_path)
        assert list(tmp_path.iterdir()) == []

    def test_missing_destination_propagates(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError) as exc_info:
            copy_template("claude.yml", tmp_path / "nope")
        assert not isinstance(exc_info.value, TemplateNotFoundError)


class TestWorkflowFiles:
    def test_every_registry_entry_is_in_the_store(self) -> None:
        assert set(available_templates()) >= {t.filename for t in WORKFLOWS}

    @pytest.mark.parametrize("template", WORKFLOWS, ids=lambda t: t.filename)
    def test_basic_workflow_structure(self, template) -> None:
        content = resolve(template.filename).decode("utf-8")
        assert "name:" in content
        assert "on:" in content
        assert "jobs:" in content
        assert "runs-on:" in content
