"""Access to the workflow templates shipped with the package."""

from __future__ import annotations

import importlib.resources as ilr
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable

_STORE_PACKAGE = "skip_review.cli"
_STORE_DIR = "workflows"


class TemplateNotFoundError(FileNotFoundError):
    """Raised when a template is not present in the template store."""


def _store() -> Traversable:
    return ilr.files(_STORE_PACKAGE).joinpath(_STORE_DIR)


def _source(filename: str) -> Traversable:
    if not filename or "/" in filename or "\\" in filename:
        raise TemplateNotFoundError(f"Source workflow not found: {filename!r}")
    source = _store().joinpath(filename)
    if not source.is_file():
        raise TemplateNotFoundError(f"Source workflow not found: {filename}")
    return source


def available_templates() -> list[str]:
    """Names of all templates in the store, sorted."""
    return sorted(
        entry.name
        for entry in _store().iterdir()
        if entry.is_file() and entry.name.endswith(".yml")
    )


def resolve(filename: str) -> bytes:
    """Return the raw content of a stored template."""
    return _source(filename).read_bytes()


def copy_template(filename: str, destination_dir: Path) -> Path:
    """
    Copy a stored template verbatim to *destination_dir*/*filename*.

    An existing destination file is overwritten. Filesystem errors propagate
    to the caller.
    """
    content = resolve(filename)
    target = Path(destination_dir) / filename
    target.write_bytes(content)
    return target
