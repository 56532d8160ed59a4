"""Blocking yes/no prompts for template selection and overwrite confirmation."""

from __future__ import annotations

from collections.abc import Sequence

from skip_review.cli._console import console
from skip_review.cli._types import TemplateDescriptor


def _is_yes(answer: str, default: bool) -> bool:
    answer = answer.strip().lower()
    if answer == "":
        return default
    return answer in ("y", "yes")


def prompt_selection(registry: Sequence[TemplateDescriptor]) -> list[TemplateDescriptor]:
    """
    Ask about each template in registry order and return the chosen ones.

    An empty answer accepts required templates and declines the rest.
    """
    console.print()
    console.print("[bold]Select workflows to install:[/]")
    console.print()

    selected: list[TemplateDescriptor] = []
    for i, template in enumerate(registry, start=1):
        marker = " (recommended)" if template.required else ""
        default = "Y" if template.required else "n"
        answer = input(f"  {i}. {template.display_name}{marker} [{default}]: ")
        if _is_yes(answer, default=template.required):
            selected.append(template)

    return selected


def prompt_overwrite(filename: str) -> bool:
    """Ask whether an existing workflow file should be replaced. Defaults to no."""
    answer = input(f"  {filename} already exists. Overwrite? [y/N]: ")
    return _is_yes(answer, default=False)
