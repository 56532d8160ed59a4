"""Rich status output: step, success, warning and error lines."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

console = Console()


def log_step(message: str) -> None:
    console.print()
    console.print(f"[cyan]→ {escape(message)}[/]")


def log_success(message: str) -> None:
    console.print(f"[green]✓ {escape(message)}[/]")


def log_warning(message: str) -> None:
    console.print(f"[yellow]⚠ {escape(message)}[/]")


def log_error(message: str) -> None:
    console.print(f"[red]✗ {escape(message)}[/]")


def heading(title: str) -> None:
    console.print()
    console.print(f"[bold]{escape(title)}[/]")
