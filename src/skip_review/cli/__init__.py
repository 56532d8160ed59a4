"""Command-line interface for installing workflow templates."""

from skip_review.cli.app import app

__all__ = ["app"]
