"""dangerously-skip-review: Claude Code GitHub Actions workflow installer."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("dangerously-skip-review")
except PackageNotFoundError:
    __version__ = "0.0.0"
