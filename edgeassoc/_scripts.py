"""Dev tasks wired as console scripts in pyproject.toml (uv run check, uv run test)."""

import subprocess
import sys

SOURCES = ["edgeassoc", "tests"]


def _step(*args: str) -> int:
    return subprocess.run([sys.executable, "-m", *args]).returncode


def check() -> None:
    """ruff lint, ruff format --check, then pyright; exit on the first failing step."""
    for step in (
        ("ruff", "check", *SOURCES),
        ("ruff", "format", "--check", *SOURCES),
        ("pyright", "edgeassoc"),
    ):
        code = _step(*step)
        if code:
            sys.exit(code)
    sys.exit(0)


def test() -> None:
    """pytest with coverage of the edgeassoc package."""
    sys.exit(_step("pytest", "--cov=edgeassoc", "--cov-report=term-missing", "-v"))
