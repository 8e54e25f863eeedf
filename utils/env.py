"""
Loads ``BASKET_*`` settings from a project-level ``.env`` file.

Variables already present in the process environment are left alone, so a
``.env`` file only fills in what the shell did not set.
"""

from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv

__all__ = ["load_project_dotenv"]

MAX_PARENT_LEVELS = 10


def _find_project_root(start: Path | None = None) -> Path:
    """Walk up from ``start`` to the nearest directory holding `pyproject.toml`.

    Falls back to this package's directory when none is found.
    """
    current = start or Path(__file__).resolve().parent
    for _ in range(MAX_PARENT_LEVELS):
        if (current / "pyproject.toml").exists():
            return current
        if current.parent == current:
            break
        current = current.parent
    return Path(__file__).resolve().parent


def load_project_dotenv() -> bool:
    """Load the project `.env` without overriding existing variables.

    Returns True when a `.env` file was found and loaded.
    """
    dotenv_path = _find_project_root() / ".env"
    if not dotenv_path.exists():
        return False
    load_dotenv(dotenv_path=dotenv_path, override=False)
    return True
