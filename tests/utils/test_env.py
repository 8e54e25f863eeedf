import os
from pathlib import Path
from unittest.mock import patch

import pytest

from utils.env import _find_project_root, load_project_dotenv


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Provides a temporary project directory marked by a pyproject.toml."""
    root = tmp_path / "shop"
    root.mkdir()
    (root / "pyproject.toml").touch()
    return root


# --- Project root discovery --- #


@pytest.mark.parametrize("depth", [0, 1, 3])
def test_find_project_root_from_nested_directory(project_root: Path, depth: int):
    start_dir = project_root.joinpath(*[f"pkg{i}" for i in range(depth)])
    start_dir.mkdir(parents=True, exist_ok=True)

    assert _find_project_root(start=start_dir) == project_root


def test_find_project_root_stops_at_nearest_marker(project_root: Path):
    inner = project_root / "vendor" / "inner"
    (inner / "src").mkdir(parents=True)
    (inner / "pyproject.toml").touch()

    assert _find_project_root(start=inner / "src") == inner


# --- Loading .env --- #


@patch("utils.env.load_dotenv")
@patch("utils.env._find_project_root")
def test_load_project_dotenv_loads_existing_file(mock_find_root, mock_load_dotenv, project_root: Path):
    env_file = project_root / ".env"
    env_file.write_text("BASKET_LOG_LEVEL=DEBUG")
    mock_find_root.return_value = project_root

    assert load_project_dotenv() is True
    mock_load_dotenv.assert_called_once_with(dotenv_path=env_file, override=False)


@patch("utils.env.load_dotenv")
@patch("utils.env._find_project_root")
def test_load_project_dotenv_without_file(mock_find_root, mock_load_dotenv, project_root: Path):
    mock_find_root.return_value = project_root

    assert load_project_dotenv() is False
    mock_load_dotenv.assert_not_called()


@patch("utils.env._find_project_root")
def test_shell_variables_win_over_dotenv(mock_find_root, project_root: Path, monkeypatch):
    (project_root / ".env").write_text("BASKET_LOG_LEVEL=DEBUG\nBASKET_DECIMAL_SCALE=6")
    mock_find_root.return_value = project_root
    monkeypatch.setenv("BASKET_LOG_LEVEL", "WARNING")
    # registered with monkeypatch so the value loaded below is removed afterwards
    monkeypatch.setenv("BASKET_DECIMAL_SCALE", "unset")
    monkeypatch.delenv("BASKET_DECIMAL_SCALE")

    load_project_dotenv()

    assert os.environ["BASKET_LOG_LEVEL"] == "WARNING"
    assert os.environ["BASKET_DECIMAL_SCALE"] == "6"
