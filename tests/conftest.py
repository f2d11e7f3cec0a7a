# tests/conftest.py
"""
Common test fixtures for teleproj.
"""
import pytest
from loguru import logger
from typer.testing import CliRunner

from teleproj.cli import app
from teleproj.config import ConfigManager
from teleproj.constants import CONFIG_ENV_VAR


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep tests away from the real config file and log directory."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.setattr("teleproj.cli.main.LOG_DIR", tmp_path / "logs")
    yield
    # Sinks may point at streams captured by CliRunner
    logger.remove()


@pytest.fixture
def config_file(tmp_path):
    """Location of a config file that does not exist yet."""
    return tmp_path / "teleproj.toml"


@pytest.fixture
def config_manager(config_file):
    """A ConfigManager bound to the temporary config file."""
    manager = ConfigManager(config_file)
    manager.load_config()
    return manager


@pytest.fixture
def make_project(tmp_path):
    """Factory creating a project directory and returning its canonical path."""
    root = tmp_path / "projects"

    def _make(relative: str) -> str:
        project_dir = root / relative
        project_dir.mkdir(parents=True, exist_ok=True)
        return str(project_dir.resolve())

    return _make


@pytest.fixture
def cli(config_file):
    """Invoke the CLI against the temporary config file."""
    runner = CliRunner()

    def _invoke(*args):
        return runner.invoke(app, ["--config", str(config_file), *args])

    return _invoke
