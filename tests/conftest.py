"""
Shared test fixtures and configuration.
"""

import logging
from pathlib import Path

import pytest

from rapidcrawl_setup.adapters.mock import MockCommandRunner
from rapidcrawl_setup.core.models.runtime import DetectedRuntime, RuntimeVersion
from rapidcrawl_setup.core.models.setup import SetupSettings


@pytest.fixture
def settings() -> SetupSettings:
    """Default RapidCrawl settings."""
    return SetupSettings()


@pytest.fixture
def mock_runner() -> MockCommandRunner:
    """A runner on which ``python3`` reports 3.10.2 and everything else succeeds."""
    runner = MockCommandRunner()
    runner.set_output("python3 --version", "Python 3.10.2")
    return runner


@pytest.fixture
def runtime() -> DetectedRuntime:
    return DetectedRuntime(
        command="python3",
        version=RuntimeVersion(major=3, minor=10, patch=2),
        raw_output="Python 3.10.2",
    )


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    """An empty project directory for .env and example files."""
    work = tmp_path / "project"
    work.mkdir()
    return work


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """The CLI reconfigures the root logger; undo it after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
