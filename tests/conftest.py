"""
tests/conftest.py
Shared fixtures for envseed tests.
Keeps ENVSEED_* variables and root logging handlers from leaking between tests.
"""

import logging
import os
from pathlib import Path

import pytest

from envseed.environment import MemoryEnvironment

FIXTURE_ENV = Path(__file__).parent / ".env"


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch):
    """No ENVSEED_* variables or NO_COLOR from the developer's shell."""
    for name in list(os.environ):
        if name.startswith("ENVSEED_"):
            monkeypatch.delenv(name)
    monkeypatch.delenv("NO_COLOR", raising=False)


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """Drop the handlers setup_logging() installs and restore the root level.

    pytest's own capture handlers are subclasses, so the exact type check
    leaves them alone.
    """
    root = logging.getLogger()
    level = root.level
    yield
    for h in root.handlers[:]:
        if type(h) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(h)
            h.close()
    root.setLevel(level)


@pytest.fixture
def fixture_env_path() -> Path:
    """The sample env file shipped with the tests."""
    return FIXTURE_ENV


@pytest.fixture
def memory_env():
    return MemoryEnvironment()


@pytest.fixture
def write_env(tmp_path):
    """Write an env file into tmp_path and return its path as a string."""

    def _write(content: str, name: str = ".env") -> str:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)

    return _write
