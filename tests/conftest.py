"""
Shared fixtures for the rollexpr test suite.
"""

import logging
import os

import pytest

from rollexpr.core.config import reset_config
from rollexpr.rng.roller import reset_default_roller


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """
    Remove every ROLLEXPR_* variable and run from an empty directory.

    Variables are registered with monkeypatch first, so anything a .env
    file loads during the test is removed again afterwards.
    """
    names = [
        'ROLLEXPR_LOG_LEVEL', 'ROLLEXPR_LOG_FILE', 'ROLLEXPR_SEED',
        'ROLLEXPR_DEFAULT_ROLL', 'ROLLEXPR_HOST', 'ROLLEXPR_PORT',
        'ROLLEXPR_DEBUG', 'ROLLEXPR_MAX_TIMES', 'ROLLEXPR_MAX_DICE',
    ]
    for name in names:
        monkeypatch.setenv(name, os.environ.get(name, ''))
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)

    reset_config()
    reset_default_roller()
    yield monkeypatch
    reset_config()
    reset_default_roller()


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo setup_logging() calls made by a test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
