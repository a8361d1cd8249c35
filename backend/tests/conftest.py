import os
import sys

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

SNAKE_ENV_VARS = [
    "SNAKE_TICK_MS",
    "SNAKE_BOUNDS",
    "SNAKE_HEADING",
    "SNAKE_INITIAL_FOOD",
    "SNAKE_SEED",
    "SNAKE_MAX_SPAWN_ATTEMPTS",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Unset SNAKE_* variables, and remove any a .env file sets during the test."""
    for var in SNAKE_ENV_VARS:
        # setenv then delenv records the variable so teardown removes it again
        monkeypatch.setenv(var, "")
        monkeypatch.delenv(var)
    return monkeypatch
