"""
Pytest configuration and shared fixtures for envcast testing.

Environment variables are only ever set through ``monkeypatch`` so every
test leaves ``os.environ`` as it found it.
"""

import pathlib
import sys
import uuid

import pytest
from loguru import logger

project_root = pathlib.Path(__file__).resolve().parents[1]
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


# =============================================================================
# Environment Fixtures
# =============================================================================

@pytest.fixture
def varname():
    """Factory for unique variable names that are never set by accident."""
    def _make_name(prefix: str = "ENVCAST_TEST") -> str:
        return f"{prefix}_{uuid.uuid4().hex[:8].upper()}"

    return _make_name


@pytest.fixture
def env(monkeypatch):
    """Set environment variables for the duration of one test."""
    def _set(**variables: str) -> None:
        for key, value in variables.items():
            monkeypatch.setenv(key, value)

    return _set


# =============================================================================
# Logging Fixtures
# =============================================================================

@pytest.fixture
def log_records():
    """Capture envcast log records emitted during a test."""
    records = []
    handler_id = logger.add(
        lambda message: records.append(message.record),
        level="DEBUG",
        filter="envcast"
    )
    logger.enable("envcast")
    yield records
    logger.remove(handler_id)
    logger.disable("envcast")
