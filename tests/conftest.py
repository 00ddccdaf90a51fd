"""
Pytest fixtures for Password Mint tests
"""

import logging
import os
import pytest

# Keep shell overrides out of the test run
for _name in list(os.environ):
    if _name.startswith("MINT_"):
        del os.environ[_name]

from password_mint.config import get_settings
from password_mint.services import telemetry


@pytest.fixture(autouse=True)
def reset_state():
    """Fresh counters and settings cache for every test."""
    telemetry.reset_counters()
    get_settings.cache_clear()
    yield
    telemetry.reset_counters()
    get_settings.cache_clear()


@pytest.fixture
def test_phrase() -> str:
    """Test master phrase (for testing only)."""
    return "correct horse battery staple"


@pytest.fixture
def sequential_bytes() -> bytes:
    """64 derived bytes 0x00..0x3f."""
    return bytes(range(64))


@pytest.fixture(autouse=True)
def restore_root_logger():
    """setup_logging() replaces root handlers; put pytest's back afterwards."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
