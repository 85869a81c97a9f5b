"""
Shared test configuration.
These tests are executed by `pytest` locally and should remain deterministic.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Iterator

import pytest

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from numberlist import settings as settings_module  # noqa: E402


@pytest.fixture(autouse=True)
def base_test_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Ensure default settings are present and not cached across tests."""

    defaults = {
        "NUMBERLIST_LOG_LEVEL": "INFO",
        "NUMBERLIST_SECTION_DELIM": "&-=-&",
    }
    for key, value in defaults.items():
        if os.getenv(key) is None:
            monkeypatch.setenv(key, value)

    settings_module.get_settings.cache_clear()
    yield
    settings_module.get_settings.cache_clear()
