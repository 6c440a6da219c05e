"""
Repository-level pytest configuration.

Why this exists:
  - Keep configuration lookups predictable: tests never pick up UI_HELPERS_*
    variables from the developer shell or CI
  - Reset the configuration singleton between tests
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator

import pytest

from ui_helpers.config import ENV_PREFIX, ConfigLoader


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch) -> Generator[None, None, None]:
    """Strip UI_HELPERS_* overrides and reset the ConfigLoader singleton."""
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key, raising=False)

    ConfigLoader.reset()
    yield
    ConfigLoader.reset()
