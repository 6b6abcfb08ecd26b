"""
Repository-level pytest configuration.

Provides safe defaults for the live UI suite (no secrets embedded) so a
fresh clone runs predictably. Values are placeholders; CI should export real
ones.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator

import pytest


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session", autouse=True)
def _demo_safe_env_defaults() -> Generator[None, None, None]:
    """Set demo-safe environment defaults if not already provided by the user/CI."""
    defaults = {
        "UI_BASE_URL": "http://localhost:8080/app",
        "UI_USERNAME": "admin",
        "UI_PASSWORD": "admin",
    }

    for k, v in defaults.items():
        os.environ.setdefault(k, v)

    yield
