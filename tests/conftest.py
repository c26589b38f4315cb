"""Shared pytest fixtures and configuration for the robot-tokens test suite.

Guidelines
----------
* No internet access in any test.
* Remote services are mocked at the provider boundary or with
  ``httpx.MockTransport``.
* Core tests must be pure — no side effects.
* Tests must not depend on the caller's environment or ``.env`` file.
"""

from __future__ import annotations

from collections.abc import Iterator
from datetime import datetime, timezone
from pathlib import Path

import pytest
from loguru import logger

NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)

_SETTINGS_ENV_VARS = (
    "UP_ACCOUNT",
    "UP_ENDPOINT",
    "UP_TOKEN",
    "UP_HTTP_TIMEOUT_SECONDS",
    "UP_USER_AGENT",
)


@pytest.fixture(autouse=True)
def _isolated_environment(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> Iterator[None]:
    """Clear ``UP_*`` variables, hide any ``.env`` file and reset loguru sinks."""
    for name in _SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield
    logger.remove()


@pytest.fixture
def now() -> datetime:
    return NOW
