"""Shared test fixtures.

Settings are cached process-wide; every test starts from a clean cache and
without any ``WSKPACK_*`` variables leaking in from the host environment.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator

import pytest
from loguru import logger

from wskpack.deployer.settings import _get_settings_cached


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for key in list(os.environ):
        if key.startswith("WSKPACK_"):
            monkeypatch.delenv(key)
    _get_settings_cached.cache_clear()
    yield
    _get_settings_cached.cache_clear()


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """CLI commands rebind loguru to CliRunner's stderr; restore a stderr sink that follows stream swaps."""
    yield
    logger.remove()
    logger.add(lambda message: sys.stderr.write(message))
