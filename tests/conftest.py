"""Shared fixtures for the bagel shop tests."""

import pytest

from bagel_shop.src.constants import ENV_BASKET_CAPACITY, ENV_LOG_LEVEL
from bagel_shop.utils.logger_setup import LoggerManager


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Keep environment overrides and logging setup from leaking between tests."""
    monkeypatch.delenv(ENV_BASKET_CAPACITY, raising=False)
    monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)
    yield
    LoggerManager.reset()
