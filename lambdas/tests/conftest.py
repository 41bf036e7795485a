"""Shared fixtures for the dice roll Lambda tests."""

import os
from collections.abc import Iterable
from itertools import cycle
from unittest.mock import MagicMock

import pytest

# Powertools settings must be in place before handler modules are imported
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "dice-roll")
os.environ.setdefault("POWERTOOLS_METRICS_NAMESPACE", "DiceRoll")
os.environ.setdefault("POWERTOOLS_TRACE_DISABLED", "1")
os.environ.setdefault("POWERTOOLS_LOG_LEVEL", "DEBUG")


class FixedRandomSource:
    """Random source that replays a fixed sequence of values."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = cycle(values)
        self.calls: list[int] = []

    def __call__(self, sides: int) -> int:
        self.calls.append(sides)
        return next(self._values)


@pytest.fixture
def fixed_source():
    """Factory for sources replaying the given values."""
    return FixedRandomSource


@pytest.fixture
def env_setup(monkeypatch):
    """Set up a clean configuration environment."""
    from shared.config import get_config

    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("POWERTOOLS_LOG_LEVEL", "DEBUG")
    monkeypatch.delenv("ALLOWED_ORIGIN", raising=False)
    if hasattr(get_config, "_config"):
        delattr(get_config, "_config")
    yield
    if hasattr(get_config, "_config"):
        delattr(get_config, "_config")


@pytest.fixture
def lambda_context():
    """Create a mock Lambda context."""
    context = MagicMock()
    context.function_name = "dice-test"
    context.memory_limit_in_mb = 256
    context.invoked_function_arn = "arn:aws:lambda:us-east-1:123456789012:function:dice-test"
    context.aws_request_id = "test-request-id"
    return context
