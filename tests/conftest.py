"""Shared test fixtures and configuration for pytest."""

import os
import pytest
from datetime import datetime, timezone
from typing import Any, Dict

# Set test environment variables before importing app modules
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_LEVEL"] = "ERROR"

from dispatch.dispatcher import Dispatcher, build_default_dispatcher
from dispatch.operation import Operation
from handlers.calculator import handle_calculate
from models.arguments import CalculatorArguments
from models.data_models import ToolResult


# ==================== Dispatcher Fixtures ====================


@pytest.fixture
def dispatcher() -> Dispatcher:
    """Dispatcher with the default greeting, calculate and datetime operations."""
    return build_default_dispatcher()


@pytest.fixture
def calculate_operation() -> Operation:
    """Standalone calculate operation."""
    return Operation("calculate", "Basic arithmetic", CalculatorArguments, handle_calculate)


@pytest.fixture
def recording_handler():
    """Handler that records every call it receives."""
    calls = []

    def _handler(args) -> ToolResult:
        calls.append(args)
        return ToolResult.text(f"handled {args!r}")

    _handler.calls = calls
    return _handler


# ==================== Sample Data Fixtures ====================


@pytest.fixture
def fixed_instant() -> datetime:
    """Saturday 17 October 2026, 09:30:15.250 UTC (11:30:15 in Madrid)."""
    return datetime(2026, 10, 17, 9, 30, 15, 250000, tzinfo=timezone.utc)


@pytest.fixture
def make_calculator_payload():
    """Factory fixture for raw calculate arguments."""
    def _make(operation: str = "add", a: Any = 1, b: Any = 2, **extra) -> Dict[str, Any]:
        payload = {"operation": operation, "a": a, "b": b}
        payload.update(extra)
        return payload

    return _make


# ==================== Environment Fixtures ====================


@pytest.fixture(autouse=True)
def test_env():
    """Ensure test environment variables are set for all tests."""
    original_env = os.environ.copy()

    os.environ.update({
        "ENVIRONMENT": "test",
        "LOG_LEVEL": "ERROR",  # Reduce noise in tests
    })

    yield

    # Restore original environment
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def temp_env(monkeypatch):
    """Fixture for temporarily modifying environment variables."""
    def set_env(**kwargs):
        for key, value in kwargs.items():
            monkeypatch.setenv(key, value)

    return set_env
