"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from typing import Any
from unittest.mock import MagicMock, patch

import pytest

from adjusted_value.config import Settings


@pytest.fixture
def clean_env() -> Iterator[None]:
    """Run the test with an empty environment."""
    with patch.dict(os.environ, {}, clear=True):
        yield


@pytest.fixture
def make_settings(clean_env: None) -> Callable[..., Settings]:
    """Build Settings from keyword overrides, ignoring any .env file."""

    def factory(**overrides: Any) -> Settings:
        return Settings(_env_file=None, **overrides)  # type: ignore[call-arg]

    return factory


@pytest.fixture
def mock_logger() -> Iterator[MagicMock]:
    """Replace structlog configuration and loggers for entry point tests."""
    logger = MagicMock()
    with (
        patch("adjusted_value.__main__.configure_structlog"),
        patch("structlog.get_logger", return_value=logger),
    ):
        yield logger


@pytest.fixture
def use_settings(
    make_settings: Callable[..., Settings], mock_logger: MagicMock
) -> Iterator[Callable[..., Settings]]:
    """Patch the entry point to load Settings built from overrides.

    Call the yielded function with keyword overrides before invoking main().
    """
    current: dict[str, Settings] = {"settings": make_settings()}

    def configure(**overrides: Any) -> Settings:
        current["settings"] = make_settings(**overrides)
        return current["settings"]

    with patch("adjusted_value.__main__.get_settings", side_effect=lambda: current["settings"]):
        yield configure
