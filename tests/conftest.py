"""Shared test fixtures for the corestab test suite."""

from __future__ import annotations

import pytest

from corestab.checker import CoreStabilityChecker
from corestab.config import CheckerConfig
from corestab.scenarios import FIVE_AGENT_WIN_MATRIX, TEN_AGENT_WIN_MATRIX


@pytest.fixture
def config() -> CheckerConfig:
    """Default config with validation and block logging on."""
    return CheckerConfig(validate_inputs=True, log_blocks=True)


@pytest.fixture
def checker(config: CheckerConfig) -> CoreStabilityChecker:
    """A fresh checker."""
    return CoreStabilityChecker(config)


@pytest.fixture
def five_agent_matrix() -> list[list[float]]:
    """5x5 win matrix shared by scenarios A-C."""
    return [list(row) for row in FIVE_AGENT_WIN_MATRIX]


@pytest.fixture
def ten_agent_matrix() -> list[list[float]]:
    """10x10 win matrix shared by scenarios D-E."""
    return [list(row) for row in TEN_AGENT_WIN_MATRIX]
