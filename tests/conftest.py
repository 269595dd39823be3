"""Pytest configuration and shared fixtures for casework tests."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from casework.application import CabinetRequest, get_factory, reset_factory

if TYPE_CHECKING:
    from casework.application import CabinetOutput, GenerateCabinetCommand

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "configs"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: end-to-end tests through the CLI or REST API"
    )


@pytest.fixture(autouse=True)
def _fresh_factory():
    """Give every test its own service factory and cabinet cache."""
    reset_factory()
    yield
    reset_factory()


# =============================================================================
# Shared fixtures for command creation
# =============================================================================


@pytest.fixture
def generate_command() -> "GenerateCabinetCommand":
    """Create a GenerateCabinetCommand instance using the factory."""
    return get_factory().create_generate_command()


@pytest.fixture
def base_output(generate_command) -> "CabinetOutput":
    """24" base cabinet (Scenario A)."""
    return generate_command.execute(CabinetRequest(archetype="base", width=24))


@pytest.fixture
def wall_output(generate_command) -> "CabinetOutput":
    """30" x 30" two-door wall cabinet (Scenario B)."""
    return generate_command.execute(
        CabinetRequest(archetype="wall", width=30, height=30)
    )


@pytest.fixture
def tall_output(generate_command) -> "CabinetOutput":
    """24" x 85.5" tall cabinet (Scenario D)."""
    return generate_command.execute(
        CabinetRequest(archetype="tall", width=24, height=85.5)
    )


@pytest.fixture
def fixtures_path() -> Path:
    return FIXTURES_PATH
