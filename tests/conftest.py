"""Shared pytest fixtures for Lisper tests."""

import pytest

from lisper.core.lang.environment import Environment, create_default_env


@pytest.fixture
def env() -> Environment:
    """Return a default environment with long-form aliases bound."""
    return create_default_env()
