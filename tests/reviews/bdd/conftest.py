"""Shared BDD fixtures for the Reviews component."""

import pytest


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}
