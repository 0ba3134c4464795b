"""Shared fixtures."""

import logging
from collections.abc import Iterator

import pytest

from semvalue import SemanticVersion


@pytest.fixture
def version() -> SemanticVersion:
    """Version 1.0.0 with no pre-release or build metadata."""
    return SemanticVersion(1, 0, 0)


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Drop stream handlers installed by setup_logging during a test."""
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(logging.WARNING)
