"""Root conftest — shared test configuration and fixtures."""

import os
import uuid

import pytest

# Keep local .env overrides out of test runs
os.environ.setdefault("DEBUG", "false")
os.environ.setdefault("STRICT_CONTRACTS", "false")


@pytest.fixture
def new_id():
    """Factory for fresh UUID strings."""
    return lambda: str(uuid.uuid4())
