"""Shared test configuration and pytest markers."""

import os

# Rate limits would otherwise trip when the API tests hit one route repeatedly
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "api: exercises the FastAPI app through TestClient"
    )
