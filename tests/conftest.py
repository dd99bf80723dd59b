from __future__ import annotations

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog():
    """CLI commands bind structlog to the runner's streams; undo that per test."""
    yield
    structlog.reset_defaults()
