from __future__ import annotations

import pytest

from issuelens.logging import reset_logging


@pytest.fixture(autouse=True)
def _reset_issuelens_logger():
    """Undo handlers installed by configure_logging so tests stay isolated."""
    yield
    reset_logging()
