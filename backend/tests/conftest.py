import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))


@pytest.fixture(autouse=True)
def lenient_pins(monkeypatch):
    """Games default to unvalidated pins unless a test opts in."""
    monkeypatch.delenv("TENPIN_STRICT_PINS", raising=False)
    yield
