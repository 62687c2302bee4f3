# tests/conftest.py
import sys
from datetime import date
from pathlib import Path

# ---------------------------------------------------------
# Ensure project root is on PYTHONPATH BEFORE app imports
# ---------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest


@pytest.fixture
def today():
    """A leap-year reference date used by most resolver tests."""
    return date(2024, 6, 1)


@pytest.fixture
def frozen_today(monkeypatch):
    """
    Freeze the clock read by the orchestrator.
    Returns a setter so each test picks its own "today".
    """

    def _freeze(d: date):
        monkeypatch.setattr(
            "services.days_orchestrator.get_reference_date",
            lambda tz=None: d,
        )
        return d

    return _freeze
