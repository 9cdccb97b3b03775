"""
Pytest configuration for ensuring the project root is on sys.path.

This allows test modules to import the in-repo package layout like:
    from fxparity.ui_logic import StateManager

Without relying on external environment variables.
"""

import os
import sys

import pytest

# Insert the repository root (one directory up from tests/) at the
# beginning of sys.path to prioritize local modules over site-packages.
REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from fxparity.ui_logic import ManualClock, StateManager, UpdateScheduler  # noqa: E402


class SpyPresenter:
    """Presenter that records every call for assertions."""

    def __init__(self):
        self.marks = []
        self.presented = []

    def mark_field(self, field, message):
        self.marks.append((field, message))

    def present(self, parameters, result, errors):
        self.presented.append((parameters, result, dict(errors)))


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def presenter():
    return SpyPresenter()


@pytest.fixture
def store():
    return StateManager()


@pytest.fixture
def scheduler(store, clock, presenter):
    sched = UpdateScheduler(store, clock, presenter=presenter)
    sched.update_calculations()
    return sched
