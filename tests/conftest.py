"""Pytest configuration - ensure consistent CWD and provide fixtures.

Qt runs on the offscreen platform so controller/canvas tests work
without a display. Timers are created but never fire during tests;
tests drive ticks and timeouts by calling the handlers directly.
"""
from __future__ import annotations

import os
from pathlib import Path
import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

ROOT = Path(__file__).resolve().parents[1]

def pytest_sessionstart(session):
    os.chdir(ROOT)


# Fixtures used by multiple test files

@pytest.fixture(scope="session")
def qapp():
    """Session-wide QApplication."""
    from PyQt5.QtWidgets import QApplication
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def swarm():
    """Empty 800x600 swarm with a fixed seed."""
    from boidswarm.boids import Swarm
    return Swarm(width=800, height=600, seed=1234)


@pytest.fixture
def controller(qapp):
    """Controller bound to a fixed 800x600 world, 10 boids on start."""
    from boidswarm.boids import SwarmController, SwarmState
    state = SwarmState(initial_boid_count=10, seed=42, seed_locked=True)
    ctrl = SwarmController(bounds_provider=lambda: (800.0, 600.0), state=state)
    yield ctrl
    ctrl.stop()
