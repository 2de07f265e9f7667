"""Shared pytest fixtures for Countdown tests."""

import os
import sys
import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from countdown.timer.engine import TimerEngine
from countdown.timer.input import InputAccumulator


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep every test away from the real settings file."""
    monkeypatch.setattr("countdown.settings.SETTINGS_PATH", tmp_path / "settings.json")
    monkeypatch.setattr("countdown.settings.APP_SUPPORT_DIR", tmp_path)
    yield tmp_path


@pytest.fixture
def accumulator(qapp):
    return InputAccumulator()


@pytest.fixture
def engine(qapp):
    """Fresh TimerEngine, closed after the test."""
    eng = TimerEngine(parent=None)
    yield eng
    eng.close()
