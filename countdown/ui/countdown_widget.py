"""Countdown screen: the depleting ring with the time left."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QWidget, QVBoxLayout, QSizePolicy

from ..timer.engine import TimerState
from .progress_ring import ProgressRing


def format_remaining(state: TimerState) -> str:
    hours, minutes, seconds = state.remaining
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


class CountdownWidget(QWidget):
    """Read-only view of a running (or finished) countdown."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._ring = ProgressRing(self)
        self._ring.setSizePolicy(
            QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed,
        )
        self._ring.setFixedSize(300, 300)
        layout.addWidget(self._ring, alignment=Qt.AlignmentFlag.AlignCenter)

    @property
    def ring(self) -> ProgressRing:
        return self._ring

    def render_state(self, state: TimerState) -> None:
        self._ring.set_time_text(format_remaining(state))
        # Jump straight to a full ring at start, animate the ticks after
        animate = state.remaining_seconds != state.total_seconds
        self._ring.set_fraction(state.remaining_fraction, animate=animate)
        self._ring.set_completed(state.is_completed)
        self._ring.set_label("DONE" if state.is_completed else "")
