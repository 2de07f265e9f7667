"""Editing screen: the ``HH h MM m SS s`` readout and the keypad.

Layout (top → bottom):
    - Readout with a backspace button (click deletes, long press clears)
    - Divider
    - 3×4 keypad: 1-9, then 0 centred on the last row
"""

from __future__ import annotations

from PyQt6.QtCore import Qt, QTimer, pyqtSignal
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGridLayout,
    QLabel, QPushButton, QFrame,
)

from ..timer.input import Duration
from .styles import PALETTE


LONG_PRESS_MS = 600
KEYPAD_BUTTON_SIZE = 80

# (row, column) for each digit
KEYPAD_LAYOUT: dict[int, tuple[int, int]] = {
    **{d: ((d - 1) // 3, (d - 1) % 3) for d in range(1, 10)},
    0: (3, 1),
}


class EditingWidget(QWidget):
    """Keypad and readout.  Emits intents, never touches the engine."""

    digit_pressed = pyqtSignal(int)
    delete_requested = pyqtSignal()
    clear_requested = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._long_press_fired = False
        self._build_ui()
        self._connect_signals()
        self.render_duration(Duration())

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(32, 16, 32, 16)
        layout.setSpacing(0)

        # ── readout ──────────────────────────────────────────────────
        readout = QHBoxLayout()
        readout.setAlignment(Qt.AlignmentFlag.AlignCenter)
        readout.setSpacing(4)

        self._value_labels: list[QLabel] = []
        self._unit_labels: list[QLabel] = []
        for unit in ("h", "m", "s"):
            value = QLabel("00", self)
            value.setStyleSheet("font-size: 44px;")
            unit_lbl = QLabel(unit, self)
            unit_lbl.setAlignment(Qt.AlignmentFlag.AlignBottom)
            readout.addWidget(value)
            readout.addWidget(unit_lbl)
            readout.addSpacing(12)
            self._value_labels.append(value)
            self._unit_labels.append(unit_lbl)

        self._backspace_btn = QPushButton("⌫", self)
        self._backspace_btn.setObjectName("backspaceButton")
        self._backspace_btn.setToolTip("Delete (hold to clear)")
        readout.addWidget(self._backspace_btn)
        layout.addLayout(readout)

        # ── divider ──────────────────────────────────────────────────
        layout.addSpacing(24)
        divider = QFrame(self)
        divider.setObjectName("divider")
        divider.setFrameShape(QFrame.Shape.HLine)
        layout.addWidget(divider)
        layout.addSpacing(16)

        # ── keypad ───────────────────────────────────────────────────
        grid = QGridLayout()
        grid.setSpacing(8)
        self._digit_buttons: dict[int, QPushButton] = {}
        for digit, (row, col) in KEYPAD_LAYOUT.items():
            btn = QPushButton(str(digit), self)
            btn.setObjectName("keypadButton")
            btn.setFixedSize(KEYPAD_BUTTON_SIZE, KEYPAD_BUTTON_SIZE)
            grid.addWidget(btn, row, col, alignment=Qt.AlignmentFlag.AlignCenter)
            self._digit_buttons[digit] = btn
        layout.addLayout(grid)

        self._long_press_timer = QTimer(self)
        self._long_press_timer.setSingleShot(True)
        self._long_press_timer.setInterval(LONG_PRESS_MS)

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        for digit, btn in self._digit_buttons.items():
            btn.clicked.connect(lambda _=False, d=digit: self.digit_pressed.emit(d))
        self._backspace_btn.pressed.connect(self._on_backspace_pressed)
        self._backspace_btn.clicked.connect(self._on_backspace_clicked)
        self._long_press_timer.timeout.connect(self._on_long_press)

    def _on_backspace_pressed(self) -> None:
        self._long_press_fired = False
        self._long_press_timer.start()

    def _on_backspace_clicked(self) -> None:
        self._long_press_timer.stop()
        if self._long_press_fired:
            self._long_press_fired = False
            return
        self.delete_requested.emit()

    def _on_long_press(self) -> None:
        self._long_press_fired = True
        self.clear_requested.emit()

    # ── rendering ─────────────────────────────────────────────────────────

    def digit_button(self, digit: int) -> QPushButton:
        return self._digit_buttons[digit]

    @property
    def backspace_button(self) -> QPushButton:
        return self._backspace_btn

    @property
    def readout_text(self) -> str:
        """The readout as shown, e.g. ``"01h 30m 05s"``."""
        return " ".join(
            f"{v.text()}{u.text()}"
            for v, u in zip(self._value_labels, self._unit_labels)
        )

    def render_duration(self, duration: Duration) -> None:
        values = (duration.hours, duration.minutes, duration.seconds)
        color = PALETTE["accent"] if duration.is_valid else PALETTE["text_muted"]
        for label, value in zip(self._value_labels, values):
            label.setText(f"{value:02d}")
            label.setStyleSheet(f"font-size: 44px; color: {color};")
        for label in self._unit_labels:
            label.setStyleSheet(f"font-size: 18px; color: {color};")
        self._backspace_btn.setEnabled(duration.is_valid)
