"""Main window: wires the keypad and the ring to the timer engine."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QLabel, QPushButton, QStackedWidget,
)

from .timer.engine import TimerEngine, TimerState, ScreenMode
from .ui.editing_widget import EditingWidget
from .ui.countdown_widget import CountdownWidget
from .ui.styles import build_stylesheet, get_palette
from .settings import Settings, load_settings, save_settings


logger = logging.getLogger(__name__)

_DIGIT_KEYS: dict[int, int] = {
    getattr(Qt.Key, f"Key_{d}").value: d for d in range(10)
}


class CountdownApp(QMainWindow):
    """Main application window."""

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Countdown")
        self.setMinimumSize(360, 600)

        # ── settings ──────────────────────────────────────────────────
        self._settings: Settings = settings if settings is not None else load_settings()

        self._geometry_save_timer = QTimer(self)
        self._geometry_save_timer.setSingleShot(True)
        self._geometry_save_timer.setInterval(500)
        self._geometry_save_timer.timeout.connect(self._save_geometry)

        # ── engine ────────────────────────────────────────────────────
        self._engine = TimerEngine(
            self, tick_interval_ms=self._settings.tick_interval_ms,
        )

        self.setStyleSheet(build_stylesheet(get_palette()))
        self._build_ui()
        self._connect_signals()
        self._restore_geometry()
        self._apply_always_on_top(self._settings.always_on_top)

        self._engine.subscribe(self._on_state_changed)

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        central = QWidget(self)
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(0, 16, 0, 24)

        title = QLabel("Countdown", central)
        title.setObjectName("titleLabel")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(title)

        self._stack = QStackedWidget(central)
        self._editing = EditingWidget(self._stack)
        self._countdown = CountdownWidget(self._stack)
        self._stack.addWidget(self._editing)
        self._stack.addWidget(self._countdown)
        root.addWidget(self._stack, stretch=1)

        action_row = QHBoxLayout()
        action_row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._start_btn = QPushButton("▶", central)
        self._start_btn.setObjectName("primaryButton")
        self._start_btn.setToolTip("Start")
        action_row.addWidget(self._start_btn)
        root.addLayout(action_row)

    def _connect_signals(self) -> None:
        self._editing.digit_pressed.connect(self._engine.press_digit)
        self._editing.delete_requested.connect(self._engine.delete_last)
        self._editing.clear_requested.connect(self._engine.clear_all)
        self._start_btn.clicked.connect(self._engine.start_countdown)

        self._key_actions = {
            Qt.Key.Key_Backspace.value: self._engine.delete_last,
            Qt.Key.Key_Delete.value: self._engine.clear_all,
            Qt.Key.Key_Return.value: self._engine.start_countdown,
            Qt.Key.Key_Enter.value: self._engine.start_countdown,
            Qt.Key.Key_Escape.value: self._engine.reset,
        }

    # ── accessors ─────────────────────────────────────────────────────────

    @property
    def engine(self) -> TimerEngine:
        return self._engine

    @property
    def editing_widget(self) -> EditingWidget:
        return self._editing

    @property
    def countdown_widget(self) -> CountdownWidget:
        return self._countdown

    @property
    def start_button(self) -> QPushButton:
        return self._start_btn

    # ── slots ─────────────────────────────────────────────────────────────

    def _on_state_changed(self, state: TimerState) -> None:
        if state.screen == ScreenMode.EDITING:
            self._stack.setCurrentWidget(self._editing)
            self._editing.render_duration(state.duration)
        else:
            self._stack.setCurrentWidget(self._countdown)
            self._countdown.render_state(state)

        # Start only makes sense while editing a non-zero duration
        self._start_btn.setVisible(
            state.screen == ScreenMode.EDITING and state.is_valid
        )

    # ══════════════════════════════════════════════════════════════════
    #  WINDOW STATE
    # ══════════════════════════════════════════════════════════════════

    def _restore_geometry(self) -> None:
        """Restore window position and size from settings."""
        s = self._settings
        if s.window_x is not None and s.window_y is not None:
            self.move(s.window_x, s.window_y)
        if s.window_width and s.window_height:
            self.resize(s.window_width, s.window_height)

    def _save_geometry(self) -> None:
        """Persist current window geometry to settings."""
        if not self.isVisible():
            return
        pos = self.pos()
        size = self.size()
        self._settings.window_x = pos.x()
        self._settings.window_y = pos.y()
        self._settings.window_width = size.width()
        self._settings.window_height = size.height()
        save_settings(self._settings)

    def _schedule_geometry_save(self) -> None:
        """Debounce geometry saves; restart 500ms timer on each move/resize."""
        if hasattr(self, "_geometry_save_timer"):
            self._geometry_save_timer.start()

    def _apply_always_on_top(self, on_top: bool) -> None:
        flags = self.windowFlags()
        if on_top:
            flags |= Qt.WindowType.WindowStaysOnTopHint
        else:
            flags &= ~Qt.WindowType.WindowStaysOnTopHint
        self.setWindowFlags(flags)

    # ══════════════════════════════════════════════════════════════════
    #  WINDOW EVENTS
    # ══════════════════════════════════════════════════════════════════

    def closeEvent(self, event) -> None:  # type: ignore[override]
        logger.debug("Window closing, stopping timer engine")
        self._geometry_save_timer.stop()
        self._save_geometry()
        self._engine.close()
        event.accept()

    def resizeEvent(self, event) -> None:  # type: ignore[override]
        super().resizeEvent(event)
        self._schedule_geometry_save()

    def moveEvent(self, event) -> None:  # type: ignore[override]
        super().moveEvent(event)
        self._schedule_geometry_save()

    def keyPressEvent(self, event) -> None:  # type: ignore[override]
        """Digits type, Backspace deletes, Delete clears, Return starts, Esc resets."""
        key = event.key()
        if key in _DIGIT_KEYS:
            self._engine.press_digit(_DIGIT_KEYS[key])
            event.accept()
            return
        handler = self._key_actions.get(key)
        if handler is None:
            super().keyPressEvent(event)
            return
        handler()
        event.accept()
