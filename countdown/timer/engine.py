"""Screen-mode state machine and countdown ticking.

States
------
EDITING         Keypad visible; digit intents edit the duration.
COUNTING_DOWN   Ring visible; the duration captured at start depletes
                one second per tick.  Completion keeps this mode and
                sets ``is_completed``.

Transitions
-----------
EDITING → COUNTING_DOWN     (start_countdown, only with a valid duration)
COUNTING_DOWN → EDITING     (reset)

Every mutation publishes an immutable ``TimerState``.  The engine owns a
``QTimer``; call ``close()`` (or use the engine as a context manager) when
the owner goes away so no tick can fire afterwards.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from .input import Duration, InputAccumulator, HOUR_SECONDS, MINUTE_SECONDS


logger = logging.getLogger(__name__)


# ── enums / constants ─────────────────────────────────────────────────────


class ScreenMode(Enum):
    EDITING = "editing"
    COUNTING_DOWN = "counting_down"


TICK_INTERVAL_MS = 1000


def split_seconds(total: int) -> tuple[int, int, int]:
    """Real clock split of *total* seconds into (hours, minutes, seconds).

    Not the same thing as ``Duration.from_raw``: this works on seconds,
    that one on typed digits.
    """
    hours, rest = divmod(max(0, total), HOUR_SECONDS)
    minutes, seconds = divmod(rest, MINUTE_SECONDS)
    return hours, minutes, seconds


# ── published snapshot ────────────────────────────────────────────────────


@dataclass(frozen=True)
class TimerState:
    screen: ScreenMode = ScreenMode.EDITING
    duration: Duration = Duration()
    total_seconds: int = 0
    remaining_seconds: int = 0
    is_completed: bool = False

    @property
    def is_valid(self) -> bool:
        return self.duration.is_valid

    @property
    def remaining(self) -> tuple[int, int, int]:
        """(hours, minutes, seconds) left on the clock."""
        return split_seconds(self.remaining_seconds)

    @property
    def remaining_fraction(self) -> float:
        """1.0 → 0.0 as the countdown depletes.  Zero total counts as done."""
        if self.total_seconds <= 0:
            return 0.0
        return max(0.0, min(1.0, self.remaining_seconds / self.total_seconds))

    @property
    def progress(self) -> float:
        """0.0 → 1.0 elapsed fraction."""
        return 1.0 - self.remaining_fraction


# ── engine ────────────────────────────────────────────────────────────────


class TimerEngine(QObject):
    """Qt-based countdown engine driven by keypad intents.

    Signals
    -------
    state_changed(state: TimerState)
        Emitted on every mutation: digit edits, start, each tick, reset.
    countdown_finished()
        Emitted once when the remaining time reaches zero.
    """

    state_changed = pyqtSignal(object)
    countdown_finished = pyqtSignal()

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        accumulator: InputAccumulator | None = None,
        tick_interval_ms: int = TICK_INTERVAL_MS,
    ) -> None:
        super().__init__(parent)

        if accumulator is None:
            accumulator = InputAccumulator(self)
        self._input = accumulator
        self._input.duration_changed.connect(self._on_duration_changed)

        duration = self._input.duration
        self._state = TimerState(
            duration=duration,
            total_seconds=duration.total_seconds,
            remaining_seconds=duration.total_seconds,
        )
        self._closed: bool = False

        # ── Qt timer ──────────────────────────────────────────────────
        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(tick_interval_ms)
        self._qt_timer.timeout.connect(self._on_tick)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def state(self) -> TimerState:
        """The last published snapshot."""
        return self._state

    @property
    def screen(self) -> ScreenMode:
        return self._state.screen

    @property
    def accumulator(self) -> InputAccumulator:
        return self._input

    @property
    def is_running(self) -> bool:
        """True while the ticking timer is active."""
        return self._qt_timer.isActive()

    @property
    def is_closed(self) -> bool:
        return self._closed

    def subscribe(self, callback: Callable[[TimerState], None]) -> None:
        """Connect *callback* and hand it the current state right away."""
        self.state_changed.connect(callback)
        callback(self._state)

    # ══════════════════════════════════════════════════════════════════
    #  INTENTS
    # ══════════════════════════════════════════════════════════════════

    def press_digit(self, digit: int) -> None:
        if self._ignores_edits("press_digit"):
            return
        self._input.append_digit(digit)

    def delete_last(self) -> None:
        if self._ignores_edits("delete_last"):
            return
        self._input.delete_last_digit()

    def clear_all(self) -> None:
        if self._ignores_edits("clear_all"):
            return
        self._input.clear()

    def start_countdown(self) -> None:
        """Begin counting down the current duration.  Only valid from EDITING."""
        if self._ignores_edits("start_countdown"):
            return
        total = self._state.duration.total_seconds
        if total <= 0:
            logger.debug("start_countdown ignored: duration is zero")
            return

        logger.info("Starting countdown of %d seconds", total)
        self._publish(replace(
            self._state,
            screen=ScreenMode.COUNTING_DOWN,
            total_seconds=total,
            remaining_seconds=total,
            is_completed=False,
        ))
        self._qt_timer.start()

    def reset(self) -> None:
        """Abandon any countdown and return to EDITING with the typed digits."""
        if self._closed:
            return
        self._qt_timer.stop()
        duration = self._input.duration
        logger.info("Timer reset to editing")
        self._publish(TimerState(
            duration=duration,
            total_seconds=duration.total_seconds,
            remaining_seconds=duration.total_seconds,
        ))

    # ══════════════════════════════════════════════════════════════════
    #  LIFECYCLE
    # ══════════════════════════════════════════════════════════════════

    def close(self) -> None:
        """Cancel the ticking process.  Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        self._qt_timer.stop()
        logger.debug("Timer engine closed")

    def __enter__(self) -> TimerEngine:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL
    # ══════════════════════════════════════════════════════════════════

    def _ignores_edits(self, intent: str) -> bool:
        if self._closed:
            logger.debug("%s ignored: engine closed", intent)
            return True
        if self._state.screen != ScreenMode.EDITING:
            logger.debug("%s ignored while counting down", intent)
            return True
        return False

    def _on_duration_changed(self, duration: Duration) -> None:
        if self._closed or self._state.screen != ScreenMode.EDITING:
            return
        self._publish(replace(
            self._state,
            duration=duration,
            total_seconds=duration.total_seconds,
            remaining_seconds=duration.total_seconds,
        ))

    def _on_tick(self) -> None:
        # A timeout queued before close()/reset() must not land.
        if (
            self._closed
            or self._state.screen != ScreenMode.COUNTING_DOWN
            or self._state.is_completed
        ):
            return

        remaining = max(0, self._state.remaining_seconds - 1)
        if remaining > 0:
            self._publish(replace(self._state, remaining_seconds=remaining))
            return

        self._qt_timer.stop()
        logger.info("Countdown of %d seconds finished", self._state.total_seconds)
        self._publish(replace(
            self._state, remaining_seconds=0, is_completed=True,
        ))
        self.countdown_finished.emit()

    def _publish(self, state: TimerState) -> None:
        self._state = state
        self.state_changed.emit(state)
