"""Digit-entry accumulator for the editing screen.

The user types digits on a keypad and they fill ``HH MM SS`` from the
right, like a microwave.  The typed digits are kept as a single integer
and decomposed positionally, two decimal digits per unit:

    raw = 13005   ->   01 h  30 m  05 s

Minutes and seconds are *not* clamped to < 60.  ``99`` means 99 seconds.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from PyQt6.QtCore import QObject, pyqtSignal


logger = logging.getLogger(__name__)

MAX_DIGITS = 6
HOUR_SECONDS = 3600
MINUTE_SECONDS = 60


@dataclass(frozen=True)
class Duration:
    """Hours/minutes/seconds derived from one raw accumulator value."""

    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    @classmethod
    def from_raw(cls, raw: int) -> Duration:
        """Split *raw* into base-100 pairs, least significant first."""
        return cls(
            hours=raw // 10000,
            minutes=(raw // 100) % 100,
            seconds=raw % 100,
        )

    @property
    def total_seconds(self) -> int:
        return (
            self.hours * HOUR_SECONDS
            + self.minutes * MINUTE_SECONDS
            + self.seconds
        )

    @property
    def is_valid(self) -> bool:
        """A duration can be started only if it is longer than zero."""
        return self.total_seconds > 0


class InputAccumulator(QObject):
    """Owns the raw digit buffer typed by the user.

    Signals
    -------
    duration_changed(duration: Duration)
        Emitted after every mutation, even when the value did not change
        (e.g. deleting from an empty buffer).
    """

    duration_changed = pyqtSignal(object)

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._raw: int = 0
        self._duration: Duration = Duration()

    @property
    def raw(self) -> int:
        return self._raw

    @property
    def duration(self) -> Duration:
        return self._duration

    @property
    def digits(self) -> str:
        """The buffer as the six-character ``HHMMSS`` string."""
        return f"{self._raw:0{MAX_DIGITS}d}"

    def append_digit(self, digit: int) -> None:
        if not 0 <= digit <= 9:
            raise ValueError(f"digit must be in 0..9, got {digit!r}")
        if len(str(self._raw)) < MAX_DIGITS:
            self._raw = self._raw * 10 + digit
        else:
            logger.debug("Digit buffer full, ignoring %d", digit)
        self._publish()

    def delete_last_digit(self) -> None:
        self._raw //= 10
        self._publish()

    def clear(self) -> None:
        self._raw = 0
        self._publish()

    def _publish(self) -> None:
        self._duration = Duration.from_raw(self._raw)
        self.duration_changed.emit(self._duration)
