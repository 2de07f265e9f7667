"""Timer package."""

from .input import (
    Duration,
    InputAccumulator,
    MAX_DIGITS,
)
from .engine import (
    TimerEngine,
    TimerState,
    ScreenMode,
    TICK_INTERVAL_MS,
    split_seconds,
)

__all__ = [
    "Duration",
    "InputAccumulator",
    "MAX_DIGITS",
    "TimerEngine",
    "TimerState",
    "ScreenMode",
    "TICK_INTERVAL_MS",
    "split_seconds",
]
