"""UI package."""

from .editing_widget import EditingWidget
from .countdown_widget import CountdownWidget
from .progress_ring import ProgressRing

__all__ = [
    "EditingWidget",
    "CountdownWidget",
    "ProgressRing",
]
