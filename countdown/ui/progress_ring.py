"""Circular countdown ring rendered with QPainter.

- Arc starts at 12 o'clock and shrinks counter-clockwise as time runs out.
- ``HH:MM:SS`` in bold at the centre, a small label underneath.
- Arc changes are animated so one-second steps look continuous.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt, QRectF, QVariantAnimation, QEasingCurve
from PyQt6.QtGui import QPainter, QPen, QColor, QFont
from PyQt6.QtWidgets import QWidget

from .styles import RING_COLORS, PALETTE


class ProgressRing(QWidget):
    """Custom-painted circular countdown ring."""

    RING_DIAMETER = 260
    RING_THICKNESS = 20

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setMinimumSize(self.RING_DIAMETER + 20, self.RING_DIAMETER + 20)

        # ── state ──────────────────────────────────────────────────────
        self._fraction: float = 1.0           # 1..0 remaining arc
        self._display_fraction: float = 1.0   # animated arc
        self._time_text: str = "00:00:00"
        self._label: str = ""
        self._completed: bool = False

        self._text_color = QColor(PALETTE["text"])
        self._muted_color = QColor(PALETTE["text_muted"])

        # ── arc animation ──────────────────────────────────────────────
        self._arc_anim = QVariantAnimation(self)
        self._arc_anim.setDuration(300)
        self._arc_anim.setEasingCurve(QEasingCurve.Type.Linear)
        self._arc_anim.valueChanged.connect(self._on_arc_anim)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC API
    # ══════════════════════════════════════════════════════════════════

    @property
    def fraction(self) -> float:
        return self._fraction

    @property
    def time_text(self) -> str:
        return self._time_text

    @property
    def label(self) -> str:
        return self._label

    def set_fraction(self, fraction: float, animate: bool = True) -> None:
        """Update the remaining arc (1..0)."""
        fraction = max(0.0, min(1.0, fraction))
        self._fraction = fraction
        self._arc_anim.stop()
        if not animate:
            self._display_fraction = fraction
            self.update()
            return
        self._arc_anim.setStartValue(self._display_fraction)
        self._arc_anim.setEndValue(fraction)
        self._arc_anim.start()

    def set_time_text(self, text: str) -> None:
        self._time_text = text
        self.update()

    def set_label(self, text: str) -> None:
        self._label = text
        self.update()

    def set_completed(self, completed: bool) -> None:
        self._completed = completed
        self.update()

    # ══════════════════════════════════════════════════════════════════
    #  PAINTING
    # ══════════════════════════════════════════════════════════════════

    def _on_arc_anim(self, value: object) -> None:
        self._display_fraction = float(value)  # type: ignore[arg-type]
        self.update()

    def paintEvent(self, event) -> None:  # type: ignore[override]
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        w = self.width()
        h = self.height()
        cx, cy = w / 2, h / 2
        diameter = max(100, min(w, h) - 2 * self.RING_THICKNESS)
        radius = diameter / 2
        ring_rect = QRectF(cx - radius, cy - radius, diameter, diameter)

        arc_hex, track_hex = RING_COLORS["completed" if self._completed else "running"]

        # ── background track ─────────────────────────────────────────
        track_pen = QPen(QColor(track_hex), self.RING_THICKNESS)
        painter.setPen(track_pen)
        painter.drawEllipse(ring_rect)

        # ── remaining arc ────────────────────────────────────────────
        if self._display_fraction > 0.001:
            arc_pen = QPen(QColor(arc_hex), self.RING_THICKNESS)
            arc_pen.setCapStyle(Qt.PenCapStyle.RoundCap)
            painter.setPen(arc_pen)
            # Qt arcs: 12 o'clock is 90*16; positive span runs counter-clockwise
            span_angle = int(self._display_fraction * 360 * 16)
            painter.drawArc(ring_rect, 90 * 16, span_angle)

        # ── centre text ──────────────────────────────────────────────
        time_font = QFont()
        time_font.setPixelSize(40)
        time_font.setWeight(QFont.Weight.Bold)
        painter.setFont(time_font)
        painter.setPen(self._text_color)
        painter.drawText(ring_rect, Qt.AlignmentFlag.AlignCenter, self._time_text)

        if self._label:
            label_font = QFont()
            label_font.setPixelSize(13)
            label_font.setLetterSpacing(QFont.SpacingType.AbsoluteSpacing, 3)
            painter.setFont(label_font)
            painter.setPen(self._muted_color)
            label_rect = QRectF(ring_rect)
            label_rect.moveTop(label_rect.top() + 48)
            painter.drawText(label_rect, Qt.AlignmentFlag.AlignCenter, self._label)

        painter.end()
