"""QSS stylesheet, palette and ring colours for Countdown."""

from __future__ import annotations

# ── palette ──────────────────────────────────────────────────────────────

PALETTE: dict[str, str] = {
    "bg":           "#121212",
    "bg_secondary": "#1E1E1E",
    "surface":      "#2A2A2A",
    "accent":       "#03DAC5",   # teal: valid input, ring arc
    "accent2":      "#66FFF0",
    "text":         "#FFFFFF",
    "text_muted":   "#BDBDBD",   # light gray: empty input
    "border":       "#424242",
    "success":      "#A6E3A1",
}

# (arc colour, track colour) while running and once finished
RING_COLORS: dict[str, tuple[str, str]] = {
    "running":   ("#03DAC5", "#1F3D3A"),
    "completed": ("#A6E3A1", "#2B3A2A"),
}


def get_palette() -> dict[str, str]:
    """Return a copy of the palette so callers can tweak it freely."""
    return dict(PALETTE)


# ── QSS builder ───────────────────────────────────────────────────────


def build_stylesheet(palette: dict[str, str]) -> str:
    p = palette
    return f"""
    /* ── global ─────────────────────────────────── */
    QWidget {{
        background-color: {p['bg']};
        color: {p['text']};
        font-family: "Helvetica Neue", Arial;
        font-size: 14px;
    }}

    QMainWindow {{
        background-color: {p['bg']};
    }}

    QLabel#titleLabel {{
        font-size: 20px;
        font-weight: 600;
    }}

    /* ── keypad ──────────────────────────────────── */
    QPushButton#keypadButton {{
        background-color: transparent;
        color: {p['text']};
        border: none;
        border-radius: 40px;
        font-size: 32px;
    }}

    QPushButton#keypadButton:hover {{
        background-color: {p['surface']};
    }}

    QPushButton#keypadButton:pressed {{
        background-color: {p['border']};
    }}

    QPushButton#backspaceButton {{
        background-color: transparent;
        color: {p['text']};
        border: none;
        font-size: 24px;
        padding: 8px;
    }}

    QPushButton#backspaceButton:disabled {{
        color: {p['text_muted']};
    }}

    /* ── start ───────────────────────────────────── */
    QPushButton#primaryButton {{
        background-color: {p['accent']};
        color: {p['bg']};
        border: none;
        border-radius: 28px;
        font-size: 22px;
        font-weight: 700;
        min-width: 56px;
        min-height: 56px;
    }}

    QPushButton#primaryButton:hover {{
        background-color: {p['accent2']};
    }}

    /* ── divider ─────────────────────────────────── */
    QFrame#divider {{
        background-color: {p['border']};
        max-height: 1px;
    }}
    """
