#!/usr/bin/env python3
"""Countdown entry point.

Run with:
    python main.py
    python -m countdown
"""

from countdown.__main__ import main


if __name__ == "__main__":
    main()
