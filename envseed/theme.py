"""
envseed/theme.py
Semantic color names for CLI output.

Supports:
  - NO_COLOR=1 → disable all colors
  - ENVSEED_THEME=minimal → fewer colors

Usage:
    from envseed.theme import theme
    console.print(f"[{theme.success}]ok[/{theme.success}]")
"""

from __future__ import annotations

import os

_ROLES = ("success", "error", "muted", "heading", "key")


class Theme:
    """Semantic color definitions for consistent CLI appearance."""

    def __init__(self):
        self._no_color = bool(os.environ.get("NO_COLOR"))
        self._theme_name = os.environ.get("ENVSEED_THEME", "default")

        if self._no_color:
            self._apply_no_color()
        elif self._theme_name == "minimal":
            self._apply_minimal()
        else:
            self._apply_default()

    def _apply_default(self):
        self.success = "green"
        self.error = "red"
        self.muted = "dim"
        self.heading = "bold"
        self.key = "bold cyan"

    def _apply_minimal(self):
        """Minimal theme: bold for emphasis, color only for errors."""
        self.success = "none"
        self.error = "red"
        self.muted = "dim"
        self.heading = "bold"
        self.key = "bold"

    def _apply_no_color(self):
        # "none" is rich's null style, so markup tags stay balanced.
        for attr in _ROLES:
            setattr(self, attr, "none")


# Singleton instance
theme = Theme()
