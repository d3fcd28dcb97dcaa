"""Styling strings for diagnostic output."""

from __future__ import annotations

import os
import threading
from dataclasses import dataclass, fields, replace
from typing import TextIO

from argsplit.core.ansi import sgr

RESET = sgr("reset")
BOLD = sgr("bold")
DIM = sgr("dim")
FORE_RED = sgr("red")
FORE_BRBLUE = sgr("bright blue")

_ACTIVE = {
    "reset": RESET,
    "bold": BOLD,
    "dim": DIM,
    "fore_red": FORE_RED,
    "fore_brblue": FORE_BRBLUE,
}


@dataclass
class Style:
    """The five styling strings used by diagnostics.

    All five are either ANSI escape sequences or empty strings together.

    Attributes:
        reset: Reset all attributes
        bold: Bold text
        dim: Dim text
        fore_red: Red foreground (errors)
        fore_brblue: Bright blue foreground (information)
        supported: When False, toggling does nothing
    """

    reset: str = ""
    bold: str = ""
    dim: str = ""
    fore_red: str = ""
    fore_brblue: str = ""
    supported: bool = True

    @classmethod
    def enabled(cls) -> Style:
        return cls(**_ACTIVE)

    @classmethod
    def disabled(cls) -> Style:
        return cls()

    @property
    def active(self) -> bool:
        return bool(self.reset)

    def toggle(self) -> None:
        """Flip all five strings between escape sequences and empty strings.

        The current state is read from `reset`.
        """
        if not self.supported:
            return

        make_active = not self.reset
        for name, value in _ACTIVE.items():
            setattr(self, name, value if make_active else "")

    def toggled(self) -> Style:
        """Return a toggled copy, leaving this style untouched."""
        copy = replace(self)
        copy.toggle()
        return copy

    def as_dict(self) -> dict[str, str]:
        return {f.name: getattr(self, f.name) for f in fields(self) if f.name in _ACTIVE}


# Process-wide style, inactive until toggled
STYLE = Style()

_toggle_lock = threading.Lock()


def toggle_colors() -> None:
    """Toggle the process-wide style."""
    with _toggle_lock:
        STYLE.toggle()


def reset_colors() -> None:
    """Return the process-wide style to its inactive state."""
    with _toggle_lock:
        if STYLE.active:
            STYLE.toggle()


def should_colorize(mode: str, stream: TextIO) -> bool:
    """Decide whether output on stream should be styled.

    Args:
        mode: "always", "never" or "auto"
        stream: The stream diagnostics are written to

    Returns:
        True when styles should be active
    """
    mode = mode.lower()
    if mode == "always":
        return True
    if mode == "never":
        return False
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())
