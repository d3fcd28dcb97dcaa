"""ANSI SGR escape construction."""

from __future__ import annotations

# Standard ANSI color names
COLORS = {
    "black": 0,
    "red": 1,
    "green": 2,
    "yellow": 3,
    "blue": 4,
    "magenta": 5,
    "cyan": 6,
    "white": 7,
}

# Text attributes
ATTRIBUTES = {
    "reset": 0,
    "bold": 1,
    "dim": 2,
    "italic": 3,
    "underline": 4,
    "reverse": 7,
}


def sgr_code(name: str) -> int:
    """Convert an attribute or foreground color name to its SGR code.

    Examples:
        >>> sgr_code("red")
        31
        >>> sgr_code("bright blue")
        94
    """
    name = name.lower().strip()

    if name in ATTRIBUTES:
        return ATTRIBUTES[name]
    if name in COLORS:
        return 30 + COLORS[name]
    if name.startswith("bright "):
        base_color = name[7:].strip()
        if base_color in COLORS:
            return 90 + COLORS[base_color]

    raise ValueError(f"Unknown style name: {name!r}")


def sgr(*names: str) -> str:
    """Build a single escape sequence applying every named style."""
    if not names:
        return ""
    return f"\033[{';'.join(str(sgr_code(n)) for n in names)}m"
