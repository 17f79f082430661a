"""
ANSI color helpers for human-facing messages.
"""

COLORS = {
    "reset": "\033[0m",
    "green": "\033[32m",
    "cyan": "\033[36m",
    "yellow": "\033[33m",
}


def colorize(text: str, color: str) -> str:
    """Apply ANSI color to text."""
    return f"{COLORS.get(color, '')}{text}{COLORS['reset']}"
