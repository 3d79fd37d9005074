"""Color & style helpers.

Decisions:
- Styling is off when stdout is not a TTY unless FORCE_COLOR=1.
- NO_COLOR disables styling completely.
- Styles wrap text only; the visible characters of a line never change.
"""
from __future__ import annotations
import os, sys

_FORCE = os.environ.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}
_NO_COLOR = os.environ.get("NO_COLOR") is not None
_ENABLE = (_FORCE or sys.stdout.isatty()) and not _NO_COLOR


def _code(part: str) -> str:
    """Generate ANSI escape code for a given style part."""
    return f"\033[{part}m" if _ENABLE else ''


RESET = _code('0')
BOLD = _code('1')
DIM = _code('2')

GREEN = _code('32')
CYAN = _code('36')
BLUE = _code('34')

HEADER_COLOR = BLUE + BOLD
ID_COLOR = CYAN + BOLD
DONE_COLOR = GREEN
PENDING_COLOR = ''
DONE_TEXT_COLOR = DIM


def color(text: str, *styles: str) -> str:
    """Apply ANSI styles to a given text."""
    if not _ENABLE or not any(styles):
        return text
    return ''.join(styles) + text + RESET


__all__ = [
    'color', 'RESET', 'BOLD', 'DIM', 'HEADER_COLOR', 'ID_COLOR', 'DONE_COLOR',
    'PENDING_COLOR', 'DONE_TEXT_COLOR', '_ENABLE', '_FORCE',
]
