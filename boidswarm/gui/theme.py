"""
Theme - Centralized color definitions
All painting code references this for consistent styling
"""
from PyQt5.QtGui import QColor

from boidswarm.config import BACKGROUND_COLOR, DEFAULT_BOID_COLOR, PERSONAL_BOID_COLOR

COLORS = {
    'background': BACKGROUND_COLOR,
    'boid': DEFAULT_BOID_COLOR,
    'boid_personal': PERSONAL_BOID_COLOR,
    'status_text': '#7f9c9c',
    'status_background': '#0c0c0c',
}

_qcolor_cache = {}  # hex string -> QColor


def qcolor(value: str) -> QColor:
    """QColor for a hex string, cached. Magenta = unparseable."""
    color = _qcolor_cache.get(value)
    if color is None:
        color = QColor(value)
        if not color.isValid():
            color = QColor('#ff00ff')
        _qcolor_cache[value] = color
    return color


def status_bar_style() -> str:
    return (
        f"QStatusBar {{ background: {COLORS['status_background']}; "
        f"color: {COLORS['status_text']}; }}"
    )
