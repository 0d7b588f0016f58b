"""
Color values
============

Immutable RGB colors parsed from hex strings, CSS names or tuples, plus the
ANSI escape helpers used to paint them in a terminal.

>>> from chromalogo.colors import ColorRGB
>>> ColorRGB.from_string("orange").value
(255, 165, 0)
>>> ColorRGB((300, -4, 12)).value   # channels are clamped
(255, 0, 12)
"""

from .color_base import ColorRGB, to_colors
from .parse import parse_color_string
from .ansi import paint, fg_code, resolve_depth, strip_ansi, rgb_to_ansi256

__all__ = [
    "ColorRGB",
    "to_colors",
    "parse_color_string",
    "paint",
    "fg_code",
    "resolve_depth",
    "strip_ansi",
    "rgb_to_ansi256",
]
