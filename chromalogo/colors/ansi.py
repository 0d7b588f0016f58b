"""ANSI SGR escape sequences for foreground colors."""
import re
from typing import Union

from ..errors import ConfigError
from ..types.modes import ColorDepth, coerce_mode
from .color_base import ColorRGB

ESC = "\x1b["
FG_RESET = f"{ESC}39m"
SGR_RESET = f"{ESC}0m"
SHOW_CURSOR = f"{ESC}?25h"
CLEAR_EOL = f"{ESC}K"
# Sent after output has settled to leave the terminal in a clean state
TERMINAL_RESTORE = SGR_RESET + SHOW_CURSOR + CLEAR_EOL

ANSI_PATTERN = re.compile(r"\x1b\[[0-9;]*m")


def rgb_to_ansi256(r: int, g: int, b: int) -> int:
    """Convert RGB values to ANSI 256-color code."""
    # Use the 216-color cube (16-231)
    r = round(r * 5 / 255)
    g = round(g * 5 / 255)
    b = round(b * 5 / 255)
    return 16 + 36 * r + 6 * g + b


def resolve_depth(depth: Union[ColorDepth, str]) -> ColorDepth:
    resolved = coerce_mode(ColorDepth, depth)
    if resolved is None:
        raise ConfigError(f"Unknown color depth: {depth!r}")
    return resolved


def fg_code(color: ColorRGB, depth: Union[ColorDepth, str] = ColorDepth.TRUECOLOR) -> str:
    r, g, b = color.value
    if resolve_depth(depth) == ColorDepth.ANSI256:
        return f"{ESC}38;5;{rgb_to_ansi256(r, g, b)}m"
    return f"{ESC}38;2;{r};{g};{b}m"


def paint(text: str, color: ColorRGB, depth: Union[ColorDepth, str] = ColorDepth.TRUECOLOR) -> str:
    """Wrap ``text`` in a foreground color, resetting only the foreground afterwards."""
    return f"{fg_code(color, depth)}{text}{FG_RESET}"


def strip_ansi(text: str) -> str:
    """Remove SGR color sequences from ``text``."""
    return ANSI_PATTERN.sub("", text)
