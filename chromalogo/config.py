"""Rendering defaults and option validation."""
from typing import Optional, TypeVar

from .errors import ConfigError
from .types.modes import Direction, AlignMode, ColorDepth, Interpolation, HsvSpin

T = TypeVar('T')

DEFAULT_PALETTE = "grad-blue"
DEFAULT_FONT = "standard"
# Block font with solid fill and box-drawing borders, used by the filled renderer
DEFAULT_BLOCK_FONT = "ansi_shadow"
DEFAULT_DIRECTION = Direction.VERTICAL
DEFAULT_ALIGN = AlignMode.LEFT
DEFAULT_DEPTH = ColorDepth.TRUECOLOR
DEFAULT_INTERPOLATION = Interpolation.RGB
DEFAULT_HSV_SPIN = HsvSpin.SHORT

# Viewport width used when the terminal size is unknown
DEFAULT_WIDTH = 80
# Seconds to wait after writing before restoring terminal state
SETTLE_DELAY = 0.1

DEFAULT_LETTER_SPACING = 1
DEFAULT_LINE_HEIGHT = 1


def value_or_default(value: Optional[T], default: T) -> T:
    """Return the value if it is not None, otherwise return the default."""
    return value if value is not None else default


def validate_letter_spacing(letter_spacing: Optional[int]) -> Optional[int]:
    if letter_spacing is not None and letter_spacing < 0:
        raise ConfigError("Letter spacing must be 0 or greater")
    return letter_spacing


def validate_line_height(line_height: Optional[int]) -> Optional[int]:
    if line_height is not None and line_height < 1:
        raise ConfigError("Line height must be 1 or greater")
    return line_height
