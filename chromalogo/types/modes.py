from enum import Enum
from typing import Optional, Type, TypeVar

E = TypeVar("E", bound=Enum)


class Direction(str, Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"
    DIAGONAL = "diagonal"


class AlignMode(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class ColorDepth(str, Enum):
    TRUECOLOR = "truecolor"
    ANSI256 = "ansi256"


class Interpolation(str, Enum):
    RGB = "rgb"
    HSV = "hsv"


class HsvSpin(str, Enum):
    SHORT = "short"
    LONG = "long"


def coerce_mode(enum_cls: Type[E], value) -> Optional[E]:
    """Return the enum member matching ``value`` (case-insensitive), or None."""
    if isinstance(value, enum_cls):
        return value
    if not isinstance(value, str):
        return None
    try:
        return enum_cls(value.lower())
    except ValueError:
        return None
