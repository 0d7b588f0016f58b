from .modes import Direction, AlignMode, ColorDepth, Interpolation, HsvSpin
from .color_types import ColorTuple, ColorLike, ColorStops

__all__ = [
    "Direction",
    "AlignMode",
    "ColorDepth",
    "Interpolation",
    "HsvSpin",
    "ColorTuple",
    "ColorLike",
    "ColorStops",
]
