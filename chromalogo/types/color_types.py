from __future__ import annotations
from typing import Sequence, Tuple, Union, TYPE_CHECKING

if TYPE_CHECKING:
    from ..colors.color_base import ColorRGB

ColorTuple = Tuple[int, int, int]
ColorLike = Union[str, Sequence[int], "ColorRGB"]
ColorStops = Sequence[ColorLike]
