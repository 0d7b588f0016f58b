from typing import Tuple

from PIL import ImageColor

from ..errors import InvalidPaletteError


def parse_color_string(text: str) -> Tuple[int, int, int]:
    """
    Parse a color string into an RGB tuple.

    Accepts anything Pillow's ``ImageColor`` understands: ``#rgb``,
    ``#rrggbb``, ``rgb(...)``/``hsl(...)`` functions and CSS/X11 names.
    Alpha components are dropped.

    Raises:
        InvalidPaletteError: if the string is not a recognised color
    """
    try:
        rgb = ImageColor.getrgb(text.strip())
    except ValueError as e:
        raise InvalidPaletteError(f"Unknown color: {text!r}", palette=text) from e
    return rgb[0], rgb[1], rgb[2]
