from __future__ import annotations
from typing import Any, ClassVar, Sequence, Tuple, Union, cast

from boundednumbers import clamp
from numpy import ndarray

from ..errors import InvalidPaletteError
from ..types.color_types import ColorTuple
from .parse import parse_color_string


class ColorRGB:
    """Immutable 8-bit RGB color."""
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 3
    maxima: ClassVar[ColorTuple] = (255, 255, 255)
    null_value: ClassVar[ColorTuple] = (0, 0, 0)

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: Union[ColorRGB, Sequence[Any], ndarray]) -> None:
        # ---- Handle ColorRGB input ----
        if isinstance(value, ColorRGB):
            value = value.value

        if isinstance(value, ndarray):
            value = value.tolist()

        if len(value) != self.num_channels:
            raise ValueError(f"rgb expects {self.num_channels}-channel tuple, got {value!r}")

        # round then clamp each channel into [0, 255]
        value = tuple(
            int(clamp(int(round(float(v))), 0, m))
            for v, m in zip(value, self.maxima)
        )

        # safe assignment; __setattr__ still allows it during init
        self._value = cast(ColorTuple, value)

        # freeze instance — no more writes allowed
        super().__setattr__('_is_frozen', True)

    @classmethod
    def from_string(cls, text: str) -> ColorRGB:
        """Parse a hex string (``#rgb``/``#rrggbb``) or a CSS color name."""
        return cls(parse_color_string(text))

    @classmethod
    def coerce(cls, color: Any) -> ColorRGB:
        """Build a color from any supported stop value."""
        if isinstance(color, ColorRGB):
            return color
        if isinstance(color, str):
            return cls.from_string(color)
        if isinstance(color, (tuple, list, ndarray)):
            try:
                return cls(color)
            except (TypeError, ValueError) as e:
                raise InvalidPaletteError(f"Invalid color value: {color!r}", palette=color) from e
        raise InvalidPaletteError(f"Unsupported color value: {color!r}", palette=color)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ColorTuple:
        return self._value

    @property
    def hex(self) -> str:
        r, g, b = self._value
        return f"#{r:02x}{g:02x}{b:02x}"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ColorRGB):
            return self._value == other._value
        if isinstance(other, tuple):
            return self._value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __iter__(self):
        return iter(self._value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.hex!r})"


def to_colors(stops: Sequence[Any]) -> Tuple[ColorRGB, ...]:
    """Coerce a sequence of stop values into colors, rejecting empty input."""
    if stops is None or len(stops) == 0:
        raise InvalidPaletteError("Palette must contain at least one color", palette=stops)
    return tuple(ColorRGB.coerce(stop) for stop in stops)
