from __future__ import annotations

from typing import List, Sequence, Union

import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import clamp

from ..colors.color_base import ColorRGB, to_colors
from ..conversions import np_unit_rgb_to_hsv, np_hsv_to_unit_rgb, interpolate_hue
from ..errors import ConfigError
from ..types.color_types import ColorLike
from ..types.modes import Interpolation, HsvSpin, coerce_mode


class Gradient:
    """
    Piecewise-linear gradient over evenly spaced color stops.

    Stop ``k`` of ``n`` sits at position ``k / (n - 1)`` on [0, 1]. Calling the
    gradient with a position returns the interpolated :class:`ColorRGB`;
    positions outside [0, 1] are clamped. A single stop yields a constant
    gradient.

    Args:
        stops: Ordered color stops (hex strings, color names, RGB tuples or ColorRGB)
        interpolation: 'rgb' to blend channels linearly, 'hsv' to blend hue,
            saturation and value
        hsv_spin: Hue arc for HSV interpolation - 'short' or 'long'

    Raises:
        InvalidPaletteError: if ``stops`` is empty or holds an unknown color
        ConfigError: for unknown interpolation or spin values
    """

    def __init__(
        self,
        stops: Sequence[ColorLike],
        interpolation: Union[Interpolation, str] = Interpolation.RGB,
        hsv_spin: Union[HsvSpin, str] = HsvSpin.SHORT,
    ) -> None:
        mode = coerce_mode(Interpolation, interpolation)
        if mode is None:
            raise ConfigError(f"Unknown interpolation: {interpolation!r}")
        spin = coerce_mode(HsvSpin, hsv_spin)
        if spin is None:
            raise ConfigError(f"Unknown hsv spin: {hsv_spin!r}")

        self.colors = to_colors(stops)
        self.interpolation = mode
        self.hsv_spin = spin

        self._unit = np.array([c.value for c in self.colors], dtype=float) / 255.0
        if mode == Interpolation.HSV:
            self._anchors = np_unit_rgb_to_hsv(self._unit)
        else:
            self._anchors = self._unit

    def __len__(self) -> int:
        return len(self.colors)

    def __call__(self, t: float) -> ColorRGB:
        u = clamp(float(t), 0.0, 1.0)
        return ColorRGB(self._evaluate(np.array([u], dtype=float))[0] * 255.0)

    def sample(self, steps: int) -> List[ColorRGB]:
        """Return ``steps`` evenly spaced colors from the first stop to the last."""
        if steps < 1:
            return []
        if steps == 1:
            return [self.colors[0]]
        t = np.linspace(0.0, 1.0, steps, dtype=float)
        return [ColorRGB(row) for row in self._evaluate(t) * 255.0]

    def _evaluate(self, t: NDArray) -> NDArray:
        """Interpolate unit colors for an array of positions in [0, 1]."""
        t = np.clip(t, 0.0, 1.0)
        n = len(self._anchors)
        if n == 1:
            return np.broadcast_to(self._unit[0], t.shape + (3,))

        pos = t * (n - 1)
        idx = np.minimum(np.floor(pos).astype(int), n - 2)
        u = (pos - idx)[:, None]
        start = self._anchors[idx]
        end = self._anchors[idx + 1]

        if self.interpolation == Interpolation.HSV:
            hues = interpolate_hue(start[:, :1], end[:, :1], u, spin=self.hsv_spin.value)
            rest = start[:, 1:] * (1 - u) + end[:, 1:] * u
            return np_hsv_to_unit_rgb(np.concatenate([hues, rest], axis=1))
        return start * (1 - u) + end * u

    def __repr__(self) -> str:
        return f"Gradient({[c.hex for c in self.colors]!r}, interpolation={self.interpolation.value!r})"


def build_gradient(
    stops: Sequence[ColorLike],
    interpolation: Union[Interpolation, str] = Interpolation.RGB,
    hsv_spin: Union[HsvSpin, str] = HsvSpin.SHORT,
) -> Gradient:
    """Build a callable mapping a position in [0, 1] to a color."""
    return Gradient(stops, interpolation=interpolation, hsv_spin=hsv_spin)
