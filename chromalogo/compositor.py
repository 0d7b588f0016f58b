"""
Directional compositor: decides how each row or character of a glyph block
maps onto a gradient position, per render direction.
"""
from __future__ import annotations

import math
import warnings
from typing import List, Sequence, TypeVar, Union

from .errors import InvalidModeError
from .gradients import build_gradient, colorize_block, colorize_line, is_blank
from .colors.ansi import resolve_depth
from .colors.color_base import to_colors
from .types.color_types import ColorLike
from .types.modes import ColorDepth, Direction, HsvSpin, Interpolation, coerce_mode

T = TypeVar('T')


def rotate_stops(stops: Sequence[T], index: int, line_count: int) -> List[T]:
    """
    Cyclically rotate ``stops`` for row ``index`` of ``line_count`` rows.

    The shift is proportional to ``index / line_count`` and is applied per
    output slot before wrapping modulo the palette length.
    """
    n = len(stops)
    shift = (index / line_count) * n
    return [stops[math.floor(k + shift) % n] for k in range(n)]


def resolve_direction(direction: Union[Direction, str], strict: bool = False) -> Direction:
    resolved = coerce_mode(Direction, direction)
    if resolved is not None:
        return resolved
    if strict:
        raise InvalidModeError(direction, kind="direction")
    warnings.warn(f"Unknown direction: {direction!r}, defaulting to vertical")
    return Direction.VERTICAL


def compose(
    glyphs: str,
    stops: Sequence[ColorLike],
    direction: Union[Direction, str] = Direction.VERTICAL,
    *,
    depth: Union[ColorDepth, str] = ColorDepth.TRUECOLOR,
    interpolation: Union[Interpolation, str] = Interpolation.RGB,
    hsv_spin: Union[HsvSpin, str] = HsvSpin.SHORT,
    strict: bool = False,
) -> str:
    """
    Paint a glyph block with a gradient along ``direction``.

    - vertical: one continuous sweep from the top row to the bottom row
    - horizontal: a fresh left-to-right sweep on every non-blank row
    - diagonal: a horizontal sweep per row built from stops rotated in
      proportion to the row index

    Unknown directions fall back to vertical with a warning unless ``strict``
    is set, in which case :class:`InvalidModeError` is raised. An unknown
    ``depth`` raises :class:`ConfigError`.
    """
    mode = resolve_direction(direction, strict=strict)
    depth = resolve_depth(depth)
    colors = to_colors(stops)

    if mode == Direction.VERTICAL:
        gradient = build_gradient(colors, interpolation, hsv_spin)
        return colorize_block(glyphs, gradient, depth)

    lines = glyphs.split("\n")

    if mode == Direction.HORIZONTAL:
        gradient = build_gradient(colors, interpolation, hsv_spin)
        return "\n".join(colorize_line(line, gradient, depth) for line in lines)

    line_count = len(lines)
    painted = []
    for index, line in enumerate(lines):
        if is_blank(line):
            painted.append(line)
            continue
        rotated = rotate_stops(colors, index, line_count)
        painted.append(colorize_line(line, build_gradient(rotated, interpolation, hsv_spin), depth))
    return "\n".join(painted)
