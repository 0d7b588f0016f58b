"""Apply a gradient to single lines or whole glyph blocks."""
from typing import Callable, Union

from ..colors.ansi import paint
from ..colors.color_base import ColorRGB
from ..types.modes import ColorDepth

GradientFn = Callable[[float], ColorRGB]


def is_blank(line: str) -> bool:
    return line.strip() == ""


def colorize_line(line: str, gradient: GradientFn, depth: Union[ColorDepth, str] = ColorDepth.TRUECOLOR) -> str:
    """
    Sweep the gradient once across the visible characters of ``line``.

    The first non-whitespace character takes position 0 and the last takes
    position 1. Whitespace is emitted uncolored; whitespace-only lines are
    returned unchanged.
    """
    if is_blank(line):
        return line

    visible = sum(1 for ch in line if not ch.isspace())
    span = max(visible - 1, 1)
    parts = []
    k = 0
    for ch in line:
        if ch.isspace():
            parts.append(ch)
            continue
        parts.append(paint(ch, gradient(k / span), depth))
        k += 1
    return "".join(parts)


def colorize_block(block: str, gradient: GradientFn, depth: Union[ColorDepth, str] = ColorDepth.TRUECOLOR) -> str:
    """
    Sweep the gradient once from the top row of ``block`` to the bottom row.

    Row ``i`` of ``n`` is painted with the color at ``i / (n - 1)``. Blank rows
    are left untouched but still count as rows, so the sweep stays continuous.
    """
    lines = block.split("\n")
    span = max(len(lines) - 1, 1)
    return "\n".join(
        line if is_blank(line) else paint(line, gradient(i / span), depth)
        for i, line in enumerate(lines)
    )
