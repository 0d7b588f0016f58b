"""
Rendering entry points.

``render`` is the synchronous path: glyphs → gradient → alignment, returning
the final string. ``render_filled`` runs the same computation for block
fonts and then hands the result to ``write_and_settle``, the only step that
touches the terminal.
"""
from __future__ import annotations

import asyncio
import sys
from typing import IO, Optional, Sequence, Union

from .align import align as align_block, viewport_width
from .colors.ansi import TERMINAL_RESTORE
from .compositor import compose
from .config import (
    DEFAULT_ALIGN,
    DEFAULT_BLOCK_FONT,
    DEFAULT_DEPTH,
    DEFAULT_DIRECTION,
    DEFAULT_FONT,
    DEFAULT_HSV_SPIN,
    DEFAULT_INTERPOLATION,
    DEFAULT_LETTER_SPACING,
    DEFAULT_LINE_HEIGHT,
    DEFAULT_PALETTE,
    SETTLE_DELAY,
    validate_letter_spacing,
    validate_line_height,
    value_or_default,
)
from .glyphs import render_glyphs, skip_lines as skip_lines_filter
from .palettes import PaletteSource, resolve_colors
from .types.color_types import ColorLike
from .types.modes import AlignMode, ColorDepth, Direction, HsvSpin, Interpolation


def paint_glyphs(
    glyphs: str,
    palette: PaletteSource = DEFAULT_PALETTE,
    direction: Union[Direction, str] = DEFAULT_DIRECTION,
    align: Union[AlignMode, str] = DEFAULT_ALIGN,
    *,
    width: Optional[int] = None,
    depth: Union[ColorDepth, str] = DEFAULT_DEPTH,
    interpolation: Union[Interpolation, str] = DEFAULT_INTERPOLATION,
    hsv_spin: Union[HsvSpin, str] = DEFAULT_HSV_SPIN,
    strict: bool = False,
) -> str:
    """Color and align an already rendered glyph block. Pure."""
    return _paint(
        glyphs,
        resolve_colors(palette),
        direction,
        align,
        width=width,
        depth=depth,
        interpolation=interpolation,
        hsv_spin=hsv_spin,
        strict=strict,
    )


def _paint(
    glyphs: str,
    stops: Sequence[ColorLike],
    direction: Union[Direction, str],
    align: Union[AlignMode, str],
    *,
    width: Optional[int] = None,
    depth: Union[ColorDepth, str] = DEFAULT_DEPTH,
    interpolation: Union[Interpolation, str] = DEFAULT_INTERPOLATION,
    hsv_spin: Union[HsvSpin, str] = DEFAULT_HSV_SPIN,
    strict: bool = False,
) -> str:
    colored = compose(
        glyphs,
        stops,
        direction,
        depth=depth,
        interpolation=interpolation,
        hsv_spin=hsv_spin,
        strict=strict,
    )
    return align_block(colored, align, width, strict=strict)


def render(
    text: str,
    palette: PaletteSource = DEFAULT_PALETTE,
    font: str = DEFAULT_FONT,
    direction: Union[Direction, str] = DEFAULT_DIRECTION,
    align: Union[AlignMode, str] = DEFAULT_ALIGN,
    *,
    width: Optional[int] = None,
    depth: Union[ColorDepth, str] = DEFAULT_DEPTH,
    interpolation: Union[Interpolation, str] = DEFAULT_INTERPOLATION,
    hsv_spin: Union[HsvSpin, str] = DEFAULT_HSV_SPIN,
    strict: bool = False,
) -> str:
    """
    Render ``text`` as a gradient-colored, aligned figlet logo.

    Args:
        text: Text to render
        palette: Palette name or literal list of color stops
        font: pyfiglet font name
        direction: 'vertical' (default), 'horizontal' or 'diagonal'
        align: 'left' (default), 'center' or 'right'
        width: Viewport width for wrapping and alignment; 80 when None
        depth: 'truecolor' or 'ansi256' escape sequences
        interpolation: 'rgb' or 'hsv' blending between stops
        hsv_spin: Hue arc for HSV blending, 'short' or 'long'
        strict: Raise InvalidModeError for unknown direction/alignment

    Returns:
        The final ANSI-colored string

    Raises:
        InvalidPaletteError: for unknown palette names or empty/invalid stops
        FontError: if the font is unknown
    """
    stops = resolve_colors(palette)
    glyphs = render_glyphs(text, font, width=width)
    return _paint(
        glyphs,
        stops,
        direction,
        align,
        width=width,
        depth=depth,
        interpolation=interpolation,
        hsv_spin=hsv_spin,
        strict=strict,
    )


async def write_and_settle(
    output: str,
    stream: Optional[IO[str]] = None,
    delay: float = SETTLE_DELAY,
) -> None:
    """
    Write ``output`` to ``stream``, wait ``delay`` seconds, then restore the
    terminal (reset colors, show the cursor, clear to end of line).

    The restore is written even when the wait is cancelled or interrupted.
    """
    stream = value_or_default(stream, sys.stdout)
    try:
        stream.write(output + "\n")
        stream.flush()
        await asyncio.sleep(delay)
    finally:
        stream.write(TERMINAL_RESTORE)
        stream.flush()


async def render_filled(
    text: str,
    palette: PaletteSource = DEFAULT_PALETTE,
    font: Optional[str] = None,
    letter_spacing: Optional[int] = None,
    line_height: Optional[int] = None,
    skip_lines: bool = False,
    align: Union[AlignMode, str] = DEFAULT_ALIGN,
    *,
    width: Optional[int] = None,
    depth: Union[ColorDepth, str] = DEFAULT_DEPTH,
    stream: Optional[IO[str]] = None,
    settle_delay: float = SETTLE_DELAY,
) -> str:
    """
    Render ``text`` in a filled block font with a vertical gradient, write it
    to ``stream`` and wait for the terminal to settle.

    With ``skip_lines`` the solid fill is swapped for a seven-eighths block so
    each glyph row shows a thin gap; letter spacing then defaults to 1 and
    line height is fixed at 1.

    Returns:
        The string that was written

    Raises:
        ConfigError: if ``letter_spacing`` < 0 or ``line_height`` < 1
        InvalidPaletteError: for unknown palette names or empty/invalid stops
        FontError: if the font is unknown
    """
    validate_letter_spacing(letter_spacing)
    validate_line_height(line_height)
    stops = resolve_colors(palette)
    font = value_or_default(font, DEFAULT_BLOCK_FONT)
    width = value_or_default(width, viewport_width(stream))

    if skip_lines:
        glyphs = render_glyphs(
            text,
            font,
            width=width,
            letter_spacing=value_or_default(letter_spacing, DEFAULT_LETTER_SPACING),
            line_height=DEFAULT_LINE_HEIGHT,
        )
        glyphs = skip_lines_filter(glyphs)
    else:
        glyphs = render_glyphs(
            text, font, width=width, letter_spacing=letter_spacing, line_height=line_height
        )

    output = _paint(glyphs, stops, Direction.VERTICAL, align, width=width, depth=depth)
    await write_and_settle(output, stream, settle_delay)
    return output
