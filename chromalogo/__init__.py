"""
chromalogo - Gradient-colored terminal logos
============================================

Render text as figlet ASCII art painted with multi-stop color gradients
along vertical, horizontal or diagonal axes, then align it in the terminal.

Key Features
------------
- Piecewise-linear gradients over any number of stops (RGB or HSV blending)
- Vertical, horizontal and diagonal gradient sweeps
- ANSI-aware left/center/right alignment with an explicit viewport width
- Truecolor and 256-color escape output
- Filled block-font rendering with letter spacing, line height and a
  "skip lines" fill filter

Quick Start
-----------
>>> from chromalogo import render
>>> print(render("hello", palette=["#ff7e5f", "#feb47b"], direction="horizontal"))

>>> import asyncio
>>> from chromalogo import render_filled
>>> asyncio.run(render_filled("hi", palette="sunset", skip_lines=True))
"""

from .errors import LogoError, InvalidPaletteError, FontError, InvalidModeError, ConfigError
from .types.modes import Direction, AlignMode, ColorDepth, Interpolation, HsvSpin
from .colors import ColorRGB, strip_ansi
from .gradients import Gradient, build_gradient, colorize_line, colorize_block
from .compositor import compose, rotate_stops
from .align import align, visible_length, viewport_width
from .glyphs import render_glyphs, skip_lines
from .palettes import (
    PALETTES,
    resolve_palette,
    resolve_colors,
    get_palette_names,
    get_default_palette,
    get_palette_preview,
)
from .renderer import render, render_filled, paint_glyphs, write_and_settle
from .config import (
    DEFAULT_PALETTE,
    DEFAULT_FONT,
    DEFAULT_BLOCK_FONT,
    DEFAULT_DIRECTION,
    DEFAULT_WIDTH,
    SETTLE_DELAY,
)

__version__ = "1.0.0"

__all__ = [
    # Errors
    "LogoError", "InvalidPaletteError", "FontError", "InvalidModeError", "ConfigError",

    # Modes
    "Direction", "AlignMode", "ColorDepth", "Interpolation", "HsvSpin",

    # Colors and gradients
    "ColorRGB", "strip_ansi",
    "Gradient", "build_gradient", "colorize_line", "colorize_block",

    # Composition and layout
    "compose", "rotate_stops",
    "align", "visible_length", "viewport_width",
    "render_glyphs", "skip_lines",

    # Palettes
    "PALETTES", "resolve_palette", "resolve_colors",
    "get_palette_names", "get_default_palette", "get_palette_preview",

    # Rendering
    "render", "render_filled", "paint_glyphs", "write_and_settle",

    # Defaults
    "DEFAULT_PALETTE", "DEFAULT_FONT", "DEFAULT_BLOCK_FONT",
    "DEFAULT_DIRECTION", "DEFAULT_WIDTH", "SETTLE_DELAY",

    # Version
    "__version__",
]
