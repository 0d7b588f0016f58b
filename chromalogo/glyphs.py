"""
Glyph rendering adapter around pyfiglet, plus glyph post-processing filters.

The rasterizer itself is external; this module only turns its failures into
:class:`FontError` and applies spacing options to its output.
"""
from __future__ import annotations

from typing import List, Optional

import pyfiglet

from .colors.ansi import strip_ansi
from .config import DEFAULT_FONT, DEFAULT_WIDTH, validate_letter_spacing, validate_line_height, value_or_default
from .errors import FontError

SOLID_BLOCK = "\u2588"  # full block
SEVEN_EIGHTHS_BLOCK = "\u2587"  # lower seven eighths block


def _figlet(font: str, width: int) -> pyfiglet.Figlet:
    try:
        return pyfiglet.Figlet(font=font, width=width)
    except (pyfiglet.FontNotFound, pyfiglet.FontError) as e:
        raise FontError(font) from e
    except Exception as e:
        if "font" in str(e).lower():
            raise FontError(font) from e
        raise


def _trim(lines: List[str]) -> List[str]:
    """Drop the blank rows figlet pads below the glyphs."""
    while lines and lines[-1].strip() == "":
        lines.pop()
    return lines


def _render_spaced(figlet: pyfiglet.Figlet, text: str, letter_spacing: int) -> List[str]:
    """Render ``text`` one character at a time, joined by blank columns."""
    blocks = []
    for ch in text:
        rows = figlet.renderText(ch).split("\n")
        blocks.append(rows)
    if not blocks:
        return []
    height = max(len(rows) for rows in blocks)
    padded = []
    for rows in blocks:
        rows = rows + [""] * (height - len(rows))
        w = max(len(r) for r in rows)
        padded.append([r.ljust(w) for r in rows])
    gap = " " * letter_spacing
    return [gap.join(rows[i] for rows in padded) for i in range(height)]


def render_glyphs(
    text: str,
    font: str = DEFAULT_FONT,
    *,
    width: Optional[int] = None,
    letter_spacing: Optional[int] = None,
    line_height: Optional[int] = None,
) -> str:
    """
    Render ``text`` as a figlet glyph block.

    Args:
        text: Text to render; newlines start new rows of glyphs
        font: pyfiglet font name
        width: Column limit passed to figlet for wrapping (default 80)
        letter_spacing: Blank columns between characters; None keeps figlet's
            own kerning
        line_height: Blank lines between rows of glyphs when ``text`` spans
            several lines; None lets figlet stack them itself

    Raises:
        FontError: if the font is unknown to the rasterizer
        ConfigError: for negative spacing or a line height below 1
    """
    validate_letter_spacing(letter_spacing)
    validate_line_height(line_height)
    figlet = _figlet(font, value_or_default(width, DEFAULT_WIDTH))

    rows = text.split("\n") if line_height is not None else [text]
    out: List[str] = []
    for n, row in enumerate(rows):
        if n:
            out.extend([""] * line_height)
        if letter_spacing is None:
            out.extend(_trim(figlet.renderText(row).split("\n")))
        else:
            out.extend(_trim(_render_spaced(figlet, row, letter_spacing)))
    return "\n".join(out)


def skip_lines(glyphs: str) -> str:
    """
    Replace solid fill with a seven-eighths block to open thin horizontal gaps.

    Color codes are stripped first; box-drawing border characters are kept.
    """
    return strip_ansi(glyphs).replace(SOLID_BLOCK, SEVEN_EIGHTHS_BLOCK)
