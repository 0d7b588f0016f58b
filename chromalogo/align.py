"""
Alignment engine: pads colored blocks within a viewport.

Padding is computed from the visible width of each line (ANSI color
sequences removed) and only ever prepended, so the painted content is
preserved verbatim.
"""
from __future__ import annotations

import os
import sys
import warnings
from typing import IO, Optional, Union

from .colors.ansi import strip_ansi
from .config import DEFAULT_WIDTH, value_or_default
from .errors import InvalidModeError
from .types.modes import AlignMode, coerce_mode


def visible_length(line: str) -> int:
    """Length of ``line`` as displayed, ignoring color escape sequences."""
    return len(strip_ansi(line))


def center_padding(line: str, width: int) -> int:
    return max(0, (width - visible_length(line)) // 2)


def right_padding(line: str, width: int) -> int:
    return max(0, width - visible_length(line))


def resolve_align(mode: Union[AlignMode, str], strict: bool = False) -> AlignMode:
    resolved = coerce_mode(AlignMode, mode)
    if resolved is not None:
        return resolved
    if strict:
        raise InvalidModeError(mode, kind="alignment")
    warnings.warn(f"Unknown alignment: {mode!r}, defaulting to left")
    return AlignMode.LEFT


def align(
    block: str,
    mode: Union[AlignMode, str] = AlignMode.LEFT,
    width: Optional[int] = None,
    *,
    strict: bool = False,
) -> str:
    """
    Align every line of ``block`` within ``width`` columns.

    Args:
        block: Multi-line, possibly colored text
        mode: 'left' (identity), 'center' or 'right'
        width: Viewport width; ``DEFAULT_WIDTH`` (80) when None
        strict: Raise InvalidModeError for unknown modes instead of falling back to left

    Returns:
        The block with leading spaces added per line
    """
    resolved = resolve_align(mode, strict=strict)
    if resolved == AlignMode.LEFT:
        return block

    width = value_or_default(width, DEFAULT_WIDTH)
    pad = center_padding if resolved == AlignMode.CENTER else right_padding
    return "\n".join(" " * pad(line, width) + line for line in block.split("\n"))


def viewport_width(stream: Optional[IO] = None) -> Optional[int]:
    """
    Query the column count of the terminal behind ``stream``.

    Returns None when the stream is not attached to a terminal, so callers can
    fall back to ``DEFAULT_WIDTH`` explicitly.
    """
    stream = value_or_default(stream, sys.stdout)
    try:
        columns = os.get_terminal_size(stream.fileno()).columns
    except (AttributeError, ValueError, OSError):
        return None
    return columns or None
