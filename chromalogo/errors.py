"""Exception types raised by chromalogo.

Every error derives from :class:`LogoError` and is raised synchronously to the
caller; a failed render never returns partial output.
"""
from __future__ import annotations
from typing import Any


class LogoError(Exception):
    """Base class for all chromalogo errors."""


class InvalidPaletteError(LogoError, ValueError):
    """Raised when a color source is empty, unresolved or unparseable."""

    def __init__(self, message: str = "Palette must contain at least one color", palette: Any = None) -> None:
        super().__init__(message)
        self.palette = palette


class FontError(LogoError, ValueError):
    """Raised when the glyph renderer does not know the requested font."""

    def __init__(self, font: str) -> None:
        super().__init__(f"Invalid font: {font}")
        self.font = font


class InvalidModeError(LogoError, ValueError):
    """Raised for unknown direction/alignment values when running in strict mode."""

    def __init__(self, mode: Any, kind: str = "mode") -> None:
        super().__init__(f"Unknown {kind}: {mode!r}")
        self.mode = mode
        self.kind = kind


class ConfigError(LogoError, ValueError):
    """Raised for out-of-range rendering options."""
