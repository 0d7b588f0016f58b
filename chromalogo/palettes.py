"""
Named palettes and color-source resolution.

A palette source is either a literal list of stops or a name looked up
through a resolver callable. Lookups that fail are configuration errors.
"""
from __future__ import annotations

from typing import Callable, Dict, List, Optional, Sequence, Union

from .colors.color_base import to_colors
from .config import DEFAULT_PALETTE
from .errors import InvalidPaletteError
from .gradients import build_gradient, colorize_line
from .types.color_types import ColorLike

PaletteSource = Union[str, Sequence[ColorLike]]
PaletteLookup = Callable[[str], Optional[List[ColorLike]]]

PALETTES: Dict[str, List[str]] = {
    "grad-blue": ["#4ea8de", "#5e60ce", "#7400b8"],
    "sunset": ["#ff7e5f", "#feb47b", "#ffcc70"],
    "ocean": ["#0077b6", "#00b4d8", "#90e0ef"],
    "forest": ["#134e5e", "#2f8f5b", "#71b280"],
    "fire": ["#f12711", "#f5af19"],
    "pastel": ["#74ebd5", "#74aede"],
    "vice": ["#5ee7df", "#b490ca"],
    "retro": ["#3f51b1", "#5a55ae", "#7b5fac", "#8f6aae", "#a86aa4", "#cc6b8e", "#f18271", "#f3a469", "#f7c978"],
    "rainbow": ["#ff0000", "#ff7f00", "#ffff00", "#00ff00", "#0000ff", "#4b0082", "#9400d3"],
    "mono": ["#4d4d4d", "#ffffff"],
}


def resolve_palette(name: str) -> Optional[List[ColorLike]]:
    """Return the stops of a named palette, or None when the name is unknown."""
    stops = PALETTES.get(name.strip().lower())
    return list(stops) if stops is not None else None


def get_palette_names() -> List[str]:
    return list(PALETTES)


def get_default_palette() -> List[ColorLike]:
    return list(PALETTES[DEFAULT_PALETTE])


def resolve_colors(palette: PaletteSource, lookup: PaletteLookup = resolve_palette) -> List[ColorLike]:
    """
    Turn a palette source into a non-empty list of color stops.

    Args:
        palette: A palette name or a literal sequence of stops
        lookup: Name resolver; returns None for unknown names

    Raises:
        InvalidPaletteError: for empty lists or names the lookup cannot resolve
    """
    if isinstance(palette, str):
        colors = lookup(palette)
        if not colors:
            raise InvalidPaletteError(f"Unknown palette: {palette}", palette=palette)
        return list(colors)
    if palette is None or len(palette) == 0:
        raise InvalidPaletteError("Palette must contain at least one color", palette=palette)
    return list(palette)


def get_palette_preview(palette: PaletteSource, width: int = 20, lookup: PaletteLookup = resolve_palette) -> str:
    """Render a solid swatch bar painted with the palette's left-to-right sweep."""
    stops = to_colors(resolve_colors(palette, lookup))
    return colorize_line("█" * max(width, 1), build_gradient(stops))
