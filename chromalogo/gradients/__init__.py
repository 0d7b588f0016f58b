"""
Gradient Engine
===============

Build a gradient from ordered color stops and paint text with it.

>>> from chromalogo.gradients import build_gradient, colorize_block
>>> grad = build_gradient(["#000000", "#ffffff"])
>>> grad(0.5).hex
'#808080'
"""

from .gradient import Gradient, build_gradient
from .colorize import colorize_line, colorize_block, is_blank, GradientFn

__all__ = [
    "Gradient",
    "build_gradient",
    "colorize_line",
    "colorize_block",
    "is_blank",
    "GradientFn",
]
