"""Vectorized color space conversions used by HSV interpolation."""

from .hsv import np_unit_rgb_to_hsv, np_hsv_to_unit_rgb, interpolate_hue

__all__ = ["np_unit_rgb_to_hsv", "np_hsv_to_unit_rgb", "interpolate_hue"]
