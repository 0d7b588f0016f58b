import numpy as np
from numpy import ndarray as NDArray


def np_unit_rgb_to_hsv(rgb: NDArray) -> NDArray:
    """
    Vectorized RGB to HSV conversion.

    Args:
        rgb: array of shape (..., 3), channels in [0, 1]

    Returns:
        hsv: array of shape (..., 3): (hue [0,360), saturation [0,1], value [0,1])
    """
    rgb = np.asarray(rgb, dtype=float)
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]

    V = np.maximum.reduce([r, g, b])
    m = np.minimum.reduce([r, g, b])
    delta = V - m

    safe_delta = np.where(delta == 0, 1.0, delta)
    h = np.where(
        V == r,
        ((g - b) / safe_delta) % 6,
        np.where(V == g, (b - r) / safe_delta + 2, (r - g) / safe_delta + 4),
    )
    h = np.where(delta == 0, 0.0, h * 60.0) % 360.0

    S = np.where(V == 0, 0.0, delta / np.where(V == 0, 1.0, V))
    return np.stack([h, S, V], axis=-1)


def np_hsv_to_unit_rgb(hsv: NDArray) -> NDArray:
    """
    Vectorized HSV to RGB conversion.

    Args:
        hsv: array of shape (..., 3): hue in degrees, saturation and value in [0, 1]

    Returns:
        rgb: array of shape (..., 3), channels in [0, 1]
    """
    hsv = np.asarray(hsv, dtype=float)
    h = (hsv[..., 0] % 360.0) / 60.0
    s = hsv[..., 1]
    v = hsv[..., 2]

    c = v * s
    x = c * (1 - np.abs(h % 2 - 1))
    m = v - c
    sector = np.floor(h).astype(int) % 6

    zeros = np.zeros_like(c)
    # (r, g, b) before adding m, per 60 degree sector
    table = np.stack([
        np.stack([c, x, zeros], axis=-1),
        np.stack([x, c, zeros], axis=-1),
        np.stack([zeros, c, x], axis=-1),
        np.stack([zeros, x, c], axis=-1),
        np.stack([x, zeros, c], axis=-1),
        np.stack([c, zeros, x], axis=-1),
    ], axis=0)
    picked = np.take_along_axis(table, sector[None, ..., None].repeat(3, axis=-1), axis=0)[0]
    return picked + m[..., None]


def interpolate_hue(h0: NDArray, h1: NDArray, u: NDArray, spin: str = "short") -> NDArray:
    """
    Interpolate hue values with wrapping support.

    Args:
        h0: Start hue(s) in degrees
        h1: End hue(s) in degrees
        u: Interpolation coefficients in [0, 1]
        spin: 'short' for the shortest arc, 'long' for the longer one

    Returns:
        Interpolated hue values in [0, 360)
    """
    h0 = np.asarray(h0, dtype=float) % 360.0
    h1 = np.asarray(h1, dtype=float) % 360.0
    delta = h1 - h0
    if spin == "long":
        delta = np.where(np.abs(delta) < 180.0, delta - np.sign(delta) * 360.0, delta)
    else:
        delta = np.where(delta > 180.0, delta - 360.0, delta)
        delta = np.where(delta < -180.0, delta + 360.0, delta)
    return (h0 + u * delta) % 360.0
