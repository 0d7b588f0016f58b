import numpy as np
import pytest

from chromalogo.colors import ColorRGB
from chromalogo.errors import ConfigError, InvalidPaletteError
from chromalogo.gradients import Gradient, build_gradient

palettes = [
    ["#000000", "#ffffff"],
    ["red", "green", "blue"],
    ["#123456", "#abcdef", "#fedcba", "#000000", "#ff00ff"],
    [(10, 20, 30), ColorRGB((40, 50, 60))],
]


@pytest.mark.parametrize("stops", palettes)
@pytest.mark.parametrize("interpolation", ["rgb", "hsv"])
def test_boundary_exactness(stops, interpolation):
    grad = build_gradient(stops, interpolation=interpolation)
    assert grad(0) == ColorRGB.coerce(stops[0])
    assert grad(1) == ColorRGB.coerce(stops[-1])


def test_single_stop_is_constant():
    grad = build_gradient(["#336699"])
    for t in (0.0, 0.25, 0.5, 0.99, 1.0, -3.0, 7.0):
        assert grad(t).hex == "#336699"
    assert [c.hex for c in grad.sample(4)] == ["#336699"] * 4


def test_empty_stops():
    with pytest.raises(InvalidPaletteError):
        build_gradient([])


def test_midpoint_rgb():
    grad = build_gradient(["#000000", "#ffffff"])
    assert grad(0.5).value == (128, 128, 128)
    assert grad(0.25).value == (64, 64, 64)


def test_inner_stops_are_hit_exactly():
    grad = build_gradient(["#ff0000", "#00ff00", "#0000ff"])
    assert grad(0.5).value == (0, 255, 0)
    assert grad(0.25).value == (128, 128, 0)


def test_positions_are_clamped():
    grad = build_gradient(["#ff0000", "#0000ff"])
    assert grad(-0.5) == grad(0)
    assert grad(1.5) == grad(1)


def test_sample_endpoints():
    grad = build_gradient(["#ff0000", "#00ff00", "#0000ff"])
    colors = grad.sample(5)
    assert len(colors) == 5
    assert colors[0].value == (255, 0, 0)
    assert colors[2].value == (0, 255, 0)
    assert colors[-1].value == (0, 0, 255)
    assert grad.sample(1) == [ColorRGB((255, 0, 0))]
    assert grad.sample(0) == []


def test_sample_matches_call():
    grad = build_gradient(["#102030", "#f0e0d0", "#00ff80"])
    samples = grad.sample(9)
    for i, color in enumerate(samples):
        assert color == grad(i / 8)


def test_hsv_short_arc():
    grad = build_gradient(["#ff0000", "#0000ff"], interpolation="hsv")
    # red (0) to blue (240) the short way passes through magenta
    assert grad(0.5).value == (255, 0, 255)


def test_hsv_long_arc():
    grad = build_gradient(["#ff0000", "#0000ff"], interpolation="hsv", hsv_spin="long")
    assert grad(0.5).value == (0, 255, 0)


def test_rgb_values_are_monotonic_between_two_stops():
    grad = build_gradient(["#000000", "#ffffff"])
    reds = np.array([c.value[0] for c in grad.sample(32)])
    assert np.all(np.diff(reds) >= 0)


def test_unknown_interpolation():
    with pytest.raises(ConfigError):
        Gradient(["red"], interpolation="lab")
    with pytest.raises(ConfigError):
        Gradient(["red"], hsv_spin="sideways")


def test_gradient_metadata():
    grad = build_gradient(["red", "blue"], interpolation="HSV")
    assert len(grad) == 2
    assert grad.colors == (ColorRGB((255, 0, 0)), ColorRGB((0, 0, 255)))
    assert "hsv" in repr(grad)
