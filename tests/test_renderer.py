import asyncio
import io

import pytest

from chromalogo.align import visible_length
from chromalogo.colors import strip_ansi
from chromalogo.colors.ansi import TERMINAL_RESTORE
from chromalogo.errors import ConfigError, FontError, InvalidPaletteError
from chromalogo.glyphs import render_glyphs, skip_lines, SEVEN_EIGHTHS_BLOCK, SOLID_BLOCK
from chromalogo import renderer
from chromalogo.palettes import resolve_colors, resolve_palette
from chromalogo.renderer import paint_glyphs, render, render_filled, write_and_settle

BW = ["#000000", "#ffffff"]


def test_render_keeps_glyphs_visible():
    out = render("Hi", palette=BW)
    assert strip_ansi(out) == render_glyphs("Hi")
    assert "\x1b[38;2;" in out


def test_render_default_palette():
    out = render("Hi")
    assert strip_ansi(out) == render_glyphs("Hi")


@pytest.mark.parametrize("direction", ["vertical", "horizontal", "diagonal"])
def test_render_directions_preserve_text(direction):
    out = render("Go", palette="rainbow", direction=direction)
    assert strip_ansi(out) == render_glyphs("Go")


def test_render_right_alignment_uses_given_width():
    out = render("Hi", palette=BW, align="right", width=100)
    assert all(visible_length(line) == 100 for line in out.split("\n"))


def test_render_center_default_width():
    glyph_lines = render_glyphs("Hi").split("\n")
    out_lines = render("Hi", palette=BW, align="center").split("\n")
    for glyph, out in zip(glyph_lines, out_lines):
        assert visible_length(out) == (80 - len(glyph)) // 2 + len(glyph)


def test_render_errors():
    with pytest.raises(InvalidPaletteError):
        render("Hi", palette="not-a-real-palette")
    with pytest.raises(InvalidPaletteError):
        render("Hi", palette=[])
    with pytest.raises(FontError):
        render("Hi", palette=BW, font="not-a-real-font")


def test_render_ansi256():
    out = render("Hi", palette=BW, depth="ansi256")
    assert "\x1b[38;5;" in out
    assert "\x1b[38;2;" not in out


def test_paint_glyphs_is_pure_composition():
    assert paint_glyphs("X\n\nY", BW) == "\x1b[38;2;0;0;0mX\x1b[39m\n\n\x1b[38;2;255;255;255mY\x1b[39m"


def test_write_and_settle_order():
    stream = io.StringIO()
    asyncio.run(write_and_settle("logo", stream, delay=0))
    assert stream.getvalue() == "logo\n" + TERMINAL_RESTORE


def test_render_filled_writes_and_restores():
    stream = io.StringIO()
    out = asyncio.run(render_filled("Hi", palette=BW, stream=stream, settle_delay=0))
    assert stream.getvalue() == out + "\n" + TERMINAL_RESTORE
    assert strip_ansi(out) == render_glyphs("Hi", font="ansi_shadow")


def test_render_filled_skip_lines():
    stream = io.StringIO()
    out = asyncio.run(render_filled("Hi", palette="fire", skip_lines=True, stream=stream, settle_delay=0))
    plain = strip_ansi(out)
    assert SOLID_BLOCK not in plain
    assert SEVEN_EIGHTHS_BLOCK in plain
    assert plain == skip_lines(render_glyphs("Hi", font="ansi_shadow", letter_spacing=1, line_height=1))


def test_render_filled_alignment_without_terminal_uses_default_width():
    stream = io.StringIO()
    out = asyncio.run(render_filled("Hi", palette=BW, align="right", stream=stream, settle_delay=0))
    assert all(visible_length(line) == 80 for line in out.split("\n"))


def test_render_filled_option_validation():
    with pytest.raises(ConfigError):
        asyncio.run(render_filled("Hi", palette=BW, letter_spacing=-1, stream=io.StringIO(), settle_delay=0))
    with pytest.raises(ConfigError):
        asyncio.run(render_filled("Hi", palette=BW, line_height=0, stream=io.StringIO(), settle_delay=0))


def test_render_filled_errors_write_nothing():
    stream = io.StringIO()
    with pytest.raises(InvalidPaletteError):
        asyncio.run(render_filled("Hi", palette="not-a-real-palette", stream=stream, settle_delay=0))
    with pytest.raises(FontError):
        asyncio.run(render_filled("Hi", palette=BW, font="not-a-real-font", stream=stream, settle_delay=0))
    assert stream.getvalue() == ""


def test_write_and_settle_restores_terminal_when_cancelled():
    stream = io.StringIO()

    async def cancel_mid_settle():
        task = asyncio.ensure_future(write_and_settle("logo", stream, delay=10))
        await asyncio.sleep(0.01)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

    asyncio.run(cancel_mid_settle())
    assert stream.getvalue() == "logo\n" + TERMINAL_RESTORE


def test_write_and_settle_restores_terminal_on_timeout():
    stream = io.StringIO()

    async def time_out():
        with pytest.raises(asyncio.TimeoutError):
            await asyncio.wait_for(write_and_settle("logo", stream, delay=10), timeout=0.01)

    asyncio.run(time_out())
    assert stream.getvalue().endswith(TERMINAL_RESTORE)


def test_render_filled_wraps_glyphs_at_given_width():
    text = "HI HI HI"
    stream = io.StringIO()
    out = asyncio.run(render_filled(text, palette=BW, width=20, stream=stream, settle_delay=0))
    narrow = render_glyphs(text, font="ansi_shadow", width=20)
    assert strip_ansi(out) == narrow
    assert narrow != render_glyphs(text, font="ansi_shadow")


def test_render_resolves_palette_once(monkeypatch):
    calls = []

    def counting_resolve(palette, lookup=resolve_palette):
        calls.append(palette)
        return resolve_colors(palette, lookup)

    monkeypatch.setattr(renderer, "resolve_colors", counting_resolve)
    render("Hi", palette="sunset")
    assert calls == ["sunset"]

    calls.clear()
    asyncio.run(render_filled("Hi", palette="sunset", stream=io.StringIO(), settle_delay=0))
    assert calls == ["sunset"]


def test_bad_palette_fails_before_rasterizing(monkeypatch):
    def fail(*args, **kwargs):
        raise AssertionError("glyphs rendered")

    monkeypatch.setattr(renderer, "render_glyphs", fail)
    with pytest.raises(InvalidPaletteError):
        render("Hi", palette="not-a-real-palette")


def test_render_unknown_depth():
    with pytest.raises(ConfigError):
        render("Hi", palette=BW, depth="bogus")
