import pyfiglet
import pytest

from chromalogo.errors import ConfigError, FontError
from chromalogo.glyphs import render_glyphs, skip_lines, SOLID_BLOCK, SEVEN_EIGHTHS_BLOCK


def test_render_produces_multiline_art():
    art = render_glyphs("Hi")
    lines = art.split("\n")
    assert len(lines) > 1
    assert lines[-1].strip() != ""
    assert "\x1b[" not in art


def test_unknown_font_raises_font_error():
    with pytest.raises(FontError) as exc_info:
        render_glyphs("Hi", font="not-a-real-font")
    assert exc_info.value.font == "not-a-real-font"
    assert "not-a-real-font" in str(exc_info.value)


def test_line_height_stacks_rows_with_gaps():
    stacked = render_glyphs("A\nB", line_height=2)
    assert stacked == render_glyphs("A") + "\n\n\n" + render_glyphs("B")


def test_letter_spacing_adds_columns():
    tight = render_glyphs("AB", letter_spacing=0).split("\n")
    loose = render_glyphs("AB", letter_spacing=3).split("\n")
    assert len(tight) == len(loose)
    for a, b in zip(tight, loose):
        assert len(b) == len(a) + 3


def test_invalid_spacing_options():
    with pytest.raises(ConfigError):
        render_glyphs("A", letter_spacing=-1)
    with pytest.raises(ConfigError):
        render_glyphs("A", line_height=0)


def test_skip_lines_substitutes_solid_fill():
    glyphs = "██╗  ██╗\n██║  ██║\n╚═╝  ╚═╝"
    filtered = skip_lines(glyphs)
    assert SOLID_BLOCK not in filtered
    assert filtered.split("\n")[0] == "▇▇╗  ▇▇╗"
    assert filtered.split("\n")[2] == "╚═╝  ╚═╝"


def test_skip_lines_strips_color_codes():
    assert skip_lines("\x1b[37m██\x1b[39m") == SEVEN_EIGHTHS_BLOCK * 2


def test_block_font_has_solid_fill():
    art = render_glyphs("HI", font="ansi_shadow")
    assert SOLID_BLOCK in art
    assert SOLID_BLOCK not in skip_lines(art)


def test_explicit_width_is_passed_to_figlet(monkeypatch):
    widths = []

    class RecordingFiglet:
        def __init__(self, font, width):
            widths.append(width)

        def renderText(self, text):
            return text + "\n"

    monkeypatch.setattr(pyfiglet, "Figlet", RecordingFiglet)
    render_glyphs("A", width=0)
    render_glyphs("A", width=120)
    render_glyphs("A")
    assert widths == [0, 120, 80]
