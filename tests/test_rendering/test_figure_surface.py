"""
Tests for FigureSurface (matplotlib).
"""
import pytest
import sys
from pathlib import Path

from matplotlib.colors import to_hex

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from squid.rendering import DrawingSurface, FigureSurface, UnsupportedFormatError


class TestFigureSetup:
    """Figure geometry."""

    def test_figure_size_in_points(self, figure_surface):
        width, height = figure_surface.figure.get_size_inches()
        assert width * 72 == pytest.approx(200)
        assert height * 72 == pytest.approx(100)

    def test_axes_span_surface(self, figure_surface):
        assert figure_surface.axes.get_xlim() == (0, 200)
        assert figure_surface.axes.get_ylim() == (0, 100)

    def test_satisfies_protocol(self, figure_surface):
        assert isinstance(figure_surface, DrawingSurface)


class TestFigureStroke:
    """Stroked segments become Line2D artists."""

    def test_stroke_adds_lines(self, figure_surface):
        figure_surface.line((0, 10), (50, 20))
        figure_surface.line((50, 20), (100, 5))
        assert len(figure_surface.axes.lines) == 0

        figure_surface.stroke()
        assert len(figure_surface.axes.lines) == 2

    def test_line_style(self, figure_surface):
        figure_surface.line_width = 4
        figure_surface.cap_style = "round"
        figure_surface.stroke_color = "ff0000"
        figure_surface.line((0, 10), (50, 20))
        figure_surface.stroke()

        line, = figure_surface.axes.lines
        assert list(line.get_xdata()) == [0, 50]
        assert list(line.get_ydata()) == [10, 20]
        assert line.get_linewidth() == 4
        assert line.get_solid_capstyle() == "round"
        assert to_hex(line.get_color()) == "#ff0000"

    def test_projecting_square_cap(self, figure_surface):
        figure_surface.cap_style = "projecting_square"
        figure_surface.line((0, 0), (1, 1))
        figure_surface.stroke()
        assert figure_surface.axes.lines[0].get_solid_capstyle() == "projecting"


class TestFigureText:
    """text_box placement."""

    def test_text_artist(self, figure_surface):
        figure_surface.fill_color = "336699"
        figure_surface.text_box("Views", at=(10, 90), width=80, height=20, align="center", valign="center")

        text, = figure_surface.axes.texts
        assert text.get_text() == "Views"
        assert text.get_position() == (50, 80)
        assert text.get_horizontalalignment() == "center"
        assert to_hex(text.get_color()) == "#336699"

    def test_shrink_to_fit(self, figure_surface):
        figure_surface.text_box(
            "A rather long category name", at=(0, 50), width=40, height=20, overflow="shrink_to_fit", size=12
        )
        text, = figure_surface.axes.texts
        assert text.get_fontsize() < 12

    def test_truncate_keeps_size(self, figure_surface):
        figure_surface.text_box("A rather long category name", at=(0, 50), width=40, height=20, size=12)
        text, = figure_surface.axes.texts
        assert text.get_fontsize() == 12


class TestFigureSave:
    """Saving to vector and raster formats."""

    def test_save_pdf(self, figure_surface, tmp_path):
        figure_surface.line((0, 0), (200, 100))
        figure_surface.stroke()
        path = figure_surface.save(tmp_path / "chart.pdf")
        assert path.read_bytes().startswith(b"%PDF")

    def test_save_svg(self, figure_surface, tmp_path):
        path = figure_surface.save(tmp_path / "chart.svg")
        assert "<svg" in path.read_text(encoding="utf-8")

    def test_save_png(self, figure_surface, tmp_path):
        path = figure_surface.save(tmp_path / "chart.png")
        assert path.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"

    def test_unsupported_format(self, figure_surface, tmp_path):
        with pytest.raises(UnsupportedFormatError):
            figure_surface.save(tmp_path / "chart.bmp")

    def test_uses_non_interactive_canvas(self, figure_surface):
        assert figure_surface.canvas.__class__.__module__ == "matplotlib.backends.backend_agg"
