"""
Pytest fixtures for squid tests.

Provides:
- A recording fake surface (captures every drawing call)
- Real raster and vector surfaces
- Sample chart data
"""
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))


# ==================== FAKE SURFACE ====================

def _style_property(name):
    """Property that records every assignment as ("set", name, value)."""

    def getter(self):
        return self.style[name]

    def setter(self, value):
        self.calls.append(("set", name, value))
        self.style[name] = value

    return property(getter, setter)


class RecordingSurface:
    """
    Drawing surface stand-in that records calls instead of drawing.

    ``calls`` holds tuples in call order:
    - ("set", property, value)
    - ("line", start, end, style snapshot)
    - ("stroke",)
    - ("discard_path",)
    - ("text_box", text, options)
    """

    cap_style = _style_property("cap_style")
    line_width = _style_property("line_width")
    stroke_color = _style_property("stroke_color")
    fill_color = _style_property("fill_color")

    def __init__(self, width=400, height=200):
        self.width = width
        self.height = height
        self.calls = []
        self.style = {
            "cap_style": "butt",
            "line_width": 1.0,
            "stroke_color": "000000",
            "fill_color": "000000",
        }

    def line(self, start, end):
        self.calls.append(("line", tuple(start), tuple(end), dict(self.style)))

    def stroke(self):
        self.calls.append(("stroke",))

    def discard_path(self):
        self.calls.append(("discard_path",))

    def text_box(self, text, **options):
        self.calls.append(("text_box", text, options))

    @property
    def lines(self):
        """Recorded line calls as (start, end, style)."""
        return [call[1:] for call in self.calls if call[0] == "line"]

    @property
    def texts(self):
        """Recorded text_box calls as (text, options)."""
        return [call[1:] for call in self.calls if call[0] == "text_box"]


@pytest.fixture
def surface():
    """Fresh RecordingSurface (400x200)."""
    return RecordingSurface()


# ==================== REAL SURFACES ====================

@pytest.fixture
def image_surface():
    """100x100 ImageSurface on a white background."""
    from squid.rendering import ImageSurface
    return ImageSurface(100, 100)


@pytest.fixture
def figure_surface():
    """200x100 pt FigureSurface."""
    from squid.rendering import FigureSurface
    return FigureSurface(200, 100)


# ==================== DATA FIXTURES ====================

@pytest.fixture
def linear_h():
    """Value-to-height function: 10 points per unit, h() == 0."""
    def h(value=0):
        return value * 10
    return h


@pytest.fixture
def views_data():
    """Single series with two categories."""
    return {"Views": {"2013": 1, "2014": 3}}


@pytest.fixture
def two_series_data():
    """Two series; the second is missing one category."""
    return {
        "Views": {"Jan": 10, "Feb": 20, "Mar": 15},
        "Uniques": {"Jan": 5, "Mar": 8},
    }
