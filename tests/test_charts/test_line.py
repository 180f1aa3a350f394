"""
Tests for the Line chart and the Chart render loop.

Tests cover:
- One segment per value after the first
- Segment endpoints from h(), slot width and base_y
- Gaps, colours and value labels
"""
import pytest
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from squid.charts.chart import Chart
from squid.charts.line import Line
from squid.models.data_types import Series


# ==================== TestSegments ====================

class TestSegments:
    """Line draws one segment between each pair of adjacent values."""

    def test_no_segment_for_single_value(self, surface, linear_h):
        Line(surface, [5]).draw(linear_h, left=0, width=20)
        assert surface.lines == []

    def test_one_segment_per_later_value(self, surface, linear_h):
        Line(surface, [1, 3, 2, 4]).draw(linear_h, left=0, width=20)
        assert len(surface.lines) == 3

    def test_segment_endpoints(self, surface, linear_h):
        Line(surface, [1, 3, 2]).draw(linear_h, left=0, width=20, base_y=5)

        (start1, end1, _), (start2, end2, _) = surface.lines
        assert start1 == (10, 15)
        assert end1 == (30, 35)
        assert start2 == (30, 35)
        assert end2 == (50, 25)

    def test_left_offset(self, surface, linear_h):
        Line(surface, [0, 0]).draw(linear_h, left=100, width=10)
        (start, end, _), = surface.lines
        assert start == (105, 0)
        assert end == (115, 0)

    def test_zero_previous_value_still_draws(self, surface, linear_h):
        Line(surface, [0, 2]).draw(linear_h, left=0, width=20)
        assert len(surface.lines) == 1

    def test_empty_data(self, surface, linear_h):
        Line(surface, []).draw(linear_h, left=0, width=20)
        Line(surface).draw(linear_h, left=0, width=20)
        assert surface.calls == []


# ==================== TestStyle ====================

class TestStyle:
    """Segments are drawn with round caps and the configured width."""

    def test_round_cap_and_line_width(self, surface, linear_h):
        Line(surface, [1, 2], settings={"line_width": 6}).draw(linear_h, left=0, width=20)
        _, _, style = surface.lines[0]
        assert style["cap_style"] == "round"
        assert style["line_width"] == 6

    def test_style_restored(self, surface, linear_h):
        Line(surface, [1, 2, 3]).draw(linear_h, left=0, width=20)
        assert surface.cap_style == "butt"
        assert surface.line_width == 1.0

    def test_each_segment_is_stroked(self, surface, linear_h):
        Line(surface, [1, 2, 3]).draw(linear_h, left=0, width=20)
        assert surface.calls.count(("stroke",)) == 2

    def test_series_colour(self, surface, linear_h):
        Line(surface, [1, 2], color="bc2d30").draw(linear_h, left=0, width=20)
        _, _, style = surface.lines[0]
        assert style["stroke_color"] == "bc2d30"
        assert surface.stroke_color == "000000"


# ==================== TestGaps ====================

class TestGaps:
    """None values break the line."""

    def test_gap_skips_both_neighbouring_segments(self, surface, linear_h):
        Line(surface, [1, None, 3, 4]).draw(linear_h, left=0, width=20)
        (start, end, _), = surface.lines
        # Only 3 -> 4 is drawn
        assert start == (50, 30)
        assert end == (70, 40)

    def test_h_is_not_called_for_gaps(self, surface):
        seen = []

        def h(value=0):
            seen.append(value)
            return value

        Line(surface, [1, None, 2]).draw(h, left=0, width=10)
        assert None not in seen


# ==================== TestDataShapes ====================

class TestDataShapes:
    """Chart data may be a sequence, mapping or Series."""

    def test_mapping(self, surface, linear_h):
        Line(surface, {"a": 1, "b": 2}).draw(linear_h, left=0, width=20)
        assert len(surface.lines) == 1

    def test_series(self, surface, linear_h):
        series = Series.from_data([1, 2, 3], name="Views")
        Line(surface, series).draw(linear_h, left=0, width=20)
        assert len(surface.lines) == 2


# ==================== TestLabels ====================

class TestLabels:
    """labels=True adds a formatted value above each point."""

    def test_one_label_per_value(self, surface, linear_h):
        Line(surface, [1000, 2500], settings={"labels": True}).draw(linear_h, left=0, width=20)
        assert [text for text, _ in surface.texts] == ["1,000", "2,500"]

    def test_label_format_and_position(self, surface, linear_h):
        Line(surface, [1.5], settings={"labels": True, "format": "currency"}).draw(
            linear_h, left=0, width=20, base_y=5
        )
        (text, options), = surface.texts
        assert text == "$1.50"
        # Box centred on x=10, bottom edge on the point (y = 5 + 15)
        assert options["at"] == (0, 40)
        assert options["width"] == 20
        assert options["height"] == 20
        assert options["align"] == "center"
        assert options["valign"] == "center"
        assert options["overflow"] == "shrink_to_fit"

    def test_no_labels_by_default(self, surface, linear_h):
        Line(surface, [1, 2]).draw(linear_h, left=0, width=20)
        assert surface.texts == []


# ==================== TestChartBase ====================

class TestChartBase:
    """Chart render loop helpers."""

    def test_chart_is_abstract(self, surface):
        with pytest.raises(TypeError):
            Chart(surface, [1, 2])

    def test_h_outside_draw_raises(self, surface):
        with pytest.raises(RuntimeError):
            Line(surface, [1]).h(1)

    def test_h_without_argument_is_baseline(self, surface):
        heights = []

        class Probe(Line):
            def draw_element(self, height, x, width, previous_value=None):
                heights.append(self.h())

        Probe(surface, [1]).draw(lambda value=0: value + 7, left=0, width=10)
        assert heights == [7]
