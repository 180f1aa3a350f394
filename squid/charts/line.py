"""Line chart."""

from __future__ import annotations

from typing import Optional

from squid.charts.chart import Chart


class Line(Chart):
    """Adds a line chart to the graph."""

    def draw_element(
        self, height: float, x: float, width: float, previous_value: Optional[float] = None
    ) -> None:
        """Draws a single line to represent the distance between two values of
        a series in the chart.
        """
        if previous_value is None:
            return
        with self.with_style(cap_style="round", line_width=self.settings.line_width, **self.color_style()):
            self.line(
                (x - width / 2, self.h(previous_value) + self.base_y),
                (x + width / 2, height + self.base_y),
            )
