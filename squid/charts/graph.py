"""Complete chart layout: legend, gridlines, baseline, series and categories.

:class:`Graph` splits its box into strips, builds the value-to-height
function shared by every series and hands each series to the chart
class named by ``settings.type``.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Type

from squid.charts.base import Base, SettingsLike
from squid.charts.chart import Chart
from squid.charts.line import Line
from squid.config import DEFAULT_LAYOUT, ChartLayoutConfig, InvalidSettingsError
from squid.models.data_types import ChartData


logger = logging.getLogger(__name__)

CHART_TYPES: Dict[str, Type[Chart]] = {
    "line": Line,
}


class Graph(Base):
    """Draws one chart of ``settings.type`` for every series in ``data``.

    ``data`` may be anything :meth:`ChartData.from_data` accepts.
    """

    def __init__(
        self,
        document: Any,
        data: Any,
        settings: SettingsLike = None,
        layout: ChartLayoutConfig = DEFAULT_LAYOUT,
    ) -> None:
        super().__init__(document, ChartData.from_data(data), settings, layout)
        self.min_value = 0.0
        self.max_value = 0.0

    @property
    def chart_class(self) -> Type[Chart]:
        try:
            return CHART_TYPES[self.settings.type]
        except KeyError:
            raise InvalidSettingsError(
                f"Unknown chart type '{self.settings.type}'. "
                f"Must be one of: {', '.join(CHART_TYPES)}"
            ) from None

    def draw(self, left: float, bottom: float, width: float, height: float) -> None:
        """Draws the whole chart inside the box with bottom-left corner ``(left, bottom)``."""
        chart_class = self.chart_class
        top = bottom + height

        if self.settings.legend:
            self.draw_legend(left, top, width)
            top -= self.legend_height

        if self.data.is_empty():
            logger.warning("Chart data has no values, nothing to plot")
            return

        categories = self.data.categories
        plot_left = left + self.layout.AXIS_LABEL_WIDTH if self.settings.gridlines else left
        plot_bottom = bottom + self.text_height if self.settings.categories else bottom
        plot_width = left + width - plot_left
        # Head room so the topmost label is not cut off
        plot_height = top - self.padding - plot_bottom
        if plot_width <= 0 or plot_height <= 0:
            raise ValueError(f"Chart box {width}x{height} is too small to draw a plot")

        h = self.height_function(plot_height)
        slot_width = plot_width / len(categories)
        logger.debug(
            f"Plot area: x={plot_left}, y={plot_bottom}, {plot_width}x{plot_height}, "
            f"range=[{self.min_value}, {self.max_value}], slot={slot_width}"
        )

        if self.settings.gridlines:
            self.draw_gridlines(left, plot_left, plot_bottom, plot_width, h)
        if self.settings.baseline:
            self.draw_baseline(plot_left, plot_bottom, plot_width, h)

        for index, series in enumerate(self.data.series):
            chart = chart_class(
                self.pdf,
                self.data.values_for(series),
                self.settings,
                self.layout,
                color=self.settings.color_for(index),
            )
            chart.draw(h, plot_left, slot_width, plot_bottom)

        if self.settings.categories:
            self.draw_categories(categories, plot_left, plot_bottom, slot_width)

    # ==================== Scale ====================

    def height_function(self, plot_height: float) -> Callable[..., float]:
        """Returns ``h(value=0)``, the height of ``value`` above the plot bottom.

        The value range always includes zero, so ``h()`` is the zero line.
        """
        self.min_value = min(0.0, self.data.min_value)
        self.max_value = max(0.0, self.data.max_value)
        if self.max_value == self.min_value:
            self.max_value = self.min_value + 1.0
        scale = plot_height / (self.max_value - self.min_value)
        min_value = self.min_value

        def h(value: float = 0.0) -> float:
            return (value - min_value) * scale

        return h

    def gridline_values(self) -> List[float]:
        """``steps + 1`` evenly spaced values from the range minimum to maximum."""
        steps = self.settings.steps
        span = self.max_value - self.min_value
        return [self.min_value + span * i / steps for i in range(steps + 1)]

    # ==================== Parts ====================

    def draw_legend(self, left: float, top: float, width: float) -> None:
        """One colour swatch and name per series, left to right."""
        entries = self.data.series
        if not entries:
            return
        entry_width = width / len(entries)
        swatch = self.layout.LEGEND_SWATCH_WIDTH
        center_y = top - self.legend_height / 2

        for index, series in enumerate(entries):
            x = left + index * entry_width
            with self.with_style(
                cap_style="round",
                line_width=self.settings.line_width,
                stroke_color=self.settings.color_for(index),
            ):
                self.line((x, center_y), (x + swatch, center_y))
            self.text_box(
                series.name,
                at=(x + swatch + self.padding, top),
                width=max(entry_width - swatch - 2 * self.padding, 1),
                height=self.legend_height,
                size=self.font_size,
                **self.text_options,
            )

    def draw_gridlines(
        self, left: float, plot_left: float, plot_bottom: float, plot_width: float, h: Callable[..., float]
    ) -> None:
        values = self.gridline_values()
        with self.with_style(
            cap_style="butt",
            line_width=self.layout.GRIDLINE_WIDTH,
            stroke_color=self.settings.gridline_color,
        ):
            for value in values:
                y = plot_bottom + h(value)
                self.line((plot_left, y), (plot_left + plot_width, y))

        for value in values:
            y = plot_bottom + h(value)
            self.text_box(
                self.format_for(value, self.settings.format),
                at=(left, y + self.text_height / 2),
                width=plot_left - left - self.padding,
                height=self.text_height,
                align="right",
                size=self.font_size,
                **self.text_options,
            )

    def draw_baseline(self, plot_left: float, plot_bottom: float, plot_width: float, h: Callable[..., float]) -> None:
        y = plot_bottom + h()
        with self.with_style(
            cap_style="butt",
            line_width=self.layout.BASELINE_WIDTH,
            stroke_color=self.settings.baseline_color,
        ):
            self.line((plot_left, y), (plot_left + plot_width, y))

    def draw_categories(self, categories: List[str], plot_left: float, plot_bottom: float, slot_width: float) -> None:
        for index, category in enumerate(categories):
            self.text_box(
                category,
                at=(plot_left + index * slot_width, plot_bottom),
                width=slot_width,
                height=self.text_height,
                align="center",
                size=self.font_size,
                **self.text_options,
            )


def chart(
    document: Any,
    data: Any,
    left: float = 0,
    bottom: float = 0,
    width: Optional[float] = None,
    height: Optional[float] = None,
    settings: SettingsLike = None,
    **options: Any,
) -> Graph:
    """Draws ``data`` as a chart on ``document`` and returns the Graph used.

    ``width`` and ``height`` default to the rest of the surface.
    ``settings`` may be a ChartSettings or a mapping; keyword ``options``
    override its fields (``format="currency"``, ``legend=False``, ...).
    """
    if width is None:
        width = document.width - left
    if height is None:
        height = document.height - bottom

    settings = Base._normalize_settings(settings)
    if options:
        settings = settings.merged(**options)

    graph = Graph(document, data, settings)
    graph.draw(left, bottom, width, height)
    return graph
