"""Render loop shared by every chart type."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional

from squid.charts.base import Base, SettingsLike
from squid.config import DEFAULT_LAYOUT, ChartLayoutConfig
from squid.models.data_types import Series


logger = logging.getLogger(__name__)

HeightFunction = Callable[..., float]


class Chart(Base, ABC):
    """Draws one element per value of a series.

    Subclasses implement :meth:`draw_element`; everything else (walking
    the values, tracking the previous one, value labels) lives here.
    """

    def __init__(
        self,
        document: Any,
        data: Any = None,
        settings: SettingsLike = None,
        layout: ChartLayoutConfig = DEFAULT_LAYOUT,
        color: Optional[str] = None,
    ) -> None:
        super().__init__(document, data, settings, layout)
        self.color = color
        self.base_y = 0.0
        self._h: Optional[HeightFunction] = None

    @property
    def values(self) -> List[Optional[float]]:
        """Values to draw; ``data`` may be a Series, a mapping or a sequence."""
        if self.data is None:
            return []
        return Series.from_data(self.data).values

    def h(self, value: Optional[float] = None) -> float:
        """Height of ``value`` above ``base_y``; no argument means the zero baseline."""
        if self._h is None:
            raise RuntimeError("h() is only available while the chart is drawn")
        if value is None:
            return self._h()
        return self._h(value)

    def draw(self, h: HeightFunction, left: float, width: float, base_y: float = 0.0) -> None:
        """Draw every value.

        Parameters
        ----------
        h:
            Value-to-height function; ``h()`` must return the height of zero.
        left:
            x of the first slot.
        width:
            Width of one slot; element ``i`` is drawn at ``left + i * width``.
        base_y:
            y that heights returned by ``h`` are measured from.
        """
        values = self.values
        logger.debug(f"{type(self).__name__}: drawing {len(values)} values from x={left}, slot={width}")

        self._h = h
        self.base_y = base_y
        previous_value = None
        try:
            for index, value in enumerate(values):
                if value is None:
                    previous_value = None
                    continue
                x = left + index * width
                height = self.h(value)
                self.draw_element(height, x, width, previous_value=previous_value)
                if self.settings.labels:
                    self.draw_label(value, x + width / 2, base_y + height, width)
                previous_value = value
        finally:
            self._h = None

    def draw_label(self, value: float, center_x: float, y: float, width: float) -> None:
        """Draws the formatted ``value`` in a box just above ``(center_x, y)``."""
        self.text_box(
            self.format_for(value, self.settings.format),
            at=(center_x - width / 2, y + self.text_height),
            width=width,
            height=self.text_height,
            align="center",
            size=self.font_size,
            **self.text_options,
        )

    def color_style(self) -> dict:
        """Style overrides for the series colour, if one was given."""
        return {"stroke_color": self.color} if self.color else {}

    @abstractmethod
    def draw_element(
        self, height: float, x: float, width: float, previous_value: Optional[float] = None
    ) -> None:
        """Draws the mark for one value whose height is ``height``."""
        pass
