"""Common base for everything that draws on a surface.

:class:`Base` forwards unknown attribute lookups to the drawing surface
held in ``pdf``, so chart code can call ``self.line(...)`` or
``self.text_box(...)`` as if it were the surface itself.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Iterator, Mapping, Optional, Union

from squid.charts.number_helper import (
    number_to_currency,
    number_to_delimited,
    number_to_minutes_and_seconds,
    number_to_percentage,
)
from squid.config import DEFAULT_LAYOUT, DEFAULT_SETTINGS, ChartLayoutConfig, ChartSettings


SettingsLike = Union[ChartSettings, Mapping[str, Any], None]


class Base:
    """Abstract class that delegates unhandled lookups to a ``pdf`` surface.

    Parameters
    ----------
    document:
        Drawing surface (see :class:`squid.rendering.DrawingSurface`).
        Owned by the caller; the chart only keeps a reference.
    data:
        Chart data, interpreted by subclasses.
    settings:
        :class:`ChartSettings` or a mapping accepted by
        :meth:`ChartSettings.from_dict`.
    layout:
        Layout constants for text and spacing.
    """

    def __init__(
        self,
        document: Any,
        data: Any = None,
        settings: SettingsLike = None,
        layout: ChartLayoutConfig = DEFAULT_LAYOUT,
    ) -> None:
        self.pdf = document
        self.data = data
        self.settings = self._normalize_settings(settings)
        self.layout = layout

    @staticmethod
    def _normalize_settings(settings: SettingsLike) -> ChartSettings:
        if settings is None:
            return DEFAULT_SETTINGS
        if isinstance(settings, ChartSettings):
            return settings
        return ChartSettings.from_dict(settings)

    def __getattr__(self, name: str) -> Any:
        # Only called when normal lookup fails.
        if name.startswith("__") or name == "pdf":
            raise AttributeError(name)
        pdf = self.__dict__.get("pdf")
        if pdf is None or not hasattr(pdf, name):
            raise AttributeError(
                f"'{type(self).__name__}' object and its surface "
                f"'{type(pdf).__name__}' have no attribute '{name}'"
            )
        return getattr(pdf, name)

    # ==================== Scoped style ====================

    @contextmanager
    def with_style(self, **new_values: Any) -> Iterator["Base"]:
        """Set surface properties (``line_width``, ``cap_style``, ...) for one block.

        The path built inside the block is stroked when the block ends,
        or discarded if the block raises. The previous values are
        restored either way.
        """
        old_values: Dict[str, Any] = {key: getattr(self.pdf, key) for key in new_values}
        try:
            for key, value in new_values.items():
                setattr(self.pdf, key, value)
            try:
                yield self
            except Exception:
                self.pdf.discard_path()
                raise
            self.pdf.stroke()
        finally:
            for key, value in old_values.items():
                setattr(self.pdf, key, value)

    # ==================== Formatting ====================

    def format_for(self, value: Any, format: Optional[str] = None) -> str:
        """Returns the formatted value (currency, percentage, ...)."""
        if format == "percentage":
            text = number_to_percentage(value, precision=1)
        elif format == "currency":
            text = number_to_currency(value)
        elif format == "seconds":
            text = number_to_minutes_and_seconds(value)
        elif format == "float":
            text = number_to_delimited(value)
        else:
            text = number_to_delimited(int(value))
        return str(text)

    # ==================== Text defaults ====================

    @property
    def text_options(self) -> Dict[str, str]:
        """Default options for text elements (labels, categories, ...)."""
        return {"valign": self.layout.TEXT_VALIGN, "overflow": self.layout.TEXT_OVERFLOW}

    @property
    def legend_height(self) -> int:
        return self.layout.LEGEND_HEIGHT

    @property
    def font_size(self) -> int:
        """Default font size for text elements."""
        return self.layout.FONT_SIZE

    @property
    def text_height(self) -> int:
        """Default height for text elements."""
        return (self.font_size + 2) * 2

    @property
    def padding(self) -> int:
        """Default horizontal padding between elements."""
        return self.layout.PADDING
