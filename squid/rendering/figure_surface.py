"""Vector drawing surface backed by a matplotlib figure.

The figure is sized in points and holds a single axes spanning it, so
one data unit is one point. Saving to ``.pdf`` or ``.svg`` keeps every
line and label as vector output.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure
from matplotlib.lines import Line2D

from .surface import BaseSurface, Point, Segment
from .surface_config import SurfaceConfig, UnsupportedFormatError


POINTS_PER_INCH = 72

# matplotlib names for PDF cap styles
CAP_STYLE_NAMES = {
    "butt": "butt",
    "round": "round",
    "projecting_square": "projecting",
}

SUPPORTED_FORMATS = (".pdf", ".svg", ".png")


class FigureSurface(BaseSurface):
    """Drawing surface that renders into ``self.figure``."""

    def __init__(self, width: float, height: float, config: Optional[SurfaceConfig] = None) -> None:
        super().__init__(width, height, config)
        self.figure = Figure(
            figsize=(width / POINTS_PER_INCH, height / POINTS_PER_INCH),
            dpi=POINTS_PER_INCH,
            facecolor=f"#{self.config.background}",
        )
        self.canvas = FigureCanvasAgg(self.figure)
        self.axes = self.figure.add_axes((0, 0, 1, 1))
        self.axes.set_xlim(0, width)
        self.axes.set_ylim(0, height)
        self.axes.set_axis_off()

    def _stroke_segments(self, segments: List[Segment]) -> None:
        for start, end in segments:
            self.axes.add_line(
                Line2D(
                    [start[0], end[0]],
                    [start[1], end[1]],
                    linewidth=self.line_width,
                    color=f"#{self.stroke_color}",
                    solid_capstyle=CAP_STYLE_NAMES[self.cap_style],
                )
            )

    def _draw_text(
        self,
        text: str,
        *,
        at: Point,
        width: float,
        height: float,
        align: str,
        valign: str,
        shrink: bool,
        size: float,
    ) -> None:
        x = {"left": at[0], "center": at[0] + width / 2, "right": at[0] + width}[align]
        y = {"top": at[1], "center": at[1] - height / 2, "bottom": at[1] - height}[valign]

        artist = self.axes.text(
            x,
            y,
            text,
            fontsize=size,
            ha=align,
            va=valign,
            color=f"#{self.fill_color}",
        )

        if shrink:
            # At 72 dpi one display pixel is one point
            renderer = self.canvas.get_renderer()
            while artist.get_window_extent(renderer=renderer).width > width and size > self.config.min_font_size:
                size = max(self.config.min_font_size, size - 0.5)
                artist.set_fontsize(size)

    def _save(self, path: Path) -> None:
        if path.suffix.lower() not in SUPPORTED_FORMATS:
            raise UnsupportedFormatError(
                f"Unsupported format: {path.suffix}. Supported formats: {', '.join(SUPPORTED_FORMATS)}"
            )
        path.parent.mkdir(parents=True, exist_ok=True)
        self.figure.savefig(str(path), dpi=self.config.dpi, facecolor=self.figure.get_facecolor())
