"""Raster drawing surface backed by a NumPy RGB array.

Lines and text are drawn with OpenCV. The array is ``(H, W, 3)`` uint8
in RGB order, one pixel per point.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import cv2
import numpy as np

from squid.config import DEFAULT_LAYOUT

from .surface import BaseSurface, Point, Segment, hex_to_rgb
from .surface_config import SurfaceConfig, SurfaceError, UnsupportedFormatError


logger = logging.getLogger(__name__)

FONT = cv2.FONT_HERSHEY_SIMPLEX


class ImageSurface(BaseSurface):
    """Drawing surface that renders into ``self.image``.

    Parameters
    ----------
    width, height:
        Canvas size in pixels (== points).
    config:
        Initial style and background colour.
    """

    def __init__(self, width: int, height: int, config: Optional[SurfaceConfig] = None) -> None:
        super().__init__(int(width), int(height), config)
        self.image = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        self.image[:] = hex_to_rgb(self.config.background)

    def _to_pixel(self, point: Point) -> np.ndarray:
        """Flip y so (0, 0) is the bottom-left corner."""
        return np.array([point[0], self.height - point[1]], dtype=np.float64)

    # ==================== Lines ====================

    def _stroke_segments(self, segments: List[Segment]) -> None:
        color = hex_to_rgb(self.stroke_color)
        half = self.line_width / 2.0

        for start, end in segments:
            p1 = self._to_pixel(start)
            p2 = self._to_pixel(end)

            if self.line_width <= 1.0:
                cv2.line(
                    self.image,
                    tuple(int(v) for v in np.round(p1)),
                    tuple(int(v) for v in np.round(p2)),
                    color,
                    1,
                    cv2.LINE_AA,
                )
                continue

            extend = half if self.cap_style == "projecting_square" else 0.0
            polygon = self._segment_polygon(p1, p2, half, extend)
            cv2.fillConvexPoly(self.image, polygon, color, cv2.LINE_AA)

            if self.cap_style == "round":
                radius = int(round(half))
                for end_point in (p1, p2):
                    center = tuple(int(v) for v in np.round(end_point))
                    cv2.circle(self.image, center, radius, color, -1, cv2.LINE_AA)

    @staticmethod
    def _segment_polygon(p1: np.ndarray, p2: np.ndarray, half: float, extend: float) -> np.ndarray:
        """Corners of the rectangle covering a stroked segment.

        ``extend`` pushes both ends outwards along the segment (square caps).
        """
        direction = p2 - p1
        length = float(np.hypot(direction[0], direction[1]))
        unit = direction / length if length > 0 else np.array([1.0, 0.0])
        normal = np.array([-unit[1], unit[0]])

        start = p1 - unit * extend
        end = p2 + unit * extend
        corners = np.array(
            [
                start + normal * half,
                end + normal * half,
                end - normal * half,
                start - normal * half,
            ]
        )
        return np.round(corners).astype(np.int32)

    # ==================== Text ====================

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
        scale = size / self.config.font_pixel_height
        min_scale = self.config.min_font_size / self.config.font_pixel_height
        (text_w, text_h), baseline = cv2.getTextSize(text, FONT, scale, 1)

        if shrink:
            while text_w > width and scale > min_scale:
                scale = max(min_scale, scale * 0.9)
                (text_w, text_h), baseline = cv2.getTextSize(text, FONT, scale, 1)
            if text_w > width:
                logger.debug(f"Text {text!r} is wider than its box at the minimum size")

        if align == "left":
            x = at[0]
        elif align == "center":
            x = at[0] + (width - text_w) / 2
        else:
            x = at[0] + width - text_w

        # y of the text baseline, in surface coordinates
        if valign == "top":
            y = at[1] - text_h
        elif valign == "center":
            y = at[1] - (height + text_h) / 2
        else:
            y = at[1] - height + baseline

        origin = tuple(int(v) for v in np.round(self._to_pixel((x, y))))
        cv2.putText(self.image, text, origin, FONT, scale, hex_to_rgb(self.fill_color), 1, cv2.LINE_AA)

    # ==================== Output ====================

    def _save(self, path: Path) -> None:
        if path.suffix.lower() not in DEFAULT_LAYOUT.IMAGE_OUTPUT_FORMATS:
            raise UnsupportedFormatError(
                f"Unsupported image format: {path.suffix}. "
                f"Supported formats: {', '.join(DEFAULT_LAYOUT.IMAGE_OUTPUT_FORMATS)}"
            )
        path.parent.mkdir(parents=True, exist_ok=True)
        # Convert RGB to BGR for cv2.imwrite
        ok = cv2.imwrite(str(path), cv2.cvtColor(self.image, cv2.COLOR_RGB2BGR))
        if not ok:
            raise SurfaceError(f"Failed to write image: {path}")
