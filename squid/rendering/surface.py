"""Drawing surface contract and the behaviour shared by concrete surfaces.

Coordinates are PDF-like: the origin is the bottom-left corner, y grows
upwards and units are points. ``text_box(at=...)`` takes the top-left
corner of the box.
"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional, Protocol, Tuple, runtime_checkable

from .surface_config import SurfaceConfig, UnsupportedStyleError


logger = logging.getLogger(__name__)

Point = Tuple[float, float]
Segment = Tuple[Point, Point]

CAP_STYLES = ("butt", "round", "projecting_square")
ALIGNMENTS = ("left", "center", "right")
VERTICAL_ALIGNMENTS = ("top", "center", "bottom")
OVERFLOWS = ("truncate", "shrink_to_fit")

HEX_COLOR = re.compile(r"^[0-9a-fA-F]{6}$")


def hex_to_rgb(color: str) -> Tuple[int, int, int]:
    """``"ff8000"`` -> ``(255, 128, 0)``."""
    if not isinstance(color, str) or not HEX_COLOR.match(color):
        raise UnsupportedStyleError(f"Invalid hex colour: {color!r}")
    return (int(color[0:2], 16), int(color[2:4], 16), int(color[4:6], 16))


@runtime_checkable
class DrawingSurface(Protocol):
    """Capabilities the charts use on the surface they draw on."""

    width: float
    height: float
    cap_style: str
    line_width: float
    stroke_color: str
    fill_color: str

    def line(self, start: Point, end: Point) -> None: ...

    def stroke(self) -> None: ...

    def discard_path(self) -> None: ...

    def text_box(
        self,
        text: str,
        *,
        at: Point,
        width: float,
        height: float,
        align: str = "left",
        valign: str = "top",
        overflow: str = "truncate",
        size: Optional[float] = None,
    ) -> None: ...


class BaseSurface(ABC):
    """Style state, path accumulation and option checks for a surface.

    ``line`` only adds a segment to the current path; ``stroke`` paints
    every queued segment with the current style and clears the path.
    """

    def __init__(self, width: float, height: float, config: Optional[SurfaceConfig] = None) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Surface size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.config = config or SurfaceConfig()
        self._path: List[Segment] = []

        self.cap_style = self.config.cap_style
        self.line_width = self.config.line_width
        self.stroke_color = self.config.stroke_color
        self.fill_color = self.config.fill_color

    # ==================== Style properties ====================

    @property
    def cap_style(self) -> str:
        return self._cap_style

    @cap_style.setter
    def cap_style(self, value: str) -> None:
        if value not in CAP_STYLES:
            raise UnsupportedStyleError(
                f"Unsupported cap style: {value!r}. Must be one of: {', '.join(CAP_STYLES)}"
            )
        self._cap_style = value

    @property
    def line_width(self) -> float:
        return self._line_width

    @line_width.setter
    def line_width(self, value: float) -> None:
        if value is None or value < 0:
            raise UnsupportedStyleError(f"line_width must be >= 0, got {value!r}")
        self._line_width = float(value)

    @property
    def stroke_color(self) -> str:
        return self._stroke_color

    @stroke_color.setter
    def stroke_color(self, value: str) -> None:
        hex_to_rgb(value)
        self._stroke_color = value.lower()

    @property
    def fill_color(self) -> str:
        return self._fill_color

    @fill_color.setter
    def fill_color(self, value: str) -> None:
        hex_to_rgb(value)
        self._fill_color = value.lower()

    # ==================== Paths ====================

    def line(self, start: Point, end: Point) -> None:
        """Adds a straight segment from ``start`` to ``end`` to the current path."""
        self._path.append(((float(start[0]), float(start[1])), (float(end[0]), float(end[1]))))

    def stroke(self) -> None:
        """Paints the current path with the current style, then clears it."""
        segments, self._path = self._path, []
        if not segments or self.line_width == 0:
            return
        logger.debug(
            f"Stroking {len(segments)} segment(s), width={self.line_width}, "
            f"cap={self.cap_style}, color={self.stroke_color}"
        )
        self._stroke_segments(segments)

    def discard_path(self) -> None:
        """Drops the current path without painting it."""
        if self._path:
            logger.debug(f"Discarding {len(self._path)} unstroked segment(s)")
        self._path = []

    # ==================== Text ====================

    def text_box(
        self,
        text: str,
        *,
        at: Point,
        width: float,
        height: float,
        align: str = "left",
        valign: str = "top",
        overflow: str = "truncate",
        size: Optional[float] = None,
    ) -> None:
        """Draws ``text`` inside the box whose top-left corner is ``at``."""
        if align not in ALIGNMENTS:
            raise UnsupportedStyleError(f"Unsupported align: {align!r}")
        if valign not in VERTICAL_ALIGNMENTS:
            raise UnsupportedStyleError(f"Unsupported valign: {valign!r}")
        if overflow not in OVERFLOWS:
            raise UnsupportedStyleError(f"Unsupported overflow: {overflow!r}")
        if not text:
            return
        self._draw_text(
            str(text),
            at=(float(at[0]), float(at[1])),
            width=float(width),
            height=float(height),
            align=align,
            valign=valign,
            shrink=overflow == "shrink_to_fit",
            size=float(size) if size else 12.0,
        )

    # ==================== Output ====================

    def save(self, path) -> Path:
        """Writes the surface to ``path``; the format follows the extension."""
        path = Path(path)
        self._save(path)
        logger.info(f"Saved {type(self).__name__} to {path}")
        return path

    @abstractmethod
    def _stroke_segments(self, segments: List[Segment]) -> None:
        pass

    @abstractmethod
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
        pass

    @abstractmethod
    def _save(self, path: Path) -> None:
        pass
