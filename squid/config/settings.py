# squid/config/settings.py
"""
Style settings for chart rendering.

Settings are read-only while a chart is drawn; derive a new instance with
``merged`` to change them.
"""
import re
from dataclasses import asdict, dataclass, field, fields, replace
from numbers import Real
from typing import Any, Dict, Mapping, Optional, Tuple

from .layout_config import DEFAULT_LAYOUT


HEX_COLOR = re.compile(r"^[0-9a-fA-F]{6}$")

BOOL_FIELDS = ("labels", "legend", "baseline", "gridlines", "categories")


# ==================== CUSTOM EXCEPTIONS ====================

class InvalidSettingsError(ValueError):
    """Raised when a settings mapping has unknown keys or invalid values"""
    pass


# ==================== SETTINGS CLASS ====================

@dataclass(frozen=True)
class ChartSettings:
    """
    Style settings for one chart.

    Attributes:
        type: Chart type to draw (see ``squid.charts.CHART_TYPES``)
        line_width: Stroke width for series lines, in points
        colors: Hex colours (``"rrggbb"``) cycled across series

        format: Value format for labels (integer, float, percentage,
            currency, seconds)
        labels: Draw the formatted value next to every point

        legend: Reserve a strip above the plot for series names
        baseline: Draw a line at the zero value
        gridlines: Draw horizontal gridlines with value labels
        steps: Number of intervals between gridlines
        categories: Draw category names below the plot

        baseline_color: Hex colour of the baseline
        gridline_color: Hex colour of the gridlines
    """

    type: str = "line"
    line_width: float = 3
    colors: Tuple[str, ...] = field(
        default_factory=lambda: ("2e578c", "5d9648", "e7a13d", "bc2d30", "6f3d79", "7d807f")
    )

    format: str = "integer"
    labels: bool = False

    legend: bool = True
    baseline: bool = True
    gridlines: bool = True
    steps: int = 4
    categories: bool = True

    baseline_color: str = "000000"
    gridline_color: str = "d9d9d9"

    def __post_init__(self):
        self._check_types()
        if self.format not in DEFAULT_LAYOUT.VALID_VALUE_FORMATS:
            raise InvalidSettingsError(
                f"Invalid format '{self.format}'. "
                f"Must be one of: {', '.join(DEFAULT_LAYOUT.VALID_VALUE_FORMATS)}"
            )
        if self.line_width < 0:
            raise InvalidSettingsError(f"line_width must be >= 0, got {self.line_width}")
        if self.steps < 1:
            raise InvalidSettingsError(f"steps must be >= 1, got {self.steps}")
        if not self.colors:
            raise InvalidSettingsError("colors must contain at least one colour")
        for color in (*self.colors, self.baseline_color, self.gridline_color):
            if not isinstance(color, str) or not HEX_COLOR.match(color):
                raise InvalidSettingsError(f"Invalid hex colour: {color!r}")

    def _check_types(self):
        for name in ("type", "format"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise InvalidSettingsError(f"{name} must be a string, got {value!r}")
        for name in BOOL_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise InvalidSettingsError(f"{name} must be true or false, got {value!r}")
        if isinstance(self.line_width, bool) or not isinstance(self.line_width, Real):
            raise InvalidSettingsError(f"line_width must be a number, got {self.line_width!r}")
        if isinstance(self.steps, bool) or not isinstance(self.steps, int):
            raise InvalidSettingsError(f"steps must be an integer, got {self.steps!r}")
        if not isinstance(self.colors, tuple):
            raise InvalidSettingsError(f"colors must be a list of hex colours, got {self.colors!r}")

    # ==================== CONSTRUCTION ====================

    @classmethod
    def from_dict(cls, d: Optional[Mapping[str, Any]]) -> "ChartSettings":
        """Create from a mapping, rejecting unknown keys."""
        if d is None:
            return cls()
        if not isinstance(d, Mapping):
            raise InvalidSettingsError(f"Settings must be a mapping, got {type(d).__name__}")
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(d) - known)
        if unknown:
            raise InvalidSettingsError(f"Unknown settings: {', '.join(unknown)}")
        values = dict(d)
        if isinstance(values.get("colors"), list):
            values["colors"] = tuple(values["colors"])
        return cls(**values)

    def merged(self, **overrides: Any) -> "ChartSettings":
        """Return a copy with ``overrides`` applied."""
        if isinstance(overrides.get("colors"), list):
            overrides["colors"] = tuple(overrides["colors"])
        try:
            return replace(self, **overrides)
        except TypeError as exc:
            raise InvalidSettingsError(str(exc)) from exc

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        d = asdict(self)
        d["colors"] = list(self.colors)
        return d

    def color_for(self, index: int) -> str:
        """Colour of the ``index``-th series, cycling through ``colors``."""
        return self.colors[index % len(self.colors)]


# Default settings instance
DEFAULT_SETTINGS = ChartSettings()
