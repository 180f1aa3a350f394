"""
Data types for squid charts.

Provides dataclasses for:
- DataPoint: One labeled value (``None`` marks a gap)
- Series: Ordered points drawn as one line
- ChartData: Titled collection of series sharing one category axis
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional


@dataclass
class DataPoint:
    """Single data point in a chart."""

    category: str
    value: Optional[float]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {"category": self.category, "value": self.value}


@dataclass
class Series:
    """Ordered data points drawn as one series."""

    name: str
    points: List[DataPoint] = field(default_factory=list)

    @property
    def values(self) -> List[Optional[float]]:
        """Values in category order."""
        return [point.value for point in self.points]

    @property
    def categories(self) -> List[str]:
        """Category names in order."""
        return [point.category for point in self.points]

    def value_for(self, category: str) -> Optional[float]:
        """Value for ``category``, or None when the series has no such point."""
        for point in self.points:
            if point.category == category:
                return point.value
        return None

    def to_dict(self) -> Dict[str, Optional[float]]:
        """Convert to ``{category: value}`` mapping."""
        return {point.category: point.value for point in self.points}

    @classmethod
    def from_data(cls, data: Any, name: str = "Series 1") -> "Series":
        """
        Create from a Series, a ``{category: value}`` mapping or a
        plain sequence of values (categories become "1", "2", ...).
        """
        if isinstance(data, Series):
            return data
        if isinstance(data, Mapping):
            points = [DataPoint(category=str(k), value=v) for k, v in data.items()]
        else:
            points = [DataPoint(category=str(i + 1), value=v) for i, v in enumerate(data)]
        return cls(name=name, points=points)


@dataclass
class ChartData:
    """Structured input for one chart."""

    title: Optional[str] = None
    series: List[Series] = field(default_factory=list)

    @property
    def categories(self) -> List[str]:
        """Union of all series categories, in order of first appearance."""
        seen: Dict[str, None] = {}
        for series in self.series:
            for category in series.categories:
                seen.setdefault(category, None)
        return list(seen)

    def values_for(self, series: Series) -> List[Optional[float]]:
        """Values of ``series`` aligned to ``categories`` (gaps are None)."""
        return [series.value_for(category) for category in self.categories]

    def _present_values(self) -> Iterable[float]:
        for series in self.series:
            for value in series.values:
                if value is not None:
                    yield value

    @property
    def min_value(self) -> float:
        """Smallest value across all series (0.0 when empty)."""
        return min(self._present_values(), default=0.0)

    @property
    def max_value(self) -> float:
        """Largest value across all series (0.0 when empty)."""
        return max(self._present_values(), default=0.0)

    def is_empty(self) -> bool:
        """True when no series has any category."""
        return not self.categories

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary (JSON input format)."""
        return {
            "title": self.title,
            "series": {series.name: series.to_dict() for series in self.series},
        }

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "ChartData":
        """Create from ``{"title": ..., "series": {name: {category: value}}}``."""
        series = d.get("series", {})
        if isinstance(series, Mapping):
            items = [Series.from_data(values, name=str(name)) for name, values in series.items()]
        else:
            items = [Series.from_data(values, name=f"Series {i + 1}") for i, values in enumerate(series)]
        return cls(title=d.get("title"), series=items)

    @classmethod
    def from_data(cls, data: Any) -> "ChartData":
        """
        Create from any supported input shape.

        Accepts a ChartData, a JSON-style mapping with a "series" key,
        a mapping of series name to ``{category: value}``, a single
        ``{category: value}`` mapping, a Series, or a plain sequence.
        """
        if isinstance(data, ChartData):
            return data
        if data is None or (isinstance(data, (Mapping, list, tuple)) and len(data) == 0):
            return cls()
        if isinstance(data, Series):
            return cls(series=[data])
        if isinstance(data, Mapping):
            if "series" in data:
                return cls.from_dict(data)
            if data and all(isinstance(v, Mapping) for v in data.values()):
                return cls(series=[Series.from_data(v, name=str(k)) for k, v in data.items()])
        return cls(series=[Series.from_data(data)])
