"""Charts package for squid.

This package contains the delegating base class, the chart types and
the Graph that lays them out.
"""
from .base import Base
from .chart import Chart
from .line import Line
from .graph import CHART_TYPES, Graph, chart

__all__ = [
    "Base",
    "Chart",
    "Line",
    "Graph",
    "CHART_TYPES",
    "chart",
    "number_helper",
]
