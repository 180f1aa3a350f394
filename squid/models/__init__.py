"""Models package for squid.

This package contains the data types charts are drawn from.
"""
from .data_types import (
    DataPoint,
    Series,
    ChartData,
)

__all__ = [
    "DataPoint",
    "Series",
    "ChartData",
]
