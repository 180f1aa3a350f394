"""Chart drawing helpers on top of a drawing surface.

Typical use::

    from squid import ImageSurface, chart

    surface = ImageSurface(600, 300)
    chart(surface, {"Views": {"2013": 182, "2014": 46, "2015": 88}}, format="integer")
    surface.save("views.png")
"""
from .charts import CHART_TYPES, Graph, Line, chart
from .config import ChartSettings, DEFAULT_SETTINGS, InvalidSettingsError
from .models import ChartData, DataPoint, Series
from .rendering import FigureSurface, ImageSurface, SurfaceConfig, SurfaceError

__version__ = "0.1.0"

__all__ = [
    "CHART_TYPES",
    "Graph",
    "Line",
    "chart",
    "ChartSettings",
    "DEFAULT_SETTINGS",
    "InvalidSettingsError",
    "ChartData",
    "DataPoint",
    "Series",
    "FigureSurface",
    "ImageSurface",
    "SurfaceConfig",
    "SurfaceError",
]
