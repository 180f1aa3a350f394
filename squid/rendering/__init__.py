"""Rendering package for squid.

This package contains the drawing surface contract and two concrete
surfaces: a raster one (OpenCV) and a vector one (matplotlib).
"""
from .surface import BaseSurface, DrawingSurface, CAP_STYLES, hex_to_rgb
from .surface_config import (
    SurfaceConfig,
    SurfaceError,
    UnsupportedFormatError,
    UnsupportedStyleError,
)
from .image_surface import ImageSurface
from .figure_surface import FigureSurface

__all__ = [
    "BaseSurface",
    "DrawingSurface",
    "CAP_STYLES",
    "hex_to_rgb",
    "SurfaceConfig",
    "SurfaceError",
    "UnsupportedFormatError",
    "UnsupportedStyleError",
    "ImageSurface",
    "FigureSurface",
]
