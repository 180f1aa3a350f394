# squid/rendering/surface_config.py
"""
Configuration and errors for drawing surfaces.
"""
from dataclasses import dataclass


# ==================== CUSTOM EXCEPTIONS ====================

class SurfaceError(Exception):
    """Base exception for drawing surface failures"""
    pass


class UnsupportedStyleError(SurfaceError, ValueError):
    """Raised when a style property or text option gets an unsupported value"""
    pass


class UnsupportedFormatError(SurfaceError):
    """Raised when a surface cannot save to the requested file format"""
    pass


# ==================== CONFIGURATION CLASS ====================

@dataclass
class SurfaceConfig:
    """
    Initial state of a drawing surface.

    Attributes:
        background: Hex colour the canvas starts filled with
        stroke_color: Initial hex colour for lines
        fill_color: Initial hex colour for text
        line_width: Initial stroke width in points
        cap_style: Initial cap style (butt, round, projecting_square)

        dpi: Resolution used when a vector surface saves to a raster format
        font_pixel_height: Pixel height of OpenCV's Hershey font at scale 1.0,
            used to convert point sizes to ``cv2.putText`` scales
        min_font_size: Smallest size ``shrink_to_fit`` may shrink text to
    """

    background: str = "ffffff"
    stroke_color: str = "000000"
    fill_color: str = "000000"
    line_width: float = 1.0
    cap_style: str = "butt"

    dpi: int = 150
    font_pixel_height: float = 22.0
    min_font_size: float = 4.0
