"""
Layout configuration for chart drawing.

Centralizes all magic numbers used when placing text and marks.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class ChartLayoutConfig:
    """
    Configuration for chart layout.

    All values are in points (1/72 inch) on the drawing surface
    unless otherwise noted.
    """

    # ==================== Text Elements ====================
    # Labels, categories and legend entries share one font size
    FONT_SIZE: int = 8
    TEXT_VALIGN: str = "center"
    TEXT_OVERFLOW: str = "shrink_to_fit"

    # ==================== Spacing ====================
    PADDING: int = 5  # Horizontal padding between elements
    LEGEND_HEIGHT: int = 15  # Strip reserved above the plot
    LEGEND_SWATCH_WIDTH: int = 10  # Sample line drawn before a series name
    AXIS_LABEL_WIDTH: int = 40  # Column reserved left of the plot for value labels

    # ==================== Gridlines ====================
    GRIDLINE_WIDTH: float = 0.5
    BASELINE_WIDTH: float = 1.0

    # ==================== Supported Values ====================
    VALID_VALUE_FORMATS: tuple = ('integer', 'float', 'percentage', 'currency', 'seconds')
    IMAGE_OUTPUT_FORMATS: tuple = ('.png', '.jpg', '.jpeg', '.bmp')
    VECTOR_OUTPUT_FORMATS: tuple = ('.pdf', '.svg')

    @property
    def SUPPORTED_OUTPUT_FORMATS(self) -> tuple:
        return self.IMAGE_OUTPUT_FORMATS + self.VECTOR_OUTPUT_FORMATS


# Default configuration instance
DEFAULT_LAYOUT = ChartLayoutConfig()
