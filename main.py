"""
squid - Line Chart Rendering

Draw line charts from JSON data into an image or a PDF.

Usage:
    python main.py <data.json> [--output chart.png] [--format integer|float|percentage|currency|seconds]

Examples:
    python main.py data/views.json
    python main.py data/views.json -o views.pdf
    python main.py data/revenue.json --format currency --labels
"""
import argparse
import json
import logging
import sys
from pathlib import Path

from squid.charts.graph import chart
from squid.config import DEFAULT_LAYOUT, ChartSettings, InvalidSettingsError
from squid.models.data_types import ChartData
from squid.rendering import FigureSurface, ImageSurface, SurfaceError


def main() -> int:
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        description="Render a line chart from JSON data",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Input format:
  {"title": "Views", "series": {"Views": {"2013": 182, "2014": 46}}, "settings": {"line_width": 2}}

Examples:
  python main.py data.json                    # Save to chart.png
  python main.py data.json -o chart.pdf       # Vector output
  python main.py data.json --format currency  # Format value labels
        """
    )
    parser.add_argument(
        "data",
        type=str,
        help="Path to JSON chart data"
    )
    parser.add_argument(
        "-o", "--output",
        type=str,
        default="chart.png",
        help="Output file (PNG, JPG, BMP, PDF, SVG; default: chart.png)"
    )
    parser.add_argument(
        "--width",
        type=int,
        default=600,
        help="Chart width in points (default: 600)"
    )
    parser.add_argument(
        "--height",
        type=int,
        default=300,
        help="Chart height in points (default: 300)"
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=list(DEFAULT_LAYOUT.VALID_VALUE_FORMATS),
        default=None,
        help="Value format for labels (default: from settings, else integer)"
    )
    parser.add_argument(
        "--labels",
        action="store_true",
        help="Draw the value of every point"
    )
    parser.add_argument(
        "--no-legend",
        action="store_true",
        help="Do not draw the legend"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log layout and drawing details"
    )

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )

    # Validate input file exists
    data_path = Path(args.data)
    if not data_path.exists():
        print(f"Error: Data file not found: {args.data}", file=sys.stderr)
        return 1

    # Validate output format
    output_path = Path(args.output)
    if output_path.suffix.lower() not in DEFAULT_LAYOUT.SUPPORTED_OUTPUT_FORMATS:
        print(
            f"Error: Unsupported output format: {output_path.suffix}\n"
            f"Supported formats: {', '.join(DEFAULT_LAYOUT.SUPPORTED_OUTPUT_FORMATS)}",
            file=sys.stderr
        )
        return 1

    # Load data and settings
    try:
        payload = json.loads(data_path.read_text(encoding="utf-8"))
        data = ChartData.from_data(payload)
        settings = ChartSettings.from_dict(payload.get("settings") if isinstance(payload, dict) else None)
    except OSError as e:
        print(f"Error: Cannot read {args.data}: {e}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as e:
        print(f"Error: {args.data} is not valid UTF-8: {e}", file=sys.stderr)
        return 1
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in {args.data}: {e}", file=sys.stderr)
        return 1
    except InvalidSettingsError as e:
        print(f"Error: Invalid settings: {e}", file=sys.stderr)
        return 1
    except (TypeError, ValueError) as e:
        print(f"Error: Invalid chart data in {args.data}: {e}", file=sys.stderr)
        return 1

    overrides = {}
    if args.format:
        overrides["format"] = args.format
    if args.labels:
        overrides["labels"] = True
    if args.no_legend:
        overrides["legend"] = False

    # Draw and save
    try:
        if output_path.suffix.lower() in DEFAULT_LAYOUT.VECTOR_OUTPUT_FORMATS:
            surface = FigureSurface(args.width, args.height)
        else:
            surface = ImageSurface(args.width, args.height)
        chart(surface, data, settings=settings, **overrides)
        surface.save(output_path)
    except (SurfaceError, ValueError, TypeError) as e:
        print(f"Error: Failed to draw chart: {e}", file=sys.stderr)
        return 1

    print(f"Chart saved to: {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
