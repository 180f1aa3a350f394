"""
Sample line chart generator for squid.

Usage (from the project root):
    python -m scripts.generate_samples

Renders 50 random line charts and saves:
- Images: data/samples/chart_0001.png, ...
- JSON:   data/samples/annotations.json
"""

from __future__ import annotations

import json
import random
import sys
from pathlib import Path
from typing import Any, Dict, List

import numpy as np

from squid.charts.graph import chart
from squid.config import DEFAULT_LAYOUT
from squid.rendering import ImageSurface


PROJECT_ROOT = Path(__file__).resolve().parents[1]
SAMPLE_DIR = PROJECT_ROOT / "data" / "samples"
ANNOTATION_FILE = SAMPLE_DIR / "annotations.json"


SERIES_NAMES = [
    "Views",
    "Sales",
    "Revenue",
    "Visits",
    "Signups",
    "Session length",
]

MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]


def _make_series(num_points: int) -> Dict[str, Dict[str, float]]:
    """Random series sharing the same run of month categories."""
    start = random.randint(0, len(MONTHS) - num_points)
    categories = MONTHS[start : start + num_points]
    names = random.sample(SERIES_NAMES, k=random.randint(1, 3))

    series = {}
    for name in names:
        values = np.random.uniform(low=-20.0, high=100.0, size=num_points).round(2).tolist()
        series[name] = dict(zip(categories, values))
    return series


def _generate_single_chart(index: int, total: int) -> Dict[str, Any]:
    """
    Render one chart and return its metadata.

    May raise; the caller catches and records the error.
    """
    num_points = random.randint(3, 12)
    series = _make_series(num_points)
    options = {
        "format": random.choice(DEFAULT_LAYOUT.VALID_VALUE_FORMATS),
        "line_width": random.choice([1, 2, 3, 4]),
        "labels": bool(random.getrandbits(1)),
        "gridlines": bool(random.getrandbits(1)),
    }

    filename = f"chart_{index:04d}.png"
    image_path = SAMPLE_DIR / filename

    surface = ImageSurface(600, 300)
    chart(surface, series, **options)
    surface.save(image_path)

    print(f"[{index}/{total}] Generated {filename}", flush=True)

    return {
        "image": filename,
        "series": series,
        "options": options,
    }


def generate_samples(num_charts: int = 50) -> None:
    """Render ``num_charts`` random charts into SAMPLE_DIR."""
    SAMPLE_DIR.mkdir(parents=True, exist_ok=True)

    annotations: List[Dict[str, Any]] = []
    errors: List[str] = []

    print(f"Generating {num_charts} line charts into {SAMPLE_DIR} ...")

    for i in range(1, num_charts + 1):
        try:
            annotations.append(_generate_single_chart(i, num_charts))
        except Exception as exc:  # noqa: BLE001
            msg = f"Error generating chart {i}: {exc}"
            errors.append(msg)
            print(msg, file=sys.stderr, flush=True)

    with ANNOTATION_FILE.open("w", encoding="utf-8") as f:
        json.dump(annotations, f, indent=2, ensure_ascii=False)
    print(f"\nSaved annotations to {ANNOTATION_FILE}")

    if errors:
        print(f"\nCompleted with {len(errors)} error(s). See stderr for details.")
    else:
        print("\nCompleted without errors.")


def main(argv: List[str] | None = None) -> int:
    """Entry point for the CLI."""
    _ = argv
    generate_samples(num_charts=50)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
