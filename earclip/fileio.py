"""
Polygon files and triangle output.

Polygon files hold one ``x,y`` record per line. There is no implicit closing
record: a last record equal to the first is dropped by the polygon itself.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import Iterable, List, Optional, TextIO, Tuple, Union

import numpy as np

from .config import Arithmetic, current_arithmetic
from .errors import PolygonFormatError
from .la2d import Point

PathLike = Union[str, Path]


def read_coordinates(path: PathLike) -> np.ndarray:
    """Raw (N, 2) float array of the records in a polygon file."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise PolygonFormatError(f"Cannot read polygon file {path}: {e}") from e

    if not text.strip():
        return np.empty((0, 2))

    try:
        data = np.loadtxt(io.StringIO(text), delimiter=",", ndmin=2)
    except ValueError as e:
        raise PolygonFormatError(f"Malformed polygon file {path}: {e}") from e

    if data.size == 0:
        return np.empty((0, 2))
    if data.shape[1] != 2:
        raise PolygonFormatError(
            f"Expected 2 columns (x,y) in {path}, got {data.shape[1]}")
    if not np.isfinite(data).all():
        bad = int(np.flatnonzero(~np.isfinite(data).all(axis=1))[0])
        raise PolygonFormatError(f"Non-finite coordinate in record {bad + 1} of {path}")
    return data


def read_polygon(path: PathLike, arithmetic: Optional[Arithmetic] = None) -> List[Point]:
    """Read a polygon file and convert it to the arithmetic mode's scale."""
    arithmetic = arithmetic or current_arithmetic()
    return [arithmetic.to_point(x, y) for x, y in read_coordinates(path)]


def write_polygon(points: Iterable[Tuple[float, float]], path: PathLike) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        for x, y in points:
            # high precision so the file round trips
            f.write(f"{x:.17g},{y:.17g}\n")


def format_point(p: Point, arithmetic: Optional[Arithmetic] = None) -> str:
    arithmetic = arithmetic or current_arithmetic()
    return f"{arithmetic.descale(p.x):g},{arithmetic.descale(p.y):g}"


def write_triangle(out: TextIO, triangle, arithmetic: Optional[Arithmetic] = None) -> None:
    for p in triangle.points:
        out.write(format_point(p, arithmetic) + "\n")
    out.write("\n")


def write_report(out: TextIO, clipper) -> None:
    arithmetic = clipper.arithmetic
    out.write(f"Using {arithmetic.name} point arithmetic\n")
    out.write("area_from_integral      = "
              f"{arithmetic.descale_area(clipper.area_from_integral):.20f}\n")
    out.write("area_from_triangulation = "
              f"{arithmetic.descale_area(clipper.area_from_triangulation):.20f}\n")
