"""
Independent checks of a finished triangulation.

Checks:
 - triangle count + degenerate ears == n - 2
 - no degenerate triangles among the emitted ones
 - area preservation: sum of triangle areas == polygon area
 - every triangle lies within the polygon's bounding box

Works on descaled float coordinates, so it does not share any code path with
the exact predicates it is meant to cross-check.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

from .earclipper import EarClipper

EPS = 1e-12


def polygon_area(pts: np.ndarray) -> float:
    """Signed area of a polygon given as an (N, 2) array (shoelace)."""
    x = pts[:, 0]
    y = pts[:, 1]
    return 0.5 * float(np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))


def triangle_areas(tris: np.ndarray) -> np.ndarray:
    """Signed areas of an (M, 3, 2) array of triangles."""
    a = tris[:, 0, :]
    b = tris[:, 1, :]
    c = tris[:, 2, :]
    return 0.5 * ((b[:, 0] - a[:, 0]) * (c[:, 1] - a[:, 1])
                  - (b[:, 1] - a[:, 1]) * (c[:, 0] - a[:, 0]))


def as_arrays(clipper: EarClipper) -> Tuple[np.ndarray, np.ndarray]:
    """Descaled (N, 2) polygon and (M, 3, 2) triangle arrays of a clipper."""
    scale = float(clipper.arithmetic.scale)
    pts = np.array([v.point for v in clipper.polygon.vertices], dtype=float) / scale
    if clipper.triangles:
        tris = np.array([t.points for t in clipper.triangles], dtype=float) / scale
    else:
        tris = np.empty((0, 3, 2))
    return pts, tris


def verify_triangulation(pts: np.ndarray, tris: np.ndarray, degenerate: int = 0,
                         rtol: float = 1e-6) -> Tuple[bool, str]:
    """Verify a triangulation of ``pts`` (closing duplicate already dropped)."""
    n = len(pts)

    expected = n - 2
    if len(tris) + degenerate != expected:
        return False, f"Wrong count: {len(tris)} + {degenerate} degenerate != {expected}"

    if len(tris) == 0:
        return True, "OK"

    areas = triangle_areas(tris)
    bad = np.flatnonzero(np.abs(areas) < EPS)
    if bad.size:
        return False, f"Degenerate triangle: {bad[0]}"

    lo = pts.min(axis=0) - EPS
    hi = pts.max(axis=0) + EPS
    flat = tris.reshape(-1, 2)
    if np.any(flat < lo) or np.any(flat > hi):
        return False, "Triangle vertex outside the polygon bounding box"

    poly_a = polygon_area(pts)
    tri_a = float(np.sum(areas))
    if abs(poly_a - tri_a) > rtol * max(1.0, abs(poly_a)):
        return False, f"Area mismatch: {poly_a:.6f} vs {tri_a:.6f}"

    return True, "OK"


def verify_clipper(clipper: EarClipper, rtol: float = 1e-6) -> Tuple[bool, str]:
    pts, tris = as_arrays(clipper)
    return verify_triangulation(pts, tris, len(clipper.degenerate), rtol)

