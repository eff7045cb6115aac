#!/usr/bin/env python3
"""
Deterministic polygon families for tests and benchmarks.

All builders return raw (unscaled) counter-clockwise coordinates. The file
format written by ``main`` is one ``x,y`` record per line.
"""

from __future__ import annotations

import argparse
import logging
import math
import random
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

from .fileio import write_polygon

log = logging.getLogger(__name__)

Coords = List[Tuple[float, float]]

# Deterministic rotation to avoid axis-aligned degeneracies in saved files.
ROT_ANGLE = 0.123456789


def rotate_points(points: Coords, angle_rad: float) -> Coords:
    ca = math.cos(angle_rad)
    sa = math.sin(angle_rad)
    return [(ca * x - sa * y, sa * x + ca * y) for (x, y) in points]


def convex_polygon(n: int, radius: float = 100.0) -> Coords:
    return [
        (radius * math.cos(2 * math.pi * i / n),
         radius * math.sin(2 * math.pi * i / n))
        for i in range(n)
    ]


def random_polygon(n: int, radius: float = 100.0, seed: int = 42) -> Coords:
    """Star-shaped polygon with random angles and radii (always simple)."""
    rng = random.Random(seed + n)
    angles = sorted(rng.random() * 2 * math.pi for _ in range(n))
    points = []
    for angle in angles:
        r = radius * (0.4 + 0.6 * rng.random())
        points.append((r * math.cos(angle), r * math.sin(angle)))
    return points


def star_polygon(n_pairs: int, outer: float = 100.0, inner: float = 30.0) -> Coords:
    points = []
    for i in range(2 * n_pairs):
        angle = math.pi * i / n_pairs
        r = outer if i % 2 == 0 else inner
        points.append((r * math.cos(angle), r * math.sin(angle)))
    return points


def l_shape() -> Coords:
    """Axis-aligned L. Its collinear corners defeat lowest-index clipping."""
    return [(0, 0), (2, 0), (2, 1), (1, 1), (1, 2), (0, 2)]


def arrow_shape() -> Coords:
    """Arrow head pointing right, one reflex vertex at (1, 2)."""
    return [(0, 0), (4, 2), (0, 4), (1, 2)]


def comb_polygon(teeth: int) -> Coords:
    """Comb with triangular teeth on top of a bar: one reflex vertex per gap."""
    pts = [(0, 0), (teeth * 2, 0)]
    for i in range(teeth - 1, -1, -1):
        x = i * 2 + 1
        pts.append((x + 1, 1))
        pts.append((x, 2))
    pts.append((0, 1))
    return pts


def square_disk(outer: float = 10.0, inner_lo: float = 3.0, inner_hi: float = 7.0) -> Coords:
    """Square with a square hole, joined by a zero-width seam.

    The ring walks the outer boundary counter-clockwise back to the corner,
    crosses the seam to the hole, walks the hole clockwise and returns along
    the seam, so the seam edges coincide with opposite directions.
    """
    return [
        (0, 0), (outer, 0), (outer, outer), (0, outer), (0, 0),
        (inner_lo, inner_lo), (inner_lo, inner_hi), (inner_hi, inner_hi),
        (inner_hi, inner_lo), (inner_lo, inner_lo),
    ]


FAMILIES: Dict[str, Callable[[int], Coords]] = {
    'convex': convex_polygon,
    'random': random_polygon,
    'star': lambda n: star_polygon(max(3, n // 2)),
    'comb': lambda n: comb_polygon(max(1, (n - 3) // 2)),
}


def generate(family: str, n: int, rotate: bool = True) -> Coords:
    if family not in FAMILIES:
        raise ValueError(f"Unknown polygon family {family!r}, "
                         f"expected one of {sorted(FAMILIES)}")
    pts = FAMILIES[family](n)
    return rotate_points(pts, ROT_ANGLE) if rotate else pts


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Generate deterministic polygon datasets (x,y per line)")
    parser.add_argument("--output", default="polygons/generated", type=Path)
    parser.add_argument("--families", nargs="+", default=sorted(FAMILIES),
                        choices=sorted(FAMILIES))
    parser.add_argument("--sizes", nargs="+", type=int,
                        default=[10, 50, 100, 500, 1000])
    args = parser.parse_args(argv)

    for n in args.sizes:
        for family in args.families:
            path = args.output / f"{family}_{n}.csv"
            write_polygon(generate(family, n), path)
            log.info("Wrote %s", path)

    print(f"Generated polygons in {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
