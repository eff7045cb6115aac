"""
Ear clipping with reflex vertex tracking.

Key insight: a vertex v is a valid ear iff
1. v is convex relative to the polygon's global orientation, and
2. no REFLEX vertex lies strictly inside triangle(v.prev, v, v.next).

Only reflex vertices can block an ear, so the interior test scans the reflex
set instead of the whole ring. After each clip only the two exposed
neighbours are reclassified.

The consistency check compares the sum of the clipped triangle areas with
the integrated polygon area. In fixed point mode both are exact integers
and must match bit for bit.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List, NamedTuple, Optional, Set, Tuple

from .config import Arithmetic, current_arithmetic
from .errors import ConsistencyError
from .la2d import Num, Point, inside_triangle, triangle_area
from .polygon import Polygon

log = logging.getLogger(__name__)


class Triangle(NamedTuple):
    """A clipped ear: tip plus its two neighbours at clipping time."""
    tip: int
    a: Point
    b: Point
    c: Point
    area: Num  # doubled, signed

    @property
    def points(self) -> Tuple[Point, Point, Point]:
        return (self.a, self.b, self.c)


class EarClipper:
    """
    One-shot triangulation of a single polygon.

    Data structures:
    - polygon: circular linked ring of remaining vertices
    - reflex: indices of vertices that are not currently convex
    - eartips: indices of convex vertices whose triangle holds no reflex vertex
    """

    def __init__(self, points: Iterable, arithmetic: Optional[Arithmetic] = None):
        self.arithmetic = arithmetic or current_arithmetic()
        self.polygon = Polygon(points)

        self.eartips: Set[int] = set()
        self.reflex: Set[int] = set()
        self.triangles: List[Triangle] = []
        self.degenerate: List[int] = []

        self.area_from_integral: Num = self.polygon.integrate()
        self.area_from_triangulation: Num = 0

        self._find_reflex_and_eartips()
        log.info("Polygon with %d vertices (%s point): %d reflex, %d ear tips",
                 len(self.polygon), self.arithmetic.name, len(self.reflex),
                 len(self.eartips))

    def _area(self, a: Point, b: Point, c: Point) -> Num:
        return triangle_area(a, b, c, self.arithmetic.epsilon)

    def _local_area(self, idx: int) -> Num:
        poly = self.polygon
        return self._area(poly.point(poly.prev(idx)), poly.point(idx),
                          poly.point(poly.next(idx)))

    def is_convex(self, idx: int) -> bool:
        """Nonzero local area with the same sign as the whole polygon."""
        area = self._local_area(idx)
        return area != 0 and (area > 0) == (self.area_from_integral > 0)

    def is_ear(self, idx: int) -> bool:
        """No reflex vertex strictly inside triangle(prev, idx, next).

        Only meaningful for convex vertices.
        """
        poly = self.polygon
        p0 = poly.point(poly.prev(idx))
        p1 = poly.point(idx)
        p2 = poly.point(poly.next(idx))
        eps = self.arithmetic.epsilon
        for r in self.reflex:
            if inside_triangle(poly.point(r), p0, p1, p2, eps):
                return False
        return True

    def _find_reflex_and_eartips(self) -> None:
        for idx in self.polygon:
            if self.is_convex(idx):
                self.eartips.add(idx)  # not an ear yet
            else:
                # includes the middle point of a degenerate triangle
                self.reflex.add(idx)

        # filter out non ear tips from the convex points
        self.eartips = {idx for idx in self.eartips if self.is_ear(idx)}

    def _update_neighbour(self, idx: int) -> None:
        if self.is_convex(idx):
            self.reflex.discard(idx)
            if self.is_ear(idx):
                self.eartips.add(idx)
            else:
                self.eartips.discard(idx)
        elif self._local_area(idx) != 0 and idx in self.eartips:
            # orientation flipped: a reflex vertex now, not an ear
            self.eartips.discard(idx)
            self.reflex.add(idx)
        # a zero-area ear tip stays put and is consumed as a degenerate ear

    @property
    def done(self) -> bool:
        return not self.eartips or len(self.polygon) < 3

    def clip_next(self) -> Optional[Triangle]:
        """Clip one ear tip.

        Returns the clipped triangle (``area == 0`` for a degenerate ear) or
        None once no ear tip is left or fewer than 3 vertices remain. A ring
        left without ear tips is not rescanned; ``check_consistency`` reports
        the area it still holds.
        """
        if self.done:
            return None

        poly = self.polygon
        p1 = min(self.eartips)
        p0 = poly.prev(p1)
        p2 = poly.next(p1)
        area = self._local_area(p1)
        if area != 0 and not self.is_convex(p1):
            raise ConsistencyError(f"Ear tip {p1} is not convex (area {area})")

        tri = Triangle(p1, poly.point(p0), poly.point(p1), poly.point(p2), area)
        if area:
            self.area_from_triangulation += area
            self.triangles.append(tri)
            log.debug("Clipped ear %d: (%d, %d, %d) area %s",
                      p1, p0, p1, p2, area)
        else:
            self.degenerate.append(p1)
            log.debug("Consumed degenerate ear %d: (%d, %d, %d)", p1, p0, p1, p2)

        self.eartips.discard(p1)
        poly.remove(p1)
        for p in (p0, p2):
            self._update_neighbour(p)
        return tri

    def check_consistency(self) -> None:
        diff = abs(self.area_from_triangulation - self.area_from_integral)
        tol = self.arithmetic.tolerance(self.area_from_integral)
        # NaN never compares, so test for the good case
        if not diff <= tol:
            raise ConsistencyError(
                f"area_from_triangulation {self.area_from_triangulation} != "
                f"area_from_integral {self.area_from_integral} "
                f"(difference {diff}, tolerance {tol}, "
                f"{len(self.polygon)} vertices left)")

    def run(self, emit: Optional[Callable[[Triangle], None]] = None) -> List[Triangle]:
        """Clip until done, then check the areas reconcile.

        ``emit`` is called with each non-degenerate triangle as it is clipped.
        """
        while True:
            tri = self.clip_next()
            if tri is None:
                break
            if tri.area and emit is not None:
                emit(tri)

        self.check_consistency()
        log.info("Triangulated into %d triangles (%d degenerate ears), "
                 "area %.10f", len(self.triangles), len(self.degenerate),
                 self.arithmetic.descale_area(self.area_from_triangulation))
        return self.triangles

    __call__ = run


def triangulate(coords: Iterable[Tuple[float, float]],
                arithmetic: Optional[Arithmetic] = None,
                emit: Optional[Callable[[Triangle], None]] = None) -> EarClipper:
    """Scale raw coordinates to the arithmetic mode and triangulate them."""
    arithmetic = arithmetic or current_arithmetic()
    clipper = EarClipper(arithmetic.to_points(coords), arithmetic)
    clipper.run(emit)
    return clipper
