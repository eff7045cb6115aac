"""
Arithmetic mode. Fixed point scales every coordinate by 10,000,000 and keeps
it as a Python int (0.1 um precision for typical PCB outlines), so all areas
and predicates are exact. Floating point keeps doubles and snaps tiny areas
to zero with ``epsilon``.

The mode is chosen once per process before any computation.
"""

from dataclasses import dataclass
from typing import Iterable, List, Tuple

from .la2d import Num, Point

FIXED_POINT_SCALE = 10_000_000
FLOATING_POINT_EPSILON = 1e-8


@dataclass(frozen=True)
class Arithmetic:
    fixed_point: bool = True

    @property
    def scale(self) -> int:
        return FIXED_POINT_SCALE if self.fixed_point else 1

    @property
    def epsilon(self) -> float:
        """Largest absolute area still considered zero."""
        return 0 if self.fixed_point else FLOATING_POINT_EPSILON

    @property
    def name(self) -> str:
        return "fixed" if self.fixed_point else "floating"

    def to_num(self, value: float) -> Num:
        if self.fixed_point:
            return round(float(value) * self.scale)
        return float(value)

    def to_point(self, x: float, y: float) -> Point:
        return Point(self.to_num(x), self.to_num(y))

    def to_points(self, coords: Iterable[Tuple[float, float]]) -> List[Point]:
        return [self.to_point(x, y) for x, y in coords]

    def descale(self, value: Num) -> float:
        return value / float(self.scale)

    def descale_area(self, area: Num) -> float:
        """Doubled signed area in scaled units -> absolute area in user units."""
        return abs(area / float(self.scale) / self.scale / 2.0)

    def tolerance(self, reference_area: Num) -> float:
        if self.fixed_point:
            return 0
        return self.epsilon * max(1.0, abs(reference_area))


FIXED_POINT = Arithmetic(fixed_point=True)
FLOATING_POINT = Arithmetic(fixed_point=False)

_current = FIXED_POINT


def use_fixed_point_arithmetic(flag: bool = True) -> Arithmetic:
    """Select the process-wide arithmetic mode and return it."""
    global _current
    _current = FIXED_POINT if flag else FLOATING_POINT
    return _current


def current_arithmetic() -> Arithmetic:
    return _current
