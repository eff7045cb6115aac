"""
Circular doubly linked polygon over an arena of vertex records.

Vertices are addressed by their original index. Removal only unlinks the
record and flags it, so indices held elsewhere (reflex set, ear-tip set)
stay valid for every vertex that is still in the ring.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence

from .errors import PolygonTooSmallError
from .la2d import Num, Point


@dataclass
class Vertex:
    point: Point
    idx: int
    prev: int
    next: int
    removed: bool = False


class Polygon:

    def __init__(self, points: Iterable[Sequence[Num]]):
        pts = [p if isinstance(p, Point) else Point(*p) for p in points]

        # Given last point = first: drop it so next() wraps without a repeat
        if len(pts) > 1 and pts[0] == pts[-1]:
            pts.pop()

        if len(pts) < 3:
            raise PolygonTooSmallError(
                f"A polygon needs at least 3 vertices, got {len(pts)}")

        n = len(pts)
        self.vertices: List[Vertex] = [
            Vertex(p, i, (i - 1) % n, (i + 1) % n) for i, p in enumerate(pts)
        ]
        self.head = 0
        self.size = n

    def __len__(self) -> int:
        return self.size

    def __contains__(self, idx: int) -> bool:
        return 0 <= idx < len(self.vertices) and not self.vertices[idx].removed

    def __iter__(self) -> Iterator[int]:
        """Walk the remaining vertex indices once, starting at the head."""
        if self.size == 0:
            return
        i = self.head
        while True:
            yield i
            i = self.vertices[i].next
            if i == self.head:
                break

    def point(self, idx: int) -> Point:
        return self.vertices[idx].point

    def points(self) -> List[Point]:
        return [self.vertices[i].point for i in self]

    def next(self, idx: int) -> int:
        return self.vertices[idx].next

    def prev(self, idx: int) -> int:
        return self.vertices[idx].prev

    def remove(self, idx: int) -> None:
        """Unlink vertex idx in O(1). Its neighbours now skip over it."""
        v = self.vertices[idx]
        if v.removed:
            raise KeyError(f"Vertex {idx} was already removed")

        self.vertices[v.prev].next = v.next
        self.vertices[v.next].prev = v.prev
        v.removed = True
        self.size -= 1

        if self.head == idx:
            self.head = v.next if self.size else -1

    def integrate(self) -> Num:
        """Total signed area from integrating the piecewise linear boundary.

        Doubled, and negated so that a counter-clockwise polygon is positive.
        """
        total = 0
        if self.size >= 3:
            for i in self:
                p0 = self.vertices[i].point
                p1 = self.vertices[self.vertices[i].next].point
                total += (p0.y + p1.y) * (p1.x - p0.x)
        return -total
