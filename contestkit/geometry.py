"""Integer plane geometry: orientation tests and segment intersection."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A point or vector with integer coordinates."""

    x: int
    y: int

    def __add__(self, other):
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Point(self.x - other.x, self.y - other.y)


def cross_product(a, b):
    """The z component of the cross product a x b."""
    return a.x * b.y - b.x * a.y


def direction(pi, pj, pk):
    """Sign of (pk - pi) x (pj - pi): 1, -1 or 0."""
    value = cross_product(pk - pi, pj - pi)
    return (value > 0) - (value < 0)


def on_segment(pi, pj, pk):
    """Whether pk lies within the bounding box of segment pi-pj."""
    return (
        min(pi.x, pj.x) <= pk.x <= max(pi.x, pj.x)
        and min(pi.y, pj.y) <= pk.y <= max(pi.y, pj.y)
    )


def segments_intersect(p1, p2, p3, p4):
    """Whether segment p1-p2 and segment p3-p4 share at least one point."""
    d1 = direction(p3, p4, p1)
    d2 = direction(p3, p4, p2)
    d3 = direction(p1, p2, p3)
    d4 = direction(p1, p2, p4)
    if d1 * d2 < 0 and d3 * d4 < 0:
        return True
    return (
        (d1 == 0 and on_segment(p3, p4, p1))
        or (d2 == 0 and on_segment(p3, p4, p2))
        or (d3 == 0 and on_segment(p1, p2, p3))
        or (d4 == 0 and on_segment(p1, p2, p4))
    )


def point_location(p1, p2, p3):
    """Where p3 lies relative to the directed line p1 -> p2: "LEFT", "RIGHT" or "TOUCH"."""
    d = direction(p1, p2, p3)
    if d == 0:
        return "TOUCH"
    return "RIGHT" if d > 0 else "LEFT"


def parallelogram_vertices(a, b, c):
    """The three points that complete a parallelogram with a, b and c."""
    return [a + b - c, a - b + c, b + c - a]