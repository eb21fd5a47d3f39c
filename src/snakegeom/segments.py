"""
Line and arc segments and their pairwise intersection.

Both kinds derive from :class:`Segment`, whose :meth:`Segment.intersect`
resolves the concrete kind of the other operand and calls the matching
``intersect_line`` / ``intersect_arc`` method. Every intersection method
returns the intersection point as a :class:`Vec`, or ``None`` when the two
segments do not meet.
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from .constants import EPSILON, TAU
from .geometry import Interval, Vec


class Segment(ABC):
    """Base class of the closed set of segment kinds, :class:`Line` and :class:`Arc`."""

    @property
    @abstractmethod
    def start_point(self) -> Vec:
        ...

    @property
    @abstractmethod
    def end_point(self) -> Vec:
        ...

    @abstractmethod
    def intersect_line(self, o: "Line", eps: float = EPSILON) -> Optional[Vec]:
        ...

    @abstractmethod
    def intersect_arc(self, o: "Arc", eps: float = EPSILON) -> Optional[Vec]:
        ...

    def intersect(self, o: "Segment", eps: float = EPSILON) -> Optional[Vec]:
        """
        Intersects this segment with a segment of either kind.

        Args:
            o: The other segment.
            eps: Absolute tolerance for the comparisons.

        Returns:
            The intersection point, or None if the segments do not meet.

        Raises:
            TypeError: If ``o`` is not a Line or an Arc.
        """
        if isinstance(o, Line):
            return self.intersect_line(o, eps)
        elif isinstance(o, Arc):
            return self.intersect_arc(o, eps)
        raise TypeError(f"unexpected segment type: {type(o).__name__}")


def intersect(a: Segment, b: Segment, eps: float = EPSILON) -> Optional[Vec]:
    """Functional form of :meth:`Segment.intersect`."""
    if not isinstance(a, Segment):
        raise TypeError(f"unexpected segment type: {type(a).__name__}")
    return a.intersect(b, eps)


@dataclass(frozen=True)
class Line(Segment):
    """The closed straight segment between ``a`` and ``b``."""
    a: Vec
    b: Vec

    @property
    def start_point(self) -> Vec:
        return self.a

    @property
    def end_point(self) -> Vec:
        return self.b

    def dimensions(self) -> Vec:
        """Direction vector ``b - a``."""
        return self.b.minus(self.a)

    def length(self) -> float:
        return self.dimensions().length()

    def midpoint(self) -> Vec:
        return self.a.plus(self.dimensions().multiply(0.5))

    def cross_product(self) -> float:
        """Signed-area term ``b x a``; equals ``n . a`` for the normal ``n = (-dy, dx)``."""
        return self.b.cross_product(self.a)

    def contains_point(self, p: Vec, eps: float = EPSILON) -> bool:
        # p is on the segment iff the detour through p costs nothing
        return abs(self.a.distance(p) + self.b.distance(p) - self.length()) <= eps

    def intersect_line(self, o: "Line", eps: float = EPSILON) -> Optional[Vec]:
        """
        Intersects two straight segments.

        A shared endpoint is reported as is. Otherwise the crossing of the two
        supporting lines is solved parametrically and accepted only if it falls
        within both segments. Parallel and collinear lines never intersect
        unless they share an endpoint.

        Args:
            o: The other line.
            eps: Tolerance for endpoint equality, parallelism and the parameter bounds.

        Returns:
            The intersection point, or None.
        """
        for p in (self.a, self.b):
            if p.isclose(o.a, eps) or p.isclose(o.b, eps):
                return p

        da, db = self.dimensions(), o.dimensions()
        c = da.cross_product(db)
        # sine of the angle between the lines, independent of their lengths
        if abs(c) <= eps * da.length() * db.length():
            return None

        dab = o.a.minus(self.a)
        t = dab.cross_product(db) / c
        u = dab.cross_product(da) / c
        if not (-eps <= t <= 1 + eps and -eps <= u <= 1 + eps):
            return None

        # mean of the estimates along each line, symmetric in the operands
        on_self = self.a.plus(da.multiply(t))
        on_other = o.a.plus(db.multiply(u))
        return on_self.plus(on_other).multiply(0.5)

    def intersect_arc(self, o: "Arc", eps: float = EPSILON) -> Optional[Vec]:
        return o.intersect_line(self, eps)


@dataclass(frozen=True)
class Arc(Segment):
    """
    A circular arc.

    Attributes:
        c: Centre of the circle.
        r: Radius, non-negative.
        s: Start angle in radians.
        d: Signed sweep in radians; the arc covers ``[min(s, s+d), max(s, s+d)]``.
    """
    c: Vec
    r: float
    s: float
    d: float

    def __post_init__(self):
        if self.r < 0:
            raise ValueError(f"Arc radius must be non-negative, got {self.r}")

    @property
    def start_point(self) -> Vec:
        return self.point(self.s)

    @property
    def end_point(self) -> Vec:
        return self.point(self.s + self.d)

    def point(self, t: float) -> Vec:
        """The point on the circle at angle ``t``."""
        return self.c.plus(Vec.from_polar(self.r, t))

    def length(self) -> float:
        return self.r * abs(self.d)

    def interval(self) -> Interval:
        """The swept angular range in ascending order, whatever the sign of ``d``."""
        return Interval(min(self.s, self.s + self.d), max(self.s + self.d, self.s))

    def contains_angle(self, t: float) -> bool:
        return self.interval().contains(t)

    def normalize_angle(self, t: float) -> float:
        """The angle equivalent to ``t`` (mod 2*pi) in ``[start, start + 2*pi)`` of the sweep."""
        start = self.interval().s
        return start + (t - start) % TAU

    def sweeps_angle(self, t: float, eps: float = EPSILON) -> bool:
        """Like :meth:`contains_angle`, but for any turn-equivalent of ``t``."""
        i = self.interval()
        tn = self.normalize_angle(t)
        return tn <= i.e + eps or tn - TAU >= i.s - eps

    def contains_point(self, p: Vec, eps: float = EPSILON) -> bool:
        if abs(self.c.distance(p) - self.r) > eps:
            return False
        return self.sweeps_angle(p.minus(self.c).angle(), eps)

    def intersect_line(self, o: Line, eps: float = EPSILON) -> Optional[Vec]:
        """
        Intersects the arc with the infinite extension of a line.

        With the line normal ``n = (-dy, dx)`` the line is ``n . x = o.cross_product()``.
        Substituting the circle gives ``cos(t - p) = (o.cross_product() - n . c) / (r |n|)``
        with ``p`` the polar angle of ``n``. The candidates ``p - q`` and ``p + q``
        (``q`` the arccosine) are tried in that order against the sweep.

        Args:
            o: The line.
            eps: Tolerance on the arccosine argument and the sweep bounds.

        Returns:
            The first intersection point inside the sweep, or None.
        """
        d = o.dimensions()
        length = d.length()
        if length <= eps or self.r <= eps:
            return None

        n = Vec(-d.y, d.x)
        k = (o.cross_product() - n.dot_product(self.c)) / (self.r * length)
        if abs(k) > 1 + eps:
            return None

        p = n.angle()
        q = math.acos(max(-1.0, min(1.0, k)))
        for t in (p - q, p + q):
            if self.sweeps_angle(t, eps):
                return self.point(t)
        return None

    def intersect_arc(self, o: "Arc", eps: float = EPSILON) -> Optional[Vec]:
        """
        Intersects two arcs.

        Cases by centre distance: too far apart, one circle enclosing the
        other, coincident circles, external tangency, and the general
        two-point crossing. A point is reported only if it lies in both sweeps.

        Args:
            o: The other arc.
            eps: Tolerance for the distance and sweep comparisons.

        Returns:
            The first intersection point found, or None.
        """
        dist = self.c.distance(o.c)
        # too far apart
        if dist > self.r + o.r + eps:
            return None
        # one circle inside the other
        if abs(self.r - o.r) > dist + eps:
            return None
        # same circle: the sweeps overlap or not
        if dist <= eps and abs(self.r - o.r) <= eps:
            return self._intersect_coincident(o)
        # a point arc has no sweep angle of its own
        if self.r <= eps:
            return self.c if o.contains_point(self.c, eps) else None
        # touching from outside
        if abs(self.r + o.r - dist) <= eps:
            pt = self.c.plus(o.c.minus(self.c).multiply(self.r / dist))
            return pt if self._in_both_sweeps(pt, o, eps) else None

        # two crossings, symmetric about the line of centres
        h = (self.r * self.r - o.r * o.r + dist * dist) / (2 * dist)
        p = math.acos(max(-1.0, min(1.0, h / self.r)))
        phi = o.c.minus(self.c).angle()
        for t in (phi - p, phi + p):
            pt = self.point(t)
            if self.sweeps_angle(t, eps) and o.sweeps_angle(pt.minus(o.c).angle(), eps):
                return pt
        return None

    def _intersect_coincident(self, o: "Arc") -> Optional[Vec]:
        i, oi = self.interval(), o.interval()
        # Try the other sweep shifted by whole turns on both sides of our start.
        shift = self.normalize_angle(oi.s) - oi.s
        for k in (shift - TAU, shift):
            overlap = i.intersect_interval(Interval(oi.s + k, oi.e + k))
            if overlap.valid():
                return self.point(overlap.s)
        return None

    def _in_both_sweeps(self, pt: Vec, o: "Arc", eps: float) -> bool:
        return (self.sweeps_angle(pt.minus(self.c).angle(), eps)
                and o.sweeps_angle(pt.minus(o.c).angle(), eps))
