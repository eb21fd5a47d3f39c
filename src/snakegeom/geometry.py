"""
2D value types used by the segment intersection routines.

Points and free vectors are both represented by :class:`Vec`; scalar ranges,
including the normalized angular sweep of an arc, by :class:`Interval`.
"""

import math
from dataclasses import dataclass
from typing import Iterator

import numpy as np

from .constants import EPSILON


@dataclass(frozen=True)
class Vec:
    """A point or free vector in the plane."""
    x: float
    y: float

    @classmethod
    def from_complex(cls, z: complex) -> "Vec":
        return cls(z.real, z.imag)

    @classmethod
    def from_polar(cls, r: float, theta: float) -> "Vec":
        return cls(r * math.cos(theta), r * math.sin(theta))

    def to_complex(self) -> complex:
        return complex(self.x, self.y)

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=np.float64)

    def plus(self, o: "Vec") -> "Vec":
        return Vec(self.x + o.x, self.y + o.y)

    def minus(self, o: "Vec") -> "Vec":
        return Vec(self.x - o.x, self.y - o.y)

    def multiply(self, t: float) -> "Vec":
        return Vec(self.x * t, self.y * t)

    def length(self) -> float:
        """Euclidean norm."""
        return math.hypot(self.x, self.y)

    def distance(self, o: "Vec") -> float:
        return o.minus(self).length()

    def dot_product(self, o: "Vec") -> float:
        return self.x * o.x + self.y * o.y

    def cross_product(self, o: "Vec") -> float:
        """Scalar 2D cross product, ``x1*y2 - y1*x2``."""
        return self.x * o.y - self.y * o.x

    def angle(self) -> float:
        """Polar angle in ``(-pi, pi]``."""
        return math.atan2(self.y, self.x)

    def less(self, o: "Vec") -> bool:
        """
        Strict component-wise comparison.

        Both coordinates must be smaller. This is a partial order, two vectors
        can be mutually not-less, so it must not be used as a sort key.
        """
        return self.x < o.x and self.y < o.y

    def isclose(self, o: "Vec", eps: float = EPSILON) -> bool:
        return abs(self.x - o.x) <= eps and abs(self.y - o.y) <= eps

    def __add__(self, o: "Vec") -> "Vec":
        return self.plus(o)

    def __sub__(self, o: "Vec") -> "Vec":
        return self.minus(o)

    def __mul__(self, t: float) -> "Vec":
        return self.multiply(t)

    __rmul__ = __mul__

    def __neg__(self) -> "Vec":
        return Vec(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


@dataclass(frozen=True)
class Interval:
    """
    A closed scalar range ``[s, e]``.

    An interval with ``s > e`` is invalid (empty). Intersecting two disjoint
    intervals yields such an interval, so callers check :meth:`valid` before
    using the result as a real range.
    """
    s: float
    e: float

    def contains(self, t: float) -> bool:
        return self.s <= t <= self.e

    def valid(self) -> bool:
        return self.s <= self.e

    def length(self) -> float:
        return self.e - self.s

    def intersect_interval(self, o: "Interval") -> "Interval":
        return Interval(max(self.s, o.s), min(self.e, o.e))

    def overlaps(self, o: "Interval") -> bool:
        return self.intersect_interval(o).valid()

    def contains_interval(self, o: "Interval") -> bool:
        # Tests overlap, not containment.
        return self.overlaps(o)
