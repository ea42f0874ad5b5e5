## foundational vector and line algebra for meshCSG
## Copyright (c) 2026 meshCSG contributors

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""foundational vector and line algebra for **meshCSG**

====================
OVERVIEW
====================

The meshcsg.geom module provides the value types every other module is
built on: two and three dimensional vectors, and line segments in two
and three dimensions.

constants
=========

meshcsg.geom provides the tolerance "constants" used throughout the
package.  Most operations that depend on them accept a ``tol`` keyword
argument, so redefining the module values is rarely needed.

``epsilon``
    distance below which two points are considered the same
    (see ``vclose()``).
``RAY_TOL``
    minimum ray parameter for a ray/triangle hit to count. Hits at or
    behind the ray origin are rejected.
``PARALLEL_TOL``
    magnitude below which the Möller–Trumbore determinant is treated as
    zero, i.e. the ray is parallel to the triangle.
``CUT_TOL``
    width of the band around the 0 and 1 edge parameters that the
    triangle cutter treats as "at a corner".

vectors
=======

``Vec2`` and ``Vec3`` are immutable named tuples of floats.  They
compare and hash as ordinary tuples, so they can be used as dictionary
keys and set members, and they support the usual arithmetic: ::

   a = Vec3(1, 2, 3)
   b = Vec3(0, 0, 1)
   c = 2 * a - b
   n = a.cross(b).normalized

Normalizing a zero-length vector raises ``DegenerateGeometryError``.

lines
=====

``Line2`` and ``Line3`` are immutable ``(start, end)`` pairs.  Lines are
parameterized over ``0 <= u <= 1``, where ``u=0`` is the start point and
``u=1`` the end point.  Parameters outside that interval are still on
the (infinite) line but not inside the segment.

"""

from __future__ import annotations

import math
from typing import NamedTuple, Optional, Sequence, Tuple

## constants
epsilon = 0.000005
RAY_TOL = 1e-7
PARALLEL_TOL = 1e-12
CUT_TOL = 1e-9


class DegenerateGeometryError(ValueError):
    """Exception raised when geometry collapses, e.g. a zero-length
    vector is normalized or a triangle has no area."""

    def __init__(self, message, details=None):
        super().__init__(message)
        self.details = details or {}


## operations on scalars
## -----------------------

def isgoodnum(n):
    """ determine if an argument is actually a scalar number, and not boolean
    """
    return (not isinstance(n, bool)) and isinstance(n, (int, float))


def close(a, b, tol=epsilon):
    """ are two scalars the same within ``tol``
    """
    return abs(a - b) < tol


## vectors
## -------

class Vec2(NamedTuple):
    """Immutable two dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other):
        return Vec2(self.x + other[0], self.y + other[1])

    def __sub__(self, other):
        return Vec2(self.x - other[0], self.y - other[1])

    def __mul__(self, s):
        return Vec2(self.x * s, self.y * s)

    __rmul__ = __mul__

    def __truediv__(self, s):
        return Vec2(self.x / s, self.y / s)

    def __neg__(self):
        return Vec2(-self.x, -self.y)

    @property
    def sqr_length(self) -> float:
        return self.x * self.x + self.y * self.y

    @property
    def length(self) -> float:
        return math.sqrt(self.sqr_length)

    @property
    def normalized(self) -> 'Vec2':
        length = self.length
        if length == 0 or not math.isfinite(length):
            raise DegenerateGeometryError('zero-length vector passed to normalized',
                                          {'vector': self})
        inv = 1.0 / length
        return Vec2(self.x * inv, self.y * inv)

    @property
    def flipped(self) -> 'Vec2':
        return -self

    def dot(self, other) -> float:
        return self.x * other[0] + self.y * other[1]

    def lerp(self, other, t: float) -> 'Vec2':
        return (1 - t) * self + t * Vec2(*other)

    def distance(self, other) -> float:
        return (Vec2(*other) - self).length

    def scalar_projection_onto(self, normal) -> float:
        normal = Vec2(*normal)
        return self.dot(normal) / normal.sqr_length

    def vector_projection_onto(self, normal) -> 'Vec2':
        normal = Vec2(*normal)
        return normal * (self.dot(normal) / normal.sqr_length)

    def angle(self, other) -> float:
        other = Vec2(*other)
        return math.acos(self.dot(other) / (self.length * other.length))


class Vec3(NamedTuple):
    """Immutable three dimensional vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other):
        return Vec3(self.x + other[0], self.y + other[1], self.z + other[2])

    def __sub__(self, other):
        return Vec3(self.x - other[0], self.y - other[1], self.z - other[2])

    def __mul__(self, s):
        return Vec3(self.x * s, self.y * s, self.z * s)

    __rmul__ = __mul__

    def __truediv__(self, s):
        return Vec3(self.x / s, self.y / s, self.z / s)

    def __neg__(self):
        return Vec3(-self.x, -self.y, -self.z)

    @property
    def xy(self) -> Vec2:
        return Vec2(self.x, self.y)

    @property
    def sqr_length(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    @property
    def length(self) -> float:
        return math.sqrt(self.sqr_length)

    @property
    def normalized(self) -> 'Vec3':
        """Vector in the same direction with unit length.

        Raises ``DegenerateGeometryError`` for the zero vector.
        """
        length = self.length
        if length == 0 or not math.isfinite(length):
            raise DegenerateGeometryError('zero-length vector passed to normalized',
                                          {'vector': self})
        inv = 1.0 / length
        return Vec3(self.x * inv, self.y * inv, self.z * inv)

    @property
    def flipped(self) -> 'Vec3':
        return -self

    @property
    def abs(self) -> 'Vec3':
        return Vec3(abs(self.x), abs(self.y), abs(self.z))

    @property
    def orthogonal(self) -> 'Vec3':
        """an arbitrary vector orthogonal to this one"""
        x = abs(self.x)
        y = abs(self.y)
        z = abs(self.z)
        if x < y:
            other = Vec3.I if x < z else Vec3.K
        else:
            other = Vec3.J if y < z else Vec3.K
        return self.cross(other)

    def max_component(self) -> float:
        return max(self.x, self.y, self.z)

    def min_component(self) -> float:
        return min(self.x, self.y, self.z)

    def dot(self, other) -> float:
        return self.x * other[0] + self.y * other[1] + self.z * other[2]

    def cross(self, other) -> 'Vec3':
        return Vec3(self.y * other[2] - self.z * other[1],
                    self.z * other[0] - self.x * other[2],
                    self.x * other[1] - self.y * other[0])

    def distance(self, other) -> float:
        return (Vec3(*other) - self).length

    def sqr_distance(self, other) -> float:
        return (Vec3(*other) - self).sqr_length

    def lerp(self, other, t: float) -> 'Vec3':
        """``(1-t) * self + t * other``"""
        return (1 - t) * self + t * Vec3(*other)

    def angle(self, other) -> float:
        other = Vec3(*other)
        return math.acos(self.dot(other) / (self.length * other.length))

    def signed_angle(self, other, axis) -> float:
        """angle to ``other``, negative when the rotation opposes ``axis``"""
        angle = self.angle(other)
        if Vec3(*axis).dot(self.cross(other)) < 0:
            angle = -angle
        return angle

    def scalar_projection_onto(self, normal) -> float:
        normal = Vec3(*normal)
        return self.dot(normal) / normal.sqr_length

    def vector_projection_onto(self, normal) -> 'Vec3':
        normal = Vec3(*normal)
        return normal * (self.dot(normal) / normal.sqr_length)

    def reflect(self, normal) -> 'Vec3':
        vertical = self - self.vector_projection_onto(normal)
        return self - 2 * vertical


Vec2.ZERO = Vec2(0.0, 0.0)
Vec2.ONE = Vec2(1.0, 1.0)
Vec2.I = Vec2(1.0, 0.0)
Vec2.J = Vec2(0.0, 1.0)

Vec3.ZERO = Vec3(0.0, 0.0, 0.0)
Vec3.ONE = Vec3(1.0, 1.0, 1.0)
Vec3.I = Vec3(1.0, 0.0, 0.0)
Vec3.J = Vec3(0.0, 1.0, 0.0)
Vec3.K = Vec3(0.0, 0.0, 1.0)


def vec3(p: Sequence[float]) -> Vec3:
    """Coerce any three element sequence into a ``Vec3``."""
    if isinstance(p, Vec3):
        return p
    if len(p) < 3:
        raise ValueError('bad point passed to vec3: {}'.format(p))
    return Vec3(float(p[0]), float(p[1]), float(p[2]))


## determine if two vectors are the same, to within tol
def vclose(a, b, tol=epsilon):
    return close(Vec3(*a).distance(b), 0, tol)


def vmax(*vectors) -> Vec3:
    """component-wise maximum of one or more 3 vectors"""
    return Vec3(max(v[0] for v in vectors),
                max(v[1] for v in vectors),
                max(v[2] for v in vectors))


def vmin(*vectors) -> Vec3:
    """component-wise minimum of one or more 3 vectors"""
    return Vec3(min(v[0] for v in vectors),
                min(v[1] for v in vectors),
                min(v[2] for v in vectors))


def _clamp01(t):
    if t < 0:
        return 0.0
    if t > 1:
        return 1.0
    return t


## lines
## -----

class Line2(NamedTuple):
    """Line segment in the plane from ``start`` to ``end``."""

    start: Vec2
    end: Vec2

    @property
    def edge12(self) -> Vec2:
        return Vec2(*self.end) - self.start

    @property
    def edge21(self) -> Vec2:
        return Vec2(*self.start) - self.end

    @property
    def sqr_length(self) -> float:
        return self.edge12.sqr_length

    @property
    def length(self) -> float:
        return self.edge12.length

    def at(self, u: float) -> Vec2:
        return Vec2(*self.start) + u * self.edge12

    def intersects(self, other: 'Line2') -> Optional[Tuple[float, float]]:
        """Intersect the infinite lines through ``self`` and ``other``.

        Returns ``(lerp_self, lerp_other)``, the parameters of the
        crossing point along each line, or ``None`` if the lines are
        parallel.
        """
        x1, y1 = self.start
        x2, y2 = self.end
        x3, y3 = other.start
        x4, y4 = other.end

        denom = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)
        if denom == 0:
            return None
        lerp_self = ((x1 - x3) * (y3 - y4) - (y1 - y3) * (x3 - x4)) / denom
        lerp_other = -(((x1 - x2) * (y1 - y3) - (y1 - y2) * (x1 - x3)) / denom)
        return lerp_self, lerp_other

    def intersects_segment(self, other: 'Line2') -> Optional[Vec2]:
        """crossing point if it lies inside both segments, else ``None``"""
        params = self.intersects(other)
        if params is None:
            return None
        lerp_self, lerp_other = params
        if 0 <= lerp_self <= 1 and 0 <= lerp_other <= 1:
            return Vec2(*other.start).lerp(other.end, lerp_other)
        return None

    def closest_point_to(self, position) -> Vec2:
        edge = self.edge12
        t = (Vec2(*position) - self.start).dot(edge) / edge.dot(edge)
        return Vec2(*self.start) + _clamp01(t) * edge


class Line3(NamedTuple):
    """Line segment in 3-space from ``start`` to ``end``.

    Cut lines produced by ``Triangle.intersection`` are ``Line3``
    instances.
    """

    start: Vec3
    end: Vec3

    @property
    def edge12(self) -> Vec3:
        return Vec3(*self.end) - self.start

    @property
    def edge21(self) -> Vec3:
        return Vec3(*self.start) - self.end

    @property
    def sqr_length(self) -> float:
        return self.edge12.sqr_length

    @property
    def length(self) -> float:
        return self.edge12.length

    def at(self, u: float) -> Vec3:
        return Vec3(*self.start) + u * self.edge12

    def same_segment(self, other: 'Line3', tol=epsilon) -> bool:
        """True if both lines join the same two points, in either order"""
        return ((vclose(self.start, other.start, tol) and vclose(self.end, other.end, tol)) or
                (vclose(self.start, other.end, tol) and vclose(self.end, other.start, tol)))

    def closest_point_to(self, position) -> Vec3:
        edge = self.edge12
        t = (Vec3(*position) - self.start).dot(edge) / edge.dot(edge)
        return Vec3(*self.start) + _clamp01(t) * edge

    def as_ray(self):
        """ray from ``start`` in the direction of ``end``"""
        from meshcsg.raycast import Ray
        return Ray(self.start, self.edge12)


__all__ = [
    'epsilon',
    'RAY_TOL',
    'PARALLEL_TOL',
    'CUT_TOL',
    'DegenerateGeometryError',
    'isgoodnum',
    'close',
    'Vec2',
    'Vec3',
    'vec3',
    'vclose',
    'vmax',
    'vmin',
    'Line2',
    'Line3',
]
