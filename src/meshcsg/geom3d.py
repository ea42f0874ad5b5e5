## planes, boxes and triangles in 3-space for meshCSG
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

"""Planes, axis-aligned boxes and triangles.

A ``Triangle`` derives its supporting ``Plane`` when it is constructed,
using ``normalize(cross(p3 - p1, p2 - p1))`` as the normal.  Winding
therefore fixes which side of a triangle is "above".  A triangle with no
area has no plane and fails with ``DegenerateGeometryError``.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional, Tuple

from meshcsg.geom import (
    Line3,
    Vec3,
    epsilon,
    vclose,
    vec3,
    vmax,
    vmin,
)
from meshcsg.raycast import Ray


class PlanarSide(enum.Enum):
    ABOVE = 'above'
    BELOW = 'below'


@dataclass(frozen=True)
class Plane:
    """Plane with unit ``normal`` at signed ``distance`` from the origin.

    Points ``p`` on the plane satisfy ``dot(normal, p) == distance``.
    """

    normal: Vec3
    distance: float

    def __post_init__(self):
        object.__setattr__(self, 'normal', vec3(self.normal).normalized)
        object.__setattr__(self, 'distance', float(self.distance))

    @classmethod
    def from_points(cls, a, b, c) -> 'Plane':
        a = vec3(a)
        normal = (vec3(c) - a).cross(vec3(b) - a).normalized
        return cls(normal, normal.dot(a))

    @property
    def flipped(self) -> 'Plane':
        return Plane(-self.normal, -self.distance)

    def distance_between(self, point) -> float:
        """signed distance from the plane to ``point``"""
        return self.normal.dot(point) - self.distance

    def side(self, point) -> PlanarSide:
        if self.distance_between(point) > 0:
            return PlanarSide.ABOVE
        return PlanarSide.BELOW

    def same_side(self, a, b) -> bool:
        return self.side(a) == self.side(b)

    def project(self, point) -> Vec3:
        point = vec3(point)
        return point - self.normal * self.distance_between(point)

    def closest_point_to(self, point) -> Vec3:
        return self.project(point)


Plane.XY = Plane(Vec3.K, 0.0)
Plane.XZ = Plane(Vec3.J, 0.0)
Plane.YZ = Plane(Vec3.I, 0.0)


@dataclass(frozen=True)
class Box3:
    """Axis-aligned box.  Corners are reordered so ``min <= max``."""

    min: Vec3
    max: Vec3

    def __post_init__(self):
        a = vec3(self.min)
        b = vec3(self.max)
        object.__setattr__(self, 'min', vmin(a, b))
        object.__setattr__(self, 'max', vmax(a, b))

    @classmethod
    def from_points(cls, *points) -> 'Box3':
        if not points:
            raise ValueError('bad (empty) point list passed to Box3.from_points')
        return cls(vmin(*points), vmax(*points))

    @property
    def centre(self) -> Vec3:
        return (self.min + self.max) / 2

    @property
    def size(self) -> Vec3:
        return self.max - self.min

    @property
    def extents(self) -> Vec3:
        """half of the box size along each axis"""
        return self.size / 2

    def merge(self, other: 'Box3') -> 'Box3':
        return Box3(vmin(self.min, other.min), vmax(self.max, other.max))

    def contains(self, point) -> bool:
        return all(lo <= p <= hi for lo, p, hi in zip(self.min, point, self.max))

    def intersects(self, other: 'Box3') -> bool:
        return all(self.min[i] <= other.max[i] and other.min[i] <= self.max[i]
                   for i in range(3))

    def intersects_ray(self, ray: Ray) -> bool:
        return ray.cast_box(self) is not None

    def intersects_triangle(self, triangle: 'Triangle') -> bool:
        """Separating axis test against a triangle.

        Tries the nine edge cross products, the three box face normals
        and the triangle normal.  The box and triangle overlap unless
        one of these axes separates them.
        """
        c = self.centre
        e = self.extents
        v0 = triangle.p1 - c
        v1 = triangle.p2 - c
        v2 = triangle.p3 - c
        f0 = v1 - v0
        f1 = v2 - v1
        f2 = v0 - v2

        axes = [u.cross(f) for u in (Vec3.I, Vec3.J, Vec3.K) for f in (f0, f1, f2)]
        axes.extend((Vec3.I, Vec3.J, Vec3.K, f0.cross(f1)))

        for axis in axes:
            p0 = v0.dot(axis)
            p1 = v1.dot(axis)
            p2 = v2.dot(axis)
            r = e.x * abs(axis.x) + e.y * abs(axis.y) + e.z * abs(axis.z)
            if max(-max(p0, p1, p2), min(p0, p1, p2)) > r:
                return False
        return True


@dataclass(frozen=True)
class Triangle:
    """Immutable triangle with ordered corners ``p1``, ``p2``, ``p3``."""

    p1: Vec3
    p2: Vec3
    p3: Vec3
    plane: Plane = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, 'p1', vec3(self.p1))
        object.__setattr__(self, 'p2', vec3(self.p2))
        object.__setattr__(self, 'p3', vec3(self.p3))
        object.__setattr__(self, 'plane', Plane.from_points(self.p1, self.p2, self.p3))

    @property
    def corners(self) -> Tuple[Vec3, Vec3, Vec3]:
        return self.p1, self.p2, self.p3

    def __iter__(self):
        return iter(self.corners)

    @property
    def normal(self) -> Vec3:
        return self.plane.normal

    @property
    def edge12(self) -> Vec3:
        return self.p2 - self.p1

    @property
    def edge21(self) -> Vec3:
        return self.p1 - self.p2

    @property
    def edge13(self) -> Vec3:
        return self.p3 - self.p1

    @property
    def edge31(self) -> Vec3:
        return self.p1 - self.p3

    @property
    def edge23(self) -> Vec3:
        return self.p3 - self.p2

    @property
    def edge32(self) -> Vec3:
        return self.p2 - self.p3

    @property
    def edges(self) -> Tuple[Line3, Line3, Line3]:
        """the edges P1→P2, P1→P3 and P2→P3 as line segments"""
        return (Line3(self.p1, self.p2),
                Line3(self.p1, self.p3),
                Line3(self.p2, self.p3))

    @property
    def centre(self) -> Vec3:
        return (self.p1 + self.p2 + self.p3) / 3

    @property
    def area(self) -> float:
        return self.edge12.cross(self.edge13).length / 2

    @property
    def bounds(self) -> Box3:
        """cube around the centroid enclosing all three corners"""
        c = self.centre
        radius = max(c.distance(p) for p in self.corners)
        r = Vec3(radius, radius, radius)
        return Box3(c - r, c + r)

    @property
    def flipped(self) -> 'Triangle':
        return Triangle(self.p1, self.p3, self.p2)

    def transform(self, matrix) -> 'Triangle':
        return Triangle(matrix.transform_point(self.p1),
                        matrix.transform_point(self.p2),
                        matrix.transform_point(self.p3))

    def contains(self, point) -> bool:
        """True if ``point`` lies within the triangle's prism"""
        point = vec3(point)
        return (_same_side(point, self.p1, self.p2, self.p3) and
                _same_side(point, self.p2, self.p3, self.p1) and
                _same_side(point, self.p3, self.p1, self.p2))

    def closest_point_to(self, point) -> Vec3:
        projected = self.plane.project(point)
        if self.contains(projected):
            return projected
        candidates = [edge.closest_point_to(point) for edge in self.edges]
        return min(candidates, key=lambda p: p.sqr_distance(point))

    def intersects(self, other: 'Triangle') -> bool:
        """Coarse test for whether two triangles cross each other.

        Symmetric: ``a.intersects(b) == b.intersects(a)``.
        """
        if _one_sided(self.plane, other) or _one_sided(other.plane, self):
            return False

        direction = self.normal.cross(other.normal)
        if direction.sqr_length == 0:
            return False

        mine = [p.scalar_projection_onto(direction) for p in self.corners]
        theirs = [p.scalar_projection_onto(direction) for p in other.corners]
        return max(min(mine), min(theirs)) <= min(max(mine), max(theirs))

    def intersection(self, other: 'Triangle', tol=epsilon) -> Optional[Line3]:
        """Line segment along which ``self`` and ``other`` cross, or ``None``.

        Every edge of ``self`` is cast as a ray against ``other``, then
        every edge of ``other`` against ``self``.  The first two distinct
        hit points form the line.
        """
        hits = []
        for edges, target in ((self.edges, other), (other.edges, self)):
            for edge in edges:
                hit = edge.as_ray().cast(target, max_distance=edge.length)
                if hit is None or any(vclose(hit, h, tol) for h in hits):
                    continue
                hits.append(hit)
                if len(hits) == 2:
                    return Line3(hits[0], hits[1])
        return None


def _same_side(p, a, b, c):
    edge = b - a
    return edge.cross(p - a).dot(edge.cross(c - a)) >= 0


def _one_sided(plane: Plane, triangle: Triangle) -> bool:
    sides = {plane.side(p) for p in triangle.corners}
    return len(sides) == 1


__all__ = [
    'PlanarSide',
    'Plane',
    'Box3',
    'Triangle',
]
