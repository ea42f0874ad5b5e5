## rays and Möller–Trumbore ray casting for meshCSG
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

"""Rays and ray casting against triangles and boxes.

Triangles and boxes are duck-typed: anything with ``p1``, ``p2``, ``p3``
corners casts like a triangle, anything with ``min`` and ``max`` corners
casts like a box.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Optional, Set, Tuple

from meshcsg.geom import PARALLEL_TOL, RAY_TOL, Vec3, vec3


def ray_triangle_intersection(origin: Vec3, direction: Vec3, triangle,
                              tol=RAY_TOL,
                              parallel_tol=PARALLEL_TOL) -> Optional[Tuple[float, Vec3]]:
    """Möller–Trumbore intersection of a ray with a triangle.

    Returns ``(t, hit)`` where ``hit == origin + t * direction``, or
    ``None`` when the ray is parallel to the triangle, passes outside it,
    or meets it at ``t <= tol``.
    """
    p1 = triangle.p1
    edge1 = triangle.p2 - p1
    edge2 = triangle.p3 - p1

    pvec = direction.cross(edge2)
    det = edge1.dot(pvec)
    if abs(det) < parallel_tol:
        return None
    inv_det = 1.0 / det

    tvec = origin - p1
    u = tvec.dot(pvec) * inv_det
    if u < 0 or u > 1:
        return None

    qvec = tvec.cross(edge1)
    v = direction.dot(qvec) * inv_det
    if v < 0 or u + v > 1:
        return None

    t = edge2.dot(qvec) * inv_det
    if t <= tol:
        return None
    return t, origin + direction * t


@dataclass(frozen=True)
class Ray:
    """Half-line from ``origin`` along unit ``direction``.

    The direction is normalized on construction; a zero direction raises
    ``DegenerateGeometryError``.
    """

    origin: Vec3
    direction: Vec3

    def __post_init__(self):
        object.__setattr__(self, 'origin', vec3(self.origin))
        object.__setattr__(self, 'direction', vec3(self.direction).normalized)

    def at(self, t: float) -> Vec3:
        return self.origin + self.direction * t

    def closest_point_to(self, point) -> Vec3:
        t = (vec3(point) - self.origin).dot(self.direction)
        return self.at(max(t, 0.0))

    def cast(self, triangle, max_distance=None, tol=RAY_TOL) -> Optional[Vec3]:
        """hit point on ``triangle``, or ``None``

        With ``max_distance`` only hits no further than that from the
        origin are reported.
        """
        result = ray_triangle_intersection(self.origin, self.direction, triangle, tol=tol)
        if result is None:
            return None
        t, hit = result
        if max_distance is not None and t > max_distance + tol:
            return None
        return hit

    def cast_all(self, triangles: Iterable, tol=RAY_TOL) -> Set[Vec3]:
        """distinct hit points over a whole triangle stream"""
        hits = set()
        for tri in triangles:
            hit = self.cast(tri, tol=tol)
            if hit is not None:
                hits.add(hit)
        return hits

    def cast_box(self, box) -> Optional[Vec3]:
        """Slab test against an axis-aligned box.

        Returns the entry point, or the origin itself when the ray starts
        inside the box.
        """
        tmin = -math.inf
        tmax = math.inf
        for o, d, lo, hi in zip(self.origin, self.direction, box.min, box.max):
            if d == 0:
                if o < lo or o > hi:
                    return None
                continue
            t1 = (lo - o) / d
            t2 = (hi - o) / d
            if t1 > t2:
                t1, t2 = t2, t1
            tmin = max(tmin, t1)
            tmax = min(tmax, t2)
            if tmin > tmax:
                return None
        if tmax < 0:
            return None
        return self.at(max(tmin, 0.0))


def cast_all(origin, direction, triangles: Iterable, tol=RAY_TOL) -> Set[Vec3]:
    """distinct hit points of the ray ``(origin, direction)`` over ``triangles``"""
    return Ray(origin, direction).cast_all(triangles, tol=tol)


__all__ = [
    'Ray',
    'ray_triangle_intersection',
    'cast_all',
]
