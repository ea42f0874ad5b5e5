## list-backed triangle meshes for meshCSG
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

"""Triangle streams and the list-backed ``Mesh`` container.

A triangle stream is any finite iterable of ``Triangle`` that can be
iterated more than once.  ``Mesh`` is the simplest such stream; the
boolean composers in ``meshcsg.boolean.native`` are another.  The helpers
here accept either.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional

import numpy as np

from meshcsg.geom3d import Box3, Triangle


def surface_area(triangles: Iterable[Triangle]) -> float:
    """total area of every triangle in a stream"""
    return float(sum(tri.area for tri in triangles))


def stream_bounds(triangles: Iterable[Triangle]) -> Optional[Box3]:
    """bounding box of every corner in a stream, or ``None`` when empty"""
    points = [p for tri in triangles for p in tri.corners]
    if not points:
        return None
    return Box3.from_points(*points)


class Mesh:
    """Ordered, re-iterable collection of triangles."""

    def __init__(self, triangles: Optional[Iterable[Triangle]] = None):
        self._triangles: List[Triangle] = list(triangles) if triangles is not None else []
        for tri in self._triangles:
            if not isinstance(tri, Triangle):
                raise ValueError('bad non-triangle passed to Mesh: {}'.format(tri))

    def __repr__(self):
        return 'Mesh(<{} triangles>)'.format(len(self._triangles))

    def __len__(self):
        return len(self._triangles)

    def __iter__(self) -> Iterator[Triangle]:
        return iter(self._triangles)

    def __getitem__(self, index):
        return self._triangles[index]

    def __eq__(self, other):
        if not isinstance(other, Mesh):
            return NotImplemented
        return self._triangles == other._triangles

    @property
    def triangles(self) -> List[Triangle]:
        return list(self._triangles)

    @property
    def bounds(self) -> Optional[Box3]:
        return stream_bounds(self._triangles)

    @property
    def surface_area(self) -> float:
        return surface_area(self._triangles)

    def join(self, other: Iterable[Triangle]) -> 'Mesh':
        return Mesh(self._triangles + list(other))

    def transform(self, matrix) -> 'Mesh':
        return Mesh(tri.transform(matrix) for tri in self._triangles)

    def flipped(self) -> 'Mesh':
        """same surface with every triangle's winding reversed"""
        return Mesh(tri.flipped for tri in self._triangles)

    def as_array(self) -> np.ndarray:
        """corners as a float ``(N, 3, 3)`` array, one row per triangle"""
        if not self._triangles:
            return np.zeros((0, 3, 3), dtype=float)
        return np.array([tri.corners for tri in self._triangles], dtype=float)

    @classmethod
    def from_array(cls, array) -> 'Mesh':
        """build a mesh from an ``(N, 3, 3)`` array of triangle corners"""
        array = np.asarray(array, dtype=float)
        if array.ndim != 3 or array.shape[1:] != (3, 3):
            raise ValueError('bad array shape passed to Mesh.from_array: {}'.format(array.shape))
        return cls(Triangle(*(tuple(p) for p in tri)) for tri in array.tolist())

    def union(self, other: Iterable[Triangle]) -> 'Mesh':
        from meshcsg.boolean.native import Union
        return Union(self, other).materialize()

    def intersection(self, other: Iterable[Triangle]) -> 'Mesh':
        from meshcsg.boolean.native import Intersection
        return Intersection(self, other).materialize()

    def difference(self, other: Iterable[Triangle]) -> 'Mesh':
        from meshcsg.boolean.native import Difference
        return Difference(self, other).materialize()


__all__ = ['Mesh', 'surface_area', 'stream_bounds']
