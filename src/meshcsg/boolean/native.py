"""Native boolean engine for triangle streams.

The engine works in three passes over a pair of meshes ``a`` and ``b``:

1. every pair of triangles is tested for a crossing line,
2. each triangle is cut along the lines that cross it,
3. every fragment is classified as inside or outside the other mesh by
   casting a ray from its centre along its normal and counting distinct
   hits (odd means inside).

``Union``, ``Intersection`` and ``Difference`` are lazy triangle streams:
nothing is computed until they are iterated, and every iteration reruns
the classifier on the upstream streams.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Sequence, Tuple

from meshcsg.cutter import cut_triangle_by_lines
from meshcsg.geom import CUT_TOL, RAY_TOL, Line3
from meshcsg.geom3d import Triangle
from meshcsg.mesh import Mesh, surface_area
from meshcsg.raycast import Ray

logger = logging.getLogger(__name__)

ENGINE_NAME = "native"

OPERATIONS = ('union', 'intersection', 'difference')


@dataclass
class Classification:
    """Fragments of two meshes sorted by which side of the other they lie on."""

    a_outside_b: List[Triangle] = field(default_factory=list)
    a_inside_b: List[Triangle] = field(default_factory=list)
    b_outside_a: List[Triangle] = field(default_factory=list)
    b_inside_a: List[Triangle] = field(default_factory=list)


def find_cut_lines(a: Sequence[Triangle],
                   b: Sequence[Triangle]) -> Tuple[List[List[Line3]], List[List[Line3]]]:
    """Cut lines for every triangle of ``a`` and of ``b``.

    ``acuts[i]`` holds the lines where ``a[i]`` crosses triangles of
    ``b``, and ``bcuts[j]`` the lines where ``b[j]`` crosses triangles
    of ``a``, in discovery order.
    """
    acuts: List[List[Line3]] = [[] for _ in a]
    bcuts: List[List[Line3]] = [[] for _ in b]
    for i, ta in enumerate(a):
        for j, tb in enumerate(b):
            line = ta.intersection(tb)
            if line is None:
                continue
            acuts[i].append(line)
            bcuts[j].append(line)
    return acuts, bcuts


def _cut_all(triangles, cuts, tol):
    fragments = []
    for tri, lines in zip(triangles, cuts):
        fragments.extend(cut_triangle_by_lines(tri, lines, tol=tol))
    return fragments


def is_inside(triangle: Triangle, other: Iterable[Triangle], tol=RAY_TOL) -> bool:
    """parity test of ``triangle``'s centre against the mesh ``other``"""
    hits = Ray(triangle.centre, triangle.normal).cast_all(other, tol=tol)
    return len(hits) % 2 == 1


def classify(a: Iterable[Triangle], b: Iterable[Triangle],
             tol=RAY_TOL, cut_tol=CUT_TOL) -> Classification:
    """Cut ``a`` and ``b`` against each other and sort the fragments."""
    a_tris = list(a)
    b_tris = list(b)

    acuts, bcuts = find_cut_lines(a_tris, b_tris)
    a_fragments = _cut_all(a_tris, acuts, cut_tol)
    b_fragments = _cut_all(b_tris, bcuts, cut_tol)
    logger.debug('cut %d+%d triangles into %d+%d fragments',
                 len(a_tris), len(b_tris), len(a_fragments), len(b_fragments))

    result = Classification()
    for frag in a_fragments:
        if is_inside(frag, b_tris, tol=tol):
            result.a_inside_b.append(frag)
        else:
            result.a_outside_b.append(frag)
    for frag in b_fragments:
        if is_inside(frag, a_tris, tol=tol):
            result.b_inside_a.append(frag)
        else:
            result.b_outside_a.append(frag)

    logger.info('classified %d fragments of a (%d outside, %d inside) and '
                '%d fragments of b (%d outside, %d inside)',
                len(a_fragments), len(result.a_outside_b), len(result.a_inside_b),
                len(b_fragments), len(result.b_outside_a), len(result.b_inside_a))
    return result


class BooleanOperation:
    """Lazy, re-iterable triangle stream combining two upstream streams."""

    operation = None

    def __init__(self, a: Iterable[Triangle], b: Iterable[Triangle],
                 tol=RAY_TOL, cut_tol=CUT_TOL):
        self.a = a
        self.b = b
        self.tol = tol
        self.cut_tol = cut_tol

    def __repr__(self):
        return '{}({!r}, {!r})'.format(type(self).__name__, self.a, self.b)

    def __iter__(self) -> Iterator[Triangle]:
        parts = classify(self.a, self.b, tol=self.tol, cut_tol=self.cut_tol)
        return iter(self.compose(parts))

    def compose(self, parts: Classification) -> List[Triangle]:
        raise NotImplementedError

    def materialize(self) -> Mesh:
        return Mesh(self)

    @property
    def surface_area(self) -> float:
        return surface_area(self)


class Union(BooleanOperation):
    operation = 'union'

    def compose(self, parts):
        return parts.a_outside_b + parts.b_outside_a


class Intersection(BooleanOperation):
    operation = 'intersection'

    def compose(self, parts):
        return parts.b_inside_a + parts.a_inside_b


class Difference(BooleanOperation):
    operation = 'difference'

    def compose(self, parts):
        # b's fragments are not flipped
        return parts.a_outside_b + parts.b_inside_a


_COMPOSERS = {cls.operation: cls for cls in (Union, Intersection, Difference)}


def solid_boolean(a, b, operation, tol=RAY_TOL, cut_tol=CUT_TOL) -> Mesh:
    """Perform ``operation`` on the triangle streams ``a`` and ``b``."""
    if operation not in OPERATIONS:
        raise ValueError(f'bad boolean operation passed to solid_boolean: {operation!r}')
    return _COMPOSERS[operation](a, b, tol=tol, cut_tol=cut_tol).materialize()


__all__ = [
    'ENGINE_NAME',
    'OPERATIONS',
    'Classification',
    'find_cut_lines',
    'is_inside',
    'classify',
    'BooleanOperation',
    'Union',
    'Intersection',
    'Difference',
    'solid_boolean',
]
