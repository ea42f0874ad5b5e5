## re-triangulation of triangles along cut lines for meshCSG
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

"""Split a triangle into smaller triangles along a cut line.

The cut line is projected into the triangle's own plane and intersected,
as an infinite line, with the three edges.  Two patterns are handled:

* the line runs through a corner and crosses the opposite edge, giving
  two triangles;
* the line crosses two edges, giving four triangles (the two crossing
  points plus the midpoint of the uncut edge).

Anything else leaves the triangle whole.  Fragments keep the winding of
the triangle they were cut from, and together they tile it exactly.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from meshcsg.geom import CUT_TOL, Line2, Line3, Vec2, Vec3
from meshcsg.geom3d import Triangle

logger = logging.getLogger(__name__)


def _is_corner(c, tol):
    return c is not None and (abs(c) < tol or abs(c - 1) < tol)


def _is_edge(c, tol):
    return c is not None and tol < c < 1 - tol


def _edge_param(edge: Line2, cut: Line2) -> Optional[float]:
    params = edge.intersects(cut)
    if params is None:
        return None
    return params[0]


def cut_triangle(triangle: Triangle, line: Line3, tol=CUT_TOL) -> List[Triangle]:
    """Cut ``triangle`` along ``line``.

    Returns a list of 1, 2 or 4 triangles whose union is ``triangle``.
    """
    p1, p2, p3 = triangle.corners
    xaxis = triangle.edge13.normalized
    yaxis = triangle.normal.cross(xaxis)

    def project(p) -> Vec2:
        d = Vec3(*p) - p1
        return Vec2(d.dot(xaxis), d.dot(yaxis))

    v1 = Vec2.ZERO
    v2 = project(p2)
    v3 = project(p3)
    cut = Line2(project(line.start), project(line.end))

    c12 = _edge_param(Line2(v1, v2), cut)
    c13 = _edge_param(Line2(v1, v3), cut)
    c23 = _edge_param(Line2(v2, v3), cut)

    # line through a corner and across the opposite edge
    if _is_corner(c12, tol) and _is_corner(c13, tol) and _is_edge(c23, tol):
        m = p2.lerp(p3, c23)
        return [Triangle(p1, p2, m), Triangle(p1, m, p3)]
    if _is_corner(c13, tol) and _is_corner(c23, tol) and _is_edge(c12, tol):
        m = p1.lerp(p2, c12)
        return [Triangle(p1, m, p3), Triangle(m, p2, p3)]
    if _is_corner(c12, tol) and _is_corner(c23, tol) and _is_edge(c13, tol):
        m = p1.lerp(p3, c13)
        return [Triangle(p1, p2, m), Triangle(m, p2, p3)]

    # line across two edges
    if _is_edge(c12, tol) and _is_edge(c23, tol):
        m1 = p1.lerp(p2, c12)
        m2 = p2.lerp(p3, c23)
        mid = (p1 + p3) / 2
        return [Triangle(p1, m1, mid), Triangle(m1, m2, mid),
                Triangle(mid, m2, p3), Triangle(m1, p2, m2)]
    if _is_edge(c12, tol) and _is_edge(c13, tol):
        m1 = p1.lerp(p2, c12)
        m2 = p1.lerp(p3, c13)
        mid = (p2 + p3) / 2
        return [Triangle(m1, p2, mid), Triangle(m1, mid, m2),
                Triangle(m2, mid, p3), Triangle(p1, m1, m2)]
    if _is_edge(c13, tol) and _is_edge(c23, tol):
        m1 = p1.lerp(p3, c13)
        m2 = p2.lerp(p3, c23)
        mid = (p1 + p2) / 2
        return [Triangle(mid, p2, m2), Triangle(mid, m2, m1),
                Triangle(p1, mid, m1), Triangle(m1, m2, p3)]

    logger.debug('cut line %s does not split %s (c12=%s c13=%s c23=%s)',
                 line, triangle, c12, c13, c23)
    return [triangle]


def cut_triangle_by_lines(triangle: Triangle, lines: Iterable[Line3],
                          tol=CUT_TOL) -> List[Triangle]:
    """Apply every cut line in turn to the growing list of fragments."""
    fragments = [triangle]
    for line in lines:
        fragments = [piece for tri in fragments for piece in cut_triangle(tri, line, tol=tol)]
    return fragments


__all__ = ['cut_triangle', 'cut_triangle_by_lines']
