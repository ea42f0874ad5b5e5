## primitive solids for meshCSG
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

from meshcsg.geom import Vec3, isgoodnum, vec3
from meshcsg.geom3d import Triangle
from meshcsg.mesh import Mesh

## unit cube corners, indexed as the face table below expects
_CUBE_VERTICES = (
    (-0.5, -0.5, 0.5),
    (-0.5, 0.5, 0.5),
    (-0.5, -0.5, -0.5),
    (-0.5, 0.5, -0.5),
    (0.5, -0.5, 0.5),
    (0.5, 0.5, 0.5),
    (0.5, -0.5, -0.5),
    (0.5, 0.5, -0.5),
)

_CUBE_FACES = (
    (3, 2, 0), (7, 6, 2), (5, 4, 6), (1, 0, 4),
    (2, 6, 4), (7, 3, 1), (1, 3, 0), (3, 7, 2),
    (7, 5, 6), (5, 1, 4), (0, 2, 4), (5, 7, 1),
)


def cube(size=1.0, centre=Vec3.ZERO):
    """axis-aligned cube with edge length ``size`` about ``centre``

    Returns a ``Mesh`` of twelve triangles.
    """
    if not isgoodnum(size) or size <= 0:
        raise ValueError('bad size passed to cube: {}'.format(size))
    centre = vec3(centre)
    points = [Vec3(*v) * size + centre for v in _CUBE_VERTICES]
    return Mesh(Triangle(points[i], points[j], points[k]) for i, j, k in _CUBE_FACES)


__all__ = ['cube']
