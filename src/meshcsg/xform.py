## affine transformation matrices and quaternions for 3D
## homogeneous coordinates in meshCSG

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

import math

from meshcsg.geom import DegenerateGeometryError, Vec3, close, isgoodnum, vec3

## a matrix is represented as a list of four rows of four values.
## Vectors multiplied by a matrix are treated as column vectors, so
## Mx applies M to x.  Points are lifted to homogeneous form with w=1,
## directions with w=0.  Angles are in degrees throughout.


def _dot4(a, b):
    return a[0]*b[0] + a[1]*b[1] + a[2]*b[2] + a[3]*b[3]


def _isvect4(x):
    return isinstance(x, (tuple, list)) and len(x) == 4 and all(isgoodnum(v) for v in x)


class Matrix:
    """4x4 transformation matrix class for transforming homogeneous 3D coordinates"""

    def __init__(self, a=None, trans=False):
        self.m = [[1.0, 0.0, 0.0, 0.0],
                  [0.0, 1.0, 0.0, 0.0],
                  [0.0, 0.0, 1.0, 0.0],
                  [0.0, 0.0, 0.0, 1.0]]
        self.trans = False

        if isinstance(a, Matrix):
            for i in range(4):
                self.setrow(i, a.getrow(i))
        elif isinstance(a, (tuple, list)):
            if len(a) == 4 and all(isinstance(r, (tuple, list)) and len(r) == 4 for r in a):
                values = [x for row in a for x in row]
            elif len(a) == 16:
                values = list(a)
            else:
                raise ValueError('bad thing used in attempt to initialize matrix: {}'.format(a))
            for ind, x in enumerate(values):
                if not isgoodnum(x):
                    raise ValueError('bad element in matrix initialization: {}'.format(x))
                self.m[ind // 4][ind % 4] = float(x)
        elif a is not None:
            raise ValueError('bad thing used in attempt to initialize matrix: {}'.format(a))
        self.trans = trans

    def __repr__(self):
        return "Matrix({},{},{},{},{})".format(self.m[0], self.m[1],
                                               self.m[2], self.m[3], self.trans)

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return all(self.getrow(i) == other.getrow(i) for i in range(4))

    def __matmul__(self, other):
        return self.mul(other)

    #return value indexed by i,j
    def get(self, i, j):
        if i < 0 or i > 3 or j < 0 or j > 3:
            raise ValueError('bad index passed to get: {},{}'.format(i, j))
        if self.trans:
            return self.m[j][i]
        return self.m[i][j]

    #set value indexed by i,j
    def set(self, i, j, x):
        if i < 0 or i > 3 or j < 0 or j > 3:
            raise ValueError('bad index passed to set: {},{}'.format(i, j))
        if not isgoodnum(x):
            raise ValueError('bad value passed to set: {}'.format(x))
        if self.trans:
            self.m[j][i] = x
        else:
            self.m[i][j] = x

    def getrow(self, i):
        if i < 0 or i > 3:
            raise ValueError('bad row passed to getrow: {}'.format(i))
        if self.trans:
            return [self.m[0][i], self.m[1][i], self.m[2][i], self.m[3][i]]
        return list(self.m[i])

    def getcol(self, j):
        if j < 0 or j > 3:
            raise ValueError('bad column passed to getcol: {}'.format(j))
        if self.trans:
            return list(self.m[j])
        return [self.m[0][j], self.m[1][j], self.m[2][j], self.m[3][j]]

    def setrow(self, i, x):
        if not _isvect4(x):
            raise ValueError('bad non-vector passed to setrow: {}'.format(x))
        if i < 0 or i > 3:
            raise ValueError('bad row index passed to setrow: {}'.format(i))
        for j in range(4):
            self.set(i, j, x[j])

    def setcol(self, j, x):
        if not _isvect4(x):
            raise ValueError('bad non-vector passed to setcol: {}'.format(x))
        if j < 0 or j > 3:
            raise ValueError('bad column index passed to setcol: {}'.format(j))
        for i in range(4):
            self.set(i, j, x[i])

    @property
    def transpose(self):
        """transposed copy of this matrix"""
        return Matrix([self.getcol(j) for j in range(4)])

    # matrix multiply.  If x is a matrix, compute MX.  If x is a
    # 4-vector, compute Mx.  If x is a Vec3, transform it as a point.
    # If x is a scalar, compute xM.  Respects transpose flag.

    def mul(self, x):
        if isinstance(x, Matrix):
            result = Matrix()
            for i in range(4):
                for j in range(4):
                    result.set(i, j, _dot4(self.getrow(i), x.getcol(j)))
            return result
        elif isinstance(x, Vec3):
            return self.transform_point(x)
        elif _isvect4(x):
            return [_dot4(self.getrow(i), x) for i in range(4)]
        elif isgoodnum(x):
            result = Matrix()
            for i in range(4):
                result.setrow(i, [v * x for v in self.getrow(i)])
            return result

        raise ValueError('bad thing passed to mul(): {}'.format(x))

    def transform_point(self, p):
        x, y, z, w = self.mul([p[0], p[1], p[2], 1.0])
        if w != 1.0 and w != 0.0:
            return Vec3(x / w, y / w, z / w)
        return Vec3(x, y, z)

    def transform_direction(self, d):
        x, y, z, _ = self.mul([d[0], d[1], d[2], 0.0])
        return Vec3(x, y, z)


def _unit_axis(axis, caller):
    axis = vec3(axis)
    m = axis.length
    if m < 1e-12:
        raise DegenerateGeometryError('zero-length rotation axis passed to {}'.format(caller),
                                      {'axis': axis})
    if not close(m, 1.0):
        axis = axis / m
    return axis


# return the generalized 4x4 arbitrary axis rotation matrix
def Rotation(axis, angle, inverse=False):
    u = _unit_axis(axis, 'Rotation')

    if inverse:
        angle *= -1.0
    rad = math.radians(angle % 360.0)

    ux, uy, uz = u
    cang = math.cos(rad)
    cmin = 1.0 - cang
    sang = math.sin(rad)

    # see http://www.opengl-tutorial.org/assets/faq_quaternions/index.html#Q38
    R = [[cang + ux*ux*cmin, ux*uy*cmin - uz*sang, ux*uz*cmin + uy*sang, 0],
         [uy*ux*cmin + uz*sang, cang + uy*uy*cmin, uy*uz*cmin - ux*sang, 0],
         [uz*ux*cmin - uy*sang, uz*uy*cmin + ux*sang, cang + uz*uz*cmin, 0],
         [0, 0, 0, 1]]

    return Matrix(R)


def Translation(delta, inverse=False):
    dx, dy, dz = vec3(delta)
    if inverse:
        dx, dy, dz = -dx, -dy, -dz
    T = [[1, 0, 0, dx],
         [0, 1, 0, dy],
         [0, 0, 1, dz],
         [0, 0, 0, 1]]
    return Matrix(T)


def Scale(x, y=None, z=None, inverse=False):
    if isgoodnum(x):
        sx = x
        if isgoodnum(y) and isgoodnum(z):
            sy = y
            sz = z
        else:
            sy = sz = x
    elif isinstance(x, (tuple, list)) and len(x) >= 3:
        sx, sy, sz = x[0], x[1], x[2]
    else:
        raise ValueError('bad scaling values passed to Scale')

    if inverse:
        if 0 in (sx, sy, sz):
            raise ValueError('bad (zero) scaling values passed to Scale with inverse')
        sx = 1.0 / sx
        sy = 1.0 / sy
        sz = 1.0 / sz

    S = [[sx, 0, 0, 0],
         [0, sy, 0, 0],
         [0, 0, sz, 0],
         [0, 0, 0, 1.0]]
    return Matrix(S)


class Quat:
    """rotation quaternion ``w + xi + yj + zk``"""

    __slots__ = ('w', 'x', 'y', 'z')

    def __init__(self, w=1.0, x=0.0, y=0.0, z=0.0):
        self.w = float(w)
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    def __repr__(self):
        return "Quat({},{},{},{})".format(self.w, self.x, self.y, self.z)

    def __eq__(self, other):
        if not isinstance(other, Quat):
            return NotImplemented
        return (self.w, self.x, self.y, self.z) == (other.w, other.x, other.y, other.z)

    def __iter__(self):
        return iter((self.w, self.x, self.y, self.z))

    @classmethod
    def identity(cls):
        return cls(1.0, 0.0, 0.0, 0.0)

    @classmethod
    def from_axis_angle(cls, axis, angle):
        u = _unit_axis(axis, 'Quat.from_axis_angle')
        half = math.radians(angle) / 2
        s = math.sin(half)
        return cls(math.cos(half), u.x * s, u.y * s, u.z * s)

    @classmethod
    def from_euler(cls, roll, pitch, yaw):
        """rotation about x by ``roll``, then y by ``pitch``, then z by ``yaw``"""
        cr = math.cos(math.radians(roll) / 2)
        sr = math.sin(math.radians(roll) / 2)
        cp = math.cos(math.radians(pitch) / 2)
        sp = math.sin(math.radians(pitch) / 2)
        cy = math.cos(math.radians(yaw) / 2)
        sy = math.sin(math.radians(yaw) / 2)
        return cls(cr * cp * cy + sr * sp * sy,
                   sr * cp * cy - cr * sp * sy,
                   cr * sp * cy + sr * cp * sy,
                   cr * cp * sy - sr * sp * cy)

    def __mul__(self, other):
        if isinstance(other, Quat):
            w1, x1, y1, z1 = self
            w2, x2, y2, z2 = other
            return Quat(w1*w2 - x1*x2 - y1*y2 - z1*z2,
                        w1*x2 + x1*w2 + y1*z2 - z1*y2,
                        w1*y2 - x1*z2 + y1*w2 + z1*x2,
                        w1*z2 + x1*y2 - y1*x2 + z1*w2)
        if isgoodnum(other):
            return Quat(self.w * other, self.x * other, self.y * other, self.z * other)
        return NotImplemented

    @property
    def norm(self):
        return math.sqrt(self.w*self.w + self.x*self.x + self.y*self.y + self.z*self.z)

    @property
    def conjugate(self):
        return Quat(self.w, -self.x, -self.y, -self.z)

    @property
    def normalized(self):
        n = self.norm
        if n == 0:
            raise DegenerateGeometryError('zero quaternion passed to normalized')
        return self * (1.0 / n)

    @property
    def inverse(self):
        n2 = self.norm ** 2
        if n2 == 0:
            raise DegenerateGeometryError('zero quaternion passed to inverse')
        return self.conjugate * (1.0 / n2)

    def rotate(self, v):
        """rotate the 3 vector ``v`` by this (unit) quaternion"""
        p = Quat(0.0, v[0], v[1], v[2])
        r = self * p * self.conjugate
        return Vec3(r.x, r.y, r.z)

    def to_matrix(self):
        w, x, y, z = self.normalized
        R = [[1 - 2*(y*y + z*z), 2*(x*y - z*w), 2*(x*z + y*w), 0],
             [2*(x*y + z*w), 1 - 2*(x*x + z*z), 2*(y*z - x*w), 0],
             [2*(x*z - y*w), 2*(y*z + x*w), 1 - 2*(x*x + y*y), 0],
             [0, 0, 0, 1]]
        return Matrix(R)
