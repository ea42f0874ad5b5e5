import pytest

from meshcsg.geom import DegenerateGeometryError, Line3, Vec3, close, vclose
from meshcsg.geom3d import Box3, PlanarSide, Plane, Triangle
from meshcsg.raycast import Ray
from meshcsg.xform import Translation
## unit tests for meshCSG geom3d.py


class TestPlane:
    """planes"""

    def test_normalizes(self):
        p = Plane((0, 0, 5), 1)
        assert(p.normal == Vec3.K)
        assert(p.distance == 1.0)

    def test_project(self):
        assert(Plane.XY.project((4, 3, 2)) == Vec3(4, 3, 0))
        assert(Plane.XY.closest_point_to((4, 3, -2)) == Vec3(4, 3, 0))
        assert(Plane.XZ.project((4, 3, 2)) == Vec3(4, 0, 2))

    def test_distance_between(self):
        assert(Plane.XY.distance_between((4, 3, 2)) == 2)
        assert(Plane.XY.distance_between((4, 3, -2)) == -2)
        assert(Plane((0, 0, 1), 1).distance_between((0, 0, 3)) == 2)

    def test_side(self):
        assert(Plane.XY.side((0, 0, 1)) == PlanarSide.ABOVE)
        assert(Plane.XY.side((0, 0, -1)) == PlanarSide.BELOW)
        assert(Plane.XY.side((5, 5, 0)) == PlanarSide.BELOW)
        assert(Plane.XY.same_side((1, 2, 3), (3, 2, 1)))
        assert(not Plane.XY.same_side((1, 2, 3), (3, 2, -1)))

    def test_flipped(self):
        p = Plane((0, 0, 1), 2).flipped
        assert(p.normal == -Vec3.K)
        assert(p.distance == -2)
        assert(p.side((0, 0, 0)) == PlanarSide.ABOVE)

    def test_from_points_degenerate(self):
        with pytest.raises(DegenerateGeometryError):
            Plane.from_points((0, 0, 0), (1, 1, 1), (2, 2, 2))


class TestBox3:
    """axis-aligned boxes"""

    bx1 = Box3((-1, -1, -1), (1, 1, 1))
    bx2 = Box3((2, -1, -1), (3, 1, 1))
    bx3 = Box3((-1.5, -1, -1), (1.5, 1, 1))

    def test_reorders_corners(self):
        assert(Box3((1, 1, 1), (-1, -1, -1)) == self.bx1)
        b = Box3((1, -1, 1), (-1, 1, -1))
        assert(b.min == Vec3(-1, -1, -1))
        assert(b.max == Vec3(1, 1, 1))

    def test_derived(self):
        assert(self.bx2.centre == Vec3(2.5, 0, 0))
        assert(self.bx2.size == Vec3(1, 2, 2))
        assert(self.bx2.extents == Vec3(0.5, 1, 1))

    def test_intersects_box(self):
        assert(self.bx1.intersects(self.bx3))
        assert(self.bx3.intersects(self.bx1))
        assert(not self.bx1.intersects(self.bx2))
        assert(self.bx2.intersects(self.bx3) is False)

    def test_merge(self):
        m = self.bx1.merge(self.bx2)
        assert(m.min == Vec3(-1, -1, -1))
        assert(m.max == Vec3(3, 1, 1))

    def test_contains(self):
        assert(self.bx1.contains((0, 0, 0)))
        assert(self.bx1.contains((1, 1, 1)))
        assert(not self.bx1.contains((4, 1, 1)))

    def test_from_points(self):
        b = Box3.from_points(Vec3(1, 0, 0), Vec3(0, 2, 0), Vec3(0, 0, -3))
        assert(b == Box3((0, 0, -3), (1, 2, 0)))
        with pytest.raises(ValueError):
            Box3.from_points()

    def test_intersects_ray(self):
        assert(self.bx1.intersects_ray(Ray((-5, 0, 0), (1, 0, 0))))
        assert(not self.bx1.intersects_ray(Ray((-5, 5, 0), (1, 0, 0))))
        assert(not self.bx1.intersects_ray(Ray((-5, 0, 0), (-1, 0, 0))))
        assert(Ray((-5, 0, 0), (1, 0, 0)).cast_box(self.bx1) == Vec3(-1, 0, 0))
        assert(Ray((0, 0, 0), (1, 0, 0)).cast_box(self.bx1) == Vec3(0, 0, 0))

    def test_intersects_triangle(self):
        tri = Triangle((-1, -1, 0), (0, 1, 0), (1, -1, 0))
        assert(self.bx1.intersects_triangle(tri))
        above = Triangle((-1, -1, 2), (0, 1, 2), (1, -1, 2))
        assert(not self.bx1.intersects_triangle(above))

    def test_intersects_triangle_oblique(self):
        # plane x + y + z = 1.9 clips the corner of the larger box only
        tri = Triangle((1.9, 0, 0), (0, 1.9, 0), (0, 0, 1.9))
        assert(not Box3((-1, -1, -1), (0.5, 0.5, 0.5)).intersects_triangle(tri))
        assert(Box3((-1, -1, -1), (0.7, 0.7, 0.7)).intersects_triangle(tri))


class TestTriangle:
    """triangles"""

    def test_plane(self):
        tri = Triangle((-1, 0, 0), (0, 1, 0), (1, 0, 0))
        assert(tri.plane == Plane(Vec3.K, 0))
        assert(tri.plane == Plane.XY)
        assert(tri.normal == Vec3.K)

    def test_winding_fixes_normal(self):
        tri = Triangle((0, 0, 0), (1, 0, 0), (0, 1, 0))
        assert(vclose(tri.normal, (0, 0, -1)))
        assert(vclose(tri.flipped.normal, (0, 0, 1)))

    def test_degenerate(self):
        with pytest.raises(DegenerateGeometryError):
            Triangle((0, 0, 0), (1, 1, 1), (2, 2, 2))
        with pytest.raises(DegenerateGeometryError):
            Triangle((0, 0, 0), (0, 0, 0), (1, 0, 0))

    def test_equality(self):
        a = Triangle((0, 0, 0), (1, 0, 0), (0, 1, 0))
        assert(a == Triangle(Vec3(0, 0, 0), Vec3(1, 0, 0), Vec3(0, 1, 0)))
        assert(a != Triangle((1, 0, 0), (0, 1, 0), (0, 0, 0)))
        assert(len({a, Triangle((0, 0, 0), (1, 0, 0), (0, 1, 0))}) == 1)

    def test_derived(self):
        tri = Triangle((0, 0, 0), (3, 0, 0), (0, 3, 0))
        assert(close(tri.area, 4.5))
        assert(tri.centre == Vec3(1, 1, 0))
        assert(tri.edge12 == Vec3(3, 0, 0))
        assert(tri.edge21 == Vec3(-3, 0, 0))
        assert(tri.edge13 == Vec3(0, 3, 0))
        assert(tri.edge31 == Vec3(0, -3, 0))
        assert(tri.edge23 == Vec3(-3, 3, 0))
        assert(tri.edge32 == Vec3(3, -3, 0))
        assert(list(tri) == [tri.p1, tri.p2, tri.p3])

    def test_bounds(self):
        tri = Triangle((0, 0, 0), (3, 0, 0), (0, 3, 0))
        b = tri.bounds
        assert(vclose(b.centre, tri.centre))
        for p in tri.corners:
            assert(b.contains(p))

    def test_contains(self):
        tri = Triangle((-1, 0, 0), (0, 1, 0), (1, 0, 0))
        assert(tri.contains((0, 0.5, 0)))
        assert(tri.contains((0, 0.5, 7)))
        assert(tri.contains((-1, 0, 0)))
        assert(not tri.contains((0, -0.5, 0)))
        assert(not tri.contains((2, 0.5, 0)))

    def test_closest_point_to(self):
        tri = Triangle((-1, 0, 0), (0, 1, 0), (1, 0, 0))
        assert(vclose(tri.closest_point_to((-6, 0, 0)), (-1, 0, 0)))
        assert(vclose(tri.closest_point_to((6, 0, 0)), (1, 0, 0)))
        assert(vclose(tri.closest_point_to((0, 6, 0)), (0, 1, 0)))
        assert(vclose(tri.closest_point_to((0, 0.5, 1)), (0, 0.5, 0)))
        assert(vclose(tri.closest_point_to((0, -3, 0)), (0, 0, 0)))

    def test_transform(self):
        tri = Triangle((0, 0, 0), (1, 0, 0), (0, 1, 0))
        moved = tri.transform(Translation((1, 2, 3)))
        assert(moved == Triangle((1, 2, 3), (2, 2, 3), (1, 3, 3)))
        assert(vclose(moved.normal, tri.normal))


class TestTriangleIntersection:
    """triangle/triangle crossing"""

    vertical = Triangle((-1, 0, -1), (0, 0, 1), (1, 0, -1))
    horizontal = Triangle((-1, -1, 0), (0, 1, 0), (1, -1, 0))
    off_centre = Triangle((-1, -3, 0), (0, -1, 0), (1, -3, 0))

    def test_intersects(self):
        assert(self.vertical.intersects(self.horizontal))
        assert(not self.vertical.intersects(self.off_centre))

    def test_intersects_symmetric(self):
        tris = [self.vertical, self.horizontal, self.off_centre,
                Triangle((0, -2, -2), (0, 2, -2), (0, 0, 2)),
                Triangle((-3, 0.5, -1), (3, 0.5, -1), (0, 0.5, 4)),
                Triangle((5, 5, 5), (6, 5, 5), (5, 6, 5))]
        for a in tris:
            for b in tris:
                assert(a.intersects(b) == b.intersects(a))

    def test_coplanar_does_not_intersect(self):
        a = Triangle((0, 0, 0), (2, 0, 0), (0, 2, 0))
        b = Triangle((0.5, 0.5, 0), (3, 0.5, 0), (0.5, 3, 0))
        assert(not a.intersects(b))

    def test_intersection_line(self):
        line = self.vertical.intersection(self.horizontal)
        assert(line is not None)
        assert(line.same_segment(Line3(Vec3(-0.5, 0, 0), Vec3(0.5, 0, 0))))

    def test_intersection_symmetric(self):
        line = self.horizontal.intersection(self.vertical)
        assert(line is not None)
        assert(line.same_segment(Line3(Vec3(-0.5, 0, 0), Vec3(0.5, 0, 0))))

    def test_no_intersection(self):
        assert(self.vertical.intersection(self.off_centre) is None)
        assert(self.off_centre.intersection(self.vertical) is None)

    def test_piercing_intersection(self):
        # a spike through the middle of a flat triangle
        flat = Triangle((-2, -2, 0), (0, 2, 0), (2, -2, 0))
        spike = Triangle((-0.5, 0, -1), (0, 0, 1), (0.5, 0, -1))
        line = spike.intersection(flat)
        assert(line is not None)
        assert(line.same_segment(Line3(Vec3(-0.25, 0, 0), Vec3(0.25, 0, 0))))
