import logging
import math

import pytest

from meshcsg import boolean
from meshcsg.boolean import native, trimesh_engine
from meshcsg.boolean.native import (
    Classification,
    Difference,
    Intersection,
    Union,
    classify,
    find_cut_lines,
    solid_boolean,
)
from meshcsg.geom import Vec3
from meshcsg.geom3d import Triangle
from meshcsg.mesh import Mesh, surface_area
from meshcsg.primitives import cube


class CountingStream:
    """re-iterable triangle stream that records how often it is read"""

    def __init__(self, triangles):
        self.triangles = list(triangles)
        self.reads = 0

    def __iter__(self):
        self.reads += 1
        return iter(self.triangles)


def vertices(triangles):
    return [p for t in triangles for p in t.corners]


def within(points, lo, hi, tol=1e-9):
    return all(lo - tol <= c <= hi + tol for p in points for c in p)


# a cube and one far enough away that no ray or edge can reach it
A = cube(1.0, Vec3(0, 0, 0))
FAR = cube(1.0, Vec3(5, 5, 5))
SHIFTED = cube(1.0, Vec3(0.5, 0.5, 0.5))


class TestDisjoint:
    """meshes that do not touch pass through unchanged"""

    def test_no_cut_lines(self):
        acuts, bcuts = find_cut_lines(list(A), list(FAR))
        assert len(acuts) == len(A)
        assert len(bcuts) == len(FAR)
        assert all(not lines for lines in acuts)
        assert all(not lines for lines in bcuts)

    def test_union(self):
        assert list(Union(A, FAR)) == list(A) + list(FAR)

    def test_intersection(self):
        assert list(Intersection(A, FAR)) == []

    def test_difference(self):
        assert list(Difference(A, FAR)) == list(A)

    def test_classification(self):
        parts = classify(A, FAR)
        assert parts.a_outside_b == list(A)
        assert parts.b_outside_a == list(FAR)
        assert parts.a_inside_b == []
        assert parts.b_inside_a == []


class TestSelf:
    """a mesh against itself"""

    def test_every_fragment_is_inside(self):
        parts = classify(A, A)
        assert parts.a_outside_b == []
        assert parts.b_outside_a == []
        assert math.isclose(surface_area(parts.a_inside_b), A.surface_area)
        assert math.isclose(surface_area(parts.b_inside_a), A.surface_area)

    def test_union_with_self_is_empty(self):
        assert list(Union(A, A)) == []


class TestOverlappingCubes:
    """two unit cubes overlapping in a corner"""

    def test_classification_partitions_fragments(self):
        parts = classify(A, SHIFTED)
        a_area = surface_area(parts.a_outside_b) + surface_area(parts.a_inside_b)
        b_area = surface_area(parts.b_outside_a) + surface_area(parts.b_inside_a)
        assert math.isclose(a_area, A.surface_area)
        assert math.isclose(b_area, SHIFTED.surface_area)
        assert parts.a_outside_b
        assert parts.b_outside_a

    @pytest.mark.parametrize('composer', [Union, Intersection, Difference])
    def test_result_is_bounded(self, composer):
        result = composer(A, SHIFTED).materialize()
        assert isinstance(result, Mesh)
        assert len(result) > 0
        assert within(vertices(result), -0.5, 1.0)

    @pytest.mark.parametrize('composer, area', [
        (Union, 10.5),
        (Intersection, 1.5),
        (Difference, 6.0),
    ])
    def test_result_area(self, composer, area):
        assert math.isclose(composer(A, SHIFTED).surface_area, area)

    def test_union_covers_difference(self):
        parts = classify(A, SHIFTED)
        union = Union(A, SHIFTED).materialize()
        difference = Difference(A, SHIFTED).materialize()
        # both keep every fragment of A that lies outside B
        assert set(parts.a_outside_b) <= set(union)
        assert set(parts.a_outside_b) <= set(difference)
        assert math.isclose(surface_area(parts.a_outside_b), 5.25)

    def test_cut_lines_found(self):
        acuts, bcuts = find_cut_lines(list(A), list(SHIFTED))
        assert any(acuts)
        assert any(bcuts)
        assert sum(map(len, acuts)) == sum(map(len, bcuts))


class TestComposers:
    """lazy composition"""

    def test_construction_is_lazy(self):
        a = CountingStream(A)
        b = CountingStream(FAR)
        op = Union(a, b)
        assert a.reads == 0
        assert b.reads == 0
        first = list(op)
        assert a.reads == 1
        assert b.reads == 1
        assert list(op) == first
        assert a.reads == 2

    def test_composers_nest(self):
        c = cube(1.0, Vec3(-5, -5, -5))
        nested = Union(Union(A, FAR), c)
        assert len(list(nested)) == 36
        assert math.isclose(nested.surface_area, 18.0)

    def test_materialize(self):
        m = Difference(A, FAR).materialize()
        assert m == Mesh(A)

    def test_classify_accepts_generators(self):
        parts = classify((t for t in A), (t for t in FAR))
        assert isinstance(parts, Classification)
        assert len(parts.a_outside_b) == 12

    def test_mesh_methods(self):
        assert A.union(FAR) == Union(A, FAR).materialize()
        assert A.intersection(FAR) == Mesh()
        assert A.difference(FAR) == Mesh(A)

    def test_classify_logs_summary(self, caplog):
        caplog.set_level(logging.INFO, logger='meshcsg.boolean.native')
        classify(A, FAR)
        assert 'classified 12 fragments of a' in caplog.text


class TestSolidBoolean:
    """functional entry point and engine registry"""

    def test_operations(self):
        assert solid_boolean(A, FAR, 'union') == A.join(FAR)
        assert solid_boolean(A, FAR, 'intersection') == Mesh()
        assert solid_boolean(A, FAR, 'difference') == Mesh(A)

    def test_bad_operation(self):
        with pytest.raises(ValueError):
            solid_boolean(A, FAR, 'xor')
        with pytest.raises(ValueError):
            trimesh_engine.solid_boolean(A, FAR, 'xor')

    def test_registry(self):
        assert boolean.get_engine('native') is native
        assert boolean.ENGINE_REGISTRY['native'] is native
        assert boolean.get_engine('nope') is None

    def test_single_triangles(self):
        flat = [Triangle((-2, -2, 0), (0, 2, 0), (2, -2, 0))]
        spike = [Triangle((-0.5, 0, -1), (0, 0, 1), (0.5, 0, -1))]
        acuts, bcuts = find_cut_lines(flat, spike)
        assert len(acuts[0]) == 1
        assert len(bcuts[0]) == 1
        parts = classify(flat, spike)
        assert math.isclose(surface_area(parts.a_outside_b) + surface_area(parts.a_inside_b),
                            flat[0].area)
