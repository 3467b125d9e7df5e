"""
Tests for triangle enumeration and clockwise canonicalization.

To run:
    pytest tests/test_triangles.py -v
"""
from itertools import permutations

import numpy as np
import pytest

from triangle_orientation.catalog import random_points
from triangle_orientation.errors import InvalidInputError, OrientationError
from triangle_orientation.triangles import Point, Triangle, create_triangles, is_clockwise_polygon, order_clockwise
from triangle_orientation.utils import shoelace_sum, wrap_deg, rotate_points


class TestCreateTriangles:

    @pytest.mark.parametrize("n", [3, 4, 5, 8, 11])
    def test_count(self, n):
        """N points give N(N-1)(N-2)/6 triangles."""
        tris = create_triangles(random_points(N=n, seed=n))
        assert len(tris) == n*(n-1)*(n-2)//6

    def test_distinct_and_ordered(self):
        """One triangle per i<j<k triple, in lexicographic order."""
        P = random_points(N=6, seed=1)
        tris = create_triangles(P)
        expected = [(i, j, k) for i in range(6) for j in range(i+1, 6) for k in range(j+1, 6)]
        for tri, (i, j, k) in zip(tris, expected):
            assert tri.vertices == (Point(*P[i]), Point(*P[j]), Point(*P[k]))
        assert len({frozenset(t.vertices) for t in tris}) == len(tris)

    def test_accepts_point_tuples(self):
        tris = create_triangles([Point(0, 0), (1, 0), (0, 1)])
        assert len(tris) == 1
        assert tris[0].vertices[1] == Point(1.0, 0.0)

    @pytest.mark.parametrize("pts", [[], [(0, 0)], [(0, 0), (1, 1)]])
    def test_too_few_points(self, pts):
        with pytest.raises(InvalidInputError):
            create_triangles(pts)


class TestTriangle:

    def test_angles_follow_vertex_order(self):
        t = Triangle((0, 0), (0, 1), (1, 0))
        np.testing.assert_allclose(t.angles, [90, 45, 45], atol=1e-9)
        t.swap_vertices(0, 1)
        np.testing.assert_allclose(t.angles, [45, 90, 45], atol=1e-9)
        assert t.angles.sum() == pytest.approx(180.0)

    def test_degenerate(self):
        assert Triangle((0, 0), (1, 1), (2, 2)).is_degenerate
        assert Triangle((0, 0), (0, 0), (3, 1)).is_degenerate
        assert not Triangle((0, 0), (1, 1), (2, 2.5)).is_degenerate

    def test_identity_equality(self):
        a = Triangle((0, 0), (0, 1), (1, 0))
        b = Triangle((0, 0), (0, 1), (1, 0))
        assert a != b and a == a

    @pytest.mark.parametrize("theta", [0.0, 30.0, -75.0, 179.0, 250.0])
    def test_orientation_follows_rotation(self, theta):
        """Rotating a triangle about any center shifts its orientation by theta."""
        P = np.array([[3.0, 1.0], [7.5, 2.0], [4.0, 6.0]])
        t0 = Triangle(*P)
        t1 = Triangle(*rotate_points(P, theta, center=(-20.0, 11.0)))
        assert 0.0 <= t0.orientation_average < 360.0
        assert float(wrap_deg(t1.orientation_average - t0.orientation_average - theta)) == pytest.approx(0.0, abs=1e-9)


class TestOrderClockwise:

    def test_shoelace_sign(self):
        assert is_clockwise_polygon([(0, 0), (0, 1), (1, 0)])
        assert not is_clockwise_polygon([(0, 0), (1, 0), (0, 1)])

    def test_reorders_counterclockwise(self):
        t = Triangle((0, 0), (1, 0), (0, 1))
        order_clockwise(t)
        assert t.vertices == (Point(0, 0), Point(0, 1), Point(1, 0))

    def test_idempotent(self):
        for t in create_triangles(random_points(N=6, seed=4)):
            order_clockwise(t)
            before = t.vertices
            order_clockwise(t)
            assert t.vertices == before
            assert shoelace_sum(t.vertices) > 0

    def test_clockwise_permutations_are_cyclic(self):
        """Three of the six vertex orders wind clockwise, the cyclic shifts of each other."""
        P = [(1.0, 2.0), (4.0, 0.5), (2.5, 5.0)]
        cw = [p for p in permutations(P) if is_clockwise_polygon(p)]
        assert len(cw) == 3
        first = cw[0]
        shifts = {first, first[1:] + first[:1], first[2:] + first[:2]}
        assert set(cw) == shifts

    def test_deterministic_choice(self):
        """Any starting order ends on the first clockwise order of the swap sequence."""
        P = [(1.0, 2.0), (4.0, 0.5), (2.5, 5.0)]
        for perm in permutations(P):
            t = Triangle(*perm)
            order_clockwise(t)
            assert shoelace_sum(t.vertices) > 0
            assert set(t.vertices) == {Point(*p) for p in P}

    def test_degenerate_raises(self):
        with pytest.raises(OrientationError):
            order_clockwise(Triangle((0, 0), (1, 1), (2, 2)))
