"""Unit tests for vectors, rays and numeric helpers.

Tests cover:
- Vector arithmetic, dot and cross products, normalization
- Vector immutability and value equality
- Ray evaluation
- Quadratic root filtering
"""

import math

import pytest

from csgtrace.core.ray import Ray
from csgtrace.core.utils import EPSILON, is_near_zero, quadratic_roots
from csgtrace.core.vector import Vector3


class TestVector3:
    """Tests for Vector3 operations."""

    def test_arithmetic(self):
        a = Vector3(1.0, 2.0, 3.0)
        b = Vector3(4.0, 5.0, 6.0)
        assert a + b == Vector3(5.0, 7.0, 9.0)
        assert b - a == Vector3(3.0, 3.0, 3.0)
        assert a * 2 == Vector3(2.0, 4.0, 6.0)
        assert 2 * a == Vector3(2.0, 4.0, 6.0)
        assert b / 2 == Vector3(2.0, 2.5, 3.0)
        assert -a == Vector3(-1.0, -2.0, -3.0)

    def test_dot_and_cross(self):
        x = Vector3(1.0, 0.0, 0.0)
        y = Vector3(0.0, 1.0, 0.0)
        assert x.dot(y) == 0.0
        assert x.cross(y) == Vector3(0.0, 0.0, 1.0)
        assert y.cross(x) == Vector3(0.0, 0.0, -1.0)

    def test_normalize(self):
        """Normalized vectors have unit length; the zero vector stays zero."""
        n = Vector3(3.0, 4.0, 0.0).normalize()
        assert abs(n.length() - 1.0) < 1e-12
        assert abs(n.x - 0.6) < 1e-12
        assert Vector3(0.0, 0.0, 0.0).normalize() == Vector3(0.0, 0.0, 0.0)

    def test_immutable(self):
        v = Vector3(1.0, 2.0, 3.0)
        with pytest.raises(AttributeError):
            v.x = 5.0

    def test_equality_and_hash(self):
        assert Vector3(1, 2, 3) == Vector3(1.0, 2.0, 3.0)
        assert hash(Vector3(1, 2, 3)) == hash(Vector3(1.0, 2.0, 3.0))
        assert Vector3(1, 2, 3) != Vector3(1, 2, 3.5)

    def test_unpacking(self):
        x, y, z = Vector3(1.0, 2.0, 3.0)
        assert (x, y, z) == (1.0, 2.0, 3.0)


class TestRay:
    """Tests for Ray evaluation."""

    def test_at(self):
        ray = Ray(Vector3(1.0, 0.0, 0.0), Vector3(0.0, 2.0, 0.0))
        assert ray.at(0.0) == Vector3(1.0, 0.0, 0.0)
        assert ray.at(1.5) == Vector3(1.0, 3.0, 0.0)


class TestQuadraticRoots:
    """Tests for the shared quadratic solver."""

    def test_two_positive_roots(self):
        assert quadratic_roots(1.0, -3.0, 2.0) == [1.0, 2.0]

    def test_negative_root_dropped(self):
        """t^2 - 1 has roots -1 and 1; only the forward one survives."""
        assert quadratic_roots(1.0, 0.0, -1.0) == [1.0]

    def test_both_roots_behind(self):
        assert quadratic_roots(1.0, 3.0, 2.0) == []

    def test_no_real_roots(self):
        assert quadratic_roots(1.0, 0.0, 1.0) == []

    def test_tangent_single_root(self):
        """(t - 1)^2 touches zero once."""
        assert quadratic_roots(1.0, -2.0, 1.0) == [1.0]

    def test_tangent_behind(self):
        assert quadratic_roots(1.0, 2.0, 1.0) == []

    def test_near_zero_discriminant_is_tangent(self):
        """A discriminant inside the tolerance collapses to one root."""
        c = 1.0 - EPSILON / 8.0
        roots = quadratic_roots(1.0, -2.0, c)
        assert len(roots) == 1
        assert abs(roots[0] - 1.0) < 1e-12

    def test_roots_ascending(self):
        roots = quadratic_roots(2.0, -10.0, 8.0)
        assert roots == sorted(roots)
        assert all(math.isclose(r, e) for r, e in zip(roots, [1.0, 4.0]))

    def test_is_near_zero(self):
        assert is_near_zero(0.0)
        assert is_near_zero(EPSILON / 2)
        assert not is_near_zero(EPSILON)
        assert not is_near_zero(-1.0)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
