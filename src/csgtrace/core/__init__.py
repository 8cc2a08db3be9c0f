"""Vector, ray and texture-coordinate primitives shared by the geometry core."""
from csgtrace.core.ray import Ray
from csgtrace.core.utils import EPSILON, is_near_zero, quadratic_roots
from csgtrace.core.uv import UV
from csgtrace.core.vector import Vector3

__all__ = [
    "EPSILON",
    "Ray",
    "UV",
    "Vector3",
    "is_near_zero",
    "quadratic_roots",
]
