# csgtrace/geometry/solidity.py
"""
Classification of shapes as solid volumes or zero-thickness sheets.

Planes and triangles have no interior, so every crossing of one is a
boundary. The union merge uses these predicates to keep such crossings even
when the branch bookkeeping would discard them.
"""
from csgtrace.core.ray import Ray
from csgtrace.core.utils import EPSILON, is_near_zero
from csgtrace.core.vector import Vector3
from csgtrace.geometry.hittable import Hitpoint
from csgtrace.geometry.shapes import Composite, Composition, Plane, Shape, Sphere, Triangle


def _in_unit_interval(value: float) -> bool:
    return -EPSILON <= value <= 1.0 + EPSILON


def _point_in_triangle(point: Vector3, triangle: Triangle) -> bool:
    # Barycentric coordinates as ratios of sub-triangle areas to the full area.
    a, b, c = triangle.a, triangle.b, triangle.c
    area = (b - a).cross(c - a).length()
    if area == 0.0:
        return False

    alpha = (b - point).cross(c - point).length() / area
    if not _in_unit_interval(alpha):
        return False
    beta = (c - point).cross(a - point).length() / area
    if not _in_unit_interval(beta):
        return False
    gamma = 1.0 - alpha - beta
    return _in_unit_interval(gamma)


def lies_on_non_solid_boundary(point: Vector3, shape: Shape) -> bool:
    """
    True if point lies on a plane or triangle anywhere within shape.

    Spheres never count: they are solid, so a point on their surface is not
    on a sheet. Composites are searched through both children regardless of
    their operator.
    """
    stack = [shape]
    while stack:
        current = stack.pop()
        if isinstance(current, Composite):
            stack.append(current.right)
            stack.append(current.left)
        elif isinstance(current, Plane):
            if is_near_zero((point - current.origin).dot(current.normal)):
                return True
        elif isinstance(current, Triangle):
            if _point_in_triangle(point, current):
                return True
        elif not isinstance(current, Sphere):
            raise TypeError(f"Unknown shape type {type(current).__name__}")
    return False


def is_non_solid(ray: Ray, hit: Hitpoint, shape: Shape) -> bool:
    """
    True if the shape struck by hit behaves as a zero-thickness surface.

    Args:
        ray: The ray that produced the hit.
        hit: A hit on shape.
        shape: The shape the hit originated from.
    """
    if isinstance(shape, (Plane, Triangle)):
        return True
    if isinstance(shape, Sphere):
        return False
    if isinstance(shape, Composite):
        if shape.operator is Composition.INTERSECTION:
            # A sheet intersected with anything is still a sheet.
            return is_non_solid(ray, hit, shape.left) or is_non_solid(ray, hit, shape.right)
        if shape.operator is Composition.UNION:
            # Depends on which member was struck, so test the hit location.
            return lies_on_non_solid_boundary(ray.at(hit.distance), shape)
        if shape.operator is Composition.SUBTRACTION:
            return is_non_solid(ray, hit, shape.left)
    raise TypeError(f"Unknown shape type {type(shape).__name__}")
