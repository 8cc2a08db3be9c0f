# csgtrace/geometry/intersection.py
"""
Closed-form ray intersection for the primitive shapes.

Every routine returns all forward hits along the ray rather than only the
nearest one, since composites need the full list to decide which crossings
are real boundaries. The entry point is intersect(), which dispatches on the
shape type and hands composites to the CSG merger.
"""
import logging
import math
from typing import List, Tuple

from csgtrace.core.ray import Ray
from csgtrace.core.utils import EPSILON, quadratic_roots
from csgtrace.core.vector import Vector3
from csgtrace.geometry import csg
from csgtrace.geometry.errors import InvariantViolation
from csgtrace.geometry.hittable import Hitpoint
from csgtrace.geometry.shapes import Composite, Plane, Shape, Sphere, Triangle
from csgtrace.materials.textures import Texture, get_material

logger = logging.getLogger(__name__)


def intersect(ray: Ray, shape: Shape) -> List[Hitpoint]:
    """
    Intersect a ray with a shape.

    Args:
        ray: The ray to trace.
        shape: Any shape built by the make_* factories.

    Returns:
        Every hit of the ray on the shape's boundary in front of the ray
        origin. Primitives yield hits in ascending distance; composites yield
        the merged boundary hits.

    Raises:
        NotImplementedFault: If the shape contains a subtraction or an
            intersection that gets hit-tested.
        InvariantViolation: If a solver or the union merge breaks an
            internal invariant.
        TypeError: If shape is not a known shape type.
    """
    if isinstance(shape, Plane):
        return hit_plane(ray, shape)
    if isinstance(shape, Sphere):
        return hit_sphere(ray, shape)
    if isinstance(shape, Triangle):
        return hit_triangle(ray, shape)
    if isinstance(shape, Composite):
        return csg.intersect_composite(ray, shape.left, shape.right, shape.operator)
    raise TypeError(f"No hit function for shape of type {type(shape).__name__}")


def hit_plane(ray: Ray, plane: Plane) -> List[Hitpoint]:
    rdn = ray.direction.dot(plane.normal)
    # Both faces are rendered, so only a near-parallel ray misses.
    if -EPSILON < rdn < EPSILON:
        return []

    t = (plane.origin - ray.origin).dot(plane.normal) / rdn
    # The hit is behind the ray origin
    if t < 0.0:
        return []

    # Texture coordinates come from x and z only; y is not taken into account.
    hit_point = ray.at(t)
    u = abs(math.fmod(hit_point.x, 1.0))
    v = abs(math.fmod(hit_point.z, 1.0))

    material = get_material(u, v, plane.texture)
    return [Hitpoint(t, plane.normal, material)]


def sphere_uv(normal: Vector3) -> Tuple[float, float]:
    """
    Spherical texture coordinates for a unit outward normal.

    Returns:
        (u, v) with u the azimuth around the y axis in [0, 1) and v running
        from 0 at the bottom pole to 1 at the top pole.
    """
    theta = math.acos(max(-1.0, min(1.0, normal.y)))
    phi = math.atan2(normal.x, normal.z)
    if phi < 0.0:
        phi += 2.0 * math.pi

    u = phi / (2.0 * math.pi)
    v = 1.0 - theta / math.pi
    return u, v


def _sphere_hitpoint(ray: Ray, t: float, center: Vector3, texture: Texture) -> Hitpoint:
    normal = (ray.at(t) - center).normalize()
    u, v = sphere_uv(normal)
    return Hitpoint(t, normal, get_material(u, v, texture))


def hit_sphere(ray: Ray, sphere: Sphere) -> List[Hitpoint]:
    """
    Solves |origin + t * direction - center|^2 = radius^2 for t.

    Expanding gives a*t^2 + b*t + c = 0 with
        a = dot(direction, direction)
        b = 2 * dot(origin - center, direction)
        c = dot(origin - center, origin - center) - radius^2
    """
    oc = ray.origin - sphere.center
    a = ray.direction.dot(ray.direction)
    b = 2.0 * oc.dot(ray.direction)
    c = oc.dot(oc) - sphere.radius * sphere.radius

    distances = quadratic_roots(a, b, c)
    if len(distances) > 2:
        logger.error("Sphere %r produced %d roots for %r", sphere, len(distances), ray)
        raise InvariantViolation("Hitting a sphere more than two times")

    return [_sphere_hitpoint(ray, t, sphere.center, sphere.texture) for t in distances]


def hit_triangle(ray: Ray, triangle: Triangle) -> List[Hitpoint]:
    """
    Möller–Trumbore intersection. Two-sided: the winding only decides which
    way the reported normal points.
    """
    # Triangles carry one constant material, sampled at a fixed UV.
    material = get_material(0.0, 0.0, triangle.texture)

    edge1 = triangle.b - triangle.a
    edge2 = triangle.c - triangle.a
    p = ray.direction.cross(edge2)
    det = edge1.dot(p)

    # Ray is parallel to the triangle's plane
    if -EPSILON < det < EPSILON:
        return []
    inv_det = 1.0 / det

    s = ray.origin - triangle.a
    u = s.dot(p) * inv_det
    if u < 0.0 or u > 1.0:
        return []

    q = s.cross(edge1)
    v = ray.direction.dot(q) * inv_det
    if v < 0.0 or u + v > 1.0:
        return []

    t = edge2.dot(q) * inv_det
    if t <= EPSILON:
        return []

    normal = edge1.cross(edge2).normalize()
    return [Hitpoint(t, normal, material)]
