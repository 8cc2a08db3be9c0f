# csgtrace/geometry/shapes.py
"""
Shape tree: primitives and boolean combinations of them.

Shapes are frozen values built through the make_* factories, which enforce
each primitive's invariants. A Composite owns its two children outright, so a
shape is always a tree.
"""
import enum
import logging
from dataclasses import dataclass

from csgtrace.core.vector import Vector3
from csgtrace.geometry.errors import InvalidShapeError, NonPositiveSizeError
from csgtrace.materials.material import Material
from csgtrace.materials.textures import SolidTexture, Texture

logger = logging.getLogger(__name__)


class Composition(enum.Enum):
    UNION = "union"
    SUBTRACTION = "subtraction"
    INTERSECTION = "intersection"


class Shape:
    """
    Abstract base for everything a ray can be intersected with.
    """
    __slots__ = ()


@dataclass(frozen=True)
class Plane(Shape):
    """Infinite two-sided plane. The origin anchors the texture mapping."""
    origin: Vector3
    normal: Vector3
    texture: Texture


@dataclass(frozen=True)
class Sphere(Shape):
    center: Vector3
    radius: float
    texture: Texture


@dataclass(frozen=True)
class Triangle(Shape):
    """Triangle with vertices a, b, c. Winding (b - a) x (c - a) gives the normal."""
    a: Vector3
    b: Vector3
    c: Vector3
    texture: Texture


@dataclass(frozen=True)
class Composite(Shape):
    left: Shape
    right: Shape
    operator: Composition


def make_plane(origin: Vector3, up: Vector3, texture: Texture) -> Plane:
    """
    Make a plane through origin facing along up.

    The up vector is stored at unit length so every hit reports a unit
    normal.

    Raises:
        InvalidShapeError: If up is the zero vector.
    """
    if up.length() == 0:
        raise InvalidShapeError("Attempting to create a plane with a 0-vector as the normal")
    plane = Plane(origin, up.normalize(), texture)
    logger.debug("Created %r", plane)
    return plane


def make_sphere(center: Vector3, radius: float, texture: Texture) -> Sphere:
    """
    Make a sphere from center and radius.

    Raises:
        NonPositiveSizeError: If radius is zero or negative.
    """
    if radius <= 0:
        raise NonPositiveSizeError(f"Sphere radius must be positive, got {radius}")
    sphere = Sphere(center, radius, texture)
    logger.debug("Created %r", sphere)
    return sphere


def make_triangle(a: Vector3, b: Vector3, c: Vector3, material: Material) -> Triangle:
    """
    Make a single-material triangle from three vertices.

    Raises:
        NonPositiveSizeError: If any two vertices coincide.
    """
    if a == b or a == c or b == c:
        raise NonPositiveSizeError(f"Triangle vertices must be distinct, got {a}, {b}, {c}")
    triangle = Triangle(a, b, c, SolidTexture(material))
    logger.debug("Created %r", triangle)
    return triangle


def make_union(shape1: Shape, shape2: Shape) -> Composite:
    """The two shapes acting as a single solid."""
    return Composite(shape1, shape2, Composition.UNION)


def make_subtraction(shape1: Shape, shape2: Shape) -> Composite:
    """shape1 with shape2 carved out of it."""
    return Composite(shape1, shape2, Composition.SUBTRACTION)


def make_intersection(shape1: Shape, shape2: Shape) -> Composite:
    """The region where shape1 and shape2 overlap."""
    return Composite(shape1, shape2, Composition.INTERSECTION)
