"""Ray intersection core for a CSG ray tracer.

Builds solid shapes (planes, spheres, triangles and boolean combinations of
them) and computes where a ray crosses their boundaries.

Subpackages:
    core: Vectors, rays, texture coordinates and numeric helpers
    materials: Opaque materials and texture lookup
    geometry: Shapes, primitive solvers and CSG merging
"""
from csgtrace.core import EPSILON, UV, Ray, Vector3
from csgtrace.geometry import (
    Composite,
    Composition,
    GeometryError,
    Hitpoint,
    InvalidShapeError,
    InvariantViolation,
    NonPositiveSizeError,
    NotImplementedFault,
    Plane,
    Shape,
    Sphere,
    Triangle,
    get_hit_distance,
    get_hit_material,
    get_hit_normal,
    get_hitpoint,
    intersect,
    make_intersection,
    make_plane,
    make_sphere,
    make_subtraction,
    make_triangle,
    make_union,
)
from csgtrace.materials import (
    CheckerTexture,
    FunctionTexture,
    ImageTexture,
    Material,
    SolidTexture,
    Texture,
    get_material,
)

__version__ = "0.1.0"

__all__ = [
    "EPSILON",
    "UV",
    "Ray",
    "Vector3",
    # Shapes
    "Shape",
    "Plane",
    "Sphere",
    "Triangle",
    "Composite",
    "Composition",
    "make_plane",
    "make_sphere",
    "make_triangle",
    "make_union",
    "make_subtraction",
    "make_intersection",
    # Queries
    "Hitpoint",
    "intersect",
    "get_hitpoint",
    "get_hit_distance",
    "get_hit_normal",
    "get_hit_material",
    # Errors
    "GeometryError",
    "InvalidShapeError",
    "NonPositiveSizeError",
    "NotImplementedFault",
    "InvariantViolation",
    # Materials
    "Material",
    "Texture",
    "SolidTexture",
    "FunctionTexture",
    "CheckerTexture",
    "ImageTexture",
    "get_material",
]
