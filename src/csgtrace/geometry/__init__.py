"""
Shape construction and ray intersection.

Components:
    shapes: primitive and composite shapes with validating factories
    intersection: closed-form ray/primitive solvers and the intersect() entry point
    solidity: solid-versus-sheet classification used by the CSG merger
    csg: merging of child hit lists for boolean composites
"""
from csgtrace.geometry.errors import (
    GeometryError,
    InvalidShapeError,
    InvariantViolation,
    NonPositiveSizeError,
    NotImplementedFault,
)
from csgtrace.geometry.hittable import (
    Hitpoint,
    get_hit_distance,
    get_hit_material,
    get_hit_normal,
    get_hitpoint,
)
from csgtrace.geometry.intersection import intersect
from csgtrace.geometry.shapes import (
    Composite,
    Composition,
    Plane,
    Shape,
    Sphere,
    Triangle,
    make_intersection,
    make_plane,
    make_sphere,
    make_subtraction,
    make_triangle,
    make_union,
)

__all__ = [
    "Composite",
    "Composition",
    "GeometryError",
    "Hitpoint",
    "InvalidShapeError",
    "InvariantViolation",
    "NonPositiveSizeError",
    "NotImplementedFault",
    "Plane",
    "Shape",
    "Sphere",
    "Triangle",
    "get_hit_distance",
    "get_hit_material",
    "get_hit_normal",
    "get_hitpoint",
    "intersect",
    "make_intersection",
    "make_plane",
    "make_sphere",
    "make_subtraction",
    "make_triangle",
    "make_union",
]
