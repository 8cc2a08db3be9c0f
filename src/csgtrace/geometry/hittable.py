# csgtrace/geometry/hittable.py
from dataclasses import dataclass
from typing import Tuple

from csgtrace.core.vector import Vector3
from csgtrace.materials.material import Material


@dataclass(frozen=True)
class Hitpoint:
    """
    Records details of a ray-surface intersection.

    Attributes:
        distance: Ray parameter of the hit, measured from the ray origin
            along the ray direction. Never negative.
        normal: Unit surface normal at the hit. Not flipped toward the ray.
        material: The material resolved from the shape's texture.
    """
    distance: float
    normal: Vector3
    material: Material


def get_hitpoint(hit: Hitpoint) -> Tuple[float, Vector3, Material]:
    """Distance, normal and material of the hit as a triple."""
    return hit.distance, hit.normal, hit.material


def get_hit_distance(hit: Hitpoint) -> float:
    return hit.distance


def get_hit_normal(hit: Hitpoint) -> Vector3:
    return hit.normal


def get_hit_material(hit: Hitpoint) -> Material:
    return hit.material
