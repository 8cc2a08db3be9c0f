# csgtrace/materials/material.py
from csgtrace.core.vector import Vector3


class Material:
    """
    Surface material carried through intersection untouched.
    The geometry core never inspects it; shading code does.
    """
    __slots__ = ("color", "reflectivity")

    def __init__(self, color: Vector3, reflectivity: float = 0.0):
        self.color = color
        self.reflectivity = reflectivity

    def __eq__(self, other) -> bool:
        if not isinstance(other, Material):
            return NotImplemented
        return self.color == other.color and self.reflectivity == other.reflectivity

    def __hash__(self) -> int:
        return hash((self.color, self.reflectivity))

    def __repr__(self) -> str:
        return f"Material({self.color!r}, reflectivity={self.reflectivity})"
