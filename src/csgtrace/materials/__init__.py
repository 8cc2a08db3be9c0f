"""Opaque materials and the textures that map surface coordinates to them."""
from csgtrace.materials.material import Material
from csgtrace.materials.textures import (
    CheckerTexture,
    FunctionTexture,
    ImageTexture,
    SolidTexture,
    Texture,
    get_material,
)

__all__ = [
    "CheckerTexture",
    "FunctionTexture",
    "ImageTexture",
    "Material",
    "SolidTexture",
    "Texture",
    "get_material",
]
