# csgtrace/materials/textures.py
import os
from typing import Callable, Union

import numpy as np
from PIL import Image

from csgtrace.core.uv import UV
from csgtrace.core.vector import Vector3
from csgtrace.materials.material import Material


class Texture:
    """Base class for all textures: a mapping from UV coordinates to materials."""
    def sample(self, uv: UV) -> Material:
        """Sample the texture at given UV coordinates."""
        raise NotImplementedError("sample() must be implemented by texture subclasses.")


class SolidTexture(Texture):
    """Every surface point maps to the same material."""
    def __init__(self, material: Material):
        self.material = material

    def sample(self, uv: UV) -> Material:
        return self.material


class FunctionTexture(Texture):
    """Wraps an arbitrary (u, v) -> Material callable."""
    def __init__(self, func: Callable[[float, float], Material]):
        self.func = func

    def sample(self, uv: UV) -> Material:
        return self.func(uv.u, uv.v)


class CheckerTexture(Texture):
    """A checker pattern alternating between two materials."""
    def __init__(self, material1: Material, material2: Material, scale: float = 1.0):
        self.material1 = material1
        self.material2 = material2
        self.scale = scale

    def sample(self, uv: UV) -> Material:
        x = int(uv.u * self.scale)
        y = int(uv.v * self.scale)
        is_even = (x + y) % 2 == 0
        return self.material1 if is_even else self.material2


class ImageTexture(Texture):
    """
    A texture backed by an RGB image. Each texel becomes a material with the
    texel's color and a shared reflectivity.
    """
    def __init__(self, image: Union[str, Image.Image, np.ndarray], reflectivity: float = 0.0):
        if isinstance(image, str):
            if not os.path.exists(image):
                raise FileNotFoundError(f"Texture file not found: {image}")
            try:
                with Image.open(image) as img:
                    data = self._to_array(img)
            except OSError as e:
                raise ValueError(f"Error loading texture {image}: {e}") from e
        elif isinstance(image, Image.Image):
            data = self._to_array(image)
        else:
            data = np.asarray(image, dtype=np.float64)
            if data.ndim != 3 or data.shape[2] != 3:
                raise ValueError(f"Expected an (height, width, 3) array, got shape {data.shape}")

        self.data = data
        self.height, self.width = data.shape[0], data.shape[1]
        self.reflectivity = reflectivity

    @staticmethod
    def _to_array(img: Image.Image) -> np.ndarray:
        if img.mode != 'RGB':
            img = img.convert('RGB')
        # Normalize to [0,1]
        return np.asarray(img, dtype=np.float64) / 255.0

    def sample(self, uv: UV) -> Material:
        # Handle texture wrapping
        u = uv.u % 1.0
        v = 1.0 - (uv.v % 1.0)  # Flip V coordinate for OpenGL-style UV

        x = min(int(u * self.width), self.width - 1)
        y = min(int(v * self.height), self.height - 1)

        r, g, b = self.data[y, x]
        return Material(Vector3(float(r), float(g), float(b)), self.reflectivity)


def get_material(u: float, v: float, texture: Texture) -> Material:
    """Look up the material at normalized surface coordinates (u, v)."""
    return texture.sample(UV(u, v))
