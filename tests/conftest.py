"""Pytest configuration for csgtrace tests.

Shared materials and textures used across the geometry test modules.
"""

import pytest

from csgtrace.core.vector import Vector3
from csgtrace.materials.material import Material
from csgtrace.materials.textures import FunctionTexture, SolidTexture


@pytest.fixture
def red():
    """A plain red material."""
    return Material(Vector3(1.0, 0.0, 0.0))


@pytest.fixture
def blue():
    """A slightly reflective blue material."""
    return Material(Vector3(0.0, 0.0, 1.0), reflectivity=0.5)


@pytest.fixture
def red_texture(red):
    """Constant texture returning the red material everywhere."""
    return SolidTexture(red)


@pytest.fixture
def uv_texture():
    """Texture that encodes the sampled (u, v) into the material color.

    Lets tests read back the texture coordinates a solver looked up.
    """
    return FunctionTexture(lambda u, v: Material(Vector3(u, v, 0.0)))
