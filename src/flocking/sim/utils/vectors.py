from __future__ import annotations

import math
from typing import TypeVar, Union

from pygame.math import Vector2, Vector3

VectorT = TypeVar("VectorT", Vector2, Vector3)


def clamp_magnitude(vector: VectorT, max_magnitude: float) -> VectorT:
    magnitude_sq = vector.length_squared()
    if magnitude_sq > max_magnitude * max_magnitude:
        return vector * (max_magnitude / math.sqrt(magnitude_sq))
    return vector.copy()


def safe_normalize(vector: VectorT) -> VectorT:
    if vector.length_squared() == 0.0:
        return vector * 0.0
    return vector.normalize()


def to_2d(vector: Vector3) -> Vector2:
    return Vector2(vector.x, vector.y)


def to_3d(vector: Vector2) -> Vector3:
    return Vector3(vector.x, vector.y, 0.0)


def lossy_convert(vector: Union[Vector2, Vector3]) -> Union[Vector2, Vector3]:
    """Convert between the 2D and 3D representations, dropping or zeroing z."""
    if isinstance(vector, Vector3):
        return to_2d(vector)
    return to_3d(vector)


def is_finite(vector: Union[Vector2, Vector3]) -> bool:
    return all(math.isfinite(component) for component in vector)
