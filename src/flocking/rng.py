from __future__ import annotations

import math
import random

from pygame.math import Vector2, Vector3


class DeterministicRng:
    def __init__(self, seed: int):
        self._seed = seed
        self._random = random.Random(seed)

    @property
    def seed(self) -> int:
        return self._seed

    def reset(self) -> None:
        self._random.seed(self._seed)

    def next_float(self) -> float:
        return self._random.random()

    def next_range(self, low: float, high: float) -> float:
        return self._random.uniform(low, high)

    def next_heading(self) -> float:
        # random() is in [0, 1) so the heading never reaches 2*pi
        return self._random.random() * 2.0 * math.pi

    def next_point_2d(self, center: Vector2, spread: float) -> Vector2:
        return Vector2(
            center.x + self.next_range(-spread, spread),
            center.y + self.next_range(-spread, spread),
        )

    def next_point_3d(self, center: Vector3, spread: float) -> Vector3:
        return Vector3(
            center.x + self.next_range(-spread, spread),
            center.y + self.next_range(-spread, spread),
            center.z + self.next_range(-spread, spread),
        )
