"""
Destroy Bit - Decorative particle spawned when a boid is destroyed

Bits fly straight out from where the boid died and vanish once they
have travelled life_distance. They never wrap; anything that leaves the
canvas simply isn't visible.
"""

import math
from dataclasses import dataclass

from boidswarm.config import (
    DESTROY_SIZE_MIN, DESTROY_SIZE_MAX,
    DESTROY_SPEED_MIN, DESTROY_SPEED_MAX,
    DESTROY_DISTANCE_MIN, DESTROY_DISTANCE_MAX,
)
from .boid import Boid
from .rng import XorShift32


@dataclass(eq=False)
class DestroyBit:
    origin_x: float
    origin_y: float
    x: float
    y: float
    heading: float
    speed: float
    size: int
    life_distance: float
    color: str

    @classmethod
    def from_boid(cls, boid: Boid, rng: XorShift32) -> "DestroyBit":
        """Create a bit at the boid's position with randomised look and lifetime."""
        size = math.floor(rng.next_float() * (DESTROY_SIZE_MAX - DESTROY_SIZE_MIN + 1)) + DESTROY_SIZE_MIN
        speed = math.floor(rng.next_float() * DESTROY_SPEED_MAX + DESTROY_SPEED_MIN)
        life_distance = math.floor(rng.next_float() * DESTROY_DISTANCE_MAX + DESTROY_DISTANCE_MIN)
        return cls(
            origin_x=boid.x,
            origin_y=boid.y,
            x=boid.x,
            y=boid.y,
            heading=rng.next_heading(),
            speed=speed,
            size=size,
            life_distance=life_distance,
            color=boid.color,
        )

    @property
    def displacement(self) -> float:
        """Straight-line distance travelled from the origin."""
        return math.hypot(self.x - self.origin_x, self.y - self.origin_y)

    @property
    def expired(self) -> bool:
        return self.displacement >= self.life_distance

    def step(self) -> bool:
        """
        Advance one tick.

        Returns:
            False once the bit has reached life_distance (caller removes it),
            True while it is still alive.

        Displacement accumulates in floats, so off-axis headings can stop a
        hair short of life_distance (e.g. 9.999...) and live one extra tick.
        """
        if self.expired:
            return False
        self.x += math.cos(self.heading) * self.speed
        self.y += math.sin(self.heading) * self.speed
        return not self.expired
