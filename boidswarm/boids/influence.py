"""
Influence sources - Pointer-driven points that override flocking.

A Predator scares boids within vision; an Attractor pulls every boid
regardless of distance and takes priority over the predator.
"""

from dataclasses import dataclass


@dataclass
class InfluenceSource:
    """A single point in world coordinates."""
    x: float
    y: float

    def update_loc(self, x: float, y: float) -> None:
        self.x = x
        self.y = y


class Predator(InfluenceSource):
    pass


class Attractor(InfluenceSource):
    pass
