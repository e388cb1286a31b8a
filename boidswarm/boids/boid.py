"""
Boid - Single swarm agent with heading-based steering

Each tick a boid picks ONE target heading, in priority order:

1. Attractor present     -> head toward the attractor
2. Predator within vision -> head directly away from it
3. Neighbours in vision  -> avoid the nearest if it is too close,
                            otherwise blend alignment and cohesion (3:1)
4. Nobody around         -> keep current heading

It then turns toward the target by at most radial_speed and moves
speed pixels along its heading, wrapping at the padded world edges.
"""

import math
from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

import numpy as np

from boidswarm.config import (
    BOID_SPEED, BOID_RADIAL_SPEED, BOID_VISION,
    DEFAULT_BOID_COLOR, DEFAULT_BOID_SIZE,
)
from .geometry import toroidal_distance, wrap, clamp, mean_angle, bearing

if TYPE_CHECKING:
    from .swarm import Swarm, FlockSnapshot


# Alignment vs cohesion weighting in the flocking target
ALIGNMENT_WEIGHT = 3


@dataclass(eq=False)
class Boid:
    """Boid state in world pixel coordinates."""
    x: float
    y: float
    heading: float = 0.0
    color: str = DEFAULT_BOID_COLOR
    radius: float = DEFAULT_BOID_SIZE
    speed: float = BOID_SPEED
    radial_speed: float = BOID_RADIAL_SPEED
    vision: float = BOID_VISION
    is_personal: bool = False

    def distance_to(self, x: float, y: float, width: float, height: float) -> float:
        """Toroidal distance from this boid to a point."""
        return toroidal_distance(self.x, self.y, x, y, width, height)

    def step(self, swarm: "Swarm", snapshot: "FlockSnapshot", index: int) -> None:
        """
        Steer and move one tick.

        Args:
            swarm: World providing bounds and influence sources
            snapshot: Pre-tick positions/headings of every boid
            index: This boid's row in the snapshot
        """
        target = self.choose_target(swarm, snapshot, index)
        if target is not None:
            self.turn_towards(target)
        self.move(swarm.width, swarm.height, swarm.padding)

    def choose_target(self, swarm: "Swarm", snapshot: "FlockSnapshot",
                      index: int) -> Optional[float]:
        """Target heading for this tick, or None to keep the current one."""
        attractor = swarm.attractor
        if attractor is not None:
            return bearing(self.x, self.y, attractor.x, attractor.y)

        predator = swarm.predator
        if predator is not None:
            if self.distance_to(predator.x, predator.y, swarm.width, swarm.height) < self.vision:
                return bearing(predator.x, predator.y, self.x, self.y)

        rows, distances = snapshot.neighbors(index, self.vision, swarm.width, swarm.height)
        if len(rows) == 0:
            return None

        # Separation wins over alignment/cohesion
        nearest = int(np.argmin(distances))
        if distances[nearest] < self.radius * 2:
            other = rows[nearest]
            return bearing(snapshot.xs[other], snapshot.ys[other], self.x, self.y)

        headings = snapshot.headings[rows]
        mean_heading = math.atan2(float(np.mean(np.sin(headings))),
                                  float(np.mean(np.cos(headings))))
        center = bearing(self.x, self.y,
                         float(np.mean(snapshot.xs[rows])),
                         float(np.mean(snapshot.ys[rows])))
        return mean_angle([mean_heading] * ALIGNMENT_WEIGHT + [center])

    def turn_towards(self, target: float) -> None:
        """Rotate heading toward target, limited to radial_speed."""
        delta = wrap(target - self.heading, -math.pi, math.pi)
        delta = clamp(delta, self.radial_speed)
        self.heading = wrap(self.heading + delta, -math.pi, math.pi)

    def move(self, width: float, height: float, padding: float) -> None:
        """Advance along heading and wrap into the padded world."""
        self.x = wrap(self.x + math.cos(self.heading) * self.speed,
                      -padding, width + padding * 2)
        self.y = wrap(self.y + math.sin(self.heading) * self.speed,
                      -padding, height + padding * 2)
