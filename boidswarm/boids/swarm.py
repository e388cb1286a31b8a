"""
Swarm - World that owns every boid and destroy bit

The swarm holds the world bounds, the optional predator/attractor and
drives one simulation tick. It knows nothing about Qt; the host supplies
bounds (directly or through a provider callback) and reads boids/bits
back for painting.

Tick order:
- Bounds are refreshed from the provider (the canvas may have resized)
- Boid positions/headings are snapshotted, then every boid steers
  against that snapshot. Boids never see a neighbour's half-updated
  position, so the result doesn't depend on list order.
- Destroy bits advance; expired ones are dropped.
"""

import math
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

import numpy as np

from boidswarm.config import (
    SWARM_PADDING, DESTROY_BITS_FACTOR, PATTERN_MAX_ATTEMPTS,
    DEFAULT_BOID_COLOR, DEFAULT_BOID_SIZE,
    PERSONAL_BOID_COLOR, PERSONAL_BOID_SIZE,
)
from boidswarm.utils.logger import logger

from .boid import Boid
from .destroy_bit import DestroyBit
from .geometry import toroidal_distances
from .influence import Predator, Attractor
from .rng import XorShift32, generate_random_seed


BoundsProvider = Callable[[], Tuple[float, float]]
RegionTest = Callable[[float, float], bool]


@dataclass
class FlockSnapshot:
    """Frozen copy of every boid's position and heading at tick start."""
    xs: np.ndarray
    ys: np.ndarray
    headings: np.ndarray

    @classmethod
    def capture(cls, boids: List[Boid]) -> "FlockSnapshot":
        return cls(
            xs=np.array([b.x for b in boids], dtype=float),
            ys=np.array([b.y for b in boids], dtype=float),
            headings=np.array([b.heading for b in boids], dtype=float),
        )

    def neighbors(self, index: int, vision: float,
                  width: float, height: float) -> Tuple[np.ndarray, np.ndarray]:
        """
        Rows of every other boid within vision of boid `index`.

        Returns:
            (rows, distances), both in snapshot order
        """
        distances = toroidal_distances(self.xs[index], self.ys[index],
                                       self.xs, self.ys, width, height)
        mask = distances < vision
        mask[index] = False
        rows = np.flatnonzero(mask)
        return rows, distances[rows]


class Swarm:
    """
    Boid world on a wrap-around plane.

    Boids move in [-padding, width + 2*padding) on each axis; neighbour
    distances wrap at width/height.
    """

    def __init__(self, width: float = 0.0, height: float = 0.0,
                 padding: float = SWARM_PADDING, seed: Optional[int] = None):
        self.width = width
        self.height = height
        self.padding = padding

        self.boids: List[Boid] = []
        self.destroy_bits: List[DestroyBit] = []

        self.predator: Optional[Predator] = None
        self.attractor: Optional[Attractor] = None

        self._bounds_provider: Optional[BoundsProvider] = None
        self._rng = XorShift32(generate_random_seed() if seed is None else seed)

    # === Bounds ===

    def set_bounds(self, width: float, height: float) -> None:
        self.width = width
        self.height = height

    def set_bounds_provider(self, provider: Optional[BoundsProvider]) -> None:
        """Set callback queried for (width, height) at the start of every tick."""
        self._bounds_provider = provider

    def refresh_bounds(self) -> None:
        """Pull (width, height) from the provider, if one is set."""
        if self._bounds_provider is not None:
            self.set_bounds(*self._bounds_provider())

    def reseed(self, seed: int) -> None:
        """Restart the random stream (headings, bits, patterned placement)."""
        self._rng = XorShift32(seed)

    # === Simulation ===

    def tick(self) -> None:
        """Advance every boid and destroy bit by one frame."""
        self.refresh_bounds()

        if self.boids:
            snapshot = FlockSnapshot.capture(self.boids)
            for i, boid in enumerate(self.boids):
                boid.step(self, snapshot, i)

        self.destroy_bits = [bit for bit in self.destroy_bits if bit.step()]

    # === Population ===

    def spawn_agents(self, n: int, x: float, y: float,
                     color: str = DEFAULT_BOID_COLOR,
                     radius: float = DEFAULT_BOID_SIZE) -> List[Boid]:
        """Add n boids at (x, y), each with a random heading."""
        if n < 0:
            raise ValueError(f"cannot spawn {n} boids")

        spawned = [
            Boid(x=x, y=y, heading=self._rng.next_heading(), color=color, radius=radius)
            for _ in range(n)
        ]
        self.boids.extend(spawned)
        logger.swarm(f"Spawned {n} boids at ({x:.0f}, {y:.0f})",
                     details=f"{len(self.boids)} total")
        return spawned

    def create_boids(self, n: int) -> List[Boid]:
        """Add n default boids at the centre of the world."""
        return self.spawn_agents(n, self.width / 2, self.height / 2)

    @property
    def personal(self) -> Optional[Boid]:
        for boid in self.boids:
            if boid.is_personal:
                return boid
        return None

    def add_personal(self) -> Optional[Boid]:
        """
        Add the single large "personal" boid, parked at the centre.

        It starts with speed 0; the host releases it with release_personal().
        Returns None if one already exists.
        """
        if self.personal is not None:
            return None

        boid = Boid(
            x=self.width / 2,
            y=self.height / 2,
            heading=self._rng.next_heading(),
            color=PERSONAL_BOID_COLOR,
            radius=PERSONAL_BOID_SIZE,
            speed=0,
            is_personal=True,
        )
        self.boids.append(boid)
        logger.swarm("Added personal boid")
        return boid

    def release_personal(self, speed: float) -> None:
        boid = self.personal
        if boid is not None:
            boid.speed = speed

    def place_patterned_boids(self, num: int, contains: RegionTest,
                              bbox: Tuple[float, float, float, float],
                              max_attempts: int = PATTERN_MAX_ATTEMPTS) -> List[Boid]:
        """
        Place num default boids at random integer points inside a region.

        Points are sampled uniformly in bbox (xmin, ymin, xmax, ymax) and
        kept only where contains(x, y) is true. Stops early, with a
        warning, if max_attempts samples in a row are all rejected.
        """
        xmin, ymin, xmax, ymax = bbox
        placed: List[Boid] = []

        for _ in range(num):
            point = None
            for _ in range(max_attempts):
                x = math.floor(self._rng.next_float() * (xmax - xmin) + xmin)
                y = math.floor(self._rng.next_float() * (ymax - ymin) + ymin)
                if contains(x, y):
                    point = (x, y)
                    break

            if point is None:
                logger.warning("Spawn region rejected every sample", component="SWARM",
                               details=f"{len(placed)}/{num} placed")
                break

            boid = Boid(x=point[0], y=point[1], heading=self._rng.next_heading())
            self.boids.append(boid)
            placed.append(boid)

        logger.swarm(f"Placed {len(placed)} patterned boids")
        return placed

    def destroy_agents_near(self, x: float, y: float) -> int:
        """
        Destroy every boid whose radius covers (x, y) on both axes.

        Each destroyed boid bursts into floor(radius * DESTROY_BITS_FACTOR) + 1
        destroy bits.

        Returns:
            Number of boids destroyed
        """
        survivors = []
        destroyed = 0
        for boid in self.boids:
            if abs(boid.x - x) < boid.radius and abs(boid.y - y) < boid.radius:
                self._burst(boid)
                destroyed += 1
            else:
                survivors.append(boid)

        if destroyed:
            self.boids = survivors
            logger.swarm(f"Destroyed {destroyed} boids at ({x:.0f}, {y:.0f})",
                         details=f"{len(self.destroy_bits)} bits live")
        return destroyed

    def _burst(self, boid: Boid) -> None:
        count = math.floor(boid.radius * DESTROY_BITS_FACTOR) + 1
        self.destroy_bits.extend(DestroyBit.from_boid(boid, self._rng) for _ in range(count))

    def clear(self) -> None:
        """Remove all boids (destroy bits keep flying)."""
        self.boids = []
        logger.swarm("Cleared boids")

    # === Influence sources ===

    def set_predator(self, x: float, y: float) -> None:
        if self.predator is None:
            self.predator = Predator(x, y)
        else:
            self.predator.update_loc(x, y)

    def clear_predator(self) -> None:
        self.predator = None

    def set_attractor(self, x: float, y: float) -> None:
        if self.attractor is None:
            self.attractor = Attractor(x, y)
        else:
            self.attractor.update_loc(x, y)

    def clear_attractor(self) -> None:
        self.attractor = None
