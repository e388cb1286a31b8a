"""
Swarm State - Session settings for the swarm controller

Holds what the controller needs to (re)start a run: how many boids to
spawn, whether patterned placement is used, and the seed lock.
Lives for the session only; nothing is saved to disk.
"""

from dataclasses import dataclass

from boidswarm.config import DEFAULT_BOID_COUNT
from .rng import generate_random_seed


@dataclass
class SwarmState:
    """Runtime state for one swarm session."""

    # Boids spawned on start
    initial_boid_count: int = DEFAULT_BOID_COUNT

    # Place initial boids inside the Z outline instead of at the centre
    patterned: bool = False

    # Seed state
    seed: int = 0
    seed_locked: bool = False

    # Timer running
    enabled: bool = False

    def get_active_seed(self) -> int:
        """
        Get the seed to use for simulation.

        If seed_locked, returns stored seed.
        Otherwise, generates and stores a new random seed.
        """
        if self.seed_locked:
            return self.seed
        else:
            self.seed = generate_random_seed()
            return self.seed
