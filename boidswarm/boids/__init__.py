"""
Boid Swarm Core

Flocking on a wrap-around plane with a pointer-driven predator and
attractor. Destroyed boids burst into short-lived destroy bits.
"""

from .boid import Boid
from .destroy_bit import DestroyBit
from .influence import Predator, Attractor
from .swarm import Swarm, FlockSnapshot
from .swarm_state import SwarmState
from .swarm_controller import SwarmController

__all__ = [
    'Boid',
    'DestroyBit',
    'Predator',
    'Attractor',
    'Swarm',
    'FlockSnapshot',
    'SwarmState',
    'SwarmController',
]
