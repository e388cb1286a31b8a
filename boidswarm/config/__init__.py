"""
Central Configuration
All constants, mappings, and settings in one place
"""

import math

# === SIMULATION ===
TICK_INTERVAL_MS = 33          # ~30 ticks per second
TICK_LOG_EVERY = 300           # Controller logs a summary every N ticks

# === SWARM ===
SWARM_PADDING = 4              # Boids may drift this far past an edge before wrapping
DEFAULT_BOID_COUNT = 120       # Spawned at startup unless --boids says otherwise
SPAWN_BATCH = 40               # Boids added per "spawn" shortcut

# === BOID ===
BOID_SPEED = 12                # Pixels per tick
BOID_RADIAL_SPEED = math.pi / 15   # Max heading change per tick (radians)
BOID_VISION = 100              # Neighbour / predator sensing radius (pixels)
DEFAULT_BOID_SIZE = 3          # Visual radius
DEFAULT_BOID_COLOR = '#006a6b'

# Personal boid: one large boid that sits still, then joins the flock
PERSONAL_BOID_SIZE = 11
PERSONAL_BOID_COLOR = '#00fcff'
PERSONAL_RELEASE_SPEED = 13
PERSONAL_RELEASE_DELAY_MS = 1000

# === DESTROY BITS ===
# Bits spawned per destroyed boid: floor(radius * factor) + 1
DESTROY_BITS_FACTOR = 3.0
DESTROY_SPEED_MIN = 5
DESTROY_SPEED_MAX = 10
DESTROY_DISTANCE_MIN = 50
DESTROY_DISTANCE_MAX = 192
DESTROY_SIZE_MIN = 2
DESTROY_SIZE_MAX = 4

# === POINTER ===
ATTRACTOR_INITIAL_DELAY_MS = 4000  # Hold this long before the attractor starts destroying
ATTRACTOR_REPEAT_MS = 1500         # Then destroy again at this interval while held

# === PATTERNED SPAWN ===
# "Z" outline in canvas pixels. Each entry is ('move'|'line', x, y) or
# ('arc', x1, y1, x2, y2, radius) with canvas arcTo semantics.
Z_PATH = [
    ('move', 565, 210),
    ('line', 565, 80),
    ('line', 870, 80),
    ('arc', 950, 78, 890, 182, 50),
    ('line', 667, 606),
    ('line', 920, 606),
    ('line', 920, 665),
    ('line', 605, 665),
    ('arc', 558, 665, 558, 600, 50),
    ('line', 558, 605),
    ('line', 800, 132),
    ('line', 653, 132),
    ('arc', 603, 132, 603, 200, 50),
    ('line', 603, 210),
]
Z_PATH_BBOX = (565, 80, 920, 665)  # xmin, ymin, xmax, ymax
PATTERN_MAX_ATTEMPTS = 10000       # Rejected samples per point before giving up

# === COLOURS ===
BACKGROUND_COLOR = '#050505'

# === WINDOW ===
WINDOW_TITLE = "Boid Swarm"
WINDOW_SIZE = (1280, 760)
