"""
Swarm Controller - Drives the swarm and translates pointer input

Connects:
- Swarm (simulation world)
- SwarmState (seed / start-up settings)
- Canvas pointer events (predator, attractor, destruction)

Runs the simulation at ~30Hz via QTimer. Holding the button down arms
a second, cancellable timer that keeps destroying boids under the
attractor until the button is released or the pointer leaves.
"""

from typing import Callable, Optional, Tuple
from PyQt5.QtCore import QObject, QTimer, pyqtSignal
from boidswarm.utils.logger import logger

from boidswarm.config import (
    TICK_INTERVAL_MS, TICK_LOG_EVERY, SPAWN_BATCH,
    ATTRACTOR_INITIAL_DELAY_MS, ATTRACTOR_REPEAT_MS,
    PERSONAL_RELEASE_DELAY_MS, PERSONAL_RELEASE_SPEED,
)
from .swarm import Swarm, BoundsProvider, RegionTest
from .swarm_state import SwarmState
from .rng import generate_random_seed


class SwarmController(QObject):
    """
    Controller for the boid swarm.

    Owns the simulation timer and the Swarm. Emits signals for the canvas.
    """

    # Signals for UI
    frame_ready = pyqtSignal()
    seed_changed = pyqtSignal(int)
    enabled_changed = pyqtSignal(bool)

    def __init__(self, bounds_provider: Optional[BoundsProvider] = None,
                 state: Optional[SwarmState] = None, parent=None):
        super().__init__(parent)

        self._swarm = Swarm()
        self._swarm.set_bounds_provider(bounds_provider)
        self._state = state or SwarmState()

        # Patterned spawn region (set by canvas)
        self._region: Optional[RegionTest] = None
        self._region_bbox: Optional[Tuple[float, float, float, float]] = None

        self._tick_count = 0

        # Simulation timer
        self._timer = QTimer(self)
        self._timer.setInterval(TICK_INTERVAL_MS)
        self._timer.timeout.connect(self._tick)

        # Repeated destruction while the attractor is held
        self._attractor_timer = QTimer(self)
        self._attractor_timer.setSingleShot(True)
        self._attractor_timer.timeout.connect(self._on_attractor_timeout)

        # Personal boid sits still for a moment before joining in
        self._personal_timer = QTimer(self)
        self._personal_timer.setSingleShot(True)
        self._personal_timer.setInterval(PERSONAL_RELEASE_DELAY_MS)
        self._personal_timer.timeout.connect(self._release_personal)

    @property
    def swarm(self) -> Swarm:
        """Access to swarm for painting."""
        return self._swarm

    @property
    def state(self) -> SwarmState:
        return self._state

    @property
    def destruction_armed(self) -> bool:
        """True while a held attractor is scheduled to destroy boids."""
        return self._attractor_timer.isActive()

    def set_spawn_region(self, contains: RegionTest,
                         bbox: Tuple[float, float, float, float]) -> None:
        """
        Set region used for patterned placement.

        contains(x, y) -> bool, bbox = (xmin, ymin, xmax, ymax)
        """
        self._region = contains
        self._region_bbox = bbox

    # === Lifecycle ===

    def start(self) -> None:
        """Seed the swarm, spawn the initial population and start ticking."""
        if self._state.enabled:
            return

        seed = self._state.get_active_seed()
        self.seed_changed.emit(seed)
        self._populate(seed)

        self._tick_count = 0
        self._timer.start()

        self._state.enabled = True
        self.enabled_changed.emit(True)
        logger.info(f"Swarm started with {len(self._swarm.boids)} boids",
                    component="SWARM", details=f"seed {seed}")

    def stop(self) -> None:
        """Stop the simulation and drop every boid."""
        if not self._state.enabled:
            return

        self._timer.stop()
        self._attractor_timer.stop()
        self._personal_timer.stop()

        self._swarm.clear_predator()
        self._swarm.clear_attractor()
        self._swarm.clear()

        self._state.enabled = False
        self.enabled_changed.emit(False)
        self.frame_ready.emit()
        logger.info("Swarm stopped", component="SWARM")

    def toggle(self) -> None:
        """Toggle enabled state."""
        if self._state.enabled:
            self.stop()
        else:
            self.start()

    def reseed(self) -> None:
        """Pick a new random seed and restart if running."""
        self._state.seed = generate_random_seed()
        self.seed_changed.emit(self._state.seed)

        if self._state.enabled:
            self._populate(self._state.seed)

    def _populate(self, seed: int) -> None:
        """Reseed and replace the population with the initial boids."""
        self._swarm.reseed(seed)
        self._swarm.refresh_bounds()
        self._swarm.clear()
        if self._state.patterned and self._region is not None:
            self.spawn_patterned(self._state.initial_boid_count)
        else:
            self._swarm.create_boids(self._state.initial_boid_count)

    def _tick(self) -> None:
        """Simulation tick (called every TICK_INTERVAL_MS)."""
        if not self._state.enabled:
            return

        self._tick_count += 1
        self._swarm.tick()

        if self._tick_count % TICK_LOG_EVERY == 0:
            logger.debug(
                f"Tick {self._tick_count}: {len(self._swarm.boids)} boids, "
                f"{len(self._swarm.destroy_bits)} bits",
                component="SWARM",
            )

        self.frame_ready.emit()

    # === Population ===

    def spawn_batch(self, count: int = SPAWN_BATCH) -> None:
        """Add default boids at the centre."""
        self._swarm.refresh_bounds()
        self._swarm.create_boids(count)

    def spawn_patterned(self, count: int = SPAWN_BATCH) -> None:
        """Add default boids inside the spawn region."""
        if self._region is None:
            logger.warning("No spawn region set", component="SWARM")
            return
        self._swarm.place_patterned_boids(count, self._region, self._region_bbox)

    def add_personal(self) -> None:
        """Add the personal boid and schedule its release."""
        self._swarm.refresh_bounds()
        if self._swarm.add_personal() is not None:
            self._personal_timer.start()

    def _release_personal(self) -> None:
        self._swarm.release_personal(PERSONAL_RELEASE_SPEED)

    def clear(self) -> None:
        self._swarm.clear()
        self.frame_ready.emit()

    # === Pointer input ===

    def pointer_moved(self, x: float, y: float) -> None:
        """Pointer moved: predator follows it, and so does a held attractor."""
        self._swarm.set_predator(x, y)
        if self._swarm.attractor is not None:
            self._swarm.set_attractor(x, y)

    def pointer_pressed(self, x: float, y: float) -> None:
        """Button down: attract boids and arm delayed destruction."""
        self._swarm.set_attractor(x, y)
        self._attractor_timer.start(ATTRACTOR_INITIAL_DELAY_MS)
        logger.pointer(f"Attractor at ({x:.0f}, {y:.0f})")

    def pointer_released(self, x: float, y: float) -> None:
        """Button up: release boids and destroy those under the pointer."""
        self._attractor_timer.stop()
        self._swarm.clear_attractor()
        self._swarm.destroy_agents_near(x, y)

    def pointer_left(self) -> None:
        """Pointer left the canvas: drop both influence sources."""
        self._attractor_timer.stop()
        self._swarm.clear_predator()
        self._swarm.clear_attractor()

    def _on_attractor_timeout(self) -> None:
        """Destroy boids under a held attractor, then re-arm."""
        attractor = self._swarm.attractor
        if attractor is None:
            return

        self._swarm.destroy_agents_near(attractor.x, attractor.y)
        self._attractor_timer.start(ATTRACTOR_REPEAT_MS)
