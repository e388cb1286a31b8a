"""
Tests for SwarmCanvas: bounds, Z spawn region and offscreen painting.
"""

import pytest
from PyQt5.QtCore import QPointF

from boidswarm.boids import SwarmController, SwarmState
from boidswarm.gui.swarm_canvas import SwarmCanvas, build_z_path


@pytest.fixture
def canvas(qapp):
    widget = SwarmCanvas()
    widget.resize(1000, 700)
    controller = SwarmController(
        bounds_provider=widget.bounds,
        state=SwarmState(initial_boid_count=6, seed=11, seed_locked=True),
    )
    widget.set_controller(controller)
    yield widget
    controller.stop()


class TestZPath:

    def test_top_bar_inside(self):
        path = build_z_path()
        assert path.contains(QPointF(580, 100))
        assert path.contains(QPointF(750, 100))

    def test_bottom_bar_inside(self):
        assert build_z_path().contains(QPointF(750, 640))

    def test_outside_points(self):
        path = build_z_path()
        assert not path.contains(QPointF(100, 100))
        assert not path.contains(QPointF(580, 400))


class TestCanvas:

    def test_bounds_follow_widget_size(self, canvas):
        assert canvas.bounds() == (1000.0, 700.0)
        canvas.resize(800, 500)
        assert canvas.bounds() == (800.0, 500.0)

    def test_patterned_spawn_lands_in_z(self, canvas):
        canvas._controller.spawn_patterned(12)
        boids = canvas._controller.swarm.boids
        assert len(boids) == 12
        assert all(canvas.contains_spawn_point(b.x, b.y) for b in boids)

    def test_paints_offscreen(self, canvas):
        controller = canvas._controller
        controller.start()
        controller.swarm.destroy_agents_near(500, 350)
        controller._tick()
        image = canvas.grab().toImage()
        assert image.width() == 1000
        assert image.height() == 700
