"""
Main Frame - Canvas, controller and keyboard shortcuts
"""

from typing import Optional

from PyQt5.QtWidgets import QMainWindow, QShortcut
from PyQt5.QtCore import QTimer
from PyQt5.QtGui import QKeySequence

from boidswarm.boids import SwarmController, SwarmState
from boidswarm.gui.swarm_canvas import SwarmCanvas
from boidswarm.gui.theme import status_bar_style
from boidswarm.config import WINDOW_TITLE, WINDOW_SIZE
from boidswarm.utils.logger import logger

# Status bar messages fade after this long
STATUS_TIMEOUT_MS = 4000


class MainFrame(QMainWindow):
    """Main application window."""

    def __init__(self, state: Optional[SwarmState] = None):
        super().__init__()

        self.setWindowTitle(WINDOW_TITLE)
        self.resize(*WINDOW_SIZE)

        self.canvas = SwarmCanvas(self)
        self.setCentralWidget(self.canvas)

        self.controller = SwarmController(
            bounds_provider=self.canvas.bounds,
            state=state,
            parent=self,
        )
        self.canvas.set_controller(self.controller)

        self.statusBar().setStyleSheet(status_bar_style())
        logger.signal_emitter.log_message.connect(self._on_log_message)
        self.controller.seed_changed.connect(
            lambda seed: self.setWindowTitle(f"{WINDOW_TITLE} - seed {seed}")
        )

        self.setup_shortcuts()

        # Deferred until the window has its real size
        QTimer.singleShot(0, self.controller.start)

        logger.info("Boid Swarm started", component="APP")

    def setup_shortcuts(self):
        """N spawn, Z pattern, P personal, C clear, R reseed, Space start/stop."""
        bindings = [
            ("N", self.controller.spawn_batch),
            ("Z", self.controller.spawn_patterned),
            ("P", self.controller.add_personal),
            ("C", self.controller.clear),
            ("R", self.controller.reseed),
            ("Space", self.controller.toggle),
        ]
        for key, slot in bindings:
            shortcut = QShortcut(QKeySequence(key), self)
            shortcut.activated.connect(slot)

    def _on_log_message(self, message: str, level: int, timestamp: str):
        self.statusBar().showMessage(f"{timestamp}  {message}", STATUS_TIMEOUT_MS)

    def closeEvent(self, event):
        self.controller.stop()
        logger.signal_emitter.log_message.disconnect(self._on_log_message)
        logger.info("Boid Swarm closed", component="APP")
        logger.disable_file_logging()
        super().closeEvent(event)
