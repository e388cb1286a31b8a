"""
Main entry point for Boid Swarm.
Parses options and launches the main frame.
"""

import argparse
import sys

from PyQt5.QtWidgets import QApplication


def parse_args(argv=None) -> argparse.Namespace:
    from boidswarm.config import DEFAULT_BOID_COUNT

    parser = argparse.ArgumentParser(description="Boid swarm animation")
    parser.add_argument("--boids", type=int, default=DEFAULT_BOID_COUNT,
                        help=f"boids spawned on start (default {DEFAULT_BOID_COUNT})")
    parser.add_argument("--seed", type=int, default=None,
                        help="lock the random seed for a repeatable run")
    parser.add_argument("--patterned", action="store_true",
                        help="spawn the initial boids inside the Z outline")
    parser.add_argument("--log-file", default=None,
                        help="also write the full debug log to this file")
    parser.add_argument("--debug", action="store_true",
                        help="show debug messages in the terminal")
    return parser.parse_args(argv)


def main():
    # Initialize logger first
    from boidswarm.utils.logger import logger, LogLevel, set_log_level

    args = parse_args()
    if args.debug:
        set_log_level(LogLevel.DEBUG)
    if args.log_file:
        logger.enable_file_logging(args.log_file)

    logger.info("=" * 40, component="APP")
    logger.info("Boid Swarm starting", component="APP")
    logger.info("Move: scare | Hold: attract + destroy | Release: destroy", component="APP")
    logger.info("N spawn  Z pattern  P personal  C clear  R reseed  Space start/stop", component="APP")
    logger.info("=" * 40, component="APP")

    app = QApplication(sys.argv)

    from boidswarm.boids import SwarmState
    from boidswarm.gui.main_frame import MainFrame

    state = SwarmState(
        initial_boid_count=max(0, args.boids),
        patterned=args.patterned,
        seed=args.seed or 0,
        seed_locked=args.seed is not None,
    )
    window = MainFrame(state)

    window.show()

    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
