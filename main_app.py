"""
Orrery - Main Application

Builds the solar system snapshot once at startup, then runs the frame loop:
input -> interaction state machine -> render.
"""

import logging
import sys

import pygame

from core.config import OrreryConfig, load_config
from game.state_manager import build_app_state
from ui_new.screen_orrery import OrreryScreen

logger = logging.getLogger(__name__)


class OrreryApp:
    """
    Main application

    Owns the window and the frame loop; all simulation state lives in the
    AppState handed to the screen.
    """

    def __init__(self, config: OrreryConfig):
        self.config = config

        pygame.init()
        self.screen = pygame.display.set_mode((config.width, config.height), pygame.RESIZABLE)
        pygame.display.set_caption(config.title)
        self.clock = pygame.time.Clock()

        self.state = build_app_state(config)
        self.orrery = OrreryScreen(self.state)

        self.running = True
        logger.info("%s initialized (%d bodies)", config.title, len(self.state.scene))

    def run(self):
        """Main loop"""
        while self.running:
            dt = self.clock.tick(self.config.fps) / 1000.0

            events = pygame.event.get()
            for event in events:
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.VIDEORESIZE:
                    self.handle_resize(event.w, event.h)

            if self.orrery.handle_input(events) == 'QUIT':
                self.running = False

            self.orrery.update(dt)
            self.orrery.render(self.screen)
            pygame.display.flip()

        self.quit()

    def handle_resize(self, width: int, height: int):
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        self.orrery.resize(width, height)
        logger.debug("Window resized to: %dx%d", width, height)

    def quit(self):
        logger.info("Shutting down")
        pygame.quit()


def main():
    """Entry point"""
    config = load_config()
    logging.basicConfig(level=config.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        OrreryApp(config).run()
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        pygame.quit()
        sys.exit(0)
    except Exception:
        logger.exception("Fatal error")
        pygame.quit()
        sys.exit(1)


if __name__ == "__main__":
    main()
