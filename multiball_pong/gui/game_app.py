"""
Main game application with PyGame GUI
"""

import traceback

import pygame

from multiball_pong.core.game import Game
from multiball_pong.gui.pygame_renderer import PygameHost
from multiball_pong.utils.config import GameConfig
from multiball_pong.utils.config import game_config


class MultiballPongApp:
    """Main application class for Multiball Pong with PyGame GUI"""

    def __init__(self, config: GameConfig | None = None) -> None:
        """Initialize the application"""
        self.config = config if config is not None else game_config
        self.game = Game(self.config)
        self.host = PygameHost(self.config)

        print("Multiball Pong initialized successfully!")
        print(f"Use {self.config.UP_KEY}/{self.config.DOWN_KEY} to move, ESC to quit")

    def run(self) -> None:
        """Main application loop"""
        print("Starting Multiball Pong...")

        try:
            self.game.run(self.host)
        finally:
            self.cleanup()

    def cleanup(self) -> None:
        """Clean up resources"""
        print("Cleaning up resources...")
        self.game.stop()
        self.host.cleanup()
        print(f"Multiball Pong closed properly after {self.game.frame_count} frames.")


def main() -> int:
    """Main entry point, returns the process exit code"""
    try:
        app = MultiballPongApp()
        app.run()
    except KeyboardInterrupt:
        print("\nUser interruption")
    except Exception as e:
        print(f"Fatal error: {e}")
        traceback.print_exc()
        return 1
    finally:
        # Ensure pygame is properly closed
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
