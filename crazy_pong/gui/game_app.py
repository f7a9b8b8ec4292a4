"""
Main game application with PyGame GUI
"""

import argparse
import sys
import traceback
from collections.abc import Sequence

import numpy as np
import pygame

from crazy_pong.core.entities import RenderSnapshot
from crazy_pong.core.game_loop import GameLoop
from crazy_pong.core.interfaces.renderer import InteractiveRenderer
from crazy_pong.core.physics import PhysicsEngine
from crazy_pong.gui.pygame_renderer import PygameRenderer
from crazy_pong.utils.config import game_config, load_config_from_file

RESTART_KEYS = (pygame.K_r, pygame.K_RETURN, pygame.K_SPACE)


class CrazyPongApp:
    """Main application class for Crazy Pong with PyGame GUI"""

    def __init__(
        self,
        renderer: InteractiveRenderer | None = None,
        physics_engine: PhysicsEngine | None = None,
        fps: int | None = None,
    ) -> None:
        """Initialize the application"""
        self.renderer = renderer if renderer is not None else PygameRenderer()
        self.physics_engine = physics_engine if physics_engine is not None else PhysicsEngine()
        self.game_loop = GameLoop(self.physics_engine, self.renderer)
        self.fps = fps or game_config.FPS
        self.running = True
        self.games_played = 1

    def restart(self) -> None:
        """Start a brand new game"""
        self.game_loop.restart()
        self.games_played += 1
        print(f"Game {self.games_played} started!")

    def handle_event(self, event: pygame.event.Event) -> None:
        """Route a single pygame event"""
        if event.type == pygame.QUIT:
            self.running = False

        elif event.type == pygame.VIDEORESIZE:
            self.renderer.resize(event.w, event.h)
            if not self.game_loop.running:
                self.renderer.show_game_over(RenderSnapshot.from_state(self.game_loop.state))

        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.running = False
            elif event.key == pygame.K_UP:
                self.game_loop.move_paddles("up")
            elif event.key == pygame.K_DOWN:
                self.game_loop.move_paddles("down")
            elif event.key in RESTART_KEYS and not self.game_loop.running:
                self.restart()

        elif event.type == pygame.MOUSEMOTION:
            self.game_loop.point_paddles(event.pos[1])

        elif event.type == pygame.MOUSEBUTTONDOWN:
            if not self.game_loop.running and self.renderer.is_restart_click(event.pos):
                self.restart()

    def update(self) -> None:
        """Run one frame of the game"""
        if not self.game_loop.running:
            return

        result = self.game_loop.tick()
        if result["events"].get("game_over"):
            stats = self.game_loop.get_stats()
            print(f"Game over! Bounces: {stats['bounce_count']}, final speed: {stats['speed']}")

    def run(self) -> None:
        """Main application loop"""
        print("Starting Crazy Pong...")
        print("Move the paddles with UP/DOWN or the mouse, ESC to quit")

        try:
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)

                self.update()

                self.renderer.present()
                self.renderer.update(self.fps)

        except Exception as e:
            print(f"Error during execution: {e}")
            traceback.print_exc()

        finally:
            self.cleanup()

    def cleanup(self) -> None:
        """Clean up resources"""
        print("Cleaning up resources...")
        self.renderer.cleanup()
        print("Crazy Pong closed properly.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Crazy Pong: keep the ball between the paddles")
    parser.add_argument("--width", type=int, default=None, help="Initial window width")
    parser.add_argument("--height", type=int, default=None, help="Initial window height")
    parser.add_argument("--fps", type=int, default=None, help="Target frames per second")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random source")
    parser.add_argument("--config", type=str, default=None, help="JSON configuration file")
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """Main entry point"""
    args = build_parser().parse_args(argv)

    if args.config is not None:
        if load_config_from_file(args.config):
            print(f"Configuration loaded from {args.config}")
        else:
            print(f"Could not load {args.config}, using defaults")

    try:
        renderer = PygameRenderer(args.width, args.height)
        physics_engine = PhysicsEngine(rng=np.random.default_rng(args.seed))
        app = CrazyPongApp(renderer, physics_engine, fps=args.fps)
        app.run()
    except KeyboardInterrupt:
        print("\nUser interruption")
    except Exception as e:
        print(f"Fatal error: {e}")
        traceback.print_exc()
    finally:
        pygame.quit()
        sys.exit(0)


if __name__ == "__main__":
    main()
