"""
Crazy Pong game loop driver
"""

import time
from collections.abc import Callable
from typing import Any

from crazy_pong.core.entities import GamePhase, RenderSnapshot, SimulationState
from crazy_pong.core.input import InputController
from crazy_pong.core.interfaces.physics import PhysicsBackend
from crazy_pong.core.interfaces.renderer import RendererProtocol


def wall_clock_ms() -> float:
    """Monotonic wall clock in milliseconds"""
    return time.perf_counter() * 1000.0


class GameLoop:
    """Drives one physics step per display refresh until the game ends"""

    def __init__(
        self,
        physics_engine: PhysicsBackend,
        renderer: RendererProtocol,
        clock: Callable[[], float] = wall_clock_ms,
    ):
        self.physics_engine = physics_engine
        self.renderer = renderer
        self.clock = clock

        self.state: SimulationState
        self.input_controller: InputController
        self.last_update_time = 0.0
        self.frame_count = 0
        self.restart()

    def restart(self) -> None:
        """Re-initialises every piece of game state, as a page reload would"""
        self.state = self.physics_engine.new_state(self.renderer.get_container_size())
        self.input_controller = InputController(self.state, self.physics_engine.config)
        self.last_update_time = self.clock()
        self.frame_count = 0

    @property
    def running(self) -> bool:
        return self.state.phase == GamePhase.RUNNING

    def tick(self) -> dict[str, Any]:
        """
        Runs one frame: steps physics with the time elapsed since the last tick
        and pushes the result to the renderer.

        Returns:
            Dict containing the physics events and the rendered snapshot
        """
        if not self.running:
            return {"events": {}, "snapshot": RenderSnapshot.from_state(self.state)}

        current_time = self.clock()
        dt_ms = current_time - self.last_update_time
        self.last_update_time = current_time

        events = self.physics_engine.update(
            self.state, dt_ms, self.renderer.get_container_size()
        )
        self.frame_count += 1

        snapshot = RenderSnapshot.from_state(self.state)
        if events.get("game_over"):
            self.renderer.show_game_over(snapshot)
        else:
            self.renderer.render_frame(snapshot)

        return {"events": events, "snapshot": snapshot}

    def move_paddles(self, direction: str) -> float:
        """Key press handler, ignored once the game has ended"""
        if not self.running:
            return self.state.paddle_ratio
        return self.input_controller.move(direction, self.renderer.get_container_size())

    def point_paddles(self, pointer_y: float) -> float:
        """Pointer move handler, ignored once the game has ended"""
        if not self.running:
            return self.state.paddle_ratio
        return self.input_controller.point_at(pointer_y, self.renderer.get_container_size())

    def get_stats(self) -> dict[str, Any]:
        """Returns statistics of the current game"""
        return {
            "bounce_count": self.state.collision_count,
            "speed": round(self.state.ball.speed),
            "frames": self.frame_count,
            "time_elapsed": self.state.game_time,
        }
