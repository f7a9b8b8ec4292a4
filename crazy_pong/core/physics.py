"""
Physics system for Crazy Pong
"""

import math
from typing import Any

import numpy as np

from crazy_pong.core.collision import CollisionDetector
from crazy_pong.core.dimensions import compute_geometry
from crazy_pong.core.entities import Ball, GamePhase, SimulationState
from crazy_pong.core.interfaces.physics import RandomSource
from crazy_pong.utils.config import GameConfig, game_config


def increase_speed(ball: Ball, increment: float) -> None:
    """Speeds the ball up by a fixed amount, keeping its heading"""
    current_speed = ball.velocity.magnitude()

    # A zero vector has no heading to keep
    if current_speed == 0:
        ball.speed += increment
        return

    new_speed = current_speed + increment
    ball.velocity *= new_speed / current_speed
    ball.speed = new_speed


class PhysicsEngine:
    """Main physics engine"""

    def __init__(self, rng: RandomSource | None = None, config: GameConfig | None = None):
        self.rng = rng if rng is not None else np.random.default_rng()
        self.config = config or game_config
        self.collision_detector = CollisionDetector(self.rng, self.config)

    def new_state(self, container_size: tuple[float, float]) -> SimulationState:
        """Creates a state with the ball at the centre, heading in a random direction"""
        width, height = container_size
        ratio = self.config.INITIAL_PADDLE_RATIO
        geometry = compute_geometry(width, height, ratio, self.config)

        angle = float(self.rng.uniform(0.0, 2 * math.pi))
        ball = Ball(width / 2, height / 2, 0.0, 0.0, geometry.ball_radius, self.config.BALL_SPEED)
        ball.set_heading(angle)

        return SimulationState(ball=ball, geometry=geometry, paddle_ratio=ratio)

    def update(
        self, state: SimulationState, dt_ms: float, container_size: tuple[float, float]
    ) -> dict[str, Any]:
        """Advances the state by dt_ms milliseconds"""
        events: dict[str, Any] = {"wall_bounces": [], "paddle_hits": [], "game_over": False}
        if state.phase == GamePhase.ENDED:
            return events

        width, height = container_size
        state.geometry = compute_geometry(width, height, state.paddle_ratio, self.config)
        state.ball.radius = state.geometry.ball_radius

        dt = dt_ms / 1000
        state.game_time += dt
        state.ball.update(dt)

        if self.collision_detector.check_ball_exit(state.ball, state.geometry.width):
            state.phase = GamePhase.ENDED
            events["game_over"] = True
            return events

        events.update(self._check_collisions(state))
        return events

    def _check_collisions(self, state: SimulationState) -> dict[str, list]:
        """Checks wall and paddle collisions and returns events"""
        events: dict[str, list] = {"wall_bounces": [], "paddle_hits": []}
        ball = state.ball

        wall_collision = self.collision_detector.check_ball_walls(ball, state.geometry.height)
        if wall_collision != "none":
            increase_speed(ball, self.config.WALL_SPEED_INCREMENT)
            events["wall_bounces"].append(wall_collision)

        # Both paddles are checked every frame, a double overlap counts twice
        for paddle in state.geometry.paddles():
            if self.collision_detector.check_ball_paddle(ball, paddle):
                increase_speed(ball, self.config.PADDLE_SPEED_INCREMENT)
                state.collision_count += 1
                events["paddle_hits"].append(
                    {"side": paddle.side.value, "count": state.collision_count}
                )

        return events

    def get_game_state(self, state: SimulationState) -> dict[str, Any]:
        """Returns the complete game state"""
        geometry = state.geometry
        return {
            "ball_position": state.ball.position.to_tuple(),
            "ball_velocity": state.ball.velocity.to_tuple(),
            "ball_speed": state.ball.speed,
            "ball_radius": state.ball.radius,
            "paddle_ratio": state.paddle_ratio,
            "paddle_top": geometry.paddle_top,
            "collision_count": state.collision_count,
            "phase": state.phase.value,
            "time_elapsed": state.game_time,
            "field_bounds": (0, geometry.width, 0, geometry.height),
        }
