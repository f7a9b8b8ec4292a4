"""
Input controller: turns key presses and pointer moves into a paddle position ratio
"""

from crazy_pong.core.dimensions import clamp_paddle_top
from crazy_pong.core.dimensions import compute_geometry
from crazy_pong.core.entities import Geometry
from crazy_pong.core.entities import SimulationState
from crazy_pong.utils.config import GameConfig
from crazy_pong.utils.config import game_config


class InputController:
    """Moves the shared paddle pair of a simulation state"""

    DIRECTIONS = {"up": -1.0, "down": 1.0}

    def __init__(self, state: SimulationState, config: GameConfig | None = None):
        self.state = state
        self.config = config or game_config

    def move(self, direction: str, container_size: tuple[float, float]) -> float:
        """
        Moves the paddles one fixed step up or down.

        The step is in container pixels and is not scaled.

        Args:
            direction: "up" or "down"
            container_size: Current arena (width, height)

        Returns:
            The new paddle position ratio
        """
        if direction not in self.DIRECTIONS:
            raise ValueError(f"Unknown direction: {direction}")

        geometry = self._geometry(container_size)
        top = self.state.paddle_ratio * geometry.height
        top += self.DIRECTIONS[direction] * self.config.KEY_MOVE_DISTANCE
        return self._store(clamp_paddle_top(top, geometry), geometry.height)

    def point_at(self, pointer_y: float, container_size: tuple[float, float]) -> float:
        """Centres the paddles on an arena-relative pointer Y position"""
        geometry = self._geometry(container_size)
        top = pointer_y - geometry.paddle_height / 2
        return self._store(clamp_paddle_top(top, geometry), geometry.height)

    def _geometry(self, container_size: tuple[float, float]) -> Geometry:
        width, height = container_size
        return compute_geometry(width, height, self.state.paddle_ratio, self.config)

    def _store(self, top: float, height: float) -> float:
        self.state.paddle_ratio = top / height
        return self.state.paddle_ratio
