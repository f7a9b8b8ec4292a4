"""
Physics backend protocol - defines interface for physics engines
"""

from typing import Any
from typing import Protocol

from crazy_pong.core.entities import SimulationState
from crazy_pong.utils.config import GameConfig


class RandomSource(Protocol):
    """
    Source of uniform random numbers.

    numpy.random.Generator satisfies it; tests can pass a stub returning fixed values.
    """

    def uniform(self, low: float = 0.0, high: float = 1.0) -> float:
        """Draw a float from [low, high)"""
        ...


class PhysicsBackend(Protocol):
    """
    Protocol for physics engine implementations.

    The engine owns no game state: everything lives in the SimulationState
    passed to each call.
    """

    config: GameConfig

    def new_state(self, container_size: tuple[float, float]) -> SimulationState:
        """
        Create a freshly initialised state.

        The ball starts at the centre with a random heading and the initial speed.
        """
        ...

    def update(
        self, state: SimulationState, dt_ms: float, container_size: tuple[float, float]
    ) -> dict[str, Any]:
        """
        Advance the simulation by one frame.

        Args:
            state: State to advance in place
            dt_ms: Elapsed time in milliseconds
            container_size: Current arena (width, height)

        Returns:
            Dictionary with events that occurred:
            {
                "wall_bounces": [...],
                "paddle_hits": [...],
                "game_over": bool
            }
        """
        ...
