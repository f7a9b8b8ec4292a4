"""
Renderer protocol - defines interface for different rendering backends
"""

from typing import Protocol
from typing import runtime_checkable

from crazy_pong.core.entities import RenderSnapshot


class RendererProtocol(Protocol):
    """
    Protocol for renderer implementations.

    The game core never draws anything itself: it hands a snapshot to the
    renderer once per frame, which must draw it before the next frame.
    """

    def render_frame(self, snapshot: RenderSnapshot) -> None:
        """
        Render a single frame of the game.

        Args:
            snapshot: Ball box and radius, paddle rectangles, speed and bounce count
        """
        ...

    def show_game_over(self, snapshot: RenderSnapshot) -> None:
        """Hide the ball and show the game-over indicator"""
        ...

    def get_container_size(self) -> tuple[float, float]:
        """Current arena size in pixels"""
        ...

    def cleanup(self) -> None:
        """Clean up renderer resources"""
        ...

    def is_active(self) -> bool:
        """Check if renderer is still active (window not closed)"""
        ...


@runtime_checkable
class InteractiveRenderer(RendererProtocol, Protocol):
    """Renderer that also owns a window the player can resize and click"""

    def resize(self, width: int, height: int) -> None:
        """Follow a new window size"""
        ...

    def is_restart_click(self, position: tuple[int, int]) -> bool:
        """Whether a click landed on the restart button"""
        ...

    def present(self) -> None:
        """Flip the drawn frame to the screen"""
        ...

    def update(self, fps: int | None = None) -> None:
        """Wait for the next frame at the target rate"""
        ...
