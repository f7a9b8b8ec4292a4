"""
Dimension scaling from the reference layout to the current container size
"""

from crazy_pong.core.entities import Geometry
from crazy_pong.utils.config import GameConfig
from crazy_pong.utils.config import game_config


def clamp_paddle_top(top: float, geometry: Geometry) -> float:
    """Keeps the paddle pair fully inside the arena"""
    return max(0.0, min(geometry.max_paddle_top, top))


def compute_geometry(
    container_width: float,
    container_height: float,
    paddle_ratio: float,
    config: GameConfig | None = None,
) -> Geometry:
    """
    Computes the pixel geometry for a container size.

    The scale factor is taken from the width only and applied to both axes.

    Args:
        container_width: Current arena width in pixels
        container_height: Current arena height in pixels
        paddle_ratio: Stored paddle top as a ratio of the arena height
        config: Configuration holding the reference layout

    Returns:
        Geometry with the paddle top already clamped into the arena
    """
    config = config or game_config
    scale = container_width / config.REF_WIDTH
    paddle_height = config.REF_PADDLE_HEIGHT * scale

    raw_top = paddle_ratio * container_height
    paddle_top = max(0.0, min(container_height - paddle_height, raw_top))

    return Geometry(
        width=container_width,
        height=container_height,
        scale=scale,
        paddle_width=config.REF_PADDLE_WIDTH * scale,
        paddle_height=paddle_height,
        paddle_offset=config.REF_PADDLE_OFFSET * scale,
        ball_radius=config.REF_BALL_RADIUS * scale,
        paddle_top=paddle_top,
    )
