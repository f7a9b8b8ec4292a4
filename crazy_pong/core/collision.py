"""
Collision detection system for Crazy Pong
"""

import math

from crazy_pong.core.entities import Ball, Paddle, PaddleSide
from crazy_pong.core.interfaces.physics import RandomSource
from crazy_pong.utils.config import GameConfig, game_config


def ball_rect_overlap(ball: Ball, rect: tuple[float, float, float, float]) -> bool:
    """Checks if the ball's extent strictly overlaps a rectangle"""
    x, y, width, height = rect
    return (
        ball.left < x + width
        and ball.right > x
        and ball.top < y + height
        and ball.bottom > y
    )


def random_rebound_angle(
    side: PaddleSide, rng: RandomSource, config: GameConfig | None = None
) -> float:
    """
    Draws the outgoing heading after a paddle hit, in degrees.

    The right paddle sends the ball into [min, max), the left paddle into the
    same range turned by 180 degrees.
    """
    config = config or game_config
    angle = float(rng.uniform(config.REBOUND_ANGLE_MIN, config.REBOUND_ANGLE_MAX))
    if side == PaddleSide.LEFT:
        angle += 180.0
    return angle


class CollisionDetector:
    """Main collision manager"""

    def __init__(self, rng: RandomSource, config: GameConfig | None = None) -> None:
        self.rng = rng
        self.config = config or game_config

    def check_ball_exit(self, ball: Ball, field_width: float) -> bool:
        """Checks if the ball left the arena through the left or right edge"""
        return ball.left < 0 or ball.right > field_width

    def check_ball_walls(self, ball: Ball, field_height: float) -> str:
        """
        Reflects the ball off the top and bottom walls.

        The ball is clamped back onto the wall and its vertical velocity is
        pointed away from it. Returns the wall hit or "none".
        """
        if ball.top <= 0:
            ball.position.y = ball.radius
            ball.velocity.y = abs(ball.velocity.y)
            return "top"
        elif ball.bottom >= field_height:
            ball.position.y = field_height - ball.radius
            ball.velocity.y = -abs(ball.velocity.y)
            return "bottom"

        return "none"

    def check_ball_paddle(self, ball: Ball, paddle: Paddle) -> bool:
        """Checks and handles ball-paddle collision, returns True on a hit"""
        if not ball_rect_overlap(ball, paddle.get_rect()):
            return False

        self.separate_ball_from_paddle(ball, paddle)

        angle = random_rebound_angle(paddle.side, self.rng, self.config)
        ball.set_heading(math.radians(angle))
        return True

    def separate_ball_from_paddle(self, ball: Ball, paddle: Paddle) -> None:
        """Puts the ball just outside the paddle edge facing the arena centre"""
        if paddle.side == PaddleSide.LEFT:
            ball.position.x = paddle.x + paddle.width + ball.radius
        else:
            ball.position.x = paddle.x - ball.radius
