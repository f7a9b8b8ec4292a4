"""
Crazy Pong game entities: ball, paddles, arena geometry and simulation state
"""

import math
from dataclasses import dataclass
from dataclasses import field
from enum import Enum

import numpy as np


class PaddleSide(Enum):
    """Which wall a paddle sits next to"""

    LEFT = "left"
    RIGHT = "right"


class GamePhase(Enum):
    """Game phase, ENDED is terminal"""

    RUNNING = "running"
    ENDED = "ended"


@dataclass
class Vector2D:
    """Simple 2D vector for positions and velocities"""

    x: float
    y: float

    def __add__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x * scalar, self.y * scalar)

    def __imul__(self, scalar: float) -> "Vector2D":
        self.x *= scalar
        self.y *= scalar
        return self

    def magnitude(self) -> float:
        return float(np.linalg.norm([self.x, self.y]))

    def angle_degrees(self) -> float:
        """Heading in degrees, in [0, 360)"""
        return math.degrees(math.atan2(self.y, self.x)) % 360.0

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def copy(self) -> "Vector2D":
        return Vector2D(self.x, self.y)

    @classmethod
    def from_angle(cls, angle_radians: float, length: float) -> "Vector2D":
        return cls(math.cos(angle_radians) * length, math.sin(angle_radians) * length)


class Ball:
    """Game ball, position is the centre of the circle"""

    def __init__(
        self, x: float, y: float, vx: float, vy: float, radius: float, speed: float | None = None
    ):
        self.position = Vector2D(x, y)
        self.velocity = Vector2D(vx, vy)
        self.radius = radius
        # Kept alongside the velocity, survives a zero vector
        self.speed = speed if speed is not None else self.velocity.magnitude()

    def update(self, dt: float) -> None:
        """Moves the ball by its velocity over dt seconds"""
        self.position = self.position + self.velocity * dt

    def set_heading(self, angle_radians: float) -> None:
        """Points the ball along a new heading at its tracked speed"""
        self.velocity = Vector2D.from_angle(angle_radians, self.speed)

    def get_rect(self) -> tuple[float, float, float, float]:
        """Returns the bounding box of the ball (x, y, width, height)"""
        return (
            self.position.x - self.radius,
            self.position.y - self.radius,
            self.radius * 2,
            self.radius * 2,
        )

    @property
    def left(self) -> float:
        return self.position.x - self.radius

    @property
    def right(self) -> float:
        return self.position.x + self.radius

    @property
    def top(self) -> float:
        return self.position.y - self.radius

    @property
    def bottom(self) -> float:
        return self.position.y + self.radius


@dataclass(frozen=True)
class Paddle:
    """A vertical paddle rectangle in arena pixels"""

    side: PaddleSide
    x: float
    y: float
    width: float
    height: float

    def get_rect(self) -> tuple[float, float, float, float]:
        """Returns the collision rectangle properties (x, y, width, height)"""
        return (self.x, self.y, self.width, self.height)


@dataclass(frozen=True)
class Geometry:
    """Pixel geometry of the arena for one container size"""

    width: float
    height: float
    scale: float
    paddle_width: float
    paddle_height: float
    paddle_offset: float
    ball_radius: float
    paddle_top: float

    @property
    def left_paddle_x(self) -> float:
        return self.paddle_offset

    @property
    def right_paddle_x(self) -> float:
        return self.width - self.paddle_offset - self.paddle_width

    @property
    def max_paddle_top(self) -> float:
        return self.height - self.paddle_height

    def paddle(self, side: PaddleSide) -> Paddle:
        x = self.left_paddle_x if side == PaddleSide.LEFT else self.right_paddle_x
        return Paddle(side, x, self.paddle_top, self.paddle_width, self.paddle_height)

    def paddles(self) -> list[Paddle]:
        """Both paddles, left first"""
        return [self.paddle(PaddleSide.LEFT), self.paddle(PaddleSide.RIGHT)]


@dataclass
class SimulationState:
    """Everything the physics step reads and writes"""

    ball: Ball
    geometry: Geometry
    paddle_ratio: float
    collision_count: int = 0
    phase: GamePhase = GamePhase.RUNNING
    game_time: float = 0.0

    @property
    def is_running(self) -> bool:
        return self.phase == GamePhase.RUNNING


@dataclass(frozen=True)
class RenderSnapshot:
    """Render-ready view of a simulation state"""

    arena_size: tuple[float, float]
    # left, top, width, height, radius
    ball: tuple[float, float, float, float, float]
    paddles: dict[PaddleSide, tuple[float, float, float, float]] = field(default_factory=dict)
    speed: int = 0
    bounce_count: int = 0
    phase: GamePhase = GamePhase.RUNNING

    @classmethod
    def from_state(cls, state: SimulationState) -> "RenderSnapshot":
        ball = state.ball
        geometry = state.geometry
        left, top, width, height = ball.get_rect()
        return cls(
            arena_size=(geometry.width, geometry.height),
            ball=(left, top, width, height, ball.radius),
            paddles={paddle.side: paddle.get_rect() for paddle in geometry.paddles()},
            speed=round(ball.speed),
            bounce_count=state.collision_count,
            phase=state.phase,
        )
