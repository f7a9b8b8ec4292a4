"""
Core module of Crazy Pong game
"""

from crazy_pong.core.entities import Ball
from crazy_pong.core.entities import GamePhase
from crazy_pong.core.entities import Geometry
from crazy_pong.core.entities import Paddle
from crazy_pong.core.entities import PaddleSide
from crazy_pong.core.entities import RenderSnapshot
from crazy_pong.core.entities import SimulationState
from crazy_pong.core.entities import Vector2D

__all__ = [
    "Ball",
    "Paddle",
    "PaddleSide",
    "Geometry",
    "GamePhase",
    "RenderSnapshot",
    "SimulationState",
    "Vector2D",
]
