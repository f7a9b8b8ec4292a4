"""
Protocols the game core expects from its collaborators
"""

from crazy_pong.core.interfaces.physics import PhysicsBackend
from crazy_pong.core.interfaces.physics import RandomSource
from crazy_pong.core.interfaces.renderer import InteractiveRenderer
from crazy_pong.core.interfaces.renderer import RendererProtocol

__all__ = ["InteractiveRenderer", "PhysicsBackend", "RandomSource", "RendererProtocol"]
