"""
Crazy Pong utility module
"""

from crazy_pong.utils.config import GameConfig
from crazy_pong.utils.config import game_config

__all__ = ["game_config", "GameConfig"]
