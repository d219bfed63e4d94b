"""
Multiball Pong utilities
"""

from multiball_pong.utils.config import BallSpec
from multiball_pong.utils.config import GameConfig
from multiball_pong.utils.config import game_config
from multiball_pong.utils.config import game_config_tmp

__all__ = ["game_config", "game_config_tmp", "GameConfig", "BallSpec"]
