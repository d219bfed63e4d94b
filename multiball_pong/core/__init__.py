"""
Core module of Multiball Pong game
"""

from multiball_pong.core.controllers import AutonomousControl
from multiball_pong.core.controllers import PlayerControl
from multiball_pong.core.entities import Ball
from multiball_pong.core.entities import Direction
from multiball_pong.core.entities import Paddle
from multiball_pong.core.entities import PlayField
from multiball_pong.core.entities import Vector2D
from multiball_pong.core.game import Game

__all__ = [
    "Ball",
    "Paddle",
    "PlayField",
    "Direction",
    "Vector2D",
    "PlayerControl",
    "AutonomousControl",
    "Game",
]
