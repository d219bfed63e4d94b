"""
Protocols implemented by renderers, hosts and paddle controllers
"""

from multiball_pong.core.interfaces.canvas import CanvasProtocol
from multiball_pong.core.interfaces.controller import PaddleController
from multiball_pong.core.interfaces.host import FrameHostProtocol
from multiball_pong.core.interfaces.host import InputSourceProtocol
from multiball_pong.core.interfaces.host import KeyListener

__all__ = [
    "CanvasProtocol",
    "PaddleController",
    "FrameHostProtocol",
    "InputSourceProtocol",
    "KeyListener",
]
