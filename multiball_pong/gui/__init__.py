"""
PyGame front end of Multiball Pong
"""

from multiball_pong.gui.keyboard import KeyboardInput
from multiball_pong.gui.keyboard import key_identifier
from multiball_pong.gui.pygame_renderer import PygameCanvas
from multiball_pong.gui.pygame_renderer import PygameHost

__all__ = ["KeyboardInput", "key_identifier", "PygameCanvas", "PygameHost"]
