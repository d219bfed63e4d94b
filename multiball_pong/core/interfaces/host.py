"""
Host protocols - input events and frame scheduling provided by the environment
"""

from collections.abc import Callable
from typing import Protocol

from multiball_pong.core.interfaces.canvas import CanvasProtocol

KeyListener = Callable[[str], None]


class InputSourceProtocol(Protocol):
    """
    Keyboard event source.

    Listeners are called with the identifier of the key that changed
    ("ArrowUp", "ArrowDown", "a", "space", ...).
    """

    def add_listener(self, event_type: str, listener: KeyListener) -> None:
        """
        Register a listener.

        Args:
            event_type: "keydown" or "keyup"
            listener: Callable receiving the key identifier

        Raises:
            ValueError: if event_type is unknown
        """
        ...


class FrameHostProtocol(Protocol):
    """
    Environment that owns the drawing surface, the keyboard and the frame clock.
    """

    canvas: CanvasProtocol
    input: InputSourceProtocol

    def is_active(self) -> bool:
        """Check if the host is still running (window not closed)"""
        ...

    def pump_events(self) -> None:
        """Deliver pending input events to the registered listeners"""
        ...

    def next_frame(self) -> None:
        """Show the frame just drawn and wait until the next one is due"""
        ...

    def cleanup(self) -> None:
        """Release host resources"""
        ...
