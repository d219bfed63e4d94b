"""
Keyboard input for Multiball Pong
"""

import pygame

from multiball_pong.core.interfaces.host import KeyListener

# Arrow keys use the identifiers browsers report; other keys use pygame names
KEY_IDENTIFIERS: dict[int, str] = {
    pygame.K_UP: "ArrowUp",
    pygame.K_DOWN: "ArrowDown",
    pygame.K_LEFT: "ArrowLeft",
    pygame.K_RIGHT: "ArrowRight",
}

EVENT_TYPES: dict[int, str] = {
    pygame.KEYDOWN: "keydown",
    pygame.KEYUP: "keyup",
}


def key_identifier(key: int) -> str:
    """Returns the string identifier of a pygame key code"""
    return KEY_IDENTIFIERS.get(key) or pygame.key.name(key)


class KeyboardInput:
    """Dispatches pygame key events to registered listeners"""

    def __init__(self) -> None:
        self.listeners: dict[str, list[KeyListener]] = {
            event_type: [] for event_type in EVENT_TYPES.values()
        }

    def add_listener(self, event_type: str, listener: KeyListener) -> None:
        """Register a listener for "keydown" or "keyup" events"""
        if event_type not in self.listeners:
            raise ValueError(
                f"Unknown event type: {event_type}. Available: {list(self.listeners.keys())}"
            )
        self.listeners[event_type].append(listener)

    def handle_event(self, event: pygame.event.Event) -> str | None:
        """
        Handle a pygame event

        Returns:
            "quit" when the window is closed or ESC is pressed, None otherwise
        """
        if event.type == pygame.QUIT:
            return "quit"

        event_type = EVENT_TYPES.get(event.type)
        if event_type is None:
            return None

        key = key_identifier(event.key)
        for listener in self.listeners[event_type]:
            listener(key)

        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            return "quit"

        return None
