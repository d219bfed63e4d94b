"""
Shared pytest fixtures: pygame runs headless with SDL dummy drivers
"""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402


@pytest.fixture
def pygame_init():
    """Initialize pygame for tests touching the display, keys or surfaces"""
    pygame.init()
    yield
    pygame.quit()
