"""
Multiball Pong game entities: play field, balls, paddles
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from multiball_pong.core.interfaces.canvas import CanvasProtocol
    from multiball_pong.core.interfaces.controller import PaddleController

RGB = tuple[int, int, int]


@dataclass
class Vector2D:
    """Simple 2D vector for positions and velocities"""

    x: float
    y: float

    def __iadd__(self, other: "Vector2D") -> "Vector2D":
        self.x += other.x
        self.y += other.y
        return self

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class PlayField:
    """Visible rectangle every entity moves in"""

    width: float
    height: float

    @property
    def center(self) -> Vector2D:
        return Vector2D(self.width / 2, self.height / 2)


class Direction(Enum):
    """Vertical paddle directions"""

    UP = "up"
    DOWN = "down"


class Ball:
    """Bouncing ball"""

    def __init__(
        self,
        x: float,
        y: float,
        radius: float,
        vx: float,
        vy: float,
        color: RGB,
        field: PlayField,
    ):
        self.position = Vector2D(x, y)
        self.velocity = Vector2D(vx, vy)
        self.radius = radius
        self.color = color
        self.field = field

    def move(self) -> None:
        """Advances one frame, reflecting off the top and bottom walls

        No position correction is applied, so the ball can overshoot a wall by
        up to one frame of vertical travel before coming back.
        """
        self.position += self.velocity

        if (
            self.position.y - self.radius <= 0
            or self.position.y + self.radius >= self.field.height
        ):
            self.velocity.y = -self.velocity.y

    def reset(self) -> None:
        """Re-centers the ball and sends it back the other way"""
        self.position = self.field.center
        self.velocity.x = -self.velocity.x

    def is_out(self) -> bool:
        """True once the ball has fully left the field on the left or right"""
        return (
            self.position.x + self.radius < 0
            or self.position.x - self.radius > self.field.width
        )

    def draw(self, canvas: "CanvasProtocol") -> None:
        canvas.fill_circle(self.position.x, self.position.y, self.radius, self.color)


class Paddle:
    """Player or CPU paddle"""

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        color: RGB,
        controller: "PaddleController",
        field: PlayField,
        speed: float = 7.0,
    ):
        self.position = Vector2D(x, y)
        self.width = width
        self.height = height
        self.color = color
        self.controller = controller
        self.speed = speed

        # Vertical movement limits
        self.min_y = 0.0
        self.max_y = field.height - height

    @property
    def is_player_controlled(self) -> bool:
        return self.controller.player_controlled

    @property
    def center_y(self) -> float:
        return self.position.y + self.height / 2

    @property
    def right(self) -> float:
        return self.position.x + self.width

    @property
    def bottom(self) -> float:
        return self.position.y + self.height

    def constrain_position(self) -> None:
        """Ensures the paddle stays within its movement bounds"""
        self.position.y = max(self.min_y, min(self.max_y, self.position.y))

    def move(self, direction: Direction | str) -> None:
        """Moves one step up or down, clamped to the field

        Raises:
            ValueError: if direction is neither "up" nor "down"
        """
        if Direction(direction) is Direction.UP:
            self.position.y -= self.speed
        else:
            self.position.y += self.speed

        self.constrain_position()

    def auto_move(self, target: Ball) -> None:
        """Steps toward the target ball's current height (no prediction)"""
        if target.position.y < self.center_y:
            self.move(Direction.UP)
        elif target.position.y > self.center_y:
            self.move(Direction.DOWN)

    def covers(self, y: float) -> bool:
        """True if ``y`` lies within the paddle's vertical span"""
        return self.position.y <= y <= self.bottom

    def get_rect(self) -> tuple[float, float, float, float]:
        """Returns the rectangle properties (x, y, width, height)"""
        return (self.position.x, self.position.y, self.width, self.height)

    def draw(self, canvas: "CanvasProtocol") -> None:
        canvas.fill_rect(*self.get_rect(), self.color)
