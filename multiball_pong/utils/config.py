"""
Multiball Pong game configuration with Pydantic validation
"""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from pydantic import BaseModel
from pydantic import Field
from pydantic import model_validator

RGB = tuple[int, int, int]


class BallSpec(BaseModel):
    """Initial state of one ball, anchored to the field size

    The starting position is ``field_size * fraction + offset`` on each axis,
    so ``x_fraction=1.0, x_offset=-200`` means "200 px left of the right edge".
    """

    model_config = {"frozen": True}

    x_fraction: float = Field(default=0.5, ge=0, le=1, description="X anchor as field fraction")
    x_offset: float = Field(default=0.0, description="X offset from the anchor in pixels")
    y_fraction: float = Field(default=0.5, ge=0, le=1, description="Y anchor as field fraction")
    y_offset: float = Field(default=0.0, description="Y offset from the anchor in pixels")
    radius: float = Field(gt=0, description="Ball radius in pixels")
    speed_x: float = Field(description="Horizontal speed in pixels per frame")
    speed_y: float = Field(description="Vertical speed in pixels per frame")
    color: RGB = Field(description="RGB color")

    def position(self, field_width: float, field_height: float) -> tuple[float, float]:
        """Absolute starting position for a field of the given size"""
        return (
            field_width * self.x_fraction + self.x_offset,
            field_height * self.y_fraction + self.y_offset,
        )


DEFAULT_BALLS = (
    BallSpec(radius=6, speed_x=4, speed_y=-3, color=(255, 165, 0)),  # Orange
    BallSpec(
        x_offset=150, y_fraction=1 / 3, radius=10, speed_x=-3, speed_y=2, color=(0, 0, 255)
    ),  # Blue
    BallSpec(
        x_fraction=1 / 3,
        y_fraction=1.0,
        y_offset=-80,
        radius=14,
        speed_x=3,
        speed_y=-2,
        color=(0, 255, 255),
    ),  # Cyan
    BallSpec(
        x_fraction=1.0,
        x_offset=-200,
        y_fraction=1.0,
        y_offset=-40,
        radius=18,
        speed_x=-2,
        speed_y=-2,
        color=(128, 128, 128),
    ),  # Gray
    BallSpec(
        y_fraction=1.0, y_offset=-10, radius=3, speed_x=5, speed_y=-4, color=(255, 255, 255)
    ),  # White
)


class GameConfig(BaseModel):
    """Main game configuration with Pydantic validation"""

    # Allow mutation for compatibility with game_config_tmp
    model_config = {"validate_assignment": True}

    # Field dimensions
    FIELD_WIDTH: int = Field(default=800, gt=0, description="Field width in pixels")
    FIELD_HEIGHT: int = Field(default=600, gt=0, description="Field height in pixels")

    # Balls
    BALLS: tuple[BallSpec, ...] = Field(
        default=DEFAULT_BALLS, min_length=1, description="Initial ball layout"
    )

    # Paddles
    PADDLE_WIDTH: float = Field(default=12.0, gt=0, description="Paddle width in pixels")
    PADDLE_HEIGHT: float = Field(default=120.0, gt=0, description="Paddle height in pixels")
    PADDLE_SPEED: float = Field(default=7.0, gt=0, description="Paddle speed in pixels per frame")
    PADDLE_MARGIN: float = Field(default=40.0, ge=0, description="Paddle margin from edge")
    PLAYER_PADDLE_COLOR: RGB = Field(default=(50, 205, 50), description="RGB color")
    CPU_PADDLE_COLOR: RGB = Field(default=(255, 0, 0), description="RGB color")
    CPU_TARGET_BALL: int = Field(default=0, ge=0, description="Index of the ball the CPU tracks")

    # Controls
    UP_KEY: str = Field(default="ArrowUp", min_length=1, description="Key moving the paddle up")
    DOWN_KEY: str = Field(
        default="ArrowDown", min_length=1, description="Key moving the paddle down"
    )

    # Display
    FPS: int = Field(default=60, gt=0, description="Frames per second")
    WINDOW_TITLE: str = Field(default="Multiball Pong", description="Window caption")
    BACKGROUND_COLOR: RGB = Field(default=(51, 51, 51), description="RGB color")
    GUIDE_LINE_COLOR: RGB = Field(default=(255, 255, 255), description="RGB color")
    GUIDE_LINE_OFFSET: float = Field(default=120.0, ge=0, description="Guide line offset")
    GUIDE_LINE_WIDTH: int = Field(default=3, gt=0, description="Guide line width in pixels")

    @model_validator(mode="after")
    def validate_field_dimensions(self) -> "GameConfig":
        """Validate field is large enough for game elements"""
        min_width = 2 * (self.PADDLE_MARGIN + self.PADDLE_WIDTH)
        if self.FIELD_WIDTH <= min_width:
            raise ValueError(f"FIELD_WIDTH must be larger than {min_width} pixels")

        if self.FIELD_HEIGHT <= self.PADDLE_HEIGHT:
            raise ValueError(f"FIELD_HEIGHT must be larger than {self.PADDLE_HEIGHT} pixels")

        if self.GUIDE_LINE_OFFSET * 2 > self.FIELD_WIDTH:
            raise ValueError("GUIDE_LINE_OFFSET puts the guide lines outside the field")

        return self

    @model_validator(mode="after")
    def validate_balls(self) -> "GameConfig":
        """Validate every ball starts fully inside the field and the CPU target exists"""
        for index, spec in enumerate(self.BALLS):
            x, y = spec.position(self.FIELD_WIDTH, self.FIELD_HEIGHT)
            r = spec.radius
            if not (r <= x <= self.FIELD_WIDTH - r and r <= y <= self.FIELD_HEIGHT - r):
                raise ValueError(
                    f"Ball {index} starts outside the field at ({x}, {y}) with radius {r}"
                )

        if self.CPU_TARGET_BALL >= len(self.BALLS):
            raise ValueError(
                f"CPU_TARGET_BALL ({self.CPU_TARGET_BALL}) must be below the ball count "
                f"({len(self.BALLS)})"
            )
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary"""
        return self.model_dump()


# Global configuration instance with validation
game_config = GameConfig()


@contextmanager
def game_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify game config (with validation)"""
    old_values: dict[str, Any] = {}
    try:
        for name, new_value in kwargs.items():
            old_values[name] = getattr(game_config, name)
            setattr(game_config, name, new_value)
        yield
    finally:
        # Restore in reverse order
        for name, old_value in reversed(list(old_values.items())):
            setattr(game_config, name, old_value)
