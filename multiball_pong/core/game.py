"""
Multiball Pong game controller: owns the entities and drives the frame loop
"""

from typing import Any

from multiball_pong.core.controllers import AutonomousControl
from multiball_pong.core.controllers import PlayerControl
from multiball_pong.core.entities import Ball
from multiball_pong.core.entities import Paddle
from multiball_pong.core.entities import PlayField
from multiball_pong.core.interfaces.canvas import CanvasProtocol
from multiball_pong.core.interfaces.host import FrameHostProtocol
from multiball_pong.core.interfaces.host import InputSourceProtocol
from multiball_pong.utils.config import GameConfig
from multiball_pong.utils.config import game_config


class Game:
    """Five balls, a player paddle on the left and a CPU paddle on the right"""

    def __init__(self, config: GameConfig | None = None):
        self.config = config if config is not None else game_config
        self.field = PlayField(self.config.FIELD_WIDTH, self.config.FIELD_HEIGHT)

        self.balls = [
            Ball(
                *spec.position(self.field.width, self.field.height),
                spec.radius,
                spec.speed_x,
                spec.speed_y,
                spec.color,
                self.field,
            )
            for spec in self.config.BALLS
        ]

        paddle_y = self.field.height / 2 - self.config.PADDLE_HEIGHT / 2
        self.paddle_left = Paddle(
            self.config.PADDLE_MARGIN,
            paddle_y,
            self.config.PADDLE_WIDTH,
            self.config.PADDLE_HEIGHT,
            self.config.PLAYER_PADDLE_COLOR,
            PlayerControl(self.config.UP_KEY, self.config.DOWN_KEY),
            self.field,
            speed=self.config.PADDLE_SPEED,
        )
        self.paddle_right = Paddle(
            self.field.width - self.config.PADDLE_MARGIN - self.config.PADDLE_WIDTH,
            paddle_y,
            self.config.PADDLE_WIDTH,
            self.config.PADDLE_HEIGHT,
            self.config.CPU_PADDLE_COLOR,
            AutonomousControl(self.config.CPU_TARGET_BALL),
            self.field,
            speed=self.config.PADDLE_SPEED,
        )

        # Key identifier -> pressed, written by input listeners, read by update()
        self.keys: dict[str, bool] = {}

        self.running = False
        self.frame_count = 0
        self._input_source: InputSourceProtocol | None = None

    @property
    def paddles(self) -> tuple[Paddle, Paddle]:
        return (self.paddle_left, self.paddle_right)

    def draw_field(self, canvas: CanvasProtocol) -> None:
        """Paints the background and the two vertical guide lines"""
        canvas.fill_rect(0, 0, self.field.width, self.field.height, self.config.BACKGROUND_COLOR)

        offset = self.config.GUIDE_LINE_OFFSET
        for x in (offset, self.field.width - offset):
            canvas.stroke_line(
                (x, 0),
                (x, self.field.height),
                self.config.GUIDE_LINE_COLOR,
                self.config.GUIDE_LINE_WIDTH,
            )

    def draw(self, canvas: CanvasProtocol) -> None:
        """Repaints the whole frame; paddles go last so they stay on top of balls"""
        canvas.clear()
        self.draw_field(canvas)

        for ball in self.balls:
            ball.draw(canvas)

        self.paddle_left.draw(canvas)
        self.paddle_right.draw(canvas)

    def _bounce_off_paddles(self, ball: Ball) -> None:
        # One-sided: while a ball overlaps a paddle its direction is forced
        # away from it every frame, whatever its current direction.
        left = self.paddle_left
        if ball.position.x - ball.radius <= left.right and left.covers(ball.position.y):
            ball.velocity.x = abs(ball.velocity.x)

        right = self.paddle_right
        if ball.position.x + ball.radius >= right.position.x and right.covers(ball.position.y):
            ball.velocity.x = -abs(ball.velocity.x)

    def update(self) -> None:
        """Advances the game by one frame"""
        for ball in self.balls:
            ball.move()
            self._bounce_off_paddles(ball)

            if ball.is_out():
                ball.reset()

        # Left (player) first, then right (CPU)
        for paddle in self.paddles:
            paddle.controller.steer(paddle, self.keys, self.balls)

        self.frame_count += 1

    def _on_key_down(self, key: str) -> None:
        self.keys[key] = True

    def _on_key_up(self, key: str) -> None:
        self.keys[key] = False

    def handle_input(self, source: InputSourceProtocol) -> None:
        """Registers the key listeners on ``source``; repeat calls with it are no-ops"""
        if source is self._input_source:
            return

        source.add_listener("keydown", self._on_key_down)
        source.add_listener("keyup", self._on_key_up)
        self._input_source = source

    def run(self, host: FrameHostProtocol) -> None:
        """
        Runs the frame loop until ``stop()`` is called or the host shuts down.

        Each frame delivers pending input events, updates, draws, then lets the
        host present the frame and wait for the next one.

        Args:
            host: Environment providing the canvas, keyboard and frame clock
        """
        self.handle_input(host.input)
        self.running = True

        while self.running:
            host.pump_events()
            if not (self.running and host.is_active()):
                break

            self.update()
            self.draw(host.canvas)
            host.next_frame()

        self.running = False

    def stop(self) -> None:
        """Asks the frame loop to exit before its next frame"""
        self.running = False

    def get_game_state(self) -> dict[str, Any]:
        """Returns the complete game state"""
        return {
            "balls": [
                {
                    "position": ball.position.to_tuple(),
                    "velocity": ball.velocity.to_tuple(),
                    "radius": ball.radius,
                }
                for ball in self.balls
            ],
            "paddle_left_position": self.paddle_left.position.to_tuple(),
            "paddle_right_position": self.paddle_right.position.to_tuple(),
            "keys_pressed": sorted(key for key, pressed in self.keys.items() if pressed),
            "frame_count": self.frame_count,
            "field_bounds": (0, self.field.width, 0, self.field.height),
        }
