"""
Paddle control strategies: keyboard player and ball-following CPU
"""

from collections.abc import Mapping
from collections.abc import Sequence

from multiball_pong.core.entities import Ball
from multiball_pong.core.entities import Direction
from multiball_pong.core.entities import Paddle


class PlayerControl:
    """Paddle driven by two keys of the shared key-state map"""

    player_controlled = True

    def __init__(self, up_key: str = "ArrowUp", down_key: str = "ArrowDown"):
        self.up_key = up_key
        self.down_key = down_key

    def steer(self, paddle: Paddle, keys: Mapping[str, bool], balls: Sequence[Ball]) -> None:
        """Moves the paddle according to the currently held keys

        Holding both keys cancels out: the net displacement is zero and the
        paddle stays where it is, even against a wall where a clamped move
        followed by the opposite move would not cancel.
        """
        move_y = 0
        if keys.get(self.up_key, False):
            move_y -= 1
        if keys.get(self.down_key, False):
            move_y += 1

        if move_y < 0:
            paddle.move(Direction.UP)
        elif move_y > 0:
            paddle.move(Direction.DOWN)

    def __repr__(self) -> str:
        return f"PlayerControl(up_key={self.up_key!r}, down_key={self.down_key!r})"


class AutonomousControl:
    """CPU paddle that follows one ball of the game"""

    player_controlled = False

    def __init__(self, target_index: int = 0):
        if target_index < 0:
            raise ValueError(f"target_index must not be negative, got {target_index}")
        self.target_index = target_index

    def target(self, balls: Sequence[Ball]) -> Ball:
        return balls[self.target_index]

    def steer(self, paddle: Paddle, keys: Mapping[str, bool], balls: Sequence[Ball]) -> None:
        """Tracks the target ball, ignoring the keyboard"""
        paddle.auto_move(self.target(balls))

    def __repr__(self) -> str:
        return f"AutonomousControl(target_index={self.target_index})"
