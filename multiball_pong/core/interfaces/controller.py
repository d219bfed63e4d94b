"""
Paddle controller protocol - decides how a paddle moves each frame
"""

from collections.abc import Mapping
from collections.abc import Sequence
from typing import TYPE_CHECKING
from typing import Protocol

if TYPE_CHECKING:
    from multiball_pong.core.entities import Ball
    from multiball_pong.core.entities import Paddle


class PaddleController(Protocol):
    """
    Protocol that every paddle control strategy must implement.

    The game doesn't need to know whether a paddle follows the keyboard or a
    ball: it hands every controller the same inputs once per frame.
    """

    player_controlled: bool

    def steer(
        self,
        paddle: "Paddle",
        keys: Mapping[str, bool],
        balls: Sequence["Ball"],
    ) -> None:
        """
        Move the paddle for the current frame.

        Args:
            paddle: Paddle to move
            keys: Key identifier -> pressed state, as of this frame
            balls: Every ball in the game, in creation order
        """
        ...
