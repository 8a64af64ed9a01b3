from typing import Tuple

from config import WIDTH, HEIGHT, SCALE, SCROLL_SPEED, SCROLL_BORDER, SHIFT
from ..core.utils import STEP_Y, sign


class Camera:
    """Follows the ghost by scrolling in fixed steps.

    `x`/`y` is the translation added to world coordinates before scaling to
    the screen. `shift_x`/`shift_y` is what is still left to scroll; it drains
    by `scroll_speed` per frame. A new scroll is queued on an axis only while
    that axis is at rest, when the target gets within `border` of an edge.
    """

    def __init__(self, viewport: Tuple[int, int] = (WIDTH, HEIGHT), scale: float = SCALE,
                 scroll_speed: int = SCROLL_SPEED, border: float = SCROLL_BORDER, shift: int = SHIFT):
        self.scale = scale
        self.scroll_speed = scroll_speed
        self.border = border
        self.shift = shift
        # start with the top corner of the grid centred horizontally
        self.x = viewport[0] / scale / 2
        self.y = STEP_Y
        self.shift_x = 0
        self.shift_y = 0

    @property
    def translation(self) -> Tuple[float, float]:
        return (self.x, self.y)

    @property
    def pending_shift(self) -> Tuple[float, float]:
        return (self.shift_x, self.shift_y)

    @property
    def is_scrolling(self) -> bool:
        return self.shift_x != 0 or self.shift_y != 0

    def drain(self) -> None:
        """Scroll one frame's worth, never past the queued amount."""
        step_y = sign(self.shift_y) * min(self.scroll_speed, abs(self.shift_y))
        self.y += step_y
        self.shift_y -= step_y

        step_x = sign(self.shift_x) * min(self.scroll_speed, abs(self.shift_x))
        self.x += step_x
        self.shift_x -= step_x

    def update(self, target: Tuple[float, float], viewport: Tuple[int, int]) -> None:
        """Advance one frame. `target` is the ghost's world position."""
        self.drain()

        view_w = viewport[0] / self.scale
        view_h = viewport[1] / self.scale

        if self.shift_y == 0:
            ty = target[1] + self.y
            if ty > view_h * (1 - self.border):
                self.shift_y -= self.shift
            elif ty < view_h * self.border:
                self.shift_y += self.shift

        if self.shift_x == 0:
            tx = target[0] + self.x
            if tx > view_w * (1 - self.border):
                self.shift_x -= self.shift
            elif tx < view_w * self.border:
                self.shift_x += self.shift

    def to_screen(self, p: Tuple[float, float]) -> Tuple[float, float]:
        return ((p[0] + self.x) * self.scale, (p[1] + self.y) * self.scale)
