"""Geometry of the floating main window."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Tuple


@dataclass
class Rect:
    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0

    def width(self) -> int:
        return self.right - self.left

    def height(self) -> int:
        return self.bottom - self.top

    def move_to(self, x: int, y: int) -> None:
        """Move the top-left corner to (x, y), keeping the size."""
        width, height = self.width(), self.height()
        self.left, self.top = x, y
        self.right, self.bottom = x + width, y + height


def _ratio(position: int, span: int) -> float:
    return position / span if span else 0.0


def keep_window_on_screen(rect: Rect, screen: Rect, current_screen: Rect) -> Tuple[Rect, Rect]:
    """Bring a window rect back inside the work area.

    ``screen`` is the work area the window was last placed in and
    ``current_screen`` the work area now. When they differ the window keeps
    its relative position in the new area. Returns the new window rect and
    the work area to remember.
    """
    rect = replace(rect)
    if screen.width() <= rect.width() or screen.height() <= rect.height():
        return rect, screen
    if rect.left < screen.left:
        rect.move_to(screen.left, rect.top)
    if rect.top < screen.top:
        rect.move_to(rect.left, screen.top)

    if screen != current_screen:
        width_ratio = _ratio(rect.left, screen.right - rect.width())
        height_ratio = _ratio(rect.top, screen.bottom - rect.height())
        x = int((current_screen.right - rect.width()) * width_ratio)
        y = int((current_screen.bottom - rect.height()) * height_ratio)
        rect.move_to(x, y)
        return rect, replace(current_screen)

    if rect.right > screen.right:
        rect.move_to(screen.right - rect.width(), rect.top)
    if rect.bottom > screen.bottom:
        rect.move_to(rect.left, screen.bottom - rect.height())
    return rect, screen


def transparency_alpha(percent: int) -> int:
    """Convert an opacity percentage to a 0-255 alpha value."""
    return percent * 255 // 100