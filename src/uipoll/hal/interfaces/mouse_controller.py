"""Mouse controller interface definition."""

from abc import ABC, abstractmethod
from enum import Enum


class MouseButton(Enum):
    """Mouse button enumeration."""

    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"


class IMouseController(ABC):
    """Interface for the mouse operations the polling helpers need."""

    @abstractmethod
    def mouse_click(
        self,
        x: int | None = None,
        y: int | None = None,
        button: MouseButton = MouseButton.LEFT,
        clicks: int = 1,
    ) -> bool:
        """Click mouse button.

        Args:
            x: X coordinate (None for current position)
            y: Y coordinate (None for current position)
            button: Mouse button to click
            clicks: Number of clicks

        Returns:
            True if successful
        """
        pass
