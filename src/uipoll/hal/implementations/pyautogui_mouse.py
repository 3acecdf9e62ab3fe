"""PyAutoGUI mouse operations implementation."""

from ...exceptions import InputControlError
from ...logging import get_logger
from ..interfaces.mouse_controller import IMouseController, MouseButton

logger = get_logger(__name__)


class PyAutoGUIMouseOperations(IMouseController):
    """Handles mouse input operations using PyAutoGUI."""

    def __init__(self) -> None:
        """Initialize PyAutoGUI mouse operations."""
        import pyautogui

        self._pyautogui = pyautogui
        # Disable PyAutoGUI's fail-safe (moving mouse to corner)
        pyautogui.FAILSAFE = False
        pyautogui.PAUSE = 0

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

        Raises:
            InputControlError: If mouse click fails
        """
        try:
            self._pyautogui.click(x=x, y=y, clicks=clicks, button=button.value)
        except Exception as e:
            logger.error("mouse_click_failed", x=x, y=y, error=str(e))
            raise InputControlError("Mouse click failed", e, operation="mouse_click") from e

        logger.debug("mouse_clicked", x=x, y=y, button=button.value, clicks=clicks)
        return True
