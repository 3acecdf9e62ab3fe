"""Screen capture interface definition."""

from abc import ABC, abstractmethod

from PIL import Image


class IScreenCapture(ABC):
    """Interface for screen capture operations."""

    @abstractmethod
    def capture_screen(self) -> Image.Image:
        """Capture the configured monitor.

        Returns:
            PIL Image of screenshot
        """
        pass

    @abstractmethod
    def get_screen_origin(self) -> tuple[int, int]:
        """Get the desktop coordinates of the captured image's top-left pixel.

        Returns:
            Tuple of (x, y) in pixels
        """
        pass
