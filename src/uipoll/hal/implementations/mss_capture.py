"""MSS-based screen capture implementation."""

import threading

import mss
from mss.base import MSSBase
from PIL import Image

from ...exceptions import ScreenCaptureException
from ...logging import get_logger
from ..config import HALConfig
from ..interfaces.screen_capture import IScreenCapture

logger = get_logger(__name__)


class MSSScreenCapture(IScreenCapture):
    """Fast screen capture implementation using MSS.

    MSS grabs the framebuffer directly instead of going through a GUI
    automation library, which keeps each polling attempt cheap.
    """

    def __init__(self, config: HALConfig | None = None):
        """Initialize MSS screen capture.

        Args:
            config: HAL configuration
        """
        self.config = config or HALConfig()
        self._thread_local = threading.local()

        monitors = self.sct.monitors
        # mss index 0 is the combined virtual screen
        if self.config.monitor + 1 >= len(monitors):
            raise ScreenCaptureException(f"Invalid monitor index: {self.config.monitor}")
        self._monitor = monitors[self.config.monitor + 1]

        logger.info(
            "mss_capture_initialized",
            monitor=self.config.monitor,
            bounds=(
                self._monitor["left"],
                self._monitor["top"],
                self._monitor["width"],
                self._monitor["height"],
            ),
        )

    @property
    def sct(self) -> MSSBase:
        """Get or create thread-local mss instance.

        Each thread needs its own mss instance because of thread-local
        handles held by the Windows GDI backend.
        """
        if not hasattr(self._thread_local, "sct"):
            self._thread_local.sct = mss.mss()
            logger.debug("mss_instance_created", thread_id=threading.current_thread().ident)

        return self._thread_local.sct

    def capture_screen(self) -> Image.Image:
        """Capture the configured monitor.

        Returns:
            PIL Image of screenshot

        Raises:
            ScreenCaptureException: If capture fails
        """
        try:
            sct_img = self.sct.grab(self._monitor)
            image = Image.frombytes(
                "RGB", (sct_img.width, sct_img.height), sct_img.bgra, "raw", "BGRX"
            )
        except Exception as e:
            raise ScreenCaptureException(
                f"Failed to capture screen (monitor={self.config.monitor})", e
            ) from e

        logger.debug("screen_captured", size=(image.width, image.height))
        return image

    def get_screen_origin(self) -> tuple[int, int]:
        return (self._monitor["left"], self._monitor["top"])
