"""OpenCV-based pattern matching implementation."""

from typing import Any

import cv2
import numpy as np
from PIL import Image

from ...exceptions import ImageProcessingError
from ...logging import get_logger
from ..config import HALConfig
from ..interfaces.pattern_matcher import IPatternMatcher, Match

logger = get_logger(__name__)


class OpenCVMatcher(IPatternMatcher):
    """Template matching implementation using OpenCV ``TM_CCOEFF_NORMED``."""

    def __init__(self, config: HALConfig | None = None) -> None:
        """Initialize OpenCV matcher.

        Args:
            config: HAL configuration
        """
        self.config = config or HALConfig()

        cv2.setNumThreads(self.config.matcher_threads)

        logger.info("opencv_matcher_initialized", threads=self.config.matcher_threads)

    def _pil_to_cv2(self, image: Image.Image) -> np.ndarray[Any, Any]:
        """Convert PIL Image to OpenCV format.

        Args:
            image: PIL Image

        Returns:
            OpenCV image array (BGR format)
        """
        if image.mode != "RGB":
            image = image.convert("RGB")
        np_image = np.array(image)
        return cv2.cvtColor(np_image, cv2.COLOR_RGB2BGR)

    def find_pattern(
        self,
        haystack: Image.Image,
        needle: Image.Image,
        confidence: float = 0.9,
        grayscale: bool = False,
    ) -> Match | None:
        """Find single pattern occurrence in image.

        Args:
            haystack: Image to search in
            needle: Pattern to search for
            confidence: Minimum confidence threshold (0.0 to 1.0)
            grayscale: Convert to grayscale before matching

        Returns:
            Match object if found, None otherwise

        Raises:
            ImageProcessingError: If OpenCV rejects the inputs
        """
        if needle.width > haystack.width or needle.height > haystack.height:
            # A needle larger than the search area can never match
            return None

        try:
            haystack_cv = self._pil_to_cv2(haystack)
            needle_cv = self._pil_to_cv2(needle)

            if grayscale:
                haystack_cv = cv2.cvtColor(haystack_cv, cv2.COLOR_BGR2GRAY)
                needle_cv = cv2.cvtColor(needle_cv, cv2.COLOR_BGR2GRAY)

            result = cv2.matchTemplate(haystack_cv, needle_cv, cv2.TM_CCOEFF_NORMED)
            _, max_val, _, max_loc = cv2.minMaxLoc(result)
        except cv2.error as e:
            raise ImageProcessingError("Template matching failed", e) from e

        if max_val < confidence:
            return None

        h, w = needle_cv.shape[:2]
        x, y = max_loc
        logger.debug("pattern_found", location=(x, y), confidence=max_val)

        return Match(x=int(x), y=int(y), width=w, height=h, confidence=float(max_val))
