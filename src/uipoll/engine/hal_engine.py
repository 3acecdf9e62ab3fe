"""Recognition engine built on the HAL backends."""

from __future__ import annotations

import os

from PIL import Image

from ..exceptions import ScreenCaptureException
from ..hal.interfaces import IMouseController, IOCREngine, IPatternMatcher, IScreenCapture
from ..logging import get_logger
from ..model import Region
from .descriptors import Descriptor, OcrDescriptor, TemplateMatchDescriptor
from .recognition_engine import IRecognitionEngine, IRegionHandle
from .results import MatchResult

logger = get_logger(__name__)


class HALRegionHandle(IRegionHandle):
    """Region handle that owns one screenshot."""

    def __init__(
        self, engine: HALRecognitionEngine, image: Image.Image, origin: tuple[int, int]
    ) -> None:
        self._engine = engine
        self._image: Image.Image | None = image
        self._origin = origin

    @property
    def disposed(self) -> bool:
        return self._image is None

    def _crop(self, region: Region) -> tuple[Image.Image, int, int] | None:
        """Cut ``region`` out of the screenshot.

        Returns the crop plus its top-left corner in screen coordinates, or
        None when the region lies entirely outside the capture.
        """
        if self._image is None:
            raise ScreenCaptureException("Region handle used after dispose")

        ox, oy = self._origin
        left = max(region.x - ox, 0)
        top = max(region.y - oy, 0)
        right = min(region.right - ox, self._image.width)
        bottom = min(region.bottom - oy, self._image.height)
        if right <= left or bottom <= top:
            return None

        return self._image.crop((left, top, right, bottom)), left + ox, top + oy

    def find_one(self, descriptor: Descriptor) -> MatchResult:
        if not isinstance(descriptor, TemplateMatchDescriptor):
            raise TypeError(f"find_one expects a TemplateMatchDescriptor, got {descriptor!r}")

        cropped = self._crop(descriptor.region)
        if cropped is None:
            return MatchResult.empty()
        crop, left, top = cropped

        threshold = (
            descriptor.threshold if descriptor.threshold is not None else self._engine.threshold
        )
        match = self._engine.matcher.find_pattern(crop, descriptor.image, confidence=threshold)
        if match is None:
            return MatchResult.empty()

        return MatchResult(
            exists=True,
            x=left + match.x,
            y=top + match.y,
            width=match.width,
            height=match.height,
            confidence=match.confidence,
            clicker=self._engine.click,
        )

    def find_all(self, descriptor: Descriptor) -> list[MatchResult]:
        if not isinstance(descriptor, OcrDescriptor):
            raise TypeError(f"find_all expects an OcrDescriptor, got {descriptor!r}")

        cropped = self._crop(descriptor.region)
        if cropped is None:
            return []
        crop, left, top = cropped

        regions = self._engine.ocr_engine.get_text_regions(
            crop,
            languages=self._engine.languages,
            min_confidence=self._engine.min_confidence,
        )
        return [
            MatchResult(
                exists=True,
                x=left + text_region.x,
                y=top + text_region.y,
                width=text_region.width,
                height=text_region.height,
                confidence=text_region.confidence,
                text=text_region.text,
                clicker=self._engine.click,
            )
            for text_region in regions
        ]

    def dispose(self) -> None:
        if self._image is not None:
            self._image.close()
            self._image = None


class HALRecognitionEngine(IRecognitionEngine):
    """Default engine: HAL screen capture, matcher, OCR and mouse.

    Example:
        engine = HALFactory.create_engine()
        with engine.capture_region() as handle:
            result = handle.find_one(engine.template_match(image, Region()))
    """

    def __init__(
        self,
        capture: IScreenCapture,
        matcher: IPatternMatcher,
        ocr_engine: IOCREngine,
        mouse: IMouseController,
        threshold: float = 0.8,
        languages: list[str] | None = None,
        min_confidence: float = 0.0,
    ) -> None:
        """Initialize the engine.

        Args:
            capture: Screen capture backend
            matcher: Template matching backend
            ocr_engine: OCR backend
            mouse: Input injection backend
            threshold: Template threshold for descriptors without one
            languages: OCR language codes
            min_confidence: Minimum OCR fragment confidence
        """
        self.capture = capture
        self.matcher = matcher
        self.ocr_engine = ocr_engine
        self.mouse = mouse
        self.threshold = threshold
        self.languages = languages or ["en"]
        self.min_confidence = min_confidence

    def load_image(self, path: str | os.PathLike[str]) -> Image.Image:
        with Image.open(path) as image:
            loaded = image.convert("RGB")
        logger.debug("image_loaded", path=str(path), size=loaded.size)
        return loaded

    def capture_region(self) -> HALRegionHandle:
        image = self.capture.capture_screen()
        return HALRegionHandle(self, image, self.capture.get_screen_origin())

    def click(self, result: MatchResult) -> None:
        x, y = result.center
        self.mouse.mouse_click(x, y)
