"""EasyOCR-based OCR engine implementation."""

import easyocr
import numpy as np
import torch
from PIL import Image

from ...exceptions import ImageProcessingError
from ...logging import get_logger
from ..config import HALConfig
from ..interfaces.ocr_engine import IOCREngine, TextRegion

logger = get_logger(__name__)

DEFAULT_LANGUAGES = ("en",)


class EasyOCREngine(IOCREngine):
    """OCR engine implementation using EasyOCR.

    Building a reader loads the detection and recognition models, so one
    reader is kept per language set for the life of the engine.
    """

    def __init__(self, config: HALConfig | None = None) -> None:
        self.config = config or HALConfig()
        self._readers: dict[tuple[str, ...], easyocr.Reader] = {}

        self.use_gpu = self.config.ocr_gpu_enabled and torch.cuda.is_available()
        if self.config.ocr_gpu_enabled and not self.use_gpu:
            logger.info("ocr_gpu_unavailable", fallback="cpu")

        logger.info("easyocr_engine_initialized", gpu_enabled=self.use_gpu)

    def _reader(self, languages: tuple[str, ...]) -> easyocr.Reader:
        key = tuple(sorted(languages))
        reader = self._readers.get(key)
        if reader is None:
            reader = easyocr.Reader(list(key), gpu=self.use_gpu, verbose=False)
            self._readers[key] = reader
            logger.debug("easyocr_reader_created", languages=key, gpu=self.use_gpu)
        return reader

    def get_text_regions(
        self,
        image: Image.Image,
        languages: list[str] | None = None,
        min_confidence: float = 0.0,
    ) -> list[TextRegion]:
        """Read every text fragment in ``image``.

        Raises:
            ImageProcessingError: If EasyOCR fails on the image
        """
        pixels = np.asarray(image.convert("RGB"))
        try:
            detections = self._reader(tuple(languages or DEFAULT_LANGUAGES)).readtext(
                pixels, detail=1
            )
        except (RuntimeError, ValueError, OSError) as e:
            raise ImageProcessingError("Text region detection failed", e) from e

        regions = [
            TextRegion.from_quad(quad, text, confidence)
            for quad, text, confidence in detections
            if confidence >= min_confidence
        ]
        logger.debug("text_regions_found", count=len(regions), min_confidence=min_confidence)
        return regions
