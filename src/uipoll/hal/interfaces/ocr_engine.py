"""OCR engine interface definition."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass

from PIL import Image


@dataclass
class TextRegion:
    """A text fragment and its axis-aligned box inside the analysed image."""

    text: str
    x: int
    y: int
    width: int
    height: int
    confidence: float

    @classmethod
    def from_quad(
        cls, quad: Sequence[Sequence[float]], text: str, confidence: float
    ) -> "TextRegion":
        """Build a region from the four corner points an OCR engine reports."""
        xs = [point[0] for point in quad]
        ys = [point[1] for point in quad]
        left, top = int(min(xs)), int(min(ys))
        return cls(
            text=text,
            x=left,
            y=top,
            width=int(max(xs)) - left,
            height=int(max(ys)) - top,
            confidence=float(confidence),
        )

    @property
    def bounds(self) -> tuple[int, int, int, int]:
        """Get region bounds as (x, y, width, height)."""
        return (self.x, self.y, self.width, self.height)


class IOCREngine(ABC):
    """Interface for OCR operations."""

    @abstractmethod
    def get_text_regions(
        self,
        image: Image.Image,
        languages: list[str] | None = None,
        min_confidence: float = 0.0,
    ) -> list[TextRegion]:
        """Get all text regions with bounding boxes.

        Regions are returned in the order the engine reads them.

        Args:
            image: Image to analyze
            languages: List of language codes
            min_confidence: Minimum confidence threshold

        Returns:
            List of TextRegion objects
        """
