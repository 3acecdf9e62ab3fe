"""Pattern matching interface definition."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from PIL import Image


@dataclass
class Match:
    """Represents a pattern match result."""

    x: int
    y: int
    width: int
    height: int
    confidence: float

    @property
    def bounds(self) -> tuple[int, int, int, int]:
        """Get match bounds as (x, y, width, height)."""
        return (self.x, self.y, self.width, self.height)

    @property
    def center(self) -> tuple[int, int]:
        """Get center point of the match."""
        return (self.x + self.width // 2, self.y + self.height // 2)


class IPatternMatcher(ABC):
    """Interface for pattern matching operations."""

    @abstractmethod
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
        """
        pass
