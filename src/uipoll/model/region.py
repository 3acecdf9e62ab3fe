"""Region - a rectangular area on the screen."""

from __future__ import annotations

from dataclasses import dataclass

REFERENCE_WIDTH = 1920
REFERENCE_HEIGHT = 1080


@dataclass(frozen=True)
class Region:
    """Represents a rectangular area on the screen.

    Regions bound where template matching and OCR look. Coordinates are
    absolute screen pixels; the default covers a 1920x1080 reference frame.
    """

    x: int = 0
    """X coordinate of top-left corner."""

    y: int = 0
    """Y coordinate of top-left corner."""

    width: int = REFERENCE_WIDTH
    """Width of the region."""

    height: int = REFERENCE_HEIGHT
    """Height of the region."""

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Region size must be positive, got {self.width}x{self.height}")

    @property
    def right(self) -> int:
        """X coordinate of the right edge."""
        return self.x + self.width

    @property
    def bottom(self) -> int:
        """Y coordinate of the bottom edge."""
        return self.y + self.height

    @property
    def bounds(self) -> tuple[int, int, int, int]:
        """Get region bounds as (x, y, width, height)."""
        return (self.x, self.y, self.width, self.height)

    @classmethod
    def parse(cls, spec: str) -> Region:
        """Build a region from an ``"x,y,width,height"`` string.

        Args:
            spec: Comma separated integers

        Returns:
            Region instance

        Raises:
            ValueError: If the string does not hold four integers
        """
        parts = [part.strip() for part in spec.split(",")]
        if len(parts) != 4:
            raise ValueError(f"Region must be 'x,y,width,height', got {spec!r}")
        x, y, width, height = (int(part) for part in parts)
        return cls(x, y, width, height)

    def __str__(self) -> str:
        return f"Region({self.x}, {self.y}, {self.width}x{self.height})"
