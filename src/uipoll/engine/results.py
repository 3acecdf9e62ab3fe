"""Outcome of a single recognition attempt."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from ..exceptions import InputControlError


@dataclass
class MatchResult:
    """One template match or one OCR fragment.

    Coordinates are absolute screen pixels. ``text`` is only set by OCR.
    ``click`` forwards to the engine's input injection; errors raised there
    propagate to the caller unchanged.
    """

    exists: bool
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    confidence: float = 0.0
    text: str | None = None
    clicker: Callable[[MatchResult], None] | None = field(
        default=None, repr=False, compare=False
    )

    @classmethod
    def empty(cls) -> MatchResult:
        """Result of an attempt that found nothing."""
        return cls(exists=False)

    def is_empty(self) -> bool:
        return not self.exists

    @property
    def bounds(self) -> tuple[int, int, int, int]:
        """Get match bounds as (x, y, width, height)."""
        return (self.x, self.y, self.width, self.height)

    @property
    def center(self) -> tuple[int, int]:
        """Get center point of the match."""
        return (self.x + self.width // 2, self.y + self.height // 2)

    def click(self) -> None:
        """Click the center of the match.

        Raises:
            InputControlError: If the result is empty or has no input binding
        """
        if not self.exists:
            raise InputControlError("Cannot click an empty match", operation="click")
        if self.clicker is None:
            raise InputControlError("Match is not bound to an input controller", operation="click")
        self.clicker(self)
