"""HAL Interface definitions.

These interfaces define the contracts that all HAL implementations must follow.
"""

from .mouse_controller import IMouseController, MouseButton
from .ocr_engine import IOCREngine, TextRegion
from .pattern_matcher import IPatternMatcher, Match
from .screen_capture import IScreenCapture

__all__ = [
    "IScreenCapture",
    "IPatternMatcher",
    "Match",
    "IOCREngine",
    "TextRegion",
    "IMouseController",
    "MouseButton",
]
