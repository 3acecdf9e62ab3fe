"""Mock implementations for headless runs and deterministic tests."""

from .mock_engine import MockImage, MockRecognitionEngine, MockRegionHandle
from .mock_time import MockTime

__all__ = ["MockTime", "MockRecognitionEngine", "MockRegionHandle", "MockImage"]
