"""Recognition engine interface definition."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from typing import Any

from ..model import Region
from .descriptors import Descriptor, OcrDescriptor, TemplateMatchDescriptor
from .results import MatchResult


class IRegionHandle(ABC):
    """A scoped capture of the current display content.

    Handles must be disposed after use; using one as a context manager
    disposes it on every exit path.
    """

    @abstractmethod
    def find_one(self, descriptor: Descriptor) -> MatchResult:
        """Run a template match and return the single best result.

        Args:
            descriptor: Template match descriptor

        Returns:
            MatchResult, empty when nothing matched
        """
        pass

    @abstractmethod
    def find_all(self, descriptor: Descriptor) -> list[MatchResult]:
        """Run OCR and return every recognized fragment.

        Args:
            descriptor: OCR descriptor

        Returns:
            Fragments in the engine's reading order
        """
        pass

    @abstractmethod
    def dispose(self) -> None:
        """Release the captured frame."""
        pass

    def __enter__(self) -> IRegionHandle:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.dispose()


class IRecognitionEngine(ABC):
    """Interface for the capabilities the polling helpers consume."""

    @abstractmethod
    def load_image(self, path: str | os.PathLike[str]) -> Any:
        """Load an image from disk into the engine's matchable form.

        Args:
            path: Image file path

        Returns:
            Engine-native image handle

        Raises:
            OSError: If the path cannot be read
        """
        pass

    @abstractmethod
    def capture_region(self) -> IRegionHandle:
        """Capture the screen.

        Returns:
            A region handle the caller must dispose
        """
        pass

    def template_match(
        self, image: Any, region: Region, threshold: float | None = None
    ) -> TemplateMatchDescriptor:
        """Build a template match descriptor."""
        return TemplateMatchDescriptor(image=image, region=region, threshold=threshold)

    def ocr(self, region: Region) -> OcrDescriptor:
        """Build an OCR descriptor."""
        return OcrDescriptor(region=region)
