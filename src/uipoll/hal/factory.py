"""HAL Factory for creating implementation instances."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Any

from .config import HALConfig, get_config
from .interfaces import IMouseController, IOCREngine, IPatternMatcher, IScreenCapture

if TYPE_CHECKING:
    from ..config import PollerSettings
    from ..engine import HALRecognitionEngine


class HALFactory:
    """Factory for creating HAL implementation instances.

    Backends are imported on first use and cached per backend name.
    """

    _instances: dict[str, Any] = {}
    _lock = threading.Lock()

    @classmethod
    def get_screen_capture(cls, config: HALConfig | None = None) -> IScreenCapture:
        """Get screen capture implementation.

        Args:
            config: Optional configuration override

        Returns:
            IScreenCapture implementation

        Raises:
            ValueError: If backend is not supported
        """
        config = config or get_config()
        cache_key = f"screen_capture_{config.capture_backend}_{config.monitor}"

        with cls._lock:
            if cache_key not in cls._instances:
                backend = config.capture_backend.lower()

                if backend == "mss":
                    from .implementations.mss_capture import MSSScreenCapture

                    cls._instances[cache_key] = MSSScreenCapture(config)
                else:
                    raise ValueError(f"Unsupported screen capture backend: {backend}")

            instance: IScreenCapture = cls._instances[cache_key]
        return instance

    @classmethod
    def get_pattern_matcher(cls, config: HALConfig | None = None) -> IPatternMatcher:
        """Get pattern matcher implementation.

        Args:
            config: Optional configuration override

        Returns:
            IPatternMatcher implementation
        """
        config = config or get_config()
        cache_key = f"pattern_matcher_{config.matcher_backend}"

        with cls._lock:
            if cache_key not in cls._instances:
                backend = config.matcher_backend.lower()

                if backend == "opencv":
                    from .implementations.opencv_matcher import OpenCVMatcher

                    cls._instances[cache_key] = OpenCVMatcher(config)
                else:
                    raise ValueError(f"Unsupported pattern matcher backend: {backend}")

            instance: IPatternMatcher = cls._instances[cache_key]
        return instance

    @classmethod
    def get_ocr_engine(cls, config: HALConfig | None = None) -> IOCREngine:
        """Get OCR engine implementation.

        Args:
            config: Optional configuration override

        Returns:
            IOCREngine implementation
        """
        config = config or get_config()
        cache_key = f"ocr_engine_{config.ocr_backend}"

        with cls._lock:
            if cache_key not in cls._instances:
                backend = config.ocr_backend.lower()

                if backend == "easyocr":
                    from .implementations.easyocr_engine import EasyOCREngine

                    cls._instances[cache_key] = EasyOCREngine(config)
                else:
                    raise ValueError(f"Unsupported OCR backend: {backend}")

            instance: IOCREngine = cls._instances[cache_key]
        return instance

    @classmethod
    def get_mouse_controller(cls, config: HALConfig | None = None) -> IMouseController:
        """Get mouse controller implementation.

        Args:
            config: Optional configuration override

        Returns:
            IMouseController implementation
        """
        config = config or get_config()
        cache_key = f"mouse_{config.input_backend}"

        with cls._lock:
            if cache_key not in cls._instances:
                backend = config.input_backend.lower()

                if backend == "pyautogui":
                    from .implementations.pyautogui_mouse import PyAutoGUIMouseOperations

                    cls._instances[cache_key] = PyAutoGUIMouseOperations()
                else:
                    raise ValueError(f"Unsupported input backend: {backend}")

            instance: IMouseController = cls._instances[cache_key]
        return instance

    @classmethod
    def create_engine(
        cls, settings: PollerSettings | None = None, config: HALConfig | None = None
    ) -> HALRecognitionEngine:
        """Assemble the default recognition engine from the configured backends.

        Args:
            settings: Poller settings supplying threshold and OCR options
            config: Optional HAL configuration override

        Returns:
            HALRecognitionEngine instance
        """
        from ..config import get_settings
        from ..engine import HALRecognitionEngine

        settings = settings or get_settings()
        return HALRecognitionEngine(
            capture=cls.get_screen_capture(config),
            matcher=cls.get_pattern_matcher(config),
            ocr_engine=cls.get_ocr_engine(config),
            mouse=cls.get_mouse_controller(config),
            threshold=settings.template_threshold,
            languages=settings.ocr_languages,
            min_confidence=settings.ocr_min_confidence,
        )

    @classmethod
    def clear_cache(cls) -> None:
        """Drop all cached backend instances."""
        with cls._lock:
            cls._instances.clear()
