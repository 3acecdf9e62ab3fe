"""Exceptions package.

Framework-specific exceptions raised by the polling layer and the default
recognition engine.
"""

from .configuration_exception import ConfigurationError
from .image_processing_exception import ImageProcessingError
from .input_control_exception import InputControlError
from .invalid_argument_exception import InvalidArgumentError
from .screen_capture_exception import ScreenCaptureException
from .uipoll_runtime_exception import UipollRuntimeException

__all__ = [
    "UipollRuntimeException",
    "InvalidArgumentError",
    "ConfigurationError",
    "ScreenCaptureException",
    "ImageProcessingError",
    "InputControlError",
]
