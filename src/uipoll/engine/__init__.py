"""Recognition engine capability interface.

The polling helpers talk to screen capture, template matching, OCR and
input injection only through ``IRecognitionEngine``. ``HALRecognitionEngine``
is the default implementation built on the HAL backends; tests and hosts
can supply their own.
"""

from .descriptors import Descriptor, OcrDescriptor, TemplateMatchDescriptor
from .hal_engine import HALRecognitionEngine, HALRegionHandle
from .recognition_engine import IRecognitionEngine, IRegionHandle
from .results import MatchResult

__all__ = [
    "IRecognitionEngine",
    "IRegionHandle",
    "HALRecognitionEngine",
    "HALRegionHandle",
    "Descriptor",
    "TemplateMatchDescriptor",
    "OcrDescriptor",
    "MatchResult",
]
