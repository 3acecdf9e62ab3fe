"""Polling helpers for template and OCR recognition."""

from .recognition_poller import RecognitionPoller, create_poller
from .targets import ByDescriptor, ByPath, MatchTarget, as_target

__all__ = [
    "RecognitionPoller",
    "create_poller",
    "ByPath",
    "ByDescriptor",
    "MatchTarget",
    "as_target",
]
