"""uipoll - polling screen-recognition helpers for UI automation.

Template image matching and OCR text matching with retry-until-timeout
loops, optional click-on-find, and act-then-check waits.

Usage:
    from uipoll import create_poller

    poller = create_poller()
    poller.find_image_and_click("assets/confirm.png")
    poller.wait_until_text_disappear("loading", action=lambda: None)
"""

from .config import PollerSettings, get_settings
from .engine import IRecognitionEngine, IRegionHandle, MatchResult
from .exceptions import ConfigurationError, InvalidArgumentError, UipollRuntimeException
from .find import ByDescriptor, ByPath, RecognitionPoller, create_poller
from .model import Region

__version__ = "0.1.0"

__all__ = [
    "RecognitionPoller",
    "create_poller",
    "Region",
    "ByPath",
    "ByDescriptor",
    "MatchResult",
    "IRecognitionEngine",
    "IRegionHandle",
    "PollerSettings",
    "get_settings",
    "UipollRuntimeException",
    "InvalidArgumentError",
    "ConfigurationError",
]
