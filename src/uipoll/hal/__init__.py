"""Hardware Abstraction Layer for uipoll.

Screen capture, template matching, OCR and mouse input behind small
interfaces, with backends selected by ``HALConfig``.
"""

from .config import HALConfig, get_config, reset_config, set_config
from .factory import HALFactory

__all__ = ["HALConfig", "HALFactory", "get_config", "set_config", "reset_config"]
