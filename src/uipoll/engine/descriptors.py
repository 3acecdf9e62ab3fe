"""Recognition descriptors: what to look for and where."""

from dataclasses import dataclass
from typing import Any

from ..model import Region


@dataclass(frozen=True)
class TemplateMatchDescriptor:
    """Locate ``image`` inside ``region``.

    ``image`` is whatever the engine's ``load_image`` returned. A
    ``threshold`` of None lets the engine apply its own default.
    """

    image: Any
    region: Region
    threshold: float | None = None


@dataclass(frozen=True)
class OcrDescriptor:
    """Read every text fragment inside ``region``."""

    region: Region


Descriptor = TemplateMatchDescriptor | OcrDescriptor
