"""Image targets: a path to load, or a descriptor built beforehand."""

import os
from dataclasses import dataclass
from typing import Any

from ..exceptions import InvalidArgumentError


@dataclass(frozen=True)
class ByPath:
    """Reference image stored on disk."""

    path: str | os.PathLike[str]


@dataclass(frozen=True)
class ByDescriptor:
    """Pre-built recognition descriptor, passed to the engine as is."""

    descriptor: Any


MatchTarget = ByPath | ByDescriptor


def as_target(value: Any) -> MatchTarget:
    """Tag a caller-supplied target.

    Strings and path-like objects become ``ByPath``; any other object is
    treated as an engine descriptor.

    Raises:
        InvalidArgumentError: If ``value`` is None
    """
    if isinstance(value, (ByPath, ByDescriptor)):
        return value
    if value is None:
        raise InvalidArgumentError("Image target must not be None")
    if isinstance(value, (str, os.PathLike)):
        return ByPath(value)
    return ByDescriptor(value)
