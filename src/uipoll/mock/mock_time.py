"""MockTime - simulates time operations with a virtual clock.

Waits return instantly and advance the virtual clock by the requested
duration, so polling loops run deterministically and fast.
"""

import logging

from ..wrappers.time_wrapper import TimeWrapper

logger = logging.getLogger(__name__)


class MockTime(TimeWrapper):
    """Mock time implementation with virtual clock.

    Example:
        clock = MockTime()
        clock.wait(5.0)  # Returns instantly
        assert clock.now() == 5.0

    Attributes:
        virtual_time: Current virtual time in seconds
        waits: Every duration passed to ``wait``, in call order
    """

    def __init__(self, start: float = 0.0) -> None:
        self.virtual_time = start
        self.waits: list[float] = []

    def now(self) -> float:
        return self.virtual_time

    def wait(self, seconds: float) -> None:
        logger.debug(f"MockTime.wait: {seconds}s")
        self.waits.append(seconds)
        self.advance(seconds)

    def advance(self, seconds: float) -> None:
        """Move the virtual clock forward without recording a wait."""
        if seconds > 0:
            self.virtual_time += seconds
