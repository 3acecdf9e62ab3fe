"""TimeWrapper - the time source behind every polling loop.

Polling loops read elapsed time and sleep through this wrapper instead of
calling the ``time`` module directly, so tests can substitute
``uipoll.mock.MockTime`` and run the loops against a virtual clock.
"""

import time


class TimeWrapper:
    """Real time source.

    Example:
        wrapper = TimeWrapper()
        start = wrapper.now()
        wrapper.wait(0.5)
        elapsed = wrapper.now() - start  # about 0.5
    """

    def now(self) -> float:
        """Monotonic timestamp in seconds."""
        return time.monotonic()

    def wait(self, seconds: float) -> None:
        """Wait for specified duration.

        Args:
            seconds: Duration to wait in seconds
        """
        if seconds > 0:
            time.sleep(seconds)
