"""Screen capture exception.

Exception thrown when screen capture operations fail.
"""

from .uipoll_runtime_exception import UipollRuntimeException


class ScreenCaptureException(UipollRuntimeException):
    """Exception thrown when screen capture operations fail."""

    def __init__(self, message: str = "Screen capture failed", cause: Exception | None = None):
        """Initialize screen capture exception.

        Args:
            message: Error message
            cause: Underlying exception that caused this error
        """
        super().__init__(message, cause)
