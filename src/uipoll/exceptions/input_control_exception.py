"""Input control exception.

Exception thrown when input control operations fail.
"""

from .uipoll_runtime_exception import UipollRuntimeException


class InputControlError(UipollRuntimeException):
    """Exception thrown when input control operations fail."""

    def __init__(
        self,
        message: str = "Input control failed",
        cause: Exception | None = None,
        operation: str | None = None,
    ):
        """Initialize input control exception.

        Args:
            message: Error message
            cause: Underlying exception that caused this error
            operation: Operation that failed (e.g., 'mouse_click')
        """
        super().__init__(message, cause)
        self.operation = operation
