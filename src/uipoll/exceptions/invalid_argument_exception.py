"""Invalid argument exception.

Exception thrown when a polling helper receives malformed input.
"""

from .uipoll_runtime_exception import UipollRuntimeException


class InvalidArgumentError(UipollRuntimeException):
    """Exception thrown for malformed input, such as a bad image path list.

    When the offending value is an element of a sequence, ``index`` holds
    its position.
    """

    def __init__(
        self,
        message: str = "Invalid argument",
        cause: Exception | None = None,
        index: int | None = None,
    ):
        """Initialize invalid argument exception.

        Args:
            message: Error message
            cause: Underlying exception that caused this error
            index: Position of the bad element in a sequence argument (if applicable)
        """
        super().__init__(message, cause)
        self.index = index
