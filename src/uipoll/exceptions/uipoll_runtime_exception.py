"""Uipoll runtime exception.

Base exception for the package.
"""


class UipollRuntimeException(RuntimeError):
    """Base runtime exception for all uipoll exceptions.

    Runtime exceptions let engine faults travel up through the polling
    helpers untouched, so callers handle them once at the point where the
    automation script decides what to do next.
    """

    def __init__(self, message: str | None = None, cause: Exception | None = None):
        """Construct a new runtime exception.

        Args:
            message: The detail message
            cause: The cause of the exception
        """
        if message and cause:
            super().__init__(f"{message}: {cause}")
            self.__cause__ = cause
        elif message:
            super().__init__(message)
        elif cause:
            super().__init__(str(cause))
            self.__cause__ = cause
        else:
            super().__init__()
