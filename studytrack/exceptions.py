"""Custom exception hierarchy for studytrack infrastructure failures."""


class StudyTrackError(Exception):
    """Base exception for all studytrack errors outside the domain layer."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class PersistenceError(StudyTrackError):
    """
    A task store call failed (network error or server-side rejection).

    Raised by task store adapters and propagated unchanged through the
    planning service; the in-memory plan collection is left untouched.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 502,
        *,
        operation: str | None = None,
    ) -> None:
        """Initialize with message, upstream status code and the failed operation."""
        self.operation = operation
        super().__init__(message, status_code=status_code)
