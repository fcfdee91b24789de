"""Application-level exceptions."""


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class NoResultError(AppError):
    """Raised when saving a calculation that produced no result."""

    def __init__(self, message: str = "Calculation has no result to save"):
        super().__init__(message, code="NO_RESULT")


class SnapshotFormatError(AppError):
    """Raised when a persisted history snapshot cannot be decoded."""

    def __init__(self, message: str):
        super().__init__(message, code="SNAPSHOT_FORMAT")
