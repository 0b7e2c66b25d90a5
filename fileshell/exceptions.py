"""
Custom exceptions for the application.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class FileRepositoryError(BaseAppError):
    """Exception raised for file repository errors."""

    pass


class UsageError(FileRepositoryError):
    """Raised when a command receives the wrong arguments."""

    pass


class NotFoundError(FileRepositoryError):
    """Raised when a resolved path does not exist."""

    pass


class WrongTypeError(FileRepositoryError):
    """Raised when a path exists but is the wrong kind of entry."""

    pass


class AlreadyExistsError(FileRepositoryError):
    """Raised when a target exists and may not be replaced."""

    pass


class NoParentError(FileRepositoryError):
    """Raised when resolving '..' from a filesystem root."""

    pass


class OperationFailedError(FileRepositoryError):
    """Raised when the underlying filesystem primitive fails."""

    pass
