"""Custom exception classes for minigrep.

Every failure the tool reports derives from ``MinigrepError``. Each exception
carries a human-readable message, an error code derived from its class name,
structured details and the process exit code the command line should terminate with.
"""

from typing import Any


class MinigrepError(Exception):
    """Base exception for all minigrep operations."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        exit_code: int = 1,
    ):
        """Initialize minigrep exception.

        Args:
            message: Human-readable error message
            details: Additional context and error details
            exit_code: Process exit status to terminate with (default: 1)
        """
        super().__init__(message)
        self.message = message
        self.error_code = self._get_default_error_code()
        self.details = details or {}
        self.exit_code = exit_code

    def _get_default_error_code(self) -> str:
        """Generate default error code from class name."""
        class_name = self.__class__.__name__
        error_code = ""
        for i, char in enumerate(class_name):
            if char.isupper() and i > 0:
                error_code += "_"
            error_code += char.lower()
        return error_code


class ValidationError(MinigrepError):
    """Base class for invalid or incomplete command line input."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        """Initialize validation error.

        Args:
            message: Human-readable error message
            field: Name of the configuration field that failed validation
            details: Additional validation context
        """
        error_details = details or {}
        if field:
            error_details["field"] = field

        super().__init__(
            message=message,
            details=error_details,
            exit_code=2,
        )


class MissingArgumentError(ValidationError):
    """Raised when a required positional argument was not supplied."""

    def __init__(self, field: str):
        """Initialize missing argument error.

        Args:
            field: Name of the absent configuration field
        """
        message = f"Missing required argument: {field}"
        super().__init__(message=message, field=field)
        self.field = field


class InvalidArgumentError(ValidationError):
    """Raised for unknown options or surplus arguments."""

    def __init__(self, reason: str):
        message = f"Invalid arguments: {reason}"
        super().__init__(message=message, details={"reason": reason})


class FileReadError(MinigrepError):
    """Raised when the target file cannot be read as text."""

    def __init__(self, path: str, cause: BaseException):
        """Initialize file read error.

        Args:
            path: The file that could not be read
            cause: The underlying OS or decoding error
        """
        message = f"Failed to read file {path}: {cause}"
        super().__init__(
            message=message,
            details={
                "path": path,
                "operation": "read",
                "cause": type(cause).__name__,
            },
            exit_code=1,
        )
        self.path = path
        self.cause = cause


class OutputWriteError(MinigrepError):
    """Raised when matched lines cannot be written to the output stream."""

    def __init__(self, cause: BaseException):
        """Initialize output write error.

        Args:
            cause: The underlying encoding or pipe error
        """
        message = f"Failed to write matches: {cause}"
        super().__init__(
            message=message,
            details={"operation": "write", "cause": type(cause).__name__},
            exit_code=1,
        )
        self.cause = cause


class ConfigurationError(MinigrepError):
    """Raised when an environment setting has an unusable value."""

    def __init__(self, setting: str, reason: str):
        """Initialize configuration error.

        Args:
            setting: The configuration setting that is invalid
            reason: Explanation of the configuration issue
        """
        message = f"Configuration error for '{setting}': {reason}"
        super().__init__(
            message=message,
            details={"setting": setting, "reason": reason},
            exit_code=2,
        )
