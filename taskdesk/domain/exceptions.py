"""Domain exceptions for taskdesk.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any

ISO_8601_HINT = "Use ISO 8601 format like 2025-01-01T12:00:00Z"


class TaskDeskException(Exception):
    """Base exception for all taskdesk errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context echoed back to the caller.
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error body: message under "error" plus details."""
        return {"error": self.message, **self.details}


class ValidationException(TaskDeskException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(
        self,
        message: str,
        error_code: str = "VALIDATION_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, error_code, details)


class MissingFieldsException(ValidationException):
    """Raised when one or more required request fields are absent or empty."""

    def __init__(self, required: list[str], missing: list[str]) -> None:
        """Initialize with the full required set and the fields that were missing.

        Args:
            required: All required field names, in request order.
            missing: The subset of required that was absent or empty.
        """
        super().__init__(
            "Missing required fields",
            "MISSING_FIELDS",
            {"required": list(required), "missing": list(missing)},
        )


class InvalidTaskTypeException(ValidationException):
    """Raised when task_type is not one of the allowed task types."""

    def __init__(self, provided: str, allowed: list[str]) -> None:
        super().__init__(
            f"Invalid task_type. Must be one of: {', '.join(allowed)}",
            "INVALID_TYPE",
            {"allowed": list(allowed), "provided": provided},
        )


class InvalidDueDateException(ValidationException):
    """Raised when due_at cannot be parsed as a timestamp."""

    def __init__(self, provided: str) -> None:
        super().__init__(
            "Invalid date format for due_at",
            "INVALID_DATE",
            {"hint": ISO_8601_HINT, "provided": provided},
        )


class PastDueDateException(ValidationException):
    """Raised when due_at is not strictly later than the server time."""

    def __init__(self, provided: str, server_time: str) -> None:
        """Initialize with the submitted value and the reference time used.

        Args:
            provided: due_at exactly as submitted.
            server_time: ISO-8601 UTC server time the value was compared against.
        """
        super().__init__(
            "due_at must be a future timestamp",
            "PAST_DATE",
            {"provided": provided, "server_time": server_time},
        )


class AuthenticationException(TaskDeskException):
    """Raised when the static bearer key is missing or wrong."""

    def __init__(self, message: str = "Invalid or missing API key") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class ResourceNotFoundException(TaskDeskException):
    """Raised when a requested resource is not found."""

    def __init__(
        self,
        resource_type: str,
        resource_id: str,
        *,
        message: str | None = None,
        error_code: str = "RESOURCE_NOT_FOUND",
        id_field: str = "resource_id",
    ) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'application', 'task').
            resource_id: The ID that was not found.
            message: Optional message; defaults to "<Type> not found".
            error_code: Machine-readable code.
            id_field: Key under which resource_id is echoed in details.
        """
        self.resource_type = resource_type
        self.resource_id = resource_id
        super().__init__(
            message or f"{resource_type.capitalize()} not found",
            error_code,
            {id_field: resource_id},
        )


class ApplicationNotFoundException(ResourceNotFoundException):
    """Raised when a task references an application that does not exist."""

    def __init__(self, application_id: str) -> None:
        super().__init__(
            "application",
            application_id,
            error_code="APPLICATION_MISSING",
            id_field="application_id",
        )


class TaskNotFoundException(ResourceNotFoundException):
    """Raised when completing or fetching a task id that does not exist."""

    def __init__(self, task_id: str) -> None:
        super().__init__(
            "task",
            task_id,
            error_code="TASK_NOT_FOUND",
            id_field="task_id",
        )
