"""
Exception hierarchy for the feedback session service.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class FeedbackServiceException(Exception):
    """Base exception for all feedback session service errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return the human-readable message."""
        return self.message


class EntityAlreadyExistsError(FeedbackServiceException):
    """Raised when an entity with the same identity already exists."""

    pass


class InvalidParametersError(FeedbackServiceException):
    """Raised when entity attributes violate domain rules."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize invalid parameters error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class EntityDoesNotExistError(FeedbackServiceException):
    """Raised when a required entity cannot be found."""

    def __init__(
        self,
        entity: str,
        identifier: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize not found error.

        Args:
            entity: Entity kind (e.g. "Feedback session")
            identifier: Human-readable identity of the missing entity
            details: Additional context
        """
        details = details or {}
        details["entity"] = entity
        super().__init__(f"{entity} not found: {identifier}", details)


class UnauthorizedAccessError(FeedbackServiceException):
    """Raised when the caller may not perform the requested action."""

    pass


class InvalidHttpRequestBodyError(FeedbackServiceException):
    """Raised when client-supplied data cannot be accepted (HTTP 400)."""

    pass


class QuestionCopyError(InvalidHttpRequestBodyError):
    """
    Raised when copying questions into a new session stops part-way.

    Questions copied before the failure remain persisted; ``report`` lists
    the outcome of every attempted question.
    """

    def __init__(self, message: str, report: Any) -> None:
        """
        Initialize question copy error.

        Args:
            message: Message of the underlying failure
            report: QuestionCopyReport describing the attempted copies
        """
        self.report = report
        super().__init__(
            message,
            {
                "copied_question_numbers": report.copied_question_numbers,
                "failed_question_number": report.failed_question_number,
            },
        )
