"""Domain exceptions for Podium.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class PodiumException(Exception):
    """Base exception for all Podium application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
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
        """Serialize for JSON error responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(PodiumException):
    """Raised when input validation fails (e.g. malformed recording URL)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(PodiumException):
    """Raised when an operation requires a principal and none was supplied."""

    def __init__(self, message: str = "Authentication required") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class AuthorizationException(PodiumException):
    """Raised when the principal lacks the role or ownership for the operation."""

    def __init__(
        self,
        resource: str | None = None,
        action: str | None = None,
        message: str = "Permission denied",
    ) -> None:
        """Initialize with optional resource, action, and message.

        Args:
            resource: Optional resource type (e.g. 'presentation').
            action: Optional action that was attempted (e.g. 'approve').
            message: Human-readable message; default used when resource/action omitted.
        """
        if resource and action:
            message = f"Permission denied: {action} on {resource}"
        details: dict[str, Any] = {}
        if resource:
            details["resource"] = resource
        if action:
            details["action"] = action
        super().__init__(message, "PERMISSION_DENIED", details)


class ResourceNotFoundException(PodiumException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'event', 'presentation', 'vote').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class InvalidStateException(PodiumException):
    """Raised when an operation is not legal in the resource's current status."""

    def __init__(
        self,
        message: str,
        current_status: str | None = None,
        error_code: str = "INVALID_STATE",
        **details_extra: Any,
    ) -> None:
        details: dict[str, Any] = dict(details_extra)
        if current_status is not None:
            details["current_status"] = current_status
        super().__init__(message, error_code, details)


class PresentationNotVotableException(InvalidStateException):
    """Raised when voting on a presentation that is no longer pending."""

    def __init__(self, presentation_id: str, current_status: str) -> None:
        super().__init__(
            "Cannot vote on non-pending presentations",
            current_status=current_status,
            error_code="NOT_VOTABLE",
            presentation_id=presentation_id,
        )


class VotingDeadlinePassedException(PodiumException):
    """Raised when a vote is cast or retracted after the event's voting deadline."""

    def __init__(self, event_id: str, voting_deadline: str) -> None:
        super().__init__(
            "Voting deadline has passed",
            "DEADLINE_PASSED",
            {"event_id": event_id, "voting_deadline": voting_deadline},
        )


class NotEligibleException(PodiumException):
    """Raised when a non-attendee tries to vote on an event's presentation."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            "You must be an attendee of this event to vote",
            "NOT_ELIGIBLE",
            {"event_id": event_id},
        )


class AlreadyRegisteredException(PodiumException):
    """Raised when registering attendance that already exists."""

    def __init__(self, event_id: str, user_id: str) -> None:
        super().__init__(
            "Already registered for this event",
            "ALREADY_REGISTERED",
            {"event_id": event_id, "user_id": user_id},
        )


class NotRegisteredException(PodiumException):
    """Raised when unregistering attendance that does not exist."""

    def __init__(self, event_id: str, user_id: str) -> None:
        super().__init__(
            "Not registered for this event",
            "NOT_REGISTERED",
            {"event_id": event_id, "user_id": user_id},
        )
