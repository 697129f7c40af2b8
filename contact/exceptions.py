"""
Errors surfaced by the contact endpoint.

Each exception carries the HTTP status and the public message returned to the
browser. The underlying cause of a processing failure is logged, never sent.
"""

from typing import Any, Dict, Optional

REQUIRED_FIELDS_MESSAGE = "Name, email, and message are required."
PROCESSING_FAILED_MESSAGE = "Failed to send message. Please try again later."
SUCCESS_MESSAGE = "Message sent successfully! Thank you."


class ContactError(Exception):
    """Base class for contact submission errors."""

    status_code = 500

    def __init__(self, message: str, extra_data: Optional[Dict[str, Any]] = None):
        self.message = message
        self.extra_data = extra_data or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        result = {"error": self.message}
        if self.extra_data:
            result.update(self.extra_data)
        return result


class SubmissionValidationError(ContactError):
    """A required field is missing or empty (400 Bad Request)."""

    status_code = 400

    def __init__(self, message: str = REQUIRED_FIELDS_MESSAGE):
        super().__init__(message)


class SubmissionProcessingError(ContactError):
    """Persisting the submission or sending one of its emails failed (500)."""

    status_code = 500

    def __init__(
        self,
        message: str = PROCESSING_FAILED_MESSAGE,
        extra_data: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, extra_data)
