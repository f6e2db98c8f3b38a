"""Error taxonomy of the enrollment core.

Every error carries the HTTP status the API layer answers with. Services
raise these; ``shs_enrollment.main`` converts them into JSON responses.
"""


class EnrollmentError(Exception):
    """Base error for enrollment operations."""

    status_code = 400

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(EnrollmentError):
    """Required input is missing or inconsistent."""


class DuplicateError(EnrollmentError):
    """LRN or email already belongs to another applicant."""

    status_code = 409


class NotFoundError(EnrollmentError):
    """Unknown LRN or missing record."""

    status_code = 404


class InvalidDocumentTypeError(EnrollmentError):
    """Document type outside the recognised set."""


class MissingCredentialError(EnrollmentError):
    """An account-granting transition was requested without a password."""


class InvalidInputError(EnrollmentError):
    """Credential generation received malformed input."""
