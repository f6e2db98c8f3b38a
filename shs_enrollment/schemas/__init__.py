# shs_enrollment/schemas/__init__.py
from .applicant import (
    ApplicantCreate,
    IntakeResponse,
    StudentSummary,
    GuardianResponse,
    AccountStatusResponse,
)
from .document import (
    VerificationRequest,
    DocumentFlags,
    VerificationResponse,
    VerificationStatusResponse,
    VerificationLogEntry,
    VerificationLogResponse,
    ReminderRequest,
)
from .enrollment import (
    StatusUpdateRequest,
    StatusUpdateResponse,
    EnrollmentPeriodResponse,
    SemesterAdvanceRequest,
    SemesterAdvanceResponse,
    StudentRecordResponse,
    EnrollmentWindowResponse,
    WindowStateUpdate,
    WindowDatesUpdate,
)

__all__ = [
    "ApplicantCreate",
    "IntakeResponse",
    "StudentSummary",
    "GuardianResponse",
    "AccountStatusResponse",
    "VerificationRequest",
    "DocumentFlags",
    "VerificationResponse",
    "VerificationStatusResponse",
    "VerificationLogEntry",
    "VerificationLogResponse",
    "ReminderRequest",
    "StatusUpdateRequest",
    "StatusUpdateResponse",
    "EnrollmentPeriodResponse",
    "SemesterAdvanceRequest",
    "SemesterAdvanceResponse",
    "StudentRecordResponse",
    "EnrollmentWindowResponse",
    "WindowStateUpdate",
    "WindowDatesUpdate",
]
