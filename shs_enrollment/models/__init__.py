# shs_enrollment/models/__init__.py

from .student import Student, Guardian
from .document import DocumentSet, VerificationLog
from .enrollment import EnrollmentPeriod, EnrollmentWindow
from .account import AccountCredential

__all__ = [
    "Student",
    "Guardian",
    "DocumentSet",
    "VerificationLog",
    "EnrollmentPeriod",
    "EnrollmentWindow",
    "AccountCredential",
]
