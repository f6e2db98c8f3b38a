from enum import Enum


class EnrollmentStatus(str, Enum):
    pending = "Pending"
    under_review = "Under Review"
    enrolled = "Enrolled"
    temporary_enrolled = "Temporary Enrolled"
    rejected = "Rejected"


class EnrollmentType(str, Enum):
    new = "New"
    transferee = "Transferee"
    returnee = "Returnee"
    continuing = "Continuing"
    regular = "Regular"


class Semester(str, Enum):
    first = "1st"
    second = "2nd"


class DocumentType(str, Enum):
    birth_cert = "birth_cert"
    form137 = "form137"
    good_moral = "good_moral"
    report_card = "report_card"
    picture = "picture"
    transcript_records = "transcript_records"
    honorable_dismissal = "honorable_dismissal"


class VerificationAction(str, Enum):
    verified = "verified"
    unverified = "unverified"


class WindowState(str, Enum):
    open = "open"
    closed = "closed"


# Statuses whose transition stores a reason; every other status clears it
REASON_STATUSES = {EnrollmentStatus.rejected, EnrollmentStatus.temporary_enrolled}

# Statuses that (re)provision the student account password
ACCOUNT_GRANTING_STATUSES = {EnrollmentStatus.enrolled, EnrollmentStatus.temporary_enrolled}

# Nominal pipeline; anything else is treated as an administrative override
ALLOWED_TRANSITIONS = {
    EnrollmentStatus.pending: {EnrollmentStatus.under_review, EnrollmentStatus.rejected},
    EnrollmentStatus.under_review: {
        EnrollmentStatus.enrolled,
        EnrollmentStatus.temporary_enrolled,
        EnrollmentStatus.rejected,
    },
    EnrollmentStatus.temporary_enrolled: {EnrollmentStatus.enrolled, EnrollmentStatus.rejected},
    EnrollmentStatus.enrolled: set(),
    EnrollmentStatus.rejected: set(),
}

DOCUMENT_LABELS = {
    DocumentType.birth_cert: "PSA Birth Certificate",
    DocumentType.form137: "Form 137",
    DocumentType.good_moral: "Certificate of Good Moral Character",
    DocumentType.report_card: "Report Card (Form 138)",
    DocumentType.picture: "2x2 Picture",
    DocumentType.transcript_records: "Transcript of Records",
    DocumentType.honorable_dismissal: "Honorable Dismissal",
}
