# shs_enrollment/services/intake_service.py
"""
Intake of a brand-new applicant.

The student row, the empty document set, the guardian row, the account row
(tracking code only) and the first enrollment period row are written in one
transaction. The confirmation email goes out only after commit and its
failure never undoes the intake.
"""
import logging
from typing import NamedTuple, Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from shs_enrollment.exceptions import ValidationError, DuplicateError
from shs_enrollment.models.enums import EnrollmentStatus, Semester
from shs_enrollment.models.student import Student, Guardian
from shs_enrollment.models.document import DocumentSet
from shs_enrollment.models.enrollment import EnrollmentPeriod
from shs_enrollment.models.account import AccountCredential
from shs_enrollment.schemas.applicant import ApplicantCreate
from shs_enrollment.services.email_service import NotificationDispatcher
from shs_enrollment.services.notifications import IntakeConfirmation, notify
from shs_enrollment.utils.credentials import generate_tracking_code
from shs_enrollment.utils.school_year import SchoolYearResolver

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("lrn", "lastname", "firstname", "strand", "email")

NOT_AVAILABLE = "N/A"


class IntakeResult(NamedTuple):
    lrn: str
    tracking_code: str
    notification_sent: bool


def _first_present(*values: Optional[str]) -> str:
    for value in values:
        if value and value.strip():
            return value.strip()
    return NOT_AVAILABLE


def validate_required(data: ApplicantCreate) -> None:
    missing = [name for name in REQUIRED_FIELDS if not (getattr(data, name) or "").strip()]
    if missing:
        raise ValidationError(f"Missing required field(s): {', '.join(missing)}")


def ensure_unique(db: Session, lrn: str, email: str) -> None:
    if db.query(Student).filter(Student.lrn == lrn).first():
        raise DuplicateError(f"LRN {lrn} is already registered")
    if db.query(Student).filter(func.lower(Student.email) == email).first():
        raise DuplicateError(f"Email {email} is already registered")


async def create_applicant(
    db: Session,
    data: ApplicantCreate,
    dispatcher: NotificationDispatcher,
    school_year_resolver: SchoolYearResolver,
) -> IntakeResult:
    validate_required(data)

    lrn = data.lrn.strip()
    email = data.email.strip().lower()
    logger.info(f"Intake started for LRN {lrn}")

    tracking_code = generate_tracking_code(lrn)
    ensure_unique(db, lrn, email)

    school_year = school_year_resolver.resolve()

    student = Student(
        lrn=lrn,
        firstname=data.firstname.strip(),
        middlename=data.middlename,
        lastname=data.lastname.strip(),
        suffix=data.suffix,
        age=data.age,
        sex=data.sex,
        civil_status=data.civil_status,
        nationality=data.nationality,
        birthdate=data.birthdate,
        place_of_birth=data.place_of_birth,
        religion=data.religion,
        cpnumber=data.cpnumber,
        home_add=data.home_add,
        email=email,
        yearlevel=data.yearlevel,
        strand=data.strand.strip(),
        student_type=data.student_type.value,
        enrollment_status=EnrollmentStatus.pending.value,
        reason=None,
    )
    guardian = Guardian(
        lrn=lrn,
        fathers_name=data.fathers_name,
        fathers_contact=data.fathers_contact,
        mothers_name=data.mothers_name,
        mothers_contact=data.mothers_contact,
        guardian_name=_first_present(data.guardian_name, data.fathers_name, data.mothers_name),
        guardian_contact=_first_present(data.guardian_contact, data.fathers_contact, data.mothers_contact),
    )
    period = EnrollmentPeriod(
        lrn=lrn,
        school_year=school_year,
        semester=Semester.first.value,
        status=EnrollmentStatus.pending.value,
        enrollment_type=data.student_type.value,
    )

    try:
        # Parent row first so its key exists before the dependent inserts
        db.add(student)
        db.flush()
        db.add_all([
            DocumentSet(lrn=lrn),
            guardian,
            AccountCredential(lrn=lrn, track_code=tracking_code, password_hash=None),
            period,
        ])
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Intake for LRN {lrn} lost a uniqueness race: {e.orig}")
        raise DuplicateError(f"LRN {lrn} or email {email} is already registered")
    except Exception:
        db.rollback()
        logger.error(f"❌ Intake for LRN {lrn} rolled back")
        raise

    recipient_name = f"{data.firstname.strip()} {data.lastname.strip()}"
    logger.info(f"✅ Applicant {lrn} created for {school_year} with tracking code {tracking_code}")

    sent = await notify(
        dispatcher,
        email,
        IntakeConfirmation(recipient_name=recipient_name, tracking_code=tracking_code),
    )
    return IntakeResult(lrn=lrn, tracking_code=tracking_code, notification_sent=sent)
