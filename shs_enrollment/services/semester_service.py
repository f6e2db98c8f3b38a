# shs_enrollment/services/semester_service.py
import logging
from typing import NamedTuple

from sqlalchemy.orm import Session

from shs_enrollment.exceptions import NotFoundError, ValidationError
from shs_enrollment.models.enums import EnrollmentStatus, Semester, ACCOUNT_GRANTING_STATUSES
from shs_enrollment.models.enrollment import EnrollmentPeriod
from shs_enrollment.services.records import get_student
from shs_enrollment.utils.credentials import generate_password

logger = logging.getLogger(__name__)


class ProgressionResult(NamedTuple):
    period: EnrollmentPeriod
    password: str
    created: bool


def _find_period(db: Session, lrn: str, school_year: str, semester: Semester):
    return (
        db.query(EnrollmentPeriod)
        .filter(
            EnrollmentPeriod.lrn == lrn,
            EnrollmentPeriod.school_year == school_year,
            EnrollmentPeriod.semester == semester.value,
        )
        .order_by(EnrollmentPeriod.created_at.desc(), EnrollmentPeriod.id.desc())
        .first()
    )


def advance_semester(db: Session, lrn: str, school_year: str) -> ProgressionResult:
    """
    Move a continuing student into the 2nd semester of ``school_year``.

    A new period row is inserted so the 1st-semester row stays as history.
    When the 2nd-semester row already exists it is returned unchanged, which
    makes a retried call safe. The 1st-semester record must be Enrolled or
    Temporary Enrolled, otherwise ``ValidationError`` is raised. The
    provisioning password is regenerated and handed back to the caller for
    manual relay; no email is sent.
    """
    first_semester = _find_period(db, lrn, school_year, Semester.first)
    if first_semester is None:
        raise NotFoundError(f"No 1st semester enrollment for LRN {lrn} in {school_year}")

    # Pending, Under Review and Rejected students have no account to carry over
    if first_semester.status not in {s.value for s in ACCOUNT_GRANTING_STATUSES}:
        raise ValidationError(
            f"LRN {lrn} is '{first_semester.status}' for the 1st semester of {school_year}; "
            "only Enrolled or Temporary Enrolled students can advance"
        )

    student = get_student(db, lrn)
    password = generate_password(student.lastname, lrn)

    existing = _find_period(db, lrn, school_year, Semester.second)
    if existing is not None:
        logger.info(f"{lrn} already has a 2nd semester record for {school_year}")
        return ProgressionResult(period=existing, password=password, created=False)

    second_semester = EnrollmentPeriod(
        lrn=lrn,
        school_year=school_year,
        semester=Semester.second.value,
        status=EnrollmentStatus.enrolled.value,
        enrollment_type=first_semester.enrollment_type,
        grade_slip=first_semester.grade_slip,
        rejection_reason=None,
    )

    try:
        db.add(second_semester)
        student.enrollment_status = EnrollmentStatus.enrolled.value
        student.reason = None
        db.commit()
        db.refresh(second_semester)
    except Exception:
        db.rollback()
        raise

    logger.info(f"✅ {lrn} advanced to 2nd semester of {school_year}")
    return ProgressionResult(period=second_semester, password=password, created=True)
