# shs_enrollment/services/records.py
"""Read-side queries over the enrollment record store."""
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from shs_enrollment.exceptions import NotFoundError
from shs_enrollment.models.enums import EnrollmentStatus
from shs_enrollment.models.student import Student
from shs_enrollment.models.enrollment import EnrollmentPeriod
from shs_enrollment.models.account import AccountCredential

logger = logging.getLogger(__name__)


def get_student(db: Session, lrn: str) -> Student:
    student = db.query(Student).filter(Student.lrn == lrn).first()
    if not student:
        raise NotFoundError(f"Student with LRN {lrn} not found")
    return student


def list_students(db: Session, statuses: Optional[List[EnrollmentStatus]] = None) -> List[Student]:
    query = db.query(Student)
    if statuses:
        query = query.filter(Student.enrollment_status.in_([s.value for s in statuses]))
    return query.order_by(Student.created_at.desc(), Student.lrn).all()


def get_current_period(db: Session, lrn: str, school_year: str) -> Optional[EnrollmentPeriod]:
    """Most recently created period row of ``lrn`` for ``school_year``."""
    return (
        db.query(EnrollmentPeriod)
        .filter(EnrollmentPeriod.lrn == lrn, EnrollmentPeriod.school_year == school_year)
        .order_by(EnrollmentPeriod.created_at.desc(), EnrollmentPeriod.id.desc())
        .first()
    )


def get_student_record(db: Session, lrn: str, school_year: str) -> dict:
    """Everything a certificate renderer needs for one student."""
    student = get_student(db, lrn)
    return {
        "student": student,
        "guardian": student.guardian,
        "documents": student.documents,
        "current_period": get_current_period(db, lrn, school_year),
    }


def get_account_status(db: Session, lrn: str) -> dict:
    account = db.query(AccountCredential).filter(AccountCredential.lrn == lrn).first()
    return {
        "lrn": lrn,
        "account_exists": account is not None,
        "has_password": bool(account and account.has_password),
        "tracking_code": account.track_code if account else None,
    }
