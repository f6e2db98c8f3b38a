# shs_enrollment/services/status_service.py
"""
Enrollment status transitions.

Storage rules are re-applied identically on every call: the reason is kept
only for Rejected / Temporary Enrolled, and Enrolled / Temporary Enrolled
always re-hash the supplied password over the stored one. The status email
is sent after commit and may be sent again on a retried call; callers that
need exactly one email must serialise transitions per LRN themselves.
"""
import logging
from typing import NamedTuple, Optional

from sqlalchemy.orm import Session

from shs_enrollment.exceptions import ValidationError, MissingCredentialError
from shs_enrollment.models.enums import (
    EnrollmentStatus,
    REASON_STATUSES,
    ACCOUNT_GRANTING_STATUSES,
    ALLOWED_TRANSITIONS,
)
from shs_enrollment.models.account import AccountCredential
from shs_enrollment.services.email_service import NotificationDispatcher
from shs_enrollment.services.notifications import notice_for_status, notify
from shs_enrollment.services.records import get_student, get_current_period
from shs_enrollment.utils.credentials import generate_tracking_code
from shs_enrollment.utils.hash import hash_password
from shs_enrollment.utils.school_year import SchoolYearResolver

logger = logging.getLogger(__name__)


class TransitionResult(NamedTuple):
    lrn: str
    previous_status: str
    status: EnrollmentStatus
    notification_sent: bool


def parse_status(value) -> EnrollmentStatus:
    try:
        return EnrollmentStatus(value)
    except ValueError:
        valid = ", ".join(s.value for s in EnrollmentStatus)
        raise ValidationError(f"Unknown status '{value}'. Valid statuses: {valid}")


def is_nominal_transition(previous: str, new_status: EnrollmentStatus) -> bool:
    try:
        previous_status = EnrollmentStatus(previous)
    except ValueError:
        return False
    return previous_status == new_status or new_status in ALLOWED_TRANSITIONS[previous_status]


async def transition(
    db: Session,
    lrn: str,
    new_status,
    reason: Optional[str] = None,
    plain_password: Optional[str] = None,
    *,
    dispatcher: NotificationDispatcher,
    school_year_resolver: SchoolYearResolver,
) -> TransitionResult:
    new_status = parse_status(new_status)
    reason = reason.strip() if reason and reason.strip() else None

    if new_status in REASON_STATUSES and not reason:
        raise ValidationError(f"A reason is required to set status '{new_status.value}'")

    if new_status in ACCOUNT_GRANTING_STATUSES and not plain_password:
        raise MissingCredentialError(f"Plain password is required to set status '{new_status.value}'")

    student = get_student(db, lrn)
    previous_status = student.enrollment_status

    if not is_nominal_transition(previous_status, new_status):
        logger.warning(f"Administrative override for {lrn}: '{previous_status}' → '{new_status.value}'")

    try:
        student.enrollment_status = new_status.value
        student.reason = reason if new_status in REASON_STATUSES else None

        account = student.account
        if new_status in ACCOUNT_GRANTING_STATUSES:
            if account is None:
                account = AccountCredential(lrn=lrn, track_code=generate_tracking_code(lrn))
                db.add(account)
                logger.warning(f"No account row for {lrn}; issued tracking code {account.track_code}")
            account.password_hash = hash_password(plain_password)

        period = get_current_period(db, lrn, school_year_resolver.resolve())
        if period is not None:
            period.status = new_status.value
            period.rejection_reason = reason if new_status == EnrollmentStatus.rejected else None

        db.commit()
    except Exception:
        db.rollback()
        logger.error(f"❌ Status update for {lrn} rolled back")
        raise

    logger.info(f"✅ Student {lrn} updated '{previous_status}' → '{new_status.value}'")

    tracking_code = account.track_code if account is not None else "N/A"
    notice = notice_for_status(
        new_status,
        recipient_name=student.full_name,
        tracking_code=tracking_code,
        password=plain_password,
        reason=reason,
    )
    sent = False
    if notice is not None:
        sent = await notify(dispatcher, student.email, notice)

    return TransitionResult(
        lrn=lrn,
        previous_status=previous_status,
        status=new_status,
        notification_sent=sent,
    )
