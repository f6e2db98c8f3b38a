# shs_enrollment/routes/enrollees.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from shs_enrollment.auth.dependencies import get_current_admin
from shs_enrollment.database import get_db
from shs_enrollment.models.enums import EnrollmentStatus
from shs_enrollment.schemas.applicant import (
    ApplicantCreate,
    IntakeResponse,
    StudentSummary,
    GuardianResponse,
    AccountStatusResponse,
)
from shs_enrollment.schemas.document import DocumentFlags
from shs_enrollment.schemas.enrollment import (
    EnrollmentPeriodResponse,
    StatusUpdateRequest,
    StatusUpdateResponse,
    StudentRecordResponse,
)
from shs_enrollment.services import records
from shs_enrollment.services.email_service import NotificationDispatcher, get_dispatcher
from shs_enrollment.services.intake_service import create_applicant
from shs_enrollment.services.status_service import transition
from shs_enrollment.utils.school_year import SchoolYearResolver, get_school_year_resolver

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/enrollees",
    tags=["Enrollees"]
)


@router.post("/apply", response_model=IntakeResponse, status_code=201)
async def apply(
    data: ApplicantCreate,
    db: Session = Depends(get_db),
    dispatcher: NotificationDispatcher = Depends(get_dispatcher),
    resolver: SchoolYearResolver = Depends(get_school_year_resolver),
):
    """Public intake of a new applicant"""
    result = await create_applicant(db, data, dispatcher, resolver)
    return IntakeResponse(
        message="Application submitted. Your tracking code has been sent to your email.",
        lrn=result.lrn,
        tracking_code=result.tracking_code,
        notification_sent=result.notification_sent,
    )


@router.get("", response_model=List[StudentSummary])
async def list_enrollees(
    status: Optional[List[EnrollmentStatus]] = Query(None),
    db: Session = Depends(get_db),
    current_admin: dict = Depends(get_current_admin),
):
    """List students, newest first, optionally by enrollment status"""
    return records.list_students(db, status)


@router.get("/{lrn}/record", response_model=StudentRecordResponse)
async def student_record(
    lrn: str,
    db: Session = Depends(get_db),
    resolver: SchoolYearResolver = Depends(get_school_year_resolver),
    current_admin: dict = Depends(get_current_admin),
):
    """Student, guardian, documents and current period for certificate renderers"""
    record = records.get_student_record(db, lrn, resolver.resolve())
    guardian = record["guardian"]
    documents = record["documents"]
    period = record["current_period"]
    return StudentRecordResponse(
        student=StudentSummary.model_validate(record["student"]),
        guardian=GuardianResponse.model_validate(guardian) if guardian else None,
        documents=DocumentFlags.model_validate(documents) if documents else None,
        current_period=EnrollmentPeriodResponse.model_validate(period) if period else None,
    )


@router.post("/update-status", response_model=StatusUpdateResponse)
async def update_status(
    request: StatusUpdateRequest,
    db: Session = Depends(get_db),
    dispatcher: NotificationDispatcher = Depends(get_dispatcher),
    resolver: SchoolYearResolver = Depends(get_school_year_resolver),
    current_admin: dict = Depends(get_current_admin),
):
    logger.info(f"{current_admin['email']} requested {request.lrn} → {request.status}")
    result = await transition(
        db,
        request.lrn,
        request.status,
        reason=request.reason,
        plain_password=request.plain_password,
        dispatcher=dispatcher,
        school_year_resolver=resolver,
    )

    message = f"Student {result.lrn} updated to '{result.status.value}'."
    if not result.notification_sent:
        message += " Email could not be sent."

    return StatusUpdateResponse(
        message=message,
        lrn=result.lrn,
        enrollment_status=result.status,
        notification_sent=result.notification_sent,
    )


@router.get("/check-account/{lrn}", response_model=AccountStatusResponse)
async def check_account(
    lrn: str,
    db: Session = Depends(get_db),
    current_admin: dict = Depends(get_current_admin),
):
    return records.get_account_status(db, lrn)
