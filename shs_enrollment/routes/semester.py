# shs_enrollment/routes/semester.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
import logging

from shs_enrollment.auth.dependencies import get_current_admin
from shs_enrollment.database import get_db
from shs_enrollment.exceptions import NotFoundError
from shs_enrollment.schemas.enrollment import (
    EnrollmentPeriodResponse,
    SemesterAdvanceRequest,
    SemesterAdvanceResponse,
)
from shs_enrollment.services.records import get_current_period
from shs_enrollment.services.semester_service import advance_semester
from shs_enrollment.utils.school_year import SchoolYearResolver, get_school_year_resolver

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/semester",
    tags=["Semester Progression"]
)


@router.post("/approve", response_model=SemesterAdvanceResponse)
async def approve_second_semester(
    request: SemesterAdvanceRequest,
    db: Session = Depends(get_db),
    resolver: SchoolYearResolver = Depends(get_school_year_resolver),
    current_admin: dict = Depends(get_current_admin),
):
    """
    Enroll a continuing student in the 2nd semester.

    ``school_year`` defaults to the active school year; a registrar may name
    another year to progress a student whose 1st semester was recorded there.
    The regenerated password is returned so the registrar can hand it over;
    no email goes out for this step.
    """
    school_year = request.school_year or resolver.resolve()
    result = advance_semester(db, request.lrn, school_year)

    if result.created:
        message = f"Student {request.lrn} enrolled for the 2nd semester of {school_year}."
    else:
        message = f"Student {request.lrn} is already enrolled for the 2nd semester of {school_year}."

    return SemesterAdvanceResponse(
        message=message,
        period=EnrollmentPeriodResponse.model_validate(result.period),
        password=result.password,
    )


@router.get("/status/{lrn}", response_model=EnrollmentPeriodResponse)
async def semester_status(
    lrn: str,
    db: Session = Depends(get_db),
    resolver: SchoolYearResolver = Depends(get_school_year_resolver),
    current_admin: dict = Depends(get_current_admin),
):
    school_year = resolver.resolve()
    period = get_current_period(db, lrn, school_year)
    if period is None:
        raise NotFoundError(f"No enrollment record for LRN {lrn} in {school_year}")
    return period
