# shs_enrollment/routes/windows.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from shs_enrollment.auth.dependencies import get_current_admin
from shs_enrollment.database import get_db
from shs_enrollment.schemas.enrollment import (
    EnrollmentWindowResponse,
    WindowStateUpdate,
    WindowDatesUpdate,
)
from shs_enrollment.services import window_service

router = APIRouter(
    prefix="/api/enrollment-windows",
    tags=["Enrollment Windows"]
)


@router.get("/{semester}", response_model=EnrollmentWindowResponse)
async def get_enrollment_window(
    semester: str,
    db: Session = Depends(get_db),
    current_admin: dict = Depends(get_current_admin),
):
    """Open/closed state and dates of a semester's enrollment window"""
    return window_service.get_window(db, semester)


@router.post("/{semester}", response_model=EnrollmentWindowResponse)
async def set_enrollment_window(
    semester: str,
    request: WindowStateUpdate,
    db: Session = Depends(get_db),
    current_admin: dict = Depends(get_current_admin),
):
    return window_service.set_window_state(db, semester, request.status)


@router.post("/{semester}/dates", response_model=EnrollmentWindowResponse)
async def set_enrollment_dates(
    semester: str,
    request: WindowDatesUpdate,
    db: Session = Depends(get_db),
    current_admin: dict = Depends(get_current_admin),
):
    return window_service.set_window_dates(db, semester, request.start_date, request.end_date)
