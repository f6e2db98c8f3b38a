# shs_enrollment/services/window_service.py
import logging
from datetime import date
from typing import Optional

from sqlalchemy.orm import Session

from shs_enrollment.exceptions import ValidationError
from shs_enrollment.models.enums import Semester, WindowState
from shs_enrollment.models.enrollment import EnrollmentWindow

logger = logging.getLogger(__name__)


def parse_semester(value) -> Semester:
    try:
        return Semester(value)
    except ValueError:
        raise ValidationError(f"Unknown semester '{value}'. Use 1st or 2nd")


def get_window(db: Session, semester) -> dict:
    semester = parse_semester(semester)
    window = db.query(EnrollmentWindow).filter(EnrollmentWindow.semester == semester.value).first()

    # A semester that was never configured reads as closed
    if window is None:
        return {"semester": semester.value, "status": WindowState.closed, "start_date": None, "end_date": None}

    return {
        "semester": window.semester,
        "status": WindowState(window.value),
        "start_date": window.start_date,
        "end_date": window.end_date,
    }


def _get_or_create(db: Session, semester: Semester) -> EnrollmentWindow:
    window = db.query(EnrollmentWindow).filter(EnrollmentWindow.semester == semester.value).first()
    if window is None:
        window = EnrollmentWindow(semester=semester.value, value=WindowState.closed.value)
        db.add(window)
    return window


def set_window_state(db: Session, semester, state: WindowState) -> dict:
    semester = parse_semester(semester)
    window = _get_or_create(db, semester)
    window.value = WindowState(state).value
    db.commit()
    logger.info(f"{semester.value} semester enrollment {window.value}")
    return get_window(db, semester)


def set_window_dates(db: Session, semester, start_date: Optional[date], end_date: Optional[date]) -> dict:
    semester = parse_semester(semester)
    if start_date and end_date and start_date >= end_date:
        raise ValidationError("End date must be after start date")

    window = _get_or_create(db, semester)
    window.start_date = start_date
    window.end_date = end_date
    db.commit()
    logger.info(f"{semester.value} semester enrollment dates saved: {start_date} → {end_date}")
    return get_window(db, semester)
