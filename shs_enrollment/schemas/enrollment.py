# shs_enrollment/schemas/enrollment.py
from pydantic import BaseModel, ConfigDict
from datetime import date, datetime
from typing import Optional

from shs_enrollment.models.enums import EnrollmentStatus, WindowState
from shs_enrollment.schemas.applicant import StudentSummary, GuardianResponse
from shs_enrollment.schemas.document import DocumentFlags


class StatusUpdateRequest(BaseModel):
    lrn: str
    # Parsed by the status service so unknown values surface as ValidationError
    status: str
    reason: Optional[str] = None
    plain_password: Optional[str] = None

    model_config = ConfigDict(title="StatusUpdateRequest")


class StatusUpdateResponse(BaseModel):
    status: str = "success"
    message: str
    lrn: str
    enrollment_status: EnrollmentStatus
    notification_sent: bool

    model_config = ConfigDict(title="StatusUpdateResponse")


class EnrollmentPeriodResponse(BaseModel):
    id: int
    lrn: str
    school_year: str
    semester: str
    status: str
    enrollment_type: str
    grade_slip: Optional[str] = None
    rejection_reason: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True, title="EnrollmentPeriodResponse")


class SemesterAdvanceRequest(BaseModel):
    lrn: str
    # Active school year when omitted
    school_year: Optional[str] = None

    model_config = ConfigDict(title="SemesterAdvanceRequest")


class SemesterAdvanceResponse(BaseModel):
    status: str = "success"
    message: str
    period: EnrollmentPeriodResponse
    password: str

    model_config = ConfigDict(title="SemesterAdvanceResponse")


class StudentRecordResponse(BaseModel):
    student: StudentSummary
    guardian: Optional[GuardianResponse] = None
    documents: Optional[DocumentFlags] = None
    current_period: Optional[EnrollmentPeriodResponse] = None

    model_config = ConfigDict(title="StudentRecordResponse")


class EnrollmentWindowResponse(BaseModel):
    semester: str
    status: WindowState
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    model_config = ConfigDict(title="EnrollmentWindowResponse")


class WindowStateUpdate(BaseModel):
    status: WindowState

    model_config = ConfigDict(title="WindowStateUpdate")


class WindowDatesUpdate(BaseModel):
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    model_config = ConfigDict(title="WindowDatesUpdate")
