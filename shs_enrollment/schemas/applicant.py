# shs_enrollment/schemas/applicant.py
from pydantic import BaseModel, EmailStr, ConfigDict
from datetime import date, datetime
from typing import Optional

from shs_enrollment.models.enums import EnrollmentType


class ApplicantCreate(BaseModel):
    # Required at intake; presence is checked by the intake service
    lrn: Optional[str] = None
    lastname: Optional[str] = None
    firstname: Optional[str] = None
    strand: Optional[str] = None
    email: Optional[EmailStr] = None

    # SECTION A: Personal Information
    middlename: Optional[str] = None
    suffix: Optional[str] = None
    age: Optional[int] = None
    sex: Optional[str] = None
    civil_status: Optional[str] = None
    nationality: Optional[str] = None
    birthdate: Optional[date] = None
    place_of_birth: Optional[str] = None
    religion: Optional[str] = None
    cpnumber: Optional[str] = None
    home_add: Optional[str] = None

    # SECTION B: Enrollment
    yearlevel: Optional[str] = None
    student_type: EnrollmentType = EnrollmentType.new

    # SECTION C: Parents / Guardian
    fathers_name: Optional[str] = None
    fathers_contact: Optional[str] = None
    mothers_name: Optional[str] = None
    mothers_contact: Optional[str] = None
    guardian_name: Optional[str] = None
    guardian_contact: Optional[str] = None

    model_config = ConfigDict(title="ApplicantCreate")


class IntakeResponse(BaseModel):
    status: str = "success"
    message: str
    lrn: str
    tracking_code: str
    notification_sent: bool

    model_config = ConfigDict(title="IntakeResponse")


class StudentSummary(BaseModel):
    lrn: str
    firstname: str
    lastname: str
    email: str
    strand: str
    yearlevel: Optional[str] = None
    student_type: Optional[str] = None
    enrollment_status: str
    reason: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True, title="StudentSummary")


class GuardianResponse(BaseModel):
    fathers_name: Optional[str] = None
    fathers_contact: Optional[str] = None
    mothers_name: Optional[str] = None
    mothers_contact: Optional[str] = None
    guardian_name: str
    guardian_contact: str

    model_config = ConfigDict(from_attributes=True, title="GuardianResponse")


class AccountStatusResponse(BaseModel):
    lrn: str
    account_exists: bool
    has_password: bool
    tracking_code: Optional[str] = None

    model_config = ConfigDict(title="AccountStatusResponse")
