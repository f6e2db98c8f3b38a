# shs_enrollment/schemas/document.py
from pydantic import BaseModel, ConfigDict, field_validator
from datetime import datetime
from typing import List, Optional


class VerificationRequest(BaseModel):
    lrn: str
    # Validated by the ledger so unknown types surface as InvalidDocumentTypeError
    document_type: str
    verified_by: Optional[str] = None

    model_config = ConfigDict(title="VerificationRequest")


class DocumentFlags(BaseModel):
    birth_cert: bool = False
    form137: bool = False
    good_moral: bool = False
    report_card: bool = False
    picture: bool = False
    transcript_records: bool = False
    honorable_dismissal: bool = False

    @field_validator("*", mode="before")
    @classmethod
    def convert_none_to_false(cls, v):
        return v if v is not None else False

    model_config = ConfigDict(from_attributes=True, title="DocumentFlags")


class VerificationResponse(BaseModel):
    success: bool = True
    message: str
    lrn: str
    document_type: str
    verified: bool

    model_config = ConfigDict(title="VerificationResponse")


class VerificationStatusResponse(BaseModel):
    success: bool = True
    lrn: str
    verification_status: DocumentFlags
    all_verified: bool

    model_config = ConfigDict(title="VerificationStatusResponse")


class VerificationLogEntry(BaseModel):
    document_type: str
    action: str
    verified_by: str
    verified_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True, title="VerificationLogEntry")


class VerificationLogResponse(BaseModel):
    lrn: str
    entries: List[VerificationLogEntry]

    model_config = ConfigDict(title="VerificationLogResponse")


class ReminderRequest(BaseModel):
    lrn: str
    document_type: str

    model_config = ConfigDict(title="ReminderRequest")
