# shs_enrollment/routes/documents.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from shs_enrollment.auth.dependencies import get_current_admin
from shs_enrollment.database import get_db
from shs_enrollment.schemas.document import (
    VerificationRequest,
    VerificationResponse,
    VerificationStatusResponse,
    VerificationLogResponse,
    ReminderRequest,
)
from shs_enrollment.services import document_service
from shs_enrollment.services.email_service import NotificationDispatcher, get_dispatcher

router = APIRouter(
    prefix="/api/documents",
    tags=["Document Verification"]
)


def _verification_response(result) -> VerificationResponse:
    if result.verified:
        message = f"Document {result.document_type.value} verified successfully"
    else:
        message = f"Document {result.document_type.value} verification removed"
    return VerificationResponse(
        message=message,
        lrn=result.lrn,
        document_type=result.document_type.value,
        verified=result.verified,
    )


@router.post("/verify", response_model=VerificationResponse)
async def verify_document(
    request: VerificationRequest,
    db: Session = Depends(get_db),
    current_admin: dict = Depends(get_current_admin),
):
    actor = request.verified_by or current_admin["email"]
    result = document_service.set_verification(db, request.lrn, request.document_type, True, actor)
    return _verification_response(result)


@router.post("/unverify", response_model=VerificationResponse)
async def unverify_document(
    request: VerificationRequest,
    db: Session = Depends(get_db),
    current_admin: dict = Depends(get_current_admin),
):
    actor = request.verified_by or current_admin["email"]
    result = document_service.set_verification(db, request.lrn, request.document_type, False, actor)
    return _verification_response(result)


@router.get("/verification-status/{lrn}", response_model=VerificationStatusResponse)
async def verification_status(
    lrn: str,
    db: Session = Depends(get_db),
    current_admin: dict = Depends(get_current_admin),
):
    flags = document_service.get_verification_status(db, lrn)
    return VerificationStatusResponse(
        lrn=lrn,
        verification_status=flags,
        all_verified=all(flags.values()),
    )


@router.get("/logs/{lrn}", response_model=VerificationLogResponse)
async def verification_logs(
    lrn: str,
    db: Session = Depends(get_db),
    current_admin: dict = Depends(get_current_admin),
):
    return VerificationLogResponse(
        lrn=lrn,
        entries=document_service.list_verification_logs(db, lrn),
    )


@router.post("/remind-missing", response_model=dict)
async def remind_missing(
    request: ReminderRequest,
    db: Session = Depends(get_db),
    dispatcher: NotificationDispatcher = Depends(get_dispatcher),
    current_admin: dict = Depends(get_current_admin),
):
    sent = await document_service.send_missing_document_reminder(db, request.lrn, request.document_type, dispatcher)
    return {
        "success": sent,
        "message": "Reminder email sent." if sent else "Reminder email could not be sent.",
    }
