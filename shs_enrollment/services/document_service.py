# shs_enrollment/services/document_service.py
"""
Document verification ledger.

Flags live on ``DocumentSet``; every verify/unverify also appends a
``VerificationLog`` row in its own commit. A failed audit write is logged
and swallowed, the flag change stays committed.

A fully verified set never changes the enrollment status by itself; that
remains an administrative decision made through the status service.
"""
import logging
from typing import Dict, List, NamedTuple, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from shs_enrollment.exceptions import InvalidDocumentTypeError, NotFoundError
from shs_enrollment.models.enums import DocumentType, VerificationAction, DOCUMENT_LABELS
from shs_enrollment.models.document import DocumentSet, VerificationLog
from shs_enrollment.services.email_service import NotificationDispatcher
from shs_enrollment.services.notifications import MissingDocumentReminder, notify
from shs_enrollment.services.records import get_student

logger = logging.getLogger(__name__)

DEFAULT_ACTOR = "system"

# Closed mapping from document type to the DocumentSet column it controls
DOCUMENT_COLUMNS: Dict[DocumentType, str] = {
    DocumentType.birth_cert: DocumentSet.birth_cert.key,
    DocumentType.form137: DocumentSet.form137.key,
    DocumentType.good_moral: DocumentSet.good_moral.key,
    DocumentType.report_card: DocumentSet.report_card.key,
    DocumentType.picture: DocumentSet.picture.key,
    DocumentType.transcript_records: DocumentSet.transcript_records.key,
    DocumentType.honorable_dismissal: DocumentSet.honorable_dismissal.key,
}


class VerificationResult(NamedTuple):
    lrn: str
    document_type: DocumentType
    verified: bool
    logged: bool


def parse_document_type(value) -> DocumentType:
    try:
        return DocumentType(value)
    except ValueError:
        raise InvalidDocumentTypeError(f"Invalid document type '{value}'")


def _append_log(db: Session, lrn: str, document_type: DocumentType, action: VerificationAction, actor: str) -> bool:
    try:
        db.add(VerificationLog(
            lrn=lrn,
            document_type=document_type.value,
            action=action.value,
            verified_by=actor,
        ))
        db.commit()
        return True
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to log {action.value} of {document_type.value} for {lrn}: {str(e)}")
        return False


def set_verification(
    db: Session,
    lrn: str,
    document_type,
    verified: bool,
    actor: Optional[str] = None,
) -> VerificationResult:
    document_type = parse_document_type(document_type)
    column = DOCUMENT_COLUMNS[document_type]
    actor = actor or DEFAULT_ACTOR

    # Unknown LRNs never get a document row or an audit entry
    get_student(db, lrn)
    documents = db.query(DocumentSet).filter(DocumentSet.lrn == lrn).first()

    if documents is None:
        if not verified:
            raise NotFoundError(f"No document record found for LRN {lrn}")
        documents = DocumentSet(lrn=lrn)
        db.add(documents)
        logger.info(f"Created document record for {lrn}")

    try:
        setattr(documents, column, verified)
        db.commit()
    except Exception:
        db.rollback()
        raise

    action = VerificationAction.verified if verified else VerificationAction.unverified
    logger.info(f"Document {document_type.value} for {lrn} {action.value} by {actor}")

    logged = _append_log(db, lrn, document_type, action, actor)
    return VerificationResult(lrn=lrn, document_type=document_type, verified=verified, logged=logged)


def get_document_set(db: Session, lrn: str) -> DocumentSet:
    documents = db.query(DocumentSet).filter(DocumentSet.lrn == lrn).first()
    if documents is None:
        raise NotFoundError(f"No document record found for LRN {lrn}")
    return documents


def get_verification_status(db: Session, lrn: str) -> Dict[str, bool]:
    documents = get_document_set(db, lrn)
    return {doc_type.value: bool(getattr(documents, column)) for doc_type, column in DOCUMENT_COLUMNS.items()}


def list_verification_logs(db: Session, lrn: str) -> List[VerificationLog]:
    return (
        db.query(VerificationLog)
        .filter(VerificationLog.lrn == lrn)
        .order_by(VerificationLog.verified_at.desc(), VerificationLog.id.desc())
        .all()
    )


async def send_missing_document_reminder(
    db: Session,
    lrn: str,
    document_type,
    dispatcher: NotificationDispatcher,
) -> bool:
    """Email the student about a missing document; delivery is best-effort."""
    document_type = parse_document_type(document_type)
    student = get_student(db, lrn)

    return await notify(
        dispatcher,
        student.email,
        MissingDocumentReminder(
            recipient_name=student.full_name,
            document_name=DOCUMENT_LABELS[document_type],
        ),
    )
