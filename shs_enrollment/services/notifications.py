# shs_enrollment/services/notifications.py
"""
Typed notification payloads and their rendering.

The enrollment services only pick a payload variant and fill in its data.
``NotificationRenderer`` turns a payload into subject + HTML using the Jinja2
templates under ``templates/email``; ``notify`` hands the result to the
dispatcher and never lets a delivery failure escape.
"""
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import ClassVar, NamedTuple, Optional
import logging

from jinja2 import Environment, FileSystemLoader, select_autoescape

from shs_enrollment.config import settings
from shs_enrollment.models.enums import EnrollmentStatus
from shs_enrollment.services.email_service import NotificationDispatcher

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates" / "email"


@dataclass(frozen=True)
class Notification:
    recipient_name: str

    subject_line: ClassVar[str] = ""
    template: ClassVar[str] = ""


@dataclass(frozen=True)
class IntakeConfirmation(Notification):
    tracking_code: str

    subject_line: ClassVar[str] = "{school_code} Enrollment Application Received"
    template: ClassVar[str] = "intake_confirmation.html"


@dataclass(frozen=True)
class UnderReviewNotice(Notification):
    tracking_code: str

    subject_line: ClassVar[str] = "🎓 {school_code} Enrollment Review in Progress"
    template: ClassVar[str] = "under_review.html"


@dataclass(frozen=True)
class EnrolledNotice(Notification):
    tracking_code: str
    password: str

    subject_line: ClassVar[str] = "✅ {school_code} Enrollment Approved & Account Details"
    template: ClassVar[str] = "enrolled.html"


@dataclass(frozen=True)
class TemporaryEnrolledNotice(Notification):
    tracking_code: str
    password: str
    reason: str

    subject_line: ClassVar[str] = "⏳ {school_code} - Temporary Enrollment Status"
    template: ClassVar[str] = "temporary_enrolled.html"


@dataclass(frozen=True)
class RejectedNotice(Notification):
    reason: str

    subject_line: ClassVar[str] = "⚠️ {school_code} Enrollment Application Result"
    template: ClassVar[str] = "rejected.html"


@dataclass(frozen=True)
class MissingDocumentReminder(Notification):
    document_name: str

    subject_line: ClassVar[str] = "⚠️ Action Required: Missing {document_name}"
    template: ClassVar[str] = "missing_document.html"


def notice_for_status(
    status: EnrollmentStatus,
    recipient_name: str,
    tracking_code: str,
    password: Optional[str] = None,
    reason: Optional[str] = None,
) -> Optional[Notification]:
    """Pick the payload for a status; Pending has no notification."""
    if status == EnrollmentStatus.under_review:
        return UnderReviewNotice(recipient_name=recipient_name, tracking_code=tracking_code)
    if status == EnrollmentStatus.enrolled:
        return EnrolledNotice(recipient_name=recipient_name, tracking_code=tracking_code, password=password)
    if status == EnrollmentStatus.temporary_enrolled:
        return TemporaryEnrolledNotice(
            recipient_name=recipient_name, tracking_code=tracking_code, password=password, reason=reason
        )
    if status == EnrollmentStatus.rejected:
        return RejectedNotice(recipient_name=recipient_name, reason=reason or "No specific reason provided")
    return None


class RenderedEmail(NamedTuple):
    subject: str
    body: str


class NotificationRenderer:
    def __init__(self, template_dir: Path = TEMPLATE_DIR):
        self.env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            autoescape=select_autoescape(["html"]),
        )

    def render(self, notice: Notification) -> RenderedEmail:
        context = asdict(notice)
        context.update(
            school_name=settings.SCHOOL_NAME,
            school_code=settings.SCHOOL_CODE,
            app_download_url=settings.APP_DOWNLOAD_URL,
            support_contact=settings.SUPPORT_CONTACT,
            year=datetime.now().year,
        )
        subject = notice.subject_line.format(**context)
        body = self.env.get_template(notice.template).render(**context)
        return RenderedEmail(subject=subject, body=body)


renderer = NotificationRenderer()


async def notify(dispatcher: NotificationDispatcher, to_address: str, notice: Notification) -> bool:
    """Render and send; failures are logged and reported as False."""
    try:
        email = renderer.render(notice)
        sent = await dispatcher.send(to_address, email.subject, email.body)
    except Exception as e:
        logger.error(f"❌ {type(notice).__name__} to {to_address} failed: {str(e)}")
        return False

    if sent:
        logger.info(f"📧 {type(notice).__name__} sent → {to_address}")
    else:
        logger.error(f"❌ {type(notice).__name__} to {to_address} was not delivered")
    return bool(sent)
