"""Tests for notification payloads, rendering and delivery."""

import pytest

from shs_enrollment.config import settings
from shs_enrollment.models.enums import EnrollmentStatus
from shs_enrollment.services.email_service import MailDispatcher, NotificationDispatcher
from shs_enrollment.services.notifications import (
    EnrolledNotice,
    IntakeConfirmation,
    MissingDocumentReminder,
    RejectedNotice,
    TemporaryEnrolledNotice,
    UnderReviewNotice,
    notice_for_status,
    notify,
    renderer,
)


class DecliningDispatcher(NotificationDispatcher):
    async def send(self, to_address, subject, body_markup):
        return False


class TestNoticeForStatus:
    def test_pending_has_no_notice(self):
        assert notice_for_status(EnrollmentStatus.pending, "Maria Cruz", "SV8BSHS-789012") is None

    @pytest.mark.parametrize(
        "status, expected",
        [
            (EnrollmentStatus.under_review, UnderReviewNotice),
            (EnrollmentStatus.enrolled, EnrolledNotice),
            (EnrollmentStatus.temporary_enrolled, TemporaryEnrolledNotice),
            (EnrollmentStatus.rejected, RejectedNotice),
        ],
    )
    def test_variant_per_status(self, status, expected):
        notice = notice_for_status(status, "Maria Cruz", "SV8BSHS-789012", password="pw", reason="r")
        assert isinstance(notice, expected)

    def test_rejection_reason_has_default(self):
        notice = notice_for_status(EnrollmentStatus.rejected, "Maria Cruz", "SV8BSHS-789012")
        assert notice.reason == "No specific reason provided"


class TestRenderer:
    def test_enrolled_email_carries_credentials(self):
        email = renderer.render(
            EnrolledNotice(recipient_name="Maria Cruz", tracking_code="SV8BSHS-789012", password="SV8B-Cruz9012")
        )

        assert email.subject == "✅ SV8BSHS Enrollment Approved & Account Details"
        assert "SV8BSHS-789012" in email.body
        assert "SV8B-Cruz9012" in email.body
        assert "Maria Cruz" in email.body

    def test_temporary_email_mentions_deadline(self):
        email = renderer.render(
            TemporaryEnrolledNotice(
                recipient_name="Maria Cruz",
                tracking_code="SV8BSHS-789012",
                password="SV8B-Cruz9012",
                reason="Missing PSA birth certificate",
            )
        )

        assert email.subject == "⏳ SV8BSHS - Temporary Enrollment Status"
        assert "Missing PSA birth certificate" in email.body
        assert "30 days" in email.body

    def test_free_text_is_escaped(self):
        email = renderer.render(RejectedNotice(recipient_name="Maria Cruz", reason="<script>x</script>"))

        assert "<script>" not in email.body
        assert "&lt;script&gt;" in email.body

    def test_missing_document_subject(self):
        email = renderer.render(MissingDocumentReminder(recipient_name="Maria Cruz", document_name="Form 137"))

        assert email.subject == "⚠️ Action Required: Missing Form 137"


class TestNotify:
    @pytest.mark.asyncio
    async def test_delivered(self, dispatcher):
        sent = await notify(dispatcher, "maria@gmail.com", IntakeConfirmation("Maria Cruz", "SV8BSHS-789012"))

        assert sent is True
        assert dispatcher.sent[0][0] == "maria@gmail.com"

    @pytest.mark.asyncio
    async def test_exception_is_reported_as_false(self, failing_dispatcher):
        sent = await notify(failing_dispatcher, "maria@gmail.com", IntakeConfirmation("Maria Cruz", "SV8BSHS-789012"))

        assert sent is False

    @pytest.mark.asyncio
    async def test_declined_delivery(self):
        sent = await notify(DecliningDispatcher(), "maria@gmail.com", IntakeConfirmation("Maria Cruz", "SV8BSHS-789012"))

        assert sent is False


@pytest.mark.asyncio
async def test_mail_dispatcher_without_smtp_host(monkeypatch):
    monkeypatch.setattr(settings, "EMAIL_HOST", "")

    sent = await MailDispatcher().send("maria@gmail.com", "subject", "<p>body</p>")

    assert sent is False
