"""Tests for enrollment status transitions."""

import pytest
import pytest_asyncio

from shs_enrollment.exceptions import MissingCredentialError, NotFoundError, ValidationError
from shs_enrollment.models import AccountCredential, EnrollmentPeriod, Student
from shs_enrollment.models.enums import EnrollmentStatus
from shs_enrollment.services.intake_service import create_applicant
from shs_enrollment.services.status_service import is_nominal_transition, transition
from shs_enrollment.utils.hash import verify_password

LRN = "123456789012"


@pytest_asyncio.fixture
async def applicant(db, dispatcher, resolver, applicant_data):
    """A freshly admitted Pending applicant; intake mail is discarded."""
    await create_applicant(db, applicant_data(), dispatcher, resolver)
    dispatcher.sent.clear()
    return LRN


def _student(db) -> Student:
    return db.query(Student).filter(Student.lrn == LRN).one()


def _period(db) -> EnrollmentPeriod:
    return db.query(EnrollmentPeriod).filter(EnrollmentPeriod.lrn == LRN).one()


class TestTransition:
    @pytest.mark.asyncio
    async def test_under_review_notifies_and_mirrors_period(self, db, dispatcher, resolver, applicant):
        result = await transition(db, LRN, "Under Review", dispatcher=dispatcher, school_year_resolver=resolver)

        assert result.previous_status == "Pending"
        assert result.status == EnrollmentStatus.under_review
        assert result.notification_sent is True
        assert _student(db).enrollment_status == "Under Review"
        assert _period(db).status == "Under Review"
        assert dispatcher.subjects == ["🎓 SV8BSHS Enrollment Review in Progress"]

    @pytest.mark.asyncio
    async def test_rejected_then_under_review_clears_reason(self, db, dispatcher, resolver, applicant):
        await transition(
            db, LRN, "Rejected", reason="Incomplete Form 137", dispatcher=dispatcher, school_year_resolver=resolver
        )
        assert _student(db).reason == "Incomplete Form 137"
        assert _period(db).rejection_reason == "Incomplete Form 137"

        result = await transition(db, LRN, "Under Review", dispatcher=dispatcher, school_year_resolver=resolver)

        student = _student(db)
        assert result.previous_status == "Rejected"
        assert student.enrollment_status == "Under Review"
        assert student.reason is None
        assert _period(db).rejection_reason is None

    @pytest.mark.asyncio
    async def test_enrolled_without_password_changes_nothing(self, db, dispatcher, resolver, applicant):
        with pytest.raises(MissingCredentialError):
            await transition(db, LRN, "Enrolled", dispatcher=dispatcher, school_year_resolver=resolver)

        assert _student(db).enrollment_status == "Pending"
        assert dispatcher.sent == []

    @pytest.mark.asyncio
    async def test_temporary_enrolled_requires_reason(self, db, dispatcher, resolver, applicant):
        with pytest.raises(ValidationError):
            await transition(
                db, LRN, "Temporary Enrolled", plain_password="SV8B-Cruz9012",
                dispatcher=dispatcher, school_year_resolver=resolver,
            )

        assert _student(db).enrollment_status == "Pending"

    @pytest.mark.asyncio
    async def test_rejected_requires_reason(self, db, dispatcher, resolver, applicant):
        with pytest.raises(ValidationError):
            await transition(db, LRN, "Rejected", reason="   ", dispatcher=dispatcher, school_year_resolver=resolver)

    @pytest.mark.asyncio
    async def test_enrolled_hashes_password_and_sends_credentials(self, db, dispatcher, resolver, applicant):
        await transition(
            db, LRN, "Enrolled", plain_password="SV8B-Cruz9012", dispatcher=dispatcher, school_year_resolver=resolver
        )

        account = db.query(AccountCredential).filter(AccountCredential.lrn == LRN).one()
        assert verify_password("SV8B-Cruz9012", account.password_hash)
        assert _student(db).reason is None

        _, subject, body = dispatcher.sent[0]
        assert subject == "✅ SV8BSHS Enrollment Approved & Account Details"
        assert "SV8BSHS-789012" in body
        assert "SV8B-Cruz9012" in body

    @pytest.mark.asyncio
    async def test_repeated_grant_overwrites_password_hash(self, db, dispatcher, resolver, applicant):
        await transition(
            db, LRN, "Temporary Enrolled", reason="Missing PSA birth certificate", plain_password="first-pass",
            dispatcher=dispatcher, school_year_resolver=resolver,
        )
        await transition(
            db, LRN, "Enrolled", plain_password="second-pass", dispatcher=dispatcher, school_year_resolver=resolver
        )

        account = db.query(AccountCredential).filter(AccountCredential.lrn == LRN).one()
        assert verify_password("second-pass", account.password_hash)
        assert not verify_password("first-pass", account.password_hash)
        assert _student(db).reason is None

    @pytest.mark.asyncio
    async def test_grant_without_account_row_creates_one(self, db, dispatcher, resolver, seed_student):
        seed_student(lrn="555555000111", with_account=False, status="Under Review")

        await transition(
            db, "555555000111", "Enrolled", plain_password="pw", dispatcher=dispatcher, school_year_resolver=resolver
        )

        account = db.query(AccountCredential).filter(AccountCredential.lrn == "555555000111").one()
        assert account.track_code == "SV8BSHS-000111"
        assert verify_password("pw", account.password_hash)

    @pytest.mark.asyncio
    async def test_mail_failure_still_commits(self, db, failing_dispatcher, resolver, seed_student):
        seed_student(lrn=LRN)

        result = await transition(
            db, LRN, "Rejected", reason="Duplicate application",
            dispatcher=failing_dispatcher, school_year_resolver=resolver,
        )

        assert result.notification_sent is False
        assert _student(db).enrollment_status == "Rejected"

    @pytest.mark.asyncio
    async def test_pending_sends_no_notification(self, db, dispatcher, resolver, seed_student):
        seed_student(lrn=LRN, status="Under Review")

        result = await transition(db, LRN, "Pending", dispatcher=dispatcher, school_year_resolver=resolver)

        assert result.notification_sent is False
        assert dispatcher.sent == []
        assert _student(db).enrollment_status == "Pending"

    @pytest.mark.asyncio
    async def test_unknown_lrn(self, db, dispatcher, resolver):
        with pytest.raises(NotFoundError):
            await transition(db, "000000000000", "Under Review", dispatcher=dispatcher, school_year_resolver=resolver)

    @pytest.mark.asyncio
    async def test_unknown_status(self, db, dispatcher, resolver, seed_student):
        seed_student(lrn=LRN)

        with pytest.raises(ValidationError):
            await transition(db, LRN, "Graduated", dispatcher=dispatcher, school_year_resolver=resolver)


@pytest.mark.parametrize(
    "previous, new_status, expected",
    [
        ("Pending", EnrollmentStatus.under_review, True),
        ("Under Review", EnrollmentStatus.temporary_enrolled, True),
        ("Temporary Enrolled", EnrollmentStatus.enrolled, True),
        ("Rejected", EnrollmentStatus.under_review, False),
        ("Enrolled", EnrollmentStatus.pending, False),
        ("Enrolled", EnrollmentStatus.enrolled, True),
    ],
)
def test_nominal_transitions(previous, new_status, expected):
    assert is_nominal_transition(previous, new_status) is expected
