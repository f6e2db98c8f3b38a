"""Pytest configuration and shared fixtures.

Every test runs against a fresh in-memory SQLite database. Outbound mail is
captured by ``RecordingDispatcher`` and the school year is pinned so period
rows are predictable.
"""

from typing import List, Optional, Tuple

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from shs_enrollment.database import Base
from shs_enrollment.models import (
    Student,
    Guardian,
    DocumentSet,
    EnrollmentPeriod,
    AccountCredential,
)
from shs_enrollment.schemas.applicant import ApplicantCreate
from shs_enrollment.services.email_service import NotificationDispatcher
from shs_enrollment.utils.school_year import FixedSchoolYearResolver

SCHOOL_YEAR = "2025-2026"
ADMIN = {"email": "registrar@sv8bshs.site", "role": "admin"}


# =============================================================================
# Collaborators
# =============================================================================


class RecordingDispatcher(NotificationDispatcher):
    """Captures outbound mail instead of sending it."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.sent: List[Tuple[str, str, str]] = []

    async def send(self, to_address: str, subject: str, body_markup: str) -> bool:
        if self.fail:
            raise ConnectionError("SMTP server unavailable")
        self.sent.append((to_address, subject, body_markup))
        return True

    @property
    def subjects(self) -> List[str]:
        return [subject for _, subject, _ in self.sent]


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def dispatcher() -> RecordingDispatcher:
    return RecordingDispatcher()


@pytest.fixture
def failing_dispatcher() -> RecordingDispatcher:
    return RecordingDispatcher(fail=True)


@pytest.fixture
def resolver() -> FixedSchoolYearResolver:
    return FixedSchoolYearResolver(SCHOOL_YEAR)


# =============================================================================
# Data Fixtures
# =============================================================================


@pytest.fixture
def applicant_data():
    """Factory for intake payloads; keyword overrides replace defaults."""

    def _make(**overrides) -> ApplicantCreate:
        payload = {
            "lrn": "123456789012",
            "lastname": "Cruz",
            "firstname": "Maria",
            "strand": "STEM",
            "email": "maria.cruz@gmail.com",
            "yearlevel": "Grade 11",
            "guardian_name": "Ana Cruz",
            "guardian_contact": "09171234567",
        }
        payload.update(overrides)
        return ApplicantCreate(**payload)

    return _make


@pytest.fixture
def seed_student(db):
    """Insert a student directly, optionally without the dependent rows."""

    def _seed(
        lrn: str = "123456789012",
        lastname: str = "Cruz",
        email: Optional[str] = None,
        status: str = "Pending",
        reason: Optional[str] = None,
        with_documents: bool = True,
        with_account: bool = True,
        password_hash: Optional[str] = None,
        period_status: Optional[str] = None,
        enrollment_type: str = "New",
        grade_slip: Optional[str] = None,
        school_year: str = SCHOOL_YEAR,
    ) -> Student:
        student = Student(
            lrn=lrn,
            firstname="Maria",
            lastname=lastname,
            email=email or f"{lrn}@gmail.com",
            strand="STEM",
            student_type=enrollment_type,
            enrollment_status=status,
            reason=reason,
        )
        db.add(student)
        db.flush()
        db.add(Guardian(lrn=lrn, guardian_name="Ana Cruz", guardian_contact="09171234567"))
        if with_documents:
            db.add(DocumentSet(lrn=lrn))
        if with_account:
            db.add(AccountCredential(lrn=lrn, track_code=f"SV8BSHS-{lrn[-6:]}", password_hash=password_hash))
        if period_status:
            db.add(EnrollmentPeriod(
                lrn=lrn,
                school_year=school_year,
                semester="1st",
                status=period_status,
                enrollment_type=enrollment_type,
                grade_slip=grade_slip,
            ))
        db.commit()
        return student

    return _seed


# =============================================================================
# API Fixtures
# =============================================================================


@pytest.fixture
def client(db, dispatcher, resolver):
    """TestClient with the database, mailer, school year and admin gate overridden."""
    from fastapi.testclient import TestClient

    from shs_enrollment.auth.dependencies import get_current_admin
    from shs_enrollment.database import get_db
    from shs_enrollment.main import app
    from shs_enrollment.services.email_service import get_dispatcher
    from shs_enrollment.utils.school_year import get_school_year_resolver

    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_dispatcher] = lambda: dispatcher
    app.dependency_overrides[get_school_year_resolver] = lambda: resolver
    app.dependency_overrides[get_current_admin] = lambda: ADMIN

    yield TestClient(app)

    app.dependency_overrides.clear()
