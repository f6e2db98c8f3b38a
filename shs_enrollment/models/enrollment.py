# shs_enrollment/models/enrollment.py
from sqlalchemy import Column, String, Integer, Date, DateTime, Text, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from shs_enrollment.database import Base
from shs_enrollment.models.enums import EnrollmentStatus, EnrollmentType, Semester, WindowState


class EnrollmentPeriod(Base):
    __tablename__ = "student_enrollments"
    __table_args__ = {"comment": "One row per (LRN, school year, semester); history is kept"}

    id = Column(Integer, primary_key=True, autoincrement=True)
    lrn = Column(
        String(20),
        ForeignKey("student_details.lrn", ondelete="CASCADE", name="fk_enrollment_student"),
        nullable=False,
        index=True,
    )
    school_year = Column(String(9), nullable=False, index=True)  # e.g. 2025-2026
    semester = Column(String(3), nullable=False, default=Semester.first.value)
    status = Column(String(30), nullable=False, default=EnrollmentStatus.pending.value)
    enrollment_type = Column(String(20), nullable=False, default=EnrollmentType.new.value)
    grade_slip = Column(String(255), nullable=True)
    rejection_reason = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    student = relationship("Student", back_populates="periods")

    def __repr__(self):
        return f"<EnrollmentPeriod {self.lrn} {self.school_year} {self.semester}: {self.status}>"


class EnrollmentWindow(Base):
    __tablename__ = "semester_enrollment_windows"

    semester = Column(String(3), primary_key=True)
    value = Column(String(10), nullable=False, default=WindowState.closed.value)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
