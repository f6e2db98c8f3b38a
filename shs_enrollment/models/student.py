# shs_enrollment/models/student.py
from sqlalchemy import Column, String, Integer, Date, DateTime, Text, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from shs_enrollment.database import Base
from shs_enrollment.models.enums import EnrollmentStatus


class Student(Base):
    __tablename__ = "student_details"
    __table_args__ = {"comment": "Applicants and students keyed by Learner Reference Number"}

    lrn = Column(String(20), primary_key=True, comment="Learner Reference Number (immutable)")

    # SECTION A: Name
    firstname = Column(String(100), nullable=False)
    middlename = Column(String(100), nullable=True)
    lastname = Column(String(100), nullable=False)
    suffix = Column(String(20), nullable=True)

    # SECTION B: Birth data
    age = Column(Integer, nullable=True)
    sex = Column(String(10), nullable=True)
    civil_status = Column(String(20), nullable=True)
    nationality = Column(String(50), nullable=True)
    birthdate = Column(Date, nullable=True)
    place_of_birth = Column(String(150), nullable=True)
    religion = Column(String(50), nullable=True)

    # SECTION C: Contact
    cpnumber = Column(String(20), nullable=True)
    home_add = Column(Text, nullable=True)
    email = Column(String(255), nullable=False, unique=True)

    # SECTION D: Enrollment
    yearlevel = Column(String(20), nullable=True)
    strand = Column(String(50), nullable=False)
    student_type = Column(String(20), nullable=True)
    enrollment_status = Column(String(30), nullable=False, default=EnrollmentStatus.pending.value)
    reason = Column(Text, nullable=True, comment="Only set while Rejected or Temporary Enrolled")

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    guardian = relationship("Guardian", back_populates="student", uselist=False, cascade="all, delete-orphan")
    documents = relationship("DocumentSet", back_populates="student", uselist=False, cascade="all, delete-orphan")
    account = relationship("AccountCredential", back_populates="student", uselist=False, cascade="all, delete-orphan")
    periods = relationship("EnrollmentPeriod", back_populates="student", cascade="all, delete-orphan")

    @property
    def full_name(self) -> str:
        return f"{self.firstname} {self.lastname}"

    def __repr__(self):
        return f"<Student lrn={self.lrn} status={self.enrollment_status}>"


class Guardian(Base):
    __tablename__ = "guardians"

    id = Column(Integer, primary_key=True, autoincrement=True)
    lrn = Column(
        String(20),
        ForeignKey("student_details.lrn", ondelete="CASCADE", name="fk_guardian_student"),
        nullable=False,
        unique=True,
    )

    fathers_name = Column(String(150), nullable=True)
    fathers_contact = Column(String(20), nullable=True)
    mothers_name = Column(String(150), nullable=True)
    mothers_contact = Column(String(20), nullable=True)
    guardian_name = Column(String(150), nullable=False)
    guardian_contact = Column(String(20), nullable=False)

    student = relationship("Student", back_populates="guardian")
