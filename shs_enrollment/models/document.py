# shs_enrollment/models/document.py
from sqlalchemy import Column, String, Integer, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from shs_enrollment.database import Base


class DocumentSet(Base):
    __tablename__ = "student_documents"
    __table_args__ = {"comment": "Per-student document verification flags"}

    id = Column(Integer, primary_key=True, autoincrement=True)
    lrn = Column(
        String(20),
        ForeignKey("student_details.lrn", ondelete="CASCADE", name="fk_documents_student"),
        nullable=False,
        unique=True,
    )

    birth_cert = Column(Boolean, nullable=True, default=False)
    form137 = Column(Boolean, nullable=True, default=False)
    good_moral = Column(Boolean, nullable=True, default=False)
    report_card = Column(Boolean, nullable=True, default=False)
    picture = Column(Boolean, nullable=True, default=False)
    transcript_records = Column(Boolean, nullable=True, default=False)
    honorable_dismissal = Column(Boolean, nullable=True, default=False)

    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    student = relationship("Student", back_populates="documents")


class VerificationLog(Base):
    """Append-only audit trail of verify/unverify actions."""

    __tablename__ = "document_verification_logs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    lrn = Column(String(20), nullable=False, index=True)
    document_type = Column(String(30), nullable=False)
    action = Column(String(20), nullable=False)  # verified, unverified
    verified_by = Column(String(100), nullable=False, default="system")
    verified_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<VerificationLog {self.lrn} {self.document_type} {self.action} by {self.verified_by}>"
