# shs_enrollment/models/account.py
from sqlalchemy import Column, String, Integer, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from shs_enrollment.database import Base


class AccountCredential(Base):
    __tablename__ = "student_accounts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    lrn = Column(
        String(20),
        ForeignKey("student_details.lrn", ondelete="CASCADE", name="fk_account_student"),
        nullable=False,
        unique=True,
    )
    # Not unique: LRNs sharing their last six digits share a tracking code
    track_code = Column(String(50), nullable=False, index=True, comment="Set once at intake, never regenerated")
    password_hash = Column(String(255), nullable=True, comment="bcrypt hash, set on account-granting transitions")

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    student = relationship("Student", back_populates="account")

    @property
    def has_password(self) -> bool:
        return bool(self.password_hash and self.password_hash.strip())
