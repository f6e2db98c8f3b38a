# shs_enrollment/utils/credentials.py
"""
Tracking codes and provisioning passwords derived from student attributes.

Both values are pure functions of (last name, LRN):

    tracking code          SV8BSHS-<last 6 of LRN>
    provisioning password  SV8B-<LastName><last 4 of LRN>

The password must be hashed before storage and is disclosed to the student
only in the status notification.
"""
from typing import NamedTuple, Optional

from shs_enrollment.config import settings
from shs_enrollment.exceptions import InvalidInputError

MIN_LRN_LENGTH = 6


class Credentials(NamedTuple):
    tracking_code: str
    password: str


def _clean_lrn(lrn: Optional[str]) -> str:
    if lrn is None or not str(lrn).strip():
        raise InvalidInputError("LRN is required to generate credentials")

    lrn = str(lrn).strip()
    if len(lrn) < MIN_LRN_LENGTH:
        raise InvalidInputError(f"LRN must have at least {MIN_LRN_LENGTH} characters")
    return lrn


def generate_tracking_code(lrn: str, prefix: Optional[str] = None) -> str:
    lrn = _clean_lrn(lrn)
    return f"{prefix or settings.TRACKING_PREFIX}-{lrn[-6:]}"


def generate_password(lastname: str, lrn: str, prefix: Optional[str] = None) -> str:
    if lastname is None or not lastname.strip():
        raise InvalidInputError("Last name is required to generate a password")

    lrn = _clean_lrn(lrn)
    return f"{prefix or settings.PASSWORD_PREFIX}-{lastname.strip()}{lrn[-4:]}"


def generate_credentials(lastname: str, lrn: str) -> Credentials:
    return Credentials(
        tracking_code=generate_tracking_code(lrn),
        password=generate_password(lastname, lrn),
    )
