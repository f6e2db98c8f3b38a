# shs_enrollment/utils/school_year.py
from datetime import date
from typing import Optional

from shs_enrollment.config import settings


class SchoolYearResolver:
    """Maps a calendar date to a school-year label such as ``2025-2026``."""

    def resolve(self, on: Optional[date] = None) -> str:
        raise NotImplementedError


class CalendarSchoolYearResolver(SchoolYearResolver):
    """A school year starts on the first day of ``start_month``."""

    def __init__(self, start_month: int = 6):
        if not 1 <= start_month <= 12:
            raise ValueError("start_month must be between 1 and 12")
        self.start_month = start_month

    def resolve(self, on: Optional[date] = None) -> str:
        on = on or date.today()
        if on.month >= self.start_month:
            return f"{on.year}-{on.year + 1}"
        return f"{on.year - 1}-{on.year}"


class FixedSchoolYearResolver(SchoolYearResolver):
    def __init__(self, school_year: str):
        self.school_year = school_year

    def resolve(self, on: Optional[date] = None) -> str:
        return self.school_year


def get_school_year_resolver() -> SchoolYearResolver:
    """FastAPI dependency; honours a fixed SCHOOL_YEAR from settings."""
    if settings.SCHOOL_YEAR:
        return FixedSchoolYearResolver(settings.SCHOOL_YEAR)
    return CalendarSchoolYearResolver(settings.SCHOOL_YEAR_START_MONTH)
