from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import Optional


class Settings(BaseSettings):
    # === DATABASE ===
    DATABASE_URL: str = Field(default="sqlite:///./enrollment.db", description="SQLAlchemy database URL")

    # === ADMIN TOKEN VERIFICATION ===
    SECRET_KEY: str = Field(default="change-me", description="Secret key used to verify admin JWTs")
    ALGORITHM: str = Field(default="HS256", description="JWT algorithm")

    # === EMAIL ===
    EMAIL_HOST: str = Field(default="", description="SMTP host")
    EMAIL_PORT: int = Field(default=587, description="SMTP port")
    EMAIL_HOST_USER: str = Field(default="", description="SMTP username")
    EMAIL_HOST_PASSWORD: str = Field(default="", description="SMTP password")
    EMAIL_FROM: str = Field(default="enrollment@sv8bshs.site", description="Email sender address")

    # === SCHOOL ===
    SCHOOL_NAME: str = Field(default="Southville 8B Senior High School", description="School display name")
    SCHOOL_CODE: str = Field(default="SV8BSHS", description="Short school code used in email subjects")
    TRACKING_PREFIX: str = Field(default="SV8BSHS", description="Prefix of applicant tracking codes")
    PASSWORD_PREFIX: str = Field(default="SV8B", description="Prefix of provisioning passwords")
    SCHOOL_YEAR_START_MONTH: int = Field(default=6, ge=1, le=12, description="Month a new school year begins")
    SCHOOL_YEAR: Optional[str] = Field(default=None, description="Fixed school year, e.g. 2025-2026")
    APP_DOWNLOAD_URL: str = Field(default="", description="Student app download link shown in emails")
    SUPPORT_CONTACT: str = Field(default="the Admissions Office", description="Contact line shown in emails")

    # === LOGGING / DEBUG ===
    LOG_LEVEL: str = Field(default="INFO", description="Root log level")
    DEBUG: bool = Field(default=False, description="Debug mode")

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")


# Create settings instance
settings = Settings()
