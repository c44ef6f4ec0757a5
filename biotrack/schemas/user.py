"""
Request and response models for users.
"""

from datetime import date, datetime
from typing import List, Optional

from pydantic import EmailStr, Field, field_validator

from biotrack.schemas.base import CamelModel
from biotrack.schemas.measure import MeasureResponse

PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 72
PASSWORD_MAX_BYTES = 72  # bcrypt limit


def check_password_strength(password: str) -> str:
    if len(password.encode("utf-8")) > PASSWORD_MAX_BYTES:
        raise ValueError(f"Password must not exceed {PASSWORD_MAX_BYTES} bytes")
    if not any(c.isalpha() for c in password):
        raise ValueError("Password must contain at least one letter")
    if not any(c.isdigit() for c in password):
        raise ValueError("Password must contain at least one number")
    return password


def check_not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


class UserRequest(CamelModel):
    """Payload for creating or fully replacing a user."""

    name: str = Field(..., min_length=1, description="Full name")
    birth_date: date = Field(..., description="Date of birth")
    zip_code: str = Field(..., min_length=1, description="Postal code")
    email: EmailStr = Field(..., description="Contact email")
    password: str = Field(
        ...,
        min_length=PASSWORD_MIN_LENGTH,
        max_length=PASSWORD_MAX_LENGTH,
        description="Password (8-72 characters, letters and numbers)",
    )

    @field_validator("name", "zip_code")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        return check_not_blank(v)

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        return check_password_strength(v)


class UserPatchRequest(CamelModel):
    """Payload for a partial update. Only non-null fields are applied."""

    name: Optional[str] = Field(None, min_length=1)
    birth_date: Optional[date] = None
    zip_code: Optional[str] = Field(None, min_length=1)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(
        None, min_length=PASSWORD_MIN_LENGTH, max_length=PASSWORD_MAX_LENGTH
    )

    @field_validator("name", "zip_code")
    @classmethod
    def validate_not_blank(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        return check_not_blank(v)

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        return check_password_strength(v)


class UserResponse(CamelModel):
    """Public view of a user. Never carries the password hash."""

    id: int
    name: str
    birth_date: date
    zip_code: str
    email: str


class UserMeasuresResponse(UserResponse):
    """A user together with some or all of their measures."""

    measures: List[MeasureResponse] = Field(default_factory=list)


class UserBmiResponse(UserResponse):
    """A user matched by the BMI filter, with the measure that classified them."""

    bmi: float
    bmi_range: str
    latest_measure: MeasureResponse


class BmiSummaryResponse(CamelModel):
    """BMI derived from a user's latest measure."""

    user_id: int
    measure_id: int
    measurement_date: datetime
    weight_kg: float
    height_cm: float
    bmi: float
    bmi_range: str
