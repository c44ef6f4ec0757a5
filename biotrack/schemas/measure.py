"""
Request and response models for body measures.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import ConfigDict, Field, field_validator

from biotrack.schemas.base import CamelModel


class MeasureRequest(CamelModel):
    """
    Payload for creating or fully replacing a measure.

    Omitted optional fields are stored as "not measured"; on update they
    clear whatever was stored before.
    """

    model_config = ConfigDict(allow_inf_nan=False)

    measurement_date: datetime = Field(..., description="Date/time of measurement")
    weight_kg: float = Field(..., gt=0, description="Weight in kilograms")
    height_cm: float = Field(..., gt=0, description="Height in centimeters")
    waist_cm: Optional[float] = Field(None, gt=0, description="Waist circumference")
    hip_cm: Optional[float] = Field(None, gt=0, description="Hip circumference")
    chest_cm: Optional[float] = Field(None, gt=0, description="Chest circumference")
    arm_right_cm: Optional[float] = Field(None, gt=0, description="Right arm circumference")
    arm_left_cm: Optional[float] = Field(None, gt=0, description="Left arm circumference")
    thigh_right_cm: Optional[float] = Field(
        None, gt=0, description="Right thigh circumference"
    )
    thigh_left_cm: Optional[float] = Field(
        None, gt=0, description="Left thigh circumference"
    )
    body_fat_percentage: Optional[float] = Field(
        None, gt=0, le=100, description="Body fat percentage"
    )

    @field_validator("measurement_date")
    @classmethod
    def normalize_measurement_date(cls, v: datetime) -> datetime:
        """Store offset-aware timestamps as naive UTC so they order correctly."""
        if v.tzinfo is not None:
            return v.astimezone(timezone.utc).replace(tzinfo=None)
        return v


class MeasureResponse(CamelModel):
    """A stored measure."""

    id: int
    user_id: int
    measurement_date: datetime
    weight_kg: float
    height_cm: float
    waist_cm: Optional[float] = None
    hip_cm: Optional[float] = None
    chest_cm: Optional[float] = None
    arm_right_cm: Optional[float] = None
    arm_left_cm: Optional[float] = None
    thigh_right_cm: Optional[float] = None
    thigh_left_cm: Optional[float] = None
    body_fat_percentage: Optional[float] = None
