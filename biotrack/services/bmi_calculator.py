"""
BMI calculator service.

BMI = weight_kg / (height_m)², classified with the WHO adult bands.
All calculations use metric units (cm, kg).
"""

from enum import Enum
from typing import Optional

from biotrack.exceptions import ValidationFailedError


class BmiRange(str, Enum):
    """WHO adult BMI bands."""

    UNDERWEIGHT = "Underweight"
    NORMAL = "Normal weight"
    OVERWEIGHT = "Overweight"
    OBESE = "Obese"

    @classmethod
    def from_label(cls, label: str) -> "BmiRange":
        """
        Parse a band label, case-insensitively.

        Accepts the enum value ("Normal weight"), the member name ("NORMAL")
        or one of the legacy Portuguese labels ("Peso Normal").

        Raises:
            ValidationFailedError: If the label names no known band
        """
        key = " ".join((label or "").split()).lower()
        for member in cls:
            if key in (member.value.lower(), member.name.lower()):
                return member
        if key in _LEGACY_LABELS:
            return _LEGACY_LABELS[key]
        valid = ", ".join(member.value for member in cls)
        raise ValidationFailedError(f"Unknown BMI range '{label}'. Valid ranges: {valid}")


_LEGACY_LABELS = {
    "abaixo do peso": BmiRange.UNDERWEIGHT,
    "peso normal": BmiRange.NORMAL,
    "sobrepeso": BmiRange.OVERWEIGHT,
    "obesidade": BmiRange.OBESE,
}

UNDERWEIGHT_UPPER = 18.5
NORMAL_UPPER = 25.0
OVERWEIGHT_UPPER = 30.0


class BmiCalculator:
    """Service for BMI calculation and classification."""

    @staticmethod
    def calculate_bmi(weight_kg: Optional[float], height_cm: Optional[float]) -> Optional[float]:
        """
        Calculate BMI from weight (kg) and height (cm).

        Args:
            weight_kg: Weight in kilograms
            height_cm: Height in centimeters

        Returns:
            Unrounded BMI, or None if either input is missing or not positive
        """
        if weight_kg is None or height_cm is None:
            return None
        if weight_kg <= 0 or height_cm <= 0:
            return None

        height_m = height_cm / 100.0
        return weight_kg / (height_m**2)

    @staticmethod
    def classify(bmi: float) -> BmiRange:
        """Map a BMI value to its WHO band."""
        if bmi < UNDERWEIGHT_UPPER:
            return BmiRange.UNDERWEIGHT
        if bmi < NORMAL_UPPER:
            return BmiRange.NORMAL
        if bmi < OVERWEIGHT_UPPER:
            return BmiRange.OVERWEIGHT
        return BmiRange.OBESE

