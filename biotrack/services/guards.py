from typing import Optional

from biotrack.exceptions import ValidationFailedError


def require_positive_id(value: Optional[int], entity: str) -> int:
    """Reject a missing or non-positive identifier."""
    if value is None or value <= 0:
        raise ValidationFailedError(f"{entity} ID must be a positive number")
    return value
