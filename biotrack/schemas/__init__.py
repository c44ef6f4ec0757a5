from .base import MessageResponse
from .measure import MeasureRequest, MeasureResponse
from .user import (
    BmiSummaryResponse,
    UserBmiResponse,
    UserMeasuresResponse,
    UserPatchRequest,
    UserRequest,
    UserResponse,
)

__all__ = [
    "MessageResponse",
    "MeasureRequest",
    "MeasureResponse",
    "BmiSummaryResponse",
    "UserBmiResponse",
    "UserMeasuresResponse",
    "UserPatchRequest",
    "UserRequest",
    "UserResponse",
]
