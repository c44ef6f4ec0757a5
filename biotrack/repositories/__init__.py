from .user_repository import UserRepository
from .measure_repository import MeasureRepository

__all__ = [
    "UserRepository",
    "MeasureRepository",
]
