from .user import User
from .measure import Measure

__all__ = [
    "User",
    "Measure",
]
