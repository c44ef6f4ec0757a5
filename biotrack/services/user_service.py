"""
User service.

Handles registration, full and partial updates, deletion, and the
user-level measure aggregations (all measures, latest measure, BMI).
"""

import logging
from typing import List, NamedTuple, Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from biotrack.exceptions import NotFoundError, ProcessingFailedError
from biotrack.models.measure import Measure
from biotrack.models.user import User
from biotrack.repositories.measure_repository import MeasureRepository
from biotrack.repositories.user_repository import UserRepository
from biotrack.schemas.user import UserPatchRequest, UserRequest
from biotrack.services.bmi_calculator import BmiCalculator, BmiRange
from biotrack.services.guards import require_positive_id
from biotrack.utils.password import hash_password

logger = logging.getLogger(__name__)

PROFILE_FIELDS = ("name", "birth_date", "zip_code", "email")


class BmiMatch(NamedTuple):
    """A user's BMI as derived from their latest measure."""

    user: User
    measure: Measure
    bmi: float
    bmi_range: BmiRange


class UserService:
    """Service for managing users and their measure history."""

    def __init__(self, db: Session):
        self.users = UserRepository(db)
        self.measures = MeasureRepository(db)
        self.calculator = BmiCalculator()

    def _get_user_or_raise(self, user_id: int) -> User:
        require_positive_id(user_id, "User")
        user = self.users.find_by_id(user_id)
        if not user:
            logger.warning(f"[USERS] User {user_id} not found")
            raise NotFoundError(f"User not found with ID: {user_id}")
        return user

    def create_user(self, request: UserRequest) -> User:
        """
        Register a new user. The password is stored as a bcrypt hash.

        Raises:
            ProcessingFailedError: If the user could not be persisted
        """
        user = User(
            **{field: getattr(request, field) for field in PROFILE_FIELDS},
            password=hash_password(request.password),
        )

        try:
            user = self.users.save(user)
        except SQLAlchemyError as e:
            logger.error(f"[CREATE_USER] Failed to persist user: {e}", exc_info=True)
            raise ProcessingFailedError("Failed to process user creation") from e

        logger.info(f"[CREATE_USER] User {user.id} created")
        return user

    def list_users(self) -> List[User]:
        """
        Every registered user.

        Raises:
            NotFoundError: If there are no users
        """
        users = self.users.find_all()
        if not users:
            raise NotFoundError("No users found")
        return users

    def get_user(self, user_id: int) -> User:
        return self._get_user_or_raise(user_id)

    def list_users_without_measures(self) -> List[User]:
        return self.users.find_users_without_measures()

    def get_user_with_all_measures(self, user_id: int) -> Tuple[User, List[Measure]]:
        """
        A user and all of their measures, newest first.

        Raises:
            NotFoundError: If the user does not exist or has no measures
        """
        user = self._get_user_or_raise(user_id)
        measures = self.measures.find_by_user_id_order_by_date_desc(user.id)
        if not measures:
            raise NotFoundError(f"No measures found for user with ID: {user_id}")
        return user, measures

    def get_user_with_latest_measure(self, user_id: int) -> Tuple[User, List[Measure]]:
        """A user and a list holding their latest measure (empty if none)."""
        user = self._get_user_or_raise(user_id)
        latest = self.measures.find_latest_by_user_id(user.id)
        return user, [latest] if latest else []

    def update_user(self, user_id: int, request: UserRequest) -> User:
        """
        Replace every profile field and re-hash the password.

        Raises:
            NotFoundError: If the user does not exist
        """
        user = self._get_user_or_raise(user_id)

        for field in PROFILE_FIELDS:
            setattr(user, field, getattr(request, field))
        user.password = hash_password(request.password)

        user = self.users.save(user)
        logger.info(f"[UPDATE_USER] User {user_id} replaced")
        return user

    def patch_user(self, user_id: int, request: UserPatchRequest) -> User:
        """
        Apply only the fields present (non-null) in the request.

        Raises:
            NotFoundError: If the user does not exist
        """
        user = self._get_user_or_raise(user_id)

        updated = []
        for field in PROFILE_FIELDS:
            value = getattr(request, field)
            if value is not None:
                setattr(user, field, value)
                updated.append(field)
        if request.password is not None:
            user.password = hash_password(request.password)
            updated.append("password")

        user = self.users.save(user)
        logger.info(f"[PATCH_USER] User {user_id} updated fields: {updated}")
        return user

    def delete_user(self, user_id: int) -> None:
        """
        Delete a user and every measure they own.

        Raises:
            NotFoundError: If the user does not exist
        """
        require_positive_id(user_id, "User")
        if not self.users.exists_by_id(user_id):
            logger.warning(f"[DELETE_USER] User {user_id} not found")
            raise NotFoundError(f"User not found with ID: {user_id}")

        removed = self.measures.delete_by_user_id(user_id, commit=False)
        self.users.delete_by_id(user_id)
        logger.info(f"[DELETE_USER] User {user_id} deleted with {removed} measures")

    def _bmi_for(self, user: User) -> Optional[BmiMatch]:
        latest = self.measures.find_latest_by_user_id(user.id)
        if latest is None:
            return None
        bmi = self.calculator.calculate_bmi(latest.weight_kg, latest.height_cm)
        if bmi is None:
            return None
        return BmiMatch(user, latest, bmi, self.calculator.classify(bmi))

    def filter_users_by_bmi_range(self, label: str) -> List[BmiMatch]:
        """
        Users whose latest measure falls in the requested BMI band.

        Users without measures never match.

        Raises:
            ValidationFailedError: If the label names no known band
        """
        bmi_range = BmiRange.from_label(label)

        matches = []
        for user in self.users.find_all():
            match = self._bmi_for(user)
            if match is not None and match.bmi_range is bmi_range:
                matches.append(match)
        return matches

    def get_user_bmi(self, user_id: int) -> BmiMatch:
        """
        BMI and band of the user's latest measure.

        Raises:
            NotFoundError: If the user does not exist or has no measures
        """
        user = self._get_user_or_raise(user_id)
        match = self._bmi_for(user)
        if match is None:
            raise NotFoundError(f"No measures found for user with ID: {user_id}")
        return match
