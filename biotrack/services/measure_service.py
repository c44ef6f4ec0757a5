"""
Body measure service.

Handles creation, retrieval, full-replace updates and deletion of measures.
Every read is scoped to the owning user.
"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from biotrack.exceptions import NotFoundError, ProcessingFailedError
from biotrack.models.measure import Measure
from biotrack.models.user import User
from biotrack.repositories.measure_repository import MeasureRepository
from biotrack.repositories.user_repository import UserRepository
from biotrack.schemas.measure import MeasureRequest
from biotrack.services.guards import require_positive_id

logger = logging.getLogger(__name__)

# Fields copied verbatim from a MeasureRequest onto a Measure
MEASURE_FIELDS = (
    "measurement_date",
    "weight_kg",
    "height_cm",
    "waist_cm",
    "hip_cm",
    "chest_cm",
    "arm_right_cm",
    "arm_left_cm",
    "thigh_right_cm",
    "thigh_left_cm",
    "body_fat_percentage",
)


class MeasureService:
    """Service for managing body measures."""

    def __init__(self, db: Session):
        self.users = UserRepository(db)
        self.measures = MeasureRepository(db)

    def _get_user_or_raise(self, user_id: int) -> User:
        require_positive_id(user_id, "User")
        user = self.users.find_by_id(user_id)
        if not user:
            logger.warning(f"[MEASURES] User {user_id} not found")
            raise NotFoundError(f"User not found with ID: {user_id}")
        return user

    def create_measure(self, request: MeasureRequest, user_id: int) -> Measure:
        """
        Create a measure owned by an existing user.

        Args:
            request: Validated measure payload
            user_id: Owner's ID

        Returns:
            The stored Measure

        Raises:
            NotFoundError: If the user does not exist (nothing is written)
        """
        user = self._get_user_or_raise(user_id)

        measure = Measure(
            user_id=user.id,
            **{field: getattr(request, field) for field in MEASURE_FIELDS},
        )
        measure = self.measures.save(measure)

        logger.info(f"[CREATE_MEASURE] Measure {measure.id} created for user {user.id}")
        return measure

    def list_measures(self, user_id: int) -> List[Measure]:
        """
        All measures of a user, in storage order.

        Raises:
            NotFoundError: If the user does not exist
        """
        user = self._get_user_or_raise(user_id)
        return self.measures.find_by_user_id(user.id)

    def get_measure(self, user_id: int, measure_id: int) -> Measure:
        """
        A single measure, only if it belongs to the given user.

        Raises:
            NotFoundError: If the user does not exist or does not own the measure
        """
        user = self._get_user_or_raise(user_id)
        require_positive_id(measure_id, "Measure")

        for measure in self.measures.find_by_user_id(user.id):
            if measure.id == measure_id:
                return measure

        logger.warning(f"[MEASURES] Measure {measure_id} not owned by user {user_id}")
        raise NotFoundError("Measure not found for this user")

    def get_latest_measure(self, user_id: int) -> Optional[Measure]:
        """
        The user's measure with the greatest measurement_date, or None.

        Raises:
            NotFoundError: If the user does not exist
        """
        user = self._get_user_or_raise(user_id)
        return self.measures.find_latest_by_user_id(user.id)

    def get_measures_ordered_desc(self, user_id: int) -> List[Measure]:
        """All measures of a user, newest first."""
        user = self._get_user_or_raise(user_id)
        return self.measures.find_by_user_id_order_by_date_desc(user.id)

    def update_measure(self, measure_id: int, request: MeasureRequest) -> Measure:
        """
        Replace every field of a measure with the request's values.

        Optional fields absent from the request are cleared.

        Raises:
            NotFoundError: If the measure does not exist
        """
        require_positive_id(measure_id, "Measure")
        measure = self.measures.find_by_id(measure_id)
        if not measure:
            logger.warning(f"[UPDATE_MEASURE] Measure {measure_id} not found")
            raise NotFoundError(f"Measure not found with ID: {measure_id}")

        for field in MEASURE_FIELDS:
            setattr(measure, field, getattr(request, field))

        measure = self.measures.save(measure)
        logger.info(f"[UPDATE_MEASURE] Measure {measure_id} replaced")
        return measure

    def delete_measure(self, measure_id: int) -> None:
        """
        Delete a measure by ID.

        Raises:
            ProcessingFailedError: If the measure does not exist
        """
        require_positive_id(measure_id, "Measure")
        if not self.measures.exists_by_id(measure_id):
            logger.warning(f"[DELETE_MEASURE] Measure {measure_id} not found")
            # TODO: raise NotFoundError (404) once clients no longer expect a 500 here
            raise ProcessingFailedError(f"Measure not found with ID: {measure_id}")

        self.measures.delete_by_id(measure_id)
        logger.info(f"[DELETE_MEASURE] Measure {measure_id} deleted")
