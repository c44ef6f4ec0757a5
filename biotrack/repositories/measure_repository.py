"""
Measure persistence.

All user -> measures traversal goes through these queries; the models
declare no ORM relationship.
"""

import logging
from typing import List, Optional

from sqlalchemy import desc, exists
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from biotrack.models.measure import Measure

logger = logging.getLogger(__name__)


class MeasureRepository:
    """Session-bound storage operations for measures."""

    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, measure_id: int) -> Optional[Measure]:
        return self.db.query(Measure).filter(Measure.id == measure_id).first()

    def find_by_user_id(self, user_id: int) -> List[Measure]:
        """All measures of a user in insertion order."""
        return (
            self.db.query(Measure)
            .filter(Measure.user_id == user_id)
            .order_by(Measure.id)
            .all()
        )

    def find_by_user_id_order_by_date_desc(self, user_id: int) -> List[Measure]:
        """All measures of a user, newest measurement_date first."""
        return (
            self.db.query(Measure)
            .filter(Measure.user_id == user_id)
            .order_by(desc(Measure.measurement_date), desc(Measure.id))
            .all()
        )

    def find_latest_by_user_id(self, user_id: int) -> Optional[Measure]:
        """
        Most recent measure of a user, or None.

        Equal measurement dates resolve to the most recently inserted row.
        """
        return (
            self.db.query(Measure)
            .filter(Measure.user_id == user_id)
            .order_by(desc(Measure.measurement_date), desc(Measure.id))
            .first()
        )

    def exists_by_id(self, measure_id: int) -> bool:
        return self.db.query(exists().where(Measure.id == measure_id)).scalar()

    def count(self) -> int:
        return self.db.query(Measure).count()

    def save(self, measure: Measure) -> Measure:
        try:
            self.db.add(measure)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        self.db.refresh(measure)
        return measure

    def delete_by_id(self, measure_id: int) -> None:
        try:
            self.db.query(Measure).filter(Measure.id == measure_id).delete(
                synchronize_session=False
            )
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

    def delete_by_user_id(self, user_id: int, commit: bool = True) -> int:
        """
        Delete every measure owned by a user. Returns the number removed.

        With commit=False the deletion stays in the current transaction so
        the caller can commit it together with further writes.
        """
        try:
            deleted = (
                self.db.query(Measure)
                .filter(Measure.user_id == user_id)
                .delete(synchronize_session=False)
            )
            if commit:
                self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        logger.debug(f"[MEASURE_REPOSITORY] Deleted {deleted} measures of user {user_id}")
        return deleted
