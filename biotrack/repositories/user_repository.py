"""
User persistence.
"""

import logging
from typing import List, Optional

from sqlalchemy import exists
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from biotrack.models.measure import Measure
from biotrack.models.user import User

logger = logging.getLogger(__name__)


class UserRepository:
    """Session-bound storage operations for users."""

    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, user_id: int) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()

    def find_all(self) -> List[User]:
        return self.db.query(User).order_by(User.id).all()

    def find_users_without_measures(self) -> List[User]:
        """Users that own no measure rows."""
        return (
            self.db.query(User)
            .filter(~exists().where(Measure.user_id == User.id))
            .order_by(User.id)
            .all()
        )

    def exists_by_id(self, user_id: int) -> bool:
        return self.db.query(exists().where(User.id == user_id)).scalar()

    def count(self) -> int:
        return self.db.query(User).count()

    def save(self, user: User) -> User:
        """Insert or update a user; assigns the id on first save."""
        try:
            self.db.add(user)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        self.db.refresh(user)
        return user

    def delete_by_id(self, user_id: int) -> None:
        try:
            self.db.query(User).filter(User.id == user_id).delete(
                synchronize_session=False
            )
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        logger.debug(f"[USER_REPOSITORY] Deleted user {user_id}")
