"""Repository for user persistence and retrieval."""
from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.user import User

LOGGER = logging.getLogger(__name__)


class UserRepository:
    def create_user(self, db: Session, name: str, username: str, password: str) -> User:
        """Insert a user; raises IntegrityError when the username is already taken."""
        user = User(name=name, username=username, password=password)
        try:
            db.add(user)
            db.commit()
            db.refresh(user)
            return user
        except IntegrityError:
            db.rollback()
            raise
        except SQLAlchemyError as exc:
            db.rollback()
            LOGGER.error("DB insert failed for username=%s: %s", username, exc)
            raise

    def get_by_username(self, db: Session, username: str) -> User | None:
        return db.query(User).filter(User.username == username).first()
