"""Shared commit handling for repositories."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.errors import PersistenceError

logger = logging.getLogger(__name__)


def commit_or_raise(session: Session, action: str) -> None:
    """Commit ``session`` translating database errors into ``PersistenceError``."""

    try:
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        logger.error("Database error while trying to %s: %s", action, exc)
        raise PersistenceError(f"Could not {action}") from exc


__all__ = ["commit_or_raise"]
