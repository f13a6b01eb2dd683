"""Use case for listing available topics."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.domain.entities import Topic
from app.infrastructure.repositories import TopicRepository


def list_topics(session: Session) -> Sequence[Topic]:
    """Return active topics ordered by name."""

    return TopicRepository(session).list_active()
