"""Helper utilities shared across API route handlers."""

from __future__ import annotations

from fastapi import HTTPException, status

from app.domain.entities import SendSummary, TopicDispatchResult
from app.domain.errors import (
    ChannelFailure,
    NotFoundError,
    PersistenceError,
    PushDispatchError,
    ValidationError,
)
from app.interfaces.api.schemas import DispatchResultRead, SendSummaryRead, TopicSendResultRead

# First match wins, so subclasses must precede their bases.
ERROR_STATUS_CODES: list[tuple[type[PushDispatchError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ChannelFailure, status.HTTP_502_BAD_GATEWAY),
    (PersistenceError, status.HTTP_500_INTERNAL_SERVER_ERROR),
]


def error_to_http(exc: PushDispatchError) -> HTTPException:
    """Map a domain error onto the ``HTTPException`` returned to the client."""

    for error_type, status_code in ERROR_STATUS_CODES:
        if isinstance(exc, error_type):
            return HTTPException(status_code=status_code, detail=str(exc))
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc))


def summary_to_schema(summary: SendSummary) -> SendSummaryRead:
    return SendSummaryRead(
        success=summary.success,
        total_sent=summary.total_sent,
        total_failed=summary.total_failed,
        results=[DispatchResultRead.model_validate(result) for result in summary.results],
    )


def topic_result_to_schema(result: TopicDispatchResult) -> TopicSendResultRead:
    return TopicSendResultRead(
        success=result.success,
        topic=result.topic,
        message_id=result.message_id,
        error=result.error,
        total_sent=result.total_sent,
        total_failed=result.total_failed,
    )
