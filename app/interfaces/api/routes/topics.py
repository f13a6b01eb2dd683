"""Routes for topics and device subscriptions."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.application.use_cases.topics import (
    list_topics as list_topics_uc,
    subscribe_device as subscribe_device_uc,
    unsubscribe_device as unsubscribe_device_uc,
)
from app.domain.errors import PushDispatchError
from app.infrastructure.database import get_db
from app.interfaces.api.routes_helpers import error_to_http
from app.interfaces.api.schemas import (
    SubscriptionRead,
    TopicRead,
    TopicSubscribeResponse,
    TopicSubscriptionRequest,
    TopicUnsubscribeResponse,
)

router = APIRouter(prefix="/topics", tags=["topics"])


@router.get("/", response_model=list[TopicRead])
def list_topics(db: Session = Depends(get_db)) -> list[TopicRead]:
    return [TopicRead.model_validate(topic) for topic in list_topics_uc(db)]


@router.post("/subscribe", response_model=TopicSubscribeResponse)
def subscribe(
    payload: TopicSubscriptionRequest,
    db: Session = Depends(get_db),
) -> TopicSubscribeResponse:
    """Subscribe a registered device to a topic, creating the topic on demand."""

    try:
        result = subscribe_device_uc(db, token=payload.token, topic_name=payload.topic)
    except PushDispatchError as exc:
        raise error_to_http(exc) from exc
    return TopicSubscribeResponse(
        subscription=SubscriptionRead.model_validate(result.subscription),
        topic_created=result.topic_created,
    )


@router.post("/unsubscribe", response_model=TopicUnsubscribeResponse)
def unsubscribe(
    payload: TopicSubscriptionRequest,
    db: Session = Depends(get_db),
) -> TopicUnsubscribeResponse:
    try:
        updated = unsubscribe_device_uc(db, token=payload.token, topic_name=payload.topic)
    except PushDispatchError as exc:
        raise error_to_http(exc) from exc
    return TopicUnsubscribeResponse(updated_count=updated)
