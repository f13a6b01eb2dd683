"""Routes for registering and inspecting device push tokens."""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from app.application.use_cases.devices import (
    deactivate_device as deactivate_device_uc,
    get_device_subscriptions as get_device_subscriptions_uc,
    list_active_devices as list_active_devices_uc,
    list_user_devices as list_user_devices_uc,
    register_device as register_device_uc,
)
from app.domain.errors import PushDispatchError
from app.infrastructure.database import get_db
from app.interfaces.api.routes_helpers import error_to_http
from app.interfaces.api.schemas import (
    DeviceDeactivateRequest,
    DeviceRegisterRequest,
    DeviceRegisterResponse,
    DeviceSubscriptionsRead,
    DeviceTokenRead,
    SubscriptionRead,
)

router = APIRouter(prefix="/devices", tags=["devices"])


@router.post("/register", response_model=DeviceRegisterResponse)
def register_device(
    payload: DeviceRegisterRequest,
    response: Response,
    db: Session = Depends(get_db),
) -> DeviceRegisterResponse:
    """Register a push token or refresh the record that already holds it."""

    try:
        registration = register_device_uc(
            db,
            token=payload.token,
            platform=payload.platform,
            user_id=payload.user_id,
            device_id=payload.device_id,
            app_version=payload.app_version,
            os_version=payload.os_version,
            device_model=payload.device_model,
        )
    except PushDispatchError as exc:
        raise error_to_http(exc) from exc

    response.status_code = status.HTTP_201_CREATED if registration.created else status.HTTP_200_OK
    return DeviceRegisterResponse(
        device=DeviceTokenRead.model_validate(registration.device),
        created=registration.created,
    )


@router.post("/deactivate", response_model=DeviceTokenRead)
def deactivate_device(
    payload: DeviceDeactivateRequest,
    db: Session = Depends(get_db),
) -> DeviceTokenRead:
    """Deactivate a token together with all of its topic subscriptions."""

    try:
        device = deactivate_device_uc(db, token=payload.token)
    except PushDispatchError as exc:
        raise error_to_http(exc) from exc
    return DeviceTokenRead.model_validate(device)


@router.get("/", response_model=list[DeviceTokenRead])
def list_devices(db: Session = Depends(get_db)) -> list[DeviceTokenRead]:
    return [DeviceTokenRead.model_validate(device) for device in list_active_devices_uc(db)]


@router.get("/users/{user_id}", response_model=list[DeviceTokenRead])
def list_user_devices(user_id: str, db: Session = Depends(get_db)) -> list[DeviceTokenRead]:
    """Return the active devices owned by ``user_id``, most recently used first."""

    try:
        devices = list_user_devices_uc(db, user_id=user_id)
    except PushDispatchError as exc:
        raise error_to_http(exc) from exc
    return [DeviceTokenRead.model_validate(device) for device in devices]


@router.get("/subscriptions", response_model=DeviceSubscriptionsRead)
def get_device_subscriptions(
    token: str = Query(..., min_length=1),
    db: Session = Depends(get_db),
) -> DeviceSubscriptionsRead:
    try:
        result = get_device_subscriptions_uc(db, token=token)
    except PushDispatchError as exc:
        raise error_to_http(exc) from exc
    return DeviceSubscriptionsRead(
        device=DeviceTokenRead.model_validate(result.device),
        subscriptions=[
            SubscriptionRead.model_validate(subscription)
            for subscription in result.subscriptions
        ],
    )
