"""Routes for per-user notification preferences."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.application.use_cases.preferences import (
    get_preferences as get_preferences_uc,
    update_preferences as update_preferences_uc,
)
from app.domain.errors import PushDispatchError
from app.infrastructure.database import get_db
from app.interfaces.api.routes_helpers import error_to_http
from app.interfaces.api.schemas import PreferencesRead, PreferencesUpdate

router = APIRouter(prefix="/preferences", tags=["preferences"])


@router.get("/{user_id}", response_model=PreferencesRead)
def get_preferences(user_id: str, db: Session = Depends(get_db)) -> PreferencesRead:
    """Return the user's preferences, creating defaults on first access."""

    try:
        preferences = get_preferences_uc(db, user_id=user_id)
    except PushDispatchError as exc:
        raise error_to_http(exc) from exc
    return PreferencesRead.model_validate(preferences)


@router.put("/{user_id}", response_model=PreferencesRead)
def update_preferences(
    user_id: str,
    payload: PreferencesUpdate,
    db: Session = Depends(get_db),
) -> PreferencesRead:
    try:
        preferences = update_preferences_uc(
            db,
            user_id=user_id,
            changes=payload.model_dump(exclude_unset=True),
        )
    except PushDispatchError as exc:
        raise error_to_http(exc) from exc
    return PreferencesRead.model_validate(preferences)
