"""Firebase Cloud Messaging implementation of the delivery channel."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any
from uuid import uuid4

import firebase_admin
from firebase_admin import credentials, messaging
from firebase_admin.exceptions import FirebaseError
from google.auth.exceptions import GoogleAuthError

from app.config import Settings
from app.domain.errors import ChannelConfigurationError, ChannelFailure

from .channel import ChannelResponse, DeliveryChannel
from .message import PushMessage

logger = logging.getLogger(__name__)

# FCM rejects multicast messages carrying more tokens than this.
MAX_MULTICAST_TOKENS = 500

_REQUIRED_ACCOUNT_FIELDS = ("project_id", "client_email", "private_key")

# Credential refresh failures surface from google-auth rather than firebase-admin.
_DELIVERY_ERRORS = (FirebaseError, GoogleAuthError, ValueError)


def load_service_account(raw: str) -> dict[str, Any]:
    """Parse a service account JSON document and normalise its private key."""

    try:
        account = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ChannelConfigurationError(
            "FIREBASE_SERVICE_ACCOUNT_KEY is not valid JSON"
        ) from exc
    if not isinstance(account, dict):
        raise ChannelConfigurationError("FIREBASE_SERVICE_ACCOUNT_KEY must be a JSON object")

    missing = [name for name in _REQUIRED_ACCOUNT_FIELDS if not account.get(name)]
    if missing:
        raise ChannelConfigurationError(
            "FIREBASE_SERVICE_ACCOUNT_KEY is missing: " + ", ".join(missing)
        )

    # Keys pasted into environment variables usually carry escaped newlines.
    account["private_key"] = str(account["private_key"]).replace("\\n", "\n")
    account.setdefault("type", "service_account")
    account.setdefault("token_uri", "https://oauth2.googleapis.com/token")
    return account


def _build_credential(settings: Settings) -> tuple[credentials.Certificate, str | None]:
    if settings.firebase_service_account_key:
        account = load_service_account(settings.firebase_service_account_key)
        try:
            return credentials.Certificate(account), account["project_id"]
        except ValueError as exc:
            raise ChannelConfigurationError(
                f"Invalid Firebase service account: {exc}"
            ) from exc

    if settings.firebase_credentials_path:
        path = Path(settings.firebase_credentials_path).expanduser()
        if not path.exists():
            raise ChannelConfigurationError(
                f"Firebase credentials file not found at {path}"
            )
        try:
            certificate = credentials.Certificate(str(path))
        except (ValueError, OSError) as exc:
            raise ChannelConfigurationError(
                f"Invalid Firebase credentials file {path}: {exc}"
            ) from exc
        return certificate, certificate.project_id

    raise ChannelConfigurationError(
        "FIREBASE_SERVICE_ACCOUNT_KEY or FIREBASE_CREDENTIALS_PATH is required "
        "to use the firebase delivery channel"
    )


def _describe_exception(exc: BaseException | None) -> str | None:
    if exc is None:
        return None
    return str(exc) or exc.__class__.__name__


class FirebaseDeliveryChannel(DeliveryChannel):
    """Send push messages through an explicitly initialised Firebase app."""

    def __init__(self, app: firebase_admin.App) -> None:
        self._app = app

    @classmethod
    def from_settings(cls, settings: Settings) -> "FirebaseDeliveryChannel":
        """Initialise a dedicated Firebase app from the configured credentials."""

        certificate, account_project_id = _build_credential(settings)
        project_id = settings.firebase_project_id or account_project_id
        options = {"projectId": project_id} if project_id else None
        app = firebase_admin.initialize_app(
            certificate,
            options,
            name=f"pushdispatch-{uuid4().hex[:8]}",
        )
        logger.info("Firebase delivery channel initialised for project %s", project_id)
        return cls(app)

    def send_multicast(
        self,
        message: PushMessage,
        tokens: Sequence[str],
        *,
        dry_run: bool = False,
    ) -> list[ChannelResponse]:
        """Send ``message`` to ``tokens`` in chunks FCM accepts.

        A chunk that fails after an earlier chunk was sent yields one failed
        response per token in that chunk.
        """

        responses: list[ChannelResponse] = []
        for start in range(0, len(tokens), MAX_MULTICAST_TOKENS):
            chunk = list(tokens[start : start + MAX_MULTICAST_TOKENS])
            multicast = messaging.MulticastMessage(tokens=chunk, **self._message_fields(message))
            try:
                batch = messaging.send_each_for_multicast(
                    multicast, dry_run=dry_run, app=self._app
                )
            except _DELIVERY_ERRORS as exc:
                if not responses:
                    raise ChannelFailure(f"Failed to send multicast message: {exc}") from exc
                logger.warning(
                    "Multicast chunk of %d tokens failed after %d were sent: %s",
                    len(chunk),
                    len(responses),
                    exc,
                )
                error = _describe_exception(exc)
                responses.extend(
                    ChannelResponse(success=False, message_id=None, error=error)
                    for _ in chunk
                )
                continue
            responses.extend(
                ChannelResponse(
                    success=bool(item.success),
                    message_id=item.message_id,
                    error=_describe_exception(item.exception),
                )
                for item in batch.responses
            )
        return responses

    def send_to_topic(
        self,
        message: PushMessage,
        topic: str,
        *,
        dry_run: bool = False,
    ) -> str:
        fcm_message = messaging.Message(topic=topic, **self._message_fields(message))
        try:
            return messaging.send(fcm_message, dry_run=dry_run, app=self._app)
        except _DELIVERY_ERRORS as exc:
            raise ChannelFailure(str(exc) or "Failed to send topic message") from exc

    def close(self) -> None:
        firebase_admin.delete_app(self._app)

    @staticmethod
    def _message_fields(message: PushMessage) -> dict[str, Any]:
        return {
            "notification": messaging.Notification(
                title=message.title,
                body=message.body,
                image=message.image_url,
            ),
            "data": dict(message.data),
            "android": messaging.AndroidConfig(
                notification=messaging.AndroidNotification(
                    click_action=message.android.click_action,
                    sound=message.android.sound,
                )
            ),
            "apns": messaging.APNSConfig(
                payload=messaging.APNSPayload(
                    aps=messaging.Aps(
                        sound=message.apns.sound,
                        badge=message.apns.badge,
                    )
                )
            ),
            "webpush": messaging.WebpushConfig(
                notification=messaging.WebpushNotification(
                    icon=message.webpush.icon,
                    badge=message.webpush.badge,
                )
            ),
        }


__all__ = [
    "FirebaseDeliveryChannel",
    "MAX_MULTICAST_TOKENS",
    "load_service_account",
]
