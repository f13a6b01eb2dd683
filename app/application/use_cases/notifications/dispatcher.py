"""Dispatch engine delivering payloads through a delivery channel."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from app.config import Settings, get_settings
from app.domain.entities import (
    UNKNOWN_DELIVERY_ERROR,
    DispatchResult,
    NotificationPayload,
    TopicDispatchResult,
)
from app.domain.errors import ChannelFailure
from app.infrastructure.push import (
    AndroidOptions,
    ApnsOptions,
    DeliveryChannel,
    PushMessage,
    WebpushOptions,
)

logger = logging.getLogger(__name__)


class DispatchEngine:
    """Render payloads and normalise delivery channel responses.

    The engine holds no state besides its collaborators; one instance can
    serve concurrent requests.
    """

    def __init__(self, channel: DeliveryChannel, settings: Settings | None = None) -> None:
        self.channel = channel
        self.settings = settings or get_settings()

    def render(self, payload: NotificationPayload) -> PushMessage:
        sound = self.settings.notification_sound
        return PushMessage(
            title=payload.title,
            body=payload.body,
            image_url=payload.image_url,
            data=dict(payload.data),
            android=AndroidOptions(click_action=payload.click_action, sound=sound),
            apns=ApnsOptions(sound=sound, badge=self.settings.apns_badge),
            webpush=WebpushOptions(
                icon=self.settings.webpush_icon,
                badge=self.settings.webpush_badge,
            ),
        )

    def dispatch_to_tokens(
        self,
        tokens: Sequence[str],
        payload: NotificationPayload,
        *,
        dry_run: bool = False,
    ) -> list[DispatchResult]:
        """Send ``payload`` to ``tokens`` in one multicast call.

        Returns one result per token in input order. An empty token list is a
        no-op. ``ChannelFailure`` propagates when the call itself fails.
        """

        tokens = list(tokens)
        if not tokens:
            return []

        message = self.render(payload)
        try:
            responses = self.channel.send_multicast(message, tokens, dry_run=dry_run)
        except ChannelFailure:
            logger.exception("Multicast send to %d tokens failed", len(tokens))
            raise

        if len(responses) != len(tokens):
            raise ChannelFailure(
                f"Delivery channel returned {len(responses)} responses for {len(tokens)} tokens"
            )

        results = []
        for token, response in zip(tokens, responses):
            if response.success and response.message_id:
                results.append(DispatchResult.delivered(token, response.message_id))
            else:
                results.append(DispatchResult.failed(token, response.error))

        sent = sum(1 for result in results if result.success)
        logger.info(
            "Multicast%s sent to %d tokens: %d succeeded, %d failed",
            " (dry run)" if dry_run else "",
            len(tokens),
            sent,
            len(tokens) - sent,
        )
        return results

    def dispatch_to_topic(
        self,
        topic: str,
        payload: NotificationPayload,
        *,
        dry_run: bool = False,
    ) -> TopicDispatchResult:
        """Send ``payload`` to ``topic``; channel failures become a failed result."""

        message = self.render(payload)
        try:
            message_id = self.channel.send_to_topic(message, topic, dry_run=dry_run)
        except ChannelFailure as exc:
            logger.warning("Topic send to %s failed: %s", topic, exc)
            return TopicDispatchResult(success=False, topic=topic, error=str(exc) or None)

        if not message_id:
            return TopicDispatchResult(success=False, topic=topic, error=UNKNOWN_DELIVERY_ERROR)
        return TopicDispatchResult(success=True, topic=topic, message_id=message_id)


__all__ = ["DispatchEngine"]
