"""In-memory delivery channel that records sends instead of delivering them."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from uuid import uuid4

from app.domain.errors import ChannelFailure

from .channel import ChannelResponse, DeliveryChannel
from .message import PushMessage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecordedSend:
    message: PushMessage
    dry_run: bool
    tokens: tuple[str, ...] = ()
    topic: str | None = None


class FakeDeliveryChannel(DeliveryChannel):
    """Delivery channel used by tests and local development.

    Tokens registered through :meth:`fail_tokens` come back as failed
    responses; :meth:`fail_topics` and :meth:`fail_next_call` make topic sends
    and whole calls raise :class:`ChannelFailure`.
    """

    def __init__(self) -> None:
        self.calls: list[RecordedSend] = []
        self._failing_tokens: dict[str, str] = {}
        self._failing_topics: dict[str, str] = {}
        self._call_failure: str | None = None

    def fail_tokens(
        self, tokens: Iterable[str], error: str = "Requested entity was not found."
    ) -> None:
        for token in tokens:
            self._failing_tokens[token] = error

    def fail_topics(self, topics: Iterable[str], error: str = "Topic quota exceeded") -> None:
        for topic in topics:
            self._failing_topics[topic] = error

    def fail_next_call(self, error: str = "Delivery channel unavailable") -> None:
        self._call_failure = error

    def reset(self) -> None:
        self.calls.clear()
        self._failing_tokens.clear()
        self._failing_topics.clear()
        self._call_failure = None

    def send_multicast(
        self,
        message: PushMessage,
        tokens: Sequence[str],
        *,
        dry_run: bool = False,
    ) -> list[ChannelResponse]:
        self._raise_pending_failure()
        self.calls.append(RecordedSend(message=message, dry_run=dry_run, tokens=tuple(tokens)))
        responses = []
        for token in tokens:
            error = self._failing_tokens.get(token)
            if error is not None:
                responses.append(ChannelResponse(success=False, error=error))
            else:
                responses.append(ChannelResponse(success=True, message_id=self._message_id()))
        logger.debug("Fake multicast recorded for %d tokens", len(tokens))
        return responses

    def send_to_topic(
        self,
        message: PushMessage,
        topic: str,
        *,
        dry_run: bool = False,
    ) -> str:
        self._raise_pending_failure()
        self.calls.append(RecordedSend(message=message, dry_run=dry_run, topic=topic))
        error = self._failing_topics.get(topic)
        if error is not None:
            raise ChannelFailure(error)
        return self._message_id()

    def _raise_pending_failure(self) -> None:
        if self._call_failure is None:
            return
        error, self._call_failure = self._call_failure, None
        raise ChannelFailure(error)

    @staticmethod
    def _message_id() -> str:
        return f"projects/fake/messages/{uuid4().hex[:16]}"


__all__ = ["FakeDeliveryChannel", "RecordedSend"]
