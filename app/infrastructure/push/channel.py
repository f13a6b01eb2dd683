"""Port implemented by every push delivery backend."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass

from .message import PushMessage


@dataclass(frozen=True)
class ChannelResponse:
    """Per-token outcome reported by a delivery channel."""

    success: bool
    message_id: str | None = None
    error: str | None = None


class DeliveryChannel(ABC):
    """Abstract interface for push delivery adapters.

    Implementations raise :class:`app.domain.errors.ChannelFailure` when the
    call as a whole could not run. Individual token failures are reported in
    the returned responses instead.
    """

    @abstractmethod
    def send_multicast(
        self,
        message: PushMessage,
        tokens: Sequence[str],
        *,
        dry_run: bool = False,
    ) -> list[ChannelResponse]:
        """Send ``message`` to every token, one response per token in order."""

    @abstractmethod
    def send_to_topic(
        self,
        message: PushMessage,
        topic: str,
        *,
        dry_run: bool = False,
    ) -> str:
        """Send ``message`` to the subscribers of ``topic`` and return its id."""

    def close(self) -> None:
        """Release resources held by the channel."""


__all__ = ["ChannelResponse", "DeliveryChannel"]
